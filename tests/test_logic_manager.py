# tests/test_logic_manager.py

import json

from core.response import ErrorCode
from logic.commands.command import CommandResult
from logic.logic_manager import LogicManager


def test_execute_returns_feedback(sample_model):
    logic = LogicManager(sample_model)

    response = logic.execute("filter sub/physics")

    assert response.success
    assert response.detail == "1 persons listed!"
    assert response.data["result"] == CommandResult("1 persons listed!", show_list=True)


def test_execute_failure_is_reported_not_raised(sample_model, alice):
    logic = LogicManager(sample_model)

    response = logic.execute("edit 9 p/123")

    assert not response.success
    assert response.error is ErrorCode.INVALID_INDEX
    assert response.detail == "The person index provided is invalid"
    assert sample_model.get_tutee_list()[0] == alice


def test_execute_saves_after_mutation(tmp_path, sample_model):
    data_file = tmp_path / "tutees.json"
    logic = LogicManager(sample_model, data_file=str(data_file))

    response = logic.execute("edit 1 p/123")

    assert response.success
    assert not sample_model.has_unsaved_changes

    with open(data_file) as f:
        data = json.load(f)

    assert data["tutees"][0]["phone"] == "123"


def test_execute_does_not_save_without_changes(tmp_path, sample_model):
    data_file = tmp_path / "tutees.json"
    logic = LogicManager(sample_model, data_file=str(data_file))

    logic.execute("list")
    logic.execute("edit 9 p/123")

    assert not data_file.exists()


def test_execute_reports_save_failure(tmp_path, sample_model):
    blocker = tmp_path / "blocker"
    blocker.write_text("")
    logic = LogicManager(sample_model, data_file=str(blocker / "tutees.json"))

    response = logic.execute("edit 1 p/123")

    assert not response.success
    assert response.error is ErrorCode.INTERNAL_ERROR
    assert response.detail.startswith("Could not save data to file:")


def test_execute_wraps_unexpected_errors(monkeypatch, sample_model):
    def broken_parse(user_input, model):
        raise RuntimeError("boom")

    monkeypatch.setattr("logic.logic_manager.parse_command", broken_parse)
    logic = LogicManager(sample_model)

    response = logic.execute("list")

    assert not response.success
    assert response.error is ErrorCode.INTERNAL_ERROR
    assert "boom" in response.detail
    assert "RuntimeError" in response.trace
