# tests/test_cli.py

import json

import pytest

from cli.main import build_argument_parser, load_logic_manager, run_cli


def feed_input(monkeypatch, lines):
    remaining = iter(lines)

    def fake_input(prompt=""):
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError

    monkeypatch.setattr("builtins.input", fake_input)


def write_book(path, tutees):
    path.write_text(json.dumps({"tutees": [tutee.to_dict() for tutee in tutees]}))


def test_cli_runs_commands_until_exit(monkeypatch, capsys, tmp_path, alice, bob):
    data_file = tmp_path / "tutees.json"
    write_book(data_file, [alice, bob])
    feed_input(monkeypatch, ["", "filter n/bob", "edit 1 p/123", "exit", "list"])

    with pytest.raises(SystemExit):
        run_cli(["--data-file", str(data_file)])

    out = capsys.readouterr().out
    assert "TUTEE BOOK" in out
    assert "1 persons listed!" in out
    assert "Edited Tutee: Bob Choo" in out
    assert "... Phone: 123" in out
    assert "Exiting Tutee Book as requested ..." in out
    assert "Listed all tutees" not in out
    assert "Exiting Program" in out

    saved = json.loads(data_file.read_text())
    assert saved["tutees"][1]["phone"] == "123"


def test_cli_reports_errors_and_stops_at_end_of_input(monkeypatch, capsys, tmp_path):
    feed_input(monkeypatch, ["frobnicate", "edit 1 p/123"])

    with pytest.raises(SystemExit):
        run_cli(["--data-file", str(tmp_path / "tutees.json")])

    out = capsys.readouterr().out
    assert "No tutees to display." in out
    assert "[ERROR: UNKNOWN_COMMAND] Unknown command" in out
    assert "[ERROR: INVALID_INDEX] The person index provided is invalid" in out


def test_unreadable_data_file_disables_autosave(capsys, tmp_path):
    data_file = tmp_path / "tutees.json"
    data_file.write_text("{broken")

    logic = load_logic_manager(str(data_file))

    assert logic.data_file is None
    assert len(logic.model.get_tutee_list()) == 0
    assert "[ERROR: INVALID_INPUT]" in capsys.readouterr().out
    assert data_file.read_text() == "{broken"


def test_argument_parser_normalizes_log_level():
    args = build_argument_parser().parse_args(["--log-level", "debug", "--data-file", "x.json"])

    assert args.log_level == "DEBUG"
    assert args.data_file == "x.json"
