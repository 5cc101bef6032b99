# tests/test_simple_commands.py

import pytest

from core.response import ErrorCode
from logic.commands.add_command import AddCommand
from logic.commands.command import CommandError
from logic.commands.exit_command import ExitCommand
from logic.commands.list_command import ListCommand


def test_add_tutee(empty_model, alice):
    result = AddCommand(alice).execute(empty_model)

    assert empty_model.get_tutee_list() == (alice,)
    assert result.feedback == f"New tutee added: {alice}"
    assert not result.exit
    assert result.show_list
    assert result.record == alice


def test_add_duplicate_tutee(sample_model, alice):
    with pytest.raises(CommandError) as excinfo:
        AddCommand(alice).execute(sample_model)

    assert excinfo.value.error is ErrorCode.DUPLICATE_PERSON
    assert len(sample_model.get_tutee_list()) == 3


def test_add_same_person_with_different_lesson(sample_model, make_tutee):
    AddCommand(make_tutee(subject="Chemistry")).execute(sample_model)

    assert len(sample_model.get_tutee_list()) == 4


def test_list_command(empty_model):
    result = ListCommand().execute(empty_model)

    assert result.feedback == "Listed all tutees"
    assert result.show_list


def test_exit_command(empty_model):
    result = ExitCommand().execute(empty_model)

    assert result.exit
    assert result.feedback == "Exiting Tutee Book as requested ..."


def test_commands_are_hashable(alice):
    commands = {
        ListCommand(),
        ListCommand(),
        ExitCommand(),
        AddCommand(alice),
        AddCommand(alice),
    }

    assert len(commands) == 3
