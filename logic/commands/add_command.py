# logic/commands/add_command.py

from __future__ import annotations

import logging

from core.response import ErrorCode
from logic.commands.command import Command, CommandError, CommandResult
from models.model import Model
from models.tutee import Tutee

logger = logging.getLogger(__name__)


class AddCommand(Command):
    COMMAND_WORD = "add"

    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Adds a tutee to the address book.\n"
        "Parameters: n/NAME p/PHONE e/EMAIL a/ADDRESS sub/SUBJECT sch/SCHEDULE "
        "start/START end/END [r/REMARK] [t/TAG]...\n"
        f"Example: {COMMAND_WORD} n/John Doe p/98765432 e/johnd@example.com "
        "a/311, Clementi Ave 2, #02-25 sub/Math sch/monday start/08:30 end/10:30 "
        "t/friends"
    )

    MESSAGE_SUCCESS = "New tutee added: {tutee}"
    MESSAGE_DUPLICATE_TUTEE = "This tutee already exists in the address book."

    def __init__(self, to_add: Tutee):
        if to_add is None:
            raise TypeError("AddCommand requires a tutee.")

        self._to_add = to_add

    @property
    def to_add(self) -> Tutee:
        return self._to_add

    def execute(self, model: Model) -> CommandResult:
        if model.has_tutee(self._to_add):
            raise CommandError(self.MESSAGE_DUPLICATE_TUTEE, ErrorCode.DUPLICATE_PERSON)

        model.add_tutee(self._to_add)
        logger.info("Added tutee: %r", self._to_add)

        return CommandResult(
            self.MESSAGE_SUCCESS.format(tutee=self._to_add),
            show_list=True,
            record=self._to_add,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AddCommand):
            return NotImplemented
        return self._to_add == other._to_add

    def __hash__(self) -> int:
        return hash(self._to_add)
