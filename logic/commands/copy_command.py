# logic/commands/copy_command.py

from __future__ import annotations

import logging

from core.index import Index
from core.response import ErrorCode
from logic.commands.command import (
    MESSAGE_INVALID_TUTEE_DISPLAYED_INDEX,
    Command,
    CommandError,
    CommandResult,
)
from models.model import Model
from models.tutee import Tutee

logger = logging.getLogger(__name__)


class CopyCommand(Command):
    """
    Records new lessons for an existing tutee.

    `to_copy` is the tutee at `index` with the new lesson fields filled in. It is used
    for the duplicate check and in the success message, while the record appended to
    the list is the displayed tutee at `index` itself.
    """

    COMMAND_WORD = "copy"

    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Adds an existing tutee to the system with a new lesson. "
        "Parameters: INDEX (must be a positive integer) "
        "sub/SUBJECT sch/SCHEDULE start/STARTTIME end/ENDTIME\n"
        f"Example: {COMMAND_WORD} 1 sub/English sch/monday start/08:30 end/10:30"
    )

    MESSAGE_SUCCESS = "New lessons for tutee added: {tutee}"
    MESSAGE_DUPLICATE_TUTEE = "This tutee already has such lessons in the address book"

    def __init__(self, index: Index, to_copy: Tutee):
        if index is None or to_copy is None:
            raise TypeError("CopyCommand requires an index and a tutee.")

        self._index = index
        self._to_copy = to_copy

    # === properties ===

    @property
    def index(self) -> Index:
        return self._index

    @property
    def to_copy(self) -> Tutee:
        return self._to_copy

    # === command ===

    def execute(self, model: Model) -> CommandResult:
        if model.has_tutee(self._to_copy):
            raise CommandError(self.MESSAGE_DUPLICATE_TUTEE, ErrorCode.DUPLICATE_PERSON)

        last_shown_list = model.get_filtered_tutee_list()

        if self._index.zero_based >= len(last_shown_list):
            raise CommandError(
                MESSAGE_INVALID_TUTEE_DISPLAYED_INDEX, ErrorCode.INVALID_INDEX
            )

        # every row in the list is a distinct instance
        tutee_to_copy = last_shown_list[self._index.zero_based].with_changes()
        model.add_tutee(tutee_to_copy)
        logger.info("Copied tutee at index %s: %r", self._index, tutee_to_copy)

        return CommandResult(
            self.MESSAGE_SUCCESS.format(tutee=self._to_copy),
            show_list=True,
            record=tutee_to_copy,
        )

    # === dunder methods ===

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CopyCommand):
            return NotImplemented
        return self._index == other._index and self._to_copy == other._to_copy

    def __hash__(self) -> int:
        return hash((self._index, self._to_copy))

    def __repr__(self) -> str:
        return f"CopyCommand({self._index!r}, {self._to_copy!r})"
