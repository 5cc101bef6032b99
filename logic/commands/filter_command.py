# logic/commands/filter_command.py

from __future__ import annotations

import logging

from core.response import ErrorCode
from logic.commands.command import (
    MESSAGE_TUTEES_LISTED_OVERVIEW,
    Command,
    CommandError,
    CommandResult,
)
from logic.descriptors import FilterTuteeDescriptor
from models.model import Model

logger = logging.getLogger(__name__)


class FilterCommand(Command):
    """
    Shows only the tutees matching every keyword in the descriptor.

    Keyword matching is by whole word and ignores case; see
    `FieldContainsKeywordsPredicate` for the full rules.
    """

    COMMAND_WORD = "filter"

    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Filters through all tutees, showing only the tutees that match "
        "every parameter provided.\n"
        "Parameters: [n/NAME] [p/PHONE] [e/EMAIL] [a/ADDRESS] [sub/SUBJECT] "
        "[sch/SCHEDULE] [start/START TIME] [end/END TIME] [t/TAG]...\n"
        f"Example: {COMMAND_WORD} n/John sub/Math sch/monday t/friends t/owesMoney"
    )

    MESSAGE_NOT_FILTERED = "At least one field must be provided to filter."

    def __init__(self, descriptor: FilterTuteeDescriptor):
        if descriptor is None:
            raise TypeError("FilterCommand requires a descriptor.")

        self._descriptor = descriptor
        # keywords are captured now, the descriptor may change afterwards
        self._predicate = descriptor.to_predicate()

    # === properties ===

    @property
    def descriptor(self) -> FilterTuteeDescriptor:
        return self._descriptor

    # === command ===

    def execute(self, model: Model) -> CommandResult:
        if not self._descriptor.is_any_field_filtered():
            raise CommandError(self.MESSAGE_NOT_FILTERED, ErrorCode.EMPTY_DESCRIPTOR)

        model.update_filtered_tutee_list(self._predicate)
        count = len(model.get_filtered_tutee_list())
        logger.info("Filtered tutees with %r: %d match(es)", self._predicate, count)

        return CommandResult(
            MESSAGE_TUTEES_LISTED_OVERVIEW.format(count=count), show_list=True
        )

    # === dunder methods ===

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FilterCommand):
            return NotImplemented
        return self._predicate == other._predicate

    def __hash__(self) -> int:
        return hash(self._predicate)

    def __repr__(self) -> str:
        return f"FilterCommand({self._predicate!r})"
