# logic/commands/edit_command.py

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
from logic.descriptors import EditTuteeDescriptor
from models.fields import MalformedFieldError
from models.model import Model
from models.predicates import PREDICATE_SHOW_ALL_TUTEES

logger = logging.getLogger(__name__)


class EditCommand(Command):
    """
    Edits the details of the tutee at a position in the displayed list.

    Fields present in the descriptor overwrite the tutee's values; all others, and the
    remark, are kept. After a successful edit every tutee is shown again.
    """

    COMMAND_WORD = "edit"

    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Edits the details of the tutee identified by the index number "
        "used in the displayed tutee list. Existing values will be overwritten by the "
        "input values.\n"
        "Parameters: INDEX (must be a positive integer) [n/NAME] [p/PHONE] [e/EMAIL] "
        "[a/ADDRESS] [sub/SUBJECT] [sch/SCHEDULE] [start/START] [end/END] [t/TAG]...\n"
        f"Example: {COMMAND_WORD} 1 p/91234567 e/johndoe@example.com"
    )

    MESSAGE_EDIT_TUTEE_SUCCESS = "Edited Tutee: {tutee}"
    MESSAGE_NOT_EDITED = "At least one field to edit must be provided."
    MESSAGE_DUPLICATE_TUTEE = "This tutee already exists in the address book."

    def __init__(self, index: Index, descriptor: EditTuteeDescriptor):
        if index is None or descriptor is None:
            raise TypeError("EditCommand requires an index and a descriptor.")

        self._index = index
        # snapshot, later changes to the caller's descriptor do not leak in
        self._descriptor = EditTuteeDescriptor.copy_of(descriptor)

    # === properties ===

    @property
    def index(self) -> Index:
        return self._index

    @property
    def descriptor(self) -> EditTuteeDescriptor:
        return EditTuteeDescriptor.copy_of(self._descriptor)

    # === command ===

    def execute(self, model: Model) -> CommandResult:
        if not self._descriptor.is_any_field_edited():
            raise CommandError(self.MESSAGE_NOT_EDITED, ErrorCode.EMPTY_DESCRIPTOR)

        last_shown_list = model.get_filtered_tutee_list()

        if self._index.zero_based >= len(last_shown_list):
            raise CommandError(
                MESSAGE_INVALID_TUTEE_DISPLAYED_INDEX, ErrorCode.INVALID_INDEX
            )

        tutee_to_edit = last_shown_list[self._index.zero_based]

        try:
            edited_tutee = self._descriptor.apply_to(tutee_to_edit)
        except MalformedFieldError as e:
            raise CommandError(str(e), ErrorCode.MALFORMED_FIELD) from e

        if not tutee_to_edit.is_same_person(edited_tutee) and model.has_tutee(
            edited_tutee
        ):
            raise CommandError(self.MESSAGE_DUPLICATE_TUTEE, ErrorCode.DUPLICATE_PERSON)

        response = model.set_tutee(tutee_to_edit, edited_tutee)

        if not response.success:
            raise CommandError(response.detail or "", ErrorCode.LOGIC_ERROR)

        model.update_filtered_tutee_list(PREDICATE_SHOW_ALL_TUTEES)
        logger.info("Edited tutee at index %s: %r", self._index, edited_tutee)

        return CommandResult(
            self.MESSAGE_EDIT_TUTEE_SUCCESS.format(tutee=edited_tutee),
            show_list=True,
            record=edited_tutee,
        )

    # === dunder methods ===

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EditCommand):
            return NotImplemented
        return self._index == other._index and self._descriptor == other._descriptor

    def __hash__(self) -> int:
        return hash((self._index, self._descriptor._key()))

    def __repr__(self) -> str:
        return f"EditCommand({self._index!r}, {self._descriptor!r})"
