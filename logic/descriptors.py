# logic/descriptors.py

"""
Sparse sets of field-level instructions handed from the parser to a command.

- `EditTuteeDescriptor`: new values for the fields an `edit` should overwrite. A field
  left as None is inherited from the tutee being edited.
- `FilterTuteeDescriptor`: raw keywords for a `filter`. An empty keyword places no
  restriction on its field.
"""

from __future__ import annotations

from collections.abc import Iterable

from models.fields import (
    Address,
    Email,
    EndTime,
    Name,
    Phone,
    Schedule,
    StartTime,
    Subject,
    Tag,
)
from models.predicates import FieldContainsKeywordsPredicate
from models.tutee import Tutee


class EditTuteeDescriptor:

    def __init__(
        self,
        name: Name | None = None,
        phone: Phone | None = None,
        email: Email | None = None,
        address: Address | None = None,
        subject: Subject | None = None,
        schedule: Schedule | None = None,
        start_time: StartTime | None = None,
        end_time: EndTime | None = None,
        tags: Iterable[Tag] | None = None,
    ):
        self.name = name
        self.phone = phone
        self.email = email
        self.address = address
        self.subject = subject
        self.schedule = schedule
        self.start_time = start_time
        self.end_time = end_time
        # tags goes through its setter, which takes a frozen copy
        self.tags = tags

    # === properties ===

    @property
    def tags(self) -> frozenset[Tag] | None:
        return self._tags

    @tags.setter
    def tags(self, tags: Iterable[Tag] | None) -> None:
        self._tags = frozenset(tags) if tags is not None else None

    # === public classmethods ===

    @classmethod
    def copy_of(cls, other: EditTuteeDescriptor) -> EditTuteeDescriptor:
        return cls(
            name=other.name,
            phone=other.phone,
            email=other.email,
            address=other.address,
            subject=other.subject,
            schedule=other.schedule,
            start_time=other.start_time,
            end_time=other.end_time,
            tags=other.tags,
        )

    # === data accessors ===

    def is_any_field_edited(self) -> bool:
        """
        Returns True if a contact field or the tag set carries a new value.

        Notes:
            - Lesson fields (subject, schedule, start and end time) are not counted, so a
              patch that only touches the lesson is treated as empty.
        """
        return any(
            field is not None
            for field in (self.name, self.phone, self.email, self.address, self._tags)
        )

    def apply_to(self, tutee: Tutee) -> Tutee:
        """
        Builds a new `Tutee` from `tutee` with every present field overwritten.

        The remark is always inherited; `edit` never changes it. The tag set is replaced
        wholesale when present.

        Raises:
            MalformedFieldError: If the patched lesson times are out of order.
        """
        changes = {
            field: value
            for field, value in (
                ("name", self.name),
                ("phone", self.phone),
                ("email", self.email),
                ("address", self.address),
                ("subject", self.subject),
                ("schedule", self.schedule),
                ("start_time", self.start_time),
                ("end_time", self.end_time),
                ("tags", self._tags),
            )
            if value is not None
        }

        return tutee.with_changes(**changes)

    # === dunder methods ===

    def _key(self) -> tuple:
        return (
            self.name,
            self.phone,
            self.email,
            self.address,
            self.subject,
            self.schedule,
            self.start_time,
            self.end_time,
            self._tags,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EditTuteeDescriptor):
            return NotImplemented
        return self._key() == other._key()

    def __repr__(self) -> str:
        return f"EditTuteeDescriptor{self._key()!r}"


class FilterTuteeDescriptor:

    def __init__(
        self,
        name: str = "",
        phone: str = "",
        email: str = "",
        address: str = "",
        subject: str = "",
        schedule: str = "",
        start_time: str = "",
        end_time: str = "",
        tags: Iterable[str] = (),
    ):
        self.name = name
        self.phone = phone
        self.email = email
        self.address = address
        self.subject = subject
        self.schedule = schedule
        self.start_time = start_time
        self.end_time = end_time
        self.tags = tags

    # === properties ===

    @property
    def tags(self) -> tuple[str, ...] | None:
        return self._tags

    @tags.setter
    def tags(self, tags: Iterable[str] | None) -> None:
        self._tags = tuple(tags) if tags is not None else None

    # === data accessors ===

    def is_any_field_filtered(self) -> bool:
        """
        Returns True if any field has been set to a value other than None.

        Notes:
            - Every keyword defaults to "" rather than None, so a freshly built
              descriptor already counts as filtered. An all-empty descriptor filters
              nothing out; the parser rejects `filter` with no prefixes instead.
        """
        return any(
            field is not None
            for field in (
                self.name,
                self.phone,
                self.email,
                self.address,
                self.subject,
                self.schedule,
                self.start_time,
                self.end_time,
                self._tags,
            )
        )

    def to_predicate(self) -> FieldContainsKeywordsPredicate:
        """
        Raises:
            ValueError: If a keyword holds more than one word.
        """
        return FieldContainsKeywordsPredicate(
            name_keyword=self.name,
            phone_keyword=self.phone,
            email_keyword=self.email,
            address_keyword=self.address,
            subject_keyword=self.subject,
            schedule_keyword=self.schedule,
            start_time_keyword=self.start_time,
            end_time_keyword=self.end_time,
            tag_keywords=self._tags or (),
        )

    # === dunder methods ===

    def _key(self) -> tuple:
        return (
            self.name,
            self.phone,
            self.email,
            self.address,
            self.subject,
            self.schedule,
            self.start_time,
            self.end_time,
            self._tags,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FilterTuteeDescriptor):
            return NotImplemented
        return self._key() == other._key()

    def __repr__(self) -> str:
        return f"FilterTuteeDescriptor{self._key()!r}"
