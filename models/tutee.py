# models/tutee.py

"""
Represents a tutee (a tutoring contact) and the lesson they attend.

A `Tutee` bundles contact details (name, phone, email, address), a free-text remark,
one weekly lesson (subject, weekday, start and end time) and a set of tags.

Tutees are immutable: every field is a validated value type and there are no setters.
Changes are made by building a new `Tutee`, e.g. through `with_changes()`.

Two notions of sameness are used throughout the program:
- `is_same_person()`: the names are equal (case-sensitive, after trimming).
- `==`: every field, including the remark and tags, is equal.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from models.fields import (
    Address,
    Email,
    EndTime,
    MalformedFieldError,
    Name,
    Phone,
    Remark,
    Schedule,
    StartTime,
    Subject,
    Tag,
)


class Tutee:

    MESSAGE_LESSON_CONSTRAINTS = "Start time must be earlier than end time."

    def __init__(
        self,
        name: Name,
        phone: Phone,
        email: Email,
        address: Address,
        remark: Remark,
        subject: Subject,
        schedule: Schedule,
        start_time: StartTime,
        end_time: EndTime,
        tags: Iterable[Tag] = (),
    ):
        Tutee.require_all_present(
            name, phone, email, address, remark, subject, schedule, start_time, end_time
        )
        Tutee.validate_lesson_times(start_time, end_time)

        self._name: Name = name
        self._phone: Phone = phone
        self._email: Email = email
        self._address: Address = address
        self._remark: Remark = remark
        self._subject: Subject = subject
        self._schedule: Schedule = schedule
        self._start_time: StartTime = start_time
        self._end_time: EndTime = end_time
        # frozen copy, callers keep no handle on the stored set
        self._tags: frozenset[Tag] = frozenset(tags)

    # === properties ===

    @property
    def name(self) -> Name:
        return self._name

    @property
    def phone(self) -> Phone:
        return self._phone

    @property
    def email(self) -> Email:
        return self._email

    @property
    def address(self) -> Address:
        return self._address

    @property
    def remark(self) -> Remark:
        return self._remark

    @property
    def subject(self) -> Subject:
        return self._subject

    @property
    def schedule(self) -> Schedule:
        return self._schedule

    @property
    def start_time(self) -> StartTime:
        return self._start_time

    @property
    def end_time(self) -> EndTime:
        return self._end_time

    @property
    def tags(self) -> frozenset[Tag]:
        return self._tags

    # === public classmethods ===

    @classmethod
    def create(
        cls,
        name: str,
        phone: str,
        email: str,
        address: str,
        subject: str,
        schedule: str,
        start_time: str,
        end_time: str,
        remark: str = "",
        tags: Iterable[str] = (),
    ) -> Tutee:
        """
        Builds a `Tutee` from raw strings, validating each field.

        Raises:
            MalformedFieldError: If any field, or the lesson time range, is invalid.
        """
        return cls(
            name=Name(name),
            phone=Phone(phone),
            email=Email(email),
            address=Address(address),
            remark=Remark(remark),
            subject=Subject(subject),
            schedule=Schedule(schedule),
            start_time=StartTime(start_time),
            end_time=EndTime(end_time),
            tags={Tag(tag) for tag in tags},
        )

    # === persistence and import ===

    def to_dict(self) -> dict:
        return {
            "name": self._name.value,
            "phone": self._phone.value,
            "email": self._email.value,
            "address": self._address.value,
            "remark": self._remark.value,
            "subject": self._subject.value,
            "schedule": self._schedule.value,
            "start_time": self._start_time.value,
            "end_time": self._end_time.value,
            "tags": sorted(tag.tag_name for tag in self._tags),
        }

    @classmethod
    def from_dict(cls, data: dict) -> Tutee:
        return cls.create(
            name=data["name"],
            phone=data["phone"],
            email=data["email"],
            address=data["address"],
            subject=data["subject"],
            schedule=data["schedule"],
            start_time=data["start_time"],
            end_time=data["end_time"],
            remark=data.get("remark", ""),
            tags=data.get("tags", []),
        )

    # === data accessors ===

    def is_same_person(self, other: Tutee | None) -> bool:
        if other is self:
            return True

        return other is not None and other.name == self._name

    def with_changes(self, **changes: Any) -> Tutee:
        """
        Returns a new `Tutee` with the given fields replaced and all others inherited.

        Args:
            **changes: Field values keyed by property name (e.g. `phone=Phone("123")`).

        Raises:
            TypeError: If a key is not a `Tutee` field.
            MalformedFieldError: If the resulting lesson time range is invalid.
        """
        fields = {
            "name": self._name,
            "phone": self._phone,
            "email": self._email,
            "address": self._address,
            "remark": self._remark,
            "subject": self._subject,
            "schedule": self._schedule,
            "start_time": self._start_time,
            "end_time": self._end_time,
            "tags": self._tags,
        }

        unknown = set(changes) - set(fields)
        if unknown:
            raise TypeError(f"Unknown tutee field(s): {', '.join(sorted(unknown))}")

        fields.update(changes)

        return Tutee(**fields)

    # === dunder methods ===

    def _key(self) -> tuple:
        return (
            self._name,
            self._phone,
            self._email,
            self._address,
            self._remark,
            self._subject,
            self._schedule,
            self._start_time,
            self._end_time,
            self._tags,
        )

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, Tutee):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return (
            f"Tutee({self._name.value}, {self._phone.value}, {self._email.value}, "
            f"{self._subject.value}, {self._schedule.value}, "
            f"{self._start_time.value}-{self._end_time.value})"
        )

    def __str__(self) -> str:
        tags = "".join(str(tag) for tag in sorted(self._tags, key=lambda t: t.tag_name))

        return (
            f"{self._name}; Phone: {self._phone}; Email: {self._email}; "
            f"Address: {self._address}; Remark: {self._remark}; "
            f"Subject: {self._subject}; Schedule: {self._schedule}; "
            f"Start: {self._start_time}; End: {self._end_time}; Tags: {tags}"
        )

    # === data validators ===

    @staticmethod
    def require_all_present(*fields: object) -> None:
        if any(field is None for field in fields):
            raise TypeError("Every tutee field must be provided.")

    @staticmethod
    def validate_lesson_times(start_time: StartTime, end_time: EndTime) -> None:
        """
        Ensures a lesson starts strictly before it ends on the same day.

        Raises:
            MalformedFieldError: If the start time is not earlier than the end time.
        """
        if start_time.minutes >= end_time.minutes:
            raise MalformedFieldError(Tutee.MESSAGE_LESSON_CONSTRAINTS)
