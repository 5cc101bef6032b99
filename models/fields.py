# models/fields.py

"""
Validated value types for the fields of a `Tutee`.

Every field wraps a single normalized string and validates it on construction, so
an instance that exists is always well-formed. Instances are immutable and compare
structurally by value, which lets them be hashed and stored in sets.

Malformed input raises `MalformedFieldError`, a `ValueError` subclass carrying the
field's constraint message for display to the user.
"""

from __future__ import annotations

import calendar
import re


class MalformedFieldError(ValueError):
    """Raised when a field value type rejects its input."""


class Field:
    """
    Base class for single-valued tutee fields.

    Subclasses override `validate_input()` to normalize and check raw input, and set
    `MESSAGE_CONSTRAINTS` to the text shown when validation fails.
    """

    MESSAGE_CONSTRAINTS = "Invalid field value."

    __slots__ = ("_value",)

    def __init__(self, value: str):
        if value is None:
            raise MalformedFieldError(self.MESSAGE_CONSTRAINTS)

        object.__setattr__(self, "_value", self.validate_input(str(value)))

    # === properties ===

    @property
    def value(self) -> str:
        return self._value

    # === dunder methods ===

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable.")

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._value))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"

    def __str__(self) -> str:
        return self._value

    # === data validators ===

    @classmethod
    def validate_input(cls, value: str) -> str:
        return value.strip()


class Name(Field):
    MESSAGE_CONSTRAINTS = (
        "Names should only contain alphanumeric characters and spaces, "
        "and it should not be blank."
    )

    __slots__ = ()

    @classmethod
    def validate_input(cls, value: str) -> str:
        """
        Strips and validates a tutee name.

        The first character must be alphanumeric; the rest may be alphanumeric
        characters or spaces.

        Raises:
            MalformedFieldError: If the name is blank or contains other characters.
        """
        value = value.strip()
        if not re.fullmatch(r"[^\W_]+(?: +[^\W_]+)*", value):
            raise MalformedFieldError(cls.MESSAGE_CONSTRAINTS)
        return value


class Phone(Field):
    MESSAGE_CONSTRAINTS = (
        "Phone numbers should only contain numbers, and it should be at least 3 digits long."
    )

    __slots__ = ()

    @classmethod
    def validate_input(cls, value: str) -> str:
        value = value.strip()
        if not re.fullmatch(r"[0-9]{3,}", value):
            raise MalformedFieldError(cls.MESSAGE_CONSTRAINTS)
        return value


class Email(Field):
    MESSAGE_CONSTRAINTS = (
        "Emails should be of the format local-part@domain, with exactly one @ "
        "and a domain containing at least one '.'."
    )

    __slots__ = ()

    @classmethod
    def validate_input(cls, value: str) -> str:
        """
        Validates a tutee email address.

        Ensures the email:
            - Contains exactly one '@' symbol
            - Has non-whitespace characters on both sides of the '@'
            - Contains at least one '.' after the '@' to separate the domain and TLD

        Raises:
            MalformedFieldError: If the email does not conform to the expected format.
        """
        value = value.strip()
        if not re.fullmatch(r"^[^@\s]+@[^@\s]+\.[^@\s]+$", value):
            raise MalformedFieldError(cls.MESSAGE_CONSTRAINTS)
        return value


class Address(Field):
    MESSAGE_CONSTRAINTS = "Addresses can take any values, and it should not be blank."

    __slots__ = ()

    @classmethod
    def validate_input(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise MalformedFieldError(cls.MESSAGE_CONSTRAINTS)
        return value


class Remark(Field):
    # free text; an empty remark is allowed

    __slots__ = ()


class Subject(Field):
    MESSAGE_CONSTRAINTS = (
        "Subjects should only contain alphanumeric characters and spaces, "
        "and it should not be blank."
    )

    __slots__ = ()

    @classmethod
    def validate_input(cls, value: str) -> str:
        value = value.strip()
        if not re.fullmatch(r"[^\W_]+(?: +[^\W_]+)*", value):
            raise MalformedFieldError(cls.MESSAGE_CONSTRAINTS)
        return value


class Schedule(Field):
    MESSAGE_CONSTRAINTS = (
        "Schedule should be a day of the week, e.g. monday, tuesday, ..., sunday."
    )

    WEEKDAYS = tuple(day.lower() for day in calendar.day_name)

    __slots__ = ()

    @classmethod
    def validate_input(cls, value: str) -> str:
        value = value.strip().lower()
        if value not in cls.WEEKDAYS:
            raise MalformedFieldError(cls.MESSAGE_CONSTRAINTS)
        return value


class _LessonTime(Field):
    __slots__ = ()

    @property
    def minutes(self) -> int:
        hours, minutes = self._value.split(":")
        return int(hours) * 60 + int(minutes)

    @classmethod
    def validate_input(cls, value: str) -> str:
        value = value.strip()
        if not re.fullmatch(r"(?:[01][0-9]|2[0-3]):[0-5][0-9]", value):
            raise MalformedFieldError(cls.MESSAGE_CONSTRAINTS)
        return value


class StartTime(_LessonTime):
    MESSAGE_CONSTRAINTS = "Start time should be in the 24-hour format HH:MM, e.g. 08:30."

    __slots__ = ()


class EndTime(_LessonTime):
    MESSAGE_CONSTRAINTS = "End time should be in the 24-hour format HH:MM, e.g. 10:30."

    __slots__ = ()


class Tag(Field):
    MESSAGE_CONSTRAINTS = "Tag names should be a single alphanumeric word."

    __slots__ = ()

    @property
    def tag_name(self) -> str:
        return self._value

    @classmethod
    def validate_input(cls, value: str) -> str:
        value = value.strip()
        if not re.fullmatch(r"[^\W_]+", value):
            raise MalformedFieldError(cls.MESSAGE_CONSTRAINTS)
        return value

    def __str__(self) -> str:
        return f"[{self._value}]"
