# models/predicates.py

"""
Predicates used to narrow the displayed tutee list.

A predicate is any callable taking a `Tutee` and returning a bool. The model installs
one at a time; `PREDICATE_SHOW_ALL_TUTEES` restores the unfiltered view.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

from core.utils import contains_word_ignore_case, validate_single_word
from models.tutee import Tutee

TuteePredicate = Callable[[Tutee], bool]


def PREDICATE_SHOW_ALL_TUTEES(tutee: Tutee) -> bool:
    return True


class FieldContainsKeywordsPredicate:
    """
    Tests that a `Tutee` matches every non-empty keyword it was built with.

    Each scalar keyword must appear as a whole word (ignoring case) in the matching
    field; an empty keyword places no restriction on its field. Every tag keyword
    must match at least one of the tutee's tags. The overall result is the
    conjunction across all nine fields.
    """

    _SCALAR_FIELDS = (
        "name",
        "phone",
        "email",
        "address",
        "subject",
        "schedule",
        "start_time",
        "end_time",
    )

    def __init__(
        self,
        name_keyword: str = "",
        phone_keyword: str = "",
        email_keyword: str = "",
        address_keyword: str = "",
        subject_keyword: str = "",
        schedule_keyword: str = "",
        start_time_keyword: str = "",
        end_time_keyword: str = "",
        tag_keywords: Iterable[str] = (),
    ):
        self._keywords: dict[str, str] = {
            "name": FieldContainsKeywordsPredicate.validate_keyword(name_keyword),
            "phone": FieldContainsKeywordsPredicate.validate_keyword(phone_keyword),
            "email": FieldContainsKeywordsPredicate.validate_keyword(email_keyword),
            "address": FieldContainsKeywordsPredicate.validate_keyword(address_keyword),
            "subject": FieldContainsKeywordsPredicate.validate_keyword(subject_keyword),
            "schedule": FieldContainsKeywordsPredicate.validate_keyword(
                schedule_keyword
            ),
            "start_time": FieldContainsKeywordsPredicate.validate_keyword(
                start_time_keyword
            ),
            "end_time": FieldContainsKeywordsPredicate.validate_keyword(
                end_time_keyword
            ),
        }
        self._tag_keywords: tuple[str, ...] = tuple(
            validate_single_word(keyword) for keyword in tag_keywords
        )

    # === properties ===

    @property
    def keywords(self) -> dict[str, str]:
        return dict(self._keywords)

    @property
    def tag_keywords(self) -> tuple[str, ...]:
        return self._tag_keywords

    # === predicate ===

    def __call__(self, tutee: Tutee) -> bool:
        for field in self._SCALAR_FIELDS:
            keyword = self._keywords[field]

            if keyword and not contains_word_ignore_case(
                getattr(tutee, field).value, keyword
            ):
                return False

        return all(
            any(contains_word_ignore_case(tag.tag_name, keyword) for tag in tutee.tags)
            for keyword in self._tag_keywords
        )

    # === dunder methods ===

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, FieldContainsKeywordsPredicate):
            return NotImplemented
        return (
            self._keywords == other._keywords
            and self._tag_keywords == other._tag_keywords
        )

    def __hash__(self) -> int:
        return hash((tuple(self._keywords.items()), self._tag_keywords))

    def __repr__(self) -> str:
        active = {field: kw for field, kw in self._keywords.items() if kw}
        return f"FieldContainsKeywordsPredicate({active}, tags={list(self._tag_keywords)})"

    # === data validators ===

    @staticmethod
    def validate_keyword(keyword: str | None) -> str:
        """
        Normalizes a scalar keyword: None and blank become "", otherwise one stripped word.

        Raises:
            ValueError: If the keyword holds more than one word.
        """
        if keyword is None or not keyword.strip():
            return ""

        return validate_single_word(keyword)
