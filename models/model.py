# models/model.py

"""
The Model is the facade commands operate on.

It owns a `TuteeBook` (the full, ordered list of tutees) and the predicate that
decides which of them are currently displayed. Commands read positions from the
filtered view and mutate the book only through the methods here.

The filtered view is derived lazily from the book and the installed predicate. It is
cached between reads and invalidated whenever the book is mutated or a new predicate
is installed, so reads always reflect the last mutation.
"""

from __future__ import annotations

import logging

from core.response import Response
from models.predicates import PREDICATE_SHOW_ALL_TUTEES, TuteePredicate
from models.tutee import Tutee
from models.tutee_book import TuteeBook

logger = logging.getLogger(__name__)


class Model:

    def __init__(self, tutee_book: TuteeBook | None = None):
        self._tutee_book: TuteeBook = tutee_book if tutee_book is not None else TuteeBook()
        self._predicate: TuteePredicate = PREDICATE_SHOW_ALL_TUTEES
        self._filtered_cache: tuple[Tutee, ...] | None = None

    # === properties ===

    @property
    def tutee_book(self) -> TuteeBook:
        return self._tutee_book

    @property
    def has_unsaved_changes(self) -> bool:
        return self._tutee_book.has_unsaved_changes

    # === data accessors ===

    def get_tutee_list(self) -> tuple[Tutee, ...]:
        return self._tutee_book.tutees

    def get_filtered_tutee_list(self) -> tuple[Tutee, ...]:
        if self._filtered_cache is None:
            self._filtered_cache = tuple(
                tutee for tutee in self._tutee_book.tutees if self._predicate(tutee)
            )

        return self._filtered_cache

    def has_tutee(self, tutee: Tutee) -> bool:
        return self._tutee_book.has_tutee(tutee)

    # === data manipulators ===

    def add_tutee(self, tutee: Tutee) -> Response:
        response = self._tutee_book.add_tutee(tutee)
        self._invalidate()

        return response

    def set_tutee(self, target: Tutee, edited: Tutee) -> Response:
        response = self._tutee_book.set_tutee(target, edited)
        self._invalidate()

        return response

    def update_filtered_tutee_list(self, predicate: TuteePredicate) -> None:
        if predicate is None:
            raise TypeError("A predicate is required; use PREDICATE_SHOW_ALL_TUTEES to clear filters.")

        self._predicate = predicate
        self._invalidate()
        logger.debug("Installed filter predicate %r", predicate)

    # === helper methods ===

    def _invalidate(self) -> None:
        self._filtered_cache = None
