# core/index.py

"""
Represents a position in a displayed list of records.

Users refer to records with one-based positions, while list access is zero-based.
`Index` stores a single validated position and exposes both views, so callers never
convert between the two by hand.
"""

from __future__ import annotations


class Index:

    def __init__(self, zero_based: int):
        self._zero_based: int = Index.validate_zero_based_input(zero_based)

    # === public classmethods ===

    @classmethod
    def from_zero_based(cls, zero_based: int) -> Index:
        return cls(zero_based)

    @classmethod
    def from_one_based(cls, one_based: int) -> Index:
        if isinstance(one_based, bool) or not isinstance(one_based, int):
            raise TypeError("Index must be an integer.")

        if one_based < 1:
            raise ValueError("Index must be a positive integer.")

        return cls(one_based - 1)

    # === properties ===

    @property
    def zero_based(self) -> int:
        return self._zero_based

    @property
    def one_based(self) -> int:
        return self._zero_based + 1

    # === dunder methods ===

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Index):
            return NotImplemented
        return self._zero_based == other._zero_based

    def __hash__(self) -> int:
        return hash(self._zero_based)

    def __repr__(self) -> str:
        return f"Index({self._zero_based})"

    def __str__(self) -> str:
        return str(self.one_based)

    # === data validators ===

    @staticmethod
    def validate_zero_based_input(zero_based: int) -> int:
        """
        Validates a zero-based list position.

        Args:
            zero_based (int): The candidate position.

        Returns:
            The position unchanged if valid.

        Raises:
            TypeError: If the input is not an integer (booleans are rejected).
            ValueError: If the input is negative.
        """
        if isinstance(zero_based, bool) or not isinstance(zero_based, int):
            raise TypeError("Index must be an integer.")

        if zero_based < 0:
            raise ValueError("Index must not be negative.")

        return zero_based
