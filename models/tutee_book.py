# models/tutee_book.py

"""
The TuteeBook is the "source of truth" for all tutee records.

Tutees are kept in an ordered list and written to a single .json file upon saving.
Insertion order is preserved and replacement happens in place, so positions shown to
the user stay stable across edits.

Provides functions for loading a TuteeBook from disk, saving it, and adding and replacing
tutees. Manipulators return a structured `Response` rather than
raising, and track a session-scoped `has_unsaved_changes` flag.
"""

from __future__ import annotations

import json
import logging
import os
from typing import Any

from core.response import ErrorCode, Response
from models.tutee import Tutee

logger = logging.getLogger(__name__)


class TuteeBook:

    def __init__(self, tutees: list[Tutee] | None = None):
        self._tutees: list[Tutee] = list(tutees) if tutees else []
        self._unsaved_changes: bool = False

    # === properties ===

    @property
    def tutees(self) -> tuple[Tutee, ...]:
        return tuple(self._tutees)

    @property
    def has_unsaved_changes(self) -> bool:
        return self._unsaved_changes

    # === public classmethods ===

    @classmethod
    def load(cls, file_path: str) -> Response:
        """
        Loads previously serialized tutees from disk and returns a `TuteeBook` instance.

        Args:
            file_path (str): The path of the JSON data file.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the file was read (or absent) and every record was valid.
                    - False for JSON deserialization issues, invalid records, or missing keys.
                - detail (str | None):
                    - On failure, a human-readable description of the error.
                    - On success, a short status message.
                - error (ErrorCode | str | None):
                    - `ErrorCode.INVALID_INPUT` if JSONDecodeError raised or the top level is malformed.
                    - `ErrorCode.INVALID_FIELD_VALUE` if a record fails field validation.
                    - `ErrorCode.MISSING_REQUIRED_FIELD` if a record is missing a key.
                    - `ErrorCode.INTERNAL_ERROR` if the file cannot be read.
                - status_code (int | None):
                    - 200 on success
                    - 400 on failure
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "tutee_book" (TuteeBook): The loaded `TuteeBook` object.
                    - On failure:
                        - None

        Notes:
            - A missing file is not an error; an empty `TuteeBook` is returned.
            - Loading fails fast: one bad record aborts the whole load.
        """
        if not os.path.exists(file_path):
            logger.info("No data file at %s, starting with an empty tutee book", file_path)

            return Response.succeed(
                detail="No data file found. Starting with an empty tutee book.",
                data={
                    "tutee_book": cls(),
                },
            )

        try:
            with open(file_path, "r") as f:
                payload = json.load(f)

            tutee_book = cls.from_dict(payload)

        except json.JSONDecodeError as e:
            return Response.fail(
                detail=f"Failed to parse JSON data: {e}",
                error=ErrorCode.INVALID_INPUT,
            )

        except KeyError as e:
            return Response.fail(
                detail=f"Missing required field: {e}",
                error=ErrorCode.MISSING_REQUIRED_FIELD,
            )

        except TypeError as e:
            return Response.fail(
                detail=f"Malformed tutee data: {e}",
                error=ErrorCode.INVALID_INPUT,
            )

        except ValueError as e:
            return Response.fail(
                detail=f"Invalid field value: {e}",
                error=ErrorCode.INVALID_FIELD_VALUE,
            )

        except OSError as e:
            return Response.fail(
                detail=f"Failed to read data from disk: {e}",
                error=ErrorCode.INTERNAL_ERROR,
            )

        else:
            logger.info("Loaded %d tutee(s) from %s", len(tutee_book), file_path)

            return Response.succeed(
                detail=f"Loaded {len(tutee_book)} tutee(s).",
                data={
                    "tutee_book": tutee_book,
                },
            )

    # === persistence and import ===

    def save(self, file_path: str) -> Response:
        """
        Serializes and saves all tutees to disk in JSON format.

        Args:
            file_path (str): The target path; parent directories are created if needed.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the data was saved successfully to disk.
                    - False for serialization or filesystem errors.
                - detail (str | None):
                    - On success, "Tutee book successfully saved to disk."
                    - On failure, a description of the error.
                - error (ErrorCode | str | None):
                    - `ErrorCode.INVALID_FIELD_VALUE` if TypeError or ValueError raised.
                    - `ErrorCode.INTERNAL_ERROR` if OSError raised.
                - status_code (int | None):
                    - 200 on success
                    - 400 on failure
                - data (dict | None):
                    - Always None, this method does not return any payload.

        Notes:
            - This intentionally overwrites existing data.
        """
        try:
            parent = os.path.dirname(file_path)
            if parent:
                os.makedirs(parent, exist_ok=True)

            with open(file_path, "w") as f:
                json.dump(self.to_dict(), f, indent=2, sort_keys=True)

        except (TypeError, ValueError) as e:
            return Response.fail(
                detail=f"Object not JSON serializable: {e}",
                error=ErrorCode.INVALID_FIELD_VALUE,
            )

        except OSError as e:
            return Response.fail(
                detail=f"Failed to write data to disk: {e}",
                error=ErrorCode.INTERNAL_ERROR,
            )

        else:
            self._unsaved_changes = False
            logger.info("Saved %d tutee(s) to %s", len(self._tutees), file_path)

            return Response.succeed(detail="Tutee book successfully saved to disk.")

    def to_dict(self) -> dict:
        return {
            "tutees": [tutee.to_dict() for tutee in self._tutees],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TuteeBook:
        if not isinstance(data, dict) or not isinstance(data.get("tutees"), list):
            raise TypeError("Expected an object with a 'tutees' list.")

        return cls([Tutee.from_dict(record) for record in data["tutees"]])

    # === data accessors ===

    def has_tutee(self, tutee: Tutee) -> bool:
        return any(existing == tutee for existing in self._tutees)

    # === data manipulators ===

    def _mark_dirty(self) -> None:
        self._unsaved_changes = True

    def add_tutee(self, tutee: Tutee) -> Response:
        """
        Appends a `Tutee` to the end of the list.

        Returns:
            Response: A structured response with the following contract:
                - success (bool): Always True.
                - detail (str | None): A simple confirmation message.
                - data (dict): "record" (Tutee): The added tutee.

        Notes:
            - No duplicate check is performed here; callers enforce uniqueness.
            - This method mutates `TuteeBook` state and calls `_mark_dirty()`.
        """
        self._tutees.append(tutee)
        self._mark_dirty()

        return Response.succeed(
            detail="Tutee successfully added to the tutee book.",
            data={
                "record": tutee,
            },
        )

    def set_tutee(self, target: Tutee, edited: Tutee) -> Response:
        """
        Replaces `target` with `edited`, keeping its position in the list.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the target was found and replaced.
                    - False if the target is not in the list.
                - detail (str | None): A confirmation message or a description of the error.
                - error (ErrorCode | str | None):
                    - `ErrorCode.NOT_FOUND` if the target is not in the list.
                - status_code (int | None):
                    - 200 on success
                    - 404 if the target cannot be found
                - data (dict): On success, "record" (Tutee): The edited tutee.

        Notes:
            - The target is located by identity first, then by equality.
            - This method mutates `TuteeBook` state and calls `_mark_dirty()` if successful.
        """
        position = self._position_of(target)

        if position is None:
            return Response.fail(
                detail=f"No matching tutee could be found for replacement: {target!r}.",
                error=ErrorCode.NOT_FOUND,
                status_code=404,
            )

        self._tutees[position] = edited
        self._mark_dirty()

        return Response.succeed(
            detail="Tutee successfully updated.",
            data={
                "record": edited,
            },
        )

    # === helper methods ===

    def _position_of(self, target: Tutee) -> int | None:
        for i, tutee in enumerate(self._tutees):
            if tutee is target:
                return i

        for i, tutee in enumerate(self._tutees):
            if tutee == target:
                return i

        return None

    # === dunder methods ===

    def __len__(self) -> int:
        return len(self._tutees)

    def __iter__(self):
        return iter(tuple(self._tutees))

    def __repr__(self) -> str:
        return f"TuteeBook({len(self._tutees)} tutees)"
