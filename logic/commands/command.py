# logic/commands/command.py

"""
Shared pieces of every command: the result type, the failure type, and the base class.

A command is built from already-parsed input and applied with `execute(model)`. It
returns a `CommandResult` on success and raises `CommandError` on failure. Commands
validate everything before their first mutation, so a raised error always leaves the
model untouched.
"""

from __future__ import annotations

from core.response import ErrorCode
from models.model import Model
from models.tutee import Tutee

MESSAGE_INVALID_TUTEE_DISPLAYED_INDEX = "The person index provided is invalid"
MESSAGE_TUTEES_LISTED_OVERVIEW = "{count} persons listed!"


class CommandResult:
    """
    The outcome of a successful command.

    Attributes:
        feedback (str): The message shown to the user.
        show_list (bool): True if the displayed tutee list should be re-rendered.
        exit (bool): True if the session should end.
        record (Tutee | None): The tutee the command added or changed, if any.
    """

    def __init__(
        self,
        feedback: str,
        show_list: bool = False,
        exit: bool = False,
        record: Tutee | None = None,
    ):
        self._feedback = feedback
        self._show_list = show_list
        self._exit = exit
        self._record = record

    # === properties ===

    @property
    def feedback(self) -> str:
        return self._feedback

    @property
    def show_list(self) -> bool:
        return self._show_list

    @property
    def exit(self) -> bool:
        return self._exit

    @property
    def record(self) -> Tutee | None:
        return self._record

    # === dunder methods ===

    def _key(self) -> tuple:
        return (self._feedback, self._show_list, self._exit, self._record)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CommandResult):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return (
            f"CommandResult({self._feedback!r}, {self._show_list}, {self._exit}, "
            f"{self._record!r})"
        )


class CommandError(Exception):
    """
    Raised when a command cannot be executed.

    Attributes:
        detail (str): The human-readable message shown to the user.
        error (ErrorCode): The machine-readable failure kind.
    """

    def __init__(self, detail: str, error: ErrorCode = ErrorCode.VALIDATION_FAILED):
        super().__init__(detail)
        self.detail = detail
        self.error = error


class Command:
    COMMAND_WORD = ""
    MESSAGE_USAGE = ""

    def execute(self, model: Model) -> CommandResult:
        raise NotImplementedError(f"{type(self).__name__} must implement execute().")
