# logic/logic_manager.py

"""
Runs one line of user input against the model and reports the outcome as a `Response`.

This is the seam between the core, which raises typed `CommandError`s, and the CLI,
which only ever inspects `Response` objects. Successful mutations are saved to disk
immediately when a data file is configured.
"""

from __future__ import annotations

import logging
import traceback

from core.response import ErrorCode, Response
from logic.commands.command import CommandError
from logic.parser import parse_command
from models.model import Model

logger = logging.getLogger(__name__)


class LogicManager:

    def __init__(self, model: Model, data_file: str | None = None):
        self._model = model
        self._data_file = data_file

    # === properties ===

    @property
    def model(self) -> Model:
        return self._model

    @property
    def data_file(self) -> str | None:
        return self._data_file

    # === command execution ===

    def execute(self, user_input: str) -> Response:
        """
        Parses and executes a command, then saves the tutee book if it changed.

        Args:
            user_input (str): The raw line typed by the user.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the command executed (and any required save succeeded).
                    - False if parsing, execution, or saving failed.
                - detail (str | None):
                    - On success, the command's feedback message.
                    - On failure, the human-readable error message.
                - error (ErrorCode | str | None):
                    - The `ErrorCode` carried by the raised `CommandError`.
                    - The save failure's `ErrorCode` if saving failed.
                    - `ErrorCode.INTERNAL_ERROR` for unexpected errors.
                - status_code (int | None):
                    - 200 on success
                    - 400 on failure
                - data (dict): Payload with the following keys:
                    - On success:
                        - "result" (CommandResult): The command's result.
                    - On failure:
                        - None

        Notes:
            - A failed command never mutates the model, so nothing is saved.
        """
        logger.debug("Executing user input: %r", user_input)

        try:
            command = parse_command(user_input, self._model)
            result = command.execute(self._model)

        except CommandError as e:
            logger.warning("Command failed [%s]: %s", e.error.name, e.detail)

            return Response.fail(detail=e.detail, error=e.error)

        except Exception as e:
            logger.error("Unexpected error executing %r", user_input, exc_info=True)

            return Response.fail(
                detail=f"Unexpected error: {e}",
                error=ErrorCode.INTERNAL_ERROR,
                trace=traceback.format_exc(),
            )

        if self._data_file and self._model.has_unsaved_changes:
            save_response = self._model.tutee_book.save(self._data_file)

            if not save_response.success:
                return Response.fail(
                    detail=f"Could not save data to file: {save_response.detail}",
                    error=save_response.error,
                )

        return Response.succeed(
            detail=result.feedback,
            data={
                "result": result,
            },
        )
