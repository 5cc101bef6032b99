# cli/menu_helpers.py

"""
Helper functions for terminal interaction in the Tutee Book application.

This module provides utilities for:
- Prompting for a line of command input
- Displaying numbered result lists
- Displaying standard system messages and error feedback
"""

from enum import Enum
from typing import Any, Callable, Iterable

import core.formatters as formatters
from core.config import Config
from core.response import Response

# === display methods ===


def display_results(
    results: Iterable[Any],
    show_index: bool = False,
    formatter: Callable[[Any], str] = lambda x: str(x),
) -> None:
    """
    Prints a list of results to the console, optionally numbered and formatted.

    Args:
        results (Iterable[Any]): A sequence of results to display.
        show_index (bool, optional): If True, prepends a numbered index to each result. Defaults to False.
        formatter (Callable[[Any], str], optional): A function to convert each result to a display string. Defaults to str().
    """
    for i, result in enumerate(results, 1):
        prefix = f"{i:>2}. " if show_index else ""
        print(f"{prefix}{formatter(result)}")


def display_banner(title: str) -> None:
    print(f"\n{formatters.format_banner_text(title, Config.BANNER_WIDTH)}")


def display_response_failure(response: Response, debug: bool = False) -> None:
    """
    Displays a formatted error message based on a failed `Response`.

    Args:
        response (Response): The response object to inspect.
        debug (bool, optional): If True, prints the trace field when present. Defaults to False.

    Notes:
        - Does nothing if the response was successful.
        - Enum error codes are printed by name; string errors are printed as-is.
    """
    if response.success:
        return

    error_label = (
        response.error.name if isinstance(response.error, Enum) else str(response.error)
    )

    print(f"\n[ERROR: {error_label}] {response.detail}")

    if debug and response.trace:
        print(f"\nDebug Trace: {response.trace}")


# === input methods ===


def prompt_command() -> str:
    """
    Reads one line of command input.

    Raises:
        EOFError: If standard input is closed.
    """
    return input(f"\n{Config.PROMPT}").strip()
