# cli/main.py

"""
Interactive shell for the Tutee Book CLI.

Loads the tutee book from the configured data file, then reads one command per line
until `exit` or end of input. Feedback and errors are printed after every command, and
the displayed tutee list is re-rendered after commands that change what is shown.
"""

from __future__ import annotations

import argparse
import logging

import cli.menu_helpers as helpers
import cli.model_formatters as model_formatters
from core.config import Config
from logic.logic_manager import LogicManager
from models.model import Model
from models.tutee_book import TuteeBook

logger = logging.getLogger(__name__)


def configure_logging(
    level: str = Config.LOG_LEVEL, log_file: str | None = Config.LOG_FILE
) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format=Config.LOG_FORMAT,
        filename=log_file,
    )


def build_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tuteebook",
        description="Track tutees and their weekly lessons from the command line.",
    )
    parser.add_argument(
        "--data-file",
        default=Config.DATA_FILE,
        help="JSON file holding the tutee book (default: %(default)s)",
    )
    parser.add_argument(
        "--log-level",
        default=Config.LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
    )
    return parser


def run_cli(argv: list[str] | None = None) -> None:
    """
    Top-level read-execute loop for the Tutee Book.

    Args:
        argv (list[str] | None): Command-line arguments; defaults to `sys.argv[1:]`.

    Notes:
        - If the data file exists but cannot be loaded, the session starts with an empty
          tutee book and autosave is disabled so the unreadable file is left untouched.
    """
    args = build_argument_parser().parse_args(argv)
    configure_logging(args.log_level)

    helpers.display_banner("TUTEE BOOK")

    logic = load_logic_manager(args.data_file)
    display_tutees(logic.model)

    while True:
        try:
            user_input = helpers.prompt_command()

        except (EOFError, KeyboardInterrupt):
            break

        if not user_input:
            continue

        response = logic.execute(user_input)

        if not response.success:
            helpers.display_response_failure(
                response, debug=args.log_level == "DEBUG"
            )
            continue

        print(response.detail)
        result = response.data["result"]

        if result.record is not None:
            print(model_formatters.format_tutee_multiline(result.record))

        if result.show_list:
            display_tutees(logic.model)

        if result.exit:
            break

    exit_program()


def load_logic_manager(data_file: str) -> LogicManager:
    load_response = TuteeBook.load(data_file)

    if not load_response.success:
        helpers.display_response_failure(load_response)
        print("Starting with an empty tutee book. Changes will not be saved this session.")
        logger.warning("Autosave disabled, could not load %s", data_file)

        return LogicManager(Model(TuteeBook()), data_file=None)

    return LogicManager(Model(load_response.data["tutee_book"]), data_file=data_file)


def display_tutees(model: Model) -> None:
    tutees = model.get_filtered_tutee_list()

    if not tutees:
        print("\nNo tutees to display.")
        return

    print()
    helpers.display_results(
        tutees, show_index=True, formatter=model_formatters.format_tutee_oneline
    )


def exit_program() -> None:
    """
    Displays an exit banner and terminates the CLI program.

    Raises:
        SystemExit: Always raised to immediately terminate execution.
    """
    helpers.display_banner("Exiting Program")
    print()

    raise SystemExit
