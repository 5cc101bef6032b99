# logic/parser.py

"""
Turns a line of user input into a `Command`.

The first whitespace-delimited token selects the command; the rest of the line is
split into a preamble (e.g. an index) and prefixed arguments such as `n/John Doe` or
`t/friends`. A prefix is only recognised at the start of the arguments or after
whitespace, and its value runs until the next recognised prefix.

Field values are validated here by their value types, so commands only ever see
well-formed input. Every failure is raised as a `ParseError`.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from core.index import Index
from core.response import ErrorCode
from core.utils import validate_single_word
from logic.commands.add_command import AddCommand
from logic.commands.command import (
    MESSAGE_INVALID_TUTEE_DISPLAYED_INDEX,
    Command,
    CommandError,
)
from logic.commands.copy_command import CopyCommand
from logic.commands.edit_command import EditCommand
from logic.commands.exit_command import ExitCommand
from logic.commands.filter_command import FilterCommand
from logic.commands.list_command import ListCommand
from logic.descriptors import EditTuteeDescriptor, FilterTuteeDescriptor
from models.fields import (
    Address,
    Email,
    EndTime,
    Field,
    MalformedFieldError,
    Name,
    Phone,
    Schedule,
    StartTime,
    Subject,
    Tag,
)
from models.model import Model
from models.tutee import Tutee

PREFIX_NAME = "n/"
PREFIX_PHONE = "p/"
PREFIX_EMAIL = "e/"
PREFIX_ADDRESS = "a/"
PREFIX_REMARK = "r/"
PREFIX_SUBJECT = "sub/"
PREFIX_SCHEDULE = "sch/"
PREFIX_START_TIME = "start/"
PREFIX_END_TIME = "end/"
PREFIX_TAG = "t/"

ALL_PREFIXES = (
    PREFIX_NAME,
    PREFIX_PHONE,
    PREFIX_EMAIL,
    PREFIX_ADDRESS,
    PREFIX_REMARK,
    PREFIX_SUBJECT,
    PREFIX_SCHEDULE,
    PREFIX_START_TIME,
    PREFIX_END_TIME,
    PREFIX_TAG,
)

LESSON_PREFIXES = (PREFIX_SUBJECT, PREFIX_SCHEDULE, PREFIX_START_TIME, PREFIX_END_TIME)

MESSAGE_INVALID_COMMAND_FORMAT = "Invalid command format! \n{usage}"
MESSAGE_UNKNOWN_COMMAND = "Unknown command"
MESSAGE_INVALID_INDEX = "Index is not a non-zero unsigned integer."
MESSAGE_INVALID_KEYWORD = "Filter keywords should be a single word: '{keyword}'"

MESSAGE_HELP = "Available commands: " + ", ".join(
    command.COMMAND_WORD
    for command in (
        AddCommand,
        CopyCommand,
        EditCommand,
        ExitCommand,
        FilterCommand,
        ListCommand,
    )
)

_BASIC_COMMAND_FORMAT = re.compile(r"(?P<command_word>\S+)(?P<arguments>.*)", re.DOTALL)


class ParseError(CommandError):
    """Raised when user input does not form a valid command."""

    def __init__(
        self, detail: str, error: ErrorCode = ErrorCode.INVALID_COMMAND_FORMAT
    ):
        super().__init__(detail, error)


class ArgumentMultimap:
    """
    Maps each prefix to every value given for it, in input order.

    The text before the first prefix is kept as the preamble.
    """

    def __init__(self, preamble: str, values: dict[str, list[str]]):
        self._preamble = preamble
        self._values = values

    @property
    def preamble(self) -> str:
        return self._preamble

    def contains(self, prefix: str) -> bool:
        return prefix in self._values

    def get_value(self, prefix: str) -> str | None:
        # the last occurrence wins
        values = self._values.get(prefix)
        return values[-1] if values else None

    def get_all_values(self, prefix: str) -> list[str]:
        return list(self._values.get(prefix, []))

    def present_prefixes(self) -> list[str]:
        return list(self._values)


def tokenize(arguments: str, prefixes: Iterable[str] = ALL_PREFIXES) -> ArgumentMultimap:
    """
    Splits an argument string into a preamble and prefixed values.

    Args:
        arguments (str): Everything after the command word.
        prefixes (Iterable[str]): The prefixes to recognise.

    Returns:
        An `ArgumentMultimap` whose values are stripped of surrounding whitespace.
    """
    # longest first, so "end/" is never read as "e/" followed by "nd/"
    ordered = sorted(prefixes, key=len, reverse=True)
    pattern = re.compile(
        r"(?:^|(?<=\s))(" + "|".join(re.escape(prefix) for prefix in ordered) + ")"
    )

    matches = list(pattern.finditer(arguments))
    preamble_end = matches[0].start() if matches else len(arguments)
    values: dict[str, list[str]] = {}

    for current, following in zip(matches, matches[1:] + [None]):
        value_end = following.start() if following else len(arguments)
        value = arguments[current.end() : value_end].strip()
        values.setdefault(current.group(1), []).append(value)

    return ArgumentMultimap(arguments[:preamble_end].strip(), values)


# === command dispatch ===


def parse_command(user_input: str, model: Model) -> Command:
    """
    Parses a full line of user input into a command ready for execution.

    Args:
        user_input (str): The raw line typed by the user.
        model (Model): The active model, read (never mutated) to assemble `copy` input.

    Returns:
        The `Command` for the given command word.

    Raises:
        ParseError: If the command word is unknown or its arguments are malformed.
    """
    match = _BASIC_COMMAND_FORMAT.fullmatch(user_input.strip())

    if match is None:
        raise ParseError(MESSAGE_INVALID_COMMAND_FORMAT.format(usage=MESSAGE_HELP))

    command_word = match.group("command_word")
    arguments = match.group("arguments")

    if command_word == EditCommand.COMMAND_WORD:
        return parse_edit_command(arguments)

    elif command_word == FilterCommand.COMMAND_WORD:
        return parse_filter_command(arguments)

    elif command_word == CopyCommand.COMMAND_WORD:
        return parse_copy_command(arguments, model)

    elif command_word == AddCommand.COMMAND_WORD:
        return parse_add_command(arguments)

    elif command_word == ListCommand.COMMAND_WORD:
        require_no_arguments(arguments, ListCommand.MESSAGE_USAGE)
        return ListCommand()

    elif command_word == ExitCommand.COMMAND_WORD:
        require_no_arguments(arguments, ExitCommand.MESSAGE_USAGE)
        return ExitCommand()

    else:
        raise ParseError(MESSAGE_UNKNOWN_COMMAND, ErrorCode.UNKNOWN_COMMAND)


# === command parsers ===


def parse_edit_command(arguments: str) -> EditCommand:
    argument_map = tokenize(arguments)
    index = parse_index_or_usage(argument_map.preamble, EditCommand.MESSAGE_USAGE)
    require_absent(argument_map, [PREFIX_REMARK], EditCommand.MESSAGE_USAGE)

    descriptor = EditTuteeDescriptor(
        name=parse_optional_field(argument_map, PREFIX_NAME, Name),
        phone=parse_optional_field(argument_map, PREFIX_PHONE, Phone),
        email=parse_optional_field(argument_map, PREFIX_EMAIL, Email),
        address=parse_optional_field(argument_map, PREFIX_ADDRESS, Address),
        subject=parse_optional_field(argument_map, PREFIX_SUBJECT, Subject),
        schedule=parse_optional_field(argument_map, PREFIX_SCHEDULE, Schedule),
        start_time=parse_optional_field(argument_map, PREFIX_START_TIME, StartTime),
        end_time=parse_optional_field(argument_map, PREFIX_END_TIME, EndTime),
        tags=parse_tags_for_edit(argument_map.get_all_values(PREFIX_TAG)),
    )

    if not descriptor.is_any_field_edited():
        raise ParseError(EditCommand.MESSAGE_NOT_EDITED, ErrorCode.EMPTY_DESCRIPTOR)

    return EditCommand(index, descriptor)


def parse_filter_command(arguments: str) -> FilterCommand:
    argument_map = tokenize(arguments)

    if argument_map.preamble:
        raise ParseError(
            MESSAGE_INVALID_COMMAND_FORMAT.format(usage=FilterCommand.MESSAGE_USAGE)
        )

    require_absent(argument_map, [PREFIX_REMARK], FilterCommand.MESSAGE_USAGE)

    if not argument_map.present_prefixes():
        raise ParseError(FilterCommand.MESSAGE_NOT_FILTERED, ErrorCode.EMPTY_DESCRIPTOR)

    def keyword(prefix: str) -> str:
        value = argument_map.get_value(prefix) or ""
        if value and len(value.split()) != 1:
            raise ParseError(MESSAGE_INVALID_KEYWORD.format(keyword=value))
        return value

    tag_keywords = []
    for value in argument_map.get_all_values(PREFIX_TAG):
        try:
            tag_keywords.append(validate_single_word(value))
        except ValueError as e:
            raise ParseError(MESSAGE_INVALID_KEYWORD.format(keyword=value)) from e

    descriptor = FilterTuteeDescriptor(
        name=keyword(PREFIX_NAME),
        phone=keyword(PREFIX_PHONE),
        email=keyword(PREFIX_EMAIL),
        address=keyword(PREFIX_ADDRESS),
        subject=keyword(PREFIX_SUBJECT),
        schedule=keyword(PREFIX_SCHEDULE),
        start_time=keyword(PREFIX_START_TIME),
        end_time=keyword(PREFIX_END_TIME),
        tags=tag_keywords,
    )

    return FilterCommand(descriptor)


def parse_copy_command(arguments: str, model: Model) -> CopyCommand:
    """
    Parses `copy INDEX sub/ sch/ start/ end/`.

    The tutee literal handed to `CopyCommand` is the displayed tutee at INDEX with its
    lesson replaced by the parsed one.

    Raises:
        ParseError:
            - `ErrorCode.INVALID_COMMAND_FORMAT` if the index or a lesson prefix is missing.
            - `ErrorCode.MALFORMED_FIELD` if a lesson field is invalid.
            - `ErrorCode.INVALID_INDEX` if INDEX is beyond the displayed list.
    """
    argument_map = tokenize(arguments, LESSON_PREFIXES)
    index = parse_index_or_usage(argument_map.preamble, CopyCommand.MESSAGE_USAGE)
    require_present(argument_map, LESSON_PREFIXES, CopyCommand.MESSAGE_USAGE)

    lesson = {
        "subject": parse_field(argument_map.get_value(PREFIX_SUBJECT), Subject),
        "schedule": parse_field(argument_map.get_value(PREFIX_SCHEDULE), Schedule),
        "start_time": parse_field(argument_map.get_value(PREFIX_START_TIME), StartTime),
        "end_time": parse_field(argument_map.get_value(PREFIX_END_TIME), EndTime),
    }

    last_shown_list = model.get_filtered_tutee_list()

    if index.zero_based >= len(last_shown_list):
        raise ParseError(MESSAGE_INVALID_TUTEE_DISPLAYED_INDEX, ErrorCode.INVALID_INDEX)

    try:
        to_copy = last_shown_list[index.zero_based].with_changes(**lesson)
    except MalformedFieldError as e:
        raise ParseError(str(e), ErrorCode.MALFORMED_FIELD) from e

    return CopyCommand(index, to_copy)


def parse_add_command(arguments: str) -> AddCommand:
    argument_map = tokenize(arguments)

    if argument_map.preamble:
        raise ParseError(
            MESSAGE_INVALID_COMMAND_FORMAT.format(usage=AddCommand.MESSAGE_USAGE)
        )

    require_present(
        argument_map,
        [PREFIX_NAME, PREFIX_PHONE, PREFIX_EMAIL, PREFIX_ADDRESS, *LESSON_PREFIXES],
        AddCommand.MESSAGE_USAGE,
    )

    try:
        tutee = Tutee.create(
            name=argument_map.get_value(PREFIX_NAME),
            phone=argument_map.get_value(PREFIX_PHONE),
            email=argument_map.get_value(PREFIX_EMAIL),
            address=argument_map.get_value(PREFIX_ADDRESS),
            subject=argument_map.get_value(PREFIX_SUBJECT),
            schedule=argument_map.get_value(PREFIX_SCHEDULE),
            start_time=argument_map.get_value(PREFIX_START_TIME),
            end_time=argument_map.get_value(PREFIX_END_TIME),
            remark=argument_map.get_value(PREFIX_REMARK) or "",
            tags=argument_map.get_all_values(PREFIX_TAG),
        )
    except MalformedFieldError as e:
        raise ParseError(str(e), ErrorCode.MALFORMED_FIELD) from e

    return AddCommand(tutee)


# === argument helpers ===


def parse_index(text: str) -> Index:
    """
    Parses a one-based index typed by the user.

    Raises:
        ParseError: If the text is not a non-zero unsigned integer.
    """
    text = text.strip()

    if not re.fullmatch(r"[0-9]+", text) or int(text) == 0:
        raise ParseError(MESSAGE_INVALID_INDEX)

    return Index.from_one_based(int(text))


def parse_index_or_usage(text: str, usage: str) -> Index:
    try:
        return parse_index(text)
    except ParseError as e:
        raise ParseError(MESSAGE_INVALID_COMMAND_FORMAT.format(usage=usage)) from e


def parse_field(value: str | None, field_type: type[Field]) -> Field:
    try:
        return field_type(value)
    except MalformedFieldError as e:
        raise ParseError(str(e), ErrorCode.MALFORMED_FIELD) from e


def parse_optional_field(
    argument_map: ArgumentMultimap, prefix: str, field_type: type[Field]
) -> Field | None:
    value = argument_map.get_value(prefix)
    return parse_field(value, field_type) if value is not None else None


def parse_tags_for_edit(values: list[str]) -> set[Tag] | None:
    """
    Parses `t/` values for `edit`.

    Returns:
        None if no `t/` was given, an empty set for a single empty `t/` (clear all tags),
        otherwise the parsed tags.
    """
    if not values:
        return None

    if values == [""]:
        return set()

    return {parse_field(value, Tag) for value in values}


def require_present(
    argument_map: ArgumentMultimap, prefixes: Iterable[str], usage: str
) -> None:
    if not all(argument_map.contains(prefix) for prefix in prefixes):
        raise ParseError(MESSAGE_INVALID_COMMAND_FORMAT.format(usage=usage))


def require_absent(
    argument_map: ArgumentMultimap, prefixes: Iterable[str], usage: str
) -> None:
    if any(argument_map.contains(prefix) for prefix in prefixes):
        raise ParseError(MESSAGE_INVALID_COMMAND_FORMAT.format(usage=usage))


def require_no_arguments(arguments: str, usage: str) -> None:
    if arguments.strip():
        raise ParseError(MESSAGE_INVALID_COMMAND_FORMAT.format(usage=usage))
