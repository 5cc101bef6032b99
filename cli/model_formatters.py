# cli/model_formatters.py

# anything that renders domain objects for the terminal
from textwrap import dedent

import core.formatters as formatters
from models.tutee import Tutee

# === tutee formatters ===


def format_tutee_tags(tutee: Tutee) -> str:
    tag_names = sorted(tag.tag_name for tag in tutee.tags)

    return formatters.format_list_with_and(tag_names) if tag_names else "[NO TAGS]"


def format_tutee_oneline(tutee: Tutee) -> str:
    lesson = formatters.format_lesson_slot(
        tutee.schedule.value,
        tutee.start_time.value,
        tutee.end_time.value,
    )

    return f"{tutee.name.value:<20} | {tutee.subject.value:<12} | {lesson}"


def format_tutee_multiline(tutee: Tutee) -> str:
    lesson = formatters.format_lesson_slot(
        tutee.schedule.value,
        tutee.start_time.value,
        tutee.end_time.value,
    )

    return dedent(
        f"""\
        Tutee:
        ... Name: {tutee.name}
        ... Phone: {tutee.phone}
        ... Email: {tutee.email}
        ... Address: {tutee.address}
        ... Remark: {tutee.remark.value or '[NO REMARK]'}
        ... Lesson: {tutee.subject} on {lesson}
        ... Tags: {format_tutee_tags(tutee)}"""
    )
