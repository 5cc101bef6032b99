# core/formatters.py

# all pure text helpers
# must never import from models!

from typing import Any

# === generic text formatters ===


def format_banner_text(title: str, width: int = 40) -> str:
    line = "=" * width
    centered_title = f"{title:^{width}}"

    return f"{line}\n{centered_title}\n{line}"


def format_list_with_and(items: list[Any]) -> str:
    if not items:
        return ""

    if len(items) == 1:
        return str(items[0])

    if len(items) == 2:
        return " and ".join(str(item) for item in items)

    return ", ".join(str(item) for item in items[:-1]) + ", and " + str(items[-1])


def format_lesson_slot(schedule: str, start_time: str, end_time: str) -> str:
    return f"{schedule.capitalize()} {start_time}-{end_time}"
