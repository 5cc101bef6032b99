# tests/test_model_formatters.py

from cli.model_formatters import (
    format_tutee_multiline,
    format_tutee_oneline,
    format_tutee_tags,
)
from core.formatters import format_banner_text, format_lesson_slot, format_list_with_and


def test_format_tutee_oneline(alice):
    line = format_tutee_oneline(alice)

    assert line.startswith("Alice Pauline        | Math         | ")
    assert line.endswith("Monday 08:30-10:30")


def test_format_tutee_multiline(bob, carl):
    text = format_tutee_multiline(bob)

    assert text.splitlines()[0] == "Tutee:"
    assert "... Name: Bob Choo" in text
    assert "... Remark: [NO REMARK]" in text
    assert "... Lesson: English on Tuesday 14:00-15:30" in text
    assert "... Tags: friends and owesMoney" in text

    assert "... Tags: [NO TAGS]" in format_tutee_multiline(carl)


def test_format_tutee_tags(alice, carl):
    assert format_tutee_tags(alice) == "friends"
    assert format_tutee_tags(carl) == "[NO TAGS]"


def test_format_list_with_and():
    assert format_list_with_and([]) == ""
    assert format_list_with_and(["a"]) == "a"
    assert format_list_with_and(["a", "b"]) == "a and b"
    assert format_list_with_and(["a", "b", "c"]) == "a, b, and c"


def test_format_banner_text():
    banner = format_banner_text("HI", width=6)

    assert banner == "======\n  HI  \n======"


def test_format_lesson_slot():
    assert format_lesson_slot("sunday", "09:00", "10:00") == "Sunday 09:00-10:00"
