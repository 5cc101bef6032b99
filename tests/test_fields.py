# tests/test_fields.py

import pytest

from models.fields import (
    Address,
    Email,
    EndTime,
    MalformedFieldError,
    Name,
    Phone,
    Remark,
    Schedule,
    StartTime,
    Subject,
    Tag,
)


def test_name_is_stripped_and_validated():
    assert Name("  John Doe ").value == "John Doe"
    assert Name("R2D2").value == "R2D2"

    for invalid in ["", "   ", "John_Doe", "J@ne", "peter*"]:
        with pytest.raises(MalformedFieldError):
            Name(invalid)


def test_phone_requires_at_least_three_digits():
    assert Phone("911").value == "911"

    for invalid in ["", "91", "9011p041", "9312 1534"]:
        with pytest.raises(MalformedFieldError):
            Phone(invalid)


def test_email_requires_single_at_and_domain():
    assert Email(" alice@example.com ").value == "alice@example.com"

    for invalid in ["aliceexample.com", "alice@example", "al ice@example.com", "a@@b.com"]:
        with pytest.raises(MalformedFieldError):
            Email(invalid)


def test_address_must_not_be_blank():
    assert Address("Blk 456, Den Road, #01-355").value == "Blk 456, Den Road, #01-355"

    with pytest.raises(MalformedFieldError):
        Address("  ")


def test_remark_may_be_empty():
    assert Remark("").value == ""
    assert Remark("  likes chess ").value == "likes chess"


def test_subject_is_alphanumeric_words():
    assert Subject("Additional Math").value == "Additional Math"

    with pytest.raises(MalformedFieldError):
        Subject("Math!")


def test_schedule_is_case_insensitive_weekday():
    schedule = Schedule("Monday")

    assert schedule.value == "monday"
    assert schedule == Schedule("MONDAY")
    assert Schedule(" sunday ").value == "sunday"

    with pytest.raises(MalformedFieldError):
        Schedule("funday")


def test_lesson_times_use_24_hour_format():
    assert StartTime("08:30").minutes == 510
    assert EndTime("23:59").minutes == 23 * 60 + 59

    for invalid in ["8:30", "24:00", "12:60", "0830", "noon"]:
        with pytest.raises(MalformedFieldError):
            StartTime(invalid)


def test_tag_is_a_single_word():
    tag = Tag("owesMoney")

    assert tag.tag_name == "owesMoney"
    assert str(tag) == "[owesMoney]"

    for invalid in ["", "owes money", "#friend"]:
        with pytest.raises(MalformedFieldError):
            Tag(invalid)


def test_fields_compare_by_value_and_type():
    assert Name("Alice") == Name("Alice")
    assert hash(Name("Alice")) == hash(Name("Alice"))
    assert Name("Alice") != Name("alice")
    assert Name("123") != Phone("123")
    assert len({Tag("a"), Tag("a"), Tag("b")}) == 2


def test_fields_are_immutable():
    name = Name("Alice")

    with pytest.raises(AttributeError):
        name._value = "Bob"

    assert name.value == "Alice"


def test_malformed_field_error_is_a_value_error():
    with pytest.raises(ValueError) as excinfo:
        Phone("abc")

    assert str(excinfo.value) == Phone.MESSAGE_CONSTRAINTS
