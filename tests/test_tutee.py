# tests/test_tutee.py

import pytest

from models.fields import MalformedFieldError, Name, Phone, Remark, Tag
from models.tutee import Tutee


def test_tutee_to_dict(alice):
    data = alice.to_dict()

    assert data["name"] == "Alice Pauline"
    assert data["phone"] == "94351253"
    assert data["remark"] == "Prefers morning lessons"
    assert data["schedule"] == "monday"
    assert data["start_time"] == "08:30"
    assert data["tags"] == ["friends"]


def test_tutee_from_dict(alice):
    tutee = Tutee.from_dict(alice.to_dict())

    assert tutee == alice
    assert tutee is not alice


def test_tutee_from_dict_defaults_remark_and_tags():
    tutee = Tutee.from_dict(
        {
            "name": "Dan",
            "phone": "123",
            "email": "dan@example.com",
            "address": "Somewhere",
            "subject": "Math",
            "schedule": "Friday",
            "start_time": "09:00",
            "end_time": "10:00",
        }
    )

    assert tutee.remark.value == ""
    assert tutee.tags == frozenset()
    assert tutee.schedule.value == "friday"


def test_tutee_to_str(alice):
    assert str(alice) == (
        "Alice Pauline; Phone: 94351253; Email: alice@example.com; "
        "Address: 123, Jurong West Ave 6, #08-111; Remark: Prefers morning lessons; "
        "Subject: Math; Schedule: monday; Start: 08:30; End: 10:30; Tags: [friends]"
    )


def test_is_same_person_uses_name_only(alice, make_tutee):
    assert alice.is_same_person(alice)
    assert alice.is_same_person(make_tutee(phone="11111111", subject="English"))
    assert not alice.is_same_person(make_tutee(name="alice pauline"))
    assert not alice.is_same_person(None)


def test_equality_compares_every_field(alice, make_tutee):
    assert alice == make_tutee()
    assert hash(alice) == hash(make_tutee())
    assert alice != make_tutee(remark="Prefers evening lessons")
    assert alice != make_tutee(tags=["friends", "colleagues"])
    assert alice != make_tutee(end_time="11:00")
    assert alice != "Alice Pauline"


def test_lesson_must_start_before_it_ends(make_tutee):
    with pytest.raises(MalformedFieldError):
        make_tutee(start_time="10:30", end_time="10:30")

    with pytest.raises(MalformedFieldError):
        make_tutee(start_time="11:00", end_time="10:30")


def test_tags_are_stored_defensively(alice):
    tags = {Tag("friends")}
    tutee = alice.with_changes(tags=tags)

    tags.add(Tag("rival"))

    assert tutee.tags == frozenset({Tag("friends")})
    assert isinstance(tutee.tags, frozenset)


def test_constructor_requires_every_field(alice):
    with pytest.raises(TypeError):
        Tutee(
            name=Name("Alice"),
            phone=None,
            email=alice.email,
            address=alice.address,
            remark=Remark(""),
            subject=alice.subject,
            schedule=alice.schedule,
            start_time=alice.start_time,
            end_time=alice.end_time,
        )


def test_with_changes_replaces_only_given_fields(alice):
    edited = alice.with_changes(phone=Phone("11111111"))

    assert edited.phone.value == "11111111"
    assert edited.name == alice.name
    assert edited.remark == alice.remark
    assert edited.tags == alice.tags
    assert alice.phone.value == "94351253"


def test_with_changes_rejects_unknown_fields(alice):
    with pytest.raises(TypeError):
        alice.with_changes(nickname=Name("Al"))
