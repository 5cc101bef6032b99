# tests/conftest.py

import pytest

from models.model import Model
from models.tutee import Tutee
from models.tutee_book import TuteeBook


def build_tutee(**overrides) -> Tutee:
    fields = {
        "name": "Alice Pauline",
        "phone": "94351253",
        "email": "alice@example.com",
        "address": "123, Jurong West Ave 6, #08-111",
        "subject": "Math",
        "schedule": "monday",
        "start_time": "08:30",
        "end_time": "10:30",
        "remark": "Prefers morning lessons",
        "tags": ["friends"],
    }
    fields.update(overrides)
    return Tutee.create(**fields)


@pytest.fixture
def make_tutee():
    return build_tutee


@pytest.fixture
def alice():
    return build_tutee()


@pytest.fixture
def bob():
    return build_tutee(
        name="Bob Choo",
        phone="98765432",
        email="bob@example.com",
        address="Block 123, Bobby Street 3",
        subject="English",
        schedule="tuesday",
        start_time="14:00",
        end_time="15:30",
        remark="",
        tags=["owesMoney", "friends"],
    )


@pytest.fixture
def carl():
    return build_tutee(
        name="Carl Kurz",
        phone="95352563",
        email="heinz@example.com",
        address="wall street",
        subject="Physics",
        schedule="Wednesday",
        start_time="18:00",
        end_time="19:00",
        remark="",
        tags=[],
    )


@pytest.fixture
def sample_tutee_book(alice, bob, carl):
    return TuteeBook([alice, bob, carl])


@pytest.fixture
def sample_model(sample_tutee_book):
    return Model(sample_tutee_book)


@pytest.fixture
def empty_model():
    return Model(TuteeBook())
