# tests/test_model.py

from core.response import ErrorCode
from models.fields import Phone
from models.model import Model
from models.predicates import PREDICATE_SHOW_ALL_TUTEES, FieldContainsKeywordsPredicate


def test_new_model_shows_every_tutee(sample_model, alice, bob, carl):
    assert sample_model.get_filtered_tutee_list() == (alice, bob, carl)
    assert sample_model.get_tutee_list() == (alice, bob, carl)


def test_default_model_is_empty():
    model = Model()

    assert model.get_filtered_tutee_list() == ()
    assert not model.has_unsaved_changes


def test_update_filtered_tutee_list(sample_model, bob):
    sample_model.update_filtered_tutee_list(
        FieldContainsKeywordsPredicate(subject_keyword="english")
    )

    assert sample_model.get_filtered_tutee_list() == (bob,)
    assert len(sample_model.get_tutee_list()) == 3

    sample_model.update_filtered_tutee_list(PREDICATE_SHOW_ALL_TUTEES)

    assert len(sample_model.get_filtered_tutee_list()) == 3


def test_has_tutee_uses_full_equality(sample_model, alice):
    assert sample_model.has_tutee(alice)
    assert not sample_model.has_tutee(alice.with_changes(phone=Phone("11111111")))


def test_add_tutee_appends_without_duplicate_check(sample_model, alice, make_tutee):
    dan = make_tutee(name="Dan")

    sample_model.add_tutee(dan)
    sample_model.add_tutee(alice)

    assert sample_model.get_tutee_list()[-2:] == (dan, alice)
    assert sample_model.has_unsaved_changes


def test_set_tutee_preserves_position(sample_model, alice, bob, carl):
    edited_bob = bob.with_changes(phone=Phone("11111111"))

    response = sample_model.set_tutee(bob, edited_bob)

    assert response.success
    assert sample_model.get_tutee_list() == (alice, edited_bob, carl)


def test_set_missing_tutee_fails(sample_model, make_tutee):
    response = sample_model.set_tutee(make_tutee(name="Ghost"), make_tutee(name="Ghoul"))

    assert not response.success
    assert response.error is ErrorCode.NOT_FOUND
    assert not sample_model.has_unsaved_changes


def test_filtered_view_reflects_mutations(sample_model, make_tutee):
    sample_model.update_filtered_tutee_list(
        FieldContainsKeywordsPredicate(subject_keyword="chemistry")
    )
    assert sample_model.get_filtered_tutee_list() == ()

    chemist = make_tutee(name="Eve", subject="Chemistry")
    sample_model.add_tutee(chemist)

    assert sample_model.get_filtered_tutee_list() == (chemist,)


def test_filtered_view_is_read_only(sample_model):
    filtered = sample_model.get_filtered_tutee_list()

    assert isinstance(filtered, tuple)
