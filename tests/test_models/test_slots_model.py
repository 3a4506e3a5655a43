"""Tests for the SlotCandidate model."""

from termin_watch.models.slots import SlotCandidate


def test_slot_candidate_trims_text():
    assert SlotCandidate(text="  09:00 frei \n").text == "09:00 frei"


def test_slot_candidates_equal_after_trim():
    """Identity is the trimmed text; equal candidates hash the same."""
    a = SlotCandidate(text="09:00")
    b = SlotCandidate(text=" 09:00 ")
    assert a == b
    assert len({a, b}) == 1


def test_slot_candidate_distinct_text():
    assert SlotCandidate(text="09:00") != SlotCandidate(text="09:30")
