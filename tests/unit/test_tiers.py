"""Tier classifier rules."""

import pytest

from sffhub.models import ComplexityTier, NeedType, SpeedTier, Turnaround
from sffhub.services.tiers import classify


@pytest.mark.parametrize("need_type", [NeedType.CAPTIONS, NeedType.SMART_CUT])
@pytest.mark.parametrize("volume", [1, 3, 5])
def test_simple_needs_at_low_volume_are_basic(need_type, volume):
    assert classify(need_type, volume, Turnaround.STANDARD, "clean cuts please") == (
        ComplexityTier.BASIC,
        SpeedTier.STANDARD,
    )


@pytest.mark.parametrize("need_type", list(NeedType))
def test_high_volume_is_elite(need_type):
    complexity, _ = classify(need_type, 16, Turnaround.CUSTOM, None)
    assert complexity == ComplexityTier.ELITE


def test_simple_need_above_five_per_week_is_pro():
    assert classify(NeedType.CAPTIONS, 6, Turnaround.STANDARD)[0] == ComplexityTier.PRO


def test_repurpose_is_pro():
    assert classify(NeedType.REPURPOSE, 2, Turnaround.STANDARD)[0] == ComplexityTier.PRO


def test_default_is_pro_standard():
    """'Other' at low volume matches no rule and keeps the defaults."""
    assert classify(NeedType.OTHER, 1, Turnaround.CUSTOM) == (ComplexityTier.PRO, SpeedTier.STANDARD)


@pytest.mark.parametrize("notes", [
    "We edit in After Effects",
    "AFTER EFFECTS templates",
    "some motion graphics",
    "Multi-Cam podcast",
    "multicam setup",
    "light Sound Design",
])
def test_keywords_in_notes_force_elite(notes):
    complexity, _ = classify(NeedType.CAPTIONS, 1, Turnaround.STANDARD, notes)
    assert complexity == ComplexityTier.ELITE


@pytest.mark.parametrize("need_type,volume", [
    (NeedType.CAPTIONS, 1),
    (NeedType.SOCIAL_EDIT, 10),
    (NeedType.OTHER, 40),
])
def test_rush_turnaround_is_always_rush(need_type, volume):
    _, speed = classify(need_type, volume, Turnaround.RUSH_12H, "motion graphics")
    assert speed == SpeedTier.RUSH


def test_accepts_raw_string_values():
    assert classify("Smart Cut", 4, "Rush 12h", "") == (ComplexityTier.BASIC, SpeedTier.RUSH)
