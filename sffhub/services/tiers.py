# sffhub/services/tiers.py
"""Suggested pricing tiers for a new intake request.

The result is advisory: admins overwrite both fields freely afterwards.
Rules are applied in order and a later match replaces an earlier one.
"""
from __future__ import annotations

from typing import Optional, Tuple

from ..models import ComplexityTier, NeedType, SpeedTier, Turnaround

SIMPLE_NEEDS = (NeedType.CAPTIONS, NeedType.SMART_CUT)

COMPLEXITY_KEYWORDS = (
    "motion graphics",
    "after effects",
    "multi-cam",
    "sound design",
    "multicam",
)


def classify(
    need_type: NeedType,
    volume_per_week: int,
    turnaround: Turnaround,
    notes: Optional[str] = None,
) -> Tuple[ComplexityTier, SpeedTier]:
    need_type = NeedType(need_type)
    turnaround = Turnaround(turnaround)

    speed = SpeedTier.STANDARD
    if turnaround == Turnaround.RUSH_12H:
        speed = SpeedTier.RUSH

    complexity = ComplexityTier.PRO
    if need_type in SIMPLE_NEEDS and volume_per_week <= 5:
        complexity = ComplexityTier.BASIC
    elif volume_per_week > 15:
        complexity = ComplexityTier.ELITE
    elif need_type == NeedType.REPURPOSE or 6 <= volume_per_week <= 15:
        complexity = ComplexityTier.PRO

    # notes override everything above
    notes_lower = (notes or "").lower()
    if any(keyword in notes_lower for keyword in COMPLEXITY_KEYWORDS):
        complexity = ComplexityTier.ELITE

    return complexity, speed
