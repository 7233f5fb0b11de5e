"""
Score classification + findings text for the Results / Kit screens.

Tiers (applied wherever a score is shown):
  >= 80  excellent          "Excellent"
  >= 60  good               "Good"
  >= 36  elevated-concern   "Needs Improvement"
  else   low                "Needs Improvement"

The two lower tiers share a label but not a color. Kept as observed until
product decides otherwise.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

from ..core.types import ScoreSet

# -------------------------------------------------
# 1) Tiers
# -------------------------------------------------

EXCELLENT = "excellent"
GOOD = "good"
ELEVATED_CONCERN = "elevated-concern"
LOW = "low"


@dataclass(frozen=True)
class Tier:
    name: str
    label: str
    color: str        # text color
    background: str   # badge / card background
    border: str


TIERS: Dict[str, Tier] = {
    EXCELLENT: Tier(EXCELLENT, "Excellent", "#059669", "#ecfdf5", "#a7f3d0"),
    GOOD: Tier(GOOD, "Good", "#d97706", "#fffbeb", "#fde68a"),
    ELEVATED_CONCERN: Tier(ELEVATED_CONCERN, "Needs Improvement", "#ea580c", "#fff7ed", "#fed7aa"),
    LOW: Tier(LOW, "Needs Improvement", "#f43f5e", "#fff1f2", "#fecdd3"),
}


def tier_name(score: int) -> str:
    if score >= 80:
        return EXCELLENT
    if score >= 60:
        return GOOD
    if score >= 36:
        return ELEVATED_CONCERN
    return LOW


def classify(score: int) -> Tier:
    return TIERS[tier_name(score)]


def score_label(score: int) -> str:
    return classify(score).label


def score_color(score: int) -> str:
    return classify(score).color


# -------------------------------------------------
# 2) Findings text (when the webhook gave none)
# -------------------------------------------------

def strongest_dimension(scores: ScoreSet) -> str:
    if scores.consistency >= scores.awareness and scores.consistency >= scores.engagement:
        return "brand consistency"
    if scores.awareness >= scores.engagement:
        return "brand awareness"
    return "brand engagement"


def weakest_dimension(scores: ScoreSet) -> str:
    if scores.awareness < scores.consistency and scores.awareness < scores.engagement:
        return "brand awareness"
    if scores.consistency < scores.engagement:
        return "brand consistency"
    return "brand engagement"


def strengths_text(brand_name: str, scores: ScoreSet) -> str:
    level = "strong" if scores.overall >= 70 else "moderate"
    return (
        f"{brand_name} shows {level} brand performance with particular strengths in "
        f"{strongest_dimension(scores)}."
    )


def opportunities_text(scores: ScoreSet) -> str:
    return (
        f"Key opportunities for improvement include enhancing {weakest_dimension(scores)} "
        "to drive overall brand growth."
    )
