"""
Progression module.

Turns a raw rating into a coarse rank tier (Rookie through Elite) using
fixed thresholds shared by every sport.
"""

from sportshub.progression.engine import (
    ProgressionRecord,
    progression_for,
    progression_record,
    tier,
    tier_floor,
)
from sportshub.progression.tiers import TIER_FLOORS, RankTier

__all__ = [
    "ProgressionRecord",
    "RankTier",
    "TIER_FLOORS",
    "progression_for",
    "progression_record",
    "tier",
    "tier_floor",
]
