"""
Rank tiers and their rating thresholds.

Thresholds are identical across all sports. Bands are half-open with an
inclusive lower bound:

  Rookie:   rating < 900
  Bronze:   900  <= rating < 1100
  Silver:   1100 <= rating < 1300
  Gold:     1300 <= rating < 1500
  Platinum: 1500 <= rating < 1700
  Elite:    rating >= 1700
"""

from enum import IntEnum


class RankTier(IntEnum):
    """Rank tiers, ordered from lowest to highest."""

    ROOKIE = 0
    BRONZE = 1
    SILVER = 2
    GOLD = 3
    PLATINUM = 4
    ELITE = 5

    @property
    def label(self) -> str:
        return self.name.capitalize()


# Inclusive floor of every tier above Rookie, highest first
TIER_FLOORS: tuple[tuple[RankTier, float], ...] = (
    (RankTier.ELITE, 1700.0),
    (RankTier.PLATINUM, 1500.0),
    (RankTier.GOLD, 1300.0),
    (RankTier.SILVER, 1100.0),
    (RankTier.BRONZE, 900.0),
)
