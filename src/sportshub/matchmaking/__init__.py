"""
Matchmaking module.

Scores how fair a proposed pairing is and whether it is worth recommending.
"""

from sportshub.matchmaking.engine import (
    MINIMUM_RECOMMENDED_FAIRNESS,
    fairness_score,
    is_recommended,
    rank_opponents,
)

__all__ = [
    "MINIMUM_RECOMMENDED_FAIRNESS",
    "fairness_score",
    "is_recommended",
    "rank_opponents",
]
