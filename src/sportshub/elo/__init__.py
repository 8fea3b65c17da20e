"""
ELO rating module.

Implements the per-sport rating engine with:
- Expected score on a 400-point scale
- Per-player K-factor schedule (provisional, standard, high-rated)
- Rating deltas for both sides of a match in one call
"""

from sportshub.elo.calculator import EloRatingDelta, calculate_delta, expected_score, k_factor

__all__ = [
    "EloRatingDelta",
    "calculate_delta",
    "expected_score",
    "k_factor",
]
