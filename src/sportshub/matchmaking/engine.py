"""
Matchmaking fairness score.

Formula:
    fairness = 1 / (1 + |rating_a - rating_b| / fairness_scale)

The scale comes from the sport's configuration (400, the same as the ELO
scale), so a 400-point gap halves the score. Identical ratings score 1.0,
the score is symmetric, and it falls strictly as the gap grows.
"""

from __future__ import annotations

from typing import Iterable

from sportshub.models import Player
from sportshub.sports import Sport, get_sport_config

# Pairings scoring below this are not recommended.
# A 20-point gap scores ~0.952 (recommended), a 600-point gap 0.4 (not).
MINIMUM_RECOMMENDED_FAIRNESS = 0.6


def fairness_score(rating_a: float, rating_b: float, sport: Sport | str) -> float:
    """
    How evenly matched two ratings are, from 0.0 (hopeless) to 1.0 (even).

    Example:
        fairness_score(1000, 1400, Sport.TENNIS)  # 0.5
    """
    scale = get_sport_config(sport).fairness_scale
    return 1.0 / (1.0 + abs(rating_a - rating_b) / scale)


def is_recommended(rating_a: float, rating_b: float, sport: Sport | str) -> bool:
    return fairness_score(rating_a, rating_b, sport) >= MINIMUM_RECOMMENDED_FAIRNESS


def rank_opponents(
    player: Player,
    candidates: Iterable[Player],
    sport: Sport | str,
) -> list[tuple[Player, float]]:
    """
    Score every other candidate against ``player`` in ``sport``.

    Returns (candidate, score) pairs, fairest first. Candidates with equal
    scores keep their input order. The player itself is skipped if present.
    """
    rating = player.rating(sport)
    scored = [
        (candidate, fairness_score(rating, candidate.rating(sport), sport))
        for candidate in candidates
        if candidate.id != player.id
    ]
    scored.sort(key=lambda pair: pair[1], reverse=True)
    return scored
