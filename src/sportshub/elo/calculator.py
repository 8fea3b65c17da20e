"""
ELO rating calculator.

Implements the standard ELO formula with a per-player K-factor:

  Expected score: E_A = 1 / (1 + 10^((R_B - R_A) / S))
  New rating: R'_A = R_A + K_A * (actual - expected)

Where:
  R_A, R_B = Current ratings of players A and B
  K_A = Player A's own K-factor (see k_factor)
  S = Scale factor (400 for every sport)

Each player resolves K from their own rating and match count, so a match
between players in different K brackets is not zero-sum: each rating moves
according to how certain we are about that player, not a shared pool.
"""

from dataclasses import dataclass
from typing import Optional

from sportshub.sports import DEFAULT_SPORT_CONFIG, ELO_SCALE, SportConfig


@dataclass(frozen=True)
class EloRatingDelta:
    """
    Result of processing one match through the rating engine.

    Both players' deltas and new ratings are returned together so callers
    never need to run the engine twice for the same match.
    """

    # Points added to each rating (winner > 0, loser < 0)
    winner_delta: float
    loser_delta: float

    # Ratings after the match
    winner_new_rating: float
    loser_new_rating: float

    # K-factors each player was resolved to
    winner_k: float = 0.0
    loser_k: float = 0.0

    # Winner's pre-match expected score
    expected_winner: float = 0.5

    @property
    def is_zero_sum(self) -> bool:
        """Whether the winner gained exactly what the loser lost."""
        return abs(self.winner_delta + self.loser_delta) < 1e-9

    @property
    def was_upset(self) -> bool:
        """Whether the winner was the underdog going in."""
        return self.expected_winner < 0.5

    def __repr__(self) -> str:
        return (
            f"<EloRatingDelta(winner: {self.winner_delta:+.2f} -> {self.winner_new_rating:.2f}, "
            f"loser: {self.loser_delta:+.2f} -> {self.loser_new_rating:.2f})>"
        )


def expected_score(rating_a: float, rating_b: float, scale: float = ELO_SCALE) -> float:
    """
    Probability that player A beats player B.

    Equal ratings give exactly 0.5, and
    expected_score(a, b) + expected_score(b, a) == 1 exactly: the favourite's
    score is always taken as 1 minus the underdog's.

    Gaps of several thousand points saturate in float. The underdog's score
    rounds to 0.0 and the favourite's to 1.0, so a win by an overwhelming
    favourite can be worth 0 points.

    Example:
        expected_score(1400, 1000)  # ~0.909
    """
    if rating_a > rating_b:
        return 1.0 - expected_score(rating_b, rating_a, scale)
    try:
        return 1.0 / (1.0 + 10.0 ** ((rating_b - rating_a) / scale))
    except OverflowError:
        # B is so far ahead that 10^x no longer fits in a float
        return 0.0


def k_factor(rating: float, match_count: int, config: Optional[SportConfig] = None) -> float:
    """
    Resolve a player's K-factor.

    Priority order (first match wins):
    1. rating > 1600 -> 16 (strictly greater; 1600 itself is not high-rated)
    2. match_count < 10 -> 40 (provisional)
    3. otherwise -> 24 (standard)

    Args:
        rating: Player's current rating for the sport
        match_count: Rated matches the player has completed in the sport
        config: Sport tuning; defaults to the shared configuration

    Returns:
        The K-factor for this player
    """
    config = config or DEFAULT_SPORT_CONFIG
    if rating > config.high_rated_threshold:
        return config.k_high_rated
    if match_count < config.provisional_threshold:
        return config.k_provisional
    return config.k_standard


def calculate_delta(
    winner_rating: float,
    winner_match_count: int,
    loser_rating: float,
    loser_match_count: int,
    config: Optional[SportConfig] = None,
) -> EloRatingDelta:
    """
    Calculate the rating change for both players after a match.

    Args:
        winner_rating: Winner's rating before the match
        winner_match_count: Rated matches the winner had completed
        loser_rating: Loser's rating before the match
        loser_match_count: Rated matches the loser had completed
        config: Sport tuning; defaults to the shared configuration

    Returns:
        EloRatingDelta with each player's delta and new rating

    Example:
        # Two brand-new players at 1000: K=40, E=0.5
        delta = calculate_delta(1000, 0, 1000, 0)
        # delta.winner_delta == 20.0, delta.loser_delta == -20.0
    """
    config = config or DEFAULT_SPORT_CONFIG

    k_winner = k_factor(winner_rating, winner_match_count, config)
    k_loser = k_factor(loser_rating, loser_match_count, config)

    expected_winner = expected_score(winner_rating, loser_rating, config.elo_scale)
    expected_loser = expected_score(loser_rating, winner_rating, config.elo_scale)

    # Actual scores: winner 1.0, loser 0.0
    winner_delta = k_winner * (1.0 - expected_winner)
    loser_delta = k_loser * (0.0 - expected_loser)

    return EloRatingDelta(
        winner_delta=winner_delta,
        loser_delta=loser_delta,
        winner_new_rating=winner_rating + winner_delta,
        loser_new_rating=loser_rating + loser_delta,
        winner_k=k_winner,
        loser_k=k_loser,
        expected_winner=expected_winner,
    )
