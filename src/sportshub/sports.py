"""
Supported sports and their rating configuration.

Every sport keeps its own rating track, but all four currently share the
same tuning. SportConfig exists so a sport can be tuned on its own later
without changing any engine's interface.

ELO scale: how rating differences translate to win probability.
  With a scale of 400, a player rated 400 points above their opponent
  has an expected score of about 0.909.

K-factor schedule (first matching rule wins):
  1. rating > high_rated_threshold        -> k_high_rated (slow movement at the top)
  2. match_count < provisional_threshold  -> k_provisional (unproven players move fast)
  3. otherwise                            -> k_standard

Fairness scale: the gap at which the matchmaking fairness score halves.
  Locked to the ELO scale, since a 400-point gap is already a major mismatch.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from sportshub.exceptions import UnknownSportError


class Sport(str, Enum):
    """Sports with an independent rating track."""

    BASKETBALL = "basketball"
    FOOTBALL = "football"
    SOCCER = "soccer"
    TENNIS = "tennis"


ALL_SPORTS: tuple[Sport, ...] = tuple(Sport)

# Rating given to a player for a sport they have not played yet
INITIAL_RATING = 1000.0

# Denominator in E(A) = 1 / (1 + 10^((R_B - R_A) / scale))
ELO_SCALE = 400.0

K_FACTOR_DEFAULTS = {
    "provisional": 40.0,         # First 10 rated matches
    "standard": 24.0,            # Established players
    "high_rated": 16.0,          # Rating strictly above 1600
    "provisional_threshold": 10,  # Matches before a player is established
    "high_rated_threshold": 1600.0,
}

FAIRNESS_SCALE = 400.0


@dataclass(frozen=True)
class SportConfig:
    """Tuning constants for one sport's rating track."""

    initial_rating: float = INITIAL_RATING
    elo_scale: float = ELO_SCALE
    k_provisional: float = K_FACTOR_DEFAULTS["provisional"]
    k_standard: float = K_FACTOR_DEFAULTS["standard"]
    k_high_rated: float = K_FACTOR_DEFAULTS["high_rated"]
    provisional_threshold: int = K_FACTOR_DEFAULTS["provisional_threshold"]
    high_rated_threshold: float = K_FACTOR_DEFAULTS["high_rated_threshold"]
    fairness_scale: float = FAIRNESS_SCALE


DEFAULT_SPORT_CONFIG = SportConfig()

SPORT_CONFIGS: dict[Sport, SportConfig] = {sport: DEFAULT_SPORT_CONFIG for sport in ALL_SPORTS}


def parse_sport(value: Sport | str) -> Sport:
    """
    Resolve a Sport from an enum member or its name.

    Names are matched case-insensitively after trimming whitespace.

    Raises:
        UnknownSportError: If the value is not one of the supported sports
    """
    if isinstance(value, Sport):
        return value
    if isinstance(value, str):
        try:
            return Sport(value.strip().lower())
        except ValueError as exc:
            raise UnknownSportError(value) from exc
    raise UnknownSportError(value)


def get_sport_config(sport: Sport | str) -> SportConfig:
    """Return the rating configuration for a sport."""
    return SPORT_CONFIGS[parse_sport(sport)]
