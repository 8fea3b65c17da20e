"""Map ratings to rank tiers."""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from typing import Optional

from sportshub.models import Player
from sportshub.progression.tiers import TIER_FLOORS, RankTier
from sportshub.sports import Sport, parse_sport


@dataclass(frozen=True)
class ProgressionRecord:
    """
    A player's resolved tier for one sport.

    Derived from a snapshot, never stored by the authority, so display code
    does not have to repeat the threshold lookup.
    """

    player_id: uuid.UUID
    sport: Sport
    tier: RankTier
    current_rating: float


def tier(rating: float) -> RankTier:
    """
    Return the rank tier for a rating.

    Example:
        tier(899.9)  # RankTier.ROOKIE
        tier(900)    # RankTier.BRONZE
    """
    for rank, floor in TIER_FLOORS:
        if rating >= floor:
            return rank
    return RankTier.ROOKIE


def tier_floor(rank: RankTier) -> Optional[float]:
    """Inclusive lower bound of a tier; None for Rookie, which has no floor."""
    for candidate, floor in TIER_FLOORS:
        if candidate == rank:
            return floor
    return None


def progression_record(player_id: uuid.UUID, sport: Sport | str, rating: float) -> ProgressionRecord:
    return ProgressionRecord(
        player_id=player_id,
        sport=parse_sport(sport),
        tier=tier(rating),
        current_rating=rating,
    )


def progression_for(player: Player, sport: Sport | str) -> ProgressionRecord:
    """Resolve a player's tier from their current rating in ``sport``."""
    return progression_record(player.id, sport, player.rating(sport))
