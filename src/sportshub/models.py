"""
Value types shared by the engines and the state authority.

Everything here is immutable. The authority replaces a Player with an
updated copy when a match is committed; nothing is ever changed in place,
so a GameState handed to a subscriber can never shift under it.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field, replace
from datetime import datetime
from types import MappingProxyType
from typing import Mapping, Optional

from sportshub.exceptions import InvalidMatchError
from sportshub.sports import Sport, get_sport_config, parse_sport


def _frozen_sport_map(values: Mapping) -> Mapping:
    return MappingProxyType({parse_sport(sport): value for sport, value in values.items()})


@dataclass(frozen=True)
class RatingRecord:
    """A player's rating for one sport at a point in time."""

    player_id: uuid.UUID
    sport: Sport
    rating: float
    match_count: int
    recorded_at: datetime


@dataclass(frozen=True)
class Player:
    """
    A player tracked across every sport.

    ``ratings`` and ``match_counts`` only hold sports the player has played.
    Use rating() and match_count(), which fall back to the sport's initial
    rating (1000) and zero respectively.
    """

    name: str
    id: uuid.UUID = field(default_factory=uuid.uuid4)
    ratings: Mapping[Sport, float] = field(default_factory=dict)
    match_counts: Mapping[Sport, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "ratings", _frozen_sport_map(self.ratings))
        object.__setattr__(self, "match_counts", _frozen_sport_map(self.match_counts))

    def __hash__(self) -> int:
        return hash(self.id)

    def rating(self, sport: Sport | str) -> float:
        sport = parse_sport(sport)
        return self.ratings.get(sport, get_sport_config(sport).initial_rating)

    def match_count(self, sport: Sport | str) -> int:
        return self.match_counts.get(parse_sport(sport), 0)

    def with_match(self, sport: Sport | str, new_rating: float) -> "Player":
        """Return a copy with a new rating for ``sport`` and one more match played."""
        sport = parse_sport(sport)
        ratings = dict(self.ratings)
        ratings[sport] = new_rating
        match_counts = dict(self.match_counts)
        match_counts[sport] = match_counts.get(sport, 0) + 1
        return replace(self, ratings=ratings, match_counts=match_counts)

    def rating_record(self, sport: Sport | str, recorded_at: datetime) -> RatingRecord:
        sport = parse_sport(sport)
        return RatingRecord(
            player_id=self.id,
            sport=sport,
            rating=self.rating(sport),
            match_count=self.match_count(sport),
            recorded_at=recorded_at,
        )

    def __repr__(self) -> str:
        return f"<Player(name={self.name!r}, id={self.id})>"


@dataclass(frozen=True)
class MatchResult:
    """
    The outcome of a completed match between two players.

    ``sport`` decides which rating track was updated.

    Raises:
        InvalidMatchError: If winner and loser are the same player
    """

    winner_id: uuid.UUID
    loser_id: uuid.UUID
    sport: Sport
    played_at: datetime

    def __post_init__(self) -> None:
        if self.winner_id == self.loser_id:
            raise InvalidMatchError(f"player {self.winner_id} cannot be both winner and loser")
        object.__setattr__(self, "sport", parse_sport(self.sport))


@dataclass(frozen=True)
class GameState:
    """
    Immutable snapshot of the roster and match history.

    ``version`` is 0 for the initial empty state and goes up by exactly one
    with every committed change, so a subscriber can check it saw every
    snapshot in order.
    """

    players: tuple[Player, ...] = ()
    matches: tuple[MatchResult, ...] = ()
    version: int = 0

    def player(self, player_id: uuid.UUID) -> Optional[Player]:
        for player in self.players:
            if player.id == player_id:
                return player
        return None
