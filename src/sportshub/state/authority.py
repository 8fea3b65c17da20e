"""
The authoritative roster and match history.

StateAuthority is the only owner of the player list and the match list.
Every mutation (seeding, committing a match, registering or removing a
subscriber) runs under one re-entrant lock, and the resulting snapshot is
pushed to every subscriber before the lock is released. That gives all
subscribers the same gap-free sequence of snapshots in commit order, and a
new subscriber always starts from a complete snapshot taken either before or
after any in-flight mutation.

Typical flow:
    authority = get_authority()
    authority.seed_players()

    subscription = authority.subscribe()
    state = subscription.get()

    winner, loser = state.players
    delta = calculate_delta(
        winner.rating(Sport.TENNIS), winner.match_count(Sport.TENNIS),
        loser.rating(Sport.TENNIS), loser.match_count(Sport.TENNIS),
    )
    authority.apply_match_result(winner.id, loser.id, Sport.TENNIS, delta)
"""

from __future__ import annotations

import logging
import threading
import uuid
from datetime import datetime, timezone
from typing import Callable, Optional, Sequence

from sportshub.config import get_settings
from sportshub.elo.calculator import EloRatingDelta, calculate_delta
from sportshub.models import GameState, MatchResult, Player
from sportshub.sports import Sport, get_sport_config, parse_sport
from sportshub.state.subscription import Subscription

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class StateAuthority:
    """
    Single owner of the roster and match history.

    Usage:
        authority = StateAuthority(seed_names=["Ana", "Ben"], clock=lambda: fixed_time)
        authority.seed_players()
        with authority.subscribe() as subscription:
            ...

    Most code should use get_authority() for the shared process-wide
    instance; tests build their own so nothing leaks between them.

    Raises:
        ValueError: If seed_names has no non-blank name
    """

    def __init__(
        self,
        seed_names: Optional[Sequence[str]] = None,
        clock: Optional[Clock] = None,
        max_pending: Optional[int] = None,
    ) -> None:
        if seed_names is None or max_pending is None:
            settings = get_settings()
            if seed_names is None:
                seed_names = settings.seed_player_names
            if max_pending is None:
                max_pending = settings.subscriber_max_pending

        self.seed_names: tuple[str, ...] = tuple(name.strip() for name in seed_names if name.strip())
        if not self.seed_names:
            raise ValueError("seed_names must contain at least one non-blank name")
        self.max_pending = max_pending
        self._clock = clock or utc_now

        self._lock = threading.RLock()
        self._players: list[Player] = []
        self._index: dict[uuid.UUID, int] = {}
        self._matches: list[MatchResult] = []
        self._version = 0
        self._subscriptions: dict[uuid.UUID, Subscription] = {}

    # ------------------------------------------------------------------
    # Reading
    # ------------------------------------------------------------------

    def snapshot(self) -> GameState:
        """Return the current state without subscribing."""
        with self._lock:
            return self._current_state()

    @property
    def subscriber_count(self) -> int:
        with self._lock:
            return len(self._subscriptions)

    def subscribe(self) -> Subscription:
        """
        Register a subscriber.

        The current snapshot is buffered before this returns; every snapshot
        committed afterwards follows in order until the subscription closes.
        """
        with self._lock:
            subscription = Subscription(on_close=self._unsubscribe, max_pending=self.max_pending)
            self._subscriptions[subscription.id] = subscription
            subscription.deliver(self._current_state())
            logger.debug(
                "Registered subscription %s at version %d (%d active)",
                subscription.id, self._version, len(self._subscriptions),
            )
        return subscription

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def seed_players(self) -> None:
        """
        Install the seed roster at the initial rating.

        Does nothing (and publishes nothing) if the roster already has players.
        """
        with self._lock:
            if self._players:
                return
            for name in self.seed_names:
                self._add_player(Player(name=name))
            logger.info("Seeded roster with %d players", len(self._players))
            self._publish()

    def apply_match_result(
        self,
        winner_id: uuid.UUID,
        loser_id: uuid.UUID,
        sport: Sport | str,
        delta: EloRatingDelta,
        played_at: Optional[datetime] = None,
    ) -> None:
        """
        Commit a match outcome whose rating delta is already computed.

        Sets both players' ratings for ``sport`` from ``delta``, adds one to
        both match counts, appends a MatchResult and publishes the new
        snapshot. If either player is unknown, or both ids are the same,
        nothing changes and nothing is published.
        """
        sport = parse_sport(sport)
        with self._lock:
            if not self._can_commit(winner_id, loser_id, sport):
                return
            self._commit(winner_id, loser_id, sport, delta, played_at)

    def record_match(
        self,
        winner_id: uuid.UUID,
        loser_id: uuid.UUID,
        sport: Sport | str,
        played_at: Optional[datetime] = None,
    ) -> Optional[EloRatingDelta]:
        """
        Compute and commit a match outcome in one step.

        The delta is calculated from the players' ratings at commit time,
        inside the same critical section, so concurrent results for the same
        players never work from stale ratings.

        Returns:
            The applied delta, or None if the result was ignored
        """
        sport = parse_sport(sport)
        with self._lock:
            if not self._can_commit(winner_id, loser_id, sport):
                return None
            winner = self._players[self._index[winner_id]]
            loser = self._players[self._index[loser_id]]
            delta = calculate_delta(
                winner.rating(sport),
                winner.match_count(sport),
                loser.rating(sport),
                loser.match_count(sport),
                config=get_sport_config(sport),
            )
            self._commit(winner_id, loser_id, sport, delta, played_at)
            return delta

    # ------------------------------------------------------------------
    # Internals (all called with self._lock held)
    # ------------------------------------------------------------------

    def _add_player(self, player: Player) -> None:
        self._index[player.id] = len(self._players)
        self._players.append(player)

    def _can_commit(self, winner_id: uuid.UUID, loser_id: uuid.UUID, sport: Sport) -> bool:
        missing = [pid for pid in (winner_id, loser_id) if pid not in self._index]
        if missing:
            logger.warning(
                "Ignoring %s result %s beat %s: unknown player(s) %s",
                sport.value, winner_id, loser_id, ", ".join(str(pid) for pid in missing),
            )
            return False
        if winner_id == loser_id:
            logger.warning(
                "Ignoring %s result: player %s cannot beat themselves", sport.value, winner_id,
            )
            return False
        return True

    def _commit(
        self,
        winner_id: uuid.UUID,
        loser_id: uuid.UUID,
        sport: Sport,
        delta: EloRatingDelta,
        played_at: Optional[datetime],
    ) -> None:
        winner_index = self._index[winner_id]
        loser_index = self._index[loser_id]
        self._players[winner_index] = self._players[winner_index].with_match(
            sport, delta.winner_new_rating
        )
        self._players[loser_index] = self._players[loser_index].with_match(
            sport, delta.loser_new_rating
        )
        self._matches.append(
            MatchResult(
                winner_id=winner_id,
                loser_id=loser_id,
                sport=sport,
                played_at=played_at or self._clock(),
            )
        )
        logger.debug(
            "Committed %s match %s beat %s (%+.2f / %+.2f)",
            sport.value, winner_id, loser_id, delta.winner_delta, delta.loser_delta,
        )
        self._publish()

    def _current_state(self) -> GameState:
        return GameState(
            players=tuple(self._players),
            matches=tuple(self._matches),
            version=self._version,
        )

    def _publish(self) -> None:
        self._version += 1
        state = self._current_state()
        for subscription in list(self._subscriptions.values()):
            subscription.deliver(state)

    def _unsubscribe(self, subscription_id: uuid.UUID) -> None:
        with self._lock:
            if self._subscriptions.pop(subscription_id, None) is not None:
                logger.debug(
                    "Removed subscription %s (%d active)",
                    subscription_id, len(self._subscriptions),
                )


# Process-wide instance
_authority_instance: Optional[StateAuthority] = None
_authority_lock = threading.Lock()


def get_authority() -> StateAuthority:
    """Get the process-wide StateAuthority, building it on first use."""
    global _authority_instance
    with _authority_lock:
        if _authority_instance is None:
            _authority_instance = StateAuthority()
        return _authority_instance


def reset_authority() -> None:
    """
    Drop the process-wide StateAuthority (for testing).

    Open subscriptions on the old instance are closed; the next
    get_authority() call builds a fresh, empty one.
    """
    global _authority_instance
    with _authority_lock:
        if _authority_instance is not None:
            for subscription in list(_authority_instance._subscriptions.values()):
                subscription.close()
        _authority_instance = None
