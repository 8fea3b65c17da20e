"""
Commitment engine: penalty state and strike bookkeeping.

Pure functions. The reference time is always passed in by the caller, so the
whole table can be tested without real time passing.
"""

from datetime import datetime, timedelta

from sportshub.commitment.constants import (
    LONG_COOLDOWN_DURATION,
    LONG_COOLDOWN_STRIKE_COUNT,
    SHORT_COOLDOWN_DURATION,
    WARNING_STRIKE_COUNT,
)
from sportshub.commitment.records import CommitmentRecord, PenaltyState


def penalty_state(record: CommitmentRecord, now: datetime) -> PenaltyState:
    """
    Resolve a player's penalty state for one sport at ``now``.

    Strike count never decays, so an expired cooldown downgrades to
    warned, not clear.

    Args:
        record: The player's commitment record for the sport
        now: Point in time to evaluate at

    Returns:
        PenaltyState.clear(), PenaltyState.warned() or PenaltyState.cooldown(until)

    Examples:
        # 2 strikes, asked 12 hours after the last one
        penalty_state(record, last + timedelta(hours=12))  # cooldown until last + 24h

        # Same record 25 hours later
        penalty_state(record, last + timedelta(hours=25))  # warned
    """
    if record.strike_count == 0:
        return PenaltyState.clear()
    if record.strike_count == WARNING_STRIKE_COUNT or record.last_strike_at is None:
        return PenaltyState.warned()

    if record.strike_count >= LONG_COOLDOWN_STRIKE_COUNT:
        window = LONG_COOLDOWN_DURATION
    else:
        # Between WARNING_STRIKE_COUNT and LONG_COOLDOWN_STRIKE_COUNT
        window = SHORT_COOLDOWN_DURATION

    expiry = record.last_strike_at + window
    if now < expiry:
        return PenaltyState.cooldown(expiry)
    return PenaltyState.warned()


def apply_strike(record: CommitmentRecord, at: datetime) -> CommitmentRecord:
    """
    Return a new record with one more strike, recorded at ``at``.

    The input record is left untouched; player and sport carry over.
    """
    return CommitmentRecord(
        player_id=record.player_id,
        sport=record.sport,
        strike_count=record.strike_count + 1,
        last_strike_at=at,
    )


def cooldown_remaining(record: CommitmentRecord, now: datetime) -> timedelta:
    """Time left in the current cooldown, or zero when not in one."""
    state = penalty_state(record, now)
    if state.until is None:
        return timedelta(0)
    return state.until - now


def can_participate(record: CommitmentRecord, now: datetime) -> bool:
    """Whether the player may join a match in this sport at ``now``."""
    return not penalty_state(record, now).is_restricted
