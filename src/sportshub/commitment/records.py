"""Commitment records and the penalty state derived from them."""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import datetime
from typing import Literal, Optional

from sportshub.exceptions import InvalidCommitmentRecordError
from sportshub.sports import Sport, parse_sport

PenaltyKind = Literal["clear", "warned", "cooldown"]


@dataclass(frozen=True)
class CommitmentRecord:
    """
    A player's no-show history for one sport.

    ``last_strike_at`` is None exactly when ``strike_count`` is 0. Records are
    values: CommitmentEngine returns a new record for every strike.
    """

    player_id: uuid.UUID
    sport: Sport
    strike_count: int = 0
    last_strike_at: Optional[datetime] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "sport", parse_sport(self.sport))
        if self.strike_count < 0:
            raise InvalidCommitmentRecordError(
                f"strike_count must be >= 0, got {self.strike_count}"
            )
        if (self.strike_count == 0) != (self.last_strike_at is None):
            raise InvalidCommitmentRecordError(
                "last_strike_at must be set if and only if strike_count > 0"
            )


def new_commitment_record(player_id: uuid.UUID, sport: Sport | str) -> CommitmentRecord:
    """Return the zero-strike record a player starts with."""
    return CommitmentRecord(player_id=player_id, sport=parse_sport(sport))


@dataclass(frozen=True)
class PenaltyState:
    """
    Penalty state at a given moment: clear, warned, or cooldown until a time.

    Compare against the constructors rather than inspecting fields:

        state == PenaltyState.clear()
        state.kind == "cooldown" and state.until
    """

    kind: PenaltyKind
    until: Optional[datetime] = None

    def __post_init__(self) -> None:
        if (self.kind == "cooldown") != (self.until is not None):
            raise ValueError("until must be set if and only if kind is 'cooldown'")

    @classmethod
    def clear(cls) -> "PenaltyState":
        return cls("clear")

    @classmethod
    def warned(cls) -> "PenaltyState":
        return cls("warned")

    @classmethod
    def cooldown(cls, until: datetime) -> "PenaltyState":
        return cls("cooldown", until)

    @property
    def is_restricted(self) -> bool:
        return self.kind == "cooldown"

    def __repr__(self) -> str:
        if self.until is not None:
            return f"<PenaltyState.cooldown(until={self.until.isoformat()})>"
        return f"<PenaltyState.{self.kind}>"
