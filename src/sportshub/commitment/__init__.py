"""
Commitment tracking module.

Derives a player's participation penalty from their no-show strikes:
- One record per player per sport, advanced only by apply_strike()
- Penalty state computed on demand from the record and a reference time
- No timers and no decay: expired cooldowns fall back to a warning
"""

from sportshub.commitment.engine import apply_strike, can_participate, cooldown_remaining, penalty_state
from sportshub.commitment.records import CommitmentRecord, PenaltyState, new_commitment_record

__all__ = [
    "CommitmentRecord",
    "PenaltyState",
    "apply_strike",
    "can_participate",
    "cooldown_remaining",
    "new_commitment_record",
    "penalty_state",
]
