"""
Authoritative state module.

Owns the roster and match history and pushes an immutable snapshot to every
subscriber after each change:
- StateAuthority: serialized mutations, ordered fan-out
- Subscription: per-subscriber snapshot buffer
- get_authority(): the lazily built process-wide instance
"""

from sportshub.state.authority import StateAuthority, get_authority, reset_authority
from sportshub.state.subscription import Subscription

__all__ = [
    "StateAuthority",
    "Subscription",
    "get_authority",
    "reset_authority",
]
