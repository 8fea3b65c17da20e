"""
SportsHub - Multi-Sport Player Ratings Core

Tracks competitive players across basketball, football, soccer and tennis.
Everything lives in memory: there is one authoritative store of players and
match results, and any number of observers can watch it change.

Main components:
- elo: ELO expected score, K-factor schedule and rating deltas
- commitment: No-show strikes and the penalty state derived from them
- progression: Rank tiers derived from a rating
- matchmaking: Fairness score for a proposed pairing
- state: The authoritative roster/match store and its subscriptions
- config: Environment-driven settings and logging setup
"""

__version__ = "1.0.0"
