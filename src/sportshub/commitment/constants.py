"""
No-show penalty constants.

Strikes are tracked per player per sport and never decay. Cooldowns are
computed state: there are no timers, only a comparison between the last
strike, the window below and the time the caller asks about.

  0 strikes              -> clear
  1 strike               -> warned
  2 strikes, within 24h  -> cooldown until last strike + 24h
  3+ strikes, within 72h -> cooldown until last strike + 72h
  expired cooldown       -> warned (never back to clear)
"""

from datetime import timedelta

# A player with exactly this many strikes is warned, with no restriction
WARNING_STRIKE_COUNT = 1

# Any count above the warning opens the short window; from here on it is the long one
LONG_COOLDOWN_STRIKE_COUNT = 3

SHORT_COOLDOWN_DURATION = timedelta(hours=24)
LONG_COOLDOWN_DURATION = timedelta(hours=72)
