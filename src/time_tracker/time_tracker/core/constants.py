"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

MISSING_PUNCH_CUTOFF_HOUR = 18
RESERVE_DAYS = 7
PERIOD_LENGTH_DAYS = 14
RECENT_ENTRIES_LIMIT = 10
DEFAULT_SESSION_DAYS = 7

LOCKED_ENTRY_MESSAGE = "Time entry is locked during reserve period"
