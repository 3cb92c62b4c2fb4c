"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_REQUIRED_PERCENTAGE = 85.0
DEFAULT_WEEKS_PER_MONTH = 4
DEFAULT_MONTHS_IN_TERM = 3

MIN_PERCENTAGE = 0.0
MAX_PERCENTAGE = 100.0
