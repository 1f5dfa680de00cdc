"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from decimal import Decimal

APP_VERSION = "1.0.0"

RECENT_TRANSACTIONS_LIMIT = 10
MONTHS_PER_YEAR = 12

MIN_PASSWORD_LENGTH = 6

# Share of gross pay withheld for taxes and benefits
STANDARD_DEDUCTION_RATE = Decimal("0.20")

UNKNOWN_LABEL = "Unknown"

# Largest value a NUMERIC(12, 2) column holds
MAX_AMOUNT = Decimal("9999999999.99")

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100
