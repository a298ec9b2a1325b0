"""
Environment configuration module
Loads and validates the optional settings of the amount library.
"""

import decimal
import os

from dotenv import load_dotenv

# Load .env file (for local development)
load_dotenv()

# Rounding used when an amount is cut to li (0.001) precision before formatting.
# Must name one of the decimal module's ROUND_* constants.
ROUNDING = os.getenv('CN_AMOUNT_ROUNDING', decimal.ROUND_HALF_EVEN)

# Log level used by the command line entry point (the library never configures logging)
LOG_LEVEL = os.getenv('CN_AMOUNT_LOG_LEVEL', 'WARNING').upper()

# Validate settings
_VALID_ROUNDINGS = {
    decimal.ROUND_CEILING,
    decimal.ROUND_DOWN,
    decimal.ROUND_FLOOR,
    decimal.ROUND_HALF_DOWN,
    decimal.ROUND_HALF_EVEN,
    decimal.ROUND_HALF_UP,
    decimal.ROUND_UP,
    decimal.ROUND_05UP,
}

if ROUNDING not in _VALID_ROUNDINGS:
    raise ValueError(f"Invalid CN_AMOUNT_ROUNDING: {ROUNDING} (expected one of: {', '.join(sorted(_VALID_ROUNDINGS))})")
