import os
from decimal import Decimal
from pathlib import Path

# Base directory
BASE_DIR = Path(__file__).resolve().parent.parent

# Database
DATABASE_URL = os.getenv("DATABASE_URL", f"sqlite:///{BASE_DIR}/prode.db")

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Fallback rules used when no active prode_settings row exists
DEFAULT_MAX_BET = Decimal(os.getenv("PRODE_DEFAULT_MAX_BET", "10000"))
DEFAULT_CUTOFF_SECONDS = int(os.getenv("PRODE_DEFAULT_CUTOFF_SECONDS", "600"))
DEFAULT_CURRENCY = os.getenv("PRODE_DEFAULT_CURRENCY", "ARS")

# Highest accepted predicted score per side
MAX_SCORE = 99
