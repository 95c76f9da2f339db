# backend/settings.py
"""Runtime configuration, read once from environment variables."""

import os


def _flag(name, default="false"):
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


# Fractional digits of every Money value (2 = cents)
MONEY_DIGITS = int(os.getenv("GROUPTAB_MONEY_DIGITS", "2"))

LOG_LEVEL = os.getenv("GROUPTAB_LOG_LEVEL", "INFO").upper()

# Comma separated list, "*" allows any origin
CORS_ORIGINS = [o.strip() for o in os.getenv("GROUPTAB_CORS_ORIGINS", "*").split(",") if o.strip()]

HOST = os.getenv("GROUPTAB_HOST", "127.0.0.1")
PORT = int(os.getenv("GROUPTAB_PORT", "5000"))
DEBUG = _flag("GROUPTAB_DEBUG")

# Largest accepted amount, in whole-unit digits
MAX_AMOUNT_DIGITS = int(os.getenv("GROUPTAB_MAX_AMOUNT_DIGITS", "15"))
