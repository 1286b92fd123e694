"""
Single place to read settings from the environment.

- Loads a local .env if present (dev convenience; in prod the platform injects env vars)
- Game rules (code length, palette, attempts) are fixed and live in types.py
"""

import os

from dotenv import load_dotenv

load_dotenv()

APP_ENV = os.getenv("APP_ENV", "local")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Where secrets come from: "local" (secrets module) or "random.org"
RANDOM_SOURCE = os.getenv("MASTERMIND_RANDOM_SOURCE", "local").lower()
RANDOM_ORG_TIMEOUT = float(os.getenv("RANDOM_ORG_TIMEOUT", "3.0"))
