"""
Pytest configuration.

Environment is set before any rng_coin import, since rng_coin.config loads
settings at import time.
"""

import os
from pathlib import Path

# Never pick up a developer's config.json or .env overrides
os.environ["CONFIG_FILE"] = str(Path(__file__).parent / "no-such-config.json")
for key in ("PORT", "SERVER_PORT", "COIN_MIN_FLIPS", "COIN_MAX_FLIPS", "LOG_TO_FILE"):
    os.environ.pop(key, None)
os.environ.setdefault("LOG_LEVEL", "INFO")
