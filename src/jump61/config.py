# src/jump61/config.py

from __future__ import annotations

DEFAULT_SIZE = 6

# Search
SEARCH_DEPTH = 4
WINNING_VALUE = 1_000_000  # must stay strictly inside the +/-inf search bounds

# UI toggles
USE_COLOR = True
CLEAR_SCREEN = True

# Self-play defaults
SELFPLAY_GAMES = 10
SELFPLAY_OPENING_MOVES = 2
SELFPLAY_MAX_MOVES = 400

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
