# Server-side constants and defaults. Each can be overridden from the environment.
from __future__ import annotations
import os
from pathlib import Path

# Word list loaded once at startup (one word per line).
WORDS_PATH = Path(os.getenv('WORDHUNT_WORDS_PATH', Path(__file__).parent / 'data' / 'words.txt'))

# Number of letters drawn for each new puzzle.
PUZZLE_LENGTH = int(os.getenv('WORDHUNT_PUZZLE_LENGTH', '14'))

# Accepted word lengths, inclusive.
MIN_WORD_LENGTH = 2
MAX_WORD_LENGTH = 14

LEADERBOARD_SIZE = int(os.getenv('WORDHUNT_LEADERBOARD_SIZE', '10'))

LOG_LEVEL = os.getenv('WORDHUNT_LOG_LEVEL', 'INFO').upper()

# Comma separated; '*' allows any origin.
CORS_ORIGINS = [o.strip() for o in os.getenv('WORDHUNT_CORS_ORIGINS', '*').split(',') if o.strip()]
