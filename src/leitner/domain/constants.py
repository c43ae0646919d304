"""Centralized constants for the Leitner scheduling core.

Bucket policy lives here so every layer imports from a single source of truth.
These are fixed by design and intentionally not exposed through configuration.
"""

# ---------- Buckets ----------
MIN_BUCKET = 0
MAX_BUCKET = 7
MISSING_CARD_BUCKET = -1  # Source bucket assumed for an unknown card in lenient mode

# ---------- Transitions ----------
EASY_STEP = 2
HARD_STEP = 1

# ---------- Hints ----------
HINT_MASK_CHAR = "*"
SHORT_FRONT_MAX_LEN = 3
SHORT_HINT_PREFIX_LEN = 1
LONG_HINT_PREFIX_LEN = 3

# ---------- Progress Stages ----------
BEGINNER_BUCKETS = (0, 1)
INTERMEDIATE_BUCKETS = (2, 4)
ADVANCED_BUCKETS = (5, 7)
