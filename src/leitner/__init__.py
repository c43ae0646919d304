"""leitner: spaced-repetition scheduling core built on the Leitner box system."""

from leitner.application import (
    LeitnerConfig,
    LeitnerService,
    ProgressReport,
    StageProgress,
    compute_progress,
    get_bucket_range,
    get_hint,
    practice,
    to_bucket_sets,
    update,
)
from leitner.domain import (
    AnswerDifficulty,
    BucketMap,
    BucketRange,
    BucketSets,
    CardNotFoundError,
    DuplicateCardError,
    Flashcard,
    InvalidBucketError,
    InvalidDayError,
    LeitnerError,
)

__version__ = "0.1.0"

__all__ = [
    "AnswerDifficulty",
    "BucketMap",
    "BucketRange",
    "BucketSets",
    "Flashcard",
    "LeitnerError",
    "CardNotFoundError",
    "DuplicateCardError",
    "InvalidBucketError",
    "InvalidDayError",
    "to_bucket_sets",
    "get_bucket_range",
    "practice",
    "update",
    "get_hint",
    "compute_progress",
    "ProgressReport",
    "StageProgress",
    "LeitnerConfig",
    "LeitnerService",
]
