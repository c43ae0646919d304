# Domain Package
from .errors import (
    CardNotFoundError,
    DuplicateCardError,
    InvalidBucketError,
    InvalidDayError,
    LeitnerError,
)
from .models import (
    STAGES,
    AnswerDifficulty,
    BucketMap,
    BucketRange,
    BucketSets,
    Flashcard,
    History,
    Stage,
)

__all__ = [
    "AnswerDifficulty",
    "BucketMap",
    "BucketRange",
    "BucketSets",
    "Flashcard",
    "History",
    "Stage",
    "STAGES",
    "LeitnerError",
    "CardNotFoundError",
    "DuplicateCardError",
    "InvalidBucketError",
    "InvalidDayError",
]
