"""
Domain models for the Leitner scheduling core.

These are pure data structures with no I/O or external dependencies
beyond ID generation.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from enum import IntEnum

from ulid import ULID

from .constants import (
    ADVANCED_BUCKETS,
    BEGINNER_BUCKETS,
    INTERMEDIATE_BUCKETS,
)


def generate_card_id() -> str:
    """Generate a unique card ID using ULID."""
    return f"card_{ULID()}"


class AnswerDifficulty(IntEnum):
    """How hard it was to recall a card during review."""

    WRONG = 0
    HARD = 1
    EASY = 2


@dataclass(frozen=True, eq=False)
class Flashcard:
    """
    A single flashcard.

    Cards compare and hash by identity, not by content: two cards with the
    same text are still two different members of a bucket.

    Attributes:
        front: Prompt text.
        back: Answer text.
        hint: Optional hint shown before the answer ("" when absent).
        tags: Free-form labels, stored as a frozenset.
        id: Generated ULID-based identifier.
    """

    front: str
    back: str
    hint: str = ""
    tags: frozenset[str] = field(default_factory=frozenset)
    id: str = field(default_factory=generate_card_id)

    def __post_init__(self):
        if isinstance(self.tags, str):
            # A bare string is one tag, not a sequence of characters
            object.__setattr__(self, "tags", frozenset({self.tags}))
        elif not isinstance(self.tags, frozenset):
            object.__setattr__(self, "tags", frozenset(self.tags))


@dataclass(frozen=True)
class BucketRange:
    """Lowest and highest populated bucket numbers."""

    min_bucket: int
    max_bucket: int


@dataclass(frozen=True)
class Stage:
    """A named, inclusive span of bucket numbers used for progress reporting."""

    name: str
    min_bucket: int
    max_bucket: int

    def contains(self, bucket_number: int) -> bool:
        return self.min_bucket <= bucket_number <= self.max_bucket


STAGES: tuple[Stage, ...] = (
    Stage("Beginner", *BEGINNER_BUCKETS),
    Stage("Intermediate", *INTERMEDIATE_BUCKETS),
    Stage("Advanced", *ADVANCED_BUCKETS),
)

# Sparse form: bucket number -> cards. Missing keys are empty buckets.
BucketMap = dict[int, set[Flashcard]]
# Dense form: index is the bucket number.
BucketSets = list[set[Flashcard]]
History = Mapping[Flashcard, Sequence[AnswerDifficulty]]
