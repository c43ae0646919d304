"""
Leitner Service — Application layer facade.

Binds configuration to the pure scheduling functions for callers that
hold a single bucket map across a study session.
"""

import logging

from leitner.domain.models import (
    AnswerDifficulty,
    BucketMap,
    BucketRange,
    BucketSets,
    Flashcard,
    History,
)

from .buckets import get_bucket_range, to_bucket_sets
from .config import LeitnerConfig
from .hints import get_hint
from .progress import ProgressReport, compute_progress
from .scheduler import practice, update

logger = logging.getLogger(__name__)


class LeitnerService:
    """
    Stateless facade over the scheduling core.

    The service never stores buckets; each method takes the caller's
    current snapshot and returns new data.
    """

    def __init__(self, config: LeitnerConfig | None = None):
        """
        Args:
            config: Optional settings; uses defaults if not provided.
        """
        self._config = config or LeitnerConfig()

    @property
    def config(self) -> LeitnerConfig:
        return self._config

    def buckets_for_review(self, buckets: BucketMap) -> BucketSets:
        return to_bucket_sets(buckets)

    def bucket_range(self, buckets: BucketMap) -> BucketRange | None:
        return get_bucket_range(to_bucket_sets(buckets))

    def due_cards(self, buckets: BucketMap, day: int) -> set[Flashcard]:
        """Cards to review on `day`, where `day` comes from the caller's day counter."""
        due = practice(to_bucket_sets(buckets), day)
        logger.info(f"Day {day}: {len(due)} card(s) due")
        return due

    def record_answer(
        self,
        buckets: BucketMap,
        card: Flashcard,
        difficulty: AnswerDifficulty,
    ) -> BucketMap:
        return update(buckets, card, difficulty, strict=self._config.strict)

    def hint_for(self, card: Flashcard) -> str:
        return get_hint(card)

    def progress(self, buckets: BucketMap, history: History) -> ProgressReport:
        return compute_progress(buckets, history)
