"""
Leitner scheduling rules.

Bucket i is reviewed every 2**i days; answers move a card up or reset it
to bucket 0. Both functions are pure and never mutate their arguments.
"""

import logging

from leitner.domain.constants import (
    EASY_STEP,
    HARD_STEP,
    MAX_BUCKET,
    MIN_BUCKET,
    MISSING_CARD_BUCKET,
)
from leitner.domain.errors import (
    CardNotFoundError,
    DuplicateCardError,
    InvalidDayError,
)
from leitner.domain.models import AnswerDifficulty, BucketMap, BucketSets, Flashcard

from .buckets import validate_bucket_numbers

logger = logging.getLogger(__name__)


def is_bucket_due(bucket_number: int, day: int) -> bool:
    """Return True if bucket `bucket_number` is scheduled for review on `day`."""
    return day % (2**bucket_number) == 0


def practice(bucket_sets: BucketSets, day: int) -> set[Flashcard]:
    """
    Collect every card due for review on the given day.

    A card in bucket i is due when `day % 2**i == 0`. Bucket 0 is not a
    special case; it is due every day because 2**0 == 1.

    Raises:
        InvalidDayError: If day is negative.
    """
    if day < 0:
        raise InvalidDayError(day)

    due: set[Flashcard] = set()
    for bucket_number, cards in enumerate(bucket_sets):
        if cards and is_bucket_due(bucket_number, day):
            due.update(cards)
    return due


def next_bucket(current: int, difficulty: AnswerDifficulty) -> int:
    """
    Compute the destination bucket for an answer.

    EASY skips ahead two buckets, HARD advances one, WRONG resets to the
    first bucket. The result never exceeds MAX_BUCKET.
    """
    if difficulty == AnswerDifficulty.EASY:
        return min(current + EASY_STEP, MAX_BUCKET)
    if difficulty == AnswerDifficulty.HARD:
        return min(current + HARD_STEP, MAX_BUCKET)
    return MIN_BUCKET


def update(
    buckets: BucketMap,
    card: Flashcard,
    difficulty: AnswerDifficulty,
    *,
    strict: bool = True,
) -> BucketMap:
    """
    Move a card to its next bucket after an answer.

    Returns a new bucket map; the input is left untouched. The card's old
    bucket is kept even when the move leaves it empty.

    Args:
        buckets: Current sparse bucket assignment.
        card: The card that was answered.
        difficulty: How hard the recall was.
        strict: If False, a card missing from every bucket is treated as
            coming from bucket -1 and a card found in several buckets is
            removed from all of them, instead of raising.

    Raises:
        CardNotFoundError: If strict and the card is in no bucket.
        DuplicateCardError: If strict and the card is in more than one bucket.
        InvalidBucketError: If any bucket number is outside [0, MAX_BUCKET].
    """
    validate_bucket_numbers(buckets)

    new_buckets: BucketMap = {number: set(cards) for number, cards in buckets.items()}

    sources = sorted(number for number, cards in buckets.items() if card in cards)

    if not sources:
        if strict:
            raise CardNotFoundError(card)
        logger.warning(
            f"Card {card.id} not found in any bucket; assuming bucket {MISSING_CARD_BUCKET}"
        )
        current = MISSING_CARD_BUCKET
    else:
        if len(sources) > 1 and strict:
            raise DuplicateCardError(card, sources)
        for number in sources:
            new_buckets[number].discard(card)
        current = sources[-1]

    target = next_bucket(current, difficulty)
    new_buckets.setdefault(target, set()).add(card)

    logger.debug(f"Card {card.id} answered {difficulty.name}: bucket {current} -> {target}")
    return new_buckets
