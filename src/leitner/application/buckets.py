"""
Conversions between the sparse and dense bucket forms.

Buckets are stored sparse at rest and materialized densely only where
index-based iteration is needed.
"""

from leitner.domain.constants import MAX_BUCKET, MIN_BUCKET
from leitner.domain.errors import InvalidBucketError
from leitner.domain.models import BucketMap, BucketRange, BucketSets


def validate_bucket_numbers(buckets: BucketMap) -> None:
    """Raise InvalidBucketError for any key outside [MIN_BUCKET, MAX_BUCKET]."""
    for bucket_number in buckets:
        if not MIN_BUCKET <= bucket_number <= MAX_BUCKET:
            raise InvalidBucketError(bucket_number)


def to_bucket_sets(buckets: BucketMap) -> BucketSets:
    """
    Convert a sparse bucket map into a dense list of sets.

    The list is indexed by bucket number and sized to the highest key.
    Every set is a fresh copy, so the result shares no state with the input.
    An empty map produces an empty list, not a list holding one empty set.

    Raises:
        InvalidBucketError: If any bucket number is outside [0, MAX_BUCKET].
    """
    if not buckets:
        return []

    validate_bucket_numbers(buckets)

    size = max(buckets) + 1
    bucket_sets: BucketSets = [set() for _ in range(size)]
    for bucket_number, cards in buckets.items():
        bucket_sets[bucket_number] = set(cards)

    return bucket_sets


def get_bucket_range(bucket_sets: BucketSets) -> BucketRange | None:
    """
    Find the lowest and highest bucket numbers that hold at least one card.

    Returns None if every bucket is empty.
    """
    populated = [idx for idx, cards in enumerate(bucket_sets) if cards]
    if not populated:
        return None
    return BucketRange(min_bucket=populated[0], max_bucket=populated[-1])
