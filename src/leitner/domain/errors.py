"""Exceptions raised by the scheduling core for ill-formed input."""


class LeitnerError(Exception):
    """Base class for all scheduling errors."""


class CardNotFoundError(LeitnerError, KeyError):
    """The card is not present in any bucket."""

    def __init__(self, card):
        self.card = card
        super().__init__(f"Card {card.id} ({card.front!r}) is not in any bucket")

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0])


class DuplicateCardError(LeitnerError):
    """The card occupies more than one bucket."""

    def __init__(self, card, bucket_numbers: list[int]):
        self.card = card
        self.bucket_numbers = bucket_numbers
        super().__init__(f"Card {card.id} found in buckets {bucket_numbers}")


class InvalidBucketError(LeitnerError, ValueError):
    """A bucket number is outside [MIN_BUCKET, MAX_BUCKET]."""

    def __init__(self, bucket_number: int):
        self.bucket_number = bucket_number
        super().__init__(f"Invalid bucket number: {bucket_number}")


class InvalidDayError(LeitnerError, ValueError):
    """A day number is negative."""

    def __init__(self, day: int):
        self.day = day
        super().__init__(f"Invalid day: {day}")
