"""Hint generation for flashcards."""

from leitner.domain.constants import (
    HINT_MASK_CHAR,
    LONG_HINT_PREFIX_LEN,
    SHORT_FRONT_MAX_LEN,
    SHORT_HINT_PREFIX_LEN,
)
from leitner.domain.models import Flashcard


def mask_text(text: str, visible: int, mask_char: str = HINT_MASK_CHAR) -> str:
    """Keep the first `visible` characters and mask the rest, preserving length."""
    prefix = text[:visible]
    return prefix + mask_char * (len(text) - len(prefix))


def get_hint(card: Flashcard) -> str:
    """
    Return the card's own hint, or derive one from its front text.

    A derived hint reveals the first character of fronts up to three
    characters long and the first three characters otherwise.
    """
    if card.hint and card.hint.strip():
        return card.hint

    front = card.front
    visible = SHORT_HINT_PREFIX_LEN if len(front) <= SHORT_FRONT_MAX_LEN else LONG_HINT_PREFIX_LEN
    return mask_text(front, visible)
