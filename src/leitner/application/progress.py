"""
Progress aggregation over bucket occupancy and review history.

This is a pure computation module with no I/O.
"""

from pydantic import BaseModel, Field

from leitner.domain.models import STAGES, AnswerDifficulty, BucketMap, History, Stage

from .buckets import validate_bucket_numbers


class StageProgress(BaseModel):
    """Card count and share of the deck for one learning stage."""

    name: str
    card_count: int
    percentage: float


class ProgressReport(BaseModel):
    """Summary of a deck's learning progress."""

    total_cards: int
    stages: list[StageProgress]

    # History-derived metrics
    total_reviews: int = 0
    answer_counts: dict[str, int] = Field(default_factory=dict)
    accuracy: float = 0.0  # Percentage of reviews not answered WRONG

    def stage(self, name: str) -> StageProgress | None:
        for stage in self.stages:
            if stage.name == name:
                return stage
        return None


def _percentage(part: int, whole: int) -> float:
    if whole == 0:
        return 0.0
    return part / whole * 100


def compute_progress(
    buckets: BucketMap,
    history: History,
    stages: tuple[Stage, ...] = STAGES,
) -> ProgressReport:
    """
    Summarize how many cards sit in each learning stage.

    Stage counts come from bucket occupancy only. The history contributes
    review totals and accuracy. Percentages are 0 for an empty deck.

    Raises:
        InvalidBucketError: If any bucket number is outside [0, MAX_BUCKET].
    """
    validate_bucket_numbers(buckets)

    total_cards = sum(len(cards) for cards in buckets.values())

    stage_breakdown = []
    for stage in stages:
        count = sum(
            len(cards) for number, cards in buckets.items() if stage.contains(number)
        )
        stage_breakdown.append(
            StageProgress(
                name=stage.name,
                card_count=count,
                percentage=_percentage(count, total_cards),
            )
        )

    answer_counts = {difficulty.name: 0 for difficulty in AnswerDifficulty}
    for answers in history.values():
        for answer in answers:
            answer_counts[answer.name] += 1

    total_reviews = sum(answer_counts.values())
    correct = total_reviews - answer_counts[AnswerDifficulty.WRONG.name]

    return ProgressReport(
        total_cards=total_cards,
        stages=stage_breakdown,
        total_reviews=total_reviews,
        answer_counts=answer_counts,
        accuracy=_percentage(correct, total_reviews),
    )
