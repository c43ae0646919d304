"""Tests for due-card selection and bucket transitions."""

import logging

import pytest

from leitner.application.scheduler import is_bucket_due, next_bucket, practice, update
from leitner.domain.constants import MAX_BUCKET
from leitner.domain.errors import (
    CardNotFoundError,
    DuplicateCardError,
    InvalidBucketError,
    InvalidDayError,
)
from leitner.domain.models import AnswerDifficulty


# ---------- practice ----------


class TestPractice:
    def test_bucket_zero_due_every_day(self, make_card):
        card1 = make_card("Q1", "A1")
        card2 = make_card("Q2", "A2")
        bucket_sets = [{card1, card2}, set(), set()]

        assert practice(bucket_sets, 5) == {card1, card2}

    def test_higher_buckets_on_their_days(self, make_card):
        card1 = make_card("Q1", "A1")
        card2 = make_card("Q2", "A2")
        bucket_sets = [set(), {card1}, {card2}]

        assert practice(bucket_sets, 1) == set()
        assert practice(bucket_sets, 2) == {card1}
        assert practice(bucket_sets, 3) == set()
        # Day 4 is a multiple of both 2 and 4
        assert practice(bucket_sets, 4) == {card1, card2}
        assert practice(bucket_sets, 6) == {card1}

    def test_day_zero_selects_everything(self, make_card):
        cards = [make_card(f"Q{i}", f"A{i}") for i in range(4)]
        bucket_sets = [{c} for c in cards]

        assert practice(bucket_sets, 0) == set(cards)

    def test_top_bucket_every_128_days(self, make_card):
        card = make_card("Q", "A")
        bucket_sets = [set()] * MAX_BUCKET + [{card}]

        assert practice(bucket_sets, 64) == set()
        assert practice(bucket_sets, 128) == {card}

    def test_empty_buckets(self):
        assert practice([], 3) == set()

    def test_result_is_new_set(self, make_card):
        card = make_card("Q", "A")
        bucket_sets = [{card}]

        due = practice(bucket_sets, 1)
        due.clear()

        assert bucket_sets == [{card}]

    def test_negative_day_rejected(self):
        with pytest.raises(InvalidDayError):
            practice([set()], -1)


@pytest.mark.parametrize(
    "bucket, day, expected",
    [(0, 7, True), (1, 7, False), (1, 8, True), (3, 8, True), (3, 12, False)],
)
def test_is_bucket_due(bucket, day, expected):
    assert is_bucket_due(bucket, day) is expected


# ---------- next_bucket ----------


@pytest.mark.parametrize(
    "current, difficulty, expected",
    [
        (0, AnswerDifficulty.EASY, 2),
        (0, AnswerDifficulty.HARD, 1),
        (0, AnswerDifficulty.WRONG, 0),
        (5, AnswerDifficulty.WRONG, 0),
        (6, AnswerDifficulty.EASY, 7),
        (7, AnswerDifficulty.HARD, 7),
        (-1, AnswerDifficulty.EASY, 1),
    ],
)
def test_next_bucket(current, difficulty, expected):
    assert next_bucket(current, difficulty) == expected


# ---------- update ----------


class TestUpdate:
    def test_easy_moves_two_buckets(self, make_card):
        card = make_card("Q1", "A1")
        result = update({0: {card}}, card, AnswerDifficulty.EASY)

        assert card in result[2]
        assert card not in result[0]

    def test_hard_moves_one_bucket(self, make_card):
        card = make_card("Q1", "A1")
        result = update({0: {card}}, card, AnswerDifficulty.HARD)

        assert card in result[1]
        assert card not in result[0]

    def test_wrong_resets_to_zero(self, make_card):
        card = make_card("Q1", "A1")

        assert card in update({0: {card}}, card, AnswerDifficulty.WRONG)[0]

        result = update({4: {card}}, card, AnswerDifficulty.WRONG)
        assert card in result[0]
        assert result[4] == set()

    def test_respects_bucket_ceiling(self, make_card):
        card = make_card("Q1", "A1")
        result = update({6: {card}}, card, AnswerDifficulty.EASY)

        assert card in result[7]
        assert 8 not in result

    def test_source_bucket_kept_when_emptied(self, make_card):
        card = make_card("Q1", "A1")
        result = update({3: {card}}, card, AnswerDifficulty.HARD)

        assert result[3] == set()
        assert card in result[4]

    def test_does_not_mutate_input(self, make_card):
        card = make_card("Q1", "A1")
        other = make_card("Q2", "A2")
        buckets = {0: {card, other}, 1: set()}

        result = update(buckets, card, AnswerDifficulty.HARD)

        assert buckets == {0: {card, other}, 1: set()}
        assert result[0] is not buckets[0]
        result[0].clear()
        assert other in buckets[0]

    def test_other_cards_untouched(self, make_card):
        card = make_card("Q1", "A1")
        other = make_card("Q1", "A1")
        result = update({2: {card, other}}, card, AnswerDifficulty.EASY)

        assert result[2] == {other}
        assert result[4] == {card}

    def test_card_in_exactly_one_bucket(self, make_card):
        card = make_card("Q1", "A1")
        buckets = {0: {card}}
        for difficulty in [AnswerDifficulty.EASY] * 5 + [AnswerDifficulty.WRONG]:
            buckets = update(buckets, card, difficulty)
            assert sum(card in cards for cards in buckets.values()) == 1
            assert max(buckets) <= MAX_BUCKET

    def test_missing_card_raises(self, make_card):
        card = make_card("Q1", "A1")
        with pytest.raises(CardNotFoundError):
            update({0: set()}, card, AnswerDifficulty.EASY)

    def test_missing_card_lenient(self, make_card, caplog):
        card = make_card("Q1", "A1")

        with caplog.at_level(logging.WARNING):
            result = update({}, card, AnswerDifficulty.EASY, strict=False)

        assert result == {1: {card}}
        assert "not found in any bucket" in caplog.text

    def test_duplicate_card_raises(self, make_card):
        card = make_card("Q1", "A1")
        with pytest.raises(DuplicateCardError) as exc_info:
            update({0: {card}, 3: {card}}, card, AnswerDifficulty.HARD)
        assert exc_info.value.bucket_numbers == [0, 3]

    def test_duplicate_card_lenient(self, make_card):
        card = make_card("Q1", "A1")
        result = update({0: {card}, 3: {card}}, card, AnswerDifficulty.HARD, strict=False)

        assert result == {0: set(), 3: set(), 4: {card}}

    @pytest.mark.parametrize("bucket", [-3, -1, MAX_BUCKET + 1])
    @pytest.mark.parametrize("strict", [True, False])
    def test_out_of_range_bucket_rejected(self, make_card, bucket, strict):
        card = make_card("Q1", "A1")
        buckets = {bucket: {card}}

        with pytest.raises(InvalidBucketError):
            update(buckets, card, AnswerDifficulty.HARD, strict=strict)
        assert buckets == {bucket: {card}}
