"""Tests for EntropyEstimator."""

from __future__ import annotations

import math

import pytest

from guardian.analyzers.strength import (
    EntropyEstimator,
    has_keyboard_sequence,
    has_numeric_sequence,
    has_repeated_run,
    score_from_bits,
)
from guardian.core.models import StrengthLabel
from guardian.data.reference import ReferenceSecretSet


@pytest.fixture
def estimator():
    return EntropyEstimator()


class TestPatterns:
    def test_repeated_run(self):
        assert has_repeated_run("xxaaab")
        assert not has_repeated_run("aabbaa")

    def test_numeric_sequence(self):
        assert has_numeric_sequence("pw7890!")
        assert not has_numeric_sequence("1357")

    def test_keyboard_sequence_ignores_case(self):
        assert has_keyboard_sequence("myQWERpass")
        assert has_keyboard_sequence("ZXCV")
        assert not has_keyboard_sequence("qwe-rty")


class TestScoreBuckets:
    @pytest.mark.parametrize(
        "bits, score",
        [(0, 0), (27.99, 0), (28, 1), (35.9, 1), (36, 2), (59.9, 2), (60, 3), (80, 4), (500, 4)],
    )
    def test_half_open_buckets(self, bits, score):
        assert score_from_bits(bits) == score


class TestAssess:
    def test_empty_secret(self, estimator):
        result = estimator.assess("")
        assert result.entropy_bits == 0.0
        assert result.score == 0
        assert result.label is StrengthLabel.VERY_WEAK
        assert result.signals.pool_size == 1

    def test_reference_secret_is_capped(self, estimator):
        result = estimator.assess("password")
        assert result.entropy_bits <= 8.0
        assert result.score == 0
        assert result.label is StrengthLabel.COMPROMISED
        assert result.status_text == "Compromised (very common)"

    def test_reference_match_is_exact(self, estimator):
        result = estimator.assess("Password")
        assert result.label is StrengthLabel.FAIR
        assert result.entropy_bits == pytest.approx(8 * math.log2(52))

    def test_pool_sizes(self, estimator):
        assert estimator.signals("a").pool_size == 26
        assert estimator.signals("aZ").pool_size == 52
        assert estimator.signals("aZ9").pool_size == 62
        assert estimator.signals("aZ9!").pool_size == 94
        assert estimator.signals("é").pool_size == 10
        assert estimator.signals("a b").pool_size == 36

    def test_repeat_penalty(self, estimator):
        plain = estimator.assess("abcXyz")
        repeated = estimator.assess("aaaXyz")
        assert plain.entropy_bits - repeated.entropy_bits == pytest.approx(10.0)

    def test_penalties_stack(self, estimator):
        result = estimator.assess("abcd1234")
        expected = 8 * math.log2(36) - 20
        assert result.entropy_bits == pytest.approx(expected)
        assert result.signals.numeric_sequence
        assert result.signals.keyboard_sequence

    def test_floor_at_zero(self, estimator):
        assert estimator.assess("111").entropy_bits == 0.0

    def test_long_passphrase_is_very_strong(self, estimator):
        result = estimator.assess("correct-horse-battery-staple")
        assert result.score == 4
        assert result.label is StrengthLabel.VERY_STRONG
        assert result.meter_percent == 100

    def test_idempotent(self, estimator):
        assert estimator.assess("Tr0ub4dor&3") == estimator.assess("Tr0ub4dor&3")

    def test_bits_never_negative(self, estimator):
        for secret in ["", "1", "aaa", "1234", "qwerty", "zzzzzzzz"]:
            assert estimator.assess(secret).entropy_bits >= 0.0

    def test_custom_reference_set(self):
        estimator = EntropyEstimator(ReferenceSecretSet(secrets=frozenset({"Zx9!mQ2@vB7#"})))
        assert estimator.assess("Zx9!mQ2@vB7#").label is StrengthLabel.COMPROMISED
        assert estimator.assess("password").label is not StrengthLabel.COMPROMISED

    @pytest.mark.parametrize("score, percent", [(0, 0), (1, 25), (2, 50), (3, 75), (4, 100)])
    def test_meter_percent(self, estimator, score, percent):
        secrets_by_score = {
            0: "abc",
            1: "mnbvhjk",
            2: "Mnbvhjkp",
            3: "Mnbvhjkp1!xy",
            4: "Mnbvhjkp1!xyZ@",
        }
        result = estimator.assess(secrets_by_score[score])
        assert result.score == score
        assert result.meter_percent == percent
