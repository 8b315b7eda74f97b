"""Tests for AdviceEngine."""

from __future__ import annotations

import pytest

from guardian.analyzers import advice
from guardian.analyzers.advice import AdviceEngine
from guardian.analyzers.strength import EntropyEstimator


@pytest.fixture
def estimator():
    return EntropyEstimator()


def _tips(secret, engine=None, estimator=None):
    estimator = estimator or EntropyEstimator()
    engine = engine or AdviceEngine()
    return engine.advise(secret, estimator.assess(secret))


class TestAdvice:
    def test_empty_secret(self):
        assert _tips("") == [
            "Increase length (≥ 16).",
            advice.TIP_LOWER,
            advice.TIP_UPPER,
            advice.TIP_DIGIT,
            advice.TIP_SYMBOL,
        ]

    def test_reference_secret_first(self):
        assert _tips("password") == [
            advice.TIP_REFERENCE,
            "Increase length (≥ 16).",
            advice.TIP_UPPER,
            advice.TIP_DIGIT,
            advice.TIP_SYMBOL,
        ]

    def test_pattern_tips_in_order(self):
        tips = _tips("Aaaa1234qwer!xyzLongEnough")
        assert tips == [advice.TIP_REPEAT, advice.TIP_NUMERIC, advice.TIP_KEYBOARD]

    def test_solid_secret(self):
        assert _tips("Zx9!mQ2@vB7#kL4$") == [advice.TIP_OK]

    def test_space_counts_as_non_alphanumeric(self):
        assert advice.TIP_SYMBOL not in _tips("Correct Horse 9 Battery")

    def test_custom_min_length(self):
        engine = AdviceEngine(min_length=8)
        assert _tips("Zx9!mQ2@", engine=engine) == [advice.TIP_OK]
        assert engine.length_tip == "Increase length (≥ 8)."

    def test_mismatched_assessment_rejected(self, estimator):
        with pytest.raises(ValueError):
            AdviceEngine().advise("short", estimator.assess("a much longer secret"))

    def test_deterministic(self):
        assert _tips("hello world") == _tips("hello world")
