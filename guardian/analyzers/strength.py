"""
Entropy Estimator
==================

Simplified guessing-resistance model for arbitrary secrets:

1. Charset estimate: one pass sets presence flags; the pool size is the
   sum of flat per-class contributions (lower 26, upper 26, digit 10,
   symbol 32, other 10), or 1 when the secret is empty.
2. Raw bits: ``length * log2(pool_size)``.
3. Flat penalties of 10 bits each for a run of three identical
   characters, a four-digit ascending run and a keyboard run; then a
   cap of 8 bits for reference-set members; then a floor at zero.
4. Score buckets: ``<28 -> 0, <36 -> 1, <60 -> 2, <80 -> 3, else 4``.
5. Label by score, overridden to ``COMPROMISED`` for reference secrets.

All pattern checks are explicit scans over the character sequence. The
model is a heuristic, not a pattern-matching cracker simulation.

References:
    - NIST SP 800-63B (2017), Appendix A: Strength of Memorized Secrets.
    - Shannon, C. E. (1948). A Mathematical Theory of Communication.
"""

from __future__ import annotations

import math
import string

from guardian.core.models import StrengthAssessment, StrengthLabel, StrengthSignals
from guardian.data.reference import BUNDLED_REFERENCE_SET, ReferenceSecretSet

# Flat pool-size contributions per observed class
POOL_LOWER = 26
POOL_UPPER = 26
POOL_DIGIT = 10
POOL_SYMBOL = 32
POOL_OTHER = 10

PATTERN_PENALTY_BITS = 10.0
REFERENCE_CAP_BITS = 8.0
REPEAT_RUN_LENGTH = 3

NUMERIC_RUNS: tuple[str, ...] = (
    "0123", "1234", "2345", "3456", "4567", "5678", "6789", "7890",
)
KEYBOARD_RUNS: tuple[str, ...] = ("abcd", "qwer", "asdf", "zxcv")

# Upper bounds (exclusive) of score buckets 0-3
SCORE_THRESHOLDS: tuple[float, ...] = (28.0, 36.0, 60.0, 80.0)

_SYMBOLS = frozenset(string.punctuation)
_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def has_repeated_run(secret: str, run_length: int = REPEAT_RUN_LENGTH) -> bool:
    """True if some character repeats at least *run_length* times in a row."""
    run = 0
    previous = None
    for char in secret:
        run = run + 1 if char == previous else 1
        if run >= run_length:
            return True
        previous = char
    return False


def has_numeric_sequence(secret: str) -> bool:
    """True if *secret* contains one of the four-digit ascending runs."""
    return any(run in secret for run in NUMERIC_RUNS)


def has_keyboard_sequence(secret: str) -> bool:
    """True if *secret* contains a keyboard run, ignoring ASCII case."""
    folded = secret.translate(_ASCII_LOWER)
    return any(run in folded for run in KEYBOARD_RUNS)


def score_from_bits(bits: float) -> int:
    """Bucket an entropy estimate into a 0-4 score (half-open intervals)."""
    for score, upper in enumerate(SCORE_THRESHOLDS):
        if bits < upper:
            return score
    return len(SCORE_THRESHOLDS)


class EntropyEstimator:
    """Estimate entropy bits, score and label for arbitrary secrets.

    The estimator is a pure function of its input and the reference set
    it was given; calling :meth:`assess` twice yields equal results.

    Usage::

        estimator = EntropyEstimator()
        result = estimator.assess("correct-horse-battery-staple")
        print(result.score, result.label.display_name)
    """

    def __init__(self, reference_set: ReferenceSecretSet = BUNDLED_REFERENCE_SET) -> None:
        self._reference_set = reference_set

    def signals(self, secret: str) -> StrengthSignals:
        """Collect the observations that the estimate is built from."""
        has_lower = has_upper = has_digit = has_symbol = has_other = False
        for char in secret:
            if "a" <= char <= "z":
                has_lower = True
            elif "A" <= char <= "Z":
                has_upper = True
            elif "0" <= char <= "9":
                has_digit = True
            elif char in _SYMBOLS:
                has_symbol = True
            else:
                has_other = True

        pool_size = (
            POOL_LOWER * has_lower
            + POOL_UPPER * has_upper
            + POOL_DIGIT * has_digit
            + POOL_SYMBOL * has_symbol
            + POOL_OTHER * has_other
        ) or 1

        return StrengthSignals(
            length=len(secret),
            has_lower=has_lower,
            has_upper=has_upper,
            has_digit=has_digit,
            has_symbol=has_symbol,
            has_other=has_other,
            pool_size=pool_size,
            raw_bits=len(secret) * math.log2(pool_size),
            repeated_run=has_repeated_run(secret),
            numeric_sequence=has_numeric_sequence(secret),
            keyboard_sequence=has_keyboard_sequence(secret),
            compromised=secret in self._reference_set,
        )

    def assess(self, secret: str) -> StrengthAssessment:
        """Estimate the guessing resistance of *secret*."""
        signals = self.signals(secret)

        bits = signals.raw_bits
        bits -= PATTERN_PENALTY_BITS * sum(
            (signals.repeated_run, signals.numeric_sequence, signals.keyboard_sequence)
        )
        if signals.compromised:
            bits = min(bits, REFERENCE_CAP_BITS)
        bits = max(0.0, bits)

        score = score_from_bits(bits)
        label = (
            StrengthLabel.COMPROMISED
            if signals.compromised
            else StrengthLabel.from_score(score)
        )
        return StrengthAssessment(
            entropy_bits=bits, score=score, label=label, signals=signals
        )
