"""
Advice Engine
==============

Turns the estimator's signals into remediation tips. Every check is
independent; tips are emitted in a fixed order so results are
reproducible:

    reference-set membership, short length, missing lowercase, missing
    uppercase, missing digit, missing symbol, repeated run, numeric
    sequence, keyboard sequence.

When no check fires a single affirmation is returned instead.
"""

from __future__ import annotations

from typing import Callable

from guardian.core.models import StrengthAssessment, StrengthSignals

TIP_REFERENCE = "Never use common passwords."
TIP_LENGTH = "Increase length (≥ {min_length})."
TIP_LOWER = "Add lowercase letters."
TIP_UPPER = "Add uppercase letters."
TIP_DIGIT = "Add digits."
TIP_SYMBOL = "Add symbols."
TIP_REPEAT = "Avoid repeated characters."
TIP_NUMERIC = "Avoid numeric sequences."
TIP_KEYBOARD = "Avoid keyboard sequences."
TIP_OK = "Looks solid. Keep it unique and store it in a password manager."

DEFAULT_MIN_LENGTH = 16


class AdviceEngine:
    """Derive ordered tips from a secret's strength signals.

    Args:
        min_length: Secrets shorter than this get the length tip.
    """

    def __init__(self, min_length: int = DEFAULT_MIN_LENGTH) -> None:
        self._min_length = min_length
        self._checks: list[tuple[Callable[[StrengthSignals], bool], str]] = [
            (lambda s: s.compromised, TIP_REFERENCE),
            (lambda s: s.length < self._min_length, TIP_LENGTH.format(min_length=min_length)),
            (lambda s: not s.has_lower, TIP_LOWER),
            (lambda s: not s.has_upper, TIP_UPPER),
            (lambda s: not s.has_digit, TIP_DIGIT),
            (lambda s: not s.has_non_alphanumeric, TIP_SYMBOL),
            (lambda s: s.repeated_run, TIP_REPEAT),
            (lambda s: s.numeric_sequence, TIP_NUMERIC),
            (lambda s: s.keyboard_sequence, TIP_KEYBOARD),
        ]

    @property
    def length_tip(self) -> str:
        return TIP_LENGTH.format(min_length=self._min_length)

    def advise(self, secret: str, assessment: StrengthAssessment) -> list[str]:
        """Tips for *secret*, using the signals carried by *assessment*.

        Raises:
            ValueError: If *assessment* was computed for a different secret
                length (a mismatched pair).
        """
        signals = assessment.signals
        if signals.length != len(secret):
            raise ValueError("Assessment does not belong to the given secret")

        tips = [tip for check, tip in self._checks if check(signals)]
        return tips or [TIP_OK]
