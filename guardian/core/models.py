"""
Guardian Core Data Models
==========================

Pydantic models for the secret generator and the strength estimator:
character pools, composition requests, generated secrets, strength
assessments with their intermediate signals, boundary responses and
uniformity-audit results.

Every model here is created per call and discarded afterwards; the ones
that hand secret material to the caller are frozen and keep the secret
out of their ``repr``.

References:
    - NIST SP 800-63B (2017). Digital Identity Guidelines --
      Authentication and Lifecycle Management.
    - Pearson, K. (1900). On the criterion that a given system of
      deviations from the probable. Philosophical Magazine, 50(302).
"""

from __future__ import annotations

import enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ===================================================================== #
#  Enumerations
# ===================================================================== #


class CharacterClass(str, enum.Enum):
    """Character classes a password may be composed from.

    Declaration order is the canonical pool order.
    """

    LOWER = "lower"
    UPPER = "upper"
    DIGIT = "digit"
    SYMBOL = "symbol"


CANONICAL_ORDER: tuple[CharacterClass, ...] = tuple(CharacterClass)


class SecretKind(str, enum.Enum):
    """What a :class:`GeneratedSecret` holds."""

    PASSWORD = "password"
    PASSPHRASE = "passphrase"


class StrengthLabel(str, enum.Enum):
    """Qualitative strength rating of a secret.

    The first five members are indexed by score (0-4); ``COMPROMISED``
    overrides the score for known-weak reference secrets.
    """

    VERY_WEAK = "very_weak"
    WEAK = "weak"
    FAIR = "fair"
    STRONG = "strong"
    VERY_STRONG = "very_strong"
    COMPROMISED = "compromised"

    @classmethod
    def from_score(cls, score: int) -> StrengthLabel:
        return _SCORE_LABELS[score]

    @property
    def display_name(self) -> str:
        """Title-cased name, e.g. ``"Very Strong"``."""
        return self.value.replace("_", " ").title()


_SCORE_LABELS: tuple[StrengthLabel, ...] = (
    StrengthLabel.VERY_WEAK,
    StrengthLabel.WEAK,
    StrengthLabel.FAIR,
    StrengthLabel.STRONG,
    StrengthLabel.VERY_STRONG,
)


# ===================================================================== #
#  Generation Models
# ===================================================================== #


class CharacterPool(BaseModel):
    """Ordered, de-duplicated candidate characters for one class.

    Attributes:
        char_class: Class the pool belongs to.
        characters: Candidate characters, first occurrence order kept.
        filtered: Whether ambiguous glyphs were stripped from the pool.
    """

    model_config = ConfigDict(frozen=True)

    char_class: CharacterClass
    characters: str = Field(..., min_length=1)
    filtered: bool = False

    @field_validator("characters")
    @classmethod
    def _dedupe(cls, v: str) -> str:
        return "".join(dict.fromkeys(v))

    @property
    def size(self) -> int:
        return len(self.characters)

    def __contains__(self, char: object) -> bool:
        return isinstance(char, str) and len(char) == 1 and char in self.characters


class PasswordRequest(BaseModel):
    """Composition constraints for a random password.

    An empty class selection is coerced to ``{lower}``. ``length`` is
    expected to be pre-clamped by the request boundary; the composer
    still tolerates any integer.
    """

    model_config = ConfigDict(frozen=True)

    length: int = 16
    classes: frozenset[CharacterClass] = frozenset(CANONICAL_ORDER)
    exclude_ambiguous: bool = True

    @field_validator("classes")
    @classmethod
    def _fallback_to_lower(cls, v: frozenset[CharacterClass]) -> frozenset[CharacterClass]:
        return v or frozenset({CharacterClass.LOWER})

    @property
    def ordered_classes(self) -> list[CharacterClass]:
        """Requested classes in canonical order."""
        return [c for c in CANONICAL_ORDER if c in self.classes]


class PassphraseRequest(BaseModel):
    """Word count and separator for a passphrase."""

    model_config = ConfigDict(frozen=True)

    word_count: int = 5
    separator: str = Field(default="-", max_length=1)


class GeneratedSecret(BaseModel):
    """A freshly generated password or passphrase, owned by the caller.

    Attributes:
        value: The secret itself (kept out of ``repr``).
        kind: Password or passphrase.
        word_count: Number of words (passphrases only).
    """

    model_config = ConfigDict(frozen=True)

    value: str = Field(..., repr=False)
    kind: SecretKind
    word_count: Optional[int] = None

    @property
    def length(self) -> int:
        return len(self.value)


# ===================================================================== #
#  Strength Models
# ===================================================================== #


class StrengthSignals(BaseModel):
    """Intermediate observations shared by the estimator and the advice engine.

    Attributes:
        length: Number of characters in the secret.
        has_lower / has_upper / has_digit: ASCII letter and digit presence.
        has_symbol: Printable ASCII punctuation present.
        has_other: Any other character present (space, non-ASCII, control).
        pool_size: Approximate alphabet size derived from the flags.
        raw_bits: ``length * log2(pool_size)`` before penalties.
        repeated_run: Three or more identical consecutive characters.
        numeric_sequence: Contains a four-digit ascending run.
        keyboard_sequence: Contains abcd / qwer / asdf / zxcv (any case).
        compromised: Exact member of the reference secret set.
    """

    model_config = ConfigDict(frozen=True)

    length: int = 0
    has_lower: bool = False
    has_upper: bool = False
    has_digit: bool = False
    has_symbol: bool = False
    has_other: bool = False
    pool_size: int = 1
    raw_bits: float = 0.0
    repeated_run: bool = False
    numeric_sequence: bool = False
    keyboard_sequence: bool = False
    compromised: bool = False

    @property
    def has_non_alphanumeric(self) -> bool:
        return self.has_symbol or self.has_other


class StrengthAssessment(BaseModel):
    """Guessing-resistance estimate for one secret.

    Attributes:
        entropy_bits: Penalised entropy estimate, never negative.
        score: Bucketed score in [0, 4].
        label: Score-indexed label, or ``COMPROMISED`` for reference secrets.
        signals: Observations the estimate was derived from.
    """

    model_config = ConfigDict(frozen=True)

    entropy_bits: float = Field(..., ge=0.0)
    score: int = Field(..., ge=0, le=4)
    label: StrengthLabel
    signals: StrengthSignals

    @property
    def meter_percent(self) -> int:
        return min(100, round(self.score / 4 * 100))

    @property
    def status_text(self) -> str:
        if self.label is StrengthLabel.COMPROMISED:
            return "Compromised (very common)"
        return self.label.display_name


# ===================================================================== #
#  Boundary / Audit Models
# ===================================================================== #


class ActionResponse(BaseModel):
    """Structured reply of the request boundary.

    Only the fields that apply are serialised, e.g.
    ``{"ok": true, "password": "..."}`` or
    ``{"ok": false, "error": "Unknown action"}``.
    """

    ok: bool
    password: Optional[str] = Field(default=None, repr=False)
    passphrase: Optional[str] = Field(default=None, repr=False)
    error: Optional[str] = None

    def to_payload(self) -> dict[str, object]:
        return self.model_dump(exclude_none=True)


class UniformityResult(BaseModel):
    """Outcome of a chi-squared uniformity audit.

    Attributes:
        test_name: Which generator property was audited.
        categories: Number of equally likely outcomes.
        samples: Total number of observed outcomes.
        chi_squared: Pearson statistic against the uniform expectation.
        p_value: Upper-tail probability of the statistic.
        significance: Threshold below which uniformity is rejected.
        passed: ``p_value >= significance``.
    """

    test_name: str
    categories: int
    samples: int
    chi_squared: float
    p_value: float
    significance: float
    passed: bool
