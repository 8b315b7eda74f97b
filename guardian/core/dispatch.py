"""
Request Boundary
=================

Transport-agnostic entry points for secret generation. Whatever carries
a request (form fields, JSON, CLI options) hands the raw, loosely typed
parameters to :meth:`RequestDispatcher.handle`; this module resolves
them into strongly typed requests with explicit defaults before the
engine sees them.

Resolution rules:

- flags: absent -> default; booleans as-is; strings are true only when
  they read ``"true"`` (case-insensitive), anything else is false;
- integers: absent -> default; leading-digit strings parse like
  ``"12abc" -> 12``; anything unparseable or non-finite becomes 0;
- ``length`` is clamped to [8, 128], ``count`` to [2, 10];
- the separator is reduced to its first character (or empty).

Out-of-range values and degenerate class selections are repaired, never
reported. An unknown action yields ``{"ok": false, "error":
"Unknown action"}``. Entropy-source failures are not caught here.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Any, Mapping, Optional

from shared.config import GeneratorConfig

from guardian.core.models import (
    ActionResponse,
    CharacterClass,
    PassphraseRequest,
    PasswordRequest,
)

if TYPE_CHECKING:
    from guardian.core.engine import GuardianEngine

ACTION_PASSWORD = "generatePassword"
ACTION_PASSPHRASE = "generatePassphrase"
UNKNOWN_ACTION = "Unknown action"
MAX_INT_DIGITS = 19

# Accepted parameter names, first match wins
_FLAG_FIELDS: dict[CharacterClass, tuple[str, ...]] = {
    CharacterClass.LOWER: ("lower",),
    CharacterClass.UPPER: ("upper",),
    CharacterClass.DIGIT: ("digits",),
    CharacterClass.SYMBOL: ("symbols",),
}
_AMBIGUOUS_FIELDS = ("noAmb", "excludeAmbiguous")
_COUNT_FIELDS = ("count", "wordCount")
_SEPARATOR_FIELDS = ("sep", "separator")


# ===================================================================== #
#  Coercion helpers
# ===================================================================== #


def parse_flag(value: Any, default: bool) -> bool:
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() == "true"


def parse_int(value: Any, default: int) -> int:
    """Lenient integer parsing: leading sign and digits, else 0.

    Non-finite floats become 0. Digit runs longer than
    ``MAX_INT_DIGITS`` saturate at the largest value of that width;
    callers clamp the result anyway.
    """
    if value is None:
        return default
    if isinstance(value, (bool, int)):
        return int(value)
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else 0

    text = str(value).strip()
    sign = 1
    if text[:1] in ("+", "-"):
        sign = -1 if text[0] == "-" else 1
        text = text[1:]
    digits = ""
    for char in text:
        if not char.isascii() or not char.isdigit():
            break
        if len(digits) == MAX_INT_DIGITS:
            return sign * (10 ** MAX_INT_DIGITS - 1)
        digits += char
    try:
        return sign * int(digits) if digits else 0
    except (ValueError, OverflowError):
        return 0


def clamp(value: int, lower: int, upper: int) -> int:
    return max(lower, min(upper, value))


def _first(params: Mapping[str, Any], names: tuple[str, ...]) -> Any:
    for name in names:
        if name in params:
            return params[name]
    return None


# ===================================================================== #
#  Dispatcher
# ===================================================================== #


class RequestDispatcher:
    """Resolve raw parameters and route actions to the engine.

    Args:
        engine: Engine providing ``generate_password`` / ``generate_passphrase``.
        settings: Defaults and bounds for lengths, word counts and separators.
    """

    def __init__(self, engine: GuardianEngine, settings: GeneratorConfig | None = None) -> None:
        self._engine = engine
        self._settings = settings or GeneratorConfig()

    # ------------------------------------------------------------------ #
    #  Typed entry points
    # ------------------------------------------------------------------ #

    def password_request(
        self,
        length: int,
        lower: bool = True,
        upper: bool = True,
        digits: bool = True,
        symbols: bool = True,
        exclude_ambiguous: bool = True,
    ) -> PasswordRequest:
        s = self._settings
        selected = {
            CharacterClass.LOWER: lower,
            CharacterClass.UPPER: upper,
            CharacterClass.DIGIT: digits,
            CharacterClass.SYMBOL: symbols,
        }
        return PasswordRequest(
            length=clamp(length, s.min_length, s.max_length),
            classes=frozenset(c for c, on in selected.items() if on),
            exclude_ambiguous=exclude_ambiguous,
        )

    def passphrase_request(self, word_count: int, separator: Optional[str] = None) -> PassphraseRequest:
        s = self._settings
        if separator is None:
            separator = s.default_separator
        return PassphraseRequest(
            word_count=clamp(word_count, s.min_word_count, s.max_word_count),
            separator=separator[:1],
        )

    def generate_password(
        self,
        length: int,
        lower: bool = True,
        upper: bool = True,
        digits: bool = True,
        symbols: bool = True,
        exclude_ambiguous: bool = True,
    ) -> ActionResponse:
        request = self.password_request(length, lower, upper, digits, symbols, exclude_ambiguous)
        secret = self._engine.generate_password(request)
        return ActionResponse(ok=True, password=secret.value)

    def generate_passphrase(self, word_count: int, separator: Optional[str] = None) -> ActionResponse:
        request = self.passphrase_request(word_count, separator)
        secret = self._engine.generate_passphrase(request)
        return ActionResponse(ok=True, passphrase=secret.value)

    # ------------------------------------------------------------------ #
    #  Loosely typed entry point
    # ------------------------------------------------------------------ #

    def handle(self, action: str, params: Mapping[str, Any] | None = None) -> ActionResponse:
        """Route *action* with raw *params*; never raises for bad input."""
        params = params or {}
        s = self._settings

        if action == ACTION_PASSWORD:
            flags = {
                c: parse_flag(_first(params, names), True)
                for c, names in _FLAG_FIELDS.items()
            }
            return self.generate_password(
                parse_int(params.get("length"), s.default_length),
                lower=flags[CharacterClass.LOWER],
                upper=flags[CharacterClass.UPPER],
                digits=flags[CharacterClass.DIGIT],
                symbols=flags[CharacterClass.SYMBOL],
                exclude_ambiguous=parse_flag(
                    _first(params, _AMBIGUOUS_FIELDS), s.exclude_ambiguous
                ),
            )

        if action == ACTION_PASSPHRASE:
            separator = _first(params, _SEPARATOR_FIELDS)
            return self.generate_passphrase(
                parse_int(_first(params, _COUNT_FIELDS), s.default_word_count),
                None if separator is None else str(separator),
            )

        return ActionResponse(ok=False, error=UNKNOWN_ACTION)
