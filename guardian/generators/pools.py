"""
Character Pool Builder
=======================

Builds one :class:`CharacterPool` per requested character class, in the
canonical order lower, upper, digit, symbol, optionally stripping glyphs
that are easy to confuse when read or transcribed (O/0, l/1/I, S/5, ...).

:meth:`PoolBuilder.resolve_pools` never fails and never returns an empty
list: an empty class selection resolves to lowercase, and a class whose
pool would be emptied by ambiguity stripping keeps its unfiltered pool.
"""

from __future__ import annotations

import string
from typing import Iterable

from shared.logger import GuardianLogger

from guardian.core.models import CANONICAL_ORDER, CharacterClass, CharacterPool

logger = GuardianLogger("guardian.pools")

DEFAULT_SYMBOLS = "!@#$%^&*()_+-=[]{};:,.?/"

# Removal table for ambiguous glyphs, per class
AMBIGUOUS_GLYPHS: dict[CharacterClass, str] = {
    CharacterClass.UPPER: "OIBSZ",
    CharacterClass.LOWER: "losiz",
    CharacterClass.DIGIT: "0125",
    CharacterClass.SYMBOL: "|/\\`\"'<>",
}


class PoolBuilder:
    """Resolve requested character classes to non-empty character pools.

    Args:
        symbol_alphabet: Candidate symbols; defaults to
            ``!@#$%^&*()_+-=[]{};:,.?/``.

    Raises:
        ValueError: If *symbol_alphabet* is empty.
    """

    def __init__(self, symbol_alphabet: str = DEFAULT_SYMBOLS) -> None:
        if not symbol_alphabet:
            raise ValueError("Symbol alphabet must not be empty")
        self._alphabets: dict[CharacterClass, str] = {
            CharacterClass.LOWER: string.ascii_lowercase,
            CharacterClass.UPPER: string.ascii_uppercase,
            CharacterClass.DIGIT: string.digits,
            CharacterClass.SYMBOL: symbol_alphabet,
        }

    def base_pool(self, char_class: CharacterClass) -> CharacterPool:
        """The unfiltered pool for *char_class*."""
        return CharacterPool(char_class=char_class, characters=self._alphabets[char_class])

    def build_pool(
        self, char_class: CharacterClass, exclude_ambiguous: bool
    ) -> CharacterPool:
        """Pool for one class, stripped of ambiguous glyphs when requested.

        Stripping that would leave nothing returns the unfiltered pool.
        """
        alphabet = self._alphabets[char_class]
        if not exclude_ambiguous:
            return CharacterPool(char_class=char_class, characters=alphabet)

        ambiguous = AMBIGUOUS_GLYPHS[char_class]
        stripped = "".join(c for c in alphabet if c not in ambiguous)
        if not stripped:
            logger.debug(
                "Ambiguity stripping would empty the %s pool; keeping it unfiltered",
                char_class.value,
            )
            return CharacterPool(char_class=char_class, characters=alphabet)
        return CharacterPool(char_class=char_class, characters=stripped, filtered=True)

    def resolve_pools(
        self, classes: Iterable[CharacterClass], exclude_ambiguous: bool
    ) -> list[CharacterPool]:
        """Pools for *classes* in canonical order; never empty.

        Args:
            classes: Requested classes (any order, duplicates ignored).
            exclude_ambiguous: Strip ambiguous glyphs where possible.

        Returns:
            One pool per requested class, or a single lowercase pool when
            nothing was requested.
        """
        requested = set(classes)
        ordered = [c for c in CANONICAL_ORDER if c in requested]
        if not ordered:
            ordered = [CharacterClass.LOWER]
        return [self.build_pool(c, exclude_ambiguous) for c in ordered]
