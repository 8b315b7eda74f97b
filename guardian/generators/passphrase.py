"""
Passphrase Composer
====================

Joins independently drawn words from a :class:`WordList`. Draws are with
replacement, so the same word may appear more than once.
"""

from __future__ import annotations

from guardian.core.models import GeneratedSecret, PassphraseRequest, SecretKind
from guardian.data.wordlist import BUNDLED_WORDLIST, WordList
from guardian.generators.random_source import SecureRandom

MIN_WORDS = 2
MAX_WORDS = 10


class PassphraseComposer:
    """Generate word-separated passphrases.

    Args:
        wordlist: Source vocabulary, shared read-only.
        rng: Secure integer source.
    """

    def __init__(
        self,
        wordlist: WordList = BUNDLED_WORDLIST,
        rng: SecureRandom | None = None,
    ) -> None:
        self._wordlist = wordlist
        self._rng = rng or SecureRandom()

    def generate(self, request: PassphraseRequest) -> GeneratedSecret:
        """Draw ``request.word_count`` words, clamped to [2, 10], and join
        them with ``request.separator``."""
        count = max(MIN_WORDS, min(MAX_WORDS, request.word_count))
        last = len(self._wordlist) - 1
        words = [self._wordlist[self._rng.uniform_int(0, last)] for _ in range(count)]
        return GeneratedSecret(
            value=request.separator.join(words),
            kind=SecretKind.PASSPHRASE,
            word_count=count,
        )
