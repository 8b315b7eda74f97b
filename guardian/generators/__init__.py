"""
Guardian Generators
====================

Secure randomness, character pools and the password / passphrase
composers built on them.
"""

from guardian.generators.passphrase import PassphraseComposer
from guardian.generators.password import PasswordComposer
from guardian.generators.pools import AMBIGUOUS_GLYPHS, PoolBuilder
from guardian.generators.random_source import EntropySourceError, SecureRandom, Shuffler

__all__ = [
    "AMBIGUOUS_GLYPHS",
    "EntropySourceError",
    "PassphraseComposer",
    "PasswordComposer",
    "PoolBuilder",
    "SecureRandom",
    "Shuffler",
]
