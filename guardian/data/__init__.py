"""
Guardian Data
==============

Process-wide read-only data: the passphrase word list and the reference
set of known-weak secrets.
"""

from guardian.data.reference import (
    BUNDLED_REFERENCE_SET,
    ReferenceSecretSet,
    load_reference_set,
)
from guardian.data.wordlist import BUNDLED_WORDLIST, WordList, load_wordlist

__all__ = [
    "BUNDLED_REFERENCE_SET",
    "BUNDLED_WORDLIST",
    "ReferenceSecretSet",
    "WordList",
    "load_reference_set",
    "load_wordlist",
]
