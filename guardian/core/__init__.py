"""
Guardian Core Module
=====================

Data models, the request boundary and the engine facade. The engine and
dispatcher live in :mod:`guardian.core.engine` and
:mod:`guardian.core.dispatch`.
"""

from guardian.core.models import (
    ActionResponse,
    CharacterClass,
    CharacterPool,
    GeneratedSecret,
    PassphraseRequest,
    PasswordRequest,
    SecretKind,
    StrengthAssessment,
    StrengthLabel,
    StrengthSignals,
    UniformityResult,
)

__all__ = [
    "ActionResponse",
    "CharacterClass",
    "CharacterPool",
    "GeneratedSecret",
    "PassphraseRequest",
    "PasswordRequest",
    "SecretKind",
    "StrengthAssessment",
    "StrengthLabel",
    "StrengthSignals",
    "UniformityResult",
]
