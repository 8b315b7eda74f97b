"""
Reference Secret Set
=====================

A small, fixed set of known-weak secrets. Membership is an exact,
case-sensitive match: ``"password"`` is a member, ``"Password"`` is not.
This is a demonstration-sized list, not a breach corpus; a larger local
list can be supplied through the ``estimator.reference_set_path`` setting.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict

_BUNDLED_SECRETS: frozenset[str] = frozenset({
    "123456", "password", "123456789", "qwerty", "12345678", "111111",
    "123123", "abc123", "password1", "iloveyou", "12345", "admin",
    "letmein", "welcome", "dragon",
})


class ReferenceSecretSet(BaseModel):
    """Immutable set of known-weak literal secrets."""

    model_config = ConfigDict(frozen=True)

    secrets: frozenset[str]

    def __contains__(self, secret: object) -> bool:
        return secret in self.secrets

    def __len__(self) -> int:
        return len(self.secrets)

    @classmethod
    def from_file(cls, path: str | Path) -> ReferenceSecretSet:
        """Load one secret per line, verbatim; blank lines are skipped."""
        lines = Path(path).read_text(encoding="utf-8").splitlines()
        return cls(secrets=frozenset(line for line in lines if line))


BUNDLED_REFERENCE_SET = ReferenceSecretSet(secrets=_BUNDLED_SECRETS)


def load_reference_set(path: str | Path | None = None) -> ReferenceSecretSet:
    """The set at *path*, or the bundled one when *path* is empty."""
    if not path:
        return BUNDLED_REFERENCE_SET
    return ReferenceSecretSet.from_file(path)
