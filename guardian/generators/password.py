"""
Password Composer
==================

Builds fixed-length random passwords with a class-coverage guarantee:

1. Resolve one pool per requested class (:class:`PoolBuilder`).
2. Draw one character uniformly from each pool, in canonical order.
3. Fill the remaining positions uniformly from the concatenation of all
   pools. Pools are concatenated, not merged, so a character present in
   two pools carries double weight in this phase, and larger pools
   (symbols) fill more slots than smaller ones (digits).
4. Shuffle the whole buffer so the guaranteed characters sit at
   unpredictable positions.

When ``length`` is smaller than the number of pools only the first
``length`` pools contribute a guaranteed character.
"""

from __future__ import annotations

from guardian.core.models import GeneratedSecret, PasswordRequest, SecretKind
from guardian.generators.pools import PoolBuilder
from guardian.generators.random_source import SecureRandom, Shuffler


class PasswordComposer:
    """Generate passwords from a :class:`PasswordRequest`.

    Args:
        pool_builder: Pool resolution strategy.
        rng: Secure integer source shared with the shuffler.
    """

    def __init__(
        self,
        pool_builder: PoolBuilder | None = None,
        rng: SecureRandom | None = None,
    ) -> None:
        self._pool_builder = pool_builder or PoolBuilder()
        self._rng = rng or SecureRandom()
        self._shuffler = Shuffler(self._rng)

    def generate(self, request: PasswordRequest) -> GeneratedSecret:
        """Compose a password of exactly ``max(request.length, 0)`` characters."""
        pools = self._pool_builder.resolve_pools(
            request.classes, request.exclude_ambiguous
        )
        length = max(request.length, 0)

        chars: list[str] = [self._rng.choice(pool.characters) for pool in pools[:length]]

        combined = "".join(pool.characters for pool in pools)
        for _ in range(len(chars), length):
            chars.append(self._rng.choice(combined))

        self._shuffler.shuffle(chars)
        return GeneratedSecret(value="".join(chars), kind=SecretKind.PASSWORD)
