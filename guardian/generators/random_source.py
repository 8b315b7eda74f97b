"""
Secure Random Source
=====================

Uniform integer sampling backed by the operating system CSPRNG, and an
in-place Fisher-Yates shuffle built on it.

No weaker source is ever substituted: if the OS entropy source fails,
an :class:`EntropySourceError` propagates to the caller and no secret
is produced.

References:
    - Knuth, D. E. (1997). The Art of Computer Programming, Volume 2:
      Seminumerical Algorithms (3rd ed.), Algorithm 3.4.2P.
    - Python ``secrets`` module. https://docs.python.org/3/library/secrets.html
"""

from __future__ import annotations

import secrets
from typing import MutableSequence, TypeVar

T = TypeVar("T")


class EntropySourceError(RuntimeError):
    """The operating system entropy source is unavailable.

    Unrecoverable: secrets must never be generated from a weaker source.
    """


class SecureRandom:
    """Uniform integers in a closed range from :mod:`secrets`.

    ``secrets`` draws from ``os.urandom``, which is safe to call from
    concurrent threads, so one instance may be shared freely.
    """

    def uniform_int(self, min_value: int, max_value: int) -> int:
        """Return an integer uniformly distributed over ``[min_value, max_value]``.

        Raises:
            ValueError: If ``min_value > max_value``.
            EntropySourceError: If the OS entropy source fails.
        """
        if min_value > max_value:
            raise ValueError(f"Empty range [{min_value}, {max_value}]")
        try:
            return min_value + secrets.randbelow(max_value - min_value + 1)
        except (OSError, NotImplementedError) as exc:
            raise EntropySourceError(
                f"Operating system entropy source unavailable: {exc}"
            ) from exc

    def choice(self, candidates: str) -> str:
        """Uniformly pick one character of a non-empty string."""
        return candidates[self.uniform_int(0, len(candidates) - 1)]


class Shuffler:
    """Uniform in-place permutation (Fisher-Yates) over :class:`SecureRandom`."""

    def __init__(self, rng: SecureRandom | None = None) -> None:
        self._rng = rng or SecureRandom()

    def shuffle(self, items: MutableSequence[T]) -> MutableSequence[T]:
        """Permute *items* in place and return the same object.

        For ``i`` from ``len - 1`` down to ``1`` swap ``items[i]`` with
        ``items[j]``, ``j`` uniform in ``[0, i]``.
        """
        for i in range(len(items) - 1, 0, -1):
            j = self._rng.uniform_int(0, i)
            items[i], items[j] = items[j], items[i]
        return items
