"""
Generator Uniformity Auditor
=============================

Empirical checks that the generators are unbiased, using Pearson's
chi-squared goodness-of-fit test against a uniform expectation:

- **Character audit**: generate many single-class passwords and count
  every character; each member of the class pool should be equally
  frequent.
- **Shuffle audit**: shuffle ``range(n)`` many times and count the
  resulting permutations; each of the ``n!`` orders should be equally
  frequent.

A result *passes* when its p-value is at least the significance level.
With ``significance = 0.01`` a perfect generator still fails about one
audit in a hundred.

References:
    - Pearson, K. (1900). On the criterion that a given system of
      deviations from the probable. Philosophical Magazine, 50(302).
    - Knuth, D. E. (1997). The Art of Computer Programming, Vol. 2,
      Section 3.3.1: General Test Procedures for Studying Random Data.
"""

from __future__ import annotations

import itertools
import math
from typing import Iterator

from shared.math_utils import (
    FloatArray,
    category_counts,
    chi_squared_test,
    uniform_expectation,
)

from guardian.core.models import CharacterClass, PasswordRequest, UniformityResult
from guardian.generators.password import PasswordComposer
from guardian.generators.pools import PoolBuilder
from guardian.generators.random_source import Shuffler

MAX_SHUFFLE_SIZE = 7
MIN_EXPECTED_PER_CATEGORY = 5


class UniformityAuditor:
    """Run chi-squared uniformity audits against the generators.

    Args:
        composer: Password composer under test.
        shuffler: Shuffler under test.
        pool_builder: Must match the composer's pools.
        significance: Rejection threshold for the p-value.
    """

    def __init__(
        self,
        composer: PasswordComposer | None = None,
        shuffler: Shuffler | None = None,
        pool_builder: PoolBuilder | None = None,
        significance: float = 0.01,
    ) -> None:
        self._pool_builder = pool_builder or PoolBuilder()
        self._composer = composer or PasswordComposer(self._pool_builder)
        self._shuffler = shuffler or Shuffler()
        self._significance = significance

    def audit_characters(
        self,
        char_class: CharacterClass,
        samples: int = 10_000,
        length: int = 8,
        exclude_ambiguous: bool = False,
    ) -> UniformityResult:
        """Character frequencies of *samples* single-class passwords.

        Raises:
            ValueError: If fewer than five observations per character
                would be expected.
        """
        pool = self._pool_builder.build_pool(char_class, exclude_ambiguous)
        total = samples * length
        self._require_expected(total, pool.size)

        request = PasswordRequest(
            length=length,
            classes=frozenset({char_class}),
            exclude_ambiguous=exclude_ambiguous,
        )

        def observations() -> Iterator[str]:
            for _ in range(samples):
                yield from self._composer.generate(request).value

        observed = category_counts(observations(), list(pool.characters))
        return self._evaluate(
            f"characters[{char_class.value}]", observed, total, pool.size
        )

    def audit_shuffle(self, size: int = 4, samples: int = 10_000) -> UniformityResult:
        """Permutation frequencies of shuffling ``range(size)`` *samples* times.

        Raises:
            ValueError: If *size* is outside [2, 7] or fewer than five
                observations per permutation would be expected.
        """
        if not 2 <= size <= MAX_SHUFFLE_SIZE:
            raise ValueError(f"Shuffle size must be in [2, {MAX_SHUFFLE_SIZE}], got {size}")
        permutations = list(itertools.permutations(range(size)))
        self._require_expected(samples, math.factorial(size))

        def observations() -> Iterator[tuple[int, ...]]:
            for _ in range(samples):
                yield tuple(self._shuffler.shuffle(list(range(size))))

        observed = category_counts(observations(), permutations)
        return self._evaluate(f"shuffle[n={size}]", observed, samples, len(permutations))

    # ------------------------------------------------------------------ #
    #  Internals
    # ------------------------------------------------------------------ #

    @staticmethod
    def _require_expected(total: int, categories: int) -> None:
        if total < MIN_EXPECTED_PER_CATEGORY * categories:
            raise ValueError(
                f"{total} observations over {categories} categories is too few "
                f"(need at least {MIN_EXPECTED_PER_CATEGORY} per category)"
            )

    def _evaluate(
        self, name: str, observed: FloatArray, total: int, categories: int
    ) -> UniformityResult:
        chi2, p_value = chi_squared_test(observed, uniform_expectation(total, categories))
        return UniformityResult(
            test_name=name,
            categories=categories,
            samples=total,
            chi_squared=round(chi2, 4),
            p_value=p_value,
            significance=self._significance,
            passed=p_value >= self._significance,
        )
