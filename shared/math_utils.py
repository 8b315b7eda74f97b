"""
Guardian Statistics Utilities
==============================

Goodness-of-fit helpers used to audit the generators: category counting
and Pearson's chi-squared test with a p-value from the regularised upper
incomplete gamma function (no SciPy dependency).

References:
    [1] Pearson, K. (1900). On the Criterion that a Given System of
        Deviations ... Philosophical Magazine, 50(302), 157-175.
    [2] Press, W. H. et al. (2007). Numerical Recipes (3rd ed.).
        Cambridge University Press, Section 6.2.
"""

from __future__ import annotations

import math
from typing import Hashable, Iterable, Sequence

import numpy as np
from numpy.typing import NDArray

FloatArray = NDArray[np.floating]


def category_counts(
    observations: Iterable[Hashable], categories: Sequence[Hashable]
) -> FloatArray:
    """Count how often each of *categories* occurs in *observations*.

    Args:
        observations: Observed values; every value must be in *categories*.
        categories:   Ordered category labels defining the output bins.

    Returns:
        1-D float64 array aligned with *categories*.

    Raises:
        ValueError: If an observation is not one of the categories.
    """
    index = {cat: i for i, cat in enumerate(categories)}
    try:
        positions = np.fromiter((index[obs] for obs in observations), dtype=np.int64)
    except KeyError as exc:
        raise ValueError(f"Observation outside categories: {exc.args[0]!r}") from exc
    return np.bincount(positions, minlength=len(categories)).astype(np.float64)


def chi_squared_test(
    observed: FloatArray, expected: FloatArray
) -> tuple[float, float]:
    """Perform Pearson's chi-squared goodness-of-fit test.

    .. math::

        \\chi^2 = \\sum_i \\frac{(O_i - E_i)^2}{E_i}

    The p-value is ``Q(dof/2, chi2/2)``, matching ``scipy.stats.chi2.sf``.

    Args:
        observed: Observed frequency counts (1-D array of length *k*).
        expected: Expected frequency counts (1-D array of length *k*).

    Returns:
        Tuple of ``(chi2_statistic, p_value)``.

    Raises:
        ValueError: If arrays differ in length or expected contains zeros.
    """
    observed = np.asarray(observed, dtype=np.float64)
    expected = np.asarray(expected, dtype=np.float64)

    if observed.shape != expected.shape:
        raise ValueError("Array shapes must match")
    if np.any(expected <= 0):
        raise ValueError("Expected values must be > 0")

    chi2 = float(np.sum((observed - expected) ** 2 / expected))
    dof = len(observed) - 1

    if dof <= 0:
        return chi2, 1.0

    return chi2, _upper_inc_gamma_reg(dof / 2.0, chi2 / 2.0)


def uniform_expectation(total: float, categories: int) -> FloatArray:
    """Expected counts for *total* draws spread evenly over *categories*."""
    return np.full(categories, total / categories, dtype=np.float64)


# --------------- Incomplete gamma helpers (Numerical Recipes, Ch. 6) ------


def _upper_inc_gamma_reg(a: float, x: float) -> float:
    """Regularised upper incomplete gamma Q(a, x) = 1 - P(a, x)."""
    if x <= 0.0 or a <= 0.0:
        return 1.0
    if x < a + 1.0:
        return 1.0 - _gamma_p_series(a, x)
    return _gamma_q_cf(a, x)


def _gamma_p_series(a: float, x: float) -> float:
    """Lower regularised incomplete gamma P(a, x) by series expansion."""
    ap = a
    delta = 1.0 / a
    total = delta
    for _ in range(300):
        ap += 1.0
        delta *= x / ap
        total += delta
        if abs(delta) < abs(total) * 1e-15:
            break
    return total * math.exp(-x + a * math.log(x) - math.lgamma(a))


def _gamma_q_cf(a: float, x: float) -> float:
    """Upper regularised incomplete gamma Q(a, x) by Lentz continued fraction."""
    tiny = 1e-30
    b = x + 1.0 - a
    c = 1.0 / tiny
    d = 1.0 / b
    f = d
    for i in range(1, 300):
        an = -i * (i - a)
        b += 2.0
        d = an * d + b
        if abs(d) < tiny:
            d = tiny
        c = b + an / c
        if abs(c) < tiny:
            c = tiny
        d = 1.0 / d
        delta = d * c
        f *= delta
        if abs(delta - 1.0) < 1e-15:
            break
    return f * math.exp(-x + a * math.log(x) - math.lgamma(a))
