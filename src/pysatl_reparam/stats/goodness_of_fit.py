"""
Goodness of Fit
===============

Kolmogorov-Smirnov checks that a sample, typically drawn through a
reparametrization, follows a family distribution.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import warnings
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import numpy as np
from scipy import stats

from pysatl_reparam.reparametrizations.configuration import configure_reparametrizations
from pysatl_reparam.reparametrizations.sampling import ReparametrizedSamplingStrategy
from pysatl_reparam.types import CharacteristicName

if TYPE_CHECKING:
    from pysatl_reparam.distributions.distribution import Distribution
    from pysatl_reparam.families.distribution import ParametricFamilyDistribution
    from pysatl_reparam.types import ReparametrizationName

MIN_RELIABLE_SAMPLE_SIZE = 20


@dataclass(frozen=True, slots=True)
class GoodnessOfFitResult:
    """
    Outcome of a one-sample Kolmogorov-Smirnov test.

    Attributes
    ----------
    statistic : float
        KS distance between the empirical and the reference CDF.
    pvalue : float
        p-value of the two-sided test.
    alpha : float
        Significance level.
    n : int
        Sample size.
    """

    statistic: float
    pvalue: float
    alpha: float
    n: int

    @property
    def passed(self) -> bool:
        """``True`` if the null hypothesis is not rejected at level ``alpha``."""
        return self.pvalue >= self.alpha


def ks_check(sample: Any, distribution: Distribution, alpha: float = 0.01) -> GoodnessOfFitResult:
    """
    Test ``sample`` against the ``cdf`` of ``distribution``.

    Parameters
    ----------
    sample : Sample or array_like
        Univariate observations; a :class:`~pysatl_reparam.distributions.Sample`
        is flattened.
    distribution : Distribution
        Reference distribution providing a ``cdf``.
    alpha : float
        Significance level in (0, 1).

    Raises
    ------
    ValueError
        If ``alpha`` is outside (0, 1), the sample is empty or holds NaN.
    """
    if not 0 < alpha < 1:
        raise ValueError("alpha must be in (0, 1)")

    values = np.asarray(getattr(sample, "array", sample), dtype=np.float64).reshape(-1)
    if values.size == 0:
        raise ValueError("Cannot test an empty sample")
    if np.any(np.isnan(values)):
        raise ValueError("Sample contains NaN")
    if values.size < MIN_RELIABLE_SAMPLE_SIZE:
        warnings.warn(
            f"Kolmogorov-Smirnov test on {values.size} observations has little power",
            UserWarning,
            stacklevel=2,
        )

    cdf = distribution.query_method(CharacteristicName.CDF)
    result = stats.kstest(values, lambda x: np.asarray(cdf(x), dtype=np.float64))
    return GoodnessOfFitResult(
        statistic=float(result.statistic),
        pvalue=float(result.pvalue),
        alpha=alpha,
        n=int(values.size),
    )


def check_reparametrization(
    target_distribution: ParametricFamilyDistribution,
    name: ReparametrizationName,
    n: int,
    rng: np.random.Generator | None = None,
    alpha: float = 0.01,
    seed: int | None = None,
) -> GoodnessOfFitResult:
    """
    Draw ``n`` values through recipe ``name`` and test them against the target.

    Builtin recipes are registered on first use.

    Raises
    ------
    ValueError
        If the recipe is unknown for the target family, or as :func:`ks_check`.
    """
    configure_reparametrizations()
    sample = ReparametrizedSamplingStrategy(name).sample(
        n, target_distribution, rng=rng, seed=seed
    )
    return ks_check(sample, target_distribution, alpha=alpha)
