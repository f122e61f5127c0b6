"""
Lognormal distribution family implementation.

exp(μ + σZ) with Z ~ Normal(0, 1). Sampling Z on the unconstrained line and
exponentiating removes the positivity boundary HMC would otherwise hit.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

import numpy as np
from scipy.special import erf, erfinv

from pysatl_reparam.distributions.support import ContinuousSupport
from pysatl_reparam.families.parametric_family import ParametricFamily
from pysatl_reparam.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_reparam.families.registry import ParametricFamilyRegister
from pysatl_reparam.types import (
    CharacteristicName,
    FamilyName,
    NumericArray,
)

if TYPE_CHECKING:
    from typing import Any


def configure_lognormal_family() -> None:
    """
    Configure and register the LogNormal distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.LOGNORMAL):
        return

    LOGNORMAL_DOC = """
    Lognormal distribution.

    Defined by the mean (μ) and standard deviation (σ) of log X.

    Probability density function:
        f(x) = 1/(xσ√(2π)) * exp(-(ln x - μ)²/(2σ²)) for x > 0
    """

    def logpdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Log-density of lognormal distribution (-inf for x ≤ 0)."""
        parameters = cast(_LogMeanStd, parameters)

        x = np.asarray(x, dtype=np.float64)
        inside = x > 0
        log_x = np.log(np.where(inside, x, 1.0))
        z = (log_x - parameters.mu) / parameters.sigma
        value = -0.5 * z**2 - log_x - math.log(parameters.sigma) - 0.5 * math.log(2 * math.pi)
        return cast(NumericArray, np.where(inside, value, -np.inf))

    def pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        return cast(NumericArray, np.exp(logpdf(parameters, x)))

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        parameters = cast(_LogMeanStd, parameters)

        x = np.asarray(x, dtype=np.float64)
        inside = x > 0
        log_x = np.log(np.where(inside, x, 1.0))
        value = 0.5 * (1 + erf((log_x - parameters.mu) / (parameters.sigma * math.sqrt(2))))
        return cast(NumericArray, np.where(inside, value, 0.0))

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        """
        Percent point function exp(μ + σ√2 * erfinv(2p - 1)).

        Returns 0 for p = 0 and inf for p = 1.

        Raises
        ------
        ValueError
            If probability is outside [0, 1]
        """
        p = np.asarray(p, dtype=np.float64)
        if np.any((p < 0) | (p > 1)):
            raise ValueError("Probability must be in [0, 1]")

        parameters = cast(_LogMeanStd, parameters)
        return cast(
            NumericArray,
            np.exp(parameters.mu + parameters.sigma * math.sqrt(2) * erfinv(2 * p - 1)),
        )

    def mean_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_LogMeanStd, parameters)
        return math.exp(parameters.mu + parameters.sigma**2 / 2)

    def var_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_LogMeanStd, parameters)
        s2 = parameters.sigma**2
        return math.expm1(s2) * math.exp(2 * parameters.mu + s2)

    def skew_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_LogMeanStd, parameters)
        s2 = parameters.sigma**2
        return (math.exp(s2) + 2) * math.sqrt(math.expm1(s2))

    def kurt_func(parameters: Parametrization, _: Any, excess: bool = False) -> float:
        parameters = cast(_LogMeanStd, parameters)
        s2 = parameters.sigma**2
        excess_kurtosis = math.exp(4 * s2) + 2 * math.exp(3 * s2) + 3 * math.exp(2 * s2) - 6
        return excess_kurtosis if excess else excess_kurtosis + 3.0

    def _support(_: Parametrization) -> ContinuousSupport:
        return ContinuousSupport(left=0.0, left_closed=False)

    LogNormal = ParametricFamily(
        name=FamilyName.LOGNORMAL,
        parametrization_names=["logMeanStd"],
        characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.LOGPDF: logpdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.PPF: ppf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
            CharacteristicName.SKEW: skew_func,
            CharacteristicName.KURT: kurt_func,
        },
        support=_support,
    )
    LogNormal.__doc__ = LOGNORMAL_DOC

    @parametrization(family=LogNormal, name="logMeanStd")
    class _LogMeanStd(Parametrization):
        """
        Parametrization by the moments of log X.

        Parameters
        ----------
        mu : float
            Mean of log X
        sigma : float
            Standard deviation of log X
        """

        mu: float
        sigma: float

        @constraint(description="sigma > 0")
        def check_sigma_positive(self) -> bool:
            return self.sigma > 0

    ParametricFamilyRegister.register(LogNormal)
