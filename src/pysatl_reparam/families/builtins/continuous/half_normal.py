"""
Half-normal distribution family implementation.

|Z| for Z ~ Normal(0, σ); a common weakly informative prior for hierarchical
scales.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

import numpy as np
from scipy.special import dawsn, erf, erfinv

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
    ComplexArray,
    FamilyName,
    NumericArray,
)

if TYPE_CHECKING:
    from typing import Any


def configure_half_normal_family() -> None:
    """
    Configure and register the HalfNormal distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.HALF_NORMAL):
        return

    HALF_NORMAL_DOC = """
    Half-normal distribution.

    Probability density function:
        f(x) = √2 / (σ√π) * exp(-x²/(2σ²)) for x ≥ 0
    """

    def logpdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        parameters = cast(_Scale, parameters)

        sigma = parameters.sigma
        x = np.asarray(x, dtype=np.float64)
        value = 0.5 * math.log(2.0 / math.pi) - math.log(sigma) - x**2 / (2 * sigma**2)
        return cast(NumericArray, np.where(x >= 0, value, -np.inf))

    def pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        return cast(NumericArray, np.exp(logpdf(parameters, x)))

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        parameters = cast(_Scale, parameters)

        x = np.asarray(x, dtype=np.float64)
        return cast(
            NumericArray,
            np.where(x >= 0, erf(x / (parameters.sigma * math.sqrt(2.0))), 0.0),
        )

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        """
        Percent point function σ√2 * erfinv(p); inf for p = 1.

        Raises
        ------
        ValueError
            If probability is outside [0, 1]
        """
        p = np.asarray(p, dtype=np.float64)
        if np.any((p < 0) | (p > 1)):
            raise ValueError("Probability must be in [0, 1]")

        parameters = cast(_Scale, parameters)
        return cast(NumericArray, parameters.sigma * math.sqrt(2.0) * erfinv(p))

    def char_func(parameters: Parametrization, t: NumericArray) -> ComplexArray:
        """
        Characteristic function exp(-s²) + i * 2/√π * D(s), s = σt/√2.

        D is the Dawson function; this equals exp(-s²)(1 + i erfi(s)) without
        overflowing for large |t|.
        """
        parameters = cast(_Scale, parameters)

        s = parameters.sigma * np.asarray(t, dtype=np.float64) / math.sqrt(2.0)
        return cast(ComplexArray, np.exp(-(s**2)) + 2j / math.sqrt(math.pi) * dawsn(s))

    def mean_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_Scale, parameters)
        return parameters.sigma * math.sqrt(2.0 / math.pi)

    def var_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_Scale, parameters)
        return parameters.sigma**2 * (1.0 - 2.0 / math.pi)

    def skew_func(_1: Parametrization, _2: Any) -> float:
        return math.sqrt(2.0) * (4.0 - math.pi) / (math.pi - 2.0) ** 1.5

    def kurt_func(_1: Parametrization, _2: Any, excess: bool = False) -> float:
        excess_kurtosis = 8.0 * (math.pi - 3.0) / (math.pi - 2.0) ** 2
        return excess_kurtosis if excess else excess_kurtosis + 3.0

    def _support(_: Parametrization) -> ContinuousSupport:
        return ContinuousSupport(left=0.0)

    HalfNormal = ParametricFamily(
        name=FamilyName.HALF_NORMAL,
        parametrization_names=["scale"],
        characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.LOGPDF: logpdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.PPF: ppf,
            CharacteristicName.CF: char_func,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
            CharacteristicName.SKEW: skew_func,
            CharacteristicName.KURT: kurt_func,
        },
        support=_support,
    )
    HalfNormal.__doc__ = HALF_NORMAL_DOC

    @parametrization(family=HalfNormal, name="scale")
    class _Scale(Parametrization):
        """
        Scale parametrization of half-normal distribution.

        Parameters
        ----------
        sigma : float
            Scale of the underlying normal distribution
        """

        sigma: float

        @constraint(description="sigma > 0")
        def check_sigma_positive(self) -> bool:
            return self.sigma > 0

    ParametricFamilyRegister.register(HalfNormal)
