"""
Half-Cauchy distribution family implementation.

|X| for X ~ Cauchy(0, σ). The usual prior on the group scale τ of a
hierarchical Normal model; σ * tan(πU/2) with U ~ Uniform(0, 1) samples it.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

import numpy as np

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


def configure_half_cauchy_family() -> None:
    """
    Configure and register the HalfCauchy distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.HALF_CAUCHY):
        return

    HALF_CAUCHY_DOC = """
    Half-Cauchy distribution.

    Probability density function:
        f(x) = 2 / (πσ * (1 + (x/σ)²)) for x ≥ 0

    Mean and variance are infinite.
    """

    def logpdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        parameters = cast(_Scale, parameters)

        x = np.asarray(x, dtype=np.float64)
        value = math.log(2.0 / (math.pi * parameters.sigma)) - np.log1p(
            (x / parameters.sigma) ** 2
        )
        return cast(NumericArray, np.where(x >= 0, value, -np.inf))

    def pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        return cast(NumericArray, np.exp(logpdf(parameters, x)))

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        parameters = cast(_Scale, parameters)

        x = np.asarray(x, dtype=np.float64)
        return cast(
            NumericArray,
            np.where(x >= 0, 2.0 / np.pi * np.arctan(x / parameters.sigma), 0.0),
        )

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        """
        Percent point function σ * tan(πp/2); inf for p = 1.

        Raises
        ------
        ValueError
            If probability is outside [0, 1]
        """
        p = np.asarray(p, dtype=np.float64)
        if np.any((p < 0) | (p > 1)):
            raise ValueError("Probability must be in [0, 1]")

        parameters = cast(_Scale, parameters)
        quantile = parameters.sigma * np.tan(np.pi * p / 2.0)
        return cast(NumericArray, np.where(p == 1.0, np.inf, quantile))

    def infinite_moment(_1: Parametrization, _2: Any) -> float:
        return math.inf

    def _support(_: Parametrization) -> ContinuousSupport:
        return ContinuousSupport(left=0.0)

    HalfCauchy = ParametricFamily(
        name=FamilyName.HALF_CAUCHY,
        parametrization_names=["scale"],
        characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.LOGPDF: logpdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.PPF: ppf,
            CharacteristicName.MEAN: infinite_moment,
            CharacteristicName.VAR: infinite_moment,
        },
        support=_support,
    )
    HalfCauchy.__doc__ = HALF_CAUCHY_DOC

    @parametrization(family=HalfCauchy, name="scale")
    class _Scale(Parametrization):
        """
        Scale parametrization of half-Cauchy distribution.

        Parameters
        ----------
        sigma : float
            Scale of the underlying Cauchy distribution
        """

        sigma: float

        @constraint(description="sigma > 0")
        def check_sigma_positive(self) -> bool:
            return self.sigma > 0

    ParametricFamilyRegister.register(HalfCauchy)
