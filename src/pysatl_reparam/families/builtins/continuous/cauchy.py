"""
Cauchy distribution family implementation.

The Cauchy family is the canonical heavy-tailed target: HMC struggles with its
tails when sampled directly, while each of its reparametrizations (tangent of a
uniform, normal scale mixture, ratio of normals) samples only light-tailed
base variates.
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
    ComplexArray,
    FamilyName,
    NumericArray,
)

if TYPE_CHECKING:
    from typing import Any


def configure_cauchy_family() -> None:
    """
    Configure and register the Cauchy distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.CAUCHY):
        return

    CAUCHY_DOC = """
    Cauchy (Lorentz) distribution.

    Defined by location (μ) and scale (σ). Mean and variance do not exist.

    Probability density function:
        f(x) = 1 / (πσ * (1 + ((x-μ)/σ)²))

    Cumulative distribution function:
        F(x) = 1/2 + arctan((x-μ)/σ) / π
    """

    def pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Probability density function for Cauchy distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - mu: float (location)
            - sigma: float (scale)
        x : NumericArray
            Points at which to evaluate the probability density function

        Returns
        -------
        NumericArray
            Probability density values at points x
        """
        parameters = cast(_LocScale, parameters)

        z = (np.asarray(x) - parameters.mu) / parameters.sigma
        return cast(NumericArray, 1.0 / (np.pi * parameters.sigma * (1.0 + z**2)))

    def logpdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Log-density of Cauchy distribution."""
        parameters = cast(_LocScale, parameters)

        z = (np.asarray(x) - parameters.mu) / parameters.sigma
        return cast(NumericArray, -math.log(math.pi * parameters.sigma) - np.log1p(z**2))

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Cumulative distribution function for Cauchy distribution."""
        parameters = cast(_LocScale, parameters)

        z = (np.asarray(x) - parameters.mu) / parameters.sigma
        return cast(NumericArray, 0.5 + np.arctan(z) / np.pi)

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        """
        Percent point function (inverse CDF) for Cauchy distribution.

            F⁻¹(p) = μ + σ * tan(π(p - 1/2))

        Returns -inf for p = 0 and inf for p = 1.

        Raises
        ------
        ValueError
            If probability is outside [0, 1]
        """
        p = np.asarray(p, dtype=np.float64)
        if np.any((p < 0) | (p > 1)):
            raise ValueError("Probability must be in [0, 1]")

        parameters = cast(_LocScale, parameters)

        quantile = parameters.mu + parameters.sigma * np.tan(np.pi * (p - 0.5))
        quantile = np.where(p == 0.0, -np.inf, quantile)
        return cast(NumericArray, np.where(p == 1.0, np.inf, quantile))

    def char_func(parameters: Parametrization, t: NumericArray) -> ComplexArray:
        """Characteristic function exp(iμt - σ|t|) of Cauchy distribution."""
        parameters = cast(_LocScale, parameters)

        t_arr = np.asarray(t, dtype=np.float64)
        return cast(
            ComplexArray,
            np.exp(1j * parameters.mu * t_arr - parameters.sigma * np.abs(t_arr)),
        )

    def undefined_moment(_1: Parametrization, _2: Any) -> float:
        """Moments of the Cauchy distribution are undefined."""
        return math.nan

    def _support(_: Parametrization) -> ContinuousSupport:
        """Support of Cauchy distribution"""
        return ContinuousSupport()

    Cauchy = ParametricFamily(
        name=FamilyName.CAUCHY,
        parametrization_names=["locScale"],
        characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.LOGPDF: logpdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.PPF: ppf,
            CharacteristicName.CF: char_func,
            CharacteristicName.MEAN: undefined_moment,
            CharacteristicName.VAR: undefined_moment,
        },
        support=_support,
    )
    Cauchy.__doc__ = CAUCHY_DOC

    @parametrization(family=Cauchy, name="locScale")
    class _LocScale(Parametrization):
        """
        Location-scale parametrization of Cauchy distribution.

        Parameters
        ----------
        mu : float
            Location (median) of the distribution
        sigma : float
            Scale (half width at half maximum)
        """

        mu: float
        sigma: float

        @constraint(description="sigma > 0")
        def check_sigma_positive(self) -> bool:
            """Check that scale is positive."""
            return self.sigma > 0

    ParametricFamilyRegister.register(Cauchy)
