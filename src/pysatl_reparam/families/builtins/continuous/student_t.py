"""
Student-t distribution family implementation.

Contains the location-scale Student-t family and its standard form. The
Student-t is a scale mixture of normals: with τ ~ Gamma(ν/2, rate=ν/2) and
Z ~ Normal(0, 1), μ + σZ/√τ ~ StudentT(ν, μ, σ).
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

import numpy as np
from scipy.special import gammaln, stdtr, stdtrit

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


def configure_student_t_family() -> None:
    """
    Configure and register the Student-t distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.STUDENT_T):
        return

    STUDENT_T_DOC = """
    Student-t distribution.

    Defined by degrees of freedom (ν), location (μ) and scale (σ).

    Probability density function:
        f(x) = Γ((ν+1)/2) / (Γ(ν/2) √(νπ) σ) * (1 + z²/ν)^(-(ν+1)/2),  z = (x-μ)/σ

    ν = 1 is the Cauchy distribution; ν → ∞ approaches the Normal.
    """

    def logpdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Log-density of Student-t distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - nu: float (degrees of freedom)
            - mu: float (location)
            - sigma: float (scale)
        x : NumericArray
            Points at which to evaluate the log-density

        Returns
        -------
        NumericArray
            Log-density values at points x
        """
        parameters = cast(_LocScale, parameters)

        nu = parameters.nu
        z = (np.asarray(x, dtype=np.float64) - parameters.mu) / parameters.sigma
        log_norm = (
            gammaln((nu + 1) / 2)
            - gammaln(nu / 2)
            - 0.5 * math.log(nu * math.pi)
            - math.log(parameters.sigma)
        )
        return cast(NumericArray, log_norm - (nu + 1) / 2 * np.log1p(z**2 / nu))

    def pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Probability density function for Student-t distribution."""
        return cast(NumericArray, np.exp(logpdf(parameters, x)))

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Cumulative distribution function for Student-t distribution."""
        parameters = cast(_LocScale, parameters)

        z = (np.asarray(x, dtype=np.float64) - parameters.mu) / parameters.sigma
        return cast(NumericArray, stdtr(parameters.nu, z))

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        """
        Percent point function (inverse CDF) for Student-t distribution.

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

        inner = np.clip(p, np.finfo(np.float64).tiny, 1.0 - np.finfo(np.float64).epsneg)
        quantile = parameters.mu + parameters.sigma * stdtrit(parameters.nu, inner)
        quantile = np.where(p == 0.0, -np.inf, quantile)
        return cast(NumericArray, np.where(p == 1.0, np.inf, quantile))

    def mean_func(parameters: Parametrization, _: Any) -> float:
        """Mean μ of Student-t distribution; undefined (nan) for ν ≤ 1."""
        parameters = cast(_LocScale, parameters)
        return parameters.mu if parameters.nu > 1 else math.nan

    def var_func(parameters: Parametrization, _: Any) -> float:
        """Variance σ²ν/(ν-2); inf for 1 < ν ≤ 2 and undefined for ν ≤ 1."""
        parameters = cast(_LocScale, parameters)
        nu = parameters.nu
        if nu > 2:
            return parameters.sigma**2 * nu / (nu - 2)
        if nu > 1:
            return math.inf
        return math.nan

    def skew_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_LocScale, parameters)
        return 0.0 if parameters.nu > 3 else math.nan

    def kurt_func(parameters: Parametrization, _: Any, excess: bool = False) -> float:
        """Raw or excess kurtosis; excess is 6/(ν-4) for ν > 4, inf for 2 < ν ≤ 4."""
        parameters = cast(_LocScale, parameters)
        nu = parameters.nu
        if nu > 4:
            excess_kurtosis = 6.0 / (nu - 4)
        elif nu > 2:
            excess_kurtosis = math.inf
        else:
            return math.nan
        return excess_kurtosis if excess else excess_kurtosis + 3.0

    def _support(_: Parametrization) -> ContinuousSupport:
        """Support of Student-t distribution"""
        return ContinuousSupport()

    StudentT = ParametricFamily(
        name=FamilyName.STUDENT_T,
        parametrization_names=["locScale", "standard"],
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
    StudentT.__doc__ = STUDENT_T_DOC

    @parametrization(family=StudentT, name="locScale")
    class _LocScale(Parametrization):
        """
        Location-scale parametrization of Student-t distribution.

        Parameters
        ----------
        nu : float
            Degrees of freedom
        mu : float
            Location
        sigma : float
            Scale
        """

        nu: float
        mu: float
        sigma: float

        @constraint(description="nu > 0")
        def check_nu_positive(self) -> bool:
            return self.nu > 0

        @constraint(description="sigma > 0")
        def check_sigma_positive(self) -> bool:
            return self.sigma > 0

    @parametrization(family=StudentT, name="standard")
    class _Standard(Parametrization):
        """
        Standard Student-t (μ = 0, σ = 1).

        Parameters
        ----------
        nu : float
            Degrees of freedom
        """

        nu: float

        @constraint(description="nu > 0")
        def check_nu_positive(self) -> bool:
            return self.nu > 0

        def transform_to_base_parametrization(self) -> Parametrization:
            return _LocScale(nu=self.nu, mu=0.0, sigma=1.0)

    ParametricFamilyRegister.register(StudentT)
