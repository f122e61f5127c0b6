"""
Normal family.

The standard Normal is the base variate of the non-centered, lognormal and
scale-mixture reparametrizations: every member is ``mu + sigma * Z``.
Two parametrizations are provided, by standard deviation (``meanStd``, the
base) and by precision (``meanPrec``).
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
    ComplexArray,
    FamilyName,
    NumericArray,
)

if TYPE_CHECKING:
    from typing import Any

_LOG_SQRT_2PI = 0.5 * math.log(2.0 * math.pi)


def configure_normal_family() -> None:
    """Register the Normal family unless it is already there."""

    if ParametricFamilyRegister.contains(FamilyName.NORMAL):
        return

    NORMAL_DOC = """
    Normal distribution N(μ, σ²).

    Density:
        f(x) = exp(-(x - μ)² / (2σ²)) / (σ√(2π))

    Drawing Z ~ N(0, 1) and returning μ + σZ is the non-centered form.
    """

    def standardize(parameters: Parametrization, x: NumericArray) -> NumericArray:
        params = cast(_MeanStd, parameters)
        return cast(NumericArray, (np.asarray(x, dtype=np.float64) - params.mu) / params.sigma)

    def logpdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Log-density at ``x``.

        Parameters
        ----------
        parameters : Parametrization
            Base (``meanStd``) values ``mu`` and ``sigma``.
        x : NumericArray
            Evaluation points.

        Returns
        -------
        NumericArray
            ``-z²/2 - log σ - log √(2π)`` with ``z = (x - μ)/σ``.
        """
        z = standardize(parameters, x)
        sigma = cast(_MeanStd, parameters).sigma
        return cast(NumericArray, -0.5 * z**2 - math.log(sigma) - _LOG_SQRT_2PI)

    def pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        return cast(NumericArray, np.exp(logpdf(parameters, x)))

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Φ((x - μ)/σ) written through ``erf``."""
        z = standardize(parameters, x)
        return cast(NumericArray, 0.5 * (1.0 + erf(z / math.sqrt(2.0))))

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        """
        Quantile μ + σ√2 erfinv(2p - 1); ``-inf`` at 0 and ``inf`` at 1.

        Raises
        ------
        ValueError
            If a probability lies outside [0, 1].
        """
        q = np.asarray(p, dtype=np.float64)
        if np.any((q < 0) | (q > 1)):
            raise ValueError("Probability must be in [0, 1]")
        params = cast(_MeanStd, parameters)
        return cast(NumericArray, params.mu + params.sigma * math.sqrt(2.0) * erfinv(2 * q - 1))

    def char_func(parameters: Parametrization, t: NumericArray) -> ComplexArray:
        params = cast(_MeanStd, parameters)
        arg = np.asarray(t, dtype=np.float64)
        return cast(ComplexArray, np.exp(1j * params.mu * arg - 0.5 * (params.sigma * arg) ** 2))

    def mean_func(parameters: Parametrization, _: Any) -> float:
        return cast(_MeanStd, parameters).mu

    def var_func(parameters: Parametrization, _: Any) -> float:
        return cast(_MeanStd, parameters).sigma ** 2

    def skew_func(_1: Parametrization, _2: Any) -> float:
        return 0.0

    def kurt_func(_1: Parametrization, _2: Any, excess: bool = False) -> float:
        """Kurtosis: 3, or 0 when ``excess`` is set."""
        return 0.0 if excess else 3.0

    Normal = ParametricFamily(
        name=FamilyName.NORMAL,
        parametrization_names=["meanStd", "meanPrec"],
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
        support=lambda _: ContinuousSupport(),
    )
    Normal.__doc__ = NORMAL_DOC

    @parametrization(family=Normal, name="meanStd")
    class _MeanStd(Parametrization):
        """Location ``mu`` and standard deviation ``sigma``."""

        mu: float
        sigma: float

        @constraint(description="sigma > 0")
        def sigma_is_positive(self) -> bool:
            return self.sigma > 0

    @parametrization(family=Normal, name="meanPrec")
    class _MeanPrec(Parametrization):
        """
        Location ``mu`` and precision ``tau = 1/σ²``.

        Common in Gibbs-style and Stan ``normal`` priors written on precision.
        """

        mu: float
        tau: float

        @constraint(description="tau > 0")
        def tau_is_positive(self) -> bool:
            return self.tau > 0

        def transform_to_base_parametrization(self) -> Parametrization:
            return _MeanStd(mu=self.mu, sigma=1.0 / math.sqrt(self.tau))

    ParametricFamilyRegister.register(Normal)
