"""
Gamma distribution family implementation.

Contains the Gamma family with shape-rate and shape-scale parameterizations.
Gamma(ν/2, rate=ν/2) is the mixing precision of the Student-t scale mixture.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

import numpy as np
from scipy.special import gammainc, gammaincinv, gammaln, xlogy

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


def configure_gamma_family() -> None:
    """
    Configure and register the Gamma distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.GAMMA):
        return

    GAMMA_DOC = """
    Gamma distribution.

    Defined by shape (α) and rate (β), or shape (k) and scale (θ = 1/β).

    Probability density function (shape-rate parametrization):
        f(x) = β^α / Γ(α) * x^(α-1) * exp(-βx) for x ≥ 0
    """

    def logpdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Log-density of gamma distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - alpha: float (shape)
            - beta: float (rate)
        x : NumericArray
            Points at which to evaluate the log-density

        Returns
        -------
        NumericArray
            Log-density values; -inf outside [0, ∞)
        """
        parameters = cast(_ShapeRate, parameters)

        alpha = parameters.alpha
        beta = parameters.beta
        x = np.asarray(x, dtype=np.float64)
        inside = x >= 0
        x_safe = np.where(inside, x, 1.0)

        with np.errstate(divide="ignore", invalid="ignore"):
            value = (
                alpha * math.log(beta)
                - gammaln(alpha)
                + xlogy(alpha - 1.0, x_safe)
                - beta * x_safe
            )
        return cast(NumericArray, np.where(inside, value, -np.inf))

    def pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Probability density function for gamma distribution."""
        return cast(NumericArray, np.exp(logpdf(parameters, x)))

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Regularized lower incomplete gamma function P(α, βx), 0 for x < 0."""
        parameters = cast(_ShapeRate, parameters)

        x = np.asarray(x, dtype=np.float64)
        return cast(
            NumericArray,
            np.where(x > 0, gammainc(parameters.alpha, parameters.beta * np.maximum(x, 0.0)), 0.0),
        )

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        """
        Percent point function (inverse CDF) for gamma distribution.

        Returns 0 for p = 0 and inf for p = 1.

        Raises
        ------
        ValueError
            If probability is outside [0, 1]
        """
        p = np.asarray(p, dtype=np.float64)
        if np.any((p < 0) | (p > 1)):
            raise ValueError("Probability must be in [0, 1]")

        parameters = cast(_ShapeRate, parameters)

        quantile = gammaincinv(parameters.alpha, p) / parameters.beta
        return cast(NumericArray, np.where(p < 1.0, quantile, np.inf))

    def char_func(parameters: Parametrization, t: NumericArray) -> ComplexArray:
        """Characteristic function (1 - it/β)^(-α) of gamma distribution."""
        parameters = cast(_ShapeRate, parameters)

        t_arr = np.asarray(t, dtype=np.float64)
        return cast(ComplexArray, (1 - 1j * t_arr / parameters.beta) ** (-parameters.alpha))

    def mean_func(parameters: Parametrization, _: Any) -> float:
        """Mean of gamma distribution."""
        parameters = cast(_ShapeRate, parameters)
        return parameters.alpha / parameters.beta

    def var_func(parameters: Parametrization, _: Any) -> float:
        """Variance of gamma distribution."""
        parameters = cast(_ShapeRate, parameters)
        return parameters.alpha / parameters.beta**2

    def scale_mean_func(parameters: Parametrization, _: Any) -> float:
        """Mean kθ, read directly from the shape-scale values."""
        parameters = cast(_ShapeScale, parameters)
        return parameters.k * parameters.theta

    def scale_var_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_ShapeScale, parameters)
        return parameters.k * parameters.theta**2

    def skew_func(parameters: Parametrization, _: Any) -> float:
        """Skewness of gamma distribution."""
        parameters = cast(_ShapeRate, parameters)
        return 2.0 / math.sqrt(parameters.alpha)

    def kurt_func(parameters: Parametrization, _: Any, excess: bool = False) -> float:
        """Raw or excess kurtosis of gamma distribution."""
        parameters = cast(_ShapeRate, parameters)
        excess_kurtosis = 6.0 / parameters.alpha
        return excess_kurtosis if excess else excess_kurtosis + 3.0

    def _support(_: Parametrization) -> ContinuousSupport:
        """Support of gamma distribution"""
        return ContinuousSupport(left=0.0)

    Gamma = ParametricFamily(
        name=FamilyName.GAMMA,
        parametrization_names=["shapeRate", "shapeScale"],
        characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.LOGPDF: logpdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.PPF: ppf,
            CharacteristicName.CF: char_func,
            CharacteristicName.MEAN: {"shapeRate": mean_func, "shapeScale": scale_mean_func},
            CharacteristicName.VAR: {"shapeRate": var_func, "shapeScale": scale_var_func},
            CharacteristicName.SKEW: skew_func,
            CharacteristicName.KURT: kurt_func,
        },
        support=_support,
    )
    Gamma.__doc__ = GAMMA_DOC

    @parametrization(family=Gamma, name="shapeRate")
    class _ShapeRate(Parametrization):
        """
        Shape-rate parametrization of gamma distribution.

        Parameters
        ----------
        alpha : float
            Shape parameter (α)
        beta : float
            Rate parameter (β)
        """

        alpha: float
        beta: float

        @constraint(description="alpha > 0")
        def check_alpha_positive(self) -> bool:
            return self.alpha > 0

        @constraint(description="beta > 0")
        def check_beta_positive(self) -> bool:
            return self.beta > 0

    @parametrization(family=Gamma, name="shapeScale")
    class _ShapeScale(Parametrization):
        """
        Shape-scale parametrization of gamma distribution.

        Parameters
        ----------
        k : float
            Shape parameter
        theta : float
            Scale parameter, θ = 1/β
        """

        k: float
        theta: float

        @constraint(description="k > 0")
        def check_k_positive(self) -> bool:
            return self.k > 0

        @constraint(description="theta > 0")
        def check_theta_positive(self) -> bool:
            return self.theta > 0

        def transform_to_base_parametrization(self) -> Parametrization:
            return _ShapeRate(alpha=self.k, beta=1.0 / self.theta)

    ParametricFamilyRegister.register(Gamma)
