"""
Pareto distribution family implementation.

Type I Pareto with minimum y_min and tail index α. Both y_min * (1 - U)^(-1/α)
and y_min * exp(E/α), with U uniform and E standard exponential, sample it.
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


def configure_pareto_family() -> None:
    """
    Configure and register the Pareto distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.PARETO):
        return

    PARETO_DOC = """
    Pareto (type I) distribution.

    Probability density function:
        f(x) = α * y_min^α / x^(α+1) for x ≥ y_min

    Cumulative distribution function:
        F(x) = 1 - (y_min / x)^α for x ≥ y_min
    """

    def logpdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Log-density of Pareto distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - y_min: float (scale, minimum of the support)
            - alpha: float (shape, tail index)
        x : NumericArray
            Points at which to evaluate the log-density

        Returns
        -------
        NumericArray
            Log-density values; -inf below y_min
        """
        parameters = cast(_MinShape, parameters)

        y_min = parameters.y_min
        alpha = parameters.alpha
        x = np.asarray(x, dtype=np.float64)
        inside = x >= y_min
        log_x = np.log(np.where(inside, x, y_min))
        value = math.log(alpha) + alpha * math.log(y_min) - (alpha + 1) * log_x
        return cast(NumericArray, np.where(inside, value, -np.inf))

    def pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        return cast(NumericArray, np.exp(logpdf(parameters, x)))

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        parameters = cast(_MinShape, parameters)

        y_min = parameters.y_min
        x = np.asarray(x, dtype=np.float64)
        inside = x >= y_min
        ratio = y_min / np.where(inside, x, y_min)
        return cast(NumericArray, np.where(inside, 1.0 - ratio**parameters.alpha, 0.0))

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        """
        Percent point function y_min * (1 - p)^(-1/α).

        Returns y_min for p = 0 and inf for p = 1.

        Raises
        ------
        ValueError
            If probability is outside [0, 1]
        """
        p = np.asarray(p, dtype=np.float64)
        if np.any((p < 0) | (p > 1)):
            raise ValueError("Probability must be in [0, 1]")

        parameters = cast(_MinShape, parameters)

        with np.errstate(divide="ignore"):
            quantile = parameters.y_min * np.exp(-np.log1p(-p) / parameters.alpha)
        return cast(NumericArray, np.where(p < 1.0, quantile, np.inf))

    def mean_func(parameters: Parametrization, _: Any) -> float:
        """Mean α y_min/(α - 1); infinite for α ≤ 1."""
        parameters = cast(_MinShape, parameters)
        alpha = parameters.alpha
        if alpha <= 1:
            return math.inf
        return alpha * parameters.y_min / (alpha - 1)

    def var_func(parameters: Parametrization, _: Any) -> float:
        """Variance y_min² α / ((α - 1)² (α - 2)); infinite for α ≤ 2."""
        parameters = cast(_MinShape, parameters)
        alpha = parameters.alpha
        if alpha <= 2:
            return math.inf
        return parameters.y_min**2 * alpha / ((alpha - 1) ** 2 * (alpha - 2))

    def skew_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_MinShape, parameters)
        alpha = parameters.alpha
        if alpha <= 3:
            return math.nan
        return 2 * (1 + alpha) / (alpha - 3) * math.sqrt((alpha - 2) / alpha)

    def kurt_func(parameters: Parametrization, _: Any, excess: bool = False) -> float:
        parameters = cast(_MinShape, parameters)
        alpha = parameters.alpha
        if alpha <= 4:
            return math.nan
        excess_kurtosis = (
            6 * (alpha**3 + alpha**2 - 6 * alpha - 2) / (alpha * (alpha - 3) * (alpha - 4))
        )
        return excess_kurtosis if excess else excess_kurtosis + 3.0

    def _support(parameters: Parametrization) -> ContinuousSupport:
        parameters = cast(_MinShape, parameters)
        return ContinuousSupport(left=parameters.y_min)

    Pareto = ParametricFamily(
        name=FamilyName.PARETO,
        parametrization_names=["minShape"],
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
    Pareto.__doc__ = PARETO_DOC

    @parametrization(family=Pareto, name="minShape")
    class _MinShape(Parametrization):
        """
        Minimum-shape parametrization of Pareto distribution.

        Parameters
        ----------
        y_min : float
            Minimum of the support (scale)
        alpha : float
            Tail index (shape)
        """

        y_min: float
        alpha: float

        @constraint(description="y_min > 0")
        def check_y_min_positive(self) -> bool:
            return self.y_min > 0

        @constraint(description="alpha > 0")
        def check_alpha_positive(self) -> bool:
            return self.alpha > 0

    ParametricFamilyRegister.register(Pareto)
