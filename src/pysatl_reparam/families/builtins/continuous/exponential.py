"""
Exponential family.

Exponential plays two parts among the recipes:

- as a *target*, ``log_uniform`` draws it as ``-log(1 - U)/λ`` from a
  standard uniform;
- as a *base variate*, ``exp_exponential`` draws Pareto(y_min, α) as
  ``y_min exp(E/α)`` from ``E ~ Exponential(1)``, the member with
  parameters :data:`UNIT_RATE`.

Members are given by rate ``lambda_`` (``rate``, the base) or by scale
``beta = 1/λ`` (``scale``).
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

UNIT_RATE: dict[str, float] = {"lambda_": 1.0}
"""Base parameters of E ~ Exponential(1), the Pareto base variate."""


def configure_exponential_family() -> None:
    """Register the Exponential family unless it is already there."""

    if ParametricFamilyRegister.contains(FamilyName.EXPONENTIAL):
        return

    EXPONENTIAL_DOC = """
    Exponential distribution with rate λ.

    Density λ exp(-λx) on [0, ∞).

    -log(1 - U)/λ ~ Exponential(λ) for U ~ Uniform(0, 1), and
    y_min exp(E/α) ~ Pareto(y_min, α) for E ~ Exponential(1).
    """

    def rate(parameters: Parametrization) -> float:
        return cast(_Rate, parameters).lambda_

    def logpdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Log-density at ``x``.

        Parameters
        ----------
        parameters : Parametrization
            Base (``rate``) values.
        x : NumericArray
            Evaluation points.

        Returns
        -------
        NumericArray
            ``log λ - λx`` for ``x >= 0`` and ``-inf`` below zero.
        """
        lam = rate(parameters)
        x_arr = np.asarray(x, dtype=np.float64)
        return cast(NumericArray, np.where(x_arr >= 0, math.log(lam) - lam * x_arr, -np.inf))

    def pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        return cast(NumericArray, np.exp(logpdf(parameters, x)))

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """``1 - exp(-λx)`` through ``expm1``, 0 below zero."""
        lam = rate(parameters)
        x_arr = np.maximum(np.asarray(x, dtype=np.float64), 0.0)
        return cast(NumericArray, -np.expm1(-lam * x_arr))

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        """
        Quantile ``-log1p(-p)/λ``; 0 at ``p = 0`` and ``inf`` at ``p = 1``.

        This is the ``log_uniform`` recipe applied to ``p``.

        Raises
        ------
        ValueError
            If a probability lies outside [0, 1].
        """
        q = np.asarray(p, dtype=np.float64)
        if np.any((q < 0) | (q > 1)):
            raise ValueError("Probability must be in [0, 1]")
        with np.errstate(divide="ignore"):
            return cast(NumericArray, -np.log1p(-q) / rate(parameters))

    def char_func(parameters: Parametrization, t: NumericArray) -> ComplexArray:
        lam = rate(parameters)
        return cast(ComplexArray, lam / (lam - 1j * np.asarray(t, dtype=np.float64)))

    def mean_func(parameters: Parametrization, _: Any) -> float:
        return 1.0 / rate(parameters)

    def var_func(parameters: Parametrization, _: Any) -> float:
        return rate(parameters) ** -2

    def skew_func(_1: Parametrization, _2: Any) -> float:
        return 2.0

    def kurt_func(_1: Parametrization, _2: Any, excess: bool = False) -> float:
        """Kurtosis 9, or 6 when ``excess`` is set."""
        return 6.0 if excess else 9.0

    Exponential = ParametricFamily(
        name=FamilyName.EXPONENTIAL,
        parametrization_names=["rate", "scale"],
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
        support=lambda _: ContinuousSupport(left=0.0),
    )
    Exponential.__doc__ = EXPONENTIAL_DOC

    @parametrization(family=Exponential, name="rate")
    class _Rate(Parametrization):
        """Rate ``lambda_`` (λ)."""

        lambda_: float

        @constraint(description="lambda_ > 0")
        def rate_is_positive(self) -> bool:
            return self.lambda_ > 0

    @parametrization(family=Exponential, name="scale")
    class _Scale(Parametrization):
        """Scale ``beta`` = 1/λ, the mean waiting time."""

        beta: float

        @constraint(description="beta > 0")
        def scale_is_positive(self) -> bool:
            return self.beta > 0

        def transform_to_base_parametrization(self) -> Parametrization:
            return _Rate(lambda_=1.0 / self.beta)

    ParametricFamilyRegister.register(Exponential)
