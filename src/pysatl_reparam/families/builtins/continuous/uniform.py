"""
Continuous uniform family.

Uniform(0, 1) is the base variate of the probability integral transform and
of every closed-form recipe built on it (``tan_uniform``, ``power_uniform``,
``log_uniform``, ``tan_half_uniform``). Members are given by their bounds
(``standard``, the base) or by center and width (``meanWidth``).
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

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

UNIT_INTERVAL: dict[str, float] = {"lower_bound": 0.0, "upper_bound": 1.0}
"""Base parameters of the standard uniform variate U."""


def configure_uniform_family() -> None:
    """Register the ContinuousUniform family unless it is already there."""

    if ParametricFamilyRegister.contains(FamilyName.CONTINUOUS_UNIFORM):
        return

    UNIFORM_DOC = """
    Continuous uniform distribution on [a, b].

    Density 1/(b - a) on the closed interval and 0 elsewhere; the log-density
    is derived from it.

    For any continuous CDF F and U ~ Uniform(0, 1), F⁻¹(U) has CDF F.
    """

    def bounds(parameters: Parametrization) -> tuple[float, float]:
        params = cast(_Standard, parameters)
        return params.lower_bound, params.upper_bound

    def pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        a, b = bounds(parameters)
        x_arr = np.asarray(x, dtype=np.float64)
        return cast(NumericArray, np.where((x_arr >= a) & (x_arr <= b), 1.0 / (b - a), 0.0))

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        a, b = bounds(parameters)
        return cast(
            NumericArray, np.clip((np.asarray(x, dtype=np.float64) - a) / (b - a), 0.0, 1.0)
        )

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        """
        Quantile ``a + p (b - a)``.

        Raises
        ------
        ValueError
            If a probability lies outside [0, 1].
        """
        q = np.asarray(p, dtype=np.float64)
        if np.any((q < 0) | (q > 1)):
            raise ValueError("Probability must be in [0, 1]")
        a, b = bounds(parameters)
        return cast(NumericArray, a + q * (b - a))

    def char_func(parameters: Parametrization, t: NumericArray) -> ComplexArray:
        """
        ``exp(i t (a + b)/2) sin(t (b - a)/2) / (t (b - a)/2)``.

        ``np.sinc`` is the normalized sinc, hence the division by π.
        """
        a, b = bounds(parameters)
        arg = np.asarray(t, dtype=np.float64)
        half_width = (b - a) / 2
        return cast(
            ComplexArray, np.sinc(half_width * arg / np.pi) * np.exp(0.5j * (a + b) * arg)
        )

    def mean_func(parameters: Parametrization, _: Any) -> float:
        a, b = bounds(parameters)
        return (a + b) / 2

    def var_func(parameters: Parametrization, _: Any) -> float:
        a, b = bounds(parameters)
        return (b - a) ** 2 / 12

    def skew_func(_1: Parametrization, _2: Any) -> float:
        return 0.0

    def kurt_func(_1: Parametrization, _2: Any, excess: bool = False) -> float:
        """Kurtosis 9/5, or -6/5 when ``excess`` is set."""
        return -1.2 if excess else 1.8

    def _support(parameters: Parametrization) -> ContinuousSupport:
        a, b = bounds(parameters)
        return ContinuousSupport(left=a, right=b, left_closed=True, right_closed=True)

    Uniform = ParametricFamily(
        name=FamilyName.CONTINUOUS_UNIFORM,
        parametrization_names=["standard", "meanWidth"],
        characteristics={
            CharacteristicName.PDF: pdf,
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
    Uniform.__doc__ = UNIFORM_DOC

    @parametrization(family=Uniform, name="standard")
    class _Standard(Parametrization):
        """
        Bounds of the interval.

        Parameters
        ----------
        lower_bound, upper_bound : float
            Ends ``a < b``.
        """

        lower_bound: float
        upper_bound: float

        @constraint(description="lower_bound < upper_bound")
        def bounds_are_ordered(self) -> bool:
            return self.lower_bound < self.upper_bound

    @parametrization(family=Uniform, name="meanWidth")
    class _MeanWidth(Parametrization):
        """Center ``mean`` and length ``width`` of the interval."""

        mean: float
        width: float

        @constraint(description="width > 0")
        def width_is_positive(self) -> bool:
            return self.width > 0

        def transform_to_base_parametrization(self) -> Parametrization:
            return _Standard(
                lower_bound=self.mean - self.width / 2, upper_bound=self.mean + self.width / 2
            )

    ParametricFamilyRegister.register(Uniform)
