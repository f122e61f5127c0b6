"""
Bijective Transforms
====================

Invertible maps from a base space to a target space, together with the
log-absolute-determinant of their Jacobian. A sampler that explores the base
space needs all three: ``forward`` to report target draws, ``inverse`` to
initialise from target values, and ``log_abs_det_jacobian`` to correct the
density,

    log p_base(x) = log p_target(forward(x)) + log |d forward / dx|.

Provided transforms:

- :class:`AffineTransform`: ``loc + scale * x`` (non-centered Normal);
- :class:`ExpTransform`: ``exp(x)`` (lognormal, positivity);
- :class:`TanTransform`: ``loc + scale * tan(π(u - 1/2))`` (Cauchy);
- :class:`ParetoTransform`: ``y_min * (1 - u)^(-1/α)`` (Pareto);
- :class:`InverseCDFTransform`: ``ppf(u)`` for any family distribution;
- :class:`ComposedTransform`: chains of the above.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, cast, runtime_checkable

import numpy as np

from pysatl_reparam.distributions.support import ContinuousSupport
from pysatl_reparam.types import CharacteristicName

if TYPE_CHECKING:
    from pysatl_reparam.distributions.distribution import Distribution
    from pysatl_reparam.types import ArrayLike, NumericArray


UNIT_INTERVAL = ContinuousSupport(left=0.0, right=1.0, left_closed=False, right_closed=False)
"""Open unit interval, the domain of the uniform-based transforms."""

REAL_LINE = ContinuousSupport()


@runtime_checkable
class Transform(Protocol):
    """Protocol for bijections between a base space and a target space."""

    @property
    def domain(self) -> ContinuousSupport: ...
    @property
    def codomain(self) -> ContinuousSupport: ...

    def forward(self, x: ArrayLike) -> NumericArray: ...
    def inverse(self, y: ArrayLike) -> NumericArray: ...
    def log_abs_det_jacobian(self, x: ArrayLike) -> NumericArray: ...


def _check_scale(name: str, value: float) -> None:
    if not (math.isfinite(value) and value > 0):
        raise ValueError(f"{name} must be positive and finite, got {value!r}")


def _check_location(name: str, value: float) -> None:
    if not math.isfinite(value):
        raise ValueError(f"{name} must be finite, got {value!r}")


@dataclass(frozen=True, slots=True)
class AffineTransform:
    """
    ``y = loc + scale * x``.

    With ``x ~ Normal(0, 1)`` this is the non-centered parameterization of
    ``Normal(loc, scale)``.
    """

    loc: float = 0.0
    scale: float = 1.0

    def __post_init__(self) -> None:
        _check_location("loc", self.loc)
        _check_scale("scale", self.scale)

    @property
    def domain(self) -> ContinuousSupport:
        return REAL_LINE

    @property
    def codomain(self) -> ContinuousSupport:
        return REAL_LINE

    def forward(self, x: ArrayLike) -> NumericArray:
        return cast("NumericArray", self.loc + self.scale * np.asarray(x, dtype=np.float64))

    def inverse(self, y: ArrayLike) -> NumericArray:
        return cast("NumericArray", (np.asarray(y, dtype=np.float64) - self.loc) / self.scale)

    def log_abs_det_jacobian(self, x: ArrayLike) -> NumericArray:
        x_arr = np.asarray(x, dtype=np.float64)
        return cast("NumericArray", np.full_like(x_arr, math.log(self.scale)))


@dataclass(frozen=True, slots=True)
class ExpTransform:
    """``y = exp(x)``; maps the real line onto ``(0, inf)``."""

    @property
    def domain(self) -> ContinuousSupport:
        return REAL_LINE

    @property
    def codomain(self) -> ContinuousSupport:
        return ContinuousSupport(left=0.0, left_closed=False)

    def forward(self, x: ArrayLike) -> NumericArray:
        with np.errstate(over="ignore"):
            return cast("NumericArray", np.exp(np.asarray(x, dtype=np.float64)))

    def inverse(self, y: ArrayLike) -> NumericArray:
        with np.errstate(divide="ignore", invalid="ignore"):
            return cast("NumericArray", np.log(np.asarray(y, dtype=np.float64)))

    def log_abs_det_jacobian(self, x: ArrayLike) -> NumericArray:
        return cast("NumericArray", np.asarray(x, dtype=np.float64).copy())


@dataclass(frozen=True, slots=True)
class TanTransform:
    """
    ``y = loc + scale * tan(π(u - 1/2))``; maps ``(0, 1)`` onto the real line.

    Pushes Uniform(0, 1) forward to Cauchy(loc, scale).
    """

    loc: float = 0.0
    scale: float = 1.0

    def __post_init__(self) -> None:
        _check_location("loc", self.loc)
        _check_scale("scale", self.scale)

    @property
    def domain(self) -> ContinuousSupport:
        return UNIT_INTERVAL

    @property
    def codomain(self) -> ContinuousSupport:
        return REAL_LINE

    def forward(self, x: ArrayLike) -> NumericArray:
        u = np.asarray(x, dtype=np.float64)
        return cast("NumericArray", self.loc + self.scale * np.tan(np.pi * (u - 0.5)))

    def inverse(self, y: ArrayLike) -> NumericArray:
        z = (np.asarray(y, dtype=np.float64) - self.loc) / self.scale
        return cast("NumericArray", 0.5 + np.arctan(z) / np.pi)

    def log_abs_det_jacobian(self, x: ArrayLike) -> NumericArray:
        u = np.asarray(x, dtype=np.float64)
        with np.errstate(divide="ignore"):
            return cast(
                "NumericArray",
                math.log(self.scale * math.pi) - 2.0 * np.log(np.abs(np.cos(np.pi * (u - 0.5)))),
            )


@dataclass(frozen=True, slots=True)
class ParetoTransform:
    """
    ``y = y_min * (1 - u)^(-1/alpha)``; maps ``[0, 1)`` onto ``[y_min, inf)``.

    Pushes Uniform(0, 1) forward to Pareto(y_min, alpha).
    """

    y_min: float
    alpha: float

    def __post_init__(self) -> None:
        _check_scale("y_min", self.y_min)
        _check_scale("alpha", self.alpha)

    @property
    def domain(self) -> ContinuousSupport:
        return ContinuousSupport(left=0.0, right=1.0, left_closed=True, right_closed=False)

    @property
    def codomain(self) -> ContinuousSupport:
        return ContinuousSupport(left=self.y_min)

    def forward(self, x: ArrayLike) -> NumericArray:
        u = np.asarray(x, dtype=np.float64)
        with np.errstate(divide="ignore"):
            return cast("NumericArray", self.y_min * np.exp(-np.log1p(-u) / self.alpha))

    def inverse(self, y: ArrayLike) -> NumericArray:
        ratio = self.y_min / np.asarray(y, dtype=np.float64)
        return cast("NumericArray", -np.expm1(self.alpha * np.log(ratio)))

    def log_abs_det_jacobian(self, x: ArrayLike) -> NumericArray:
        u = np.asarray(x, dtype=np.float64)
        with np.errstate(divide="ignore"):
            return cast(
                "NumericArray",
                math.log(self.y_min / self.alpha) - (1.0 / self.alpha + 1.0) * np.log1p(-u),
            )


class InverseCDFTransform:
    """
    ``y = F⁻¹(u)`` for a family distribution with analytical ``ppf``, ``cdf``
    and ``logpdf``.

    The derivative of ``F⁻¹`` at ``u`` is ``1 / f(F⁻¹(u))``, so the
    log-Jacobian is ``-logpdf(ppf(u))``.
    """

    __slots__ = ("_distribution",)

    def __init__(self, distribution: Distribution) -> None:
        self._distribution = distribution

    def __repr__(self) -> str:
        return f"InverseCDFTransform({self._distribution!r})"

    @property
    def distribution(self) -> Distribution:
        return self._distribution

    @property
    def domain(self) -> ContinuousSupport:
        return UNIT_INTERVAL

    @property
    def codomain(self) -> ContinuousSupport:
        support = self._distribution.support
        if isinstance(support, ContinuousSupport):
            return support
        return REAL_LINE

    def forward(self, x: ArrayLike) -> NumericArray:
        ppf = self._distribution.query_method(CharacteristicName.PPF)
        return cast("NumericArray", np.asarray(ppf(np.asarray(x, dtype=np.float64))))

    def inverse(self, y: ArrayLike) -> NumericArray:
        cdf = self._distribution.query_method(CharacteristicName.CDF)
        return cast("NumericArray", np.asarray(cdf(np.asarray(y, dtype=np.float64))))

    def log_abs_det_jacobian(self, x: ArrayLike) -> NumericArray:
        logpdf = self._distribution.query_method(CharacteristicName.LOGPDF)
        return cast("NumericArray", -np.asarray(logpdf(self.forward(x))))


class ComposedTransform:
    """
    Composition ``t_n ∘ ... ∘ t_1`` of transforms, applied left to right.

    Raises
    ------
    ValueError
        If no transform is given.
    """

    __slots__ = ("_parts",)

    def __init__(self, *transforms: Transform) -> None:
        if not transforms:
            raise ValueError("ComposedTransform needs at least one transform.")
        self._parts: tuple[Transform, ...] = tuple(transforms)

    def __repr__(self) -> str:
        return f"ComposedTransform{self._parts!r}"

    @property
    def parts(self) -> tuple[Transform, ...]:
        return self._parts

    @property
    def domain(self) -> ContinuousSupport:
        return self._parts[0].domain

    @property
    def codomain(self) -> ContinuousSupport:
        return self._parts[-1].codomain

    def forward(self, x: ArrayLike) -> NumericArray:
        value = np.asarray(x, dtype=np.float64)
        for part in self._parts:
            value = part.forward(value)
        return cast("NumericArray", value)

    def inverse(self, y: ArrayLike) -> NumericArray:
        value = np.asarray(y, dtype=np.float64)
        for part in reversed(self._parts):
            value = part.inverse(value)
        return cast("NumericArray", value)

    def log_abs_det_jacobian(self, x: ArrayLike) -> NumericArray:
        value = np.asarray(x, dtype=np.float64)
        total = np.zeros_like(value)
        for part in self._parts:
            total = total + part.log_abs_det_jacobian(value)
            value = part.forward(value)
        return cast("NumericArray", total)
