"""
Core Type Definitions
=====================

Shared vocabulary of the package: numeric array aliases, the descriptor of
the sample space a family lives on, one-dimensional supports and the names
under which families, characteristics and recipes are looked up.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from enum import Enum, StrEnum, auto
from math import inf, isinf
from typing import Any, cast, overload

import numpy as np
from numpy.typing import NDArray

Number = np.floating[Any] | np.integer[Any] | int | float
"""A real scalar, Python or NumPy."""

NumericArray = NDArray[np.floating[Any] | np.integer[Any]]
"""Real-valued array of points, probabilities or parameter draws."""

ComplexArray = NDArray[np.complexfloating[Any]]
"""Values of a characteristic function."""

BoolArray = NDArray[np.bool_]
"""Element-wise membership masks."""

type ArrayLike = Number | NumericArray
"""Scalar or array input accepted by the vectorised transforms."""


class Kind(StrEnum):
    """Whether a distribution has a density (continuous) or a mass function."""

    DISCRETE = "discrete"
    CONTINUOUS = "continuous"


class DistributionType:
    """Marker base for sample-space descriptors."""

    __slots__ = ()


@dataclass(frozen=True, slots=True)
class EuclideanDistributionType(DistributionType):
    """
    Sample space ``R^dimension`` with a distribution of the given ``kind``.

    Every family shipped with the package is univariate and continuous,
    see :data:`UnivariateContinuous`.
    """

    kind: Kind
    dimension: int


UnivariateContinuous = EuclideanDistributionType(kind=Kind.CONTINUOUS, dimension=1)


class ContinuousSupportShape1D(Enum):
    """
    Topology of a one-dimensional support.

    The reparametrizations care about it because it decides which base
    variate can reach the target: the whole line (Normal, Cauchy), a ray
    (Exponential, LogNormal, Pareto, half families) or a bounded interval
    (Uniform).
    """

    REAL_LINE = auto()
    RAY_LEFT = auto()
    RAY_RIGHT = auto()
    BOUNDED_INTERVAL = auto()
    EMPTY = auto()
    SINGLE_POINT = auto()


@dataclass(frozen=True, slots=True)
class Interval1D:
    """
    Interval of the real line with independently open or closed ends.

    Infinite ends are always open, whatever flag is passed.

    Parameters
    ----------
    left, right : float
        End points, ``-inf`` and ``inf`` by default.
    left_closed, right_closed : bool
        Whether the finite end point belongs to the interval.
    """

    left: float = -inf
    right: float = inf
    left_closed: bool = True
    right_closed: bool = True

    def __post_init__(self) -> None:
        for end, flag in ((self.left, "left_closed"), (self.right, "right_closed")):
            if isinf(end):
                object.__setattr__(self, flag, False)

    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...

    def contains(self, x: Number | NumericArray) -> bool | BoolArray:
        """
        Membership test, element-wise for arrays.

        A scalar argument gives a plain ``bool``.
        """
        points = np.asarray(x)
        above = points >= self.left if self.left_closed else points > self.left
        below = points <= self.right if self.right_closed else points < self.right
        inside = np.logical_and(above, below)
        if inside.ndim == 0:
            return bool(inside)
        return cast(BoolArray, inside)

    def __contains__(self, x: object) -> bool:
        return bool(self.contains(cast(Number, x)))

    @property
    def is_empty(self) -> bool:
        if self.left != self.right:
            return self.left > self.right
        return not (self.left_closed and self.right_closed)

    @property
    def shape(self) -> ContinuousSupportShape1D:
        """Classify the interval; see :class:`ContinuousSupportShape1D`."""
        if self.is_empty:
            return ContinuousSupportShape1D.EMPTY
        if self.left == self.right:
            return ContinuousSupportShape1D.SINGLE_POINT
        match (isinf(self.left), isinf(self.right)):
            case (True, True):
                return ContinuousSupportShape1D.REAL_LINE
            case (True, False):
                return ContinuousSupportShape1D.RAY_LEFT
            case (False, True):
                return ContinuousSupportShape1D.RAY_RIGHT
            case _:
                return ContinuousSupportShape1D.BOUNDED_INTERVAL


type GenericCharacteristicName = str
"""Name of a characteristic, usually a :class:`CharacteristicName` value."""

type ParametrizationName = str
"""Name of a family parametrization (e.g. ``"meanStd"``)."""

type ReparametrizationName = str
"""Name of a reparametrization recipe (e.g. ``"scale_mixture"``)."""


class CharacteristicName(StrEnum):
    """
    Characteristics a family may provide in closed form.

    ``LOGPDF`` is optional: when it is missing the computation strategy
    takes the logarithm of ``PDF``.
    """

    PDF = "pdf"
    LOGPDF = "logpdf"
    CDF = "cdf"
    PPF = "ppf"
    CF = "cf"
    MEAN = "mean"
    VAR = "var"
    SKEW = "skewness"
    KURT = "kurtosis"


class FamilyName(StrEnum):
    """Registered names of the builtin families."""

    NORMAL = "Normal"
    CONTINUOUS_UNIFORM = "ContinuousUniform"
    EXPONENTIAL = "Exponential"
    GAMMA = "Gamma"
    CAUCHY = "Cauchy"
    HALF_NORMAL = "HalfNormal"
    HALF_CAUCHY = "HalfCauchy"
    STUDENT_T = "StudentT"
    LOGNORMAL = "LogNormal"
    PARETO = "Pareto"


__all__ = [
    "Kind",
    "EuclideanDistributionType",
    "UnivariateContinuous",
    "GenericCharacteristicName",
    "ParametrizationName",
    "ReparametrizationName",
    "DistributionType",
    "Interval1D",
    "ContinuousSupportShape1D",
    "ArrayLike",
    "BoolArray",
    "ComplexArray",
    "Number",
    "NumericArray",
    "CharacteristicName",
    "FamilyName",
]
