"""
Support primitives.

Every family shipped here is univariate continuous, so the only concrete
support is an interval on the real line.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import Protocol, overload, runtime_checkable

from pysatl_reparam.types import BoolArray, Interval1D, Number, NumericArray


@runtime_checkable
class Support(Protocol):
    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...


class ContinuousSupport(Interval1D, Support): ...


__all__ = [
    "Support",
    "ContinuousSupport",
]
