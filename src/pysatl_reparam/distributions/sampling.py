"""
Samples
=======

Every sampler returns draws as an ``(n, d)`` float array wrapped in an
:class:`ArraySample`: inverse-CDF sampling, recipe-based sampling from base
variates and prior draws of hierarchical models. Univariate draws have
``d = 1``; :attr:`ArraySample.values` gives them back as a flat vector, which
is what goodness-of-fit checks and transforms consume.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Protocol

import numpy as np

if TYPE_CHECKING:
    from collections.abc import Iterator

    from numpy.typing import ArrayLike

    from pysatl_reparam.types import NumericArray


class Sample(Protocol):
    """Anything exposing draws as an ``(n, d)`` array."""

    def __len__(self) -> int: ...
    @property
    def array(self) -> NumericArray: ...
    @property
    def shape(self) -> tuple[int, ...]: ...


class ArraySample:
    """
    Draws stored row-wise, one observation per row.

    Parameters
    ----------
    data : NumericArray
        Array of shape ``(n, d)``.

    Raises
    ------
    ValueError
        If ``data`` is not two-dimensional.
    """

    __slots__ = ("data", "dimension")

    def __init__(self, data: NumericArray) -> None:
        if np.ndim(data) != 2:
            raise ValueError(f"ArraySample expects a 2D (n, d) array, got shape {np.shape(data)}")
        self.data = data
        self.dimension = int(data.shape[1])

    @classmethod
    def from_values(cls, values: ArrayLike) -> ArraySample:
        """Univariate sample from a flat sequence of draws."""
        return cls(np.asarray(values, dtype=np.float64).reshape(-1, 1))

    def __len__(self) -> int:
        return len(self.data)

    def __iter__(self) -> Iterator[NumericArray]:
        return iter(self.data)

    def __repr__(self) -> str:
        return f"ArraySample(n={len(self)}, dimension={self.dimension})"

    @property
    def array(self) -> NumericArray:
        return self.data

    @property
    def shape(self) -> tuple[int, int]:
        n, d = self.data.shape
        return int(n), int(d)

    @property
    def values(self) -> NumericArray:
        """
        Draws of a univariate sample as a vector of length ``n``.

        Raises
        ------
        ValueError
            For a multivariate sample.
        """
        if self.dimension != 1:
            raise ValueError(f"values needs a univariate sample, dimension is {self.dimension}")
        return self.data[:, 0]
