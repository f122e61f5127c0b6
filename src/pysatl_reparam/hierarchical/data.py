"""
Grouped observations for hierarchical Normal models.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt


def _read_only(values: npt.ArrayLike, name: str) -> npt.NDArray[np.float64]:
    arr = np.array(values, dtype=np.float64)
    if arr.ndim != 1:
        raise ValueError(f"{name} must be one-dimensional, got shape {arr.shape}")
    if not np.all(np.isfinite(arr)):
        raise ValueError(f"{name} must contain only finite values")
    arr.setflags(write=False)
    return arr


@dataclass(frozen=True, slots=True, eq=False)
class HierarchicalData:
    """
    Per-group estimates ``y_j`` with known standard errors ``sigma_j``.

    Parameters
    ----------
    y : array_like
        Observed group estimates.
    sigma : array_like
        Standard errors of ``y``, strictly positive.

    Raises
    ------
    ValueError
        If the arrays are empty, not one-dimensional, of different lengths,
        contain non-finite values, or ``sigma`` is not positive.
    """

    y: npt.NDArray[np.float64]
    sigma: npt.NDArray[np.float64]

    def __post_init__(self) -> None:
        y = _read_only(self.y, "y")
        sigma = _read_only(self.sigma, "sigma")
        if y.size == 0:
            raise ValueError("At least one group is required")
        if y.shape != sigma.shape:
            raise ValueError(
                f"y and sigma must have the same length, got {y.size} and {sigma.size}"
            )
        if np.any(sigma <= 0):
            raise ValueError("sigma must be positive")
        object.__setattr__(self, "y", y)
        object.__setattr__(self, "sigma", sigma)

    @property
    def J(self) -> int:
        """Number of groups."""
        return int(self.y.size)

    def as_stan_data(self) -> dict[str, Any]:
        """Data dictionary matching the ``data`` block of the eight-schools programs."""
        return {"J": self.J, "y": self.y.tolist(), "sigma": self.sigma.tolist()}


EIGHT_SCHOOLS = HierarchicalData(
    y=[28.0, 8.0, -3.0, 7.0, -1.0, 1.0, 18.0, 12.0],
    sigma=[15.0, 10.0, 16.0, 11.0, 9.0, 11.0, 10.0, 18.0],
)
"""Rubin's SAT coaching experiment in eight schools."""


def eight_schools() -> HierarchicalData:
    """Fresh copy of :data:`EIGHT_SCHOOLS`."""
    return HierarchicalData(y=EIGHT_SCHOOLS.y, sigma=EIGHT_SCHOOLS.sigma)
