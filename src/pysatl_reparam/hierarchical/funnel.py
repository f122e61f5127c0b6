"""
Neal's funnel.

``v ~ Normal(0, v_scale)`` and ``x_i ~ Normal(0, exp(v / 2))`` for
``i = 1..dimension``. The non-centered coordinates ``z = x * exp(-v / 2)``
are a priori independent standard normals.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from pysatl_reparam.distributions.strategies import resolve_generator
from pysatl_reparam.hierarchical.normal import _normal_logpdf

if TYPE_CHECKING:
    import numpy.typing as npt

    from pysatl_reparam.types import ArrayLike


@dataclass(frozen=True, slots=True)
class NealsFunnel:
    """
    Neal's funnel of ``dimension`` local coordinates.

    Log densities are vectorised: ``v`` of shape ``(...)`` pairs with
    coordinates of shape ``(..., dimension)``.

    Parameters
    ----------
    dimension : int
        Number of local coordinates ``x``.
    v_scale : float
        Standard deviation of the global log-scale ``v``.
    """

    dimension: int
    v_scale: float = 3.0

    def __post_init__(self) -> None:
        if isinstance(self.dimension, bool) or not isinstance(self.dimension, int):
            raise ValueError("dimension must be an integer")
        if self.dimension < 1:
            raise ValueError("dimension must be positive")
        if not (math.isfinite(self.v_scale) and self.v_scale > 0):
            raise ValueError("v_scale must be positive and finite")

    def _coordinates(self, values: ArrayLike, name: str) -> npt.NDArray[np.float64]:
        arr = np.asarray(values, dtype=np.float64)
        if arr.shape[-1:] != (self.dimension,):
            raise ValueError(f"{name} must end with a dimension of size {self.dimension}")
        return arr

    def log_density_centered(self, v: ArrayLike, x: ArrayLike) -> npt.NDArray[np.float64]:
        v_arr = np.asarray(v, dtype=np.float64)
        x_arr = self._coordinates(x, "x")
        scale = np.exp(v_arr / 2.0)[..., np.newaxis]
        return np.asarray(
            _normal_logpdf(v_arr, 0.0, self.v_scale)
            + np.sum(_normal_logpdf(x_arr, 0.0, scale), axis=-1)
        )

    def log_density_non_centered(self, v: ArrayLike, z: ArrayLike) -> npt.NDArray[np.float64]:
        """
        Log density of ``(v, z)``.

        Equals ``log_density_centered(v, x) + dimension * v / 2`` at
        ``x = to_centered(v, z)``.
        """
        v_arr = np.asarray(v, dtype=np.float64)
        z_arr = self._coordinates(z, "z")
        return np.asarray(
            _normal_logpdf(v_arr, 0.0, self.v_scale)
            + np.sum(_normal_logpdf(z_arr, 0.0, 1.0), axis=-1)
        )

    def to_centered(self, v: ArrayLike, z: ArrayLike) -> npt.NDArray[np.float64]:
        """``x = z * exp(v / 2)``."""
        v_arr = np.asarray(v, dtype=np.float64)
        return self._coordinates(z, "z") * np.exp(v_arr / 2.0)[..., np.newaxis]

    def to_non_centered(self, v: ArrayLike, x: ArrayLike) -> npt.NDArray[np.float64]:
        """``z = x * exp(-v / 2)``."""
        v_arr = np.asarray(v, dtype=np.float64)
        return self._coordinates(x, "x") * np.exp(-v_arr / 2.0)[..., np.newaxis]

    def sample(
        self,
        n: int,
        rng: np.random.Generator | None = None,
        seed: int | None = None,
    ) -> dict[str, npt.NDArray[np.float64]]:
        """
        Exact draws through the non-centered coordinates.

        Returns
        -------
        dict[str, ndarray]
            ``v`` of shape ``(n,)``; ``z`` and ``x`` of shape ``(n, dimension)``.
        """
        if n < 0:
            raise ValueError("Sample size must be non-negative.")
        generator = resolve_generator(rng, seed)
        v = generator.normal(0.0, self.v_scale, size=n)
        z = generator.standard_normal((n, self.dimension))
        return {"v": v, "z": z, "x": self.to_centered(v, z)}
