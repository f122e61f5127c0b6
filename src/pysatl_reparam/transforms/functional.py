"""
Closed-form Reparametrizations
==============================

Stateless, vectorised maps from easy base variates to harder targets. Every
function accepts scalars or arrays and broadcasts over them:

- :func:`probability_integral_transform` / :func:`cumulative_transform`:
  ``F⁻¹(U)`` and ``F(X)`` for any family distribution;
- :func:`uniform_to_exponential`, :func:`uniform_to_cauchy`,
  :func:`uniform_to_half_cauchy`, :func:`uniform_to_pareto`: inverse CDFs in
  closed form;
- :func:`exponential_to_pareto`, :func:`normal_to_lognormal`: exponentials of
  affine maps;
- :func:`non_centered_normal` / :func:`centered_to_standard`: the
  non-centered parameterization and its inverse;
- :func:`scale_mixture_student_t`, :func:`scale_mixture_cauchy`,
  :func:`ratio_of_normals_cauchy`: normal scale mixtures.

Notes
-----
Parameters are validated eagerly and raise :class:`ValueError`; base variates
outside their domain (e.g. ``u`` outside [0, 1]) raise as well. Boundary
values map to the boundary of the target support, possibly infinite.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, cast

import numpy as np

from pysatl_reparam.types import CharacteristicName

if TYPE_CHECKING:
    from pysatl_reparam.distributions.distribution import Distribution
    from pysatl_reparam.types import ArrayLike, NumericArray


def _as_float_array(x: ArrayLike) -> NumericArray:
    return cast("NumericArray", np.asarray(x, dtype=np.float64))


def _require_positive(**values: ArrayLike) -> None:
    for name, value in values.items():
        arr = np.asarray(value, dtype=np.float64)
        if not np.all(np.isfinite(arr)) or np.any(arr <= 0):
            raise ValueError(f"{name} must be positive and finite")


def _require_finite(**values: ArrayLike) -> None:
    for name, value in values.items():
        if not np.all(np.isfinite(np.asarray(value, dtype=np.float64))):
            raise ValueError(f"{name} must be finite")


def _require_unit_interval(u: NumericArray) -> None:
    if np.any((u < 0) | (u > 1)) or np.any(np.isnan(u)):
        raise ValueError("Uniform variates must be in [0, 1]")


def probability_integral_transform(distribution: Distribution, u: ArrayLike) -> NumericArray:
    """
    Map standard uniform variates through the inverse CDF of ``distribution``.

    If U ~ Uniform(0, 1) then F⁻¹(U) is distributed according to F. This is
    the universal reparametrization: a sampler works on the bounded, flat
    ``u`` and the target is a deterministic function of it.

    Parameters
    ----------
    distribution : Distribution
        Target distribution providing a ``ppf``.
    u : ArrayLike
        Uniform variates in [0, 1].

    Returns
    -------
    NumericArray
        Target variates ``ppf(u)``.
    """
    u_arr = _as_float_array(u)
    _require_unit_interval(u_arr)
    ppf = distribution.query_method(CharacteristicName.PPF)
    return cast("NumericArray", np.asarray(ppf(u_arr), dtype=np.float64))


def cumulative_transform(distribution: Distribution, x: ArrayLike) -> NumericArray:
    """Inverse of :func:`probability_integral_transform`: ``F(x)`` in [0, 1]."""
    cdf = distribution.query_method(CharacteristicName.CDF)
    return cast("NumericArray", np.asarray(cdf(_as_float_array(x)), dtype=np.float64))


def uniform_to_exponential(u: ArrayLike, rate: float = 1.0) -> NumericArray:
    """
    Exponential(rate) variates ``-log(1 - u) / rate`` from uniforms.

    ``u = 1`` maps to ``inf``.
    """
    _require_positive(rate=rate)
    u_arr = _as_float_array(u)
    _require_unit_interval(u_arr)
    with np.errstate(divide="ignore"):
        return cast("NumericArray", -np.log1p(-u_arr) / rate)


def uniform_to_cauchy(u: ArrayLike, mu: float = 0.0, sigma: float = 1.0) -> NumericArray:
    """
    Cauchy(mu, sigma) variates ``mu + sigma * tan(pi * (u - 1/2))``.

    The sampler only ever sees ``u`` on a bounded interval, so the heavy
    Cauchy tails never enter the geometry HMC has to explore. The endpoints
    ``u = 0`` and ``u = 1`` map to ``-inf`` and ``inf``.
    """
    _require_finite(mu=mu)
    _require_positive(sigma=sigma)
    u_arr = _as_float_array(u)
    _require_unit_interval(u_arr)
    x = mu + sigma * np.tan(np.pi * (u_arr - 0.5))
    x = np.where(u_arr == 0.0, -np.inf, x)
    return cast("NumericArray", np.where(u_arr == 1.0, np.inf, x))


def uniform_to_half_cauchy(u: ArrayLike, sigma: float = 1.0) -> NumericArray:
    """HalfCauchy(sigma) variates ``sigma * tan(pi * u / 2)``; ``u = 1`` maps to ``inf``."""
    _require_positive(sigma=sigma)
    u_arr = _as_float_array(u)
    _require_unit_interval(u_arr)
    x = sigma * np.tan(np.pi * u_arr / 2.0)
    return cast("NumericArray", np.where(u_arr == 1.0, np.inf, x))


def uniform_to_pareto(u: ArrayLike, y_min: float, alpha: float) -> NumericArray:
    """
    Pareto(y_min, alpha) variates ``y_min * (1 - u) ** (-1 / alpha)``.

    ``u = 0`` maps to ``y_min`` and ``u = 1`` to ``inf``.
    """
    _require_positive(y_min=y_min, alpha=alpha)
    u_arr = _as_float_array(u)
    _require_unit_interval(u_arr)
    with np.errstate(divide="ignore"):
        return cast("NumericArray", y_min * np.exp(-np.log1p(-u_arr) / alpha))


def exponential_to_pareto(e: ArrayLike, y_min: float, alpha: float) -> NumericArray:
    """
    Pareto(y_min, alpha) variates ``y_min * exp(e / alpha)`` from Exponential(1).

    Raises
    ------
    ValueError
        If any ``e`` is negative.
    """
    _require_positive(y_min=y_min, alpha=alpha)
    e_arr = _as_float_array(e)
    if np.any(e_arr < 0) or np.any(np.isnan(e_arr)):
        raise ValueError("Exponential variates must be non-negative")
    with np.errstate(over="ignore"):
        return cast("NumericArray", y_min * np.exp(e_arr / alpha))


def normal_to_lognormal(z: ArrayLike, mu: float = 0.0, sigma: float = 1.0) -> NumericArray:
    """LogNormal(mu, sigma) variates ``exp(mu + sigma * z)`` from standard normals."""
    _require_finite(mu=mu)
    _require_positive(sigma=sigma)
    with np.errstate(over="ignore"):
        return cast("NumericArray", np.exp(mu + sigma * _as_float_array(z)))


def non_centered_normal(z: ArrayLike, mu: ArrayLike, sigma: ArrayLike) -> NumericArray:
    """
    Non-centered parameterization ``mu + sigma * z`` with ``z ~ Normal(0, 1)``.

    ``mu`` and ``sigma`` may be arrays (e.g. a group location and scale per
    draw) and broadcast against ``z``.
    """
    _require_finite(mu=mu)
    _require_positive(sigma=sigma)
    return cast("NumericArray", _as_float_array(mu) + _as_float_array(sigma) * _as_float_array(z))


def centered_to_standard(x: ArrayLike, mu: ArrayLike, sigma: ArrayLike) -> NumericArray:
    """Inverse of :func:`non_centered_normal`: ``(x - mu) / sigma``."""
    _require_finite(mu=mu)
    _require_positive(sigma=sigma)
    return cast(
        "NumericArray", (_as_float_array(x) - _as_float_array(mu)) / _as_float_array(sigma)
    )


def scale_mixture_student_t(
    z: ArrayLike,
    tau: ArrayLike,
    nu: float,
    mu: float = 0.0,
    sigma: float = 1.0,
) -> NumericArray:
    """
    Student-t variates as a normal scale mixture.

    With ``z ~ Normal(0, 1)`` and ``tau ~ Gamma(nu/2, rate=nu/2)``,
    ``mu + sigma * z / sqrt(tau)`` is StudentT(nu, mu, sigma). Both base
    variates have light tails.

    Parameters
    ----------
    z : ArrayLike
        Standard normal variates.
    tau : ArrayLike
        Mixing precisions, strictly positive.
    nu : float
        Degrees of freedom.
    mu, sigma : float
        Location and scale of the result.

    Raises
    ------
    ValueError
        If ``nu`` or ``sigma`` are not positive, or any ``tau`` is not positive.
    """
    _require_positive(nu=nu, sigma=sigma)
    _require_finite(mu=mu)
    tau_arr = _as_float_array(tau)
    if np.any(tau_arr <= 0) or np.any(np.isnan(tau_arr)):
        raise ValueError("Mixing precisions must be positive")
    return cast("NumericArray", mu + sigma * _as_float_array(z) / np.sqrt(tau_arr))


def scale_mixture_cauchy(
    z: ArrayLike, tau: ArrayLike, mu: float = 0.0, sigma: float = 1.0
) -> NumericArray:
    """
    Cauchy variates as the ``nu = 1`` Student-t scale mixture.

    ``tau`` must be drawn from Gamma(1/2, rate=1/2).
    """
    return scale_mixture_student_t(z, tau, nu=1.0, mu=mu, sigma=sigma)


def ratio_of_normals_cauchy(
    z1: ArrayLike, z2: ArrayLike, mu: float = 0.0, sigma: float = 1.0
) -> NumericArray:
    """Cauchy variates ``mu + sigma * z1 / z2`` from two independent standard normals."""
    _require_finite(mu=mu)
    _require_positive(sigma=sigma)
    with np.errstate(divide="ignore", invalid="ignore"):
        return cast("NumericArray", mu + sigma * _as_float_array(z1) / _as_float_array(z2))
