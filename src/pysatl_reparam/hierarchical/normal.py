"""
Hierarchical Normal Model
=========================

The model

    mu      ~ Normal(m0, s0)
    tau     ~ HalfCauchy(t0)
    theta_j ~ Normal(mu, tau)
    y_j     ~ Normal(theta_j, sigma_j),   j = 1..J

written in its centered coordinates ``(mu, tau, theta)`` and in the
non-centered coordinates ``(mu, tau, eta)`` with ``theta = mu + tau * eta``.

Notes
-----
The two log densities differ by the Jacobian of ``eta -> theta``::

    log p_nc(mu, tau, eta) = log p_c(mu, tau, mu + tau * eta) + J * log(tau)

When the data are weak relative to ``tau`` the centered posterior is a funnel
that HMC explores badly; in non-centered coordinates ``eta`` is a priori
standard normal and independent of ``tau``.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, cast

import numpy as np

from pysatl_reparam.distributions.strategies import resolve_generator
from pysatl_reparam.families.configuration import configure_families_register
from pysatl_reparam.transforms.functional import centered_to_standard, non_centered_normal
from pysatl_reparam.types import CharacteristicName, FamilyName

if TYPE_CHECKING:
    import numpy.typing as npt

    from pysatl_reparam.families.distribution import ParametricFamilyDistribution
    from pysatl_reparam.hierarchical.data import HierarchicalData
    from pysatl_reparam.types import ArrayLike, NumericArray

_HALF_LOG_2PI = 0.5 * math.log(2.0 * math.pi)

_SCALE_PRIOR_FAMILIES = frozenset({FamilyName.HALF_CAUCHY, FamilyName.HALF_NORMAL})


def _normal_logpdf(x: ArrayLike, loc: ArrayLike, scale: ArrayLike) -> NumericArray:
    z = (np.asarray(x, dtype=np.float64) - loc) / scale
    return cast("NumericArray", -0.5 * z**2 - np.log(scale) - _HALF_LOG_2PI)


@dataclass(frozen=True, slots=True)
class HierarchicalNormal:
    """
    Normal-Normal hierarchical model with a Normal prior on the population
    mean and a half-Cauchy (or half-Normal) prior on the population scale.

    Parameters
    ----------
    mu_prior : ParametricFamilyDistribution
        Normal prior of the population mean ``mu``.
    tau_prior : ParametricFamilyDistribution
        HalfCauchy or HalfNormal prior of the population scale ``tau``.

    Raises
    ------
    ValueError
        If the priors come from other families.
    """

    mu_prior: ParametricFamilyDistribution
    tau_prior: ParametricFamilyDistribution

    def __post_init__(self) -> None:
        if self.mu_prior.family_name != FamilyName.NORMAL:
            raise ValueError(f"mu prior must be Normal, got {self.mu_prior.family_name}")
        if self.tau_prior.family_name not in _SCALE_PRIOR_FAMILIES:
            raise ValueError(
                f"tau prior must be HalfCauchy or HalfNormal, got {self.tau_prior.family_name}"
            )

    @classmethod
    def with_scales(
        cls, mu_loc: float = 0.0, mu_scale: float = 5.0, tau_scale: float = 5.0
    ) -> HierarchicalNormal:
        """
        Model with ``mu ~ Normal(mu_loc, mu_scale)`` and ``tau ~ HalfCauchy(tau_scale)``.

        The defaults are the usual eight-schools priors.
        """
        families = configure_families_register()
        return cls(
            mu_prior=families.get(FamilyName.NORMAL).distribution(mu=mu_loc, sigma=mu_scale),
            tau_prior=families.get(FamilyName.HALF_CAUCHY).distribution(sigma=tau_scale),
        )

    def _prior_log_density(self, mu: float, tau: float) -> float:
        logpdf_mu = self.mu_prior.query_method(CharacteristicName.LOGPDF)
        logpdf_tau = self.tau_prior.query_method(CharacteristicName.LOGPDF)
        return float(logpdf_mu(np.float64(mu)) + logpdf_tau(np.float64(tau)))

    @staticmethod
    def _group_values(
        values: ArrayLike, data: HierarchicalData, name: str
    ) -> npt.NDArray[np.float64]:
        arr = np.asarray(values, dtype=np.float64)
        if arr.shape != (data.J,):
            raise ValueError(f"{name} must have shape ({data.J},), got {arr.shape}")
        return arr

    def log_density_centered(
        self, mu: float, tau: float, theta: ArrayLike, data: HierarchicalData
    ) -> float:
        """
        Joint log density ``log p(mu, tau, theta, y)`` up to a constant in ``y``.

        Returns ``-inf`` for ``tau <= 0``.
        """
        theta_arr = self._group_values(theta, data, "theta")
        if not tau > 0:
            return -math.inf
        return (
            self._prior_log_density(mu, tau)
            + float(np.sum(_normal_logpdf(theta_arr, mu, tau)))
            + float(np.sum(_normal_logpdf(data.y, theta_arr, data.sigma)))
        )

    def log_density_non_centered(
        self, mu: float, tau: float, eta: ArrayLike, data: HierarchicalData
    ) -> float:
        """
        Joint log density in non-centered coordinates, ``theta = mu + tau * eta``.

        Returns ``-inf`` for ``tau <= 0``.
        """
        eta_arr = self._group_values(eta, data, "eta")
        if not tau > 0:
            return -math.inf
        theta = mu + tau * eta_arr
        return (
            self._prior_log_density(mu, tau)
            + float(np.sum(_normal_logpdf(eta_arr, 0.0, 1.0)))
            + float(np.sum(_normal_logpdf(data.y, theta, data.sigma)))
        )

    @staticmethod
    def to_non_centered(mu: ArrayLike, tau: ArrayLike, theta: ArrayLike) -> NumericArray:
        """``eta = (theta - mu) / tau``; raises ``ValueError`` unless ``tau > 0``."""
        return centered_to_standard(theta, mu, tau)

    @staticmethod
    def to_centered(mu: ArrayLike, tau: ArrayLike, eta: ArrayLike) -> NumericArray:
        """``theta = mu + tau * eta``; raises ``ValueError`` unless ``tau > 0``."""
        return non_centered_normal(eta, mu, tau)

    def sample_prior(
        self,
        n: int,
        J: int,
        *,
        non_centered: bool = True,
        rng: np.random.Generator | None = None,
        seed: int | None = None,
    ) -> dict[str, npt.NDArray[np.float64]]:
        """
        Draw ``n`` joint prior samples for ``J`` groups.

        Parameters
        ----------
        n : int
            Number of draws.
        J : int
            Number of groups.
        non_centered : bool
            Draw ``eta ~ Normal(0, 1)`` and build ``theta`` from it (default),
            or draw ``theta ~ Normal(mu, tau)`` directly and derive ``eta``.
        rng, seed
            Random state, see :func:`~pysatl_reparam.distributions.resolve_generator`.

        Returns
        -------
        dict[str, ndarray]
            ``mu`` and ``tau`` of shape ``(n,)``, ``theta`` and ``eta`` of
            shape ``(n, J)``.
        """
        if J < 1:
            raise ValueError("J must be a positive integer")
        generator = resolve_generator(rng, seed)
        mu = self.mu_prior.sample(n, rng=generator).array[:, 0]
        tau = self.tau_prior.sample(n, rng=generator).array[:, 0]

        mu_col, tau_col = mu[:, np.newaxis], tau[:, np.newaxis]
        if non_centered:
            eta = generator.standard_normal((n, J))
            theta = np.asarray(self.to_centered(mu_col, tau_col, eta))
        else:
            theta = generator.normal(mu_col, tau_col, size=(n, J))
            eta = np.asarray(self.to_non_centered(mu_col, tau_col, theta))
        return {"mu": mu, "tau": tau, "theta": theta, "eta": eta}

