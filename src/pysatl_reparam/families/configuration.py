"""
Distribution Families Configuration
====================================

This module registers the builtin parametric families used by the
reparametrization recipes:

- base variates: Normal, ContinuousUniform, Exponential, Gamma;
- targets: Cauchy, HalfNormal, HalfCauchy, StudentT, LogNormal, Pareto.

Notes
-----
- All families are registered in the global ParametricFamilyRegister.
- Every characteristic is analytical; non-base parametrizations convert to the
  base one before evaluation.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from functools import lru_cache

from pysatl_reparam.families.builtins import (
    configure_cauchy_family,
    configure_exponential_family,
    configure_gamma_family,
    configure_half_cauchy_family,
    configure_half_normal_family,
    configure_lognormal_family,
    configure_normal_family,
    configure_pareto_family,
    configure_student_t_family,
    configure_uniform_family,
)
from pysatl_reparam.families.registry import ParametricFamilyRegister


@lru_cache(maxsize=1)
def configure_families_register() -> ParametricFamilyRegister:
    """
    Configure and register all distribution families in the global registry.

    Returns
    -------
    ParametricFamilyRegister
        The global registry of parametric families.
    """
    configure_normal_family()
    configure_uniform_family()
    configure_exponential_family()
    configure_gamma_family()
    configure_cauchy_family()
    configure_half_normal_family()
    configure_half_cauchy_family()
    configure_student_t_family()
    configure_lognormal_family()
    configure_pareto_family()
    return ParametricFamilyRegister()


def reset_families_register() -> None:
    """
    Reset the cached families registry.
    """
    configure_families_register.cache_clear()
    ParametricFamilyRegister._reset()
