"""
Built-in distribution families for PySATL Reparam.

Base variates (uniform, normal, exponential, gamma) and the targets their
closed-form transforms produce.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_reparam.families.builtins.continuous import (
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

__all__ = [
    "configure_normal_family",
    "configure_uniform_family",
    "configure_exponential_family",
    "configure_gamma_family",
    "configure_cauchy_family",
    "configure_half_normal_family",
    "configure_half_cauchy_family",
    "configure_student_t_family",
    "configure_lognormal_family",
    "configure_pareto_family",
]
