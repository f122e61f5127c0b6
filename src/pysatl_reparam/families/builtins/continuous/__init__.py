"""
Built-in continuous distribution families.

This module contains implementations of continuous parametric families.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_reparam.families.builtins.continuous.cauchy import configure_cauchy_family
from pysatl_reparam.families.builtins.continuous.exponential import configure_exponential_family
from pysatl_reparam.families.builtins.continuous.gamma import configure_gamma_family
from pysatl_reparam.families.builtins.continuous.half_cauchy import configure_half_cauchy_family
from pysatl_reparam.families.builtins.continuous.half_normal import configure_half_normal_family
from pysatl_reparam.families.builtins.continuous.lognormal import configure_lognormal_family
from pysatl_reparam.families.builtins.continuous.normal import configure_normal_family
from pysatl_reparam.families.builtins.continuous.pareto import configure_pareto_family
from pysatl_reparam.families.builtins.continuous.student_t import configure_student_t_family
from pysatl_reparam.families.builtins.continuous.uniform import configure_uniform_family

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
