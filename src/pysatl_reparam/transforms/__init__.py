"""
Transforms subpackage

Closed-form maps from base variates to target variates:

- vectorised functions (:mod:`.functional`);
- bijections with inverses and log-Jacobians (:mod:`.bijections`).
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .bijections import (
    AffineTransform,
    ComposedTransform,
    ExpTransform,
    InverseCDFTransform,
    ParetoTransform,
    TanTransform,
    Transform,
)
from .functional import (
    centered_to_standard,
    cumulative_transform,
    exponential_to_pareto,
    non_centered_normal,
    normal_to_lognormal,
    probability_integral_transform,
    ratio_of_normals_cauchy,
    scale_mixture_cauchy,
    scale_mixture_student_t,
    uniform_to_cauchy,
    uniform_to_exponential,
    uniform_to_half_cauchy,
    uniform_to_pareto,
)

__all__ = [
    # bijections
    "Transform",
    "AffineTransform",
    "ExpTransform",
    "TanTransform",
    "ParetoTransform",
    "InverseCDFTransform",
    "ComposedTransform",
    # functional
    "probability_integral_transform",
    "cumulative_transform",
    "uniform_to_exponential",
    "uniform_to_cauchy",
    "uniform_to_half_cauchy",
    "uniform_to_pareto",
    "exponential_to_pareto",
    "normal_to_lognormal",
    "non_centered_normal",
    "centered_to_standard",
    "scale_mixture_student_t",
    "scale_mixture_cauchy",
    "ratio_of_normals_cauchy",
]
