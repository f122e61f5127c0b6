"""
Distribution protocol and the machinery every family member relies on:
closed-form characteristic callables, inverse-CDF sampling, row-wise samples
and interval supports.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"
from .computation import AnalyticalComputation, Computation
from .distribution import Distribution
from .sampling import ArraySample, Sample
from .strategies import (
    AnalyticalComputationStrategy,
    ComputationStrategy,
    DefaultSamplingUnivariateStrategy,
    SamplingStrategy,
    resolve_generator,
)
from .support import ContinuousSupport, Support

__all__ = [
    "AnalyticalComputation",
    "Computation",
    "Distribution",
    "Sample",
    "ArraySample",
    "ComputationStrategy",
    "AnalyticalComputationStrategy",
    "SamplingStrategy",
    "DefaultSamplingUnivariateStrategy",
    "resolve_generator",
    "Support",
    "ContinuousSupport",
]
