"""
Hierarchical models in centered and non-centered coordinates.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .data import EIGHT_SCHOOLS, HierarchicalData, eight_schools
from .funnel import NealsFunnel
from .normal import HierarchicalNormal

__all__ = [
    "EIGHT_SCHOOLS",
    "HierarchicalData",
    "HierarchicalNormal",
    "NealsFunnel",
    "eight_schools",
]
