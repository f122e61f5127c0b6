"""
Statistical checks of distributions and reparametrizations.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .goodness_of_fit import GoodnessOfFitResult, check_reparametrization, ks_check

__all__ = [
    "GoodnessOfFitResult",
    "check_reparametrization",
    "ks_check",
]
