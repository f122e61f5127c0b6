"""
Reparametrizations subpackage

Named recipes expressing target families as transforms of base variates:

- recipe and base variate definitions (:mod:`.recipe`);
- the global recipe registry (:mod:`.registry`);
- builtin recipes (:mod:`.configuration`);
- a sampling strategy drawing through a recipe (:mod:`.sampling`).
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .configuration import (
    INVERSE_CDF,
    configure_reparametrizations,
    reset_reparametrizations,
)
from .recipe import BaseVariate, Reparametrization
from .registry import ReparametrizationRegister
from .sampling import ReparametrizedSamplingStrategy

__all__ = [
    "INVERSE_CDF",
    "BaseVariate",
    "Reparametrization",
    "ReparametrizationRegister",
    "ReparametrizedSamplingStrategy",
    "configure_reparametrizations",
    "reset_reparametrizations",
]
