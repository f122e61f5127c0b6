"""
PySATL Reparam
==============

Reparameterization toolkit for Hamiltonian Monte Carlo built on parametric
distribution families: closed-form transforms from easy base variates to
heavy-tailed or constrained targets, invertible bijections with
log-Jacobians, named reparametrization recipes, hierarchical models in
centered and non-centered coordinates, and matching Stan code.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from importlib.metadata import version

from .distributions import *
from .distributions import __all__ as _distr_all
from .families import *
from .families import __all__ as _family_all
from .hierarchical import *
from .hierarchical import __all__ as _hierarchical_all
from .reparametrizations import *
from .reparametrizations import __all__ as _reparam_all
from .stan import *
from .stan import __all__ as _stan_all
from .stats import *
from .stats import __all__ as _stats_all
from .transforms import *
from .transforms import __all__ as _transforms_all
from .types import *
from .types import __all__ as _types_all

__version__ = version("pysatl-reparam")
__all__ = [
    "__version__",
    *_distr_all,
    *_family_all,
    *_hierarchical_all,
    *_reparam_all,
    *_stan_all,
    *_stats_all,
    *_transforms_all,
    *_types_all,
]

del _distr_all
del _family_all
del _hierarchical_all
del _reparam_all
del _stan_all
del _stats_all
del _transforms_all
del _types_all
