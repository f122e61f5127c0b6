"""
Sampling through reparametrization recipes.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Any

import numpy as np

from pysatl_reparam.distributions.sampling import ArraySample
from pysatl_reparam.distributions.strategies import SamplingStrategy, resolve_generator
from pysatl_reparam.families.distribution import ParametricFamilyDistribution
from pysatl_reparam.reparametrizations.configuration import configure_reparametrizations
from pysatl_reparam.reparametrizations.registry import ReparametrizationRegister

if TYPE_CHECKING:
    from pysatl_reparam.distributions.distribution import Distribution
    from pysatl_reparam.types import ReparametrizationName


class ReparametrizedSamplingStrategy(SamplingStrategy):
    """
    Sampling strategy drawing base variates and transforming them.

    Builtin recipes are registered on first use.

    Parameters
    ----------
    name : str
        Recipe name, looked up for the sampled distribution's family.

    Returns
    -------
    ArraySample
        A 2D sample of shape ``(n, 1)``.
    """

    def __init__(self, name: ReparametrizationName) -> None:
        self.name = name

    def __repr__(self) -> str:
        return f"ReparametrizedSamplingStrategy({self.name!r})"

    def sample(self, n: int, distr: Distribution, **options: Any) -> ArraySample:
        if n < 0:
            raise ValueError("Sample size must be non-negative.")
        if not isinstance(distr, ParametricFamilyDistribution):
            raise TypeError("Reparametrized sampling needs a parametric family distribution.")

        rng = resolve_generator(options.pop("rng", None), options.pop("seed", None))
        configure_reparametrizations()
        recipe = ReparametrizationRegister.get(distr.family_name, self.name)
        values = np.asarray(recipe.draw(distr, n, rng), dtype=np.float64)
        return ArraySample(values.reshape(n, 1))
