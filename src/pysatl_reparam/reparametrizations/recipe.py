"""
Reparametrization recipes.

A :class:`Reparametrization` binds a target family to the base variates it is
built from and to the deterministic transform combining them. Given a target
distribution it can build the base distributions, push base values through
the transform, and draw target samples.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, cast

import numpy as np

from pysatl_reparam.families.registry import ParametricFamilyRegister

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping
    from typing import Any

    from pysatl_reparam.families.distribution import ParametricFamilyDistribution
    from pysatl_reparam.families.parametrizations import Parametrization
    from pysatl_reparam.types import NumericArray, ReparametrizationName

    type BaseParameters = Callable[[Parametrization], Mapping[str, float]]
    type RecipeTransform = Callable[
        [ParametricFamilyDistribution, Mapping[str, NumericArray]], NumericArray
    ]


@dataclass(frozen=True, slots=True)
class BaseVariate:
    """
    One base variate of a recipe.

    Parameters
    ----------
    name : str
        Name under which the values reach the transform (e.g. ``"z"``).
    family : str
        Family the variate is drawn from.
    parameters : Callable[[Parametrization], Mapping[str, float]]
        Parameter values of the base distribution, computed from the target's
        base parameters (e.g. ``Gamma(ν/2, ν/2)`` for a Student-t mixture).
    parametrization_name : str, optional
        Parametrization of ``parameters``; the family's base one by default.
    """

    name: str
    family: str
    parameters: BaseParameters
    parametrization_name: str | None = None

    def distribution(self, target_parameters: Parametrization) -> ParametricFamilyDistribution:
        family = ParametricFamilyRegister.get(self.family)
        return family.distribution(
            self.parametrization_name, **dict(self.parameters(target_parameters))
        )


@dataclass(frozen=True, slots=True)
class Reparametrization:
    """
    Named recipe producing a target family from base variates.

    Parameters
    ----------
    name : str
        Recipe name, unique per target family.
    target : str
        Name of the target family.
    base_variates : tuple[BaseVariate, ...]
        Base variates, drawn independently.
    transform : Callable
        ``transform(target_distribution, base_values)`` returning target values.
    description : str
        One-line statement of the identity the recipe relies on.
    """

    name: ReparametrizationName
    target: str
    base_variates: tuple[BaseVariate, ...]
    transform: RecipeTransform = field(repr=False)
    description: str = ""

    def __post_init__(self) -> None:
        names = [variate.name for variate in self.base_variates]
        if not names:
            raise ValueError(f"Reparametrization '{self.name}' needs at least one base variate.")
        if len(set(names)) != len(names):
            raise ValueError(f"Reparametrization '{self.name}' has duplicate base variate names.")

    @property
    def key(self) -> tuple[str, ReparametrizationName]:
        return self.target, self.name

    def _check_target(self, distribution: ParametricFamilyDistribution) -> None:
        if distribution.family_name != self.target:
            raise ValueError(
                f"Reparametrization '{self.name}' targets {self.target}, "
                f"got a {distribution.family_name} distribution"
            )

    def base_distributions(
        self, distribution: ParametricFamilyDistribution
    ) -> dict[str, ParametricFamilyDistribution]:
        """Base distributions for a concrete target distribution."""
        self._check_target(distribution)
        target_parameters = distribution.base_parameters
        return {
            variate.name: variate.distribution(target_parameters)
            for variate in self.base_variates
        }

    def apply(
        self,
        distribution: ParametricFamilyDistribution,
        base_values: Mapping[str, Any],
    ) -> NumericArray:
        """
        Push base values through the transform.

        Raises
        ------
        ValueError
            If a base variate is missing from ``base_values`` or the
            distribution is not from the target family.
        """
        self._check_target(distribution)
        missing = [v.name for v in self.base_variates if v.name not in base_values]
        if missing:
            raise ValueError(f"Missing base values: {', '.join(missing)}")
        arrays = {
            key: np.asarray(base_values[key], dtype=np.float64)
            for key in (v.name for v in self.base_variates)
        }
        return self.transform(distribution, arrays)

    def draw(
        self,
        distribution: ParametricFamilyDistribution,
        n: int,
        rng: np.random.Generator,
    ) -> NumericArray:
        """Draw ``n`` base values per variate and transform them."""
        bases = self.base_distributions(distribution)
        base_values = {
            name: base.sample(n, rng=rng).array.reshape(n) for name, base in bases.items()
        }
        return cast("NumericArray", np.asarray(self.apply(distribution, base_values)))
