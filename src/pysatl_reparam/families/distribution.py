"""
Family members.

A :class:`ParametricFamilyDistribution` is one member of a registered family:
the family name plus parameter values in some parametrization. It is what
recipes transform base variates into and what goodness-of-fit checks test
against.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from pysatl_reparam.distributions.distribution import Distribution
from pysatl_reparam.families.registry import ParametricFamilyRegister

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any

    from pysatl_reparam.distributions.computation import AnalyticalComputation
    from pysatl_reparam.distributions.strategies import ComputationStrategy, SamplingStrategy
    from pysatl_reparam.distributions.support import Support
    from pysatl_reparam.families.parametric_family import ParametricFamily
    from pysatl_reparam.families.parametrizations import Parametrization
    from pysatl_reparam.types import DistributionType, GenericCharacteristicName

    type Computations = Mapping[GenericCharacteristicName, AnalyticalComputation[Any, Any]]


@dataclass(slots=True)
class ParametricFamilyDistribution(Distribution):
    """
    Member of the family ``family_name`` with the given ``parameters``.

    Reassigning ``parameters`` (e.g. to another parametrization of the same
    member) rebinds the analytical characteristics on next access.
    """

    family_name: str
    _distribution_type: DistributionType
    parameters: Parametrization
    _support: Support | None
    _bound_to: Parametrization | None = field(default=None, init=False, repr=False, compare=False)
    _computations: Computations | None = field(default=None, init=False, repr=False, compare=False)

    def __repr__(self) -> str:
        values = ", ".join(f"{k}={v!r}" for k, v in self.parameter_values.items())
        return f"{self.family_name}[{self.parametrization_name}]({values})"

    @property
    def family(self) -> ParametricFamily:
        return ParametricFamilyRegister.get(self.family_name)

    @property
    def distribution_type(self) -> DistributionType:
        return self._distribution_type

    @property
    def parametrization_name(self) -> str:
        return self.parameters.name

    @property
    def parameter_values(self) -> dict[str, Any]:
        """Values in the parametrization the member was built with."""
        return self.parameters.parameters

    @property
    def base_parameters(self) -> Parametrization:
        """Values in the family's base parametrization, as recipes read them."""
        return self.family.to_base(self.parameters)

    @property
    def analytical_computations(self) -> Computations:
        if self._computations is None or self._bound_to is not self.parameters:
            self._computations = self.family.analytical_computations(self.parameters)
            self._bound_to = self.parameters
        return self._computations

    @property
    def sampling_strategy(self) -> SamplingStrategy:
        return self.family.sampling_strategy

    @property
    def computation_strategy(self) -> ComputationStrategy[Any, Any]:
        return self.family.computation_strategy

    @property
    def support(self) -> Support | None:
        return self._support
