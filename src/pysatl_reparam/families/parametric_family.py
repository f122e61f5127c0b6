"""
Parametric Families
===================

A :class:`ParametricFamily` bundles what every member of a family shares:
its parametrizations, the closed-form characteristics, the support as a
function of the parameters and the strategies used to evaluate and sample.

Characteristics are usually written once, for the base parametrization.
A parametrization may provide its own form of a characteristic; otherwise
the parameters are converted to the base ones before evaluation. Recipes
rely on this: they read base parameters (``mu``/``sigma``, ``alpha``/``beta``,
``y_min``/``alpha``) whatever parametrization the user chose.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov, Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from functools import partial
from typing import TYPE_CHECKING

from pysatl_reparam.distributions.computation import AnalyticalComputation
from pysatl_reparam.distributions.strategies import (
    AnalyticalComputationStrategy,
    DefaultSamplingUnivariateStrategy,
)
from pysatl_reparam.families.distribution import ParametricFamilyDistribution
from pysatl_reparam.types import UnivariateContinuous

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping, Sequence
    from typing import Any

    from pysatl_reparam.distributions.strategies import ComputationStrategy, SamplingStrategy
    from pysatl_reparam.distributions.support import Support
    from pysatl_reparam.families.parametrizations import Parametrization
    from pysatl_reparam.types import (
        DistributionType,
        GenericCharacteristicName,
        ParametrizationName,
    )

    type CharacteristicForm = Callable[[Parametrization, Any], Any]
    type CharacteristicForms = Mapping[ParametrizationName, CharacteristicForm]


class ParametricFamily:
    """
    A family of distributions indexed by parameters.

    Parameters
    ----------
    name : str
        Registry name, usually a :class:`~pysatl_reparam.types.FamilyName`.
    parametrization_names : Sequence[str]
        Declared parametrizations; the first one is the base.
    characteristics : Mapping
        Characteristic name to either one callable ``f(parameters, x)`` written
        for the base parametrization, or a mapping from parametrization name to
        such callables.
    distribution_type : DistributionType
        Sample space of the members, univariate continuous by default.
    support : Callable, optional
        Support of the member with the given base parameters.
    sampling_strategy, computation_strategy : optional
        Inverse-CDF sampling and analytical evaluation by default.

    Raises
    ------
    ValueError
        If no parametrization is declared.
    """

    def __init__(
        self,
        name: str,
        *,
        parametrization_names: Sequence[ParametrizationName],
        characteristics: Mapping[
            GenericCharacteristicName, CharacteristicForm | CharacteristicForms
        ],
        distribution_type: DistributionType = UnivariateContinuous,
        support: Callable[[Parametrization], Support | None] | None = None,
        sampling_strategy: SamplingStrategy | None = None,
        computation_strategy: ComputationStrategy[Any, Any] | None = None,
    ) -> None:
        if not parametrization_names:
            raise ValueError(f"Family '{name}' needs at least one parametrization.")

        self._name = name
        self.parametrization_names: list[ParametrizationName] = list(parametrization_names)
        self.base_parametrization_name = self.parametrization_names[0]
        self.distribution_type = distribution_type
        self._support = support
        self.sampling_strategy = sampling_strategy or DefaultSamplingUnivariateStrategy()
        self.computation_strategy = computation_strategy or AnalyticalComputationStrategy()

        self.characteristics: dict[GenericCharacteristicName, dict[str, CharacteristicForm]] = {
            key: dict(forms) if isinstance(forms, dict) else {self.base_parametrization_name: forms}
            for key, forms in characteristics.items()
        }
        self._parametrizations: dict[ParametrizationName, type[Parametrization]] = {}

    def __repr__(self) -> str:
        return (
            f"ParametricFamily(name={str(self._name)!r}, "
            f"parametrizations={self.parametrization_names})"
        )

    @property
    def name(self) -> str:
        return self._name

    @property
    def parametrizations(self) -> dict[ParametrizationName, type[Parametrization]]:
        """Registered parametrization classes by name."""
        return self._parametrizations

    @property
    def base(self) -> type[Parametrization]:
        """
        The base parametrization class.

        Raises
        ------
        ValueError
            If it has not been registered yet.
        """
        base = self._parametrizations.get(self.base_parametrization_name)
        if base is None:
            raise ValueError(
                f"Base parametrization '{self.base_parametrization_name}' is not registered."
            )
        return base

    def register_parametrization(
        self, name: ParametrizationName, parametrization_class: type[Parametrization]
    ) -> None:
        """
        Attach a parametrization class; used by the ``@parametrization`` decorator.

        Raises
        ------
        ValueError
            If ``name`` is taken or was not declared by the family.
        """
        if name not in self.parametrization_names:
            raise ValueError(f"Parametrization '{name}' is not declared by family '{self._name}'.")
        if name in self._parametrizations:
            raise ValueError(f"Parametrization '{name}' is already registered.")
        self._parametrizations[name] = parametrization_class

    def get_parametrization(self, name: ParametrizationName) -> type[Parametrization]:
        """Registered class for ``name``; ``KeyError`` if unknown."""
        return self._parametrizations[name]

    def to_base(self, parameters: Parametrization) -> Parametrization:
        """Convert ``parameters`` to the base parametrization."""
        if parameters.name == self.base_parametrization_name:
            return parameters
        return parameters.transform_to_base_parametrization()

    def provider_of(
        self, characteristic: GenericCharacteristicName, parametrization_name: ParametrizationName
    ) -> ParametrizationName | None:
        """
        Parametrization whose form of ``characteristic`` is used.

        The parametrization's own form wins over the base one; ``None`` when
        the family lacks the characteristic.
        """
        forms = self.characteristics.get(characteristic, {})
        for candidate in (parametrization_name, self.base_parametrization_name):
            if candidate in forms:
                return candidate
        return None

    def analytical_computations(
        self, parameters: Parametrization
    ) -> dict[GenericCharacteristicName, AnalyticalComputation[Any, Any]]:
        """Characteristics of the member with ``parameters``, bound to their values."""
        base = None
        bound: dict[GenericCharacteristicName, AnalyticalComputation[Any, Any]] = {}
        for characteristic, forms in self.characteristics.items():
            provider = self.provider_of(characteristic, parameters.name)
            if provider is None:
                continue
            if provider == parameters.name:
                values = parameters
            else:
                if base is None:
                    base = self.to_base(parameters)
                values = base
            bound[characteristic] = AnalyticalComputation(
                target=characteristic, func=partial(forms[provider], values)
            )
        return bound

    def support_of(self, parameters: Parametrization) -> Support | None:
        """Support of the member with ``parameters`` (any parametrization)."""
        return None if self._support is None else self._support(self.to_base(parameters))

    def distribution(
        self, parametrization_name: ParametrizationName | None = None, **values: Any
    ) -> ParametricFamilyDistribution:
        """
        Build a member of the family.

        Called as ``family(**values)`` for the base parametrization or
        ``family("meanPrec", mu=..., tau=...)`` for another one.

        Raises
        ------
        KeyError
            If the parametrization is unknown.
        ValueError
            If the values violate a constraint.
        """
        if parametrization_name is None:
            cls = self.base
        else:
            cls = self._parametrizations[parametrization_name]
        parameters = cls(**values)
        parameters.validate()
        return ParametricFamilyDistribution(
            family_name=self.name,
            _distribution_type=self.distribution_type,
            parameters=parameters,
            _support=self.support_of(parameters),
        )

    __call__ = distribution
