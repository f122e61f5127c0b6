"""
The :class:`Distribution` protocol.

Recipes and goodness-of-fit checks only see this interface. Characteristics
are queried by name and draws go through the sampling strategy. Family
members and test doubles implement the five properties; the methods come
with the protocol.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Protocol, runtime_checkable

import numpy as np

from pysatl_reparam.types import CharacteristicName

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any

    from numpy.typing import ArrayLike

    from pysatl_reparam.distributions.computation import AnalyticalComputation
    from pysatl_reparam.distributions.sampling import Sample
    from pysatl_reparam.distributions.strategies import (
        ComputationStrategy,
        Method,
        SamplingStrategy,
    )
    from pysatl_reparam.distributions.support import Support
    from pysatl_reparam.types import (
        DistributionType,
        GenericCharacteristicName,
    )


@runtime_checkable
class Distribution(Protocol):
    """A univariate law known through its characteristics and strategies."""

    @property
    def distribution_type(self) -> DistributionType: ...

    @property
    def analytical_computations(
        self,
    ) -> Mapping[GenericCharacteristicName, AnalyticalComputation[Any, Any]]: ...

    @property
    def sampling_strategy(self) -> SamplingStrategy: ...
    @property
    def computation_strategy(self) -> ComputationStrategy[Any, Any]: ...

    @property
    def support(self) -> Support | None: ...

    def query_method(
        self, characteristic_name: GenericCharacteristicName, **options: Any
    ) -> Method[Any, Any]:
        """Callable for ``characteristic_name``, resolved by the computation strategy."""
        return self.computation_strategy.query_method(characteristic_name, self, **options)

    def calculate_characteristic(
        self, characteristic_name: GenericCharacteristicName, value: Any, **options: Any
    ) -> Any:
        return self.query_method(characteristic_name, **options)(value)

    def log_likelihood(self, sample: Sample | ArrayLike) -> float:
        """
        Sum of ``logpdf`` over the observations of ``sample``.

        ``sample`` is a :class:`Sample` or any array-like of observations.

        Returns ``-inf`` if any observation lies outside the support.
        """
        data = np.asarray(getattr(sample, "array", sample), dtype=np.float64).reshape(-1)
        support = self.support
        if support is not None and not np.all(support.contains(data)):
            return float("-inf")
        logpdf = self.query_method(CharacteristicName.LOGPDF)
        with np.errstate(divide="ignore"):
            return float(np.sum(logpdf(data)))

    def sample(self, n: int, **options: Any) -> Sample:
        """``n`` draws; ``rng`` or ``seed`` and other options go to the sampling strategy."""
        return self.sampling_strategy.sample(n, distr=self, **options)
