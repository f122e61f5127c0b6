"""
Strategies
==========

A distribution delegates two things:

- resolving a characteristic by name (``pdf``, ``ppf``, ...) to a callable,
  which :class:`AnalyticalComputationStrategy` does from the closed forms
  the distribution declares;
- drawing samples, which :class:`DefaultSamplingUnivariateStrategy` does by
  pushing standard uniforms through ``ppf``. That is the ``inverse_cdf``
  recipe every family has; the other recipes plug in through
  :class:`~pysatl_reparam.reparametrizations.sampling.ReparametrizedSamplingStrategy`.

Strategies keep no state. Randomness comes with each call as ``rng`` or
``seed``, see :func:`resolve_generator`.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Any, Protocol

import numpy as np

from pysatl_reparam.distributions.computation import AnalyticalComputation
from pysatl_reparam.types import CharacteristicName, GenericCharacteristicName

from .sampling import ArraySample, Sample

if TYPE_CHECKING:
    from .distribution import Distribution

type Method[In, Out] = AnalyticalComputation[In, Out]


def resolve_generator(
    rng: np.random.Generator | None = None, seed: int | None = None
) -> np.random.Generator:
    """
    Generator for one sampling call: ``rng`` itself, or a fresh one from ``seed``.

    Raises
    ------
    ValueError
        If both are given.
    """
    if rng is None:
        return np.random.default_rng(seed)
    if seed is not None:
        raise ValueError("Pass either 'rng' or 'seed', not both.")
    return rng


class ComputationStrategy[In, Out](Protocol):
    def query_method(
        self, state: GenericCharacteristicName, distr: "Distribution", **options: Any
    ) -> Method[In, Out]: ...


def _log_of(pdf: Method[Any, Any]) -> Method[Any, Any]:
    def logpdf(x: Any, **options: Any) -> Any:
        with np.errstate(divide="ignore"):
            return np.log(pdf(x, **options))

    return AnalyticalComputation(target=CharacteristicName.LOGPDF, func=logpdf)


class AnalyticalComputationStrategy[In, Out]:
    """
    Resolve characteristics from the distribution's closed forms.

    A declared form is returned as is. A missing ``logpdf`` is derived as
    ``log(pdf)``, with ``-inf`` where the density vanishes. Anything else
    that is missing raises ``RuntimeError``.
    """

    def query_method(
        self, state: GenericCharacteristicName, distr: "Distribution", **options: Any
    ) -> Method[In, Out]:
        computations = distr.analytical_computations
        method = computations.get(state)
        if method is not None:
            return method
        if state == CharacteristicName.LOGPDF and CharacteristicName.PDF in computations:
            return _log_of(computations[CharacteristicName.PDF])
        raise RuntimeError(f"Characteristic '{state}' is not available for this distribution.")


class SamplingStrategy(Protocol):
    def sample(self, n: int, distr: "Distribution", **options: Any) -> Sample: ...


class DefaultSamplingUnivariateStrategy(SamplingStrategy):
    """
    Inverse-CDF sampler: ``ppf(U)`` for ``n`` i.i.d. ``U ~ Uniform(0, 1)``.

    Options ``rng`` / ``seed`` select the generator; the rest go to
    ``query_method``. Returns an ``(n, 1)`` :class:`ArraySample`.

    Raises
    ------
    ValueError
        If ``n`` is negative.
    RuntimeError
        If the distribution has no ``ppf``.
    """

    def sample(self, n: int, distr: "Distribution", **options: Any) -> ArraySample:
        if n < 0:
            raise ValueError("Sample size must be non-negative.")
        generator = resolve_generator(options.pop("rng", None), options.pop("seed", None))
        ppf = distr.query_method(CharacteristicName.PPF, **options)
        draws = ppf(generator.random(n))
        return ArraySample.from_values(draws)
