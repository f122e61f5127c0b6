"""
Characteristic callables.

A family declares each characteristic as ``f(parameters, x, **options)``;
binding the parameters of one member leaves an :class:`AnalyticalComputation`
that evaluates ``x`` alone. Inputs may be scalars or arrays and outputs
broadcast accordingly. Options such as ``excess=True`` for kurtosis pass
through untouched.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from mypy_extensions import KwArg

from pysatl_reparam.types import GenericCharacteristicName


@runtime_checkable
class Computation[In, Out](Protocol):
    """A characteristic of one distribution, callable on its argument."""

    @property
    def target(self) -> GenericCharacteristicName: ...
    def __call__(self, data: In, **options: Any) -> Out: ...


@dataclass(frozen=True, slots=True)
class AnalyticalComputation[In, Out]:
    """
    Closed-form characteristic named ``target``.

    Parameters
    ----------
    target : str
        Characteristic name, e.g. ``"ppf"``.
    func : Callable[[In, KwArg(Any)], Out]
        The form with the member's parameters already bound.
    """

    target: GenericCharacteristicName
    func: Callable[[In, KwArg(Any)], Out]

    def __call__(self, data: In, **options: Any) -> Out:
        return self.func(data, **options)
