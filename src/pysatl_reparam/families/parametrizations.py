"""
Parametrizations
================

The same family is often written with different parameters: a Normal by its
standard deviation or by its precision, a Gamma by rate or by scale. A
reparametrization recipe always works in one of them, the family's *base*
parametrization, while users may construct distributions in any of them.

Each parameter set is a frozen dataclass deriving from
:class:`Parametrization`, registered on its family with the
:func:`parametrization` decorator. Predicates marked with :func:`constraint`
are checked on construction; non-base classes override
:meth:`Parametrization.transform_to_base_parametrization`.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from abc import ABC
from dataclasses import dataclass, fields, is_dataclass
from numbers import Real
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any, ClassVar

    from pysatl_reparam.families.parametric_family import ParametricFamily
    from pysatl_reparam.types import ParametrizationName

_CONSTRAINT_MARKER = "_constraint_description"


@dataclass(slots=True, frozen=True)
class ParametrizationConstraint:
    """A named predicate over the values of one parametrization."""

    description: str
    check: Callable[[Any], bool]

    def holds(self, parameters: Parametrization) -> bool:
        return bool(self.check(parameters))


class Parametrization(ABC):
    """
    Parameter values of a family in one particular parametrization.

    Subclasses declare the parameters as dataclass fields; every value must
    be a finite real scalar.
    """

    __family__: ClassVar[ParametricFamily]
    __param_name__: ClassVar[ParametrizationName]
    _constraints: ClassVar[tuple[ParametrizationConstraint, ...]] = ()

    @property
    def name(self) -> ParametrizationName:
        return type(self).__param_name__

    @property
    def parameters(self) -> dict[str, Any]:
        """Field name to value, in declaration order."""
        return {f.name: getattr(self, f.name) for f in fields(self)}  # type: ignore[arg-type]

    @property
    def constraints(self) -> tuple[ParametrizationConstraint, ...]:
        return self._constraints

    def validate(self) -> None:
        """
        Check value types, finiteness and then the declared constraints.

        Raises
        ------
        ValueError
            On the first violated condition.
        """
        for key, value in self.parameters.items():
            if isinstance(value, bool) or not isinstance(value, Real):
                raise ValueError(f"Parameter '{key}' must be a real number, got {value!r}")
            if not math.isfinite(value):
                raise ValueError(f"Parameter '{key}' must be finite, got {value!r}")
        broken = next((c for c in self._constraints if not c.holds(self)), None)
        if broken is not None:
            raise ValueError(f'Constraint "{broken.description}" does not hold')

    def transform_to_base_parametrization(self) -> Parametrization:
        """Equivalent parameters in the base parametrization (``self`` for the base)."""
        return self


def constraint[F: Callable[..., bool]](description: str) -> Callable[[F], F]:
    """Mark an instance method of a parametrization as a validity predicate."""

    def mark(func: F) -> F:
        setattr(func, _CONSTRAINT_MARKER, description)
        return func

    return mark


def _constraints_of(cls: type) -> tuple[ParametrizationConstraint, ...]:
    found = []
    for attr_name, attr in vars(cls).items():
        if isinstance(attr, staticmethod | classmethod):
            if hasattr(attr.__func__, _CONSTRAINT_MARKER):
                raise TypeError(
                    f"@constraint '{attr_name}' must be an instance method, "
                    f"not @{type(attr).__name__}"
                )
            continue
        description = getattr(attr, _CONSTRAINT_MARKER, None)
        if callable(attr) and description is not None:
            found.append(ParametrizationConstraint(description=description, check=attr))
    return tuple(found)


def parametrization(
    *,
    family: ParametricFamily,
    name: ParametrizationName,
) -> Callable[[type[Parametrization]], type[Parametrization]]:
    """
    Class decorator registering a parametrization on ``family``.

    The class becomes a frozen, slotted dataclass unless it already is a
    dataclass.
    """

    def register(cls: type[Parametrization]) -> type[Parametrization]:
        if not is_dataclass(cls):
            cls = dataclass(slots=True, frozen=True)(cls)
        cls.__family__ = family
        cls.__param_name__ = name
        cls._constraints = _constraints_of(cls)
        family.register_parametrization(name, cls)
        return cls

    return register
