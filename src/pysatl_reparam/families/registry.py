"""
Process-wide registry of parametric families.

Distributions keep only their family's name and look the family up here, so
recipes, hierarchical priors and checks all see the same family objects.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import ClassVar

    from pysatl_reparam.families.parametric_family import ParametricFamily


class ParametricFamilyRegister:
    """
    Singleton mapping family names to :class:`ParametricFamily` objects.

    Every instance is the same object; the class methods are the intended
    interface.
    """

    _instance: ClassVar[ParametricFamilyRegister | None] = None
    _families: dict[str, ParametricFamily]

    def __new__(cls) -> ParametricFamilyRegister:
        if cls._instance is None:
            instance = super().__new__(cls)
            instance._families = {}
            cls._instance = instance
        return cls._instance

    @classmethod
    def get(cls, name: str) -> ParametricFamily:
        """
        Family registered as ``name``.

        Raises
        ------
        ValueError
            If there is none.
        """
        family = cls()._families.get(name)
        if family is None:
            raise ValueError(f"No family {name} found in register")
        return family

    @classmethod
    def contains(cls, name: str) -> bool:
        return name in cls()._families

    @classmethod
    def register(cls, family: ParametricFamily) -> None:
        """
        Add ``family`` under its name.

        Raises
        ------
        ValueError
            If the name is taken.
        """
        if cls.contains(family.name):
            raise ValueError(f"Family {family.name} already found in register")
        cls()._families[family.name] = family

    @classmethod
    def list_registered_families(cls) -> list[str]:
        """Registered names, oldest first."""
        return [*cls()._families]

    @classmethod
    def _reset(cls) -> None:
        cls._instance = None
