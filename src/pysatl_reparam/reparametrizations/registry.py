"""
Global registry of reparametrization recipes.

Recipes are keyed by ``(target family, recipe name)``; the same name (e.g.
``"scale_mixture"``) may be registered for several targets.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import warnings
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import ClassVar

    from pysatl_reparam.reparametrizations.recipe import Reparametrization
    from pysatl_reparam.types import ReparametrizationName


class ReparametrizationRegister:
    """
    Singleton registry for reparametrization recipes.
    """

    _instance: ClassVar[ReparametrizationRegister | None] = None
    _recipes: dict[tuple[str, ReparametrizationName], Reparametrization]

    def __new__(cls) -> ReparametrizationRegister:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._recipes = {}
        return cls._instance

    @classmethod
    def register(cls, recipe: Reparametrization) -> None:
        """
        Register a recipe.

        Registering the very same recipe twice is ignored with a warning.

        Raises
        ------
        ValueError
            If a different recipe is already registered under the same key.
        """
        self = cls()
        existing = self._recipes.get(recipe.key)
        if existing is recipe:
            warnings.warn(
                f"Reparametrization {recipe.name} for {recipe.target} is already registered",
                UserWarning,
                stacklevel=2,
            )
            return
        if existing is not None:
            raise ValueError(
                f"Reparametrization {recipe.name} for {recipe.target} already found in register"
            )
        self._recipes[recipe.key] = recipe

    @classmethod
    def get(cls, target: str, name: ReparametrizationName) -> Reparametrization:
        """
        Retrieve a recipe.

        Raises
        ------
        ValueError
            If no such recipe exists.
        """
        self = cls()
        try:
            return self._recipes[(target, name)]
        except KeyError:
            known = ", ".join(sorted(r.name for r in cls.for_family(target))) or "none"
            raise ValueError(
                f"No reparametrization {name} for {target} found in register (known: {known})"
            ) from None

    @classmethod
    def contains(cls, target: str, name: ReparametrizationName) -> bool:
        return (target, name) in cls()._recipes

    @classmethod
    def for_family(cls, target: str) -> list[Reparametrization]:
        """Recipes producing ``target``, in registration order."""
        return [recipe for key, recipe in cls()._recipes.items() if key[0] == target]

    @classmethod
    def _reset(cls) -> None:
        cls._instance = None
