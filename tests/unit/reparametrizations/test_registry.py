from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import pytest

from pysatl_reparam.families import configure_families_register
from pysatl_reparam.reparametrizations import (
    INVERSE_CDF,
    BaseVariate,
    Reparametrization,
    ReparametrizationRegister,
    configure_reparametrizations,
    reset_reparametrizations,
)
from pysatl_reparam.types import FamilyName


def _dummy_recipe(name: str = "dummy", target: str = FamilyName.NORMAL) -> Reparametrization:
    return Reparametrization(
        name=name,
        target=target,
        base_variates=(
            BaseVariate(
                name="z",
                family=FamilyName.NORMAL,
                parameters=lambda _: {"mu": 0.0, "sigma": 1.0},
            ),
        ),
        transform=lambda distribution, values: values["z"],
    )


class TestReparametrizationRegister:
    def test_is_a_singleton(self) -> None:
        assert ReparametrizationRegister() is ReparametrizationRegister()

    def test_register_and_get(self) -> None:
        recipe = _dummy_recipe()
        ReparametrizationRegister.register(recipe)

        assert ReparametrizationRegister.contains(FamilyName.NORMAL, "dummy")
        assert ReparametrizationRegister.get(FamilyName.NORMAL, "dummy") is recipe
        assert recipe.key == (FamilyName.NORMAL, "dummy")

    def test_same_name_for_different_targets(self) -> None:
        ReparametrizationRegister.register(_dummy_recipe(target=FamilyName.NORMAL))
        ReparametrizationRegister.register(_dummy_recipe(target=FamilyName.CAUCHY))

        assert len(ReparametrizationRegister.for_family(FamilyName.NORMAL)) == 1
        assert len(ReparametrizationRegister.for_family(FamilyName.CAUCHY)) == 1

    def test_registering_the_same_recipe_twice_warns(self) -> None:
        recipe = _dummy_recipe()
        ReparametrizationRegister.register(recipe)

        with pytest.warns(UserWarning, match="already registered"):
            ReparametrizationRegister.register(recipe)

    def test_conflicting_recipe_raises(self) -> None:
        ReparametrizationRegister.register(_dummy_recipe())

        with pytest.raises(ValueError, match="already found in register"):
            ReparametrizationRegister.register(_dummy_recipe())

    def test_unknown_recipe_lists_known_names(self) -> None:
        ReparametrizationRegister.register(_dummy_recipe())

        with pytest.raises(ValueError, match=r"known: dummy"):
            ReparametrizationRegister.get(FamilyName.NORMAL, "missing")
        with pytest.raises(ValueError, match=r"known: none"):
            ReparametrizationRegister.get(FamilyName.PARETO, "missing")


class TestConfigureReparametrizations:
    def test_every_family_has_an_inverse_cdf_recipe(self) -> None:
        configure_reparametrizations()

        for family_name in configure_families_register().list_registered_families():
            assert ReparametrizationRegister.contains(family_name, INVERSE_CDF)

    @pytest.mark.parametrize(
        "target, names",
        [
            (FamilyName.NORMAL, {INVERSE_CDF, "non_centered"}),
            (
                FamilyName.CAUCHY,
                {INVERSE_CDF, "tan_uniform", "scale_mixture", "ratio_of_normals"},
            ),
            (FamilyName.STUDENT_T, {INVERSE_CDF, "scale_mixture"}),
            (FamilyName.LOGNORMAL, {INVERSE_CDF, "exp_normal"}),
            (FamilyName.PARETO, {INVERSE_CDF, "power_uniform", "exp_exponential"}),
            (FamilyName.HALF_NORMAL, {INVERSE_CDF, "abs_normal"}),
            (FamilyName.HALF_CAUCHY, {INVERSE_CDF, "tan_half_uniform"}),
            (FamilyName.EXPONENTIAL, {INVERSE_CDF, "log_uniform"}),
        ],
    )
    def test_builtin_recipes(self, target: str, names: set[str]) -> None:
        configure_reparametrizations()
        registered = {recipe.name for recipe in ReparametrizationRegister.for_family(target)}
        assert registered == names

    def test_configuration_is_cached(self) -> None:
        assert configure_reparametrizations() is configure_reparametrizations()

    def test_reset_drops_recipes(self) -> None:
        configure_reparametrizations()
        reset_reparametrizations()

        assert not ReparametrizationRegister.contains(FamilyName.NORMAL, "non_centered")
        configure_reparametrizations()
        assert ReparametrizationRegister.contains(FamilyName.NORMAL, "non_centered")

    def test_recipes_describe_their_identity(self) -> None:
        configure_reparametrizations()
        recipe = ReparametrizationRegister.get(FamilyName.STUDENT_T, "scale_mixture")
        assert "Gamma" in recipe.description
