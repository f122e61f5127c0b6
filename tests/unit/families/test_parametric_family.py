from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import pytest
from scipy import stats

from pysatl_reparam.families import ParametricFamily, configure_families_register
from pysatl_reparam.types import CharacteristicName, FamilyName


class TestCharacteristicProviders:
    def setup_method(self) -> None:
        registry = configure_families_register()
        self.gamma = registry.get(FamilyName.GAMMA)
        self.student_t = registry.get(FamilyName.STUDENT_T)

    @pytest.mark.parametrize(
        "characteristic, parametrization_name, provider",
        [
            (CharacteristicName.MEAN, "shapeScale", "shapeScale"),
            (CharacteristicName.VAR, "shapeScale", "shapeScale"),
            (CharacteristicName.PDF, "shapeScale", "shapeRate"),
            (CharacteristicName.MEAN, "shapeRate", "shapeRate"),
            ("entropy", "shapeScale", None),
        ],
    )
    def test_own_form_wins_over_base(self, characteristic, parametrization_name, provider) -> None:
        assert self.gamma.provider_of(characteristic, parametrization_name) == provider

    def test_own_and_base_forms_agree(self) -> None:
        by_scale = self.gamma("shapeScale", k=3.0, theta=0.5)
        by_rate = self.gamma(alpha=3.0, beta=2.0)

        for name in (CharacteristicName.MEAN, CharacteristicName.VAR):
            assert by_scale.calculate_characteristic(name, None) == pytest.approx(
                by_rate.calculate_characteristic(name, None)
            )

    def test_base_forms_see_converted_values(self) -> None:
        standard = self.student_t("standard", nu=4.0)
        x = [-2.0, 0.0, 1.5]

        assert standard.base_parameters.parameters == {"nu": 4.0, "mu": 0.0, "sigma": 1.0}
        assert standard.query_method(CharacteristicName.CDF)(x) == pytest.approx(
            stats.t(4.0).cdf(x)
        )

    def test_member_without_a_characteristic(self) -> None:
        computations = self.gamma(alpha=2.0, beta=1.0).analytical_computations

        assert set(computations) == set(self.gamma.characteristics)
        assert "entropy" not in computations


class TestFamilyMembers:
    def setup_method(self) -> None:
        self.normal = configure_families_register().get(FamilyName.NORMAL)

    def test_precision_member_evaluates_through_base(self) -> None:
        distr = self.normal("meanPrec", mu=0.0, tau=0.25)
        expected = math.exp(-0.5) / (2.0 * math.sqrt(2.0 * math.pi))

        assert distr.calculate_characteristic(CharacteristicName.VAR, None) == pytest.approx(4.0)
        assert distr.query_method(CharacteristicName.PDF)(2.0) == pytest.approx(expected)

    def test_reassigned_parameters_rebind_characteristics(self) -> None:
        distr = self.normal(mu=0.0, sigma=1.0)
        first = distr.analytical_computations
        assert distr.analytical_computations is first

        distr.parameters = self.normal.get_parametrization("meanPrec")(mu=1.0, tau=4.0)
        rebound = distr.analytical_computations

        assert rebound is not first
        assert rebound[CharacteristicName.MEAN](None) == 1.0
        assert rebound[CharacteristicName.VAR](None) == pytest.approx(0.25)

    def test_support_follows_parameters(self) -> None:
        uniform = configure_families_register().get(FamilyName.CONTINUOUS_UNIFORM)
        support = uniform("meanWidth", mean=1.0, width=4.0).support

        assert (support.left, support.right) == (-1.0, 3.0)

    def test_family_is_resolved_through_register(self) -> None:
        distr = self.normal(mu=0.0, sigma=1.0)

        assert distr.family is self.normal
        assert distr.family_name == FamilyName.NORMAL

    def test_reprs(self) -> None:
        assert repr(self.normal(mu=0.0, sigma=2.0)) == "Normal[meanStd](mu=0.0, sigma=2.0)"
        assert repr(self.normal) == (
            "ParametricFamily(name='Normal', parametrizations=['meanStd', 'meanPrec'])"
        )

    def test_unknown_parametrization_raises_key_error(self) -> None:
        with pytest.raises(KeyError):
            self.normal("meanVar", mu=0.0, var=1.0)


class TestFamilyDeclaration:
    def test_family_without_parametrizations_is_rejected(self) -> None:
        with pytest.raises(ValueError, match="at least one parametrization"):
            ParametricFamily("Empty", parametrization_names=[], characteristics={})

    def test_base_must_be_registered_before_use(self) -> None:
        family = ParametricFamily("Draft", parametrization_names=["rate"], characteristics={})

        with pytest.raises(ValueError, match="'rate' is not registered"):
            family.base
