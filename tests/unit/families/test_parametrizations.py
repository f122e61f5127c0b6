from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import dataclasses
import math
from typing import Any

import pytest

from pysatl_reparam.families import (
    ParametricFamily,
    Parametrization,
    ParametrizationConstraint,
    configure_families_register,
    constraint,
    parametrization,
)
from pysatl_reparam.types import FamilyName


def _half_student_t() -> ParametricFamily:
    """A family not in the register, declared the way the builtins are."""
    return ParametricFamily(
        "HalfStudentT", parametrization_names=["scale", "standard"], characteristics={}
    )


class TestBuiltinParametrizations:
    def setup_method(self) -> None:
        self.gamma = configure_families_register().get(FamilyName.GAMMA)

    def test_classes_are_frozen_dataclasses(self) -> None:
        shape_scale = self.gamma.get_parametrization("shapeScale")(k=2.0, theta=3.0)

        assert shape_scale.name == "shapeScale"
        assert shape_scale.parameters == {"k": 2.0, "theta": 3.0}
        with pytest.raises(dataclasses.FrozenInstanceError):
            shape_scale.k = 1.0  # type: ignore[misc]

    def test_constraints_are_collected_in_declaration_order(self) -> None:
        constraints = self.gamma.base(alpha=1.0, beta=1.0).constraints

        assert [c.description for c in constraints] == ["alpha > 0", "beta > 0"]
        assert all(isinstance(c, ParametrizationConstraint) for c in constraints)

    def test_first_violated_constraint_is_reported(self) -> None:
        with pytest.raises(ValueError, match='Constraint "alpha > 0" does not hold'):
            self.gamma(alpha=-1.0, beta=-1.0)

    @pytest.mark.parametrize(
        "value, message",
        [(math.inf, "finite"), (math.nan, "finite"), (True, "real number"), ("2", "real number")],
        ids=["inf", "nan", "bool", "str"],
    )
    def test_values_must_be_finite_reals(self, value: Any, message: str) -> None:
        with pytest.raises(ValueError, match=f"'k' must be .*{message}"):
            self.gamma("shapeScale", k=value, theta=1.0)

    def test_base_converts_to_itself(self) -> None:
        shape_rate = self.gamma.base(alpha=2.0, beta=0.5)

        assert shape_rate.transform_to_base_parametrization() is shape_rate
        assert self.gamma.to_base(shape_rate) is shape_rate


class TestDeclaringParametrizations:
    def test_decorated_class_is_registered_on_its_family(self) -> None:
        family = _half_student_t()

        @parametrization(family=family, name="scale")
        class Scale(Parametrization):
            nu: float
            sigma: float

            @constraint(description="sigma > 0")
            def sigma_is_positive(self) -> bool:
                return self.sigma > 0

        assert family.base is Scale
        assert family.parametrizations == {"scale": Scale}
        assert family.distribution(nu=3.0, sigma=2.0).parameter_values == {"nu": 3.0, "sigma": 2.0}
        with pytest.raises(ValueError, match="sigma > 0"):
            family.distribution(nu=3.0, sigma=0.0)

    def test_marker_leaves_the_function_callable(self) -> None:
        @constraint("nu > 2")
        def finite_variance(self: Any) -> bool:
            return self.nu > 2

        assert finite_variance.__name__ == "finite_variance"
        check = ParametrizationConstraint("nu > 2", finite_variance)
        assert check.holds(_Nu(3.0)) is True
        assert check.holds(_Nu(1.0)) is False

    def test_undeclared_name_is_rejected(self) -> None:
        with pytest.raises(ValueError, match="not declared"):

            @parametrization(family=_half_student_t(), name="precision")
            class Precision(Parametrization):
                tau: float

    def test_duplicate_name_is_rejected(self) -> None:
        family = _half_student_t()

        @parametrization(family=family, name="scale")
        class Scale(Parametrization):
            sigma: float

        with pytest.raises(ValueError, match="already registered"):

            @parametrization(family=family, name="scale")
            class ScaleAgain(Parametrization):
                sigma: float

    @pytest.mark.parametrize("wrapper", [staticmethod, classmethod])
    def test_constraint_must_be_an_instance_method(self, wrapper: Any) -> None:
        def check(*_: Any) -> bool:
            return True

        namespace = {"__annotations__": {"sigma": float}, "check": wrapper(constraint("x")(check))}
        cls = type("Scale", (Parametrization,), namespace)
        with pytest.raises(TypeError, match="instance method"):
            parametrization(family=_half_student_t(), name="scale")(cls)


@dataclasses.dataclass
class _Nu:
    nu: float
