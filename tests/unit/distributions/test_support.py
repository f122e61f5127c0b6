from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from math import inf

import numpy as np
import pytest

from pysatl_reparam.distributions.support import ContinuousSupport, Support
from pysatl_reparam.families.configuration import configure_families_register
from pysatl_reparam.types import ContinuousSupportShape1D, FamilyName


class TestContinuousSupport:
    def setup_method(self) -> None:
        # range of tan(x_raw) inputs in the Cauchy trick
        self.half_open = ContinuousSupport(left=0.0, right=1.0, right_closed=False)

    @pytest.mark.parametrize(
        "point, inside",
        [(0.0, True), (0.999, True), (1.0, False), (-1e-12, False), (inf, False), (-inf, False)],
    )
    def test_scalar_membership(self, point, inside) -> None:
        assert self.half_open.contains(point) is inside
        assert (point in self.half_open) is inside

    def test_array_membership(self) -> None:
        mask = self.half_open.contains(np.array([-0.5, 0.0, 0.5, 1.0]))

        assert isinstance(mask, np.ndarray)
        assert mask.tolist() == [False, True, True, False]
        assert self.half_open.contains(np.array([])).shape == (0,)

    @pytest.mark.parametrize("end", [-inf, inf])
    def test_infinite_ends_are_open(self, end) -> None:
        real_line = ContinuousSupport(left_closed=True, right_closed=True)

        assert real_line.left_closed is False
        assert real_line.right_closed is False
        assert real_line.contains(end) is False

    @pytest.mark.parametrize(
        "support, shape",
        [
            (ContinuousSupport(), ContinuousSupportShape1D.REAL_LINE),
            (ContinuousSupport(left=0.0), ContinuousSupportShape1D.RAY_RIGHT),
            (ContinuousSupport(right=0.0), ContinuousSupportShape1D.RAY_LEFT),
            (ContinuousSupport(-2.0, 3.0), ContinuousSupportShape1D.BOUNDED_INTERVAL),
            (ContinuousSupport(1.0, 1.0), ContinuousSupportShape1D.SINGLE_POINT),
            (ContinuousSupport(1.0, 1.0, left_closed=False), ContinuousSupportShape1D.EMPTY),
            (ContinuousSupport(2.0, 1.0), ContinuousSupportShape1D.EMPTY),
        ],
        ids=["real-line", "ray-right", "ray-left", "bounded", "point", "open-point", "reversed"],
    )
    def test_shapes(self, support, shape) -> None:
        assert support.shape == shape

    def test_satisfies_support_protocol(self) -> None:
        assert isinstance(self.half_open, Support)


class TestFamilySupports:
    @pytest.mark.parametrize(
        "family_name, parameters, shape, outside, boundary_inside",
        [
            (FamilyName.NORMAL, {"mu": 0.0, "sigma": 1.0}, "REAL_LINE", None, None),
            (FamilyName.CAUCHY, {"mu": 0.0, "sigma": 1.0}, "REAL_LINE", None, None),
            (FamilyName.EXPONENTIAL, {"lambda_": 1.0}, "RAY_RIGHT", -1.0, True),
            (FamilyName.HALF_CAUCHY, {"sigma": 1.0}, "RAY_RIGHT", -1.0, True),
            (FamilyName.LOGNORMAL, {"mu": 0.0, "sigma": 1.0}, "RAY_RIGHT", -1.0, False),
            (FamilyName.PARETO, {"y_min": 2.0, "alpha": 3.0}, "RAY_RIGHT", 1.0, True),
        ],
    )
    def test_support_matches_reachable_values(
        self, family_name, parameters, shape, outside, boundary_inside
    ) -> None:
        support = configure_families_register().get(family_name)(**parameters).support

        assert support.shape == ContinuousSupportShape1D[shape]
        if outside is not None:
            assert support.contains(outside) is False
            assert support.contains(support.left) is boundary_inside
