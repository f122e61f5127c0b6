from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest

from pysatl_reparam.hierarchical import EIGHT_SCHOOLS, HierarchicalData, eight_schools


class TestHierarchicalData:
    def test_eight_schools_values(self) -> None:
        data = eight_schools()

        assert data.J == 8
        np.testing.assert_array_equal(data.y, [28, 8, -3, 7, -1, 1, 18, 12])
        np.testing.assert_array_equal(data.sigma, [15, 10, 16, 11, 9, 11, 10, 18])
        assert data is not EIGHT_SCHOOLS
        np.testing.assert_array_equal(data.y, EIGHT_SCHOOLS.y)

    def test_arrays_are_read_only(self) -> None:
        data = HierarchicalData(y=[1.0, 2.0], sigma=[1.0, 1.0])
        with pytest.raises(ValueError):
            data.y[0] = 5.0

    def test_input_is_copied(self) -> None:
        y = np.array([1.0, 2.0])
        data = HierarchicalData(y=y, sigma=[1.0, 1.0])
        y[0] = 10.0
        assert data.y[0] == 1.0

    def test_as_stan_data(self) -> None:
        data = HierarchicalData(y=[1.5, -2.0], sigma=[1.0, 3.0])
        assert data.as_stan_data() == {"J": 2, "y": [1.5, -2.0], "sigma": [1.0, 3.0]}

    @pytest.mark.parametrize(
        "y, sigma, message",
        [
            ([], [], "At least one group"),
            ([1.0, 2.0], [1.0], "same length"),
            ([1.0], [0.0], "sigma must be positive"),
            ([1.0], [-1.0], "sigma must be positive"),
            ([math.nan], [1.0], "finite"),
            ([[1.0]], [[1.0]], "one-dimensional"),
        ],
        ids=["empty", "mismatch", "zero-sigma", "negative-sigma", "nan", "2d"],
    )
    def test_validation(self, y, sigma, message) -> None:
        with pytest.raises(ValueError, match=message):
            HierarchicalData(y=y, sigma=sigma)
