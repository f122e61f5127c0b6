"""
Tests for Gamma Distribution Family

This module tests the shape-rate and shape-scale parametrizations of the
gamma family against scipy reference values.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest
from scipy.stats import gamma

from pysatl_reparam.families.configuration import configure_families_register
from pysatl_reparam.types import CharacteristicName, ContinuousSupportShape1D, FamilyName

from .base import FamilyTestBase


class TestGammaFamily(FamilyTestBase):
    """Test suite for Gamma distribution family."""

    def setup_method(self):
        """Setup before each test method."""
        registry = configure_families_register()
        self.gamma_family = registry.get(FamilyName.GAMMA)
        self.gamma_dist_example = self.gamma_family(alpha=2.5, beta=2.0)

    def test_family_properties(self):
        assert self.gamma_family.name == FamilyName.GAMMA
        assert set(self.gamma_family.parametrization_names) == {"shapeRate", "shapeScale"}
        assert self.gamma_family.base_parametrization_name == "shapeRate"

    def test_shape_scale_converts_to_rate(self):
        dist = self.gamma_family(k=2.5, theta=0.5, parametrization_name="shapeScale")
        base = dist.base_parameters

        assert dist.parameter_values == {"k": 2.5, "theta": 0.5}
        assert base.name == "shapeRate"
        assert abs(base.parameters["alpha"] - 2.5) < self.CALCULATION_PRECISION
        assert abs(base.parameters["beta"] - 2.0) < self.CALCULATION_PRECISION

    @pytest.mark.parametrize(
        "params, message",
        [
            ({"alpha": 0.0, "beta": 1.0}, "alpha > 0"),
            ({"alpha": 1.0, "beta": -2.0}, "beta > 0"),
        ],
    )
    def test_parametrization_constraints(self, params, message):
        with pytest.raises(ValueError, match=message):
            self.gamma_family(**params)

    def test_moments(self):
        dist = self.gamma_dist_example
        reference = gamma(2.5, scale=0.5)
        mean, var, skew, excess = reference.stats(moments="mvsk")

        assert dist.query_method(CharacteristicName.MEAN)(None) == pytest.approx(float(mean))
        assert dist.query_method(CharacteristicName.VAR)(None) == pytest.approx(float(var))
        assert dist.query_method(CharacteristicName.SKEW)(None) == pytest.approx(float(skew))

        kurt = dist.query_method(CharacteristicName.KURT)
        assert kurt(None, excess=True) == pytest.approx(float(excess))
        assert kurt(None) == pytest.approx(float(excess) + 3.0)

    @pytest.mark.parametrize(
        "char_name, test_data, scipy_func",
        [
            (CharacteristicName.PDF, [-1.0, 0.1, 0.5, 1.0, 2.5, 6.0], gamma.pdf),
            (CharacteristicName.LOGPDF, [0.1, 0.5, 1.0, 2.5, 6.0], gamma.logpdf),
            (CharacteristicName.CDF, [-1.0, 0.0, 0.5, 1.0, 2.5, 6.0], gamma.cdf),
            (CharacteristicName.PPF, [0.001, 0.1, 0.5, 0.9, 0.999], gamma.ppf),
        ],
    )
    def test_array_input_for_characteristics(self, char_name, test_data, scipy_func):
        char_func = self.gamma_dist_example.query_method(char_name)
        input_array = np.array(test_data)

        result_array = char_func(input_array)

        assert result_array.shape == input_array.shape
        expected = scipy_func(input_array, 2.5, scale=0.5)
        self.assert_arrays_almost_equal(result_array, expected, precision=1e-8)

    def test_logpdf_outside_support(self):
        logpdf = self.gamma_dist_example.query_method(CharacteristicName.LOGPDF)
        assert np.isneginf(logpdf(np.array([-0.5]))[0])

    def test_characteristic_function(self):
        cf = self.gamma_dist_example.query_method(CharacteristicName.CF)
        t = np.array([-1.0, 0.0, 3.0])
        expected = (1 - 1j * t / 2.0) ** (-2.5)

        result = cf(t)
        self.assert_arrays_almost_equal(result.real, expected.real)
        self.assert_arrays_almost_equal(result.imag, expected.imag)

    def test_ppf_boundaries(self):
        ppf = self.gamma_dist_example.query_method(CharacteristicName.PPF)
        assert ppf(0.0) == 0.0
        assert ppf(1.0) == math.inf
        with pytest.raises(ValueError):
            ppf(1.5)

    def test_support(self):
        support = self.gamma_dist_example.support
        assert support.left == 0.0
        assert support.shape == ContinuousSupportShape1D.RAY_RIGHT
