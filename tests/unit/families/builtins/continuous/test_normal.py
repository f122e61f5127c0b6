"""
Tests for Normal Distribution Family

The Normal is the base variate of the non-centered, lognormal and
scale-mixture recipes; both of its parametrizations must describe the same
member and agree with scipy.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest
from scipy.stats import norm

from pysatl_reparam.transforms.functional import non_centered_normal
from pysatl_reparam.types import (
    CharacteristicName,
    ContinuousSupportShape1D,
    FamilyName,
    UnivariateContinuous,
)

from .base import FamilyTestBase


class TestNormalFamily(FamilyTestBase):
    FAMILY = FamilyName.NORMAL

    def setup_method(self):
        super().setup_method()
        self.by_std = self.family(mu=2.0, sigma=1.5)
        self.by_precision = self.family("meanPrec", mu=2.0, tau=1 / 2.25)

    def test_parametrizations(self):
        assert self.family.parametrization_names == ["meanStd", "meanPrec"]
        assert self.by_std.distribution_type == UnivariateContinuous
        assert self.by_precision.parametrization_name == "meanPrec"
        assert self.by_precision.parameter_values == {"mu": 2.0, "tau": pytest.approx(1 / 2.25)}

    def test_precision_converts_to_standard_deviation(self):
        base = self.by_precision.base_parameters

        assert base.name == "meanStd"
        assert base.parameters == {"mu": 2.0, "sigma": pytest.approx(1.5)}

    @pytest.mark.parametrize(
        "parametrization_name, params, message",
        [
            ("meanStd", {"mu": 0.0, "sigma": 0.0}, "sigma > 0"),
            ("meanPrec", {"mu": 0.0, "tau": -4.0}, "tau > 0"),
            ("meanStd", {"mu": math.nan, "sigma": 1.0}, "finite"),
        ],
    )
    def test_invalid_values_are_rejected(self, parametrization_name, params, message):
        with pytest.raises(ValueError, match=message):
            self.family(parametrization_name, **params)

    @pytest.mark.parametrize("member", ["by_std", "by_precision"])
    def test_matches_scipy(self, member):
        self.assert_matches_reference(
            getattr(self, member), norm(2.0, 1.5), [-4.0, 0.0, 2.0, 3.3, 9.0], precision=1e-9
        )

    def test_logpdf_stays_finite_in_the_far_tails(self):
        x = np.array([-60.0, 2.0, 80.0])
        logpdf = self.by_std.query_method(CharacteristicName.LOGPDF)

        self.assert_arrays_almost_equal(logpdf(x), norm(2.0, 1.5).logpdf(x), precision=1e-9)

    def test_moments(self):
        values = [
            self.by_precision.calculate_characteristic(name, None)
            for name in (CharacteristicName.MEAN, CharacteristicName.VAR, CharacteristicName.SKEW)
        ]
        kurt = self.by_std.query_method(CharacteristicName.KURT)

        assert values == [2.0, pytest.approx(2.25), 0.0]
        assert (kurt(None), kurt(None, excess=True)) == (3.0, 0.0)

    def test_characteristic_function(self):
        t = np.linspace(-2.0, 2.0, 5)
        cf = self.by_std.query_method(CharacteristicName.CF)

        self.assert_arrays_almost_equal(cf(t), np.exp(2j * t - 1.125 * t**2))

    def test_ppf_ends_and_invalid_probabilities(self):
        ppf = self.by_std.query_method(CharacteristicName.PPF)

        assert ppf(np.array([0.0, 1.0])).tolist() == [-math.inf, math.inf]
        with pytest.raises(ValueError):
            ppf(np.array([0.5, 1.01]))

    def test_support_is_the_real_line(self):
        support = self.by_std.support

        assert support.shape == ContinuousSupportShape1D.REAL_LINE
        assert bool(np.all(support.contains(np.array([-500.0, 0.0, 5.0]))))

    def test_quantiles_are_the_non_centered_transform(self):
        q = np.array([0.05, 0.5, 0.9])
        z = self.family(mu=0.0, sigma=1.0).query_method(CharacteristicName.PPF)(q)
        ppf = self.by_std.query_method(CharacteristicName.PPF)

        self.assert_arrays_almost_equal(ppf(q), non_centered_normal(z, 2.0, 1.5))

    def test_inverse_cdf_sampling_is_reproducible(self):
        sample = self.by_std.sample(4000, seed=11)

        np.testing.assert_array_equal(sample.array, self.by_std.sample(4000, seed=11).array)
        assert float(sample.array.mean()) == pytest.approx(2.0, abs=0.15)
        assert float(sample.array.std()) == pytest.approx(1.5, abs=0.15)

    def test_unknown_parametrization_and_missing_values(self):
        with pytest.raises(KeyError):
            self.family("meanVar", mu=0.0, sigma=1.0)
        with pytest.raises(TypeError):
            self.family(mu=0.0)
