from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest
from scipy import stats

from pysatl_reparam.distributions.sampling import ArraySample
from pysatl_reparam.families import configure_families_register
from pysatl_reparam.stats import GoodnessOfFitResult, check_reparametrization, ks_check
from pysatl_reparam.types import FamilyName


class TestKsCheck:
    def setup_method(self) -> None:
        self.normal = configure_families_register().get(FamilyName.NORMAL)(mu=0.0, sigma=1.0)

    def test_matching_sample_passes(self) -> None:
        data = np.random.default_rng(1).standard_normal(1000)

        result = ks_check(data, self.normal, alpha=0.001)

        expected = stats.kstest(data, stats.norm().cdf)
        assert result.statistic == pytest.approx(expected.statistic)
        assert result.pvalue == pytest.approx(expected.pvalue)
        assert result.n == 1000
        assert result.passed

    def test_shifted_sample_fails(self) -> None:
        data = np.random.default_rng(2).standard_normal(1000) + 1.0
        assert not ks_check(data, self.normal).passed

    def test_accepts_sample_objects(self) -> None:
        data = np.random.default_rng(3).standard_normal(100)
        result = ks_check(ArraySample.from_values(data), self.normal)
        assert result.n == 100

    def test_small_sample_warns(self) -> None:
        with pytest.warns(UserWarning, match="little power"):
            ks_check([0.1, -0.2, 0.5], self.normal)

    @pytest.mark.parametrize(
        "sample, alpha, message",
        [
            ([], 0.05, "empty"),
            ([0.0, math.nan] * 20, 0.05, "NaN"),
            ([0.0] * 30, 0.0, "alpha"),
            ([0.0] * 30, 1.0, "alpha"),
        ],
        ids=["empty", "nan", "alpha-zero", "alpha-one"],
    )
    def test_invalid_input(self, sample, alpha, message) -> None:
        with pytest.raises(ValueError, match=message):
            ks_check(sample, self.normal, alpha=alpha)

    def test_result_passed_uses_alpha(self) -> None:
        assert GoodnessOfFitResult(statistic=0.1, pvalue=0.05, alpha=0.05, n=10).passed
        assert not GoodnessOfFitResult(statistic=0.1, pvalue=0.04, alpha=0.05, n=10).passed


class TestCheckReparametrization:
    def test_unknown_recipe(self) -> None:
        normal = configure_families_register().get(FamilyName.NORMAL)(mu=0.0, sigma=1.0)
        with pytest.raises(ValueError, match="No reparametrization tan_uniform for Normal"):
            check_reparametrization(normal, "tan_uniform", 100, seed=0)

    def test_explicit_generator(self) -> None:
        cauchy = configure_families_register().get(FamilyName.CAUCHY)(mu=0.0, sigma=1.0)
        rng = np.random.default_rng(99)

        result = check_reparametrization(cauchy, "tan_uniform", 500, rng=rng, alpha=1e-3)

        assert result.passed
