from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest
from scipy import stats

from pysatl_reparam.families.configuration import configure_families_register
from pysatl_reparam.transforms import (
    AffineTransform,
    ComposedTransform,
    ExpTransform,
    InverseCDFTransform,
    ParetoTransform,
    TanTransform,
    Transform,
)
from pysatl_reparam.types import FamilyName


def numerical_log_abs_derivative(t: Transform, x: np.ndarray, h: float = 1e-6) -> np.ndarray:
    return np.log(np.abs((t.forward(x + h) - t.forward(x - h)) / (2 * h)))


class TestAffineTransform:
    def test_forward_inverse_and_jacobian(self) -> None:
        t = AffineTransform(loc=1.0, scale=2.0)
        x = np.array([-1.0, 0.0, 3.0])

        np.testing.assert_allclose(t.forward(x), [-1.0, 1.0, 7.0])
        np.testing.assert_allclose(t.inverse(t.forward(x)), x)
        np.testing.assert_allclose(t.log_abs_det_jacobian(x), np.full(3, math.log(2.0)))

    @pytest.mark.parametrize("kwargs", [{"scale": 0.0}, {"scale": -1.0}, {"loc": math.inf}])
    def test_invalid_parameters(self, kwargs) -> None:
        with pytest.raises(ValueError):
            AffineTransform(**kwargs)


class TestClosedFormBijections:
    @pytest.mark.parametrize(
        "transform, points",
        [
            (ExpTransform(), np.array([-2.0, 0.0, 1.5])),
            (TanTransform(loc=1.0, scale=0.5), np.array([0.1, 0.4, 0.5, 0.85])),
            (ParetoTransform(y_min=2.0, alpha=3.0), np.array([0.05, 0.3, 0.9])),
        ],
        ids=["exp", "tan", "pareto"],
    )
    def test_log_jacobian_matches_finite_differences(self, transform, points) -> None:
        np.testing.assert_allclose(
            transform.log_abs_det_jacobian(points),
            numerical_log_abs_derivative(transform, points),
            rtol=1e-5,
            atol=1e-6,
        )
        np.testing.assert_allclose(transform.inverse(transform.forward(points)), points, atol=1e-12)

    def test_tan_pushes_uniform_to_cauchy(self) -> None:
        u = np.array([0.05, 0.5, 0.95])
        np.testing.assert_allclose(
            TanTransform(loc=1.0, scale=0.5).forward(u), stats.cauchy(1.0, 0.5).ppf(u), rtol=1e-10
        )

    def test_domains_and_codomains(self) -> None:
        tan = TanTransform()
        assert tan.domain.contains(0.0) is False
        assert tan.domain.contains(0.5) is True
        assert ExpTransform().codomain.contains(0.0) is False
        assert ParetoTransform(y_min=2.0, alpha=1.0).codomain.left == 2.0

    def test_pareto_rejects_non_positive_alpha(self) -> None:
        with pytest.raises(ValueError, match="alpha"):
            ParetoTransform(y_min=1.0, alpha=0.0)


class TestInverseCDFTransform:
    def setup_method(self) -> None:
        registry = configure_families_register()
        self.exponential = registry.get(FamilyName.EXPONENTIAL)(lambda_=2.0)

    def test_forward_and_inverse(self) -> None:
        t = InverseCDFTransform(self.exponential)
        u = np.array([0.1, 0.5, 0.9])

        np.testing.assert_allclose(t.forward(u), stats.expon(scale=0.5).ppf(u), rtol=1e-12)
        np.testing.assert_allclose(t.inverse(t.forward(u)), u, rtol=1e-12)
        assert t.distribution is self.exponential
        assert t.codomain.left == 0.0

    def test_log_jacobian_is_negative_logpdf_at_quantile(self) -> None:
        t = InverseCDFTransform(self.exponential)
        u = np.array([0.2, 0.6])
        np.testing.assert_allclose(
            t.log_abs_det_jacobian(u), numerical_log_abs_derivative(t, u), rtol=1e-5
        )


class TestComposedTransform:
    def test_exp_after_affine_is_lognormal_map(self) -> None:
        t = ComposedTransform(AffineTransform(loc=0.5, scale=2.0), ExpTransform())
        z = np.array([-1.0, 0.0, 0.7])

        np.testing.assert_allclose(t.forward(z), np.exp(0.5 + 2.0 * z))
        np.testing.assert_allclose(t.inverse(t.forward(z)), z)
        np.testing.assert_allclose(t.log_abs_det_jacobian(z), math.log(2.0) + 0.5 + 2.0 * z)
        assert t.domain.shape == t.parts[0].domain.shape
        assert t.codomain.contains(0.0) is False

    def test_needs_at_least_one_part(self) -> None:
        with pytest.raises(ValueError, match="at least one"):
            ComposedTransform()
