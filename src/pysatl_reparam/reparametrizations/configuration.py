"""
Reparametrizations Configuration
================================

Registers the builtin recipes:

- ``inverse_cdf`` for every family: ``F⁻¹(U)``;
- Normal: ``non_centered``, ``μ + σZ``;
- Cauchy: ``tan_uniform``, ``scale_mixture``, ``ratio_of_normals``;
- StudentT: ``scale_mixture``, ``μ + σZ/√τ`` with ``τ ~ Gamma(ν/2, ν/2)``;
- LogNormal: ``exp_normal``, ``exp(μ + σZ)``;
- Pareto: ``power_uniform``, ``exp_exponential``;
- HalfNormal: ``abs_normal``, ``σ|Z|``;
- HalfCauchy: ``tan_half_uniform``, ``σ tan(πU/2)``;
- Exponential: ``log_uniform``, ``-log(1 - U)/λ``.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from functools import lru_cache
from typing import TYPE_CHECKING, Any, cast

import numpy as np

from pysatl_reparam.families.builtins.continuous.exponential import UNIT_RATE
from pysatl_reparam.families.builtins.continuous.uniform import UNIT_INTERVAL
from pysatl_reparam.families.configuration import configure_families_register
from pysatl_reparam.reparametrizations.recipe import BaseVariate, Reparametrization
from pysatl_reparam.reparametrizations.registry import ReparametrizationRegister
from pysatl_reparam.transforms.functional import (
    exponential_to_pareto,
    non_centered_normal,
    normal_to_lognormal,
    probability_integral_transform,
    ratio_of_normals_cauchy,
    scale_mixture_cauchy,
    scale_mixture_student_t,
    uniform_to_cauchy,
    uniform_to_exponential,
    uniform_to_half_cauchy,
    uniform_to_pareto,
)
from pysatl_reparam.types import FamilyName

if TYPE_CHECKING:
    from collections.abc import Mapping

    from pysatl_reparam.families.distribution import ParametricFamilyDistribution
    from pysatl_reparam.types import NumericArray

INVERSE_CDF = "inverse_cdf"


def _standard_uniform(name: str = "u") -> BaseVariate:
    return BaseVariate(
        name=name,
        family=FamilyName.CONTINUOUS_UNIFORM,
        parameters=lambda _: dict(UNIT_INTERVAL),
    )


def _standard_normal(name: str = "z") -> BaseVariate:
    return BaseVariate(
        name=name,
        family=FamilyName.NORMAL,
        parameters=lambda _: {"mu": 0.0, "sigma": 1.0},
    )


def _params(distribution: ParametricFamilyDistribution) -> Any:
    return distribution.base_parameters


def _inverse_cdf(
    distribution: ParametricFamilyDistribution, values: Mapping[str, NumericArray]
) -> NumericArray:
    return probability_integral_transform(distribution, values["u"])


def _non_centered(
    distribution: ParametricFamilyDistribution, values: Mapping[str, NumericArray]
) -> NumericArray:
    p = _params(distribution)
    return non_centered_normal(values["z"], p.mu, p.sigma)


def _cauchy_tan(
    distribution: ParametricFamilyDistribution, values: Mapping[str, NumericArray]
) -> NumericArray:
    p = _params(distribution)
    return uniform_to_cauchy(values["u"], p.mu, p.sigma)


def _cauchy_mixture(
    distribution: ParametricFamilyDistribution, values: Mapping[str, NumericArray]
) -> NumericArray:
    p = _params(distribution)
    return scale_mixture_cauchy(values["z"], values["tau"], p.mu, p.sigma)


def _cauchy_ratio(
    distribution: ParametricFamilyDistribution, values: Mapping[str, NumericArray]
) -> NumericArray:
    p = _params(distribution)
    return ratio_of_normals_cauchy(values["z1"], values["z2"], p.mu, p.sigma)


def _student_t_mixture(
    distribution: ParametricFamilyDistribution, values: Mapping[str, NumericArray]
) -> NumericArray:
    p = _params(distribution)
    return scale_mixture_student_t(values["z"], values["tau"], p.nu, p.mu, p.sigma)


def _lognormal_exp(
    distribution: ParametricFamilyDistribution, values: Mapping[str, NumericArray]
) -> NumericArray:
    p = _params(distribution)
    return normal_to_lognormal(values["z"], p.mu, p.sigma)


def _pareto_power(
    distribution: ParametricFamilyDistribution, values: Mapping[str, NumericArray]
) -> NumericArray:
    p = _params(distribution)
    return uniform_to_pareto(values["u"], p.y_min, p.alpha)


def _pareto_exp(
    distribution: ParametricFamilyDistribution, values: Mapping[str, NumericArray]
) -> NumericArray:
    p = _params(distribution)
    return exponential_to_pareto(values["e"], p.y_min, p.alpha)


def _half_normal_abs(
    distribution: ParametricFamilyDistribution, values: Mapping[str, NumericArray]
) -> NumericArray:
    p = _params(distribution)
    return cast("NumericArray", p.sigma * np.abs(values["z"]))


def _half_cauchy_tan(
    distribution: ParametricFamilyDistribution, values: Mapping[str, NumericArray]
) -> NumericArray:
    p = _params(distribution)
    return uniform_to_half_cauchy(values["u"], p.sigma)


def _exponential_log(
    distribution: ParametricFamilyDistribution, values: Mapping[str, NumericArray]
) -> NumericArray:
    p = _params(distribution)
    return uniform_to_exponential(values["u"], p.lambda_)


@lru_cache(maxsize=1)
def configure_reparametrizations() -> ReparametrizationRegister:
    """
    Register the builtin recipes (and the families they rely on).

    Returns
    -------
    ReparametrizationRegister
        The global registry of recipes.
    """
    families = configure_families_register()
    register = ReparametrizationRegister()

    for family_name in families.list_registered_families():
        register.register(
            Reparametrization(
                name=INVERSE_CDF,
                target=family_name,
                base_variates=(_standard_uniform(),),
                transform=_inverse_cdf,
                description="F⁻¹(U) ~ F for U ~ Uniform(0, 1)",
            )
        )

    recipes = [
        Reparametrization(
            name="non_centered",
            target=FamilyName.NORMAL,
            base_variates=(_standard_normal(),),
            transform=_non_centered,
            description="μ + σZ ~ Normal(μ, σ)",
        ),
        Reparametrization(
            name="tan_uniform",
            target=FamilyName.CAUCHY,
            base_variates=(_standard_uniform(),),
            transform=_cauchy_tan,
            description="μ + σ tan(π(U - 1/2)) ~ Cauchy(μ, σ)",
        ),
        Reparametrization(
            name="scale_mixture",
            target=FamilyName.CAUCHY,
            base_variates=(
                _standard_normal(),
                BaseVariate(
                    name="tau",
                    family=FamilyName.GAMMA,
                    parameters=lambda _: {"alpha": 0.5, "beta": 0.5},
                ),
            ),
            transform=_cauchy_mixture,
            description="μ + σZ/√τ ~ Cauchy(μ, σ) for τ ~ Gamma(1/2, 1/2)",
        ),
        Reparametrization(
            name="ratio_of_normals",
            target=FamilyName.CAUCHY,
            base_variates=(_standard_normal("z1"), _standard_normal("z2")),
            transform=_cauchy_ratio,
            description="μ + σ Z₁/Z₂ ~ Cauchy(μ, σ)",
        ),
        Reparametrization(
            name="scale_mixture",
            target=FamilyName.STUDENT_T,
            base_variates=(
                _standard_normal(),
                BaseVariate(
                    name="tau",
                    family=FamilyName.GAMMA,
                    parameters=lambda p: {"alpha": p.nu / 2, "beta": p.nu / 2},
                ),
            ),
            transform=_student_t_mixture,
            description="μ + σZ/√τ ~ StudentT(ν, μ, σ) for τ ~ Gamma(ν/2, ν/2)",
        ),
        Reparametrization(
            name="exp_normal",
            target=FamilyName.LOGNORMAL,
            base_variates=(_standard_normal(),),
            transform=_lognormal_exp,
            description="exp(μ + σZ) ~ LogNormal(μ, σ)",
        ),
        Reparametrization(
            name="power_uniform",
            target=FamilyName.PARETO,
            base_variates=(_standard_uniform(),),
            transform=_pareto_power,
            description="y_min (1 - U)^(-1/α) ~ Pareto(y_min, α)",
        ),
        Reparametrization(
            name="exp_exponential",
            target=FamilyName.PARETO,
            base_variates=(
                BaseVariate(
                    name="e",
                    family=FamilyName.EXPONENTIAL,
                    parameters=lambda _: dict(UNIT_RATE),
                ),
            ),
            transform=_pareto_exp,
            description="y_min exp(E/α) ~ Pareto(y_min, α) for E ~ Exponential(1)",
        ),
        Reparametrization(
            name="abs_normal",
            target=FamilyName.HALF_NORMAL,
            base_variates=(_standard_normal(),),
            transform=_half_normal_abs,
            description="σ|Z| ~ HalfNormal(σ)",
        ),
        Reparametrization(
            name="tan_half_uniform",
            target=FamilyName.HALF_CAUCHY,
            base_variates=(_standard_uniform(),),
            transform=_half_cauchy_tan,
            description="σ tan(πU/2) ~ HalfCauchy(σ)",
        ),
        Reparametrization(
            name="log_uniform",
            target=FamilyName.EXPONENTIAL,
            base_variates=(_standard_uniform(),),
            transform=_exponential_log,
            description="-log(1 - U)/λ ~ Exponential(λ)",
        ),
    ]
    for recipe in recipes:
        register.register(recipe)

    return register


def reset_reparametrizations() -> None:
    """
    Reset the cached recipes registry.
    """
    configure_reparametrizations.cache_clear()
    ReparametrizationRegister._reset()
