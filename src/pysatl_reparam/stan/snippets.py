"""
Stan Snippets
=============

Stan programs contrasting a direct (centered) parameterization with the
reparameterized one. Reparameterized variables follow the ``<name>_raw``
convention: the sampler explores ``x_raw`` and ``x`` is built from it in
``transformed parameters``.

Available snippets:

- ``centered_normal`` / ``non_centered_normal``;
- ``eight_schools_centered`` / ``eight_schools_non_centered``;
- ``cauchy_tan_uniform``;
- ``student_t_scale_mixture`` / ``cauchy_scale_mixture``;
- ``lognormal_exp_normal``;
- ``pareto_exp_exponential``.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

from pysatl_reparam.stan.program import StanProgram

_LOCATION_SCALE_DATA = ("real mu;", "real<lower=0> sigma;")


def _number(value: float) -> str:
    if not math.isfinite(value):
        raise ValueError(f"Stan literals must be finite, got {value}")
    return repr(float(value))


def eight_schools_program(
    non_centered: bool = True,
    mu_loc: float = 0.0,
    mu_scale: float = 5.0,
    tau_scale: float = 5.0,
) -> StanProgram:
    """
    Hierarchical Normal model of the eight-schools data.

    Parameters
    ----------
    non_centered : bool
        Sample ``theta_raw ~ std_normal()`` and set
        ``theta = mu + tau * theta_raw`` instead of sampling ``theta``.
    mu_loc, mu_scale : float
        Normal prior of ``mu``.
    tau_scale : float
        Half-Cauchy prior scale of ``tau``.

    Raises
    ------
    ValueError
        If a scale is not positive or a value is not finite.
    """
    if not (mu_scale > 0 and tau_scale > 0):
        raise ValueError("Prior scales must be positive")

    data = ("int<lower=0> J;", "vector[J] y;", "vector<lower=0>[J] sigma;")
    priors = (
        f"mu ~ normal({_number(mu_loc)}, {_number(mu_scale)});",
        f"tau ~ cauchy(0, {_number(tau_scale)});",
    )
    if not non_centered:
        return StanProgram(
            data=data,
            parameters=("real mu;", "real<lower=0> tau;", "vector[J] theta;"),
            model=(*priors, "theta ~ normal(mu, tau);", "y ~ normal(theta, sigma);"),
        )
    return StanProgram(
        data=data,
        parameters=("real mu;", "real<lower=0> tau;", "vector[J] theta_raw;"),
        transformed_parameters=("vector[J] theta = mu + tau * theta_raw;",),
        model=(*priors, "theta_raw ~ std_normal();", "y ~ normal(theta, sigma);"),
    )


def _scale_mixture(nu: str, data: tuple[str, ...]) -> StanProgram:
    return StanProgram(
        data=data,
        parameters=("real x_raw;", "real<lower=0> tau;"),
        transformed_parameters=("real x = mu + sigma * x_raw / sqrt(tau);",),
        model=("x_raw ~ std_normal();", f"tau ~ gamma(0.5 * {nu}, 0.5 * {nu});"),
    )


_SNIPPETS: dict[str, StanProgram] = {
    "centered_normal": StanProgram(
        data=_LOCATION_SCALE_DATA,
        parameters=("real x;",),
        model=("x ~ normal(mu, sigma);",),
    ),
    "non_centered_normal": StanProgram(
        data=_LOCATION_SCALE_DATA,
        parameters=("real x_raw;",),
        transformed_parameters=("real x = mu + sigma * x_raw;",),
        model=("x_raw ~ std_normal();",),
    ),
    "eight_schools_centered": eight_schools_program(non_centered=False),
    "eight_schools_non_centered": eight_schools_program(non_centered=True),
    "cauchy_tan_uniform": StanProgram(
        data=_LOCATION_SCALE_DATA,
        parameters=("real<lower=-pi() / 2, upper=pi() / 2> x_raw;",),
        transformed_parameters=("real x = mu + sigma * tan(x_raw);",),
        # uniform on the bounded interval, so x ~ cauchy(mu, sigma)
        model=(),
    ),
    "student_t_scale_mixture": _scale_mixture(
        "nu", ("real<lower=0> nu;", *_LOCATION_SCALE_DATA)
    ),
    "cauchy_scale_mixture": _scale_mixture("1", _LOCATION_SCALE_DATA),
    "lognormal_exp_normal": StanProgram(
        data=_LOCATION_SCALE_DATA,
        parameters=("real x_raw;",),
        transformed_parameters=("real<lower=0> x = exp(mu + sigma * x_raw);",),
        model=("x_raw ~ std_normal();",),
    ),
    "pareto_exp_exponential": StanProgram(
        data=("real<lower=0> y_min;", "real<lower=0> alpha;"),
        parameters=("real<lower=0> x_raw;",),
        transformed_parameters=("real<lower=y_min> x = y_min * exp(x_raw / alpha);",),
        model=("x_raw ~ exponential(1);",),
    ),
}


def available_snippets() -> list[str]:
    """Names accepted by :func:`render_snippet`, sorted."""
    return sorted(_SNIPPETS)


def get_snippet(name: str) -> StanProgram:
    """
    Snippet program by name.

    Raises
    ------
    ValueError
        If ``name`` is unknown.
    """
    try:
        return _SNIPPETS[name]
    except KeyError:
        raise ValueError(
            f"Unknown Stan snippet '{name}'. Available: {', '.join(available_snippets())}"
        ) from None


def render_snippet(name: str) -> str:
    """Stan source of the snippet ``name``; see :func:`get_snippet`."""
    return get_snippet(name).render()
