"""
Parametric distribution families and the immutable DistributionSpec.

Every family maps a textbook parameterisation onto a `scipy.stats` frozen
random variable:

  normal(mu, sigma)        mean / standard deviation
  t(df)                    Student t, degrees of freedom
  chisq(df)                chi-squared, degrees of freedom
  exponential(scale)       scale theta = 1 / rate
  gamma(shape, scale)      shape k, scale theta
  uniform(a, b)            continuous on [a, b]
  lognormal(mu, sigma)     mu / sigma of the underlying normal (log scale)
  beta(alpha, beta)        bounded [0, 1]
  poisson(lam)             discrete, mean lam
  binomial(n, p)           discrete, n trials with success probability p

Invalid parameters are rejected when the spec is built, so a
DistributionSpec that exists is always usable.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple

from scipy import stats

Params = Tuple[float, ...]


def _require_positive(names: Tuple[str, ...]) -> Callable[[Params], Optional[str]]:
    def check(params: Params) -> Optional[str]:
        bad = [n for n, v in zip(names, params) if not v > 0]
        if bad:
            return f"parameter(s) {bad} must be > 0"
        return None
    return check


def _check_normal_like(params: Params) -> Optional[str]:
    return None if params[1] > 0 else "sigma must be > 0"


def _check_lognormal(params: Params) -> Optional[str]:
    mu = params[0]
    try:
        math.exp(mu)
    except OverflowError:
        return f"mu={mu} is too large, exp(mu) overflows"
    return _check_normal_like(params)


def _check_uniform(params: Params) -> Optional[str]:
    a, b = params
    return None if a < b else f"uniform requires a < b, got a={a}, b={b}"


def _check_poisson(params: Params) -> Optional[str]:
    return None if params[0] >= 0 else "lam must be >= 0"


def _check_binomial(params: Params) -> Optional[str]:
    n, p = params
    if n < 0 or not float(n).is_integer():
        return f"n must be a non-negative integer, got {n}"
    if not 0.0 <= p <= 1.0:
        return f"p must lie in [0, 1], got {p}"
    return None


@dataclass(frozen=True)
class DistributionFamily:
    """One parametric family and how to build it with scipy."""
    name: str
    param_names: Tuple[str, ...]
    builder: Callable[..., "stats.rv_frozen"]
    validate: Callable[[Params], Optional[str]]
    discrete: bool
    description: str


FAMILIES: Dict[str, DistributionFamily] = {
    "normal": DistributionFamily(
        name="normal",
        param_names=("mu", "sigma"),
        builder=lambda mu, sigma: stats.norm(loc=mu, scale=sigma),
        validate=_check_normal_like,
        discrete=False,
        description="Gaussian with mean mu and standard deviation sigma",
    ),
    "t": DistributionFamily(
        name="t",
        param_names=("df",),
        builder=lambda df: stats.t(df),
        validate=_require_positive(("df",)),
        discrete=False,
        description="Student t with df degrees of freedom",
    ),
    "chisq": DistributionFamily(
        name="chisq",
        param_names=("df",),
        builder=lambda df: stats.chi2(df),
        validate=_require_positive(("df",)),
        discrete=False,
        description="Chi-squared with df degrees of freedom",
    ),
    "exponential": DistributionFamily(
        name="exponential",
        param_names=("scale",),
        builder=lambda scale: stats.expon(scale=scale),
        validate=_require_positive(("scale",)),
        discrete=False,
        description="Exponential with scale theta (mean theta)",
    ),
    "gamma": DistributionFamily(
        name="gamma",
        param_names=("shape", "scale"),
        builder=lambda shape, scale: stats.gamma(a=shape, scale=scale),
        validate=_require_positive(("shape", "scale")),
        discrete=False,
        description="Gamma with shape k and scale theta",
    ),
    "uniform": DistributionFamily(
        name="uniform",
        param_names=("a", "b"),
        builder=lambda a, b: stats.uniform(loc=a, scale=b - a),
        validate=_check_uniform,
        discrete=False,
        description="Continuous uniform on [a, b]",
    ),
    "lognormal": DistributionFamily(
        name="lognormal",
        param_names=("mu", "sigma"),
        builder=lambda mu, sigma: stats.lognorm(s=sigma, scale=math.exp(mu)),
        validate=_check_lognormal,
        discrete=False,
        description="exp(X) with X ~ Normal(mu, sigma)",
    ),
    "beta": DistributionFamily(
        name="beta",
        param_names=("alpha", "beta"),
        builder=lambda alpha, beta: stats.beta(alpha, beta),
        validate=_require_positive(("alpha", "beta")),
        discrete=False,
        description="Beta on [0, 1] with shapes alpha and beta",
    ),
    "poisson": DistributionFamily(
        name="poisson",
        param_names=("lam",),
        builder=lambda lam: stats.poisson(lam),
        validate=_check_poisson,
        discrete=True,
        description="Poisson counts with mean lam",
    ),
    "binomial": DistributionFamily(
        name="binomial",
        param_names=("n", "p"),
        builder=lambda n, p: stats.binom(int(n), p),
        validate=_check_binomial,
        discrete=True,
        description="Successes in n Bernoulli(p) trials",
    ),
}


def available_families() -> List[str]:
    return sorted(FAMILIES)


def get_family(name: str) -> DistributionFamily:
    key = name.lower()
    if key not in FAMILIES:
        raise KeyError(
            f"Unknown distribution family '{name}'. "
            f"Available: {available_families()}"
        )
    return FAMILIES[key]


@dataclass(frozen=True)
class DistributionSpec:
    """
    A fully specified distribution: family name plus parameter values.

    Build one with make_distribution("normal", 0, 1). The spec is a value
    object: hashable, comparable, never mutated. The scipy object behind it
    is created on demand by frozen().
    """
    family: str
    params: Params

    def __post_init__(self) -> None:
        fam = get_family(self.family)
        object.__setattr__(self, "family", fam.name)
        try:
            values = tuple(float(v) for v in self.params)
        except (TypeError, ValueError) as exc:
            raise ValueError(f"{fam.name} parameters must be numbers: {self.params!r}") from exc
        if len(values) != len(fam.param_names):
            raise ValueError(
                f"{fam.name} takes {len(fam.param_names)} parameter(s) "
                f"{fam.param_names}, got {len(values)}"
            )
        if not all(math.isfinite(v) for v in values):
            raise ValueError(f"{fam.name} parameters must be finite, got {values}")
        problem = fam.validate(values)
        if problem:
            raise ValueError(f"Invalid {fam.name} parameters {values}: {problem}")
        object.__setattr__(self, "params", values)

    @property
    def param_names(self) -> Tuple[str, ...]:
        return get_family(self.family).param_names

    @property
    def is_discrete(self) -> bool:
        return get_family(self.family).discrete

    @property
    def label(self) -> str:
        args = ", ".join(f"{v:g}" for v in self.params)
        return f"{self.family}({args})"

    def as_dict(self) -> Dict[str, float]:
        return dict(zip(self.param_names, self.params))

    def frozen(self):
        """The scipy.stats frozen random variable for this spec."""
        return get_family(self.family).builder(*self.params)

    def __str__(self) -> str:
        return self.label


def make_distribution(family: str, *params: float) -> DistributionSpec:
    """
    Construct a validated DistributionSpec.

    Raises
    ------
    KeyError   if the family is unknown
    ValueError if the parameter count or values are invalid for the family
    """
    return DistributionSpec(family=family, params=tuple(params))


STANDARD_NORMAL = make_distribution("normal", 0.0, 1.0)
