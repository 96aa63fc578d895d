from dataclasses import dataclass
import math
import numpy as np
from scipy.stats import norm


class InvalidParameter(ValueError):
    def __init__(self, name: str, value, reason: str):
        self.name = name
        self.value = value
        self.reason = reason
        super().__init__(f"{name}={value!r}: {reason}")


def _check_probability(name: str, value: float) -> None:
    # NaN fails both comparisons, so it lands here too
    if not (0.0 < value < 1.0):
        raise InvalidParameter(name, value, "must be strictly between 0 and 1.")


def validate_query(p1: float, p2: float, alpha: float, power: float) -> None:
    _check_probability("p1", p1)
    _check_probability("p2", p2)
    if p1 == p2:
        raise InvalidParameter("p2", p2, "must differ from p1; a zero effect size needs infinite samples.")
    _check_probability("alpha", alpha)
    _check_probability("power", power)


def treatment_rate_from_mde(baseline_rate: float, mde: float) -> float:
    return baseline_rate * (1 + mde)


def compute_sample_size(p1: float,
                        p2: float,
                        alpha: float = 0.05,
                        power: float = 0.8,
                        *,
                        two_tailed: bool = True,
                        ) -> float:
    """Per-group n for a two-proportion z-test, before rounding up."""
    validate_query(p1, p2, alpha, power)

    z_alpha = norm.ppf(1 - alpha / 2) if two_tailed else norm.ppf(1 - alpha)
    z_beta = norm.ppf(power)
    p_bar = (p1 + p2) / 2
    q_bar = 1 - p_bar
    delta = abs(p2 - p1)

    num = (z_alpha * np.sqrt(2 * p_bar * q_bar) + z_beta * np.sqrt(p1 * (1 - p1) + p2 * (1 - p2))) ** 2
    den = delta ** 2
    return float(num / den)


def required_sample_size(p1: float,
                         p2: float,
                         alpha: float = 0.05,
                         power: float = 0.8,
                         *,
                         two_tailed: bool = True,
                         ) -> int:
    return int(math.ceil(compute_sample_size(p1, p2, alpha, power, two_tailed=two_tailed)))


def achieved_power(p1: float, p2: float, n_per_group: float, alpha: float = 0.05) -> float:
    """Power of the two-sided test with ``n_per_group`` observations in each arm.

    Uses the same pooled-null / unpooled-alternative variances as
    ``compute_sample_size``, so it inverts that formula up to the negligible
    far rejection tail.
    """
    _check_probability("p1", p1)
    _check_probability("p2", p2)
    _check_probability("alpha", alpha)
    if not n_per_group > 0:
        raise InvalidParameter("n_per_group", n_per_group, "must be positive.")

    p_bar = (p1 + p2) / 2
    se_null = np.sqrt(2 * p_bar * (1 - p_bar) / n_per_group)
    se_alt = np.sqrt((p1 * (1 - p1) + p2 * (1 - p2)) / n_per_group)
    z_alpha = norm.ppf(1 - alpha / 2)
    delta = abs(p2 - p1)

    upper = norm.cdf((delta - z_alpha * se_null) / se_alt)
    lower = norm.cdf((-delta - z_alpha * se_null) / se_alt)
    return float(min(1.0, upper + lower))


@dataclass(frozen=True)
class PowerQuery:
    baseline_rate: float  # control conversion rate (p1)
    treatment_rate: float  # expected treatment rate (p2)
    alpha: float = 0.05
    power: float = 0.8
    two_tailed: bool = True

    @classmethod
    def from_mde(cls,
                 baseline_rate: float,
                 mde: float,
                 alpha: float = 0.05,
                 power: float = 0.8,
                 two_tailed: bool = True,
                 ) -> "PowerQuery":
        return cls(baseline_rate, treatment_rate_from_mde(baseline_rate, mde), alpha, power, two_tailed)

    def validate(self) -> None:
        validate_query(self.baseline_rate, self.treatment_rate, self.alpha, self.power)

    def sample_size(self) -> float:
        return compute_sample_size(self.baseline_rate, self.treatment_rate, self.alpha, self.power,
                                   two_tailed=self.two_tailed)

    def required_sample_size(self) -> int:
        return int(math.ceil(self.sample_size()))
