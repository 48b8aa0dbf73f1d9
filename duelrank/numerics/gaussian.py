"""
Gaussian distributions in precision / precision-mean form

Beliefs in a factor graph are multiplied and divided far more often than they are
read, so the canonical parameters are the precision (1 / variance) and the
precision-weighted mean (mean / variance). Products and quotients are then just
sums and differences. A precision of zero is the uninformative distribution and is
the identity element of the product.
"""
import math
from dataclasses import dataclass
from duelrank.utils.constants import LOG_SQRT_2_PI
from duelrank.utils.math_utils import norm_cdf, norm_pdf, norm_ppf


@dataclass(frozen=True)
class GaussianDistribution:
    """an immutable 1d gaussian stored as (precision, precision_mean)"""

    precision: float = 0.0
    precision_mean: float = 0.0

    def __post_init__(self):
        if self.precision < 0.0:
            raise ValueError(f'precision must be non-negative, got {self.precision}')

    @classmethod
    def from_mean_and_standard_deviation(cls, mean: float = 0.0, standard_deviation: float = 1.0):
        if standard_deviation < 0.0:
            raise ValueError(f'standard deviation must be non-negative, got {standard_deviation}')
        if standard_deviation == 0.0:
            raise ValueError('a point mass cannot be represented in precision form')
        precision = 1.0 / (standard_deviation**2.0)
        return cls(precision=precision, precision_mean=precision * mean)

    @classmethod
    def from_precision_mean(cls, precision_mean: float, precision: float):
        return cls(precision=precision, precision_mean=precision_mean)

    @property
    def mean(self) -> float:
        if self.precision == 0.0:
            return 0.0
        return self.precision_mean / self.precision

    @property
    def variance(self) -> float:
        if self.precision == 0.0:
            return math.inf
        return 1.0 / self.precision

    @property
    def standard_deviation(self) -> float:
        return math.sqrt(self.variance)

    @property
    def normalization_constant(self) -> float:
        """1 / (sqrt(2 pi) * sigma)"""
        return 1.0 / (math.sqrt(2.0 * math.pi) * self.standard_deviation)

    def __mul__(self, other):
        if not isinstance(other, GaussianDistribution):
            return NotImplemented
        return GaussianDistribution(
            precision=self.precision + other.precision,
            precision_mean=self.precision_mean + other.precision_mean,
        )

    def __truediv__(self, other):
        if not isinstance(other, GaussianDistribution):
            return NotImplemented
        return GaussianDistribution(
            precision=self.precision - other.precision,
            precision_mean=self.precision_mean - other.precision_mean,
        )

    def __sub__(self, other):
        """absolute difference, used to measure how much a marginal moved"""
        if not isinstance(other, GaussianDistribution):
            return NotImplemented
        return max(
            math.fabs(self.precision_mean - other.precision_mean),
            math.sqrt(math.fabs(self.precision - other.precision)),
        )

    def at(self, x: float) -> float:
        """density at x"""
        if self.precision == 0.0:
            return 0.0
        return norm_pdf((x - self.mean) / self.standard_deviation) / self.standard_deviation

    def __str__(self):
        return f'mean={self.mean:.4f}, standard_deviation={self.standard_deviation:.4f}'


def log_product_normalization(left: GaussianDistribution, right: GaussianDistribution) -> float:
    """log of the normalization constant of left * right, 0 when either side carries no information"""
    if left.precision == 0.0 or right.precision == 0.0:
        return 0.0
    variance_sum = left.variance + right.variance
    mean_diff = left.mean - right.mean
    return -LOG_SQRT_2_PI - (math.log(variance_sum) / 2.0) - ((mean_diff**2.0) / (2.0 * variance_sum))


def log_ratio_normalization(numerator: GaussianDistribution, denominator: GaussianDistribution) -> float:
    """log of the normalization constant of numerator / denominator, nan unless the denominator is the wider one"""
    if numerator.precision == 0.0 or denominator.precision == 0.0:
        return 0.0
    variance_diff = denominator.variance - numerator.variance
    if variance_diff <= 0.0:
        return math.nan
    mean_diff = numerator.mean - denominator.mean
    return (
        math.log(denominator.variance)
        + LOG_SQRT_2_PI
        - (math.log(variance_diff) / 2.0)
        + ((mean_diff**2.0) / (2.0 * variance_diff))
    )


def cumulative_to(x: float, mean: float = 0.0, standard_deviation: float = 1.0) -> float:
    return norm_cdf((x - mean) / standard_deviation)


def inverse_cumulative_to(p: float, mean: float = 0.0, standard_deviation: float = 1.0) -> float:
    return mean + (standard_deviation * norm_ppf(p))

