"""math utility functions for rating systems"""
import math
import statistics
import numpy as np
from scipy.stats import norm
from duelrank.utils.constants import INV_SQRT_2


def norm_cdf(x):
    """cdf of standard normal"""
    return 0.5 * (1.0 + math.erf(x * INV_SQRT_2))


STANDARD_NORMAL = statistics.NormalDist()


def norm_pdf(x):
    """pdf of standard normal"""
    return STANDARD_NORMAL.pdf(x)


def norm_ppf(p):
    """inverse cdf of standard normal, scipy handles the tails better than a rational approximation"""
    return float(norm.ppf(p))


def mean(values):
    """arithmetic mean of an iterable of floats"""
    values = np.fromiter(values, dtype=np.float64)
    if values.size == 0:
        raise ValueError('cannot take the mean of an empty collection')
    return float(values.mean())


def sign(x):
    """-1, 0 or 1, ints on purpose so they can be used as comparison multipliers"""
    if x > 0:
        return 1
    if x < 0:
        return -1
    return 0


def base_10_sigmoid(x):
    """some methods prefer base 10 unfortunately"""
    return 1.0 / (1.0 + (10.0**-x))
