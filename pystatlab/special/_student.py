"""
Student's t CDF approximation.

This is NOT an exact Student's t integral. For df >= 30 the normal CDF
is returned unchanged. Below that a Cornish-Fisher-style correction in
1/df is applied around the normal CDF. The result is symmetric about 0
and clamped to [0, 1], but it can be off by several hundredths for very
small df. Tests against exact t tables are therefore not meaningful.
"""

from __future__ import annotations

from pystatlab.special._erf import normal_cdf

#: df at and above which t_cdf returns the normal CDF
NORMAL_APPROXIMATION_DF = 30


def t_cdf(x: float, df: float) -> float:
    """
    Approximate CDF of Student's t distribution.

    Parameters
    ----------
    x : float
        Quantile.
    df : float
        Degrees of freedom, > 0.

    Returns
    -------
    float
        Approximate P(T <= x), in [0, 1].
    """
    x = float(x)
    df = float(df)
    if df >= NORMAL_APPROXIMATION_DF:
        return normal_cdf(x)

    z = normal_cdf(abs(x))
    correction = 1.0 / (4.0 * df) - 7.0 / (96.0 * df ** 2) + 127.0 / (9216.0 * df ** 3)
    scale = correction * (x * x + 1.0)

    if x < 0:
        p = 1.0 - z + scale * (z - 0.5)
    else:
        p = z + scale * (0.5 - z)
    return min(max(p, 0.0), 1.0)
