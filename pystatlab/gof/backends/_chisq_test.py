"""
Chi-square goodness-of-fit test on equal-width bins.

Bins span [min, max] of the sample; each bin is [start, end) except the
last, which is closed. Expected counts are n * (F(end) - F(start)); for
discrete families the mass of the integers inside each bin is used
instead. Bins with expected count below 5 are merged into a neighbor
(the first bin forward, any other bin backward) until none remain or a
single bin is left.
"""

from __future__ import annotations

import math

import numpy as np

from pystatlab.distributions.families import DistributionParams
from pystatlab.gof._common import ChiSquareBin, GoFParams, GoFTestType
from pystatlab.gof.design import GoFDesign
from pystatlab.special import chi_square_inv, chi_square_sf

MIN_EXPECTED = 5.0


def _edges(lo: float, hi: float, n_bins: int) -> np.ndarray:
    edges = lo + (hi - lo) * np.arange(n_bins + 1) / n_bins
    edges[-1] = hi
    return edges


def _observed(x: np.ndarray, edges: np.ndarray) -> np.ndarray:
    n_bins = edges.shape[0] - 1
    idx = np.searchsorted(edges[1:-1], x, side="right")
    return np.bincount(idx, minlength=n_bins)


def _expected(params: DistributionParams, edges: np.ndarray, n: int) -> np.ndarray:
    if not params.discrete:
        cdf = params.cdf(edges)
        return n * np.diff(cdf)

    n_bins = edges.shape[0] - 1
    out = np.zeros(n_bins)
    for i in range(n_bins):
        first = math.ceil(edges[i])
        last = math.floor(edges[i + 1]) if i == n_bins - 1 else math.ceil(edges[i + 1]) - 1
        if last >= first:
            upper, lower = params.cdf(np.array([last, first - 1.0]))
            out[i] = n * (upper - lower)
    return out


def merge_bins(bins: list[ChiSquareBin]) -> list[ChiSquareBin]:
    """Merge bins with expected count < 5 into their neighbors."""
    bins = list(bins)
    while len(bins) > 1:
        small = next((i for i, b in enumerate(bins) if b.expected < MIN_EXPECTED), None)
        if small is None:
            break
        j = 1 if small == 0 else small - 1
        a, b = sorted((small, j))
        left, right = bins[a], bins[b]
        bins[a:b + 1] = [ChiSquareBin(
            start=left.start,
            end=right.end,
            observed=left.observed + right.observed,
            expected=left.expected + right.expected,
        )]
    return bins


def chisq_one_sample(design: GoFDesign) -> tuple[GoFParams, list[str]]:
    params = design.parameters
    x = design.x
    n = design.n
    warnings_list: list[str] = []

    edges = _edges(x.min, x.max, design.n_bins)
    observed = _observed(x.data, edges)
    expected = _expected(params, edges, n)
    raw = [
        ChiSquareBin(float(edges[i]), float(edges[i + 1]), int(observed[i]), float(expected[i]))
        for i in range(design.n_bins)
    ]
    bins = merge_bins(raw)

    statistic = float(sum(
        (b.observed - b.expected) ** 2 / b.expected for b in bins if b.expected > 0
    ))
    df = len(bins) - 1 - params.n_estimated

    if df <= 0:
        warnings_list.append(
            f"chi-square test has {len(bins)} bin(s) after merging and "
            f"{params.n_estimated} estimated parameter(s), leaving df = {df}; "
            "no p-value or critical value is available"
        )
        p_value, critical, reject = 1.0, None, False
    else:
        p_value = chi_square_sf(statistic, df)
        critical = chi_square_inv(1.0 - design.alpha, df)
        reject = statistic > critical

    if len(bins) < len(raw):
        warnings_list.append(
            f"merged {len(raw)} bins into {len(bins)} to keep expected counts >= 5"
        )

    result = GoFParams(
        test_type=GoFTestType.CHI_SQUARE,
        distribution=design.distribution,
        statistic=statistic,
        critical_value=critical,
        p_value=p_value,
        reject=reject,
        alpha=design.alpha,
        n=n,
        df=df,
        parameters=params,
        method="Chi-square goodness-of-fit test",
        extras={
            'bins': tuple(bins),
            'observed': tuple(b.observed for b in bins),
            'expected': tuple(b.expected for b in bins),
            'n_bins_initial': len(raw),
        },
    )
    return result, warnings_list
