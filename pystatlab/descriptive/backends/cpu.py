"""
CPU backend for describe().

Computes every descriptive statistic from one DescriptiveDesign so the
sorted copy and moments are shared across all of them.
"""

from __future__ import annotations

from pystatlab.core.result import Result
from pystatlab.core.compute.timing import Timer
from pystatlab.descriptive.design import DescriptiveDesign
from pystatlab.descriptive.solution import DescriptiveParams
from pystatlab.descriptive._moments import (
    compute_kurtosis,
    compute_median,
    compute_mode,
    compute_quartiles,
    compute_sample_std,
    compute_skewness,
    compute_std,
)


class CPUDescriptiveBackend:
    """CPU backend for descriptive statistics."""

    @property
    def name(self) -> str:
        return 'cpu_descriptive'

    def solve(
        self,
        design: DescriptiveDesign,
        *,
        conf_level: float = 0.95,
    ) -> Result[DescriptiveParams]:
        """
        Compute the full descriptive summary.

        Parameters
        ----------
        design : DescriptiveDesign
        conf_level : float
            Confidence level of the mean interval attached to the summary.
        """
        timer = Timer()
        timer.start()
        warnings_list: list[str] = []

        with timer.section('moments'):
            std = compute_std(design)
            skewness = compute_skewness(design)
            kurtosis = compute_kurtosis(design)
            if std == 0.0:
                warnings_list.append("data are essentially constant")

        with timer.section('order_statistics'):
            median = compute_median(design)
            mode = compute_mode(design)
            quartiles = compute_quartiles(design)

        std_dev = None
        ci = None
        if design.n >= 2:
            std_dev = compute_sample_std(design)
            with timer.section('confidence_interval'):
                from pystatlab.intervals.solvers import confidence_interval
                ci = confidence_interval(design, conf_level)
        else:
            warnings_list.append(
                "single observation: sample standard deviation and "
                "confidence interval are undefined"
            )

        timer.stop()

        params = DescriptiveParams(
            count=design.n,
            mean=design.mean,
            median=median,
            mode=mode,
            variance=design.variance,
            std=std,
            std_dev=std_dev,
            skewness=skewness,
            kurtosis=kurtosis,
            min=design.min,
            max=design.max,
            range=design.max - design.min,
            quartiles=quartiles,
            confidence_interval=ci,
        )

        return Result(
            params=params,
            info={'conf_level': conf_level},
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
