"""
CPU backend for confidence intervals.

Dispatches to interval-specific submodules based on design.interval_type.
"""

from __future__ import annotations

from pystatlab.core.result import Result
from pystatlab.core.compute.timing import Timer
from pystatlab.intervals._common import CIParams, IntervalType
from pystatlab.intervals.design import IntervalDesign


class CPUIntervalBackend:
    """CPU backend for confidence intervals."""

    @property
    def name(self) -> str:
        return 'cpu_intervals'

    def solve(self, design: IntervalDesign) -> Result[CIParams]:
        """Dispatch to interval-specific implementation based on design.interval_type."""
        timer = Timer()
        timer.start()

        interval_type = design.interval_type

        with timer.section(interval_type.value):
            if interval_type is IntervalType.MEAN:
                from pystatlab.intervals.backends._mean import mean_interval
                params, warnings_list = mean_interval(design)
            elif interval_type is IntervalType.TWO_SAMPLE:
                from pystatlab.intervals.backends._mean import two_sample_interval
                params, warnings_list = two_sample_interval(design)
            elif interval_type is IntervalType.PROPORTION:
                from pystatlab.intervals.backends._proportion import proportion_interval
                params, warnings_list = proportion_interval(design)
            elif interval_type is IntervalType.TWO_PROPORTION:
                from pystatlab.intervals.backends._proportion import two_proportion_interval
                params, warnings_list = two_proportion_interval(design)
            else:
                raise ValueError(f"Unknown interval_type: {interval_type!r}")

        timer.stop()

        return Result(
            params=params,
            info={
                'interval_type': interval_type.value,
                'tail': design.tail.value,
            },
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
