"""
CPU backend for hypothesis tests.

Dispatches to test-specific submodules based on design.test_type.
"""

from __future__ import annotations

from pystatlab.core.result import Result
from pystatlab.core.compute.timing import Timer
from pystatlab.hypothesis._common import HTestParams, HTestType
from pystatlab.hypothesis.design import HypothesisDesign


class CPUHypothesisBackend:
    """CPU backend for hypothesis tests."""

    @property
    def name(self) -> str:
        return 'cpu_hypothesis'

    def solve(self, design: HypothesisDesign) -> Result[HTestParams]:
        """Dispatch to test-specific implementation based on design.test_type."""
        timer = Timer()
        timer.start()

        test_type = design.test_type

        with timer.section(test_type.value):
            if test_type is HTestType.Z_TEST:
                from pystatlab.hypothesis.backends._z_test import z_one_sample
                params, warnings_list = z_one_sample(design)
            elif test_type is HTestType.T_TEST:
                from pystatlab.hypothesis.backends._t_test import t_one_sample
                params, warnings_list = t_one_sample(design)
            else:
                raise ValueError(f"Unknown test_type: {test_type!r}")

        timer.stop()

        return Result(
            params=params,
            info={'test_type': test_type.value, 'tail': design.tail.value},
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
