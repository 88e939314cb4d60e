"""
CPU backend for goodness-of-fit tests.

Dispatches to test-specific submodules based on design.test_type.
"""

from __future__ import annotations

from pystatlab.core.result import Result
from pystatlab.core.compute.timing import Timer
from pystatlab.gof._common import GoFParams, GoFTestType
from pystatlab.gof.design import GoFDesign


class CPUGoFBackend:
    """CPU backend for goodness-of-fit tests."""

    @property
    def name(self) -> str:
        return 'cpu_gof'

    def solve(self, design: GoFDesign) -> Result[GoFParams]:
        """Dispatch to test-specific implementation based on design.test_type."""
        timer = Timer()
        timer.start()

        test_type = design.test_type

        with timer.section(test_type.value):
            if test_type is GoFTestType.KS:
                from pystatlab.gof.backends._ks_test import ks_one_sample
                params, warnings_list = ks_one_sample(design)
            elif test_type is GoFTestType.CHI_SQUARE:
                from pystatlab.gof.backends._chisq_test import chisq_one_sample
                params, warnings_list = chisq_one_sample(design)
            elif test_type is GoFTestType.ANDERSON_DARLING:
                from pystatlab.gof.backends._ad_test import ad_normal
                params, warnings_list = ad_normal(design)
            elif test_type is GoFTestType.JARQUE_BERA:
                from pystatlab.gof.backends._jb_test import jb_normal
                params, warnings_list = jb_normal(design)
            else:
                raise ValueError(f"Unknown test_type: {test_type!r}")

        timer.stop()

        return Result(
            params=params,
            info={
                'test_type': test_type.value,
                'distribution': design.distribution.value,
                'rejection_rule': 'p_value' if test_type.rejects_on_p_value else 'critical_value',
            },
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
