"""
Tests for shared compute infrastructure.

Validates:
    - select_tolerance picks the tier matching an element type
    - Timer averages repeated calls and keeps setup out of the timing
"""

from decimal import Decimal
from fractions import Fraction

import numpy as np
import pytest

from pymtrs.core.compute import EXACT, FP32, FP64, Timer, select_tolerance


class TestSelectTolerance:

    @pytest.mark.parametrize("dtype", [int, np.int32, Fraction, Decimal])
    def test_exact_types(self, dtype):
        assert select_tolerance(dtype) is EXACT

    @pytest.mark.parametrize("dtype", [float, complex, np.float64, np.complex128])
    def test_double_precision(self, dtype):
        assert select_tolerance(dtype) is FP64

    @pytest.mark.parametrize("dtype", [np.float32, np.float16, np.complex64])
    def test_single_precision(self, dtype):
        assert select_tolerance(dtype) is FP32

    def test_exact_tier_has_no_slack(self):
        assert EXACT.rtol == 0.0
        assert EXACT.atol == 0.0

    def test_fp32_looser_than_fp64(self):
        assert FP32.rtol > FP64.rtol
        assert FP32.atol > FP64.atol




class TestTimer:

    def test_rejects_non_positive_repeat(self):
        with pytest.raises(ValueError, match="repeat"):
            Timer(0)

    def test_operation_called_repeat_times(self):
        calls = []
        timer = Timer(5)
        mean = timer.measure('append', lambda: calls.append(1))
        assert len(calls) == 5
        assert mean >= 0.0

    def test_setup_supplies_fresh_operand(self):
        seen = []
        timer = Timer(3)
        timer.measure('collect', seen.append, setup=object)
        assert len(seen) == 3
        assert len({id(operand) for operand in seen}) == 3

    def test_averages_pool_repeated_labels(self):
        timer = Timer(2)
        first = timer.measure('work', lambda: None)
        second = timer.measure('work', lambda: None)
        averages = timer.averages()
        assert list(averages) == ['work']
        assert averages['work'] == pytest.approx((first + second) / 2)

    def test_averages_keep_measurement_order(self):
        timer = Timer(1)
        timer.measure('b', lambda: None)
        timer.measure('a', lambda: None)
        assert list(timer.averages()) == ['b', 'a']

    def test_report_in_microseconds(self):
        timer = Timer(1)
        timer.measure('noop', lambda: None)
        assert timer.report().strip().startswith("noop:")
        assert timer.report().endswith("us/iter")

    def test_empty_timer(self):
        assert Timer(1).averages() == {}
        assert Timer(1).report() == ""
