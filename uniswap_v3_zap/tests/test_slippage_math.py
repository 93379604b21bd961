"""
Slippage Math 테스트

스왑 가격 한도 계산을 테스트합니다.
zero_for_one=True 쪽은 P 의 slippage 비율 자체이며, 이 값을 고정합니다.
"""

import pytest

from ..math.slippage_math import get_swap_threshold_price
from ..constants import Q96, PPM_DENOMINATOR


class TestGetSwapThresholdPrice:
    """get_swap_threshold_price 테스트"""

    def test_zero_for_one_five_percent(self):
        """P * 50000 / 10^6 = P 의 5% (P - 5% 가 아님)"""
        assert get_swap_threshold_price(Q96, True, 50000) == 3961408125713216879677197516
        assert get_swap_threshold_price(Q96, True, 50000) == Q96 // 20

    def test_one_for_zero_five_percent(self):
        """P * 1.05"""
        assert get_swap_threshold_price(Q96, False, 50000) == 83189570639977554473221147852

    def test_bounds_of_slippage(self):
        assert get_swap_threshold_price(Q96, True, 0) == 0
        assert get_swap_threshold_price(Q96, True, PPM_DENOMINATOR) == Q96
        assert get_swap_threshold_price(Q96, False, 0) == Q96
        assert get_swap_threshold_price(Q96, False, PPM_DENOMINATOR) == 2 * Q96

    def test_floor_rounding(self):
        """나머지는 버림"""
        assert get_swap_threshold_price(999_999, False, 1) == 999_999
        # (10^6 + 1)(10^6 - 1) = 10^12 - 1
        assert get_swap_threshold_price(1_000_001, True, 999_999) == 999_999

    @pytest.mark.parametrize("zero_for_one", [True, False])
    def test_monotonic_in_slippage(self, zero_for_one):
        """slippage 가 커지면 한도도 커짐 (zero_for_one=True 는 P 쪽으로)"""
        steps = [0, 1, 10, 500, 50000, 250000, 999999, PPM_DENOMINATOR]
        limits = [get_swap_threshold_price(Q96, zero_for_one, ppm) for ppm in steps]
        assert all(a < b for a, b in zip(limits, limits[1:]))
        if zero_for_one:
            assert limits[-1] <= Q96
        else:
            assert limits[0] >= Q96

    def test_invalid_slippage(self):
        with pytest.raises(ValueError):
            get_swap_threshold_price(Q96, True, -1)
        with pytest.raises(ValueError):
            get_swap_threshold_price(Q96, False, PPM_DENOMINATOR + 1)

    def test_invalid_price(self):
        with pytest.raises(ValueError):
            get_swap_threshold_price(0, False, 50000)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
