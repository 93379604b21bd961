"""
Tick Math 테스트

틱 간격 정렬과 Tick → sqrtPriceX96 참조 구현을 테스트합니다.
온체인 값과 비교하여 정확도를 검증합니다.
"""

import pytest

from ..math.tick_math import (
    get_spaced_tick,
    get_sqrt_ratio_at_tick,
    get_tick_spacing_for_fee,
    tick_offset_for_ratio,
    MIN_SQRT_RATIO,
    MAX_SQRT_RATIO,
)
from ..constants import MIN_TICK, MAX_TICK, Q96


class TestGetSpacedTick:
    """get_spaced_tick 테스트

    floor/ceil 정수 나눗셈 의미와 정확히 일치해야 합니다.
    """

    def test_already_aligned(self):
        """이미 정렬된 틱은 방향과 무관하게 그대로"""
        for tick in (-120, -60, 0, 60, 120):
            assert get_spaced_tick(tick, 60, False) == tick
            assert get_spaced_tick(tick, 60, True) == tick

    def test_positive_floor_and_ceil(self):
        """양수 틱"""
        assert get_spaced_tick(17, 10, False) == 10
        assert get_spaced_tick(17, 10, True) == 20
        assert get_spaced_tick(1, 60, False) == 0
        assert get_spaced_tick(1, 60, True) == 60

    def test_negative_floor_and_ceil(self):
        """음수 틱 - truncation 이 아니라 floor"""
        assert get_spaced_tick(-17, 10, False) == -20
        assert get_spaced_tick(-17, 10, True) == -10
        assert get_spaced_tick(-1, 60, False) == -60
        assert get_spaced_tick(-1, 60, True) == 0
        assert get_spaced_tick(-3567, 60, False) == -3600
        assert get_spaced_tick(-3567, 60, True) == -3540

    def test_result_brackets_tick(self):
        """floor <= tick <= ceil, 둘 다 spacing 의 배수"""
        for spacing in (1, 10, 60, 200):
            for tick in range(-450, 451, 7):
                low = get_spaced_tick(tick, spacing, False)
                high = get_spaced_tick(tick, spacing, True)
                assert low % spacing == 0
                assert high % spacing == 0
                assert low <= tick <= high
                assert high - low in (0, spacing)

    def test_spacing_one_is_identity(self):
        assert get_spaced_tick(-12345, 1, False) == -12345
        assert get_spaced_tick(-12345, 1, True) == -12345

    def test_invalid_spacing(self):
        """간격이 0 이하이면 오류"""
        with pytest.raises(ValueError):
            get_spaced_tick(10, 0, False)
        with pytest.raises(ValueError):
            get_spaced_tick(10, -10, True)


class TestTickSpacingForFee:
    """get_tick_spacing_for_fee 테스트"""

    def test_known_tiers(self):
        assert get_tick_spacing_for_fee(100) == 1
        assert get_tick_spacing_for_fee(500) == 10
        assert get_tick_spacing_for_fee(3000) == 60
        assert get_tick_spacing_for_fee(10000) == 200

    def test_unknown_tier(self):
        with pytest.raises(ValueError):
            get_tick_spacing_for_fee(2500)


class TestTickOffsetForRatio:
    """tick_offset_for_ratio 테스트"""

    def test_thirty_percent_band(self):
        """-30% / +30% 가격 변화"""
        assert tick_offset_for_ratio(0.7) == -3567
        assert tick_offset_for_ratio(1.3) == 2624

    def test_ratio_one(self):
        assert tick_offset_for_ratio(1.0) == 0

    def test_invalid_ratio(self):
        with pytest.raises(ValueError):
            tick_offset_for_ratio(0)
        with pytest.raises(ValueError):
            tick_offset_for_ratio(-1.5)


class TestGetSqrtRatioAtTick:
    """get_sqrt_ratio_at_tick 테스트"""

    def test_min_tick(self):
        """최소 틱에서의 sqrtPrice"""
        assert get_sqrt_ratio_at_tick(MIN_TICK) == MIN_SQRT_RATIO

    def test_max_tick(self):
        """최대 틱에서의 sqrtPrice"""
        assert get_sqrt_ratio_at_tick(MAX_TICK) == MAX_SQRT_RATIO

    def test_tick_0(self):
        """틱 0 에서 정확히 2^96"""
        assert get_sqrt_ratio_at_tick(0) == Q96

    def test_known_values(self):
        """온체인 TickMath 값"""
        assert get_sqrt_ratio_at_tick(1) == 79232123823359799118286999568
        assert get_sqrt_ratio_at_tick(-1) == 79224201403219477170569942574
        assert get_sqrt_ratio_at_tick(1000) == 83290069058676223003182343270
        assert get_sqrt_ratio_at_tick(-1000) == 75364347830767020784054125655
        assert get_sqrt_ratio_at_tick(2640) == 90407318714787443201924302679
        assert get_sqrt_ratio_at_tick(-3600) == 66177519608309306897284056450

    def test_monotonic(self):
        """틱이 커지면 sqrtPrice 도 커짐"""
        values = [get_sqrt_ratio_at_tick(t) for t in range(-2000, 2001, 250)]
        assert values == sorted(values)
        assert len(set(values)) == len(values)

    def test_invalid_tick_too_low(self):
        """유효 범위를 벗어난 틱 (너무 낮음)"""
        with pytest.raises(ValueError):
            get_sqrt_ratio_at_tick(MIN_TICK - 1)

    def test_invalid_tick_too_high(self):
        """유효 범위를 벗어난 틱 (너무 높음)"""
        with pytest.raises(ValueError):
            get_sqrt_ratio_at_tick(MAX_TICK + 1)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
