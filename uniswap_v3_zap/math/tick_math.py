"""
Tick Math - 틱 간격 정렬과 Tick → sqrtPriceX96 변환

References:
- Uniswap V3 Core: contracts/libraries/TickMath.sol
- 백서 Section 6.1: Ticks and Tick Spacing

핵심 공식:
    price = 1.0001^tick
    sqrtPriceX96 = sqrt(price) * 2^96
    유효 틱 = tick_spacing 의 배수
"""

import math
from typing import Tuple

from ..constants import MIN_TICK, MAX_TICK, TICK_SPACINGS, TICK_BASE, UINT256_MAX


MIN_SQRT_RATIO: int = 4295128739
MAX_SQRT_RATIO: int = 1461446703485210103287273052203988822378723970342

# (비트, Q128.128 곱셈 상수): 1/sqrt(1.0001)^bit
_RATIO_MULTIPLIERS: Tuple[Tuple[int, int], ...] = (
    (0x2, 0xfff97272373d413259a46990580e213a),
    (0x4, 0xfff2e50f5f656932ef12357cf3c7fdcc),
    (0x8, 0xffe5caca7e10e4e61c3624eaa0941cd0),
    (0x10, 0xffcb9843d60f6159c9db58835c926644),
    (0x20, 0xff973b41fa98c081472e6896dfb254c0),
    (0x40, 0xff2ea16466c96a3843ec78b326b52861),
    (0x80, 0xfe5dee046a99a2a811c461f1969c3053),
    (0x100, 0xfcbe86c7900a88aedcffc83b479aa3a4),
    (0x200, 0xf987a7253ac413176f2b074cf7815e54),
    (0x400, 0xf3392b0822b70005940c7a398e4b70f3),
    (0x800, 0xe7159475a2c29b7443b29c7fa6e889d9),
    (0x1000, 0xd097f3bdfd2022b8845ad8f792aa5825),
    (0x2000, 0xa9f746462d870fdf8a65dc1f90e061e5),
    (0x4000, 0x70d869a156d2a1b890bb3df62baf32f7),
    (0x8000, 0x31be135f97d08fd981231505542fcfa6),
    (0x10000, 0x9aa508b5b7a84e1c677de54f3e99bc9),
    (0x20000, 0x5d6af8dedb81196699c329225ee604),
    (0x40000, 0x2216e584f5fa1ea926041bedfe98),
    (0x80000, 0x48a170391f7dc42444e8fa2),
)


def get_spaced_tick(tick: int, spacing: int, round_up: bool) -> int:
    """틱을 tick_spacing 의 배수로 정렬

    round_up=False 이면 tick 이하의 가장 큰 배수 (floor),
    round_up=True 이면 tick 이상의 가장 작은 배수 (ceil).

    음수 틱에서 truncation 과 floor 가 달라지므로 float 나눗셈을 쓰지 않고
    정수 floor division 만 사용합니다.

    Args:
        tick: 정렬할 틱
        spacing: 틱 간격 (양수)
        round_up: 올림 여부

    Returns:
        spacing 의 배수인 틱

    Example:
        >>> get_spaced_tick(-17, 10, False)
        -20
        >>> get_spaced_tick(-17, 10, True)
        -10
    """
    if spacing <= 0:
        raise ValueError(f"틱 간격은 양수여야 합니다: {spacing}")

    if round_up:
        return -((-tick) // spacing) * spacing
    return (tick // spacing) * spacing


def get_tick_spacing_for_fee(fee_tier: int) -> int:
    """수수료 티어에 해당하는 틱 간격 반환"""
    if fee_tier not in TICK_SPACINGS:
        raise ValueError(f"지원하지 않는 수수료 티어: {fee_tier}")
    return TICK_SPACINGS[fee_tier]


def tick_offset_for_ratio(ratio: float) -> int:
    """가격을 ratio 배로 움직이는 틱 변화량

    price(a) * ratio = price(b)  =>  b = a + log_1.0001(ratio)

    범위 경계를 고르는 용도로만 사용합니다 (예치 수량 계산에는 사용하지 않음).

    Example:
        >>> tick_offset_for_ratio(0.7)
        -3567
        >>> tick_offset_for_ratio(1.3)
        2624
    """
    if ratio <= 0:
        raise ValueError(f"가격 비율은 양수여야 합니다: {ratio}")
    return int(round(math.log(ratio) / math.log(TICK_BASE)))


def get_sqrt_ratio_at_tick(tick: int) -> int:
    """틱에서 sqrtPriceX96 계산

    Solidity TickMath.getSqrtRatioAtTick()과 비트 단위로 동일한 구현.
    온체인 풀이 제공하는 primitive 를 대신할 수 있는 참조 구현입니다.

    Args:
        tick: 틱 인덱스 (-887272 ~ 887272)

    Returns:
        sqrtPriceX96 (Q64.96 형식)

    Raises:
        ValueError: 틱이 유효 범위를 벗어난 경우
    """
    if tick < MIN_TICK or tick > MAX_TICK:
        raise ValueError(f"틱이 유효 범위를 벗어났습니다: {tick} (범위: {MIN_TICK} ~ {MAX_TICK})")

    abs_tick = abs(tick)

    if abs_tick & 0x1:
        ratio = 0xfffcb933bd6fad37aa2d162d1a594001
    else:
        ratio = 1 << 128

    for bit, multiplier in _RATIO_MULTIPLIERS:
        if abs_tick & bit:
            ratio = (ratio * multiplier) >> 128

    if tick > 0:
        ratio = UINT256_MAX // ratio

    # Q128.128 -> Q64.96 (올림)
    return (ratio >> 32) + (1 if ratio % (1 << 32) != 0 else 0)
