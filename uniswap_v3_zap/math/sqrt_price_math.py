"""
Sqrt Price Math - sqrtPriceX96 ↔ real price 변환

sqrtPriceX96 = sqrt(price) * 2^96 를 토큰 decimals 를 반영한
18자리 고정소수점 가격으로 변환합니다.

이 값은 리포팅/가치 비교 용도이며, 예치 수량 계산에 다시 넣지 않습니다.
예치 계산은 전부 sqrtPriceX96 도메인에서 이루어집니다.
"""

from ..constants import Q192, MANTISSA, MANTISSA_DECIMALS, UINT8_MAX
from .bounds import require_sqrt_price


def get_real_price(
    sqrt_price_x96: int,
    decimals0: int,
    decimals1: int,
    zero_for_one: bool
) -> int:
    """sqrtPriceX96을 decimals 보정된 고정소수점 가격으로 변환

    zero_for_one=True  (token0 1개당 token1):
        sqrt^2 * 10^(decimals0 + 18 - decimals1) / 2^192
    zero_for_one=False (token1 1개당 token0):
        2^192 * 10^(decimals1 + 18 - decimals0) / sqrt / sqrt

    모든 나눗셈은 정수 floor division 입니다.

    Args:
        sqrt_price_x96: sqrtPriceX96 값
        decimals0: token0 소수점 자릿수 (u8)
        decimals1: token1 소수점 자릿수 (u8)
        zero_for_one: 가격 방향

    Returns:
        가격 (실제 가격 = 결과 / 10^18)

    Raises:
        ValueError: decimals 범위 오류, 또는 지수가 음수가 되는 경우
    """
    require_sqrt_price(sqrt_price_x96, "sqrt_price_x96")
    for name, decimals in (("decimals0", decimals0), ("decimals1", decimals1)):
        if decimals < 0 or decimals > UINT8_MAX:
            raise ValueError(f"{name}은(는) 0 ~ {UINT8_MAX} 범위여야 합니다: {decimals}")

    if zero_for_one:
        exponent = decimals0 + MANTISSA_DECIMALS - decimals1
    else:
        exponent = decimals1 + MANTISSA_DECIMALS - decimals0

    if exponent < 0:
        raise ValueError(
            f"가격 스케일 지수가 음수입니다: {exponent} "
            f"(decimals0={decimals0}, decimals1={decimals1}, zero_for_one={zero_for_one})"
        )

    scalar = 10 ** exponent
    if zero_for_one:
        return sqrt_price_x96 * sqrt_price_x96 * scalar // Q192
    return Q192 * scalar // sqrt_price_x96 // sqrt_price_x96


def real_price_to_float(real_price: int) -> float:
    """18자리 고정소수점 가격 → float (표시용)"""
    return real_price / MANTISSA
