"""
Slippage Math - 스왑 가격 한도 계산

스왑이 넘어서는 안 되는 sqrtPriceX96 한도 (sqrtPriceLimitX96).
"""

from ..constants import PPM_DENOMINATOR
from .bounds import require_sqrt_price, require_uint256


def get_swap_threshold_price(
    sqrt_price_x96: int,
    zero_for_one: bool,
    slippage_ppm: int
) -> int:
    """슬리피지 한도 sqrtPriceX96 계산

    zero_for_one=True : P * slippage_ppm / 10^6
    zero_for_one=False: P * (10^6 + slippage_ppm) / 10^6

    주의: zero_for_one=True 쪽은 "P 에서 slippage 만큼 뺀 값"이 아니라
    P 의 slippage_ppm 비율 자체를 돌려줍니다. 배포된 예치 흐름과 동일한
    값을 내야 하므로 그대로 유지합니다.

    Args:
        sqrt_price_x96: 현재 sqrtPriceX96
        zero_for_one: 스왑 방향
        slippage_ppm: 허용 슬리피지 (0 ~ 1_000_000)

    Returns:
        sqrtPriceLimitX96
    """
    require_sqrt_price(sqrt_price_x96, "sqrt_price_x96")
    if slippage_ppm < 0 or slippage_ppm > PPM_DENOMINATOR:
        raise ValueError(
            f"slippage_ppm은(는) 0 ~ {PPM_DENOMINATOR} 범위여야 합니다: {slippage_ppm}"
        )

    if zero_for_one:
        limit = sqrt_price_x96 * slippage_ppm // PPM_DENOMINATOR
    else:
        limit = sqrt_price_x96 * (PPM_DENOMINATOR + slippage_ppm) // PPM_DENOMINATOR

    return require_uint256(limit, "sqrt_price_limit")
