"""
Liquidity Math - 예치 시뮬레이션

최적 수량을 예치했을 때 민트되는 유동성과 남는 토큰을 계산합니다.
온체인 mint 와 같이 모든 값은 내림(floor)으로 계산합니다.

References:
- Uniswap V3 Periphery: contracts/libraries/LiquidityAmounts.sol
- 백서 Section 6.2.1: Concentrated Liquidity

핵심 공식:
    L = Δx * √P_a * √P_b / (√P_b - √P_a)  # token0 기준
    L = Δy / (√P_b - √P_a)                # token1 기준
"""

from typing import Tuple

from ..constants import Q96
from ..data.types import MintResult
from ..errors import DivisionByZeroError


def _ordered(sqrt_ratio_a_x96: int, sqrt_ratio_b_x96: int) -> Tuple[int, int]:
    if sqrt_ratio_a_x96 > sqrt_ratio_b_x96:
        sqrt_ratio_a_x96, sqrt_ratio_b_x96 = sqrt_ratio_b_x96, sqrt_ratio_a_x96
    if sqrt_ratio_a_x96 == sqrt_ratio_b_x96:
        raise DivisionByZeroError(f"폭이 0인 가격 범위입니다: {sqrt_ratio_a_x96}")
    return sqrt_ratio_a_x96, sqrt_ratio_b_x96


def get_liquidity_for_amount0(sqrt_ratio_a_x96: int, sqrt_ratio_b_x96: int, amount0: int) -> int:
    """amount0 로 얻을 수 있는 최대 유동성"""
    sqrt_a, sqrt_b = _ordered(sqrt_ratio_a_x96, sqrt_ratio_b_x96)
    intermediate = sqrt_a * sqrt_b // Q96
    return amount0 * intermediate // (sqrt_b - sqrt_a)


def get_liquidity_for_amount1(sqrt_ratio_a_x96: int, sqrt_ratio_b_x96: int, amount1: int) -> int:
    """amount1 로 얻을 수 있는 최대 유동성"""
    sqrt_a, sqrt_b = _ordered(sqrt_ratio_a_x96, sqrt_ratio_b_x96)
    return amount1 * Q96 // (sqrt_b - sqrt_a)


def get_liquidity_for_amounts(
    sqrt_ratio_x96: int,
    sqrt_ratio_a_x96: int,
    sqrt_ratio_b_x96: int,
    amount0: int,
    amount1: int
) -> int:
    """토큰 수량에서 민트 가능한 최대 유동성

    Args:
        sqrt_ratio_x96: 현재 sqrtPriceX96
        sqrt_ratio_a_x96: 하한 sqrtPriceX96
        sqrt_ratio_b_x96: 상한 sqrtPriceX96
        amount0: token0 수량
        amount1: token1 수량

    Returns:
        유동성 (범위 내이면 두 제약 중 작은 값)
    """
    sqrt_a, sqrt_b = _ordered(sqrt_ratio_a_x96, sqrt_ratio_b_x96)

    if sqrt_ratio_x96 <= sqrt_a:
        return get_liquidity_for_amount0(sqrt_a, sqrt_b, amount0)
    if sqrt_ratio_x96 < sqrt_b:
        liquidity0 = get_liquidity_for_amount0(sqrt_ratio_x96, sqrt_b, amount0)
        liquidity1 = get_liquidity_for_amount1(sqrt_a, sqrt_ratio_x96, amount1)
        return min(liquidity0, liquidity1)
    return get_liquidity_for_amount1(sqrt_a, sqrt_b, amount1)


def get_amounts_for_liquidity(
    sqrt_ratio_x96: int,
    sqrt_ratio_a_x96: int,
    sqrt_ratio_b_x96: int,
    liquidity: int
) -> Tuple[int, int]:
    """유동성 L 이 현재 가격에서 보유하는 (amount0, amount1), 내림"""
    sqrt_a, sqrt_b = _ordered(sqrt_ratio_a_x96, sqrt_ratio_b_x96)

    if sqrt_ratio_x96 <= sqrt_a:
        return _amount0_for_liquidity(sqrt_a, sqrt_b, liquidity), 0
    if sqrt_ratio_x96 < sqrt_b:
        return (
            _amount0_for_liquidity(sqrt_ratio_x96, sqrt_b, liquidity),
            _amount1_for_liquidity(sqrt_a, sqrt_ratio_x96, liquidity),
        )
    return 0, _amount1_for_liquidity(sqrt_a, sqrt_b, liquidity)


def simulate_mint(
    sqrt_ratio_x96: int,
    sqrt_ratio_a_x96: int,
    sqrt_ratio_b_x96: int,
    amount0: int,
    amount1: int
) -> MintResult:
    """(amount0, amount1) 를 예치했을 때의 유동성과 잔여 수량

    최적 split 을 넣으면 잔여는 반올림 오차 수준이어야 합니다.
    """
    liquidity = get_liquidity_for_amounts(
        sqrt_ratio_x96, sqrt_ratio_a_x96, sqrt_ratio_b_x96, amount0, amount1
    )
    used0, used1 = get_amounts_for_liquidity(
        sqrt_ratio_x96, sqrt_ratio_a_x96, sqrt_ratio_b_x96, liquidity
    )
    return MintResult(
        liquidity=liquidity,
        used0=used0,
        used1=used1,
        leftover0=amount0 - used0,
        leftover1=amount1 - used1,
    )


def _amount0_for_liquidity(sqrt_a: int, sqrt_b: int, liquidity: int) -> int:
    return ((liquidity << 96) * (sqrt_b - sqrt_a) // sqrt_b) // sqrt_a


def _amount1_for_liquidity(sqrt_a: int, sqrt_b: int, liquidity: int) -> int:
    return liquidity * (sqrt_b - sqrt_a) // Q96
