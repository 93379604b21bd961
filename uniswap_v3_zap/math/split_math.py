"""
Split Math - 최적 예치 수량과 리밸런싱 스왑 계산

현재 잔고 (x0, y0) 를 가격 P 에서 가치가 보존되도록 한 번 스왑하여,
범위 [p_a, p_b] 의 유동성 곡선 위에 정확히 놓이는 (x*, y*) 로 만듭니다.
(x*, y*) 를 가격 P 에서 예치하면 어느 토큰도 남지 않습니다.

References:
- 백서 Section 6.2.1: Concentrated Liquidity
- Uniswap V3 Periphery: contracts/libraries/LiquidityAmounts.sol

핵심 공식 (단위 유동성당 필요량):
    x = L * (√P_b - √P) / (√P * √P_b)   →  A = √P * √P_b / (√P_b - √P)
    y = L * (√P - √P_a)                  →  B = 1 / (√P - √P_a)

    price * x* + y* = price * x0 + y0   (가치 보존)
    x* / y* = B / A                     (곡선 위)

    x* = (price * x0 + y0) * B / (A + price * B)
    y* = (price * x0 + y0) * A / (A + price * B)

정수 구현에서는 A, price 에 10^18 을, B 에 10^18 * 2^96 을 곱해
스케일을 맞춥니다. 반올림 순서는 온체인 참조와 비트 단위로 같아야 합니다.
"""

from ..constants import Q192, MANTISSA
from ..data.types import Split, SwapInstruction
from ..errors import DivisionByZeroError, InvalidRangeError
from .bounds import require_amount, require_sqrt_price, require_uint256


def get_optimal_quantities(
    x0: int,
    y0: int,
    sqrt_price_a_x96: int,
    sqrt_price_x96: int,
    sqrt_price_b_x96: int
) -> Split:
    """잔고 (x0, y0) 에 대한 최적 예치 수량 (x*, y*) 계산

    Args:
        x0: 현재 token0 잔고 (최소 단위)
        y0: 현재 token1 잔고 (최소 단위)
        sqrt_price_a_x96: 하한 sqrtPriceX96 (p_a)
        sqrt_price_x96: 현재 sqrtPriceX96 (P)
        sqrt_price_b_x96: 상한 sqrtPriceX96 (p_b)

    Returns:
        Split(amount0=x*, amount1=y*)

    Raises:
        DivisionByZeroError: p_a == P, P == p_b, 또는 분모가 0
        InvalidRangeError: p_a < P < p_b 가 아닌 경우
        ArithmeticOverflowError: 입력/결과가 온체인 타입 범위를 벗어난 경우
    """
    require_amount(x0, "x0")
    require_amount(y0, "y0")
    p_a = require_sqrt_price(sqrt_price_a_x96, "sqrt_price_a_x96")
    p = require_sqrt_price(sqrt_price_x96, "sqrt_price_x96")
    p_b = require_sqrt_price(sqrt_price_b_x96, "sqrt_price_b_x96")

    if p == p_a or p == p_b:
        raise DivisionByZeroError(
            f"현재 가격이 범위 경계와 같습니다: p_a={p_a}, P={p}, p_b={p_b}"
        )
    if not p_a < p < p_b:
        raise InvalidRangeError(
            f"현재 가격이 범위 밖에 있습니다: p_a={p_a}, P={p}, p_b={p_b}"
        )

    # token0 의 token1 표시 가격 * 10^18
    scaled_price = p * p * MANTISSA // Q192

    a = p * p_b * MANTISSA // (p_b - p)
    b = MANTISSA * Q192 // (p - p_a)

    value = scaled_price * x0 + y0 * MANTISSA
    denominator = a * MANTISSA + scaled_price * b
    if denominator == 0:
        raise DivisionByZeroError(f"분모가 0입니다: A={a}, price={scaled_price}, B={b}")

    x = value * b // denominator
    y = value * a // denominator

    return Split(
        amount0=require_uint256(x, "amount0"),
        amount1=require_uint256(y, "amount1"),
    )


def get_swap_amount(x0: int, y0: int, split: Split) -> SwapInstruction:
    """(x0, y0) → split 로 가기 위한 스왑 방향과 수량

    zero_for_one = x0 > x*
    amount = x0 - x*  (zero_for_one)
           = y0 - y*  (그 외)

    Args:
        x0: 현재 token0 잔고
        y0: 현재 token1 잔고
        split: get_optimal_quantities(x0, y0, ...) 결과

    Returns:
        SwapInstruction (amount == 0 이면 이미 균형)

    Raises:
        ValueError: split 이 (x0, y0) 에서 계산된 값이 아니어서 수량이 음수가 되는 경우
    """
    zero_for_one = x0 > split.amount0
    if zero_for_one:
        amount = x0 - split.amount0
    else:
        amount = y0 - split.amount1

    if amount < 0:
        raise ValueError(
            f"스왑 수량이 음수입니다: x0={x0}, y0={y0}, split={split.as_tuple()}"
        )

    return SwapInstruction(zero_for_one=zero_for_one, amount=amount)
