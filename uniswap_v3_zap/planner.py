"""
Deposit Planner - 잔고에서 예치 호출 인자까지

현재 풀 상태와 잔고로부터 스왑-후-민트 예치에 필요한 값을 계산합니다:

    1. 현재 틱 주변 비율로 범위 선택 (TickSpacer)
    2. 경계 sqrtPriceX96 조회 (외부 primitive)
    3. 최적 예치 수량과 스왑 (OptimalSplitSolver)
    4. 스왑 가격 한도 (SlippageGuard)
    5. 리포팅용 가격/가치 (PriceConverter)

모든 함수는 순수 함수이며 네트워크/트랜잭션은 다루지 않습니다.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from .config import settings
from .constants import Q192
from .data.types import ExitPlan, MintResult, PositionRange, Split, SwapInstruction
from .math.bounds import require_sqrt_price
from .math.liquidity_math import simulate_mint
from .math.slippage_math import get_swap_threshold_price
from .math.split_math import get_optimal_quantities, get_swap_amount
from .math.sqrt_price_math import get_real_price
from .math.tick_math import get_spaced_tick, get_sqrt_ratio_at_tick, tick_offset_for_ratio
from .schemas import DepositCall, DepositRequest

logger = logging.getLogger(__name__)

SqrtRatioAtTick = Callable[[int], int]


@dataclass(frozen=True)
class DepositPlan:
    """예치 계획

    - position_range: 선택된 틱 범위
    - sqrt_price_lower / sqrt_price / sqrt_price_upper: p_a, P, p_b
    - amount0, amount1: 시작 잔고 (x0, y0)
    - split: 최적 예치 수량 (x*, y*)
    - swap: 리밸런싱 스왑
    - sqrt_price_limit: 스왑 가격 한도
    - expected_mint: split 을 P 에서 예치했을 때의 시뮬레이션
    - real_prices: (하한, 현재, 상한) token0 기준 18자리 가격
    - initial_value: 시작 잔고의 token0 환산 가치 (최소 단위)
    """
    position_range: PositionRange
    sqrt_price_lower: int
    sqrt_price: int
    sqrt_price_upper: int
    amount0: int
    amount1: int
    split: Split
    swap: SwapInstruction
    sqrt_price_limit: int
    expected_mint: MintResult
    real_prices: Tuple[int, int, int]
    initial_value: int

    def to_call(self) -> DepositCall:
        """executor deposit 호출 인자"""
        return DepositCall(
            amount0=self.amount0,
            amount1=self.amount1,
            zero_for_one=self.swap.zero_for_one,
            swap_amount=self.swap.amount,
            sqrt_price_limit=self.sqrt_price_limit,
            tick_lower=self.position_range.tick_lower,
            tick_upper=self.position_range.tick_upper,
        )


def select_range(
    current_tick: int,
    tick_spacing: int,
    lower_ratio: Optional[float] = None,
    upper_ratio: Optional[float] = None
) -> PositionRange:
    """현재 틱에서 가격 비율만큼 떨어진 spacing 정렬 범위

    하한은 내림, 상한은 올림으로 정렬하여 요청한 가격 구간을 포함합니다.

    Example:
        >>> select_range(0, 60, 0.7, 1.3)
        PositionRange(tick_lower=-3600, tick_upper=2640)
    """
    lower_ratio = settings.RANGE_LOWER_RATIO if lower_ratio is None else lower_ratio
    upper_ratio = settings.RANGE_UPPER_RATIO if upper_ratio is None else upper_ratio

    lower_offset = tick_offset_for_ratio(lower_ratio)
    upper_offset = tick_offset_for_ratio(upper_ratio)
    logger.debug("Tick offsets: lower=%d, upper=%d", lower_offset, upper_offset)

    tick_lower = get_spaced_tick(current_tick + lower_offset, tick_spacing, False)
    tick_upper = get_spaced_tick(current_tick + upper_offset, tick_spacing, True)
    logger.debug("Ticks: lower=%d, current=%d, upper=%d", tick_lower, current_tick, tick_upper)

    return PositionRange.create(tick_lower, tick_upper, tick_spacing)


def plan_deposit(
    request: DepositRequest,
    sqrt_ratio_at_tick: SqrtRatioAtTick = get_sqrt_ratio_at_tick
) -> DepositPlan:
    """잔고 전부를 범위에 예치하기 위한 계획

    Args:
        request: 잔고, 풀 상태, 범위/슬리피지 설정
        sqrt_ratio_at_tick: Tick → sqrtPriceX96 primitive (기본값: 참조 구현)

    Returns:
        DepositPlan

    Raises:
        InvalidRangeError: 범위가 비었거나 현재 가격이 범위 밖인 경우
        DivisionByZeroError: 현재 가격이 범위 경계와 같은 경우
    """
    slippage_ppm = settings.SLIPPAGE_PPM if request.slippage_ppm is None else request.slippage_ppm

    position_range = select_range(
        request.tick, request.tick_spacing, request.lower_ratio, request.upper_ratio
    )

    p_a = sqrt_ratio_at_tick(position_range.tick_lower)
    p = request.sqrt_price_x96
    p_b = sqrt_ratio_at_tick(position_range.tick_upper)
    logger.debug("Sqrt prices: lower=%d, current=%d, upper=%d", p_a, p, p_b)

    split = get_optimal_quantities(request.amount0, request.amount1, p_a, p, p_b)
    logger.debug(
        "Token supplies: initial=(%d, %d), optimal=(%d, %d)",
        request.amount0, request.amount1, split.amount0, split.amount1,
    )

    swap = get_swap_amount(request.amount0, request.amount1, split)
    sqrt_price_limit = get_swap_threshold_price(p, swap.zero_for_one, slippage_ppm)
    if swap.is_noop:
        logger.info("Balances already match the range, no swap needed")
    else:
        logger.debug(
            "Swap: zero_for_one=%s, amount=%d, sqrt_price_limit=%d",
            swap.zero_for_one, swap.amount, sqrt_price_limit,
        )

    expected_mint = simulate_mint(p, p_a, p_b, split.amount0, split.amount1)

    real_prices = tuple(
        get_real_price(sqrt_price, request.decimals0, request.decimals1, True)
        for sqrt_price in (p_a, p, p_b)
    )
    logger.debug("Scaled prices: lower=%d, current=%d, upper=%d", *real_prices)

    return DepositPlan(
        position_range=position_range,
        sqrt_price_lower=p_a,
        sqrt_price=p,
        sqrt_price_upper=p_b,
        amount0=request.amount0,
        amount1=request.amount1,
        split=split,
        swap=swap,
        sqrt_price_limit=sqrt_price_limit,
        expected_mint=expected_mint,
        real_prices=real_prices,
        initial_value=portfolio_value(request.amount0, request.amount1, p),
    )


def plan_exit(
    sqrt_price_x96: int,
    zero_for_one: bool = False,
    slippage_ppm: Optional[int] = None
) -> ExitPlan:
    """포지션 청산 후 스왑의 가격 한도"""
    slippage_ppm = settings.SLIPPAGE_PPM if slippage_ppm is None else slippage_ppm
    limit = get_swap_threshold_price(sqrt_price_x96, zero_for_one, slippage_ppm)
    logger.debug("Exit: zero_for_one=%s, sqrt_price_limit=%d", zero_for_one, limit)
    return ExitPlan(zero_for_one=zero_for_one, sqrt_price_limit=limit)


def portfolio_value(amount0: int, amount1: int, sqrt_price_x96: int) -> int:
    """(amount0, amount1) 의 token0 환산 가치 (최소 단위, 내림)

    amount1 * 2^192 / sqrtPriceX96^2 = amount1 / price
    """
    require_sqrt_price(sqrt_price_x96, "sqrt_price_x96")
    return amount0 + amount1 * Q192 // (sqrt_price_x96 * sqrt_price_x96)


def undeposited_percent(initial_value: int, final_value: int) -> float:
    """예치되지 못하고 남은 가치 비율 (%)

    Args:
        initial_value: 예치 전 portfolio_value
        final_value: 예치 후 남은 잔고의 portfolio_value
    """
    if initial_value <= 0:
        raise ValueError(f"초기 가치는 양수여야 합니다: {initial_value}")
    return 100 * final_value / initial_value
