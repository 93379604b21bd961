"""
Deposit Planner CLI - 잔고와 slot0 로 예치 호출 인자 계산

Usage:
    # 틱 간격 직접 지정
    python -m uniswap_v3_zap --amount0 1000000000000000000 --amount1 0 \\
        --tick 0 --sqrt-price 79228162514264337593543950336 --tick-spacing 60

    # 수수료 티어로 틱 간격 결정, 비율/슬리피지 지정
    uniswap-v3-zap --amount0 5000000000 --amount1 2000000000000000000 \\
        --tick 201000 --sqrt-price 1833668854642163783923789245363783 \\
        --fee 3000 --decimals0 6 --lower-ratio 0.7 --upper-ratio 1.3 --slippage-ppm 10000

계획은 로그로 출력하고, executor deposit 인자는 stdout 에 JSON 으로 출력합니다.
"""

import argparse
import logging
import sys
from typing import List, Optional

from .config import settings
from .constants import TICK_SPACINGS
from .logging_config import setup_logging
from .math.sqrt_price_math import real_price_to_float
from .math.tick_math import get_tick_spacing_for_fee
from .planner import DepositPlan, plan_deposit, portfolio_value, undeposited_percent
from .schemas import DepositRequest

logger = logging.getLogger(__name__)


def log_plan(plan: DepositPlan) -> None:
    """예치 계획 요약 로그"""
    lower, current, upper = (real_price_to_float(price) for price in plan.real_prices)
    logger.info(
        "Range: ticks [%d, %d], prices %.6g / %.6g / %.6g",
        plan.position_range.tick_lower, plan.position_range.tick_upper, lower, current, upper,
    )
    logger.info(
        "Balances: (%d, %d) -> optimal (%d, %d)",
        plan.amount0, plan.amount1, plan.split.amount0, plan.split.amount1,
    )
    if plan.swap.is_noop:
        logger.info("Swap: none")
    else:
        logger.info(
            "Swap: %s %d, sqrt_price_limit=%d",
            "token0 -> token1" if plan.swap.zero_for_one else "token1 -> token0",
            plan.swap.amount, plan.sqrt_price_limit,
        )

    mint = plan.expected_mint
    leftover_value = portfolio_value(mint.leftover0, mint.leftover1, plan.sqrt_price)
    logger.info(
        "Mint: liquidity=%d, leftover=(%d, %d), undeposited=%.6f%%",
        mint.liquidity, mint.leftover0, mint.leftover1,
        undeposited_percent(plan.initial_value, leftover_value) if plan.initial_value else 0.0,
    )


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="uniswap-v3-zap",
        description="잔고를 한 번의 스왑으로 리밸런싱하여 범위에 예치하기 위한 인자 계산",
    )

    # 잔고 (최소 단위)
    parser.add_argument("--amount0", type=int, required=True, help="token0 잔고")
    parser.add_argument("--amount1", type=int, required=True, help="token1 잔고")

    # 풀 상태 (slot0)
    parser.add_argument("--tick", type=int, required=True, help="현재 틱")
    parser.add_argument("--sqrt-price", type=int, required=True, help="현재 sqrtPriceX96")
    spacing = parser.add_mutually_exclusive_group(required=True)
    spacing.add_argument("--tick-spacing", type=int, help="틱 간격")
    spacing.add_argument("--fee", type=int, choices=sorted(TICK_SPACINGS), help="수수료 티어")
    parser.add_argument("--decimals0", type=int, default=18, help="token0 decimals (기본: 18)")
    parser.add_argument("--decimals1", type=int, default=18, help="token1 decimals (기본: 18)")

    # 범위/슬리피지 (미지정시 ZAP_* 설정)
    parser.add_argument("--lower-ratio", type=float, help="하한 가격 비율")
    parser.add_argument("--upper-ratio", type=float, help="상한 가격 비율")
    parser.add_argument("--slippage-ppm", type=int, help="스왑 슬리피지 (ppm)")

    args = parser.parse_args(argv)

    try:
        settings.validate()
    except ValueError as e:
        parser.error(str(e))

    setup_logging(settings.LOG_LEVEL, settings.LOG_FILE)

    tick_spacing = args.tick_spacing
    if tick_spacing is None:
        tick_spacing = get_tick_spacing_for_fee(args.fee)

    try:
        request = DepositRequest(
            amount0=args.amount0,
            amount1=args.amount1,
            tick=args.tick,
            sqrt_price_x96=args.sqrt_price,
            tick_spacing=tick_spacing,
            decimals0=args.decimals0,
            decimals1=args.decimals1,
            lower_ratio=args.lower_ratio,
            upper_ratio=args.upper_ratio,
            slippage_ppm=args.slippage_ppm,
        )
        plan = plan_deposit(request)
    except ValueError as e:
        # pydantic ValidationError 와 ZapMathError 모두 ValueError
        logger.error("Deposit planning failed: %s", e)
        return 1

    log_plan(plan)
    print(plan.to_call().model_dump_json())
    return 0


if __name__ == "__main__":
    sys.exit(main())
