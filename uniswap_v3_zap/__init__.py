"""
Uniswap V3 Zap - Concentrated Liquidity Deposit Calculator

임의의 잔고를 한 번의 스왑으로 리밸런싱하여 가격 범위에
잔여 없이 예치하기 위한 온체인 수준 정밀도의 정수 계산 라이브러리.
"""

__version__ = "0.1.0"

from .constants import Q96, Q192, MANTISSA, PPM_DENOMINATOR, TICK_SPACINGS
from .errors import (
    ZapMathError,
    InvalidRangeError,
    ArithmeticOverflowError,
    DivisionByZeroError,
)
from .data.types import PositionRange, Split, SwapInstruction, MintResult, ExitPlan
from .math import (
    get_spaced_tick,
    get_real_price,
    get_optimal_quantities,
    get_swap_amount,
    get_swap_threshold_price,
)
from .planner import DepositPlan, select_range, plan_deposit, plan_exit, portfolio_value
