"""
Math layer for Uniswap V3 Zap

온체인 수준 정밀도의 예치 계산 함수들:
- tick_math: 틱 간격 정렬, Tick → sqrtPriceX96
- sqrt_price_math: sqrtPriceX96 → decimals 보정 가격
- split_math: 최적 예치 수량, 리밸런싱 스왑
- slippage_math: 스왑 가격 한도
- liquidity_math: 예치 시뮬레이션
"""

from .tick_math import (
    get_spaced_tick,
    get_sqrt_ratio_at_tick,
    get_tick_spacing_for_fee,
    tick_offset_for_ratio,
)
from .sqrt_price_math import (
    get_real_price,
    real_price_to_float,
)
from .split_math import (
    get_optimal_quantities,
    get_swap_amount,
)
from .slippage_math import get_swap_threshold_price
from .liquidity_math import (
    get_liquidity_for_amounts,
    get_amounts_for_liquidity,
    simulate_mint,
)
