"""
Uniswap V3 Zap 상수 정의

예치 계산에 사용하는 고정소수점/경계 상수:
- Q96: sqrtPriceX96 인코딩 (2^96)
- Q192: sqrtPriceX96^2 의 스케일 (2^192)
- MANTISSA: 18자리 고정소수점 가격 스케일
- PPM_DENOMINATOR: 슬리피지 분모 (parts per million)
"""

from typing import Dict

# Fixed-point 인코딩 상수
Q96: int = 2 ** 96
Q192: int = 2 ** 192

# 18자리 가격 스케일 (real price = result / 10^18)
MANTISSA_DECIMALS: int = 18
MANTISSA: int = 10 ** MANTISSA_DECIMALS

# 슬리피지 (1_000_000 = 100%)
PPM_DENOMINATOR: int = 1_000_000

# 각 수수료 티어 (hundredths of a bip) 별 틱 간격
TICK_SPACINGS: Dict[int, int] = {
    100: 1,
    500: 10,
    3000: 60,
    10000: 200,
}

# 틱 범위 상수
MIN_TICK: int = -887272
MAX_TICK: int = 887272

# price(i) = 1.0001^i
TICK_BASE: float = 1.0001

# 온체인 정수 타입 상한
UINT8_MAX: int = 2 ** 8 - 1
UINT160_MAX: int = 2 ** 160 - 1
UINT256_MAX: int = 2 ** 256 - 1
