"""
입력/출력 범위 검사

예치 경로의 모든 정수는 온체인 타입 범위 안에 있어야 합니다.
"""

from ..constants import UINT160_MAX, UINT256_MAX
from ..errors import ArithmeticOverflowError


def require_amount(value: int, name: str) -> int:
    """토큰 수량 (uint256, 0 이상)"""
    if value < 0:
        raise ValueError(f"{name}은(는) 0 이상이어야 합니다: {value}")
    return require_uint256(value, name)


def require_sqrt_price(value: int, name: str) -> int:
    """sqrtPriceX96 (uint160, 0보다 큼)"""
    if value <= 0:
        raise ValueError(f"{name}은(는) 양수여야 합니다: {value}")
    if value > UINT160_MAX:
        raise ArithmeticOverflowError(f"{name}이(가) uint160 범위를 벗어났습니다: {value}")
    return value


def require_uint256(value: int, name: str) -> int:
    if value > UINT256_MAX:
        raise ArithmeticOverflowError(f"{name}이(가) uint256 범위를 벗어났습니다: {value}")
    return value
