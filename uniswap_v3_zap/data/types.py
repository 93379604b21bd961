"""
예치 계산 데이터 타입 정의

모든 수량/가격 필드는 온체인 정밀도를 위해 int 타입 사용.
모든 타입은 불변(frozen)이며 호출마다 새로 생성됩니다.
"""

from dataclasses import dataclass
from typing import Tuple

from ..constants import MIN_TICK, MAX_TICK
from ..errors import InvalidRangeError
from ..schemas import ExitCall


@dataclass(frozen=True)
class PositionRange:
    """포지션 틱 범위 (tick_lower < tick_upper, 둘 다 spacing 정렬)"""
    tick_lower: int
    tick_upper: int

    @classmethod
    def create(cls, tick_lower: int, tick_upper: int, spacing: int = 1) -> "PositionRange":
        if tick_lower >= tick_upper:
            raise InvalidRangeError(
                f"tick_lower는 tick_upper보다 작아야 합니다: {tick_lower} >= {tick_upper}"
            )
        if tick_lower < MIN_TICK or tick_upper > MAX_TICK:
            raise InvalidRangeError(
                f"틱이 유효 범위 [{MIN_TICK}, {MAX_TICK}]를 벗어났습니다: ({tick_lower}, {tick_upper})"
            )
        if tick_lower % spacing or tick_upper % spacing:
            raise InvalidRangeError(
                f"틱이 간격 {spacing}에 정렬되지 않았습니다: ({tick_lower}, {tick_upper})"
            )
        return cls(tick_lower=tick_lower, tick_upper=tick_upper)


@dataclass(frozen=True)
class Split:
    """범위 경계의 유동성 곡선 위에 정확히 놓이는 예치 수량 (x*, y*)"""
    amount0: int
    amount1: int

    def as_tuple(self) -> Tuple[int, int]:
        return self.amount0, self.amount1


@dataclass(frozen=True)
class SwapInstruction:
    """(x0, y0) → (x*, y*) 로 가기 위한 단일 스왑

    zero_for_one=True 이면 token0 → token1.
    amount == 0 이면 이미 균형 상태 (no-op).
    """
    zero_for_one: bool
    amount: int

    @property
    def is_noop(self) -> bool:
        return self.amount == 0


@dataclass(frozen=True)
class MintResult:
    """예치 시뮬레이션 결과

    - liquidity: 민트되는 유동성 L
    - used0, used1: 실제로 들어가는 토큰 수량
    - leftover0, leftover1: 들어가지 못한 잔여 수량
    """
    liquidity: int
    used0: int
    used1: int
    leftover0: int
    leftover1: int


@dataclass(frozen=True)
class ExitPlan:
    """포지션 청산 시 스왑 방향과 가격 한도"""
    zero_for_one: bool
    sqrt_price_limit: int

    def to_call(self) -> ExitCall:
        """executor exit 호출 인자"""
        return ExitCall(zero_for_one=self.zero_for_one, sqrt_price_limit=self.sqrt_price_limit)
