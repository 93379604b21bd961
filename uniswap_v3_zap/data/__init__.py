"""
Data layer for Uniswap V3 Zap

예치 계산 입출력 데이터 타입 정의
"""

from .types import PositionRange, Split, SwapInstruction, MintResult, ExitPlan
