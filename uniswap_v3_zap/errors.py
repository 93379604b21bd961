"""
예치 계산 오류 정의

모두 호출자 입력이 잘못된 경우이며 내부에서 재시도하거나 보정하지 않습니다.
"""


class ZapMathError(ValueError):
    """예치 계산 전제조건 위반"""
    pass


class InvalidRangeError(ZapMathError):
    """tick_lower >= tick_upper 이거나 현재 가격이 범위 밖에 있음"""
    pass


class ArithmeticOverflowError(ZapMathError, OverflowError):
    """값이 온체인 정수 타입(uint160/uint256)에 들어가지 않음"""
    pass


class DivisionByZeroError(ZapMathError, ZeroDivisionError):
    """퇴화된 범위 (p_b == P, P == p_a 등)"""
    pass
