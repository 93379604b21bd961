"""
CLI 테스트

설정 검증 → 로깅 초기화 → 예치 계획 → stdout JSON 흐름을 테스트합니다.
"""

import json
import logging

import pytest

from .. import __main__ as cli
from ..constants import Q96
from ..math.tick_math import get_sqrt_ratio_at_tick


BASE_ARGS = [
    "--amount0", str(10 ** 18),
    "--amount1", "0",
    "--tick", "0",
    "--sqrt-price", str(Q96),
]


@pytest.fixture
def logging_calls(monkeypatch):
    """setup_logging 호출 기록 (root handler 는 건드리지 않음)"""
    calls = []
    monkeypatch.setattr(cli, "setup_logging", lambda level, log_file: calls.append((level, log_file)))
    monkeypatch.setattr(cli.settings, "SLIPPAGE_PPM", 50000)
    monkeypatch.setattr(cli.settings, "RANGE_LOWER_RATIO", 0.7)
    monkeypatch.setattr(cli.settings, "RANGE_UPPER_RATIO", 1.3)
    monkeypatch.setattr(cli.settings, "LOG_LEVEL", "DEBUG")
    monkeypatch.setattr(cli.settings, "LOG_FILE", "logs/zap.log")
    return calls


class TestMain:
    """main 테스트"""

    def test_prints_deposit_call(self, logging_calls, capsys, caplog):
        caplog.set_level(logging.INFO)

        assert cli.main(BASE_ARGS + ["--tick-spacing", "60"]) == 0

        assert logging_calls == [("DEBUG", "logs/zap.log")]
        call = json.loads(capsys.readouterr().out)
        assert call == {
            "amount0": 10 ** 18,
            "amount1": 0,
            "zero_for_one": True,
            "swap_amount": 571207594223255505,
            "sqrt_price_limit": 3961408125713216879677197516,
            "tick_lower": -3600,
            "tick_upper": 2640,
        }
        assert "Range: ticks [-3600, 2640]" in caplog.text
        assert "token0 -> token1 571207594223255505" in caplog.text
        assert "leftover=(1, 2)" in caplog.text

    def test_fee_tier_sets_spacing(self, logging_calls, capsys):
        """--fee 3000 → 틱 간격 60"""
        assert cli.main(BASE_ARGS + ["--fee", "3000", "--slippage-ppm", "10000"]) == 0

        call = json.loads(capsys.readouterr().out)
        assert (call["tick_lower"], call["tick_upper"]) == (-3600, 2640)

    def test_unknown_fee_tier(self, logging_calls):
        with pytest.raises(SystemExit):
            cli.main(BASE_ARGS + ["--fee", "2500"])

    def test_spacing_required(self, logging_calls):
        with pytest.raises(SystemExit):
            cli.main(BASE_ARGS)

    def test_invalid_settings(self, logging_calls, monkeypatch):
        """설정 검증 실패시 로깅 초기화 전에 종료"""
        monkeypatch.setattr(cli.settings, "SLIPPAGE_PPM", 2_000_000)

        with pytest.raises(SystemExit) as exc_info:
            cli.main(BASE_ARGS + ["--tick-spacing", "60"])
        assert exc_info.value.code == 2
        assert logging_calls == []

    def test_price_outside_range(self, logging_calls, capsys, caplog):
        args = BASE_ARGS[:-1] + [str(get_sqrt_ratio_at_tick(5000)), "--tick-spacing", "60"]

        assert cli.main(args) == 1
        assert capsys.readouterr().out == ""
        assert "Deposit planning failed" in caplog.text

    def test_invalid_request(self, logging_calls, capsys):
        """pydantic 검증 실패 (sqrtPrice 0)"""
        args = BASE_ARGS[:-1] + ["0", "--tick-spacing", "60"]

        assert cli.main(args) == 1
        assert capsys.readouterr().out == ""


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
