"""
Planner Request/Response Schemas using Pydantic

Defines the deposit request and the payloads handed to the on-chain executor.
"""
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

from .constants import PPM_DENOMINATOR, UINT8_MAX


class DepositRequest(BaseModel):
    """Balances, pool state and range preferences for one deposit"""
    amount0: int = Field(..., description="Raw token0 balance", ge=0)
    amount1: int = Field(..., description="Raw token1 balance", ge=0)
    tick: int = Field(..., description="Current pool tick (slot0.tick)")
    sqrt_price_x96: int = Field(..., description="Current pool sqrtPriceX96 (slot0.sqrtPriceX96)", gt=0)
    tick_spacing: int = Field(..., description="Pool tick spacing", gt=0)
    decimals0: int = Field(default=18, description="token0 decimals", ge=0, le=UINT8_MAX)
    decimals1: int = Field(default=18, description="token1 decimals", ge=0, le=UINT8_MAX)
    lower_ratio: Optional[float] = Field(default=None, description="Lower bound as ratio of current price", gt=0)
    upper_ratio: Optional[float] = Field(default=None, description="Upper bound as ratio of current price", gt=0)
    slippage_ppm: Optional[int] = Field(default=None, description="Swap slippage in ppm", ge=0, le=PPM_DENOMINATOR)

    class Config:
        json_schema_extra = {
            "example": {
                "amount0": 5000000000,
                "amount1": 2000000000000000000,
                "tick": 201000,
                "sqrt_price_x96": 1833668854642163783923789245363783,
                "tick_spacing": 60,
                "decimals0": 6,
                "decimals1": 18,
                "lower_ratio": 0.7,
                "upper_ratio": 1.3,
                "slippage_ppm": 50000
            }
        }

    @classmethod
    def from_slot0(
        cls,
        slot0: Dict[str, Any],
        amount0: int,
        amount1: int,
        tick_spacing: int,
        **kwargs: Any
    ) -> "DepositRequest":
        """Build a request from a pool slot0() result ({"tick", "sqrtPriceX96"})"""
        return cls(
            amount0=int(amount0),
            amount1=int(amount1),
            tick=int(slot0["tick"]),
            sqrt_price_x96=int(slot0["sqrtPriceX96"]),
            tick_spacing=tick_spacing,
            **kwargs
        )


class DepositCall(BaseModel):
    """Arguments of the executor's swap-then-mint deposit call"""
    amount0: int = Field(..., description="Starting token0 balance (x0)", ge=0)
    amount1: int = Field(..., description="Starting token1 balance (y0)", ge=0)
    zero_for_one: bool = Field(..., description="Swap token0 for token1")
    swap_amount: int = Field(..., description="Swap input amount (0 = already balanced)", ge=0)
    sqrt_price_limit: int = Field(..., description="sqrtPriceLimitX96 for the swap", ge=0)
    tick_lower: int = Field(..., description="Spacing-aligned lower tick")
    tick_upper: int = Field(..., description="Spacing-aligned upper tick")


class ExitCall(BaseModel):
    """Arguments of the executor's exit call"""
    zero_for_one: bool = Field(..., description="Swap token0 for token1 after burning")
    sqrt_price_limit: int = Field(..., description="sqrtPriceLimitX96 for the swap", ge=0)
