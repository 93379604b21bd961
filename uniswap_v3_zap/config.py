"""
Configuration settings for the deposit planner

Loads environment variables (and .env) and provides planner defaults.
"""
import os
from typing import Optional

from dotenv import load_dotenv

from .constants import PPM_DENOMINATOR

# Load environment variables from .env file
load_dotenv()


class Settings:
    """Planner settings"""

    def __init__(self):
        # Swap slippage (ppm, 50000 = 5%)
        self.SLIPPAGE_PPM: int = int(os.getenv("ZAP_SLIPPAGE_PPM", 50000))

        # Position range as price ratios around the current price
        self.RANGE_LOWER_RATIO: float = float(os.getenv("ZAP_RANGE_LOWER_RATIO", "0.7"))
        self.RANGE_UPPER_RATIO: float = float(os.getenv("ZAP_RANGE_UPPER_RATIO", "1.3"))

        # Logging
        self.LOG_LEVEL: str = os.getenv("ZAP_LOG_LEVEL", "INFO")
        self.LOG_FILE: Optional[str] = os.getenv("ZAP_LOG_FILE") or None

    def validate(self) -> None:
        """Raise ValueError if a setting is out of range"""
        if not 0 <= self.SLIPPAGE_PPM <= PPM_DENOMINATOR:
            raise ValueError(
                f"ZAP_SLIPPAGE_PPM은(는) 0 ~ {PPM_DENOMINATOR} 범위여야 합니다: {self.SLIPPAGE_PPM}"
            )
        if self.RANGE_LOWER_RATIO <= 0 or self.RANGE_UPPER_RATIO <= 0:
            raise ValueError("범위 비율은 양수여야 합니다")
        if self.RANGE_LOWER_RATIO >= self.RANGE_UPPER_RATIO:
            raise ValueError(
                f"ZAP_RANGE_LOWER_RATIO({self.RANGE_LOWER_RATIO})는 "
                f"ZAP_RANGE_UPPER_RATIO({self.RANGE_UPPER_RATIO})보다 작아야 합니다"
            )


# Create global settings instance
settings = Settings()
