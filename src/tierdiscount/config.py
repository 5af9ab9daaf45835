"""
Settings and logging setup
"""

import os
import logging
from dataclasses import dataclass
from decimal import ROUND_HALF_DOWN, ROUND_HALF_EVEN, ROUND_HALF_UP
from functools import lru_cache
from typing import Mapping, Optional

from rich.logging import RichHandler

from .exceptions import ConfigurationError

ROUNDING_MODES = {
    "half_up": ROUND_HALF_UP,
    "half_even": ROUND_HALF_EVEN,
    "half_down": ROUND_HALF_DOWN,
}


@dataclass(frozen=True)
class Settings:
    """
    Formatting settings

    Attributes:
        currency_symbol: prefix used when rendering money
        rounding: decimal rounding mode applied when rendering to cents
        segment_separator: text between the total and the "with discount" part
            of a total summary. Empty by default, which keeps the historical
            "...95.00with discount..." output
    """
    currency_symbol: str = "$"
    rounding: str = ROUND_HALF_UP
    segment_separator: str = ""

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """
        Build settings from TIERDISCOUNT_* environment variables
        """
        env = os.environ if environ is None else environ

        rounding_name = env.get("TIERDISCOUNT_ROUNDING", "half_up").strip().lower()
        if rounding_name not in ROUNDING_MODES:
            raise ConfigurationError(
                f"Unknown rounding mode '{rounding_name}'. "
                f"Set TIERDISCOUNT_ROUNDING to one of: {', '.join(ROUNDING_MODES)}"
            )

        return cls(
            currency_symbol=env.get("TIERDISCOUNT_CURRENCY_SYMBOL", "$"),
            rounding=ROUNDING_MODES[rounding_name],
            segment_separator=env.get("TIERDISCOUNT_SEGMENT_SEPARATOR", ""),
        )


@lru_cache(maxsize=None)
def get_settings() -> Settings:
    """Process-wide settings, read once from the environment"""
    return Settings.from_env()


def configure_logging(verbose: bool = False) -> logging.Logger:
    """
    Route package logs through Rich
    """
    logging.basicConfig(
        level=logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True)]
    )
    logger = logging.getLogger("tierdiscount")
    if verbose:
        logger.setLevel(logging.DEBUG)
        logger.debug("Verbose mode enabled")
    return logger
