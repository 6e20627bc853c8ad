"""
Environment-driven settings.

Environment Variables:
    CALCBRAIN_LOG_LEVEL: DEBUG, INFO, WARNING, ERROR - default: WARNING
    CALCBRAIN_LOG_FORMAT: json, text - default: text
    CALCBRAIN_DESCRIPTION_DIGITS: max fractional digits in description tokens - default: 6
"""

import os
from dataclasses import dataclass

from .core.description import DEFAULT_FRACTION_DIGITS

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMATS = ("json", "text")


@dataclass(frozen=True)
class Settings:
    log_level: str = "WARNING"
    log_format: str = "text"
    description_digits: int = DEFAULT_FRACTION_DIGITS

    @staticmethod
    def from_env() -> "Settings":
        log_level = os.getenv("CALCBRAIN_LOG_LEVEL", "WARNING").upper()
        if log_level not in LOG_LEVELS:
            log_level = "WARNING"

        log_format = os.getenv("CALCBRAIN_LOG_FORMAT", "text").lower()
        if log_format not in LOG_FORMATS:
            log_format = "text"

        try:
            digits = int(os.getenv("CALCBRAIN_DESCRIPTION_DIGITS", str(DEFAULT_FRACTION_DIGITS)))
        except ValueError:
            digits = DEFAULT_FRACTION_DIGITS
        if digits < 0:
            digits = DEFAULT_FRACTION_DIGITS

        return Settings(log_level=log_level, log_format=log_format, description_digits=digits)
