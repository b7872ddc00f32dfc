"""
Domain models and value objects.

Contains slider configuration, handle read models and error types.
"""

from slider_core.core.domain.config import (
    DEFAULT_INTERVAL,
    DEFAULT_MAX,
    DEFAULT_MIN,
    POS_MAX,
    POS_MIN,
    SliderConfig,
)
from slider_core.core.domain.dots import Dot, TValue, ValidPos, dots_to_contract
from slider_core.core.domain.errors import ERROR_MESSAGES, ErrorReporter, ErrorType

__all__ = [
    # Config
    "DEFAULT_INTERVAL",
    "DEFAULT_MAX",
    "DEFAULT_MIN",
    "POS_MAX",
    "POS_MIN",
    "SliderConfig",
    # Dots
    "Dot",
    "TValue",
    "ValidPos",
    "dots_to_contract",
    # Errors
    "ERROR_MESSAGES",
    "ErrorReporter",
    "ErrorType",
]
