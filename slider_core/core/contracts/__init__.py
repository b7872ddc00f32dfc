"""
Contract Validation Module

Модуль для валидации JSON контрактов slider-core.
"""

from .validators import (
    SCHEMA_NAMES,
    ContractValidator,
    SliderConfigValidator,
    SliderDotsValidator,
    load_schema,
    validate_slider_config,
    validate_slider_dots,
)

__all__ = [
    # Classes
    "ContractValidator",
    "SliderConfigValidator",
    "SliderDotsValidator",
    # Functions
    "load_schema",
    "validate_slider_config",
    "validate_slider_dots",
    # Constants
    "SCHEMA_NAMES",
]
