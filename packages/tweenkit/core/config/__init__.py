"""Application configuration."""

from tweenkit.core.config.loader import (
    configure_logging_from_config,
    detect_format,
    load_app_config,
    load_config,
)
from tweenkit.core.config.models import (
    AppConfig,
    EasingDefaults,
    LoggingConfig,
    SamplingConfig,
    TimingConfig,
)

__all__ = [
    "AppConfig",
    "EasingDefaults",
    "LoggingConfig",
    "SamplingConfig",
    "TimingConfig",
    "configure_logging_from_config",
    "detect_format",
    "load_app_config",
    "load_config",
]
