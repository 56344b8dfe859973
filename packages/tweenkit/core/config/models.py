"""Configuration models for tweenkit."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from tweenkit.core.easing.models import EaseType


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(
        default="INFO",
        pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
        description="Root log level",
    )
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Format string for text logs (ignored when structured)",
    )
    structured: bool = Field(default=False, description="Emit JSON lines instead of text")
    filename: str | None = Field(default=None, description="Log file path (stdout if None)")


class EasingDefaults(BaseModel):
    """Defaults applied when an ease call does not specify them."""

    ease_type: EaseType = Field(default=EaseType.LERP, description="Default curve")
    clamp: bool = Field(default=True, description="Clamp progress to [0, 1]")
    amplitude: float = Field(default=1.0, description="Bounce family amplitude")
    amplitude_duration: float = Field(
        default=1.0, gt=0.0, description="Duration progress is measured against"
    )


class SamplingConfig(BaseModel):
    """Curve sampling configuration."""

    n_samples: int = Field(default=11, ge=2, le=10_000, description="Samples per curve")


class TimingConfig(BaseModel):
    """Time span logger configuration."""

    logger_name: str = Field(
        default="tweenkit.timing", description="Logger that receives span durations"
    )


class AppConfig(BaseModel):
    """Application configuration.

    Every section has defaults, so an empty file (or no file) is valid.
    """

    model_config = ConfigDict(extra="forbid")

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    easing: EasingDefaults = Field(default_factory=EasingDefaults)
    sampling: SamplingConfig = Field(default_factory=SamplingConfig)
    timing: TimingConfig = Field(default_factory=TimingConfig)
