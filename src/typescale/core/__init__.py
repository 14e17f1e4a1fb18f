"""Core components for the typography configuration engine."""

from .config import (
    AppConfig,
    ScaleDefaultsConfig,
    SearchConfig,
    ValidationRulesConfig,
    configure_logging,
)
from .exceptions import (
    ConfigurationError,
    HostError,
    StateError,
    TypeScaleError,
    ValidationError,
)
from .models import (
    ApplyResult,
    CreatedStyle,
    Font,
    FontSource,
    ResolvedType,
    ScaleRatioOption,
    ScalingMode,
    SizeEntry,
    SubmissionResult,
    TextCase,
    TypographyConfig,
    Variable,
)

__all__ = [
    "AppConfig",
    "ApplyResult",
    "ConfigurationError",
    "CreatedStyle",
    "Font",
    "FontSource",
    "HostError",
    "ResolvedType",
    "ScaleDefaultsConfig",
    "ScaleRatioOption",
    "ScalingMode",
    "SearchConfig",
    "SizeEntry",
    "StateError",
    "SubmissionResult",
    "TextCase",
    "TypeScaleError",
    "TypographyConfig",
    "ValidationError",
    "ValidationRulesConfig",
    "Variable",
    "configure_logging",
]
