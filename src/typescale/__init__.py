"""Typography Configuration Engine
===============================

State, validation and scale generation for typography systems that a
design-tool plugin pushes into a host document:
- reducer-driven editor state for each typography style
- font and variable resolution against host data
- auto, manual and Tailwind size scales
- single-flight caches for host font and variable lists
- hand-off of validated configurations through the host bridge
"""

__version__ = "1.0.0"
__author__ = "Typescale Team"

from .apply import TypographySubmitter, build_style_plan, to_host_payload
from .core.config import AppConfig, ScaleDefaultsConfig, ValidationRulesConfig
from .core.exceptions import ConfigurationError, StateError, TypeScaleError, ValidationError
from .core.models import (
    Font,
    ScalingMode,
    SizeEntry,
    SubmissionResult,
    TextCase,
    TypographyConfig,
    Variable,
)
from .fonts import FontsCache, HostBridge, StaticHostBridge, VariablesCache
from .state import TypographyEditor, TypographyState, reduce
from .validation import validate_typography_config

__all__ = [
    "AppConfig",
    "ConfigurationError",
    "Font",
    "FontsCache",
    "HostBridge",
    "ScaleDefaultsConfig",
    "ScalingMode",
    "SizeEntry",
    "StateError",
    "StaticHostBridge",
    "SubmissionResult",
    "TextCase",
    "TypeScaleError",
    "TypographyConfig",
    "TypographyEditor",
    "TypographyState",
    "ValidationError",
    "ValidationRulesConfig",
    "Variable",
    "VariablesCache",
    "build_style_plan",
    "reduce",
    "to_host_payload",
    "validate_typography_config",
]
