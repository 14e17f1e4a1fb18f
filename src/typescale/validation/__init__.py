"""Validation of typography configurations."""

from .validator import MANUAL_SIZES_MESSAGE, ValidationErrors, is_valid, validate_typography_config

__all__ = ["MANUAL_SIZES_MESSAGE", "ValidationErrors", "is_valid", "validate_typography_config"]
