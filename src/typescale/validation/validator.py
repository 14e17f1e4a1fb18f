"""
Typography Config Validation
============================

Field-keyed validation of a typography configuration. Every rule runs
independently and contributes at most one message; an empty mapping means
the configuration can be handed to the host.
"""

import logging
from collections.abc import Sequence

from src.typescale.core.config import ValidationRulesConfig
from src.typescale.core.models import ScalingMode, SizeEntry, TypographyConfig
from src.typescale.scale.units import line_height_to_percentage

logger = logging.getLogger(__name__)

ValidationErrors = dict[str, str]

MANUAL_SIZES_MESSAGE = "All manual sizes must have valid values and at least one style"


def _within(value: float, low: float, high: float) -> bool:
    return low <= value <= high


def _line_height_ok(multiplier: float, rules: ValidationRulesConfig) -> bool:
    return _within(line_height_to_percentage(multiplier), rules.line_height_min, rules.line_height_max)


def _letter_spacing_ok(value: float, rules: ValidationRulesConfig) -> bool:
    return _within(value, rules.letter_spacing_min, rules.letter_spacing_max)


def _size_entry_ok(entry: SizeEntry, rules: ValidationRulesConfig) -> bool:
    if not entry.name.strip() or not entry.styles:
        return False
    if entry.size_variable is None and entry.size <= 0:
        return False
    if entry.line_height_variable is None and not _line_height_ok(entry.line_height, rules):
        return False
    return entry.letter_spacing_variable is not None or _letter_spacing_ok(
        entry.letter_spacing, rules
    )


def validate_typography_config(
    config: TypographyConfig,
    scaling_mode: ScalingMode,
    available_styles: Sequence[str],
    rules: ValidationRulesConfig | None = None,
) -> ValidationErrors:
    """
    Validate a configuration against the current scaling mode.

    Args:
        config: Configuration to check
        scaling_mode: Mode the rules apply for
        available_styles: Styles resolved for the current font selection
        rules: Bounds to check against (defaults from the environment)

    Returns:
        Mapping of field name to message, empty when valid
    """
    rules = rules or ValidationRulesConfig()
    scaling_mode = ScalingMode(scaling_mode)
    errors: ValidationErrors = {}

    if config.font_source == "type" and not (config.font_family or "").strip():
        errors["fontFamily"] = "Font family is required"

    if scaling_mode is ScalingMode.AUTO:
        if config.has_font_selected and available_styles and not config.styles:
            errors["styles"] = "At least one style must be selected"

        if config.line_height_variable is None and not _line_height_ok(config.line_height, rules):
            errors["lineHeight"] = (
                f"Line height must be between {rules.line_height_min:g}% "
                f"and {rules.line_height_max:g}%"
            )

        if config.letter_spacing_variable is None and not _letter_spacing_ok(
            config.letter_spacing, rules
        ):
            errors["letterSpacing"] = (
                f"Letter spacing must be between {rules.letter_spacing_min:g}% "
                f"and {rules.letter_spacing_max:g}%"
            )

        if not config.scale_ratio:
            errors["scaleRatio"] = "Scale ratio is required"

        if not _within(config.initial_size, rules.font_size_min, rules.font_size_max):
            errors["initialSize"] = (
                f"Initial size must be between {rules.font_size_min:g}px "
                f"and {rules.font_size_max:g}px"
            )

        if config.steps < 1:
            errors["steps"] = "Scale needs at least one step"

    elif available_styles and config.manual_sizes:
        if not all(_size_entry_ok(entry, rules) for entry in config.manual_sizes):
            errors["manualSizes"] = MANUAL_SIZES_MESSAGE

    if errors:
        logger.debug(f"Config {config.name!r} has errors in: {', '.join(errors)}")
    return errors


def is_valid(errors: ValidationErrors) -> bool:
    return not errors
