"""
Typography System Planning
==========================

Turns a typography configuration into what the host needs to create text
styles:
- the camelCase payload sent over the bridge
- the size scale (generated or manual)
- the list of text styles, named ``{name}/{size}/{style}``
"""

import logging
from collections.abc import Sequence
from typing import Any

from pydantic import BaseModel, ConfigDict

from src.typescale.core.config import ValidationRulesConfig
from src.typescale.core.exceptions import (
    InvalidConfigurationError,
    MissingFontFamilyError,
    MissingManualSizesError,
    MissingScaleRatioError,
    MissingVariableIdError,
)
from src.typescale.core.models import ScalingMode, SizeEntry, TextCase, TypographyConfig, Variable
from src.typescale.scale.generator import generate_auto_scale
from src.typescale.scale.units import line_height_from_percentage, line_height_to_percentage
from src.typescale.validation.validator import validate_typography_config

logger = logging.getLogger(__name__)


class PlannedStyle(BaseModel):
    """One text style the host is asked to create."""

    model_config = ConfigDict(frozen=True)

    name: str
    font_family: str
    style: str
    size: float
    line_height: float
    letter_spacing: float
    text_case: TextCase

    @property
    def line_height_percent(self) -> float:
        return line_height_to_percentage(self.line_height)


def _variable_payload(variable: Variable | None) -> dict[str, Any] | None:
    return variable.model_dump(by_alias=True, mode="json") if variable is not None else None


def _variable_from_payload(data: dict[str, Any] | None) -> Variable | None:
    return Variable.model_validate(data) if data else None


def _size_payload(entry: SizeEntry) -> dict[str, Any]:
    return {
        "id": entry.id,
        "name": entry.name,
        "size": entry.size,
        "lineHeight": line_height_to_percentage(entry.line_height),
        "letterSpacing": entry.letter_spacing,
        "textCase": entry.text_case.value,
        "styles": list(entry.styles),
        "sizeVariable": _variable_payload(entry.size_variable),
        "lineHeightVariable": _variable_payload(entry.line_height_variable),
        "letterSpacingVariable": _variable_payload(entry.letter_spacing_variable),
    }


def to_host_payload(config: TypographyConfig) -> dict[str, Any]:
    """
    Serialize a configuration for ``create_typography_system``.

    Line heights are sent as percentages and ``isManualScale`` is derived
    from the scaling mode.
    """
    return {
        "name": config.name,
        "fontSource": config.font_source,
        "fontFamily": config.font_family or "",
        "variableId": config.variable_id,
        "styles": list(config.styles),
        "initialSize": config.initial_size,
        "steps": config.steps,
        "lineHeight": line_height_to_percentage(config.line_height),
        "letterSpacing": config.letter_spacing,
        "textCase": config.text_case.value,
        "lineHeightVariable": _variable_payload(config.line_height_variable),
        "letterSpacingVariable": _variable_payload(config.letter_spacing_variable),
        "scalingMode": config.scaling_mode.value,
        "isManualScale": config.is_manual_scale,
        "scaleRatio": config.scale_ratio,
        "manualSizes": [_size_payload(entry) for entry in config.manual_sizes],
    }


def config_from_host_payload(payload: dict[str, Any]) -> TypographyConfig:
    """Read a configuration back from a host payload."""
    scaling_mode = payload.get("scalingMode") or (
        ScalingMode.MANUAL if payload.get("isManualScale") else ScalingMode.AUTO
    )
    manual_sizes = tuple(
        SizeEntry(
            id=str(size["id"]),
            name=size.get("name", ""),
            size=size.get("size", 10),
            line_height=line_height_from_percentage(size.get("lineHeight", 120)),
            letter_spacing=size.get("letterSpacing", 0),
            text_case=size.get("textCase") or TextCase.ORIGINAL,
            styles=tuple(size.get("styles") or ()),
            size_variable=_variable_from_payload(size.get("sizeVariable")),
            line_height_variable=_variable_from_payload(size.get("lineHeightVariable")),
            letter_spacing_variable=_variable_from_payload(size.get("letterSpacingVariable")),
        )
        for size in payload.get("manualSizes") or ()
    )
    return TypographyConfig(
        name=payload.get("name", ""),
        font_source=payload.get("fontSource", "type"),
        font_family=payload.get("fontFamily") or "",
        variable_id=payload.get("variableId"),
        styles=tuple(payload.get("styles") or ()),
        initial_size=payload.get("initialSize", 12),
        steps=payload.get("steps", 9),
        line_height=line_height_from_percentage(payload.get("lineHeight", 120)),
        letter_spacing=payload.get("letterSpacing", 0),
        text_case=payload.get("textCase") or TextCase.ORIGINAL,
        line_height_variable=_variable_from_payload(payload.get("lineHeightVariable")),
        letter_spacing_variable=_variable_from_payload(payload.get("letterSpacingVariable")),
        scaling_mode=scaling_mode,
        scale_ratio=payload.get("scaleRatio"),
        manual_sizes=manual_sizes,
    )


def check_host_request(config: TypographyConfig) -> None:
    """
    Check the structural requirements the host enforces before creating styles.

    Raises:
        MissingFontFamilyError: Type source without family or styles
        MissingVariableIdError: Variable source without a variable id
        MissingScaleRatioError: Auto scale without a ratio
        MissingManualSizesError: Manual scale without entries
    """
    if config.font_source == "type" and (
        not (config.font_family or "").strip() or not config.styles
    ):
        raise MissingFontFamilyError()
    if config.font_source == "variable" and not config.variable_id:
        raise MissingVariableIdError()
    if not config.is_manual_scale and not config.scale_ratio:
        raise MissingScaleRatioError()
    if config.is_manual_scale and not config.manual_sizes:
        raise MissingManualSizesError()


def build_size_scale(config: TypographyConfig) -> tuple[SizeEntry, ...]:
    """
    Size ladder for a configuration.

    Auto mode generates the geometric ladder. Manual and tailwind modes use
    the entries as they are, with blank names replaced by the 1-based index.
    """
    if not config.is_manual_scale:
        return generate_auto_scale(
            config.initial_size,
            config.steps,
            config.scale_ratio,
            line_height=config.line_height,
            letter_spacing=config.letter_spacing,
            text_case=config.text_case,
            styles=config.styles,
        )

    return tuple(
        entry if entry.name.strip() else entry.model_copy(update={"name": str(index)})
        for index, entry in enumerate(config.manual_sizes, start=1)
    )


def build_style_plan(
    config: TypographyConfig,
    font_family: str | None = None,
    styles: Sequence[str] | None = None,
) -> list[PlannedStyle]:
    """
    List every text style a configuration produces.

    Auto mode creates each selected style at every size. Manual mode creates
    each entry's own styles at that entry's size, falling back to the
    selected styles for an entry without any.

    Args:
        config: Configuration to plan
        font_family: Resolved family (defaults to ``config.font_family``)
        styles: Selected styles (defaults to ``config.styles``)

    Returns:
        Planned styles in creation order

    Raises:
        MissingFontFamilyError: If no family is known
    """
    family = font_family if font_family is not None else (config.font_family or "")
    if not family.strip():
        raise MissingFontFamilyError()
    selected = tuple(styles) if styles is not None else config.styles
    scale = build_size_scale(config)

    def plan(step: SizeEntry, style: str) -> PlannedStyle:
        return PlannedStyle(
            name=f"{config.name}/{step.name}/{style}",
            font_family=family,
            style=style,
            size=step.size,
            line_height=step.line_height,
            letter_spacing=step.letter_spacing,
            text_case=step.text_case,
        )

    if config.is_manual_scale:
        planned = [plan(step, style) for step in scale for style in step.styles or selected]
    else:
        planned = [plan(step, style) for style in selected for step in scale]

    logger.debug(f"Planned {len(planned)} styles for {config.name!r}")
    return planned


def validated_host_payload(
    config: TypographyConfig,
    available_styles: Sequence[str],
    rules: ValidationRulesConfig | None = None,
) -> dict[str, Any]:
    """
    Validate a configuration and serialize it for the host.

    Raises:
        InvalidConfigurationError: If any validation rule fails
    """
    errors = validate_typography_config(config, config.scaling_mode, available_styles, rules)
    if errors:
        raise InvalidConfigurationError(errors)
    return to_host_payload(config)
