"""
Typography Reducer
==================

Pure state transitions for one typography style. Every transition returns a
new state; untouched parts of the previous state are shared, not copied.
Out-of-range config values are accepted here and reported by the validator;
values of the wrong type are rejected when the merged config is built.
"""

import logging
from collections.abc import Callable

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from src.typescale.core.config import ScaleDefaultsConfig
from src.typescale.core.exceptions import (
    InvalidConfigValueError,
    UnknownConfigFieldError,
    UnknownPopoverError,
    UnsupportedActionError,
)
from src.typescale.core.models import ScalingMode, SizeEntry, TypographyConfig, Variable
from src.typescale.scale.generator import (
    add_manual_size,
    backfill_manual_styles,
    remove_manual_size,
    update_manual_size,
)
from src.typescale.scale.presets import tailwind_preset_sizes

from .actions import (
    Action,
    AddManualSize,
    ApplyTailwindPreset,
    ClearError,
    RemoveManualSize,
    Reset,
    SelectFont,
    SetAllStyles,
    SetConfig,
    SetEditingName,
    SetErrors,
    SetExpanded,
    SetPopover,
    SetScalingMode,
    SetSearchQuery,
    SetVariable,
    ToggleStyle,
    UnlinkVariable,
    UpdateManualSize,
)

logger = logging.getLogger(__name__)

POPOVER_KEYS = ("fonts", "styles", "ratio")

class PopoverStates(BaseModel):
    model_config = ConfigDict(frozen=True)

    fonts: bool = False
    styles: bool = False
    ratio: bool = False


class TypographyState(BaseModel):
    """Editor state of one typography style."""

    model_config = ConfigDict(frozen=True)

    config: TypographyConfig
    selected_variable: Variable | None = None
    search_query: str = ""
    is_expanded: bool = False
    is_editing_name: bool = False
    errors: dict[str, str] = Field(default_factory=dict)
    popover_states: PopoverStates = Field(default_factory=PopoverStates)

    @property
    def scaling_mode(self) -> ScalingMode:
        return self.config.scaling_mode


def initial_config(defaults: ScaleDefaultsConfig | None = None) -> TypographyConfig:
    """Default config with a single manual size seeded from ``defaults``."""
    defaults = defaults or ScaleDefaultsConfig()
    return TypographyConfig(
        name=defaults.style_name,
        initial_size=defaults.initial_size,
        steps=defaults.steps,
        line_height=defaults.line_height,
        letter_spacing=defaults.letter_spacing,
        text_case=defaults.text_case,
        scale_ratio=defaults.scale_ratio,
        manual_sizes=(
            SizeEntry(
                id="1",
                size=defaults.manual_base_size,
                line_height=defaults.manual_base_line_height,
                text_case=defaults.text_case,
            ),
        ),
    )


def initial_state(defaults: ScaleDefaultsConfig | None = None) -> TypographyState:
    return TypographyState(config=initial_config(defaults))


def _with_config(state: TypographyState, **changes) -> TypographyState:
    return state.model_copy(update={"config": state.config.model_copy(update=changes)})


def _set_config(state: TypographyState, action: SetConfig) -> TypographyState:
    for name in action.changes:
        if name not in TypographyConfig.model_fields:
            raise UnknownConfigFieldError(name)

    merged = {name: getattr(state.config, name) for name in TypographyConfig.model_fields}
    merged.update(action.changes)
    try:
        validated = TypographyConfig.model_validate(merged)
    except PydanticValidationError as e:
        fields = sorted({".".join(str(part) for part in err["loc"]) for err in e.errors()})
        raise InvalidConfigValueError(fields) from e

    # Only the changed fields are taken from the validated copy; the rest stay shared
    return _with_config(state, **{name: getattr(validated, name) for name in action.changes})


def _set_scaling_mode(state: TypographyState, action: SetScalingMode) -> TypographyState:
    mode = ScalingMode(action.mode)
    config = state.config
    changes: dict = {"scaling_mode": mode}
    available = tuple(action.available_styles)

    if available:
        if mode is ScalingMode.AUTO:
            changes["styles"] = available
        else:
            if not config.styles:
                changes["styles"] = available
            changes["manual_sizes"] = backfill_manual_styles(config.manual_sizes, available)

    return _with_config(state, **changes)


def _apply_tailwind_preset(state: TypographyState, action: ApplyTailwindPreset) -> TypographyState:
    return _with_config(
        state,
        scaling_mode=ScalingMode.TAILWIND,
        manual_sizes=tailwind_preset_sizes(action.available_styles),
    )


def _set_variable(state: TypographyState, action: SetVariable) -> TypographyState:
    variable = action.variable
    if variable is None:
        config = state.config.model_copy(update={"font_source": "type", "variable_id": None})
    else:
        config = state.config.model_copy(
            update={"font_source": "variable", "variable_id": variable.id, "font_family": ""}
        )
    return state.model_copy(update={"selected_variable": variable, "config": config})


def _select_font(state: TypographyState, action: SelectFont) -> TypographyState:
    changes: dict = {"font_source": "type", "font_family": action.family, "variable_id": None}
    if state.scaling_mode is ScalingMode.AUTO and action.available_styles:
        changes["styles"] = tuple(action.available_styles)
    return state.model_copy(
        update={
            "config": state.config.model_copy(update=changes),
            "selected_variable": None,
            "search_query": "",
        }
    )


def _unlink_variable(state: TypographyState, action: UnlinkVariable) -> TypographyState:
    config = state.config.model_copy(
        update={"font_source": "type", "variable_id": None, "font_family": ""}
    )
    return state.model_copy(update={"selected_variable": None, "config": config})


def _set_popover(state: TypographyState, action: SetPopover) -> TypographyState:
    if action.key not in POPOVER_KEYS:
        raise UnknownPopoverError(action.key)
    popovers = state.popover_states.model_copy(update={action.key: action.value})
    return state.model_copy(update={"popover_states": popovers})


def _clear_error(state: TypographyState, action: ClearError) -> TypographyState:
    if action.field not in state.errors:
        return state
    errors = {name: message for name, message in state.errors.items() if name != action.field}
    return state.model_copy(update={"errors": errors})


def _toggle_style(state: TypographyState, action: ToggleStyle) -> TypographyState:
    styles = state.config.styles
    if action.style in styles:
        styles = tuple(style for style in styles if style != action.style)
    else:
        styles = (*styles, action.style)
    return _with_config(state, styles=styles)


_HANDLERS: dict[type[Action], Callable[[TypographyState, Action], TypographyState]] = {
    SetConfig: _set_config,
    SetScalingMode: _set_scaling_mode,
    ApplyTailwindPreset: _apply_tailwind_preset,
    SetVariable: _set_variable,
    SelectFont: _select_font,
    UnlinkVariable: _unlink_variable,
    SetSearchQuery: lambda state, action: state.model_copy(update={"search_query": action.query}),
    SetExpanded: lambda state, action: state.model_copy(update={"is_expanded": action.expanded}),
    SetEditingName: lambda state, action: state.model_copy(
        update={"is_editing_name": action.editing}
    ),
    SetPopover: _set_popover,
    SetErrors: lambda state, action: state.model_copy(update={"errors": dict(action.errors)}),
    ClearError: _clear_error,
    AddManualSize: lambda state, action: _with_config(
        state,
        manual_sizes=add_manual_size(
            state.config.manual_sizes, action.available_styles, action.default_ratio
        ),
    ),
    RemoveManualSize: lambda state, action: _with_config(
        state, manual_sizes=remove_manual_size(state.config.manual_sizes, action.size_id)
    ),
    UpdateManualSize: lambda state, action: _with_config(
        state,
        manual_sizes=update_manual_size(state.config.manual_sizes, action.size_id, action.update),
    ),
    ToggleStyle: _toggle_style,
    SetAllStyles: lambda state, action: _with_config(state, styles=tuple(action.styles)),
}


def reduce(
    state: TypographyState, action: Action, defaults: ScaleDefaultsConfig | None = None
) -> TypographyState:
    """
    Compute the state that follows ``action``.

    Args:
        state: Current state
        action: Action to apply
        defaults: Seed values used by ``Reset``

    Returns:
        The next state

    Raises:
        UnsupportedActionError: For action types without a transition
        UnknownConfigFieldError: When ``SetConfig`` names an unknown field
        InvalidConfigValueError: When ``SetConfig`` carries a value of the wrong type
        UnknownPopoverError: When ``SetPopover`` names an unknown popover
    """
    if isinstance(action, Reset):
        return initial_state(defaults)

    handler = _HANDLERS.get(type(action))
    if handler is None:
        raise UnsupportedActionError(action)

    logger.debug(f"Reducing {type(action).__name__}")
    return handler(state, action)
