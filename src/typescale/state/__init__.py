"""State Management
================

Reducer-driven state for typography editors.
"""

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
from .editor import TypographyEditor
from .reducer import PopoverStates, TypographyState, initial_config, initial_state, reduce

__all__ = [
    "Action",
    "AddManualSize",
    "ApplyTailwindPreset",
    "ClearError",
    "PopoverStates",
    "RemoveManualSize",
    "Reset",
    "SelectFont",
    "SetAllStyles",
    "SetConfig",
    "SetEditingName",
    "SetErrors",
    "SetExpanded",
    "SetPopover",
    "SetScalingMode",
    "SetSearchQuery",
    "SetVariable",
    "ToggleStyle",
    "TypographyEditor",
    "TypographyState",
    "UnlinkVariable",
    "UpdateManualSize",
    "initial_config",
    "initial_state",
    "reduce",
]
