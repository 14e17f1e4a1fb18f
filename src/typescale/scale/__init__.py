"""Scale Generation
================

Auto and manual size ladders, ratio presets and unit helpers.
"""

from .generator import (
    add_manual_size,
    backfill_manual_styles,
    create_new_manual_size,
    generate_auto_scale,
    next_manual_size_id,
    remove_manual_size,
    update_manual_size,
)
from .presets import SCALE_RATIO_OPTIONS, TAILWIND_FONT_SIZES, ratio_label, tailwind_preset_sizes
from .units import line_height_from_percentage, line_height_to_percentage, round_half_up
from .updates import (
    ManualSizeUpdate,
    SetLetterSpacing,
    SetLetterSpacingVariable,
    SetLineHeight,
    SetLineHeightVariable,
    SetName,
    SetSize,
    SetSizeVariable,
    SetStyles,
    SetTextCase,
)

__all__ = [
    "SCALE_RATIO_OPTIONS",
    "TAILWIND_FONT_SIZES",
    "ManualSizeUpdate",
    "SetLetterSpacing",
    "SetLetterSpacingVariable",
    "SetLineHeight",
    "SetLineHeightVariable",
    "SetName",
    "SetSize",
    "SetSizeVariable",
    "SetStyles",
    "SetTextCase",
    "add_manual_size",
    "backfill_manual_styles",
    "create_new_manual_size",
    "generate_auto_scale",
    "line_height_from_percentage",
    "line_height_to_percentage",
    "next_manual_size_id",
    "ratio_label",
    "remove_manual_size",
    "round_half_up",
    "tailwind_preset_sizes",
    "update_manual_size",
]
