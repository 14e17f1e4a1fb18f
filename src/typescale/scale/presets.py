"""
Scale Presets
=============

Named scale ratios and the Tailwind CSS font-size ladder.
"""

from collections.abc import Sequence

from src.typescale.core.models import ScaleRatioOption, SizeEntry, TextCase

from .units import line_height_from_percentage

SCALE_RATIO_OPTIONS: tuple[ScaleRatioOption, ...] = (
    ScaleRatioOption(value=1.067, label="Minor Second (1.067)"),
    ScaleRatioOption(value=1.125, label="Major Second (1.125)"),
    ScaleRatioOption(value=1.2, label="Minor Third (1.2)"),
    ScaleRatioOption(value=1.25, label="Major Third (1.25)"),
    ScaleRatioOption(value=1.333, label="Perfect Fourth (1.333)"),
    ScaleRatioOption(value=1.5, label="Perfect Fifth (1.5)"),
    ScaleRatioOption(value=1.618, label="Golden Ratio (1.618)"),
    ScaleRatioOption(value=2.0, label="Octave (2.0)"),
)

# (name, size px, line height %) from https://tailwindcss.com/docs/font-size
TAILWIND_FONT_SIZES: tuple[tuple[str, float, float], ...] = (
    ("xs", 12, 133.33),
    ("sm", 14, 142.86),
    ("base", 16, 150),
    ("lg", 18, 155.56),
    ("xl", 20, 140),
    ("2xl", 24, 133.33),
    ("3xl", 30, 120),
    ("4xl", 36, 111.11),
    ("5xl", 48, 100),
    ("6xl", 60, 100),
    ("7xl", 72, 100),
    ("8xl", 96, 100),
    ("9xl", 128, 100),
)


def ratio_label(value: float) -> str:
    """Label of a named ratio, or the bare number for free entry."""
    for option in SCALE_RATIO_OPTIONS:
        if abs(option.value - value) < 1e-9:
            return option.label
    return f"Custom ({value:g})"


def tailwind_preset_sizes(available_styles: Sequence[str] = ()) -> tuple[SizeEntry, ...]:
    """Build the Tailwind ladder as manual size entries with ids "1".."13"."""
    return tuple(
        SizeEntry(
            id=str(index),
            name=name,
            size=size,
            line_height=line_height_from_percentage(percentage),
            letter_spacing=0,
            styles=tuple(available_styles),
            text_case=TextCase.ORIGINAL,
        )
        for index, (name, size, percentage) in enumerate(TAILWIND_FONT_SIZES, start=1)
    )
