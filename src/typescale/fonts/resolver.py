"""
Font Resolver
=============

Works out which style variants apply to the current font selection:
- exact family lookup for a directly chosen font
- name matching for a font family bound through a host variable
- a fixed weight list when a bound family cannot be found
"""

import logging
from collections.abc import Iterable, Sequence

from src.typescale.core.models import Font, FontSource, ResolvedType, Variable

logger = logging.getLogger(__name__)

FALLBACK_FONT_WEIGHTS: tuple[str, ...] = (
    "Thin",
    "Extra Light",
    "Light",
    "Regular",
    "Medium",
    "Semi Bold",
    "Bold",
    "Extra Bold",
    "Black",
    "Thin Italic",
    "Extra Light Italic",
    "Light Italic",
    "Italic",
    "Medium Italic",
    "Semi Bold Italic",
    "Bold Italic",
    "Extra Bold Italic",
    "Black Italic",
)

TYPE_LABELS = {
    ResolvedType.STRING.value: "text",
    ResolvedType.FLOAT.value: "number",
    ResolvedType.BOOLEAN.value: "boolean",
    ResolvedType.COLOR.value: "color",
}

TYPOGRAPHY_VARIABLE_TYPES = frozenset({ResolvedType.STRING.value, ResolvedType.FLOAT.value})


def _type_value(resolved_type: ResolvedType | str) -> str:
    return resolved_type.value if isinstance(resolved_type, ResolvedType) else str(resolved_type)


def match_font(fonts: Sequence[Font], variable: Variable) -> tuple[str, ...]:
    """
    Styles of the font a variable points at.

    The candidate family is the variable's resolved value when it is a
    non-empty string, otherwise the last segment of its name. Matching is
    exact first, then case-insensitive.

    Args:
        fonts: Fonts known to the host
        variable: Bound variable

    Returns:
        Styles of the matched font, or ``FALLBACK_FONT_WEIGHTS``
    """
    if isinstance(variable.resolved_value, str) and variable.resolved_value:
        candidate = variable.resolved_value
    else:
        candidate = variable.leaf_name

    for font in fonts:
        if font.family == candidate:
            return font.styles

    lowered = candidate.lower()
    for font in fonts:
        if font.family.lower() == lowered:
            return font.styles

    logger.debug(f"No font matches variable {variable.name!r}, using fallback weights")
    return FALLBACK_FONT_WEIGHTS


def available_styles(
    font_source: FontSource,
    font_family: str | None,
    selected_variable: Variable | None,
    fonts: Sequence[Font],
) -> tuple[str, ...]:
    """
    Styles available for the current font selection.

    Args:
        font_source: "type" for a direct family, "variable" for a binding
        font_family: Directly chosen family
        selected_variable: Bound variable, if any
        fonts: Fonts known to the host

    Returns:
        Style names, empty when nothing applies
    """
    if font_source == "type" and font_family and font_family.strip():
        for font in fonts:
            if font.family == font_family:
                return font.styles
        return ()

    if font_source == "variable" and selected_variable is not None:
        return match_font(fonts, selected_variable)

    return ()


def filter_fonts_by_query(fonts: Sequence[Font], query: str, limit: int = 100) -> list[Font]:
    """Case-insensitive family search, capped at ``limit`` results."""
    if not query.strip():
        return list(fonts[:limit])
    needle = query.lower()
    return [font for font in fonts if needle in font.family.lower()][:limit]


def styles_display_text(selected: Sequence[str], available: Sequence[str]) -> str:
    """Summary shown on the style picker."""
    if not selected:
        return "Select styles..."
    if available and len(selected) == len(available):
        return "All styles"
    if len(selected) == 1:
        return selected[0]
    return f"{len(selected)} styles selected"


def type_label(resolved_type: ResolvedType | str) -> str:
    value = _type_value(resolved_type)
    return TYPE_LABELS.get(value, value.lower())


def typography_variables(variables: Iterable[Variable]) -> list[Variable]:
    """Keep only the variables a typography style can bind (STRING and FLOAT)."""
    return [v for v in variables if _type_value(v.resolved_type) in TYPOGRAPHY_VARIABLE_TYPES]
