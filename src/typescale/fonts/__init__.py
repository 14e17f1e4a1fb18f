"""Font Resolution Module
======================

Host bridge access, cached font and variable lists, and the style
resolution used by typography editors.
"""

from .cache import (
    CacheStatus,
    Failed,
    FontsCache,
    HostDataCache,
    Loaded,
    Loading,
    Uninitialized,
    VariablesCache,
)
from .providers import HostBridge, StaticHostBridge
from .resolver import (
    FALLBACK_FONT_WEIGHTS,
    available_styles,
    filter_fonts_by_query,
    match_font,
    styles_display_text,
    type_label,
    typography_variables,
)

__all__ = [
    "FALLBACK_FONT_WEIGHTS",
    "CacheStatus",
    "Failed",
    "FontsCache",
    "HostBridge",
    "HostDataCache",
    "Loaded",
    "Loading",
    "StaticHostBridge",
    "Uninitialized",
    "VariablesCache",
    "available_styles",
    "filter_fonts_by_query",
    "match_font",
    "styles_display_text",
    "type_label",
    "typography_variables",
]
