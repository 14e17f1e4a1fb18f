"""
Pytest configuration and fixtures for typography engine tests.
"""

import asyncio
import os

import pytest

from src.typescale.core.config import AppConfig, ValidationRulesConfig
from src.typescale.core.models import (
    Font,
    ResolvedType,
    ScalingMode,
    SizeEntry,
    TypographyConfig,
    Variable,
)
from src.typescale.fonts.cache import FontsCache
from src.typescale.fonts.providers import StaticHostBridge

ENV_PREFIXES = ("SCALE_", "VALIDATION_", "SEARCH_", "APP_")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep settings tests independent of the surrounding environment."""
    for key in list(os.environ):
        if key.upper().startswith(ENV_PREFIXES):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def sample_fonts():
    """Fonts known to the host."""
    return [
        Font(family="Inter", styles=("Regular", "Medium", "Bold")),
        Font(family="Roboto", styles=("Light", "Regular", "Bold", "Black")),
        Font(family="Open Sans", styles=("Regular", "Italic")),
    ]


@pytest.fixture
def font_variable():
    """STRING variable holding a font family."""
    return Variable(
        id="VariableID:1",
        name="Typography/Font/Inter",
        resolved_type=ResolvedType.STRING,
        collection_name="Typography",
        resolved_value="Inter",
    )


@pytest.fixture
def sample_variables(font_variable):
    """Host variables of every resolved type."""
    return [
        font_variable,
        Variable(id="VariableID:2", name="Spacing/Base", resolved_type="FLOAT", resolved_value=16),
        Variable(id="VariableID:3", name="Flags/Dark", resolved_type="BOOLEAN"),
        Variable(id="VariableID:4", name="Colors/Primary", resolved_type="COLOR"),
    ]


@pytest.fixture
def bridge(sample_fonts, sample_variables):
    """In-memory host bridge."""
    return StaticHostBridge(fonts=sample_fonts, variables=sample_variables)


@pytest.fixture
def fonts_cache(bridge):
    """Fonts cache that has already loaded from the bridge."""
    cache = FontsCache(bridge)
    asyncio.run(cache.load())
    return cache


@pytest.fixture
def rules():
    """Default validation bounds."""
    return ValidationRulesConfig()


@pytest.fixture
def app_config():
    """Default application configuration."""
    return AppConfig()


@pytest.fixture
def auto_config():
    """Valid auto-scale configuration."""
    return TypographyConfig(
        name="Heading",
        font_family="Inter",
        styles=("Regular", "Bold"),
        initial_size=12,
        steps=3,
        scale_ratio=1.25,
    )


@pytest.fixture
def manual_config():
    """Valid manual-scale configuration."""
    return TypographyConfig(
        name="Body",
        font_family="Inter",
        styles=("Regular",),
        scaling_mode=ScalingMode.MANUAL,
        manual_sizes=(
            SizeEntry(id="1", name="sm", size=12, line_height=1.5, styles=("Regular",)),
            SizeEntry(id="2", name="lg", size=18, line_height=1.4, styles=("Regular", "Bold")),
        ),
    )
