"""
Host Bridge
===========

The remote-procedure surface the engine uses to reach the host document,
plus an in-memory implementation for embedding and tests.
"""

import logging
from collections.abc import Sequence
from typing import Any, Protocol, runtime_checkable

from src.typescale.apply.planner import (
    build_style_plan,
    check_host_request,
    config_from_host_payload,
)
from src.typescale.core.exceptions import (
    TypeScaleError,
    UnavailableStylesError,
    UnsupportedVariableTypeError,
    VariableNotFoundError,
)
from src.typescale.core.models import (
    ApplyResult,
    CreatedStyle,
    Font,
    ResolvedType,
    TypographyConfig,
    Variable,
)

logger = logging.getLogger(__name__)


@runtime_checkable
class HostBridge(Protocol):
    """Async calls answered by the host."""

    async def get_available_fonts(self) -> list[Font]: ...

    async def get_available_variables(self) -> list[Variable]: ...

    async def create_typography_system(self, payload: dict[str, Any]) -> ApplyResult: ...

    async def notify(self, message: str) -> None: ...


class StaticHostBridge:
    """Host bridge backed by fixed font and variable lists.

    ``create_typography_system`` performs the same checks a document host
    does and records every accepted payload in ``created``. Notifications are
    collected in ``notifications``.
    """

    def __init__(self, fonts: Sequence[Font] = (), variables: Sequence[Variable] = ()):
        self.fonts = list(fonts)
        self.variables = list(variables)
        self.created: list[dict[str, Any]] = []
        self.notifications: list[str] = []

    async def get_available_fonts(self) -> list[Font]:
        return list(self.fonts)

    async def get_available_variables(self) -> list[Variable]:
        return list(self.variables)

    async def create_typography_system(self, payload: dict[str, Any]) -> ApplyResult:
        try:
            config = config_from_host_payload(payload)
            check_host_request(config)
            font_family, styles = self._resolve_font(config)
            plan = build_style_plan(config, font_family, styles)
        except TypeScaleError as e:
            logger.warning(f"Rejected typography system {payload.get('name')!r}: {e}")
            return ApplyResult(success=False, message=str(e))

        self.created.append(payload)
        created = [
            CreatedStyle(
                id=f"S:{len(self.created)}:{index}",
                name=planned.name,
                font_family=planned.font_family,
                style=planned.style,
                size=planned.size,
                line_height=planned.line_height_percent,
                letter_spacing=planned.letter_spacing,
            )
            for index, planned in enumerate(plan, start=1)
        ]
        logger.debug(f"Created typography system {config.name!r}: {len(created)} styles")
        return ApplyResult(
            success=True,
            message=f"Created {len(created)} text styles",
            styles=created,
        )

    async def notify(self, message: str) -> None:
        self.notifications.append(message)

    def _family_styles(self, family: str) -> tuple[str, ...]:
        for font in self.fonts:
            if font.family == family:
                return font.styles
        return ()

    def _resolve_font(self, config: TypographyConfig) -> tuple[str, tuple[str, ...]]:
        if config.font_source == "variable":
            variable = next((v for v in self.variables if v.id == config.variable_id), None)
            if variable is None:
                raise VariableNotFoundError(config.variable_id or "")
            resolved_type = getattr(variable.resolved_type, "value", variable.resolved_type)
            if resolved_type != ResolvedType.STRING.value:
                raise UnsupportedVariableTypeError(resolved_type)
            family = str(variable.resolved_value or "")
            return family, config.styles or self._family_styles(family)

        family = config.font_family or ""
        known = self._family_styles(family)
        missing = [style for style in config.styles if style not in known]
        if missing:
            raise UnavailableStylesError(missing)
        return family, config.styles
