"""
Typography Editor
=================

Session object for editing one typography style. Wraps the reducer, keeps
validation errors current, and resolves styles and font search results from
the shared fonts cache.
"""

import logging
from collections.abc import Callable
from typing import Any

from src.typescale.apply.planner import validated_host_payload
from src.typescale.core.config import AppConfig
from src.typescale.core.models import Font, ScalingMode, TypographyConfig, Variable
from src.typescale.fonts.cache import HostDataCache
from src.typescale.fonts.resolver import (
    available_styles,
    filter_fonts_by_query,
    styles_display_text,
)
from src.typescale.validation.validator import (
    ValidationErrors,
    is_valid,
    validate_typography_config,
)

from .actions import (
    Action,
    AddManualSize,
    ApplyTailwindPreset,
    SelectFont,
    SetAllStyles,
    SetErrors,
    SetScalingMode,
    SetVariable,
    UnlinkVariable,
)
from .reducer import TypographyState, initial_state, reduce

logger = logging.getLogger(__name__)

ConfigListener = Callable[[TypographyConfig, bool], None]


class TypographyEditor:
    """Editing session for one typography style."""

    def __init__(
        self,
        fonts: HostDataCache[Font],
        config: AppConfig | None = None,
        state: TypographyState | None = None,
    ):
        self.fonts = fonts
        self.app_config = config or AppConfig()
        self._listeners: list[ConfigListener] = []
        self._state = state or initial_state(self.app_config.scale)
        self._revalidate()

    @property
    def state(self) -> TypographyState:
        return self._state

    @property
    def config(self) -> TypographyConfig:
        return self._state.config

    @property
    def scaling_mode(self) -> ScalingMode:
        return self._state.scaling_mode

    @property
    def available_styles(self) -> tuple[str, ...]:
        return available_styles(
            self.config.font_source,
            self.config.font_family,
            self._state.selected_variable,
            self.fonts.data,
        )

    @property
    def filtered_fonts(self) -> list[Font]:
        return filter_fonts_by_query(
            self.fonts.data,
            self._state.search_query,
            self.app_config.search.font_query_limit,
        )

    @property
    def has_font_selected(self) -> bool:
        return self.config.has_font_selected

    @property
    def styles_display_text(self) -> str:
        return styles_display_text(self.config.styles, self.available_styles)

    @property
    def errors(self) -> ValidationErrors:
        return self._state.errors

    @property
    def is_valid(self) -> bool:
        return is_valid(self._state.errors)

    def subscribe(self, listener: ConfigListener) -> Callable[[], None]:
        """Register ``listener`` for ``(config, is_valid)`` changes.

        The listener is called once right away with the current values, so a
        style nobody has edited yet is still known to it.

        Returns:
            A callable that removes the listener
        """
        self._listeners.append(listener)
        listener(self.config, self.is_valid)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def dispatch(self, action: Action) -> TypographyState:
        """Apply ``action``, then refresh errors and notify listeners on change."""
        previous = self._state
        self._state = reduce(previous, action, self.app_config.scale)

        if self._state.config is not previous.config or isinstance(action, SetVariable):
            self._revalidate()
            if (self._state.config, self.is_valid) != (previous.config, is_valid(previous.errors)):
                self._notify()
        return self._state

    def refresh(self) -> None:
        """Re-run validation after the fonts cache changed underneath the editor."""
        was_valid = self.is_valid
        self._revalidate()
        if self.is_valid != was_valid:
            self._notify()

    # Convenience operations that resolve styles before dispatching

    def select_font(self, family: str) -> TypographyState:
        styles = available_styles("type", family, None, self.fonts.data)
        return self.dispatch(SelectFont(family, styles))

    def select_variable(self, variable: Variable | None) -> TypographyState:
        self.dispatch(SetVariable(variable))
        if variable is not None and self.scaling_mode is ScalingMode.AUTO:
            styles = self.available_styles
            if styles:
                self.dispatch(SetAllStyles(styles))
        return self._state

    def unlink_variable(self) -> TypographyState:
        return self.dispatch(UnlinkVariable())

    def change_scaling_mode(self, mode: ScalingMode) -> TypographyState:
        return self.dispatch(SetScalingMode(ScalingMode(mode), self.available_styles))

    def apply_tailwind_preset(self) -> TypographyState:
        return self.dispatch(ApplyTailwindPreset(self.available_styles))

    def add_manual_size(self, default_ratio: float | None = None) -> TypographyState:
        ratio = default_ratio or self.config.scale_ratio or self.app_config.scale.scale_ratio
        return self.dispatch(AddManualSize(self.available_styles, ratio))

    def host_payload(self) -> dict[str, Any]:
        """Payload for the host, raising InvalidConfigurationError while errors remain."""
        return validated_host_payload(
            self.config, self.available_styles, self.app_config.validation
        )

    def _revalidate(self) -> None:
        errors = validate_typography_config(
            self._state.config,
            self._state.scaling_mode,
            self.available_styles,
            self.app_config.validation,
        )
        if errors != self._state.errors:
            self._state = reduce(self._state, SetErrors(errors))

    def _notify(self) -> None:
        config, valid = self._state.config, self.is_valid
        for listener in list(self._listeners):
            listener(config, valid)
