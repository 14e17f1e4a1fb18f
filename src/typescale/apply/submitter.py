"""
Typography Submission
=====================

Collects the configurations of every edited style and hands the valid ones
to the host, one typography system per style.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from src.typescale.core.exceptions import ApplyRejectedError
from src.typescale.core.models import SubmissionResult, TypographyConfig

from .planner import to_host_payload

if TYPE_CHECKING:
    from src.typescale.fonts.providers import HostBridge

logger = logging.getLogger(__name__)


@dataclass
class RegisteredStyle:
    style_id: str
    config: TypographyConfig
    is_valid: bool


class TypographySubmitter:
    """Gatekeeper between typography editors and the host bridge."""

    def __init__(self, bridge: "HostBridge"):
        self.bridge = bridge
        self._styles: dict[str, RegisteredStyle] = {}
        self.is_generating = False
        self.last_error: str | None = None

    @property
    def styles(self) -> list[RegisteredStyle]:
        return list(self._styles.values())

    @property
    def can_generate(self) -> bool:
        """True when at least one style is registered and all of them are valid."""
        return bool(self._styles) and all(style.is_valid for style in self._styles.values())

    def register(self, style_id: str, config: TypographyConfig, is_valid: bool) -> None:
        """Record the latest configuration of a style."""
        self._styles[style_id] = RegisteredStyle(style_id, config, is_valid)

    def unregister(self, style_id: str) -> None:
        self._styles.pop(style_id, None)

    def listener_for(self, style_id: str) -> Callable[[TypographyConfig, bool], None]:
        """Listener that keeps ``style_id`` registered with an editor's latest config."""

        def listener(config: TypographyConfig, is_valid: bool) -> None:
            self.register(style_id, config, is_valid)

        return listener

    async def apply(self) -> SubmissionResult:
        """
        Create a typography system on the host for every registered style.

        Stops at the first failure. Nothing is raised; the outcome, including
        any error message, is in the returned result.

        Returns:
            Submission outcome with the number of created text styles
        """
        if not self.can_generate:
            return SubmissionResult(
                success=False, message="All typography styles must be valid before generating"
            )

        self.is_generating = True
        self.last_error = None
        total_styles = 0
        systems = 0

        try:
            for registered in self._styles.values():
                if not registered.is_valid:
                    continue

                logger.info(f"Generating typography system {registered.config.name!r}")
                result = await self.bridge.create_typography_system(
                    to_host_payload(registered.config)
                )
                if not result.success:
                    raise ApplyRejectedError(registered.config.name, result.message)

                total_styles += len(result.styles)
                systems += 1

            message = (
                f"Successfully created {total_styles} text styles "
                f"from {len(self._styles)} typography systems!"
            )
            await self.bridge.notify(message)
            logger.info(message)
            return SubmissionResult(
                success=True, total_styles=total_styles, systems=systems, message=message
            )

        except Exception as e:
            self.last_error = str(e) or "Failed to generate typography systems"
            logger.exception(f"Error generating typography systems: {self.last_error}")
            return SubmissionResult(
                success=False,
                total_styles=total_styles,
                systems=systems,
                message=self.last_error,
            )
        finally:
            self.is_generating = False
