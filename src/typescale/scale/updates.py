"""
Typed field updates for manual size entries.

Each update names the field it touches through its class, so the value type
is tied to the field. Scalars bound to a host variable are host-driven and
ignore literal updates.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass

from src.typescale.core.models import SizeEntry, TextCase, Variable

logger = logging.getLogger(__name__)


class ManualSizeUpdate(ABC):
    """Base class for a single-field update of a size entry."""

    @abstractmethod
    def apply(self, entry: SizeEntry) -> SizeEntry:
        """Return ``entry`` with this update applied."""


@dataclass(frozen=True)
class SetName(ManualSizeUpdate):
    value: str

    def apply(self, entry: SizeEntry) -> SizeEntry:
        return entry.model_copy(update={"name": self.value})


@dataclass(frozen=True)
class SetSize(ManualSizeUpdate):
    value: float

    def apply(self, entry: SizeEntry) -> SizeEntry:
        if entry.size_variable is not None:
            logger.debug(f"Size of entry {entry.id} is bound to {entry.size_variable.name}")
            return entry
        return entry.model_copy(update={"size": self.value})


@dataclass(frozen=True)
class SetLineHeight(ManualSizeUpdate):
    """Line height as a multiplier."""

    value: float

    def apply(self, entry: SizeEntry) -> SizeEntry:
        if entry.line_height_variable is not None:
            logger.debug(f"Line height of entry {entry.id} is bound to a variable")
            return entry
        return entry.model_copy(update={"line_height": self.value})


@dataclass(frozen=True)
class SetLetterSpacing(ManualSizeUpdate):
    """Letter spacing in percent."""

    value: float

    def apply(self, entry: SizeEntry) -> SizeEntry:
        if entry.letter_spacing_variable is not None:
            logger.debug(f"Letter spacing of entry {entry.id} is bound to a variable")
            return entry
        return entry.model_copy(update={"letter_spacing": self.value})


@dataclass(frozen=True)
class SetStyles(ManualSizeUpdate):
    value: tuple[str, ...]

    def apply(self, entry: SizeEntry) -> SizeEntry:
        return entry.model_copy(update={"styles": tuple(self.value)})


@dataclass(frozen=True)
class SetTextCase(ManualSizeUpdate):
    value: TextCase

    def apply(self, entry: SizeEntry) -> SizeEntry:
        return entry.model_copy(update={"text_case": TextCase(self.value)})


@dataclass(frozen=True)
class SetSizeVariable(ManualSizeUpdate):
    value: Variable | None

    def apply(self, entry: SizeEntry) -> SizeEntry:
        return entry.model_copy(update={"size_variable": self.value})


@dataclass(frozen=True)
class SetLineHeightVariable(ManualSizeUpdate):
    value: Variable | None

    def apply(self, entry: SizeEntry) -> SizeEntry:
        return entry.model_copy(update={"line_height_variable": self.value})


@dataclass(frozen=True)
class SetLetterSpacingVariable(ManualSizeUpdate):
    value: Variable | None

    def apply(self, entry: SizeEntry) -> SizeEntry:
        return entry.model_copy(update={"letter_spacing_variable": self.value})
