"""Actions accepted by the typography reducer."""

from dataclasses import dataclass
from typing import Any, Literal

from src.typescale.core.models import ScalingMode, Variable
from src.typescale.scale.updates import ManualSizeUpdate

PopoverKey = Literal["fonts", "styles", "ratio"]


class Action:
    """Base class for reducer actions."""


@dataclass(frozen=True)
class SetConfig(Action):
    """Shallow-merge ``changes`` into the config."""

    changes: dict[str, Any]


@dataclass(frozen=True)
class SetScalingMode(Action):
    """Switch scaling mode.

    With ``available_styles``, entering auto selects every style and
    entering manual or tailwind selects every style when none is selected and
    back-fills entries that have no styles.
    """

    mode: ScalingMode
    available_styles: tuple[str, ...] = ()


@dataclass(frozen=True)
class ApplyTailwindPreset(Action):
    available_styles: tuple[str, ...] = ()


@dataclass(frozen=True)
class SetVariable(Action):
    variable: Variable | None


@dataclass(frozen=True)
class SelectFont(Action):
    family: str
    available_styles: tuple[str, ...] = ()


@dataclass(frozen=True)
class UnlinkVariable(Action):
    pass


@dataclass(frozen=True)
class SetSearchQuery(Action):
    query: str


@dataclass(frozen=True)
class SetExpanded(Action):
    expanded: bool


@dataclass(frozen=True)
class SetEditingName(Action):
    editing: bool


@dataclass(frozen=True)
class SetPopover(Action):
    key: PopoverKey
    value: bool


@dataclass(frozen=True)
class SetErrors(Action):
    errors: dict[str, str]


@dataclass(frozen=True)
class ClearError(Action):
    field: str


@dataclass(frozen=True)
class AddManualSize(Action):
    available_styles: tuple[str, ...] = ()
    default_ratio: float = 1.2


@dataclass(frozen=True)
class RemoveManualSize(Action):
    size_id: str


@dataclass(frozen=True)
class UpdateManualSize(Action):
    size_id: str
    update: ManualSizeUpdate


@dataclass(frozen=True)
class ToggleStyle(Action):
    style: str


@dataclass(frozen=True)
class SetAllStyles(Action):
    styles: tuple[str, ...] = ()


@dataclass(frozen=True)
class Reset(Action):
    pass
