"""Pydantic models for type-safe typography configuration."""

from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator, model_validator

FontSource = Literal["type", "variable"]


class ResolvedType(str, Enum):
    """Data type a host variable evaluates to."""

    STRING = "STRING"
    FLOAT = "FLOAT"
    BOOLEAN = "BOOLEAN"
    COLOR = "COLOR"


class TextCase(str, Enum):
    """Text case transform applied to a text style."""

    ORIGINAL = "ORIGINAL"
    UPPER = "UPPER"
    LOWER = "LOWER"
    TITLE = "TITLE"
    SMALL_CAPS = "SMALL_CAPS"
    SMALL_CAPS_FORCED = "SMALL_CAPS_FORCED"


class ScalingMode(str, Enum):
    """How the size ladder of a style is produced."""

    AUTO = "auto"
    MANUAL = "manual"
    TAILWIND = "tailwind"

    @property
    def is_manual(self) -> bool:
        return self is not ScalingMode.AUTO


class Font(BaseModel):
    """A typeface family and its named style variants."""

    model_config = ConfigDict(frozen=True)

    family: str
    styles: tuple[str, ...] = ()

    def __str__(self) -> str:
        return f"{self.family} ({len(self.styles)} styles)"


class Variable(BaseModel):
    """A host data binding.

    ``resolved_type`` is kept as a plain string when the host reports a type
    this engine does not know about.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    name: str
    resolved_type: ResolvedType | str = Field(
        ..., alias="resolvedType", union_mode="left_to_right"
    )
    description: str | None = None
    collection_name: str | None = Field(None, alias="collectionName")
    resolved_value: str | float | None = Field(None, alias="resolvedValue")

    @property
    def leaf_name(self) -> str:
        """Last segment of a ``/``-namespaced variable name."""
        return self.name.split("/")[-1]


class SizeEntry(BaseModel):
    """One rung of a manual scale."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str = ""
    size: float = 10
    line_height: float = Field(1.2, description="Line height multiplier")
    letter_spacing: float = Field(0.0, description="Letter spacing in percent")
    styles: tuple[str, ...] = ()
    text_case: TextCase = TextCase.TITLE
    size_variable: Variable | None = None
    line_height_variable: Variable | None = None
    letter_spacing_variable: Variable | None = None

    @field_validator("styles", mode="before")
    @classmethod
    def wrap_single_style(cls, value: Any) -> Any:
        return (value,) if isinstance(value, str) else value

    @model_validator(mode="before")
    @classmethod
    def default_name_to_id(cls, data: Any) -> Any:
        if isinstance(data, dict) and not data.get("name") and data.get("id"):
            return {**data, "name": data["id"]}
        return data


class TypographyConfig(BaseModel):
    """Root configuration of one typography style."""

    model_config = ConfigDict(frozen=True)

    name: str = "Untitled style"
    font_source: FontSource = "type"
    font_family: str | None = ""
    variable_id: str | None = None
    styles: tuple[str, ...] = ()
    initial_size: float = 12
    steps: int = 9
    line_height: float = Field(1.2, description="Line height multiplier")
    letter_spacing: float = Field(0.0, description="Letter spacing in percent")
    text_case: TextCase = TextCase.TITLE
    line_height_variable: Variable | None = None
    letter_spacing_variable: Variable | None = None
    scaling_mode: ScalingMode = ScalingMode.AUTO
    scale_ratio: float | None = 1.2
    manual_sizes: tuple[SizeEntry, ...] = ()

    @field_validator("styles", mode="before")
    @classmethod
    def wrap_single_style(cls, value: Any) -> Any:
        return (value,) if isinstance(value, str) else value

    @computed_field
    @property
    def is_manual_scale(self) -> bool:
        return self.scaling_mode.is_manual

    @property
    def has_font_selected(self) -> bool:
        """True when a variable is bound or a non-blank family is set."""
        if self.font_source == "variable":
            return bool(self.variable_id)
        return bool((self.font_family or "").strip())


class ScaleRatioOption(BaseModel):
    """A named scale ratio offered to the designer."""

    model_config = ConfigDict(frozen=True)

    value: float
    label: str


class CreatedStyle(BaseModel):
    """A text style reported back by the host after a hand-off."""

    id: str
    name: str
    font_family: str = Field(..., alias="fontFamily")
    style: str
    size: float
    line_height: float = Field(..., alias="lineHeight")
    letter_spacing: float = Field(..., alias="letterSpacing")

    model_config = ConfigDict(populate_by_name=True)


class ApplyResult(BaseModel):
    """Host response to ``createTypographySystem``."""

    success: bool
    message: str = ""
    styles: list[CreatedStyle] = Field(default_factory=list)


class SubmissionResult(BaseModel):
    """Outcome of submitting every configured style to the host."""

    success: bool
    total_styles: int = Field(0, ge=0)
    systems: int = Field(0, ge=0)
    message: str = ""
