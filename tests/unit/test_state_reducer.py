"""Tests for the typography reducer."""

from dataclasses import dataclass

import pytest

from src.typescale.core.config import ScaleDefaultsConfig
from src.typescale.core.exceptions import (
    InvalidConfigValueError,
    UnknownConfigFieldError,
    UnknownPopoverError,
    UnsupportedActionError,
)
from src.typescale.core.models import ScalingMode, SizeEntry, TextCase
from src.typescale.scale.updates import SetName, SetSize
from src.typescale.state.actions import (
    Action,
    AddManualSize,
    ApplyTailwindPreset,
    ClearError,
    RemoveManualSize,
    Reset,
    SelectFont,
    SetAllStyles,
    SetConfig,
    SetEditingName,
    SetErrors,
    SetExpanded,
    SetPopover,
    SetScalingMode,
    SetSearchQuery,
    SetVariable,
    ToggleStyle,
    UnlinkVariable,
    UpdateManualSize,
)
from src.typescale.state.reducer import initial_state, reduce
from src.typescale.validation.validator import validate_typography_config

STYLES = ("Regular", "Medium", "Bold")


@pytest.fixture
def state():
    return initial_state()


class TestInitialState:
    """Test the state an editor starts with."""

    def test_initial_config(self, state):
        """Test default config values."""
        config = state.config

        assert config.name == "Untitled style"
        assert config.font_source == "type"
        assert config.font_family == ""
        assert config.styles == ()
        assert config.initial_size == 12
        assert config.steps == 9
        assert config.line_height == 1.2
        assert config.letter_spacing == 0
        assert config.text_case == TextCase.TITLE
        assert config.scale_ratio == 1.2
        assert state.scaling_mode == ScalingMode.AUTO
        assert not config.is_manual_scale

    def test_initial_manual_size(self, state):
        """Test the seeded manual size."""
        (entry,) = state.config.manual_sizes

        assert (entry.id, entry.name, entry.size, entry.line_height) == ("1", "1", 10, 1.2)

    def test_initial_ui_state(self, state):
        """Test default UI flags."""
        assert state.selected_variable is None
        assert state.search_query == ""
        assert not state.is_editing_name
        assert state.errors == {}
        assert not any(state.popover_states.model_dump().values())

    def test_configured_defaults(self):
        """Test seeding from custom defaults."""
        state = initial_state(ScaleDefaultsConfig(style_name="Body", steps=5, manual_base_size=14))

        assert state.config.name == "Body"
        assert state.config.steps == 5
        assert state.config.manual_sizes[0].size == 14


class TestConfigActions:
    """Test config-changing actions."""

    def test_set_config_merges(self, state):
        """Test shallow merge of config fields."""
        new_state = reduce(state, SetConfig({"name": "Heading", "steps": 4}))

        assert new_state.config.name == "Heading"
        assert new_state.config.steps == 4
        assert new_state.config.manual_sizes is state.config.manual_sizes
        assert state.config.name == "Untitled style"

    def test_set_config_coerces_enums(self, state):
        """Test that enum fields given as strings are coerced."""
        new_state = reduce(state, SetConfig({"scaling_mode": "manual", "styles": ["Bold"]}))

        assert new_state.scaling_mode is ScalingMode.MANUAL
        assert new_state.config.is_manual_scale
        assert new_state.config.styles == ("Bold",)

    def test_set_config_accepts_invalid_values(self, state):
        """Test that out-of-range values are stored for the validator to report."""
        new_state = reduce(state, SetConfig({"line_height": 99}))

        assert new_state.config.line_height == 99

    def test_set_config_unknown_field(self, state):
        """Test that unknown fields are rejected."""
        with pytest.raises(UnknownConfigFieldError):
            reduce(state, SetConfig({"is_manual_scale": True}))

    def test_set_config_wraps_single_style(self, state):
        """Test that a bare style name becomes a one-style selection."""
        new_state = reduce(state, SetConfig({"styles": "Bold"}))

        assert new_state.config.styles == ("Bold",)

    def test_set_config_builds_manual_sizes_from_dicts(self, state):
        """Test that plain manual size data is turned into size entries."""
        new_state = reduce(
            state,
            SetConfig(
                {
                    "scaling_mode": "manual",
                    "manual_sizes": [{"id": "1", "size": 16, "styles": "Regular"}],
                }
            ),
        )

        entry = new_state.config.manual_sizes[0]
        assert isinstance(entry, SizeEntry)
        assert entry.name == "1"
        assert entry.styles == ("Regular",)
        errors = validate_typography_config(
            new_state.config, new_state.scaling_mode, ("Regular", "Bold")
        )
        assert "manualSizes" not in errors

    def test_set_config_rejects_wrong_types(self, state):
        """Test that values of the wrong type leave the state untouched."""
        with pytest.raises(InvalidConfigValueError, match="steps"):
            reduce(state, SetConfig({"steps": "many"}))

        assert state.config.steps == 9

    @pytest.mark.parametrize(
        ("mode", "manual"),
        [(ScalingMode.AUTO, False), (ScalingMode.MANUAL, True), (ScalingMode.TAILWIND, True)],
    )
    def test_scaling_mode_and_manual_flag_move_together(self, state, mode, manual):
        """Test that the manual flag always follows the mode."""
        new_state = reduce(state, SetScalingMode(mode))

        assert new_state.scaling_mode == mode
        assert new_state.config.is_manual_scale is manual

    def test_entering_auto_selects_all_styles(self, state):
        """Test style selection when switching to auto."""
        manual = reduce(state, SetScalingMode(ScalingMode.MANUAL))

        new_state = reduce(manual, SetScalingMode(ScalingMode.AUTO, STYLES))

        assert new_state.config.styles == STYLES

    def test_entering_manual_backfills_styles(self, state):
        """Test style back-fill when switching to manual."""
        new_state = reduce(state, SetScalingMode(ScalingMode.MANUAL, STYLES))

        assert new_state.config.styles == STYLES
        assert new_state.config.manual_sizes[0].styles == STYLES

    def test_entering_manual_keeps_selected_styles(self, state):
        """Test that an existing selection survives the switch to manual."""
        selected = reduce(state, SetAllStyles(("Bold",)))

        new_state = reduce(selected, SetScalingMode(ScalingMode.MANUAL, STYLES))

        assert new_state.config.styles == ("Bold",)

    def test_tailwind_preset(self, state):
        """Test loading the Tailwind ladder."""
        new_state = reduce(state, ApplyTailwindPreset(STYLES))

        assert new_state.scaling_mode is ScalingMode.TAILWIND
        assert new_state.config.is_manual_scale
        assert len(new_state.config.manual_sizes) == 13
        assert new_state.config.manual_sizes[4].name == "xl"


class TestFontActions:
    """Test font and variable selection."""

    def test_set_variable(self, state, font_variable):
        """Test binding a variable."""
        typed = reduce(state, SetConfig({"font_family": "Roboto"}))

        new_state = reduce(typed, SetVariable(font_variable))

        assert new_state.selected_variable == font_variable
        assert new_state.config.font_source == "variable"
        assert new_state.config.variable_id == "VariableID:1"
        assert new_state.config.font_family == ""

    def test_clear_variable(self, state, font_variable):
        """Test clearing a bound variable."""
        bound = reduce(state, SetVariable(font_variable))

        new_state = reduce(bound, SetVariable(None))

        assert new_state.selected_variable is None
        assert new_state.config.font_source == "type"
        assert new_state.config.variable_id is None

    def test_select_font(self, state, font_variable):
        """Test choosing a family directly."""
        bound = reduce(reduce(state, SetVariable(font_variable)), SetSearchQuery("int"))

        new_state = reduce(bound, SelectFont("Inter", STYLES))

        assert new_state.config.font_source == "type"
        assert new_state.config.font_family == "Inter"
        assert new_state.config.variable_id is None
        assert new_state.selected_variable is None
        assert new_state.search_query == ""
        assert new_state.config.styles == STYLES

    def test_select_font_in_manual_mode_keeps_styles(self, state):
        """Test that choosing a family in manual mode leaves the selection alone."""
        manual = reduce(state, SetScalingMode(ScalingMode.MANUAL))

        new_state = reduce(manual, SelectFont("Inter", STYLES))

        assert new_state.config.styles == ()

    def test_unlink_variable(self, state, font_variable):
        """Test unlinking a bound variable."""
        bound = reduce(state, SetVariable(font_variable))

        new_state = reduce(bound, UnlinkVariable())

        assert new_state.selected_variable is None
        assert new_state.config.font_source == "type"
        assert new_state.config.font_family == ""


class TestUiActions:
    """Test UI-only actions."""

    def test_ui_flags(self, state):
        """Test search, expansion and name editing flags."""
        new_state = reduce(state, SetSearchQuery("rob"))
        new_state = reduce(new_state, SetExpanded(True))
        new_state = reduce(new_state, SetEditingName(True))

        assert new_state.search_query == "rob"
        assert new_state.is_expanded
        assert new_state.is_editing_name
        assert new_state.config is state.config

    def test_set_popover(self, state):
        """Test toggling a popover."""
        new_state = reduce(state, SetPopover("ratio", True))

        assert new_state.popover_states.ratio
        assert not new_state.popover_states.fonts

    def test_unknown_popover(self, state):
        """Test that unknown popovers are rejected."""
        with pytest.raises(UnknownPopoverError):
            reduce(state, SetPopover("colors", True))

    def test_errors(self, state):
        """Test replacing and clearing errors."""
        new_state = reduce(state, SetErrors({"fontFamily": "required", "styles": "required"}))
        cleared = reduce(new_state, ClearError("fontFamily"))

        assert cleared.errors == {"styles": "required"}
        assert reduce(cleared, ClearError("missing")) is cleared


class TestManualSizeActions:
    """Test manual size actions."""

    def test_add_manual_size(self, state):
        """Test appending a size."""
        new_state = reduce(state, AddManualSize(STYLES, 1.5))

        entry = new_state.config.manual_sizes[-1]
        assert entry.id == "2"
        assert entry.size == 15
        assert entry.styles == ("Regular",)

    def test_remove_and_add_keep_ids_unique(self, state):
        """Test that ids never collide."""
        new_state = reduce(state, AddManualSize())
        new_state = reduce(new_state, AddManualSize())
        new_state = reduce(new_state, RemoveManualSize("2"))
        new_state = reduce(new_state, AddManualSize())

        assert [entry.id for entry in new_state.config.manual_sizes] == ["1", "3", "4"]

    def test_update_manual_size(self, state):
        """Test a typed update through the reducer."""
        new_state = reduce(state, AddManualSize())

        updated = reduce(new_state, UpdateManualSize("2", SetSize(30)))
        renamed = reduce(updated, UpdateManualSize("1", SetName("Caption")))

        assert updated.config.manual_sizes[1].size == 30
        assert updated.config.manual_sizes[0] is new_state.config.manual_sizes[0]
        assert renamed.config.manual_sizes[0].name == "Caption"

    def test_toggle_style(self, state):
        """Test toggling styles on and off."""
        on = reduce(reduce(state, ToggleStyle("Bold")), ToggleStyle("Regular"))
        off = reduce(on, ToggleStyle("Bold"))

        assert on.config.styles == ("Bold", "Regular")
        assert off.config.styles == ("Regular",)

    def test_reset(self, state):
        """Test returning to the initial state."""
        changed = reduce(state, SetConfig({"name": "Changed"}))
        changed = reduce(changed, SetScalingMode(ScalingMode.MANUAL))

        assert reduce(changed, Reset()) == initial_state()

    def test_reset_with_defaults(self, state):
        """Test resetting to configured defaults."""
        defaults = ScaleDefaultsConfig(style_name="Display")

        assert reduce(state, Reset(), defaults).config.name == "Display"


class TestUnsupportedActions:
    """Test reducer error handling."""

    def test_unknown_action(self, state):
        """Test that unknown actions are rejected."""

        @dataclass(frozen=True)
        class Explode(Action):
            pass

        with pytest.raises(UnsupportedActionError) as exc_info:
            reduce(state, Explode())

        assert "Explode" in str(exc_info.value)

    def test_reducer_is_pure(self, state):
        """Test that reducing never mutates the input state."""
        before = state.model_dump()

        reduce(state, AddManualSize(STYLES))
        reduce(state, SetConfig({"name": "Other"}))

        assert state.model_dump() == before
        assert isinstance(state.config.manual_sizes[0], SizeEntry)
