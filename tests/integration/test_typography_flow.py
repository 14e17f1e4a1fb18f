"""
End-to-end tests: host data loading, editing several styles, and submission.
"""

import asyncio

from src.typescale.apply.submitter import TypographySubmitter
from src.typescale.core.models import ScalingMode
from src.typescale.fonts.cache import FontsCache, VariablesCache
from src.typescale.scale.updates import SetName, SetStyles
from src.typescale.state.actions import SetConfig, UpdateManualSize
from src.typescale.state.editor import TypographyEditor


class TestTypographyFlow:
    """Test the full path from host data to created text styles."""

    def test_edit_and_submit_two_styles(self, bridge):
        """Test an auto style and a manual style submitted together."""
        fonts = FontsCache(bridge)
        variables = VariablesCache(bridge)
        asyncio.run(fonts.load())
        asyncio.run(variables.load())
        submitter = TypographySubmitter(bridge)

        heading = TypographyEditor(fonts)
        heading.subscribe(submitter.listener_for("heading"))
        heading.dispatch(SetConfig({"name": "Heading", "steps": 4}))
        heading.select_variable(variables.data[0])

        body = TypographyEditor(fonts)
        body.subscribe(submitter.listener_for("body"))
        body.dispatch(SetConfig({"name": "Body"}))
        body.select_font("Roboto")
        body.change_scaling_mode(ScalingMode.MANUAL)
        body.add_manual_size()
        body.dispatch(UpdateManualSize("2", SetName("large")))
        body.dispatch(UpdateManualSize("2", SetStyles(("Bold", "Black"))))

        assert heading.is_valid
        assert body.is_valid
        assert submitter.can_generate

        result = asyncio.run(submitter.apply())

        # Heading: 3 Inter styles x 4 sizes; Body: 4 styles at size 1, 2 at size 2
        assert result.success
        assert result.total_styles == 18
        assert bridge.notifications == [
            "Successfully created 18 text styles from 2 typography systems!"
        ]
        assert bridge.created[1]["manualSizes"][1]["name"] == "large"

    def test_invalid_style_blocks_submission(self, bridge):
        """Test that one invalid editor blocks the whole run."""
        fonts = FontsCache(bridge)
        asyncio.run(fonts.load())
        submitter = TypographySubmitter(bridge)

        editor = TypographyEditor(fonts)
        editor.subscribe(submitter.listener_for("only"))
        editor.select_font("Inter")
        editor.dispatch(SetConfig({"letter_spacing": 500}))

        assert not submitter.can_generate
        assert not asyncio.run(submitter.apply()).success
        assert bridge.created == []

    def test_untouched_style_blocks_submission(self, bridge):
        """Test that a style opened but never edited still gates the run."""
        fonts = FontsCache(bridge)
        asyncio.run(fonts.load())
        submitter = TypographySubmitter(bridge)

        edited = TypographyEditor(fonts)
        edited.subscribe(submitter.listener_for("edited"))
        edited.select_font("Inter")

        untouched = TypographyEditor(fonts)
        untouched.subscribe(submitter.listener_for("untouched"))

        assert edited.is_valid
        assert not untouched.is_valid
        assert len(submitter.styles) == 2
        assert not submitter.can_generate
