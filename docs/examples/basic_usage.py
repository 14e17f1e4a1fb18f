"""
Basic Usage Examples
====================

This module demonstrates basic usage patterns for the typography configuration engine.
"""

import asyncio

from src.typescale.apply import TypographySubmitter, build_style_plan
from src.typescale.core.config import AppConfig, configure_logging
from src.typescale.core.models import Font, ScalingMode, Variable
from src.typescale.fonts import FontsCache, StaticHostBridge, VariablesCache
from src.typescale.scale import SetName, generate_auto_scale
from src.typescale.state import SetConfig, TypographyEditor, UpdateManualSize


def make_bridge() -> StaticHostBridge:
    """In-memory host with a couple of fonts and one font-family variable."""
    return StaticHostBridge(
        fonts=[
            Font(family="Inter", styles=("Regular", "Medium", "Bold")),
            Font(family="Roboto", styles=("Light", "Regular", "Bold")),
        ],
        variables=[
            Variable(
                id="VariableID:1",
                name="Typography/Brand",
                resolved_type="STRING",
                resolved_value="Inter",
            )
        ],
    )


def example_auto_scale():
    """
    Generate a geometric size ladder without an editor.
    """
    print("=== Auto Scale ===")

    for step in generate_auto_scale(12, 6, 1.25):
        print(f"   {step.name}: {step.size}px")


async def example_editor_session():
    """
    Edit two styles and hand them to the host.
    """
    print("\n=== Editor Session ===")

    app_config = AppConfig.from_env_and_yaml()
    configure_logging(app_config)

    bridge = make_bridge()
    fonts = FontsCache(bridge)
    variables = VariablesCache(bridge)
    await fonts.load()
    await variables.load()

    submitter = TypographySubmitter(bridge)

    heading = TypographyEditor(fonts, app_config)
    heading.subscribe(submitter.listener_for("heading"))
    heading.dispatch(SetConfig({"name": "Heading", "steps": 5}))
    heading.select_variable(variables.data[0])

    body = TypographyEditor(fonts, app_config)
    body.subscribe(submitter.listener_for("body"))
    body.dispatch(SetConfig({"name": "Body"}))
    body.select_font("Roboto")
    body.change_scaling_mode(ScalingMode.MANUAL)
    body.add_manual_size()
    newest = body.config.manual_sizes[-1]
    body.dispatch(UpdateManualSize(newest.id, SetName("large")))

    for editor in (heading, body):
        status = "valid" if editor.is_valid else f"invalid: {editor.errors}"
        print(f"   {editor.config.name}: {status}")

    plan = build_style_plan(body.config)
    print(f"   Body will create {len(plan)} styles, first: {plan[0].name}")

    result = await submitter.apply()
    print(f"   {result.message}")


if __name__ == "__main__":
    example_auto_scale()
    asyncio.run(example_editor_session())
