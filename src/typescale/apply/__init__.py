"""Hand-off of typography configurations to the host."""

from .planner import (
    PlannedStyle,
    build_size_scale,
    build_style_plan,
    check_host_request,
    config_from_host_payload,
    to_host_payload,
)
from .submitter import RegisteredStyle, TypographySubmitter

__all__ = [
    "PlannedStyle",
    "RegisteredStyle",
    "TypographySubmitter",
    "build_size_scale",
    "build_style_plan",
    "check_host_request",
    "config_from_host_payload",
    "to_host_payload",
]
