"""
Scale Generator
===============

Produces size ladders for a typography style:
- auto scale: geometric progression from a base size, ratio and step count
- manual scale: individually editable entries, each new one seeded from the
  previous rung scaled by the ratio
"""

import logging
from collections.abc import Sequence

from src.typescale.core.config import ScaleDefaultsConfig
from src.typescale.core.exceptions import InvalidStepCountError, MissingScaleRatioError
from src.typescale.core.models import SizeEntry, TextCase

from .units import round_half_up
from .updates import ManualSizeUpdate

logger = logging.getLogger(__name__)

DEFAULT_RATIO = 1.2


def generate_auto_scale(
    initial_size: float,
    steps: int,
    ratio: float | None,
    line_height: float = 1.2,
    letter_spacing: float = 0.0,
    text_case: TextCase = TextCase.ORIGINAL,
    styles: Sequence[str] = (),
) -> tuple[SizeEntry, ...]:
    """
    Generate a geometric size ladder.

    Args:
        initial_size: Size of the first rung in px
        steps: Number of rungs
        ratio: Multiplier between consecutive rungs
        line_height: Line height multiplier shared by every rung
        letter_spacing: Letter spacing percentage shared by every rung
        text_case: Text case shared by every rung
        styles: Style names shared by every rung

    Returns:
        Entries named "1".."steps" with size ``round(initial_size * ratio**i)``

    Raises:
        MissingScaleRatioError: If the ratio is missing or zero
        InvalidStepCountError: If steps is negative
    """
    if not ratio:
        raise MissingScaleRatioError()
    if steps < 0:
        raise InvalidStepCountError(steps)

    return tuple(
        SizeEntry(
            id=str(index + 1),
            name=str(index + 1),
            size=round_half_up(initial_size * ratio**index),
            line_height=line_height,
            letter_spacing=letter_spacing,
            styles=tuple(styles),
            text_case=text_case,
        )
        for index in range(steps)
    )


def next_manual_size_id(existing: Sequence[SizeEntry]) -> str:
    """
    Id for a new manual entry.

    One past the highest numeric id, so an id freed by a deletion in the
    middle of the ladder can never collide with a survivor.
    """
    numeric_ids = [int(entry.id) for entry in existing if entry.id.isdigit()]
    return str(max(numeric_ids, default=len(existing)) + 1)


def create_new_manual_size(
    existing: Sequence[SizeEntry],
    available_styles: Sequence[str],
    default_ratio: float = DEFAULT_RATIO,
    defaults: ScaleDefaultsConfig | None = None,
) -> SizeEntry:
    """
    Create the next manual entry.

    Values copy forward from the last entry (or the configured seed when the
    ladder is empty) and the size is scaled by ``default_ratio``. Styles
    default to the first available style, else the previous entry's styles.
    """
    new_id = next_manual_size_id(existing)
    previous = existing[-1] if existing else None

    if previous is not None:
        base_size = previous.size
        base_line_height = previous.line_height
        base_letter_spacing = previous.letter_spacing
        base_text_case = previous.text_case
        inherited_styles = previous.styles
    else:
        defaults = defaults or ScaleDefaultsConfig()
        base_size = defaults.manual_base_size
        base_line_height = defaults.manual_base_line_height
        base_letter_spacing = 0.0
        base_text_case = defaults.text_case
        inherited_styles = ()

    styles = (available_styles[0],) if available_styles else tuple(inherited_styles)
    size = round_half_up(base_size * default_ratio)

    logger.debug(f"New manual size {new_id}: {base_size} x {default_ratio} -> {size}")

    return SizeEntry(
        id=new_id,
        name=new_id,
        size=size,
        line_height=base_line_height,
        letter_spacing=base_letter_spacing,
        styles=styles,
        text_case=base_text_case,
    )


def add_manual_size(
    existing: Sequence[SizeEntry],
    available_styles: Sequence[str],
    default_ratio: float = DEFAULT_RATIO,
    defaults: ScaleDefaultsConfig | None = None,
) -> tuple[SizeEntry, ...]:
    """Append a new entry created by :func:`create_new_manual_size`."""
    new_size = create_new_manual_size(existing, available_styles, default_ratio, defaults)
    return (*existing, new_size)


def remove_manual_size(existing: Sequence[SizeEntry], size_id: str) -> tuple[SizeEntry, ...]:
    """Drop the entry with ``size_id``. Survivors keep their ids."""
    return tuple(entry for entry in existing if entry.id != size_id)


def update_manual_size(
    existing: Sequence[SizeEntry], size_id: str, update: ManualSizeUpdate
) -> tuple[SizeEntry, ...]:
    """Apply ``update`` to the entry with ``size_id``, leaving the others untouched."""
    return tuple(update.apply(entry) if entry.id == size_id else entry for entry in existing)


def backfill_manual_styles(
    existing: Sequence[SizeEntry], available_styles: Sequence[str]
) -> tuple[SizeEntry, ...]:
    """Give every entry without styles all of the available styles."""
    if not available_styles:
        return tuple(existing)
    return tuple(
        entry.model_copy(update={"styles": tuple(available_styles)}) if not entry.styles else entry
        for entry in existing
    )
