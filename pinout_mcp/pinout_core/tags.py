"""
Function tag resolution.

For one physical pin, every visible function group contributes exactly one
slot: a Tag holding all of the group's labels that reference the pin, or
None when the group says nothing about it. Keeping one slot per visible
group lets the alignment mode give each group a fixed column.
"""

from dataclasses import dataclass
from typing import Collection, List, Optional, Sequence, Tuple

from .colors import contrast_color
from .models import (
    ChipData,
    ChipDefinition,
    NamedPin,
    PIN_KIND_NORMAL,
    PIN_KIND_SKIPPED,
    PinName,
    PinSlot,
    ResolvedPin,
    Tag,
)
from .styling import classify_pin_name

DEFAULT_GROUP_COLOR = "white"


def visible_groups(groups: Sequence[ChipData], visible_group_names: Collection[str]) -> List[ChipData]:
    """Groups whose name is visible, in declaration order."""
    return [group for group in groups if group.name in visible_group_names]


def resolve_tags(
    pin_name: str,
    groups: Sequence[ChipData],
    visible_group_names: Collection[str],
    reverse: bool = False
) -> Tuple[Optional[Tag], ...]:
    """
    Resolve the function tags of one pin.

    Args:
        pin_name: Physical pin name to look up
        groups: Function groups of the chip, in declaration order
        visible_group_names: Names of the groups currently shown
        reverse: Walk the groups back to front, for pins whose labels are
                 mirrored to the other side of the package

    Returns:
        Tuple with one slot per visible group, in traversal order
    """
    ordered = reversed(groups) if reverse else groups
    tags: List[Optional[Tag]] = []

    for group in ordered:
        if group.name not in visible_group_names:
            continue

        values = tuple(
            label
            for label, pin_names in group.pins.items()
            for each in pin_names
            if each == pin_name
        )

        if values:
            color = group.color if group.color is not None else DEFAULT_GROUP_COLOR
            tags.append(Tag(values=values, color=color, contrast_color=contrast_color(color)))
        else:
            tags.append(None)

    return tuple(tags)


def resolve_pin(
    chip: ChipDefinition,
    slot: PinSlot,
    display_number: Optional[int],
    visible_group_names: Collection[str],
    reverse: bool = False
) -> ResolvedPin:
    """
    Resolve a pin slot into its name styling and function tags.

    Skipped slots short-circuit to a "skipped" pin that only records how
    many visible groups (columns) it spans.
    """
    if not isinstance(slot, NamedPin):
        return ResolvedPin(
            display_number=None,
            kind=PIN_KIND_SKIPPED,
            num_functions=len(visible_groups(chip.data, visible_group_names)),
        )

    tags = resolve_tags(slot.name, chip.data, visible_group_names, reverse)
    return ResolvedPin(
        display_number=display_number,
        kind=PIN_KIND_NORMAL,
        name=PinName(slot.name, classify_pin_name(slot.name, chip.pin_colors())),
        tags=tags,
        num_functions=len(tags),
    )


@dataclass(frozen=True)
class LegendEntry:
    """
    One toggle in a chip's legend.

    Attributes:
        name: Function group name
        color: Group color, None if the group has none
        contrast_color: Text color for the entry
        checked: True if the group is currently visible
    """
    name: str
    color: Optional[str]
    contrast_color: str
    checked: bool


def build_legend(chip: ChipDefinition, visible_group_names: Collection[str]) -> List[LegendEntry]:
    """Legend entries for every function group, in declaration order."""
    return [
        LegendEntry(
            name=group.name,
            color=group.color,
            contrast_color=contrast_color(group.color),
            checked=group.name in visible_group_names,
        )
        for group in chip.data
    ]
