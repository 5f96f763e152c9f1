"""
Package Layout Engine

This module arranges the resolved pins of a chip variant around its
package body. The result is a layout tree (plain frozen dataclasses) that a
presentation layer turns into a table, text or graphics.

Package shapes:
- dual: two rows of n/2 pins. The left side reads top-to-bottom in
  physical order, the right side continues bottom-to-top, so row i pairs
  slot i with slot n-1-i.
- quad: four sides of n/4 pins, numbered counter-clockwise from the top
  left corner. Left/right rows pair like the dual case, offset by 2*n/4 on
  the right side; the top and bottom sides are vertical pin stacks.

Tag traversal follows the side a pin sits on: left and top pins resolve
their function groups front to back, right, bottom and additional pins back
to front, so the labels on opposite sides mirror each other.

Every layout pass is a pure function of (chip, variant, settings).
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple, Union

from .models import (
    ChipDefinition,
    ChipVariant,
    NamedPin,
    PACKAGE_DUAL,
    PACKAGE_QUAD,
    PinSlot,
    ResolvedPin,
    Tag,
)
from .numbering import compute_display_numbers
from .settings import VisibilitySettings
from .tags import LegendEntry, build_legend, resolve_pin

logger = logging.getLogger(__name__)


SIDE_LEFT = "left"
SIDE_RIGHT = "right"
SIDE_TOP = "top"
SIDE_BOTTOM = "bottom"

REVERSED_SIDES = (SIDE_RIGHT, SIDE_BOTTOM)

PACKAGE_DIVISORS = {
    PACKAGE_DUAL: 2,
    PACKAGE_QUAD: 4,
}

ROW_NUMBER = "number"
ROW_NAME = "name"
ROW_DATA = "data"


class PackageConfigurationError(ValueError):
    """
    A variant whose package shape or pin count cannot be laid out.

    Attributes:
        variant_name: Label of the offending variant
    """

    def __init__(self, variant_name: str, message: str):
        super().__init__(message)
        self.variant_name = variant_name


# ============================================================================
# Layout tree
# ============================================================================

@dataclass(frozen=True)
class DataCell:
    """
    A cell of function tags next to a pin name.

    Attributes:
        tags: Tags shown in the cell (one in alignment mode, all of the
              pin's tags in dense mode, none for blank cells)
        span: Number of group columns the cell covers
        empty: Blank cell between the body and the pin's outermost tag
    """
    tags: Tuple[Tag, ...] = ()
    span: int = 1
    empty: bool = False


@dataclass(frozen=True)
class PinPlacement:
    """
    A resolved pin at its place in the layout.

    Attributes:
        pin: The resolved pin
        side: Package side ("left", "right", "top", "bottom")
        slot_index: 0-based index into the variant's pin sequence, or None
                    for additional pins
        cells: Function tag cells, outermost last when read from the body
    """
    pin: ResolvedPin
    side: str
    slot_index: Optional[int]
    cells: Tuple[DataCell, ...]


@dataclass(frozen=True)
class BodyBlock:
    """
    The package body with the chip names printed on it.

    Attributes:
        manufacturer: Shown above the names, if known
        names: One entry per variant name, each split into lines (the first
               line is the title, the rest are subtitles)
        row_span: Pin rows covered by the body
        col_span: Columns covered by the body (quad packages)
    """
    manufacturer: Optional[str]
    names: Tuple[Tuple[str, ...], ...]
    row_span: int
    col_span: int


@dataclass(frozen=True)
class SideRow:
    left: PinPlacement
    right: PinPlacement


@dataclass(frozen=True)
class VerticalSide:
    """
    Top or bottom pin stack of a quad package.

    Attributes:
        side: "top" or "bottom"
        pins: Pins from left to right
        row_order: Order of the number/name/data rows, read top to bottom
    """
    side: str
    pins: Tuple[PinPlacement, ...]
    row_order: Tuple[str, ...]


@dataclass(frozen=True)
class AdditionalPinRow:
    description: str
    pin: PinPlacement
    description_span: int


@dataclass(frozen=True)
class PackageLayout:
    """
    Complete layout of one chip variant.

    Attributes:
        variant_name: Label of the variant
        package: "dual" or "quad"
        pin_count: Length of the variant's pin sequence
        align_data: Whether the data cells are column-aligned
        body: The package body block
        rows: Left/right pin pairs, top to bottom
        top: Top pin stack (quad only)
        bottom: Bottom pin stack (quad only)
        additional: Rows for pins outside the numbering
    """
    variant_name: str
    package: str
    pin_count: int
    align_data: bool
    body: BodyBlock
    rows: Tuple[SideRow, ...]
    top: Optional[VerticalSide] = None
    bottom: Optional[VerticalSide] = None
    additional: Tuple[AdditionalPinRow, ...] = ()

    def placements(self) -> List[PinPlacement]:
        """All numbered pin placements: top, left/right rows, bottom."""
        result = list(self.top.pins) if self.top else []
        for row in self.rows:
            result.extend((row.left, row.right))
        if self.bottom:
            result.extend(self.bottom.pins)
        return result


@dataclass(frozen=True)
class VariantFailure:
    """A variant that could not be laid out; its siblings are unaffected."""
    variant_name: str
    message: str


@dataclass(frozen=True)
class ChipLayout:
    """
    Layout of every variant of a chip, plus its header and legend.

    Attributes:
        chip_name: Chip name
        header: Title line, None when the header is hidden
        notes: Chip notes split into lines
        legend: Function group toggles
        font_size: Font size the diagram is rendered with
        variants: PackageLayout or VariantFailure per variant, in order
    """
    chip_name: str
    header: Optional[str]
    notes: Tuple[str, ...]
    legend: Tuple[LegendEntry, ...]
    font_size: int
    variants: Tuple[Union[PackageLayout, VariantFailure], ...]

    def failures(self) -> List[VariantFailure]:
        return [each for each in self.variants if isinstance(each, VariantFailure)]


# ============================================================================
# Cells
# ============================================================================

def data_cells(pin: ResolvedPin, side: str, align_data: bool) -> Tuple[DataCell, ...]:
    """
    Split a pin's tags into table cells.

    Dense mode puts every tag into one cell. Alignment mode emits one cell
    per visible group; blank cells lying between the body and the pin's
    outermost tag are flagged `empty` so they can be drawn as connectors.
    A skipped pin collapses into a single blank cell spanning all groups.
    """
    if pin.is_skipped:
        return (DataCell(span=pin.num_functions if align_data else 1),)

    if not align_data:
        return (DataCell(tags=tuple(pin.present_tags())),)

    present = [i for i, tag in enumerate(pin.tags) if tag is not None]
    first = present[0] if present else len(pin.tags)
    last = present[-1] if present else 0

    cells = []
    for i, tag in enumerate(pin.tags):
        if tag is not None:
            cells.append(DataCell(tags=(tag,)))
        else:
            empty = (side == SIDE_RIGHT and i < last) or (side == SIDE_LEFT and i >= first)
            cells.append(DataCell(empty=empty))
    return tuple(cells)


# ============================================================================
# Layout
# ============================================================================

def validate_variant(variant: ChipVariant) -> str:
    """
    Check the package shape and pin count of a variant.

    Returns:
        The package shape

    Raises:
        PackageConfigurationError: Unknown package, or a pin count that is
            not divisible by the number of package sides
    """
    package = variant.package or PACKAGE_DUAL
    label = variant.label()

    if package not in PACKAGE_DIVISORS:
        raise PackageConfigurationError(
            label,
            f"The variant {label} has unknown package '{package}'. "
            f"Only 'dual' and 'quad' are supported."
        )

    count = len(variant.pins)
    if package == PACKAGE_DUAL and count % 2 != 0:
        raise PackageConfigurationError(
            label,
            f"The variant {label} must have an even number of pins, but has {count} pins."
        )
    if package == PACKAGE_QUAD and count % 4 != 0:
        raise PackageConfigurationError(
            label,
            f"The variant {label} must have a number of pins divisible by 4, but has {count} pins."
        )

    return package


def _placement(
    chip: ChipDefinition,
    slot: PinSlot,
    number: Optional[int],
    index: Optional[int],
    side: str,
    settings: VisibilitySettings,
    align_data: bool
) -> PinPlacement:
    pin = resolve_pin(chip, slot, number, settings.visible_group_names, reverse=side in REVERSED_SIDES)
    return PinPlacement(pin, side, index, data_cells(pin, side, align_data))


def _place(
    chip: ChipDefinition,
    variant: ChipVariant,
    numbers: Sequence[Optional[int]],
    index: int,
    side: str,
    settings: VisibilitySettings,
    align_data: bool
) -> PinPlacement:
    return _placement(chip, variant.pins[index], numbers[index], index, side, settings, align_data)


def _body(chip: ChipDefinition, variant: ChipVariant, row_span: int, col_span: int) -> BodyBlock:
    names = tuple(tuple(name.split("\n")) for name in variant.names(chip.name))
    return BodyBlock(chip.manufacturer, names, row_span, col_span)


def _additional_rows(
    chip: ChipDefinition,
    variant: ChipVariant,
    settings: VisibilitySettings,
    align_data: bool
) -> Tuple[AdditionalPinRow, ...]:
    span = (len(chip.data) if align_data else 1) + 4
    rows = []
    for extra in variant.additional_pins:
        try:
            slot = NamedPin(extra.pin)
        except ValueError as e:
            label = variant.label()
            raise PackageConfigurationError(
                label,
                f"The variant {label} has an invalid additional pin '{extra.description}': {e}"
            )
        placement = _placement(chip, slot, None, None, SIDE_RIGHT, settings, align_data)
        rows.append(AdditionalPinRow(extra.description, placement, span))
    return tuple(rows)


def layout_dual(chip: ChipDefinition, variant: ChipVariant, settings: VisibilitySettings) -> PackageLayout:
    """Lay out a dual in-line package (validation is the caller's job)."""
    count = len(variant.pins)
    per_side = count // 2
    numbers = compute_display_numbers(variant.pins)
    align_data = settings.align_data

    rows = []
    for left_index in range(per_side):
        right_index = count - 1 - left_index
        rows.append(SideRow(
            left=_place(chip, variant, numbers, left_index, SIDE_LEFT, settings, align_data),
            right=_place(chip, variant, numbers, right_index, SIDE_RIGHT, settings, align_data),
        ))

    return PackageLayout(
        variant_name=variant.label(),
        package=PACKAGE_DUAL,
        pin_count=count,
        align_data=align_data,
        body=_body(chip, variant, row_span=per_side, col_span=1),
        rows=tuple(rows),
        additional=_additional_rows(chip, variant, settings, align_data),
    )


def _vertical_side(
    chip: ChipDefinition,
    variant: ChipVariant,
    numbers: Sequence[Optional[int]],
    side: str,
    settings: VisibilitySettings,
    align_data: bool
) -> VerticalSide:
    per_side = len(variant.pins) // 4
    pins = []
    for i in range(per_side):
        # 1-based physical pin number of the i-th pin from the left
        pin_number = per_side * 4 - i if side == SIDE_TOP else per_side + 1 + i
        pins.append(_place(chip, variant, numbers, pin_number - 1, side, settings, align_data))

    row_order = [ROW_NUMBER, ROW_NAME, ROW_DATA]
    if side == SIDE_TOP:
        row_order.reverse()

    return VerticalSide(side, tuple(pins), tuple(row_order))


def layout_quad(chip: ChipDefinition, variant: ChipVariant, settings: VisibilitySettings) -> PackageLayout:
    """
    Lay out a quad package (validation is the caller's job).

    Quad layouts always use dense data cells; column alignment is not
    supported around the corners.
    """
    count = len(variant.pins)
    per_side = count // 4
    numbers = compute_display_numbers(variant.pins)
    align_data = False

    rows = []
    for left_index in range(per_side):
        right_index = per_side - 1 - left_index + per_side * 2
        rows.append(SideRow(
            left=_place(chip, variant, numbers, left_index, SIDE_LEFT, settings, align_data),
            right=_place(chip, variant, numbers, right_index, SIDE_RIGHT, settings, align_data),
        ))

    return PackageLayout(
        variant_name=variant.label(),
        package=PACKAGE_QUAD,
        pin_count=count,
        align_data=align_data,
        body=_body(chip, variant, row_span=per_side, col_span=per_side),
        rows=tuple(rows),
        top=_vertical_side(chip, variant, numbers, SIDE_TOP, settings, align_data),
        bottom=_vertical_side(chip, variant, numbers, SIDE_BOTTOM, settings, align_data),
        additional=_additional_rows(chip, variant, settings, align_data),
    )


def layout_variant(chip: ChipDefinition, variant: ChipVariant, settings: VisibilitySettings) -> PackageLayout:
    """
    Lay out one variant of a chip.

    Args:
        chip: Chip the variant belongs to (function groups, overrides, names)
        variant: Variant to lay out
        settings: Visibility snapshot for this pass

    Returns:
        The variant's PackageLayout

    Raises:
        PackageConfigurationError: If the variant cannot be laid out
    """
    package = validate_variant(variant)

    if package == PACKAGE_QUAD:
        layout = layout_quad(chip, variant, settings)
    else:
        layout = layout_dual(chip, variant, settings)

    logger.debug(
        "Laid out %s variant %s of %s (%d pins, %d visible groups)",
        package, layout.variant_name, chip.name, layout.pin_count,
        len(settings.visible_group_names)
    )
    return layout


def chip_header(chip: ChipDefinition) -> str:
    """Title line: manufacturer, name and the number of package variants."""
    count = len(chip.variants)
    noun = "variant" if count == 1 else "variants"
    title = " ".join(part for part in (chip.manufacturer, chip.name) if part)
    return f"{title} ({count} package {noun})"


def layout_chip(chip: ChipDefinition, settings: VisibilitySettings, show_name: bool = True) -> ChipLayout:
    """
    Lay out every variant of a chip.

    A variant with a configuration error is replaced by a VariantFailure
    naming it; the remaining variants are laid out normally.
    """
    variants: List[Union[PackageLayout, VariantFailure]] = []

    for variant in chip.variants:
        try:
            variants.append(layout_variant(chip, variant, settings))
        except PackageConfigurationError as e:
            logger.warning("Skipping variant %s of %s: %s", e.variant_name, chip.name, e)
            variants.append(VariantFailure(e.variant_name, str(e)))

    return ChipLayout(
        chip_name=chip.name,
        header=chip_header(chip) if show_name else None,
        notes=tuple(chip.notes.split("\n")) if chip.notes else (),
        legend=tuple(build_legend(chip, settings.visible_group_names)),
        font_size=settings.font_size,
        variants=tuple(variants),
    )


def variant_names(chip: ChipDefinition) -> List[str]:
    """Flattened variant names of a chip (chip name for unnamed variants)."""
    return [name for variant in chip.variants for name in variant.names(chip.name)]
