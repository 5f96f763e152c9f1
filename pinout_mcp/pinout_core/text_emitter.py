"""
Text Emitter for the Pinout Diagram Generator

This module renders a ChipLayout as a plain-text pinout diagram, suited to
terminals and LLM consumption. Colors are not representable in text; the
legend lists each function group's color instead.

Format:
    # <manufacturer> <chip> (<n> package variants)
    <notes>

    ## Legend
    [x] <group> (<color>)

    ## Variant: <variant> (<package>, <n> pins)
    <left tags> <name> <number> | <body> | <number> <name> <right tags>

Tags are written as [LABEL] or [LABEL1 | LABEL2] when one group assigns
several labels to the same pin. In aligned mode, "-" marks a blank column
between the body and a pin's outermost tag.
"""

from typing import List, Optional, Sequence, Tuple

from .layout import (
    ChipLayout,
    DataCell,
    PackageLayout,
    PinPlacement,
    ROW_DATA,
    ROW_NAME,
    ROW_NUMBER,
    SIDE_LEFT,
    VariantFailure,
)
from .models import Tag

BODY_SEPARATOR = "---"


def emit_chip_text(chip_layout: ChipLayout) -> str:
    """
    Render a chip: header, notes, legend and every variant.

    Args:
        chip_layout: Layout produced by layout_chip()

    Returns:
        Multi-line text diagram
    """
    lines: List[str] = []

    if chip_layout.header:
        lines.append(f"# {chip_layout.header}")
    if chip_layout.notes:
        lines.extend(chip_layout.notes)
    if lines:
        lines.append("")

    if chip_layout.legend:
        lines.append("## Legend")
        for entry in chip_layout.legend:
            mark = "x" if entry.checked else " "
            color = f" ({entry.color})" if entry.color else ""
            lines.append(f"[{mark}] {entry.name}{color}")
        lines.append("")

    for variant in chip_layout.variants:
        if isinstance(variant, VariantFailure):
            lines.append(f"## Variant: {variant.variant_name}")
            lines.append(f"ERROR: {variant.message}")
        else:
            lines.append(emit_variant_text(variant))
        lines.append("")

    return "\n".join(lines).rstrip() + "\n"


def emit_variant_text(layout: PackageLayout) -> str:
    """Render one variant's package layout."""
    title = " / ".join(" ".join(lines) for lines in layout.body.names)
    lines = [f"## Variant: {title} ({layout.package}, {layout.pin_count} pins)"]

    if layout.top is not None:
        lines.append("### Top (left to right)")
        lines.extend(_format_stack(layout.top.pins, layout.top.row_order))
        lines.append("### Left | body | right")

    lines.extend(_format_rows(layout))

    if layout.bottom is not None:
        lines.append("### Bottom (left to right)")
        lines.extend(_format_stack(layout.bottom.pins, layout.bottom.row_order))

    if layout.additional:
        lines.append("### Additional pins")
        for row in layout.additional:
            pin = row.pin.pin
            name = pin.name.text if pin.name else ""
            cells = _format_cells(row.pin.cells)
            lines.append(f"{row.description}: {name} {cells}".rstrip())

    return "\n".join(lines)


def _format_rows(layout: PackageLayout) -> List[str]:
    """Left/right pin pairs with the body text in the middle column."""
    if layout.align_data:
        left_widths = _column_widths([row.left for row in layout.rows])
        right_widths = _column_widths([row.right for row in layout.rows])
    else:
        left_widths = right_widths = None

    lefts = _join_side([_side_parts(row.left, left_widths) for row in layout.rows], left=True)
    rights = _join_side([_side_parts(row.right, right_widths) for row in layout.rows], left=False)

    body = _body_lines(layout)
    height = max(len(layout.rows), len(body))
    lefts += [""] * (height - len(lefts))
    rights += [""] * (height - len(rights))
    body += [""] * (height - len(body))

    left_width = max((len(each) for each in lefts), default=0)
    body_width = max((len(each) for each in body), default=0)

    return [
        f"{left.rjust(left_width)} | {text.center(body_width)} | {right}".rstrip()
        for left, text, right in zip(lefts, body, rights)
    ]


def _body_lines(layout: PackageLayout) -> List[str]:
    lines = []
    if layout.body.manufacturer:
        lines.append(layout.body.manufacturer)
    for i, name_lines in enumerate(layout.body.names):
        if i:
            lines.append(BODY_SEPARATOR)
        lines.extend(name_lines)
    return lines


def _side_parts(placement: PinPlacement, widths: Optional[Sequence[int]]) -> Tuple[str, str, str]:
    """(cells, name, number) of one pin; blank for skipped pins."""
    pin = placement.pin
    if pin.is_skipped:
        return "", "", ""

    number = "" if pin.display_number is None else str(pin.display_number)
    cells = _format_cells(placement.cells, widths, right_align=placement.side == SIDE_LEFT)
    return cells, pin.name.text, number


def _join_side(parts: Sequence[Tuple[str, str, str]], left: bool) -> List[str]:
    """Pad cells, names and numbers of one side into columns."""
    cell_width = max((len(cells) for cells, _, _ in parts), default=0)
    name_width = max((len(name) for _, name, _ in parts), default=0)
    number_width = max((len(number) for _, _, number in parts), default=0)

    lines = []
    for cells, name, number in parts:
        if left:
            line = f"{cells.rjust(cell_width)} {name.rjust(name_width)} {number.rjust(number_width)}"
        else:
            line = f"{number.ljust(number_width)} {name.ljust(name_width)} {cells}"
        lines.append(line.rstrip() if not left else line)
    return lines


def _format_stack(pins: Sequence[PinPlacement], row_order: Tuple[str, ...]) -> List[str]:
    """One line per pin of a top/bottom side, fields in row order."""
    lines = []
    for placement in pins:
        pin = placement.pin
        if pin.is_skipped:
            lines.append("  (no pin)")
            continue
        fields = {
            ROW_NUMBER: "" if pin.display_number is None else str(pin.display_number),
            ROW_NAME: pin.name.text,
            ROW_DATA: _format_cells(placement.cells),
        }
        text = " ".join(fields[row] for row in row_order if fields[row])
        lines.append(f"  {text}")
    return lines


def _format_tag(tag: Tag) -> str:
    return "[" + " | ".join(tag.values) + "]"


def _format_cell(cell: DataCell) -> str:
    if cell.tags:
        return " ".join(_format_tag(tag) for tag in cell.tags)
    return "-" if cell.empty else ""


def _format_cells(
    cells: Sequence[DataCell],
    widths: Optional[Sequence[int]] = None,
    right_align: bool = False
) -> str:
    texts = [_format_cell(cell) for cell in cells]

    if widths is None or len(texts) != len(widths):
        return " ".join(text for text in texts if text)

    padded = [
        text.rjust(width) if right_align else text.ljust(width)
        for text, width in zip(texts, widths)
    ]
    joined = " ".join(padded)
    if not joined.strip():
        return ""
    return joined if right_align else joined.rstrip()


def _column_widths(placements: Sequence[PinPlacement]) -> Optional[List[int]]:
    """Width of every group column among the non-skipped pins of a side."""
    widths: Optional[List[int]] = None
    for placement in placements:
        if placement.pin.is_skipped:
            continue
        texts = [_format_cell(cell) for cell in placement.cells]
        if widths is None:
            widths = [len(text) for text in texts]
        else:
            widths = [max(width, len(text)) for width, text in zip(widths, texts)]
    return widths
