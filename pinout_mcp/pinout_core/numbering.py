"""
Display numbering for package pin sequences.

A variant's pin list has one slot per package position. Skipped positions
never show a number; SKIPPED_PIN_WITH_NUMBER positions still use one up,
so the printed numbering matches the physical package convention:

    ["A", SKIPPED_PIN, "C", "D"]          -> [1, None, 2, 3]
    ["A", SKIPPED_PIN_WITH_NUMBER, "C", "D"] -> [1, None, 3, 4]
"""

from typing import List, Optional, Sequence

from .models import PinSlot, SkippedPin, SkippedPinWithNumber


def compute_display_numbers(pins: Sequence[PinSlot]) -> List[Optional[int]]:
    """
    Compute the printed number of every slot, in physical order.

    Args:
        pins: Pin slots of a variant

    Returns:
        List of the same length as `pins`; None for skipped slots
    """
    numbers: List[Optional[int]] = []
    number = 1

    for slot in pins:
        if isinstance(slot, SkippedPin):
            numbers.append(None)
        elif isinstance(slot, SkippedPinWithNumber):
            number += 1
            numbers.append(None)
        else:
            numbers.append(number)
            number += 1

    return numbers
