"""
Test suite for display numbering.

Covers plain sequences, SKIPPED_PIN gaps and SKIPPED_PIN_WITH_NUMBER gaps.
"""

from pinout_mcp.pinout_core.models import NamedPin, SKIPPED_PIN, SKIPPED_PIN_WITH_NUMBER, to_pin_slot
from pinout_mcp.pinout_core.numbering import compute_display_numbers


def slots(*values):
    return [to_pin_slot(value) for value in values]


def test_plain_sequence():
    """Every named pin gets the next number."""
    assert compute_display_numbers(slots("A", "B", "C", "D")) == [1, 2, 3, 4]


def test_skipped_pin_consumes_no_number():
    """SOT-23-5 style gap: the numbering continues right after the gap."""
    numbers = compute_display_numbers(slots("A", SKIPPED_PIN, "C", "D"))
    assert numbers == [1, None, 2, 3]


def test_skipped_pin_with_number_uses_up_a_number():
    """The hidden slot still counts, so the numbering jumps by one."""
    numbers = compute_display_numbers(slots("A", SKIPPED_PIN_WITH_NUMBER, "C", "D"))
    assert numbers == [1, None, 3, 4]


def test_same_length_as_input():
    pins = slots(SKIPPED_PIN, "A", SKIPPED_PIN_WITH_NUMBER, SKIPPED_PIN, "B", "C")
    assert len(compute_display_numbers(pins)) == len(pins)


def test_only_skipped_pins_gives_consecutive_numbers():
    """With k SKIPPED_PIN slots the visible numbers are 1..len-k."""
    pins = slots("A", SKIPPED_PIN, "B", SKIPPED_PIN, SKIPPED_PIN, "C", "D", "E")
    numbers = [n for n in compute_display_numbers(pins) if n is not None]

    assert numbers == list(range(1, len(pins) - 3 + 1))


def test_numbered_gap_is_exactly_one():
    """Each SKIPPED_PIN_WITH_NUMBER leaves a gap of exactly one."""
    pins = slots("A", "B", SKIPPED_PIN_WITH_NUMBER, "C", SKIPPED_PIN, "D", SKIPPED_PIN_WITH_NUMBER, "E")
    numbers = compute_display_numbers(pins)

    assert numbers == [1, 2, None, 4, None, 5, None, 7]
    visible = [n for n in numbers if n is not None]
    # k=1 skipped, m=2 numbered gaps
    assert len(visible) == len(pins) - 1 - 2
    gaps = [b - a for a, b in zip(visible, visible[1:])]
    assert gaps.count(2) == 2
    assert set(gaps) <= {1, 2}


def test_leading_skips():
    assert compute_display_numbers(slots(SKIPPED_PIN, "A")) == [None, 1]
    assert compute_display_numbers(slots(SKIPPED_PIN_WITH_NUMBER, "A")) == [None, 2]


def test_empty_sequence():
    assert compute_display_numbers([]) == []


def test_strings_become_named_pins():
    """Authored strings are normalized at the model boundary."""
    assert to_pin_slot("PA0") == NamedPin("PA0")
    assert to_pin_slot(SKIPPED_PIN) is SKIPPED_PIN
