"""
Integration tests for the pinout core.

This test suite validates the end-to-end workflow:
1. Load JSON chip data (sample_chips.json)
2. Transform via adapter (JSONChipSource)
3. Manage state via PinoutLibrarian
4. Generate text diagrams for the selected chips

The sample covers skipped pins, a quad package with an exposed pad, a
default-hidden group, a per-pin color override, a variant with an odd pin
count and a chip without variants.
"""

import json
import logging
from pathlib import Path

import pytest

from pinout_mcp.pinout_core.adapters.json_chips import JSONChipSource
from pinout_mcp.pinout_core.layout import PackageLayout, VariantFailure
from pinout_mcp.pinout_core.librarian import PinoutLibrarian
from pinout_mcp.pinout_core.numbering import compute_display_numbers
from pinout_mcp.pinout_core.settings import SettingsController


# ============================================================================
# FIXTURES - Sample Data Loading
# ============================================================================

@pytest.fixture
def sample_json_path():
    """Path to the sample_chips.json file."""
    return Path(__file__).parent / "sample_chips.json"


@pytest.fixture
def sample_json_text(sample_json_path):
    with open(sample_json_path, 'r') as f:
        return f.read()


@pytest.fixture
def source(sample_json_text):
    source = JSONChipSource(sample_json_text)
    source.fetch_raw_data()
    return source


@pytest.fixture
def librarian(sample_json_text):
    return PinoutLibrarian(JSONChipSource(sample_json_text))


# ============================================================================
# Loading
# ============================================================================

def test_load_sample_data(sample_json_text):
    """The sample is valid JSON with three chip entries."""
    data = json.loads(sample_json_text)
    assert len(data["chips"]) == 3


def test_broken_chip_is_skipped(source, caplog):
    with caplog.at_level(logging.WARNING):
        chips = source.get_chips()

    assert [chip.name for chip in chips] == ["LDO33", "LED4"]
    assert "BROKEN" in caplog.text


def test_display_numbers_of_sample_variants(source):
    ldo = source.get_chips()[0]

    sot, dfn, _ = ldo.variants
    assert compute_display_numbers(sot.pins) == [1, 2, 3, None, 4, 5]
    assert compute_display_numbers(dfn.pins) == [1, 2, 3, 4, 5, 6, None, 8]


# ============================================================================
# Layout and rendering
# ============================================================================

def test_variant_failures_are_isolated(librarian):
    layout = librarian.layout(librarian.get_chip("LDO33"))

    assert isinstance(layout.variants[0], PackageLayout)
    assert isinstance(layout.variants[1], PackageLayout)
    assert isinstance(layout.variants[2], VariantFailure)
    assert layout.variants[2].variant_name == "LDO33 BROKEN-5"


def test_quad_sample_layout(librarian):
    quad = librarian.layout(librarian.get_chip("LDO33")).variants[1]

    assert [p.pin.name.text for p in quad.top.pins if not p.pin.is_skipped] == ["VIN"]
    assert quad.top.pins[1].pin.is_skipped
    assert [p.pin.name.text for p in quad.bottom.pins] == ["EN", "nc"]
    assert quad.bottom.pins[1].pin.name.style.border_style == "dashed"
    assert quad.bottom.pins[0].pin.name.style.category == "custom"
    assert quad.additional[0].pin.pin.name.text == "GND"


def test_full_render(librarian):
    text = librarian.render()

    assert "# Acme LDO33 (3 package variants)" in text
    assert "3.3 V low-dropout regulator." in text
    assert "[x] Power (#d00000)" in text
    assert "[ ] Thermal" in text
    assert "## Variant: LDO33 SOT-23-5 (dual, 6 pins)" in text
    assert "## Variant: LDO33 DFN-6 (quad, 8 pins)" in text
    assert "  [Input] VIN 8" in text
    assert "  (no pin)" in text
    assert "Exposed Pad: GND" in text
    assert "ERROR: The variant LDO33 BROKEN-5 must have an even number of pins, but has 5 pins." in text
    assert "# LED4 (1 package variant)" in text

    print("[PASS] Full render test passed")


def test_render_after_showing_hidden_group(librarian):
    librarian.refresh()
    librarian.settings.show_group("LDO33", "Thermal")

    text = librarian.render()

    assert "[x] Thermal" in text
    assert "Exposed Pad: GND [Heat Sink]" in text


def test_single_chip_filter(sample_json_text):
    settings = SettingsController(chip_filter=["LED4"])
    librarian = PinoutLibrarian(JSONChipSource(sample_json_text), settings)

    text = librarian.render()

    assert "LDO33" not in text
    assert not text.startswith("# ")
    assert "## Variant: LED4 (dual, 4 pins)" in text
    assert " A1 1 | LED4 | 4 A2" in text
