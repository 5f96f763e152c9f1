"""
Test suite for the JSON chip source.

Tests the adapter's ability to transform authored JSON into the unified
data model, including skip markers, string-or-list pin mappings and broken
entries.
"""

import json

import pytest

from pinout_mcp.pinout_core.adapters.json_chips import JSONChipSource
from pinout_mcp.pinout_core.models import (
    AdditionalPin,
    NamedPin,
    SKIPPED_PIN,
    SKIPPED_PIN_WITH_NUMBER,
)


def load(payload):
    source = JSONChipSource(json.dumps(payload))
    source.fetch_raw_data()
    return source.get_chips()


def test_basic_chip_parsing():
    """Test basic chip transformation from JSON."""
    chips = load({
        "chips": [
            {
                "name": "74HC595",
                "manufacturer": "TI",
                "notes": "Shift register",
                "variants": [{"name": "74HC595\nDIP-16", "pins": ["Q_B", "Q_C"]}],
                "data": [
                    {"name": "Data", "color": "#26B9E4", "pins": {"Data Out": ["Q_B", "Q_C"]}},
                ],
            }
        ]
    })

    assert len(chips) == 1
    chip = chips[0]

    assert chip.name == "74HC595"
    assert chip.manufacturer == "TI"
    assert chip.notes == "Shift register"
    assert chip.variants[0].name == "74HC595\nDIP-16"
    assert chip.variants[0].package == "dual"
    assert chip.variants[0].pins == [NamedPin("Q_B"), NamedPin("Q_C")]
    assert chip.data[0].pins == {"Data Out": ("Q_B", "Q_C")}
    assert chip.data[0].default_hidden is False

    print("[PASS] Basic chip parsing test passed")


def test_bare_array_root():
    chips = load([{"name": "A", "variants": [{"pins": ["X", "Y"]}]}])
    assert [chip.name for chip in chips] == ["A"]


def test_skip_markers():
    chips = load([{
        "name": "SOT",
        "variants": [{"pins": ["A", None, {"skipped": True}, {"skipped": True, "numbered": True}]}],
    }])

    assert chips[0].variants[0].pins == [
        NamedPin("A"), SKIPPED_PIN, SKIPPED_PIN, SKIPPED_PIN_WITH_NUMBER,
    ]


def test_single_pin_name_becomes_tuple():
    chips = load([{
        "name": "A",
        "variants": [{"pins": ["X", "Y"]}],
        "data": [{"name": "G", "pins": {"one": "X", "two": ["X", "Y"]}}],
    }])

    assert chips[0].data[0].pins == {"one": ("X",), "two": ("X", "Y")}


def test_camel_and_snake_case_fields():
    chips = load([
        {
            "name": "CAMEL",
            "variants": [{"pins": ["A", "B"], "additionalPins": [{"description": "Pad", "pin": "B"}]}],
            "data": [{"name": "G", "defaultHidden": True, "pins": {}}],
        },
        {
            "name": "SNAKE",
            "variants": [{"pins": ["A", "B"], "additional_pins": [{"description": "Pad", "pin": "A"}]}],
            "data": [{"name": "G", "default_hidden": True, "pins": {}}],
        },
    ])

    assert chips[0].variants[0].additional_pins == [AdditionalPin("Pad", "B")]
    assert chips[1].variants[0].additional_pins == [AdditionalPin("Pad", "A")]
    assert all(chip.data[0].default_hidden for chip in chips)
    assert all(chip.default_visible_groups() == [] for chip in chips)


def test_pin_color_overrides():
    chips = load([{
        "name": "A",
        "pins": {"EN": {"color": "#00ff00"}, "X": {}},
        "variants": [{"pins": ["EN", "X"]}],
    }])

    assert chips[0].pin_colors() == {"EN": "#00ff00"}


def test_unknown_package_is_kept():
    """Layout rejects unknown packages per variant; the source keeps them."""
    chips = load([{"name": "A", "variants": [{"package": "triple", "pins": ["X"]}]}])
    assert chips[0].variants[0].package == "triple"


def test_invalid_chips_are_skipped(caplog):
    chips = load([
        {"variants": [{"pins": ["A", "B"]}]},
        {"name": "NO_VARIANTS", "variants": []},
        {"name": "DUPLICATE", "variants": [{"pins": ["A", "B"]}],
         "data": [{"name": "G", "pins": {}}, {"name": "G", "pins": {}}]},
        {"name": "EMPTY_PIN", "variants": [{"pins": ["A", ""]}]},
        {"name": "BAD_SLOT", "variants": [{"pins": ["A", {"foo": 1}]}]},
        "not a chip",
        {"name": "GOOD", "variants": [{"pins": ["A", "B"]}]},
    ])

    assert [chip.name for chip in chips] == ["GOOD"]
    assert "NO_VARIANTS" in caplog.text
    assert "DUPLICATE" in caplog.text


def test_invalid_json():
    source = JSONChipSource("{not json")

    with pytest.raises(ValueError, match="Invalid JSON format"):
        source.fetch_raw_data()


def test_invalid_roots():
    with pytest.raises(ValueError):
        JSONChipSource('"just a string"').fetch_raw_data()

    with pytest.raises(ValueError, match="'chips' must be an array"):
        JSONChipSource('{"chips": {}}').fetch_raw_data()


def test_get_chips_before_fetch():
    source = JSONChipSource("[]")

    with pytest.raises(RuntimeError, match="fetch_raw_data"):
        source.get_chips()


def test_fetch_is_idempotent():
    source = JSONChipSource('[{"name": "A", "variants": [{"pins": ["X", "Y"]}]}]')
    source.fetch_raw_data()
    source.fetch_raw_data()

    assert len(source.get_chips()) == 1
    assert len(source.get_chips()) == 1


def test_from_file(tmp_path):
    path = tmp_path / "chips.json"
    path.write_text('{"chips": [{"name": "A", "variants": [{"pins": ["X", "Y"]}]}]}')

    source = JSONChipSource.from_file(str(path))
    source.fetch_raw_data()

    assert source.get_chips()[0].name == "A"


def test_non_object_entries_are_skipped(caplog):
    """Entries of the wrong JSON type skip their chip instead of aborting the load."""
    good = {"name": "GOOD", "variants": [{"pins": ["A", "B"]}]}
    chips = load([
        good,
        {"name": "BAD_VARIANT", "variants": ["not-an-object"]},
        {"name": "BAD_OPTIONS", "pins": {"A": "red"}, "variants": [{"pins": ["A", "B"]}]},
        {"name": "BAD_OPTION_MAP", "pins": ["A"], "variants": [{"pins": ["A", "B"]}]},
        {"name": "BAD_GROUP", "variants": [{"pins": ["A", "B"]}], "data": ["ADC"]},
        {"name": "BAD_PAD", "variants": [{"pins": ["A", "B"], "additionalPins": ["GND"]}]},
    ])

    assert [chip.name for chip in chips] == ["GOOD"]
    for name in ("BAD_VARIANT", "BAD_OPTIONS", "BAD_OPTION_MAP", "BAD_GROUP", "BAD_PAD"):
        assert name in caplog.text


def test_empty_additional_pin_is_skipped(caplog):
    chips = load([
        {"name": "EMPTY_PAD", "variants": [{"pins": ["A", "B"], "additionalPins": [{"description": "Pad", "pin": ""}]}]},
        {"name": "GOOD", "variants": [{"pins": ["A", "B"]}]},
    ])

    assert [chip.name for chip in chips] == ["GOOD"]
    assert "EMPTY_PAD" in caplog.text
