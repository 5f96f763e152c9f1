"""
JSON chip source for the Pinout Diagram Generator.

This adapter turns chip definitions authored as JSON into the unified data
model. Field names follow the authoring format (camelCase); snake_case
spellings are accepted as well.

Field Mapping Summary:
    Chip:
        - name → name (required)
        - manufacturer, notes → manufacturer, notes
        - pins {pinName: {color}} → pins (PinOptions)
        - variants → variants (at least one)
        - data → data (function groups, unique names)

    Variant:
        - name (string or list of strings) → name
        - package ("dual" or "quad") → package
        - pins → pins, where each entry is
            "PA0"                              → NamedPin("PA0")
            null or {"skipped": true}          → SKIPPED_PIN
            {"skipped": true, "numbered": true} → SKIPPED_PIN_WITH_NUMBER
        - additionalPins [{description, pin}] → additional_pins

    Function group:
        - name, color → name, color
        - defaultHidden → default_hidden
        - pins {label: pinName | [pinName, ...]} → pins (tuples)

The expected JSON root:
    {
      "chips": [
        {
          "name": "74HC595",
          "variants": [{"pins": ["Q_B", "Q_C", ..., "VCC"]}],
          "data": [
            {"name": "Data", "color": "#26B9E4",
             "pins": {"Data Out": ["Q_A", "Q_B"]}}
          ]
        }
      ]
    }

A bare JSON array of chips is accepted as well.
"""

import json
import logging
from typing import Any, Dict, List, Optional

from ..interfaces import ChipSource
from ..models import (
    AdditionalPin,
    ChipData,
    ChipDefinition,
    ChipVariant,
    PinOptions,
    PinSlot,
    SKIPPED_PIN,
    SKIPPED_PIN_WITH_NUMBER,
    to_pin_slot,
)

logger = logging.getLogger(__name__)


def _field(data: Dict[str, Any], camel: str, snake: str, default=None):
    if camel in data:
        return data[camel]
    return data.get(snake, default)


class JSONChipSource(ChipSource):
    """
    Chip source backed by JSON text.

    Usage:
        >>> with open('chips.json', 'r') as f:
        >>>     source = JSONChipSource(f.read())
        >>> source.fetch_raw_data()
        >>> chips = source.get_chips()
    """

    def __init__(self, json_data: str):
        """
        Initialize the source with JSON data.

        Args:
            json_data: JSON string containing chip definitions
        """
        self._raw_json = json_data
        self._chip_entries: Optional[List[Dict[str, Any]]] = None
        self._ready = False

    @classmethod
    def from_file(cls, path: str) -> "JSONChipSource":
        """Create a source from a JSON file on disk."""
        with open(path, 'r', encoding='utf-8') as f:
            return cls(f.read())

    def fetch_raw_data(self) -> None:
        """
        Parse the JSON data and validate the root structure.

        Raises:
            ValueError: If the JSON is malformed or the root is neither an
                        object with a "chips" array nor an array
        """
        try:
            parsed = json.loads(self._raw_json)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON format: {e}")

        if isinstance(parsed, dict):
            entries = parsed.get("chips", [])
        elif isinstance(parsed, list):
            entries = parsed
        else:
            raise ValueError("JSON root must be an object or an array")

        if not isinstance(entries, list):
            raise ValueError("'chips' must be an array")

        self._chip_entries = entries
        self._ready = True

    def get_chips(self) -> List[ChipDefinition]:
        """
        Transform the parsed entries into ChipDefinition objects.

        Entries that cannot be transformed are skipped with a warning so
        that one broken chip does not hide the others.

        Raises:
            RuntimeError: If called before fetch_raw_data()
        """
        if not self._ready or self._chip_entries is None:
            raise RuntimeError("Must call fetch_raw_data() before get_chips()")

        chips = []
        for entry in self._chip_entries:
            try:
                chips.append(self._transform_chip(entry))
            except (ValueError, TypeError, KeyError) as e:
                name = entry.get("name", "UNKNOWN") if isinstance(entry, dict) else "UNKNOWN"
                logger.warning("Failed to load chip %s: %s", name, e)

        return chips

    def _transform_chip(self, entry: Dict[str, Any]) -> ChipDefinition:
        if not isinstance(entry, dict):
            raise ValueError("Chip entry must be an object")

        name = entry.get("name")
        if not name:
            raise ValueError("Chip missing required 'name' field")

        variants = [self._transform_variant(each) for each in entry.get("variants", [])]
        if not variants:
            raise ValueError(f"Chip '{name}' must have at least one variant")

        groups = [self._transform_group(each) for each in entry.get("data", [])]
        seen = set()
        for group in groups:
            if group.name in seen:
                raise ValueError(f"Chip '{name}' has duplicate function group '{group.name}'")
            seen.add(group.name)

        raw_options = entry.get("pins") or {}
        if not isinstance(raw_options, dict):
            raise ValueError(f"Chip '{name}' pin options must be an object")

        pin_options = {}
        for pin_name, options in raw_options.items():
            if not isinstance(options, dict):
                raise ValueError(f"Options of pin '{pin_name}' must be an object")
            pin_options[pin_name] = PinOptions(color=options.get("color"))

        return ChipDefinition(
            name=name,
            variants=variants,
            data=groups,
            manufacturer=entry.get("manufacturer"),
            notes=entry.get("notes"),
            pins=pin_options,
        )

    def _transform_variant(self, entry: Dict[str, Any]) -> ChipVariant:
        if not isinstance(entry, dict):
            raise ValueError("Variant entry must be an object")

        additional = [
            AdditionalPin(description=each["description"], pin=each["pin"])
            for each in _field(entry, "additionalPins", "additional_pins", [])
        ]
        return ChipVariant(
            pins=[self._transform_slot(each) for each in entry.get("pins", [])],
            name=entry.get("name"),
            # Unknown package names are kept; layout rejects them per variant
            package=entry.get("package") or "dual",
            additional_pins=additional,
        )

    def _transform_slot(self, value: Any) -> PinSlot:
        """
        Map an authored pin entry onto a PinSlot.

        Examples:
            >>> _transform_slot("PA0")
            NamedPin(name='PA0')
            >>> _transform_slot(None)
            SkippedPin()
            >>> _transform_slot({"skipped": True, "numbered": True})
            SkippedPinWithNumber()
        """
        if value is None:
            return SKIPPED_PIN
        if isinstance(value, dict):
            if not value.get("skipped"):
                raise ValueError(f"Unsupported pin entry: {value!r}")
            return SKIPPED_PIN_WITH_NUMBER if value.get("numbered") else SKIPPED_PIN
        return to_pin_slot(value)

    def _transform_group(self, entry: Dict[str, Any]) -> ChipData:
        if not isinstance(entry, dict):
            raise ValueError("Function group entry must be an object")
        if not entry.get("name"):
            raise ValueError("Function group missing required 'name' field")
        return ChipData(
            name=entry["name"],
            pins=dict(entry.get("pins", {})),
            color=entry.get("color"),
            default_hidden=bool(_field(entry, "defaultHidden", "default_hidden", False)),
        )
