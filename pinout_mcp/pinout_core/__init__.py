"""
Pinout Core - Pin Layout and Annotation Engine

This package turns declarative chip descriptions into pinout diagram
layouts: every physical pin at its place around the package body, with its
display number, styled name and the tags of the visible function groups.

Main Components:
    - models: Chip definitions and the derived per-render structures
    - numbering: Display numbers for sequences with skipped pins
    - tags: Function tag resolution and legend
    - styling: Pin-name badge classification
    - layout: Dual and quad package layout engine
    - settings: Visibility snapshot and settings controller
    - interfaces: Abstract chip source (ChipSource)
    - librarian: Chip selection, state management and rendering
    - text_emitter: Plain-text diagrams
    - adapters: Chip sources (built-in data, JSON)

Example Usage:
    from pinout_mcp.pinout_core import PinoutLibrarian
    from pinout_mcp.pinout_core.adapters import BuiltinChipSource

    librarian = PinoutLibrarian(BuiltinChipSource())
    librarian.settings.set_chip_filter(["74HC595"])
    print(librarian.render())
"""

from .models import (
    AdditionalPin,
    ChipData,
    ChipDefinition,
    ChipVariant,
    NamedPin,
    PinOptions,
    ResolvedPin,
    SKIPPED_PIN,
    SKIPPED_PIN_WITH_NUMBER,
    Tag,
    copy_and_change_name,
)
from .colors import contrast_color
from .numbering import compute_display_numbers
from .tags import resolve_pin, resolve_tags
from .styling import classify_pin_name
from .layout import PackageConfigurationError, layout_chip, layout_variant
from .settings import SettingsController, VisibilitySettings
from .interfaces import ChipSource
from .librarian import PinoutLibrarian, select_chips
from .text_emitter import emit_chip_text

__all__ = [
    'AdditionalPin',
    'ChipData',
    'ChipDefinition',
    'ChipVariant',
    'NamedPin',
    'PinOptions',
    'ResolvedPin',
    'SKIPPED_PIN',
    'SKIPPED_PIN_WITH_NUMBER',
    'Tag',
    'copy_and_change_name',
    'contrast_color',
    'compute_display_numbers',
    'resolve_pin',
    'resolve_tags',
    'classify_pin_name',
    'PackageConfigurationError',
    'layout_chip',
    'layout_variant',
    'SettingsController',
    'VisibilitySettings',
    'ChipSource',
    'PinoutLibrarian',
    'select_chips',
    'emit_chip_text',
]
