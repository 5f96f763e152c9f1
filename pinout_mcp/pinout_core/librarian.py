"""
Librarian - State Manager for the Pinout Diagram Generator

This module ties a chip source, the settings controller and the layout
engine together. It caches the chip list until marked dirty and recomputes
layouts on every request; layout is pure and cheap, so no layout cache is
kept.

Key Responsibilities:
- State management with "Nuke and Rebuild" pattern for the chip list
- Chip selection (the display filter)
- Per-chip layout and text rendering with the current settings
"""

import logging
from typing import Dict, Iterable, List, Optional

from . import text_emitter
from .interfaces import ChipSource
from .layout import ChipLayout, layout_chip, variant_names
from .models import ChipDefinition
from .settings import SettingsController

logger = logging.getLogger(__name__)


def select_chips(chips: List[ChipDefinition], requested_names: Iterable[str]) -> List[ChipDefinition]:
    """
    Apply the display filter.

    Args:
        chips: All known chips, in source order
        requested_names: Chip names to show; empty means all

    Returns:
        Matching chips in source order. The order of the request and
        names that match no chip are ignored.
    """
    requested = set(requested_names)
    if not requested:
        return list(chips)
    return [chip for chip in chips if chip.name in requested]


class PinoutLibrarian:
    """
    Central state manager for chip data and rendering.

    Attributes:
        source: ChipSource implementation for data loading
        settings: SettingsController holding the user's choices
        dirty: Flag indicating if the cached chip list needs refresh
        chips: Cached list of all chips, in source order
    """

    def __init__(self, source: ChipSource, settings: Optional[SettingsController] = None):
        """
        Initialize the Librarian with a chip source.

        Args:
            source: Implementation of ChipSource interface
            settings: Settings controller; a default one is created if omitted
        """
        self.source = source
        self.settings = settings if settings is not None else SettingsController()
        self.dirty = True
        self.chips: List[ChipDefinition] = []

    def refresh(self) -> None:
        """
        Nuke and rebuild the chip list if the dirty flag is set.

        Newly seen chips are registered with the settings controller so
        their default-visible groups are known; existing visibility choices
        survive the refresh.

        Raises:
            Exception: Propagates any exceptions from the source
        """
        if not self.dirty:
            return

        self.source.fetch_raw_data()
        self.chips = self.source.get_chips()

        for chip in self.chips:
            self.settings.register_chip(chip)

        logger.debug("Loaded %d chips", len(self.chips))
        self.dirty = False

    def mark_dirty(self) -> None:
        """Force a reload of the chip list on the next query."""
        self.dirty = True

    def get_chip(self, name: str) -> Optional[ChipDefinition]:
        """
        Get a chip by name.

        Returns:
            ChipDefinition if found, None otherwise
        """
        self.refresh()

        for chip in self.chips:
            if chip.name == name:
                return chip

        return None

    def selected_chips(self) -> List[ChipDefinition]:
        """Chips passing the settings' display filter, in source order."""
        self.refresh()
        return select_chips(self.chips, self.settings.chip_filter)

    def show_names(self) -> bool:
        """Chip headers are hidden when exactly one chip is requested."""
        return len(self.settings.chip_filter) != 1

    def layout(self, chip: ChipDefinition) -> ChipLayout:
        """Lay out one chip with a fresh settings snapshot."""
        return layout_chip(chip, self.settings.snapshot(chip), show_name=self.show_names())

    def layouts(self) -> List[ChipLayout]:
        """Lay out every selected chip."""
        return [self.layout(chip) for chip in self.selected_chips()]

    def render(self) -> str:
        """
        Render every selected chip as text.

        Returns:
            Text diagrams separated by blank lines, or a note when the
            filter matches no chip
        """
        layouts = self.layouts()
        if not layouts:
            return "# No chips selected\n"
        return "\n\n".join(text_emitter.emit_chip_text(each) for each in layouts)

    def get_index(self) -> str:
        """
        List every known chip with its manufacturer and variants.

        Format:
            # CHIP INDEX

            - 74HC595 (1 variant)
            - Microchip ATtiny85 (1 variant): ATtiny85 PDIP-8 / SOIC-8
        """
        self.refresh()

        if not self.chips:
            return "# CHIP INDEX\n\n(No chips available)\n"

        lines = ["# CHIP INDEX", ""]
        for chip in self.chips:
            title = " ".join(part for part in (chip.manufacturer, chip.name) if part)
            count = len(chip.variants)
            noun = "variant" if count == 1 else "variants"
            names = [name.replace("\n", " ") for name in variant_names(chip) if name != chip.name]
            if names:
                lines.append(f"- {title} ({count} {noun}): {', '.join(names)}")
            else:
                lines.append(f"- {title} ({count} {noun})")

        return "\n".join(lines)

    def get_stats(self) -> Dict[str, int]:
        """
        Basic statistics about the loaded chips.

        Returns:
            Dictionary with total_chips, total_variants and total_groups
        """
        self.refresh()

        return {
            'total_chips': len(self.chips),
            'total_variants': sum(len(chip.variants) for chip in self.chips),
            'total_groups': sum(len(chip.data) for chip in self.chips),
        }
