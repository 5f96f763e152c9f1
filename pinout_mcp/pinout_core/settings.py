"""
Visibility and display settings.

The SettingsController is the only mutable piece of the system. It owns the
global display preferences and, per chip, the set of visible function
groups. The layout engine never reads it directly: callers take an
immutable VisibilitySettings snapshot and pass it in explicitly.
"""

import logging
from dataclasses import dataclass, replace
from typing import Dict, FrozenSet, Iterable, List, Optional, Set

from .. import config
from .models import ChipDefinition

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class VisibilitySettings:
    """
    Read-only snapshot consumed by one layout pass.

    Attributes:
        align_data: Give every function group its own column
        font_size: Font size for the rendered diagram
        visible_group_names: Names of the function groups shown
    """
    align_data: bool = config.DEFAULT_ALIGN_DATA
    font_size: int = config.DEFAULT_FONT_SIZE
    visible_group_names: FrozenSet[str] = frozenset()

    @classmethod
    def for_chip(cls, chip: ChipDefinition, **kwargs) -> "VisibilitySettings":
        """Snapshot with the chip's default-visible groups."""
        return cls(visible_group_names=frozenset(chip.default_visible_groups()), **kwargs)

    def with_groups(self, names: Iterable[str]) -> "VisibilitySettings":
        return replace(self, visible_group_names=frozenset(names))


class SettingsController:
    """
    Owner of the user-adjustable settings.

    Attributes:
        align_data: Global alignment preference
        font_size: Global font size
        chip_filter: Chip names requested for display (empty = all)
        revision: Incremented on every mutation; consumers re-render when
                  it changes
    """

    def __init__(
        self,
        align_data: bool = config.DEFAULT_ALIGN_DATA,
        font_size: int = config.DEFAULT_FONT_SIZE,
        chip_filter: Optional[Iterable[str]] = None
    ):
        self.align_data = align_data
        self.font_size = font_size
        self.chip_filter: List[str] = list(chip_filter or [])
        self.revision = 0
        self._visible: Dict[str, Set[str]] = {}
        self._known_groups: Dict[str, List[str]] = {}

    def register_chip(self, chip: ChipDefinition) -> None:
        """
        Start tracking a chip with its default-visible groups.

        Registering an already known chip keeps the choices for groups it
        still has, shows its new default-visible groups and forgets groups
        that are gone.
        """
        groups = chip.group_names()
        if chip.name not in self._visible:
            self._visible[chip.name] = set(chip.default_visible_groups())
            self._known_groups[chip.name] = groups
            return

        known = set(self._known_groups[chip.name])
        visible = self._visible[chip.name]
        visible.intersection_update(groups)
        visible.update(name for name in chip.default_visible_groups() if name not in known)
        self._known_groups[chip.name] = groups

    def _groups_of(self, chip_name: str) -> Set[str]:
        if chip_name not in self._visible:
            raise KeyError(f"Chip '{chip_name}' is not registered")
        return self._visible[chip_name]

    def _bump(self) -> None:
        self.revision += 1

    def set_align_data(self, align_data: bool) -> None:
        self.align_data = align_data
        self._bump()

    def set_font_size(self, font_size: int) -> None:
        if font_size <= 0:
            raise ValueError(f"Font size must be positive, got {font_size}")
        self.font_size = font_size
        self._bump()

    def set_chip_filter(self, names: Iterable[str]) -> None:
        self.chip_filter = list(names)
        self._bump()

    def set_group_visible(self, chip_name: str, group_name: str, visible: bool) -> None:
        """
        Show or hide one function group of a chip.

        Unknown group names are ignored with a warning; they can never
        match anything in the chip's data.
        """
        groups = self._groups_of(chip_name)
        if group_name not in self._known_groups[chip_name]:
            logger.warning("Chip '%s' has no function group '%s'", chip_name, group_name)
            return

        if visible:
            groups.add(group_name)
        else:
            groups.discard(group_name)
        self._bump()

    def show_group(self, chip_name: str, group_name: str) -> None:
        self.set_group_visible(chip_name, group_name, True)

    def hide_group(self, chip_name: str, group_name: str) -> None:
        self.set_group_visible(chip_name, group_name, False)

    def toggle_group(self, chip_name: str, group_name: str) -> None:
        visible = group_name in self._groups_of(chip_name)
        self.set_group_visible(chip_name, group_name, not visible)

    def visible_groups(self, chip_name: str) -> FrozenSet[str]:
        return frozenset(self._groups_of(chip_name))

    def snapshot(self, chip: ChipDefinition) -> VisibilitySettings:
        """Immutable settings for one layout pass of `chip`."""
        self.register_chip(chip)
        return VisibilitySettings(
            align_data=self.align_data,
            font_size=self.font_size,
            visible_group_names=self.visible_groups(chip.name),
        )
