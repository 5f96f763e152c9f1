"""
Core data models for the Pinout Diagram Generator.

This module provides the data structures describing a chip (its package
variants, pin sequence and function groups) and the transient structures
derived from them on every render pass. Chip definitions are normalized
here, at the data-model boundary, so the resolution and layout code never
has to re-check the shape of the authored data.
"""

import copy
from dataclasses import dataclass, field, replace
from typing import Dict, List, Optional, Sequence, Tuple, Union


PACKAGE_DUAL = "dual"
PACKAGE_QUAD = "quad"

PIN_KIND_NORMAL = "normal"
PIN_KIND_SKIPPED = "skipped"


@dataclass(frozen=True)
class NamedPin:
    """
    A package position occupied by a physical pin.

    Attributes:
        name: Pin name as printed in the datasheet (e.g., "PA0", "VCC")
    """
    name: str

    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name:
            raise ValueError(f"Pin name must be a non-empty string, got {self.name!r}")


@dataclass(frozen=True)
class SkippedPin:
    """A package position without a physical pin that consumes no number."""


@dataclass(frozen=True)
class SkippedPinWithNumber:
    """A package position without a physical pin that still uses up a number."""


SKIPPED_PIN = SkippedPin()
SKIPPED_PIN_WITH_NUMBER = SkippedPinWithNumber()

PinSlot = Union[NamedPin, SkippedPin, SkippedPinWithNumber]


def to_pin_slot(value) -> PinSlot:
    """
    Normalize an authored pin entry into a PinSlot.

    Plain strings become NamedPin; the skip markers pass through unchanged.

    Raises:
        ValueError: For empty strings or values that are not pin slots
    """
    if isinstance(value, (NamedPin, SkippedPin, SkippedPinWithNumber)):
        return value
    if isinstance(value, str):
        return NamedPin(value)
    raise ValueError(f"Unsupported pin slot value: {value!r}")


def ensure_list(value) -> List:
    """Wrap a single value into a list, leaving lists and tuples as lists."""
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


@dataclass
class PinOptions:
    """
    Per-pin presentation overrides declared on a chip.

    Attributes:
        color: Background color for the pin name badge (named or hex)
    """
    color: Optional[str] = None


@dataclass
class AdditionalPin:
    """
    A pin outside the main sequential numbering (e.g., an exposed pad).

    Attributes:
        description: Free text shown next to the pin (e.g., "Bottom Pad")
        pin: Pin name, resolved like any other pin (e.g., "GND")
    """
    description: str
    pin: str

    def __post_init__(self):
        if not isinstance(self.pin, str) or not self.pin:
            raise ValueError(f"Additional pin '{self.description}' needs a pin name, got {self.pin!r}")


@dataclass
class ChipVariant:
    """
    A specific physical package form of a chip.

    Attributes:
        pins: Pin slots in physical order, starting at pin 1. Strings are
              accepted and converted to NamedPin.
        name: Name, or list of names, of the chips sold in this package.
              Each name may span several lines; the first is the title.
        package: Package shape, "dual" or "quad"
        additional_pins: Pins rendered beside the package without a number
    """
    pins: List[PinSlot]
    name: Optional[Union[str, List[str]]] = None
    package: str = PACKAGE_DUAL
    additional_pins: List[AdditionalPin] = field(default_factory=list)

    def __post_init__(self):
        self.pins = [to_pin_slot(pin) for pin in self.pins]
        self.additional_pins = [
            extra if isinstance(extra, AdditionalPin) else AdditionalPin(**extra)
            for extra in self.additional_pins
        ]

    def names(self, fallback: str) -> List[str]:
        """Return the variant's names, or [fallback] if it has none."""
        return ensure_list(self.name if self.name is not None else fallback)

    def label(self) -> str:
        """Human-readable identifier used in error messages."""
        if self.name is None:
            return "<unnamed>"
        return " / ".join(name.replace("\n", " ") for name in ensure_list(self.name))


@dataclass
class ChipData:
    """
    A function group: named pin-to-label mappings sharing one color.

    Attributes:
        name: Unique name within the chip; identity for visibility toggling
        pins: Mapping of tag label to the pin names carrying it. A single
              pin name or a list are both accepted; values are stored as
              tuples in declaration order.
        color: Badge color of this group's tags
        default_hidden: True if the group starts out hidden
    """
    name: str
    pins: Dict[str, Tuple[str, ...]]
    color: Optional[str] = None
    default_hidden: bool = False

    def __post_init__(self):
        self.pins = {
            label: tuple(ensure_list(pin_names))
            for label, pin_names in self.pins.items()
        }


@dataclass
class ChipDefinition:
    """
    A complete chip description.

    Attributes:
        name: Generic chip name, not specific to a package variant
        variants: Package variants (at least one)
        data: Function groups, in display order
        manufacturer: Chip manufacturer
        notes: Free-text notes, may contain newlines
        pins: Per-pin presentation overrides keyed by pin name
    """
    name: str
    variants: List[ChipVariant]
    data: List[ChipData] = field(default_factory=list)
    manufacturer: Optional[str] = None
    notes: Optional[str] = None
    pins: Dict[str, PinOptions] = field(default_factory=dict)

    def __post_init__(self):
        self.pins = {
            pin_name: options if isinstance(options, PinOptions) else PinOptions(**options)
            for pin_name, options in self.pins.items()
        }

    def group_names(self) -> List[str]:
        return [group.name for group in self.data]

    def default_visible_groups(self) -> List[str]:
        """Names of the groups that are visible before any user action."""
        return [group.name for group in self.data if not group.default_hidden]

    def pin_colors(self) -> Dict[str, str]:
        """Per-pin color overrides, omitting pins without a color."""
        return {
            pin_name: options.color
            for pin_name, options in self.pins.items()
            if options.color is not None
        }


def copy_and_change_name(chip: ChipDefinition, old_name: str, new_name: str) -> ChipDefinition:
    """
    Copy a chip definition, replacing old_name with new_name in the chip
    name and in every variant name.

    Useful for chip families where several part numbers share one pinout.
    """
    variants = []
    for variant in chip.variants:
        name = variant.name
        if name is not None:
            name = [each.replace(old_name, new_name) for each in ensure_list(name)]
        variants.append(replace(variant, name=name))

    return replace(
        chip,
        name=chip.name.replace(old_name, new_name),
        variants=variants,
        data=copy.deepcopy(chip.data),
    )


# ----------------------------------------------------------------------------
# Derived, per-render structures
# ----------------------------------------------------------------------------

@dataclass(frozen=True)
class Tag:
    """
    All labels one function group assigns to one pin.

    Attributes:
        values: Matching tag labels in group declaration order
        color: Badge background (the group's color)
        contrast_color: Text color readable on the background
    """
    values: Tuple[str, ...]
    color: str
    contrast_color: str


@dataclass(frozen=True)
class PinStyle:
    """
    Badge styling for a pin name.

    Attributes:
        category: Semantic category (see styling module)
        background_color: Badge background, None for the presentation default
        text_color: Contrast color of the background, None when not forced
        border_style: "dashed" for no-connect pins, otherwise None
    """
    category: str
    background_color: Optional[str] = None
    text_color: Optional[str] = None
    border_style: Optional[str] = None


@dataclass(frozen=True)
class PinName:
    text: str
    style: PinStyle


@dataclass(frozen=True)
class ResolvedPin:
    """
    A pin ready for layout.

    Attributes:
        display_number: Printed number, None for skipped and additional pins
        kind: "normal" or "skipped"
        name: Pin name and its styling (None for skipped pins)
        tags: One slot per visible group in traversal order; None where the
              group defines nothing for this pin. Empty for skipped pins.
        num_functions: Number of visible groups (the columns a skipped pin
                       collapses in alignment mode)
    """
    display_number: Optional[int]
    kind: str
    name: Optional[PinName] = None
    tags: Tuple[Optional[Tag], ...] = ()
    num_functions: int = 0

    @property
    def is_skipped(self) -> bool:
        return self.kind == PIN_KIND_SKIPPED

    def present_tags(self) -> List[Tag]:
        """Non-null tags in slot order."""
        return [tag for tag in self.tags if tag is not None]


def pin_names_of(pins: Sequence[PinSlot]) -> List[str]:
    """Names of the physical pins in a slot sequence, in order."""
    return [slot.name for slot in pins if isinstance(slot, NamedPin)]
