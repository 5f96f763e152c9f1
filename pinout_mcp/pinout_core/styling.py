"""
Pin-name badge styling.

Pin names are classified into semantic categories (power rails, ground,
crystal, reset, ...) by exact, case-sensitive membership in fixed alias
tables. A per-pin color declared on the chip always wins.
"""

from typing import Dict, Optional

from .colors import contrast_color
from .models import PinStyle


POWER_5V_PINS = ("VCC", "VDD", "V5", "5V", "5V0")
POWER_3V3_PINS = ("V33", "3V3", "VDDIO")
POWER_CORE_PINS = ("V18", "1V8", "V11", "1V1", "Vcore")
GROUND_PINS = ("GND", "VSS", "AGND")
CRYSTAL_PINS = ("XI", "XO", "XI*", "XO*")
RESET_PINS = ("RST", "RSTn", "RES", "RESn", "RUN")
TEST_PINS = ("TST",)
NO_CONNECT_PIN = "nc"

CATEGORY_CUSTOM = "custom"
CATEGORY_POWER_5V = "power_5v"
CATEGORY_POWER_3V3 = "power_3v3"
CATEGORY_POWER_CORE = "power_core"
CATEGORY_GROUND = "ground"
CATEGORY_CRYSTAL = "crystal"
CATEGORY_RESET = "reset"
CATEGORY_TEST = "test"
CATEGORY_NO_CONNECT = "no_connect"
CATEGORY_DEFAULT = "default"

# (category, aliases, background) in priority order
PIN_CATEGORIES = (
    (CATEGORY_POWER_5V, POWER_5V_PINS, "red"),
    (CATEGORY_POWER_3V3, POWER_3V3_PINS, "#d00000"),
    (CATEGORY_POWER_CORE, POWER_CORE_PINS, "#700000"),
    (CATEGORY_GROUND, GROUND_PINS, "black"),
    (CATEGORY_CRYSTAL, CRYSTAL_PINS, "#ff8000"),
    (CATEGORY_RESET, RESET_PINS, "#40c000"),
    (CATEGORY_TEST, TEST_PINS, "#404040"),
)


def classify_pin_name(pin_name: str, overrides: Optional[Dict[str, str]] = None) -> PinStyle:
    """
    Derive the badge style of a pin name.

    Priority (first match wins):
    1. Explicit per-pin color from the chip definition
    2. Semantic alias tables (power, ground, crystal, reset, test)
    3. The literal "nc" no-connect token: white fill, dashed border
    4. Default: no forced colors

    Args:
        pin_name: Pin name as authored
        overrides: Mapping of pin name to background color

    Returns:
        PinStyle whose text color is the contrast color of the background
    """
    if overrides and pin_name in overrides:
        color = overrides[pin_name]
        return PinStyle(CATEGORY_CUSTOM, color, contrast_color(color))

    for category, aliases, color in PIN_CATEGORIES:
        if pin_name in aliases:
            return PinStyle(category, color, contrast_color(color))

    if pin_name == NO_CONNECT_PIN:
        return PinStyle(CATEGORY_NO_CONNECT, "white", contrast_color("white"), border_style="dashed")

    return PinStyle(CATEGORY_DEFAULT)
