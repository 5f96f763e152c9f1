"""
Color helpers for pin and tag badges.

Colors are authored as CSS-style strings (named colors such as "red" or
hex values such as "#26B9E4"); matplotlib's color converter parses both.
"""

import math
from typing import Optional

from matplotlib.colors import to_rgb

BRIGHTNESS_THRESHOLD = 125


def brightness(color: str) -> int:
    """
    Perceived brightness of a color on a 0-255 scale.

    Uses the YIQ weighting (R*299 + G*587 + B*114) / 1000, rounded half up.

    Raises:
        ValueError: If the color string cannot be parsed
    """
    red, green, blue = (channel * 0xFF for channel in to_rgb(color))
    return math.floor((red * 299 + green * 587 + blue * 114) / 1000 + 0.5)


def contrast_color(color: Optional[str] = None, default: str = "white") -> str:
    """
    Pick black or white text for a badge background.

    Args:
        color: Background color; `default` is used when None
        default: Background assumed when no color is given

    Returns:
        "black" for bright backgrounds (brightness > 125), else "white"
    """
    if color is None:
        color = default
    return "black" if brightness(color) > BRIGHTNESS_THRESHOLD else "white"
