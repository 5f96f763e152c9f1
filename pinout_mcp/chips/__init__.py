"""
Built-in chip definitions.

Every module in this package contributes a `chips` list; ALL_CHIPS joins
them in display order.
"""

from .microchip import chips as microchip
from .other import chips as other

ALL_CHIPS = [
    *other,
    *microchip,
]

__all__ = ["ALL_CHIPS"]
