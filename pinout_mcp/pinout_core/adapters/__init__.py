"""
Chip sources for various data formats.

This module contains ChipSource implementations that turn authored chip
data into the pinout core data model.

Available Sources:
    - BuiltinChipSource: Chip definitions bundled with the package
    - JSONChipSource: Chip definitions authored as JSON
"""

from .builtin import BuiltinChipSource
from .json_chips import JSONChipSource

__all__ = ["BuiltinChipSource", "JSONChipSource"]
