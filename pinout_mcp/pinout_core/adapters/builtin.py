"""
Built-in chip source.

Serves the chip definitions bundled in the `pinout_mcp.chips` package.
"""

import copy
from typing import List, Optional

from ..interfaces import ChipSource
from ..models import ChipDefinition


class BuiltinChipSource(ChipSource):
    """
    Chip source for bundled (or explicitly given) chip definitions.

    Args:
        chips: Chips to serve instead of the bundled ones (useful in tests)
    """

    def __init__(self, chips: Optional[List[ChipDefinition]] = None):
        self._override = chips
        self._chips: Optional[List[ChipDefinition]] = None

    def fetch_raw_data(self) -> None:
        """Load the chip list; every call hands out fresh copies."""
        if self._override is not None:
            chips = self._override
        else:
            from ...chips import ALL_CHIPS
            chips = ALL_CHIPS
        self._chips = copy.deepcopy(chips)

    def get_chips(self) -> List[ChipDefinition]:
        if self._chips is None:
            raise RuntimeError("Must call fetch_raw_data() before get_chips()")
        return list(self._chips)
