"""
Abstract chip source interface for the Pinout Diagram Generator.

This module defines the contract that every chip data source must
implement to feed chip definitions to the core library. The core never
knows whether chips come from bundled Python data, a JSON file or
somewhere else.
"""

from abc import ABC, abstractmethod
from typing import List

from .models import ChipDefinition


class ChipSource(ABC):
    """
    Abstract base class for chip definition sources.

    Implementation Notes:
        - fetch_raw_data() must be idempotent (safe to call multiple times)
        - get_chips() can be called multiple times after fetch_raw_data()
          without re-fetching
        - Chips must be returned in source order; that order is the
          display order
        - Layout-level problems (odd pin counts, unknown packages) are not
          the source's concern; they surface per variant at render time
    """

    @abstractmethod
    def fetch_raw_data(self) -> None:
        """
        Load chip data from the source (module import, file read, ...).

        Raises:
            Exception: Implementation-specific exceptions for missing files,
                      parsing errors, etc.
        """
        pass

    @abstractmethod
    def get_chips(self) -> List[ChipDefinition]:
        """
        Return the chip definitions loaded by fetch_raw_data().

        Returns:
            List of ChipDefinition objects in source order. Empty list if
            the source has no chips.

        Raises:
            RuntimeError: If called before fetch_raw_data()
        """
        pass
