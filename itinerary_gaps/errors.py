"""Typed errors for itinerary gap detection.

Temporal oddities in item content (inverted ranges, overlaps) are never
errors. These types cover the function boundary and raw-record loading.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class ItineraryError(Exception):
    """Base error for the itinerary domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class ItineraryInputError(ItineraryError):
    """The detector was called with something other than a list of items."""


@dataclass
class ItemFormatError(ItineraryError):
    """A raw record could not be turned into an itinerary item.

    Attributes:
        item_id: Identifier of the offending record, when it had one
    """

    item_id: str = ""
