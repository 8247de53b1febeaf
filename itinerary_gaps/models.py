"""Data models for itinerary merge and gap detection."""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import List, Optional, Union

from itinerary_gaps.durations import calculate_duration


class ItemType(str, Enum):
    FLIGHT = "flight"
    TRANSPORT = "transport"
    ACCOMMODATION = "accommodation"


class TransportType(str, Enum):
    CAR = "car"
    TRAIN = "train"
    BUS = "bus"
    FERRY = "ferry"
    OTHER = "other"


class GapSuggestion(str, Enum):
    TRANSPORT = "transport"
    ACCOMMODATION = "accommodation"


class GapSeverity(str, Enum):
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True)
class Location:
    address: str  # address string as entered by the user
    formatted_address: str = ""  # geocoder's formatted address
    city: str = ""
    country: str = ""
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    place_id: str = ""

    def label(self) -> str:
        """Short display name: city when known, otherwise the address."""
        if self.city and self.country:
            return f"{self.city}, {self.country}"
        return self.city or self.address


# ---------------------------------------------------------------------------
# Itinerary items — a tagged union keyed by ``type``
# ---------------------------------------------------------------------------

@dataclass
class Flight:
    id: str
    trip_id: str
    start_datetime: datetime
    end_datetime: datetime
    departure_location: Optional[Location] = None
    arrival_location: Optional[Location] = None
    flight_number: str = ""
    airline: str = ""
    confirmation_number: str = ""
    title: str = ""
    notes: str = ""
    order_index: Optional[int] = None
    type: ItemType = field(default=ItemType.FLIGHT, init=False)


@dataclass
class Transport:
    id: str
    trip_id: str
    start_datetime: datetime
    end_datetime: datetime
    departure_location: Optional[Location] = None
    arrival_location: Optional[Location] = None
    transport_type: TransportType = TransportType.OTHER
    provider: str = ""
    confirmation_number: str = ""
    title: str = ""
    notes: str = ""
    order_index: Optional[int] = None
    type: ItemType = field(default=ItemType.TRANSPORT, init=False)


@dataclass
class Accommodation:
    id: str
    trip_id: str
    start_datetime: datetime  # check-in
    end_datetime: datetime  # check-out
    location: Optional[Location] = None
    name: str = ""
    confirmation_number: str = ""
    title: str = ""
    notes: str = ""
    order_index: Optional[int] = None
    type: ItemType = field(default=ItemType.ACCOMMODATION, init=False)


ItineraryItem = Union[Flight, Transport, Accommodation]

ITEM_CLASSES = {
    ItemType.FLIGHT: Flight,
    ItemType.TRANSPORT: Transport,
    ItemType.ACCOMMODATION: Accommodation,
}


def departure_location(item: ItineraryItem) -> Optional[Location]:
    """Where the traveller is when the item starts."""
    if item.type == ItemType.ACCOMMODATION:
        return item.location
    return item.departure_location


def arrival_location(item: ItineraryItem) -> Optional[Location]:
    """Where the traveller is when the item ends."""
    if item.type == ItemType.ACCOMMODATION:
        return item.location
    return item.arrival_location


def item_label(item: ItineraryItem) -> str:
    """Display label: explicit title, else something derived from the variant."""
    if item.title:
        return item.title
    if item.type == ItemType.FLIGHT:
        name = " ".join(p for p in (item.airline, item.flight_number) if p)
        return name or "Flight"
    if item.type == ItemType.TRANSPORT:
        return item.transport_type.value.capitalize()
    return item.name or "Accommodation"


# ---------------------------------------------------------------------------
# Derived results
# ---------------------------------------------------------------------------

@dataclass
class ItineraryGap:
    """Idle interval between two consecutive items. Never persisted."""
    start_datetime: datetime
    end_datetime: datetime
    duration_hours: float
    previous_item: Optional[ItineraryItem] = None
    next_item: Optional[ItineraryItem] = None
    suggestion: Optional[GapSuggestion] = None
    location_mismatch: bool = False
    severity: GapSeverity = GapSeverity.INFO
    message: str = ""

    @property
    def duration_minutes(self) -> int:
        return calculate_duration(self.start_datetime, self.end_datetime)


@dataclass
class ItineraryView:
    sorted_items: List[ItineraryItem] = field(default_factory=list)
    gaps: List[ItineraryGap] = field(default_factory=list)
