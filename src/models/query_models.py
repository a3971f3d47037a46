"""Request and result models exchanged between callers and the quote engine."""

from datetime import date, datetime, timezone
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator


class QuoteRequest(BaseModel):
    """Trip parameters submitted by a caller.

    Created fresh for each computation. The caller is expected to validate
    the passenger range (2-24 in the booking form) and to keep the vessel
    class consistent with the port; the engine applies its formula to
    whatever it receives.

    Attributes:
        port_id: Departure port identifier
        vessel_class: Selected vessel class name, or None when nothing is selected
        passenger_count: Party size (not range-checked here)
        sail_date: Optional calendar date of departure
        travel_style_id: Travel style identifier (None means the default style)
    """
    port_id: str = Field(description="Departure port identifier")
    vessel_class: Optional[str] = Field(None, description="Selected vessel class name")
    passenger_count: int = Field(description="Number of guests")
    sail_date: Optional[date] = Field(None, description="Calendar date of departure")
    travel_style_id: Optional[str] = Field(None, description="Travel style identifier")

    @field_validator("vessel_class", "travel_style_id", mode="before")
    @classmethod
    def _blank_to_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("sail_date", mode="before")
    @classmethod
    def _parse_sail_date(cls, value):
        """Accept dates, datetimes and ISO-8601 strings.

        Timezone-aware datetimes are converted to UTC before the calendar
        date is taken; naive datetimes and plain dates are used as given.
        """
        if value is None:
            return None
        if isinstance(value, str):
            value = value.strip()
            if not value:
                return None
            try:
                return date.fromisoformat(value)
            except ValueError:
                value = datetime.fromisoformat(value)
        if isinstance(value, datetime):
            if value.tzinfo is not None:
                value = value.astimezone(timezone.utc)
            return value.date()
        return value


class EstimateBreakdown(BaseModel):
    """Intermediate values behind a single estimate.

    Attributes:
        vessel_class: Resolved vessel class name
        base_rate: Vessel base rate
        capacity: Vessel rated capacity
        location_factor: Port multiplier applied
        style_factor: Travel style multiplier applied
        seasonal_factor: Seasonal multiplier applied
        excess_guests: Guests above capacity (never negative)
        guest_premium: Surcharge for excess guests
        raw_total: Unrounded total
        estimate: Final rounded estimate
    """
    vessel_class: str
    base_rate: float
    capacity: int
    location_factor: float
    style_factor: float
    seasonal_factor: float
    excess_guests: int
    guest_premium: float
    raw_total: float
    estimate: int


class QuoteResult(BaseModel):
    """Estimate and advisories produced for one request.

    Attributes:
        estimate: Rounded estimate in currency units (0 means "no estimate")
        advisories: Exactly four advisory lines, or empty when no vessel is selected
        breakdown: Intermediate pricing values (None when no vessel is selected)
    """
    estimate: int = 0
    advisories: List[str] = Field(default_factory=list)
    breakdown: Optional[EstimateBreakdown] = None

    @property
    def has_estimate(self) -> bool:
        """True when a vessel class was resolved and the estimate was computed."""
        return self.breakdown is not None
