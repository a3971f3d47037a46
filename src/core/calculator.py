"""Deterministic voyage estimate calculator."""

from typing import Optional

from src.config.settings import Settings, get_settings
from src.config.logging_config import get_logger
from src.core.dataset_loader import ReferenceDataLoader
from src.models.query_models import EstimateBreakdown, QuoteRequest
from src.models.schema import ReferenceData
from src.models.utils import excess_guests, round_half_up, seasonal_factor

logger = get_logger(__name__)


class QuoteCalculator:
    """Deterministic estimate calculator using static reference data.

    The estimate is

        base_rate * location_factor * style_factor * seasonal_factor
        + excess_guests * excess_guest_premium

    rounded half-up to the nearest rounding unit, exactly once, at the end.

    The calculator never raises for unknown references: an unresolved
    vessel class yields the "no estimate" value 0, and unknown ports or
    travel styles fall back to a neutral 1.0 factor. Passenger counts are
    not range-checked; zero or negative counts simply produce no premium.
    """

    NO_ESTIMATE = 0

    def __init__(
        self,
        reference_data: Optional[ReferenceData] = None,
        settings: Optional[Settings] = None
    ):
        """
        Initialize calculator.

        Args:
            reference_data: ReferenceData (if None, loads from default location)
            settings: Pricing constants (defaults to global settings)
        """
        if reference_data is None:
            reference_data = ReferenceDataLoader.load_default()
            if reference_data is None:
                raise ValueError("No reference data found. Check REFERENCE_DATA_JSON.")

        self.reference_data = reference_data
        self.settings = settings or get_settings()

    def calculate(self, request: QuoteRequest) -> Optional[EstimateBreakdown]:
        """Calculate the estimate together with its intermediate values.

        Args:
            request: QuoteRequest to price

        Returns:
            EstimateBreakdown, or None when no vessel class is selected or
            the vessel class is not in the catalog.
        """
        vessel = self.reference_data.get_vessel_class(request.vessel_class)
        if vessel is None:
            if request.vessel_class is not None:
                logger.warning(f"Unknown vessel class '{request.vessel_class}', no estimate")
            return None

        if self.reference_data.get_port(request.port_id) is None:
            logger.warning(f"Unknown port '{request.port_id}', using neutral location factor")

        style_id = request.travel_style_id or self.reference_data.default_travel_style.id
        location_factor = self.reference_data.location_factor(request.port_id)
        style_factor = self.reference_data.style_factor(style_id)
        season = seasonal_factor(
            request.sail_date,
            self.settings.pricing_season_months,
            self.settings.summer_season_factor,
        )

        extra_guests = excess_guests(request.passenger_count, vessel.capacity)
        guest_premium = extra_guests * self.settings.excess_guest_premium

        raw_total = vessel.base_rate * location_factor * style_factor * season + guest_premium
        estimate = round_half_up(raw_total, self.settings.estimate_rounding_unit)

        return EstimateBreakdown(
            vessel_class=vessel.name,
            base_rate=vessel.base_rate,
            capacity=vessel.capacity,
            location_factor=location_factor,
            style_factor=style_factor,
            seasonal_factor=season,
            excess_guests=extra_guests,
            guest_premium=guest_premium,
            raw_total=raw_total,
            estimate=estimate,
        )

    def compute_estimate(self, request: QuoteRequest) -> int:
        """Return the rounded estimate, or 0 when no vessel class is resolved."""
        breakdown = self.calculate(request)
        if breakdown is None:
            return self.NO_ESTIMATE
        return breakdown.estimate
