"""Generate the advisory lines shown next to a voyage estimate."""

from datetime import date
from typing import List, Optional

from src.config.settings import Settings, get_settings
from src.config.messages import (
    ADVISORY_PRICING,
    ADVISORY_PAIRING,
    ADVISORY_CAPACITY_EXCEEDED,
    ADVISORY_CAPACITY_OK,
    ADVISORY_PEAK_SEASON,
    ADVISORY_OFF_PEAK,
    FALLBACK_STYLE_LABEL,
    FALLBACK_SCENIC_HIGHLIGHT,
)
from src.models.query_models import QuoteRequest
from src.models.schema import ReferenceData, VesselClass
from src.models.utils import is_peak_advisory_month


class AdvisoryGenerator:
    """Build the four advisory lines for a computed estimate.

    Lines are produced in a fixed order (pricing, pairing, capacity,
    seasonal) and each is computed independently of the others. Lookups
    that fail degrade to placeholder text; nothing here raises.

    Note that the seasonal line uses the advisory peak band (April-July by
    default), which is a different rule from the summer pricing band used
    by QuoteCalculator.
    """

    def __init__(self, reference_data: ReferenceData, settings: Optional[Settings] = None):
        self.reference_data = reference_data
        self.settings = settings or get_settings()

    def generate_advisories(
        self,
        port_id: Optional[str],
        vessel_class: Optional[str],
        passenger_count: int,
        sail_date: Optional[date],
        travel_style_id: Optional[str],
        estimate: int
    ) -> List[str]:
        """
        Generate advisories for a quote.

        Args:
            port_id: Departure port identifier
            vessel_class: Selected vessel class name
            passenger_count: Party size
            sail_date: Optional departure date
            travel_style_id: Travel style identifier (None means the default style)
            estimate: Estimate already computed for the same inputs

        Returns:
            Exactly four advisory strings, or an empty list when the vessel
            class is not selected or not in the catalog.
        """
        vessel = self.reference_data.get_vessel_class(vessel_class)
        if vessel is None:
            return []

        return [
            self._pricing_line(estimate),
            self._pairing_line(port_id, travel_style_id),
            self._capacity_line(vessel, passenger_count),
            self._seasonal_line(sail_date),
        ]

    def generate_for(self, request: QuoteRequest, estimate: int) -> List[str]:
        """Generate advisories for a QuoteRequest."""
        return self.generate_advisories(
            port_id=request.port_id,
            vessel_class=request.vessel_class,
            passenger_count=request.passenger_count,
            sail_date=request.sail_date,
            travel_style_id=request.travel_style_id,
            estimate=estimate,
        )

    def _pricing_line(self, estimate: int) -> str:
        return ADVISORY_PRICING.format(
            symbol=self.settings.currency_symbol,
            estimate=f"{estimate:,}",
        )

    def _pairing_line(self, port_id: Optional[str], travel_style_id: Optional[str]) -> str:
        style_id = travel_style_id or self.reference_data.default_travel_style.id
        style = self.reference_data.get_travel_style(style_id)
        port = self.reference_data.get_port(port_id)
        return ADVISORY_PAIRING.format(
            style_label=style.label if style else FALLBACK_STYLE_LABEL,
            scenic_highlight=port.scenic_highlight if port else FALLBACK_SCENIC_HIGHLIGHT,
        )

    def _capacity_line(self, vessel: VesselClass, passenger_count: int) -> str:
        if passenger_count > vessel.capacity:
            return ADVISORY_CAPACITY_EXCEEDED.format(capacity=vessel.capacity)
        return ADVISORY_CAPACITY_OK.format(
            vessel_class=vessel.name.lower(),
            capacity=vessel.capacity,
        )

    def _seasonal_line(self, sail_date: Optional[date]) -> str:
        if is_peak_advisory_month(sail_date, self.settings.advisory_peak_months):
            return ADVISORY_PEAK_SEASON
        return ADVISORY_OFF_PEAK
