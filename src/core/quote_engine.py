"""Quote engine - runs the calculator and advisory generator for one request."""

from typing import Any, Dict, Optional, Union

from src.config.settings import Settings, get_settings
from src.config.logging_config import get_logger
from src.core.advisory_generator import AdvisoryGenerator
from src.core.calculator import QuoteCalculator
from src.core.dataset_loader import ReferenceDataLoader
from src.models.query_models import QuoteRequest, QuoteResult
from src.models.schema import ReferenceData

logger = get_logger(__name__)


class QuoteEngine:
    """Entry point used by callers to price a voyage.

    Pipeline:
    1. Estimate: QuoteCalculator computes the rounded estimate
    2. Advisories: AdvisoryGenerator builds the four lines from the estimate

    When no vessel class is resolved, step 2 is skipped and the result
    carries estimate 0 and no advisories. The engine holds no mutable
    state, so one instance can serve any number of callers.
    """

    def __init__(
        self,
        reference_data: Optional[ReferenceData] = None,
        settings: Optional[Settings] = None
    ):
        """
        Initialize engine.

        Args:
            reference_data: ReferenceData (if None, loads from default location)
            settings: Pricing constants (defaults to global settings)
        """
        if reference_data is None:
            reference_data = ReferenceDataLoader.load_default()
            if reference_data is None:
                raise ValueError("No reference data found. Check REFERENCE_DATA_JSON.")

        settings = settings or get_settings()
        self.reference_data = reference_data
        self.calculator = QuoteCalculator(reference_data, settings)
        self.advisory_generator = AdvisoryGenerator(reference_data, settings)

    def quote(self, request: Union[QuoteRequest, Dict[str, Any]]) -> QuoteResult:
        """
        Price a request and generate its advisories.

        Args:
            request: QuoteRequest, or a mapping with the same keys

        Returns:
            QuoteResult with estimate, advisories and breakdown

        Raises:
            ValidationError: If a mapping cannot be parsed into a QuoteRequest
                (for example a malformed sail_date). A QuoteRequest instance
                is never rejected.
        """
        if not isinstance(request, QuoteRequest):
            request = QuoteRequest.model_validate(request)

        breakdown = self.calculator.calculate(request)
        if breakdown is None:
            logger.debug(f"No vessel class resolved for port '{request.port_id}', no quote")
            return QuoteResult()

        advisories = self.advisory_generator.generate_for(request, breakdown.estimate)
        logger.debug(
            f"Quoted {breakdown.vessel_class} from '{request.port_id}' for "
            f"{request.passenger_count} guests: {breakdown.estimate}"
        )
        return QuoteResult(
            estimate=breakdown.estimate,
            advisories=advisories,
            breakdown=breakdown,
        )
