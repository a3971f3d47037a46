"""Data models for the voyage quote engine."""

from src.models.schema import (
    Port,
    VesselClass,
    TravelStyle,
    ReferenceData,
)
from src.models.query_models import (
    QuoteRequest,
    EstimateBreakdown,
    QuoteResult,
)

__all__ = [
    # Reference data models
    "Port",
    "VesselClass",
    "TravelStyle",
    "ReferenceData",
    # Request/result models
    "QuoteRequest",
    "EstimateBreakdown",
    "QuoteResult",
]
