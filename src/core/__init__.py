"""Core business logic modules."""

from src.core.dataset_loader import ReferenceDataLoader, ReferenceDataError
from src.core.calculator import QuoteCalculator
from src.core.advisory_generator import AdvisoryGenerator
from src.core.selection import allowed_vessel_classes, reconcile_vessel_selection
from src.core.quote_engine import QuoteEngine

__all__ = [
    "ReferenceDataLoader",
    "ReferenceDataError",
    "QuoteCalculator",
    "AdvisoryGenerator",
    "allowed_vessel_classes",
    "reconcile_vessel_selection",
    "QuoteEngine",
]
