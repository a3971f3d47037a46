"""Script to print a voyage quote from the command line."""

import argparse
import sys
from pathlib import Path

# Add project root to path (scripts/ -> project root)
sys.path.insert(0, str(Path(__file__).parent.parent))

from pydantic import ValidationError

from src.config.env_loader import load_environment_variables

load_environment_variables(Path(__file__).parent.parent)

from src.config.settings import get_settings
from src.config.messages import ERROR_INVALID_SAIL_DATE, STATUS_NO_ADVISORIES
from src.core.quote_engine import QuoteEngine
from src.core.selection import reconcile_vessel_selection
from src.models.query_models import QuoteRequest


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Quote a voyage")
    parser.add_argument("--port", required=True, help="Departure port id, e.g. haifa")
    parser.add_argument("--vessel", default=None, help="Vessel class name (defaults to the port's first)")
    parser.add_argument("--passengers", type=int, default=None, help="Number of guests")
    parser.add_argument("--date", default=None, help="Sail date, YYYY-MM-DD")
    parser.add_argument("--style", default=None, help="Travel style id, e.g. sunset")
    return parser


def main(argv=None) -> int:
    """Print estimate and advisories for the given parameters."""
    args = build_parser().parse_args(argv)
    settings = get_settings()
    engine = QuoteEngine()

    vessel = reconcile_vessel_selection(engine.reference_data, args.port, args.vessel)
    if args.vessel and vessel != args.vessel:
        print(f"'{args.vessel}' does not sail from '{args.port}', using: {vessel}")

    passengers = args.passengers if args.passengers is not None else settings.default_passengers
    try:
        request = QuoteRequest(
            port_id=args.port,
            vessel_class=vessel,
            passenger_count=passengers,
            sail_date=args.date,
            travel_style_id=args.style,
        )
    except ValidationError:
        print(f"Error: {ERROR_INVALID_SAIL_DATE}")
        return 2

    result = engine.quote(request)

    print("=" * 60)
    print(f"Estimate: {settings.currency_symbol}{result.estimate:,} ({settings.default_currency})")
    print("=" * 60)
    for line in result.advisories or [STATUS_NO_ADVISORIES]:
        print(f"- {line}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
