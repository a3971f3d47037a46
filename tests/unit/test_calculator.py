"""Unit tests for the estimate calculator."""

from datetime import date

import pytest
from src.config.settings import Settings
from src.core.calculator import QuoteCalculator
from src.models.query_models import QuoteRequest


def make_request(**overrides) -> QuoteRequest:
    params = {
        "port_id": "haifa",
        "vessel_class": "Luxury Catamaran",
        "passenger_count": 8,
        "sail_date": None,
        "travel_style_id": "sunset",
    }
    params.update(overrides)
    return QuoteRequest(**params)


class TestQuoteCalculator:
    """Test QuoteCalculator class."""

    @pytest.fixture
    def calculator(self, sample_reference_data, default_settings):
        """Create calculator with sample reference data."""
        return QuoteCalculator(sample_reference_data, default_settings)

    def test_haifa_catamaran_sunset(self, calculator):
        """5400 x 1.0 x 1.02 = 5508, rounded to 5510."""
        breakdown = calculator.calculate(make_request())

        assert breakdown.raw_total == pytest.approx(5508.0)
        assert breakdown.estimate == 5510
        assert calculator.compute_estimate(make_request()) == 5510

    def test_guests_over_capacity(self, calculator):
        """Two guests over a capacity of 12 add 640."""
        breakdown = calculator.calculate(make_request(passenger_count=14))

        assert breakdown.excess_guests == 2
        assert breakdown.guest_premium == 640
        assert breakdown.raw_total == pytest.approx(6148.0)
        assert breakdown.estimate == 6150

    def test_limassol_superyacht_executive_july(self, calculator):
        """11800 x 1.18 x 1.18 x 1.15 = 18894.868, rounded to 18890."""
        request = make_request(
            port_id="limassol",
            vessel_class="Mediterranean Superyacht",
            passenger_count=10,
            sail_date=date(2025, 7, 12),
            travel_style_id="executive",
        )
        breakdown = calculator.calculate(request)

        assert breakdown.seasonal_factor == 1.15
        assert breakdown.raw_total == pytest.approx(18894.868)
        assert breakdown.estimate == 18890

    def test_jaffa_monohull_culinary(self, calculator):
        request = make_request(
            port_id="jaffa",
            vessel_class="Performance Monohull",
            passenger_count=6,
            travel_style_id="culinary",
        )
        # 4200 x 1.08 x 1.12 = 5080.32
        assert calculator.compute_estimate(request) == 5080

    def test_unknown_port_uses_neutral_factor(self, calculator):
        """An unknown port id falls back to a 1.0 location factor."""
        breakdown = calculator.calculate(make_request(port_id="eilat"))

        assert breakdown.location_factor == 1.0
        assert breakdown.estimate == 5510

    def test_unknown_style_uses_neutral_factor(self, calculator):
        breakdown = calculator.calculate(make_request(travel_style_id="regatta"))

        assert breakdown.style_factor == 1.0
        assert breakdown.estimate == 5400

    def test_missing_style_uses_default_style(self, calculator):
        """No travel style means the first style (sunset, 1.02)."""
        breakdown = calculator.calculate(make_request(travel_style_id=None))

        assert breakdown.style_factor == 1.02
        assert breakdown.estimate == 5510

    def test_missing_vessel_returns_no_estimate(self, calculator):
        assert calculator.calculate(make_request(vessel_class=None)) is None
        assert calculator.compute_estimate(make_request(vessel_class=None)) == 0

    def test_unknown_vessel_returns_no_estimate(self, calculator):
        assert calculator.compute_estimate(make_request(vessel_class="Rowing Boat")) == 0

    def test_idempotent(self, calculator):
        request = make_request(passenger_count=15, sail_date=date(2025, 6, 1))
        assert calculator.compute_estimate(request) == calculator.compute_estimate(request)

    def test_premium_grows_in_fixed_steps(self, calculator):
        """Each guest above capacity adds exactly 320."""
        estimates = [
            calculator.compute_estimate(make_request(passenger_count=count))
            for count in range(12, 17)
        ]

        assert estimates[0] == 5510
        for previous, current in zip(estimates, estimates[1:]):
            assert current - previous == 320

    def test_guests_within_capacity_do_not_change_price(self, calculator):
        estimates = {
            calculator.compute_estimate(make_request(passenger_count=count))
            for count in (2, 8, 12)
        }
        assert estimates == {5510}

    @pytest.mark.parametrize("passengers", [0, -3])
    def test_zero_or_negative_passengers_are_priced(self, calculator, passengers):
        """The formula is applied to any integer without raising."""
        breakdown = calculator.calculate(make_request(passenger_count=passengers))

        assert breakdown.excess_guests == 0
        assert breakdown.estimate == 5510

    @pytest.mark.parametrize(
        "month,factor",
        [(5, 1.0), (6, 1.15), (7, 1.15), (8, 1.15), (9, 1.0), (1, 1.0)],
    )
    def test_pricing_season_band(self, calculator, month, factor):
        breakdown = calculator.calculate(make_request(sail_date=date(2025, month, 15)))
        assert breakdown.seasonal_factor == factor

    def test_may_is_not_summer_priced(self, calculator):
        assert calculator.compute_estimate(make_request(sail_date=date(2025, 5, 10))) == 5510

    def test_august_is_summer_priced(self, calculator):
        # 5400 x 1.02 x 1.15 = 6334.2
        assert calculator.compute_estimate(make_request(sail_date=date(2025, 8, 10))) == 6330

    def test_estimate_is_multiple_of_ten(self, calculator, sample_reference_data):
        for port in sample_reference_data.ports:
            for vessel in port.vessel_classes:
                for style in sample_reference_data.travel_styles:
                    estimate = calculator.compute_estimate(make_request(
                        port_id=port.id,
                        vessel_class=vessel,
                        travel_style_id=style.id,
                        passenger_count=20,
                        sail_date=date(2025, 7, 1),
                    ))
                    assert estimate > 0
                    assert estimate % 10 == 0

    def test_settings_override_constants(self, sample_reference_data):
        settings = Settings(_env_file=None, excess_guest_premium=500, summer_season_factor=1.2)
        calculator = QuoteCalculator(sample_reference_data, settings)

        request = make_request(passenger_count=13, sail_date=date(2025, 7, 1))
        # 5400 x 1.02 x 1.2 + 500 = 7109.6
        assert calculator.compute_estimate(request) == 7110
