"""Unit tests for model utility functions."""

from datetime import date

import pytest
from src.models.utils import (
    sail_month,
    seasonal_factor,
    is_peak_advisory_month,
    excess_guests,
    round_half_up,
)


class TestRoundHalfUp:
    """Test rounding to the nearest ten."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (5508, 5510),
            (5504.9, 5500),
            (5505, 5510),
            (6145, 6150),
            (6148, 6150),
            (0, 0),
            (4.99, 0),
            (-14, -10),
            (-15, -10),
            (-16, -20),
        ],
    )
    def test_round_to_ten(self, value, expected):
        assert round_half_up(value) == expected

    def test_custom_unit(self):
        assert round_half_up(1249, 100) == 1200
        assert round_half_up(1250, 100) == 1300

    def test_returns_int(self):
        assert isinstance(round_half_up(5508.000000001), int)


class TestSeasonRules:
    """Test month-based season helpers."""

    def test_sail_month(self):
        assert sail_month(date(2025, 11, 3)) == 11
        assert sail_month(None) is None

    def test_seasonal_factor(self):
        summer = [6, 7, 8]
        assert seasonal_factor(date(2025, 6, 1), summer, 1.15) == 1.15
        assert seasonal_factor(date(2025, 5, 31), summer, 1.15) == 1.0
        assert seasonal_factor(None, summer, 1.15) == 1.0

    def test_peak_advisory_month(self):
        peak = [4, 5, 6, 7]
        assert is_peak_advisory_month(date(2025, 4, 1), peak) is True
        assert is_peak_advisory_month(date(2025, 8, 1), peak) is False
        assert is_peak_advisory_month(None, peak) is False

    def test_bands_disagree_for_may_and_august(self):
        """The pricing and advisory bands are separate rules."""
        may, august = date(2025, 5, 15), date(2025, 8, 15)
        assert seasonal_factor(may, [6, 7, 8], 1.15) == 1.0
        assert is_peak_advisory_month(may, [4, 5, 6, 7]) is True
        assert seasonal_factor(august, [6, 7, 8], 1.15) == 1.15
        assert is_peak_advisory_month(august, [4, 5, 6, 7]) is False


class TestExcessGuests:
    """Test excess guest count."""

    @pytest.mark.parametrize(
        "passengers,capacity,expected",
        [(14, 12, 2), (12, 12, 0), (2, 12, 0), (0, 12, 0), (-4, 12, 0), (24, 8, 16)],
    )
    def test_excess_guests(self, passengers, capacity, expected):
        assert excess_guests(passengers, capacity) == expected
