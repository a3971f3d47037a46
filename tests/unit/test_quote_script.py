"""Unit tests for the command-line quote script."""

from scripts.quote_voyage import main


class TestQuoteScript:
    """Test scripts/quote_voyage.py against the shipped reference data."""

    def test_prints_estimate_and_advisories(self, capsys):
        exit_code = main(["--port", "haifa", "--passengers", "8", "--style", "sunset"])
        output = capsys.readouterr().out

        assert exit_code == 0
        assert "Estimate: ₪5,510" in output
        assert output.count("\n- ") == 4

    def test_vessel_not_sailing_from_port_is_replaced(self, capsys):
        exit_code = main(["--port", "athens", "--vessel", "Luxury Catamaran"])
        output = capsys.readouterr().out

        assert exit_code == 0
        assert "using: Mediterranean Superyacht" in output

    def test_invalid_date(self, capsys):
        exit_code = main(["--port", "haifa", "--date", "tomorrow"])

        assert exit_code == 2
        assert "Error:" in capsys.readouterr().out
