"""Unit tests for the reference data loader."""

import json

import pytest
from src.core.dataset_loader import ReferenceDataLoader, ReferenceDataError
from src.models.schema import ReferenceData


class TestReferenceDataLoader:
    """Test ReferenceDataLoader class."""

    def test_load_shipped_file(self, reference_data_path):
        reference_data = ReferenceDataLoader.load_from_json(reference_data_path)

        assert isinstance(reference_data, ReferenceData)
        assert [p.id for p in reference_data.ports] == ["jaffa", "haifa", "limassol", "athens"]
        assert len(reference_data.vessel_classes) == 5
        assert reference_data.default_travel_style.id == "sunset"
        assert reference_data.location_factor("limassol") == 1.18

    def test_shipped_file_matches_fixture(self, reference_data_path, sample_reference_data):
        loaded = ReferenceDataLoader.load_from_json(reference_data_path)

        assert loaded.vessel_classes == sample_reference_data.vessel_classes
        assert loaded.travel_styles == sample_reference_data.travel_styles
        assert loaded.location_multipliers == sample_reference_data.location_multipliers
        assert loaded.style_multipliers == sample_reference_data.style_multipliers

    def test_load_accepts_string_path(self, reference_data_path):
        assert ReferenceDataLoader.load_from_json(str(reference_data_path)).version == "2025"

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            ReferenceDataLoader.load_from_json(tmp_path / "missing.json")

    def test_malformed_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{ports: [", encoding="utf-8")

        with pytest.raises(ReferenceDataError):
            ReferenceDataLoader.load_from_json(path)

    def test_invalid_content(self, tmp_path, reference_data_path):
        data = json.loads(reference_data_path.read_text(encoding="utf-8"))
        data["style_multipliers"]["sunset"] = -1
        path = tmp_path / "invalid.json"
        path.write_text(json.dumps(data), encoding="utf-8")

        with pytest.raises(ReferenceDataError):
            ReferenceDataLoader.load_from_json(path)

    def test_load_from_dict(self):
        reference_data = ReferenceDataLoader.load_from_dict({
            "travel_styles": [{"id": "sunset", "label": "Sunset celebration"}],
        })
        assert reference_data.ports == ()

    def test_load_default(self):
        reference_data = ReferenceDataLoader.load_default()
        assert reference_data is not None
        assert reference_data.get_port("haifa") is not None
