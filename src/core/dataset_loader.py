"""Load reference data (ports, vessels, travel styles, multipliers) from disk."""

import json
from pathlib import Path
from typing import Optional, Union

from pydantic import ValidationError

from src.models.schema import ReferenceData
from src.config.settings import get_settings
from src.config.logging_config import get_logger
from src.config.messages import ERROR_REFERENCE_DATA_INVALID

logger = get_logger(__name__)


class ReferenceDataError(ValueError):
    """Raised when a reference data file cannot be turned into ReferenceData."""


class ReferenceDataLoader:
    """Load operator-edited reference data from JSON files.

    All methods are static. The loaded ReferenceData is frozen; callers
    load it once at start-up and pass it to the quote engine.
    """

    @staticmethod
    def load_from_json(json_path: Union[str, Path]) -> ReferenceData:
        """
        Load reference data from a JSON file.

        Args:
            json_path: Path to JSON file with keys ``ports``, ``vessel_classes``,
                ``travel_styles``, ``location_multipliers``, ``style_multipliers``

        Returns:
            ReferenceData built from the file

        Raises:
            FileNotFoundError: If the file does not exist
            ReferenceDataError: If the file is not valid JSON or fails validation
        """
        json_path = Path(json_path)
        if not json_path.exists():
            raise FileNotFoundError(f"Reference data file not found: {json_path}")

        logger.info(f"Loading reference data from: {json_path}")

        try:
            with open(json_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            logger.error(f"{ERROR_REFERENCE_DATA_INVALID}: {json_path}: {e}")
            raise ReferenceDataError(f"{ERROR_REFERENCE_DATA_INVALID}: {json_path}: {e}") from e

        return ReferenceDataLoader.load_from_dict(data, source=str(json_path))

    @staticmethod
    def load_from_dict(data: dict, source: str = "<dict>") -> ReferenceData:
        """
        Build reference data from an already-parsed mapping.

        Args:
            data: Parsed reference data mapping
            source: Label used in log and error messages

        Returns:
            ReferenceData built from the mapping

        Raises:
            ReferenceDataError: If the mapping fails validation
        """
        try:
            reference_data = ReferenceData.model_validate(data)
        except ValidationError as e:
            logger.error(f"{ERROR_REFERENCE_DATA_INVALID}: {source}")
            logger.debug(f"Validation errors: {e}")
            raise ReferenceDataError(f"{ERROR_REFERENCE_DATA_INVALID}: {source}: {e}") from e

        logger.info(
            f"Loaded {len(reference_data.ports)} ports, "
            f"{len(reference_data.vessel_classes)} vessel classes, "
            f"{len(reference_data.travel_styles)} travel styles "
            f"(version {reference_data.version})"
        )
        return reference_data

    @staticmethod
    def get_default_path() -> Path:
        """Get default path to the reference data file.

        Returns:
            Path object pointing to reference data JSON file from config.
        """
        project_dir = Path(__file__).parent.parent.parent
        settings = get_settings()
        return settings.get_reference_data_path(project_dir)

    @staticmethod
    def load_default() -> Optional[ReferenceData]:
        """
        Load reference data from the default location.

        Returns:
            ReferenceData if the file exists, None otherwise
        """
        default_path = ReferenceDataLoader.get_default_path()
        if default_path.exists():
            return ReferenceDataLoader.load_from_json(default_path)
        logger.warning(f"No reference data file at {default_path}")
        return None
