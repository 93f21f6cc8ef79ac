"""JSON file detection repository implementation."""

import json
import logging
from pathlib import Path
from ...domain.entities.detection_result import DetectionResult
from ...domain.repositories.detection_repository import DetectionRepository

logger = logging.getLogger(__name__)


class JsonDetectionRepository(DetectionRepository):
    """Reads classifier output saved as JSON (``plantType``, ``summary``, ``stages``)."""

    def __init__(self, base_dir: str = ".", strict: bool = False):
        """
        Initialize repository.

        Args:
            base_dir: Directory relative paths are resolved against
            strict: Reject unknown stage names instead of ignoring them
        """
        self.base_dir = Path(base_dir)
        self.strict = strict

    def get_detection(self, detection_id: str) -> DetectionResult:
        """Load a detection result from a JSON file."""
        path = Path(detection_id)
        if not path.is_absolute():
            path = self.base_dir / path
        if not path.exists():
            raise FileNotFoundError(f"Detection file not found: {path}")

        logger.info(f"Loading detection result from {path}")
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            logger.error(f"Invalid JSON in {path}: {e}")
            raise ValueError(f"Invalid detection JSON in {path}: {e}") from e

        result = DetectionResult.from_dict(data, strict=self.strict)
        logger.info(f"Loaded detection: {result}")
        return result
