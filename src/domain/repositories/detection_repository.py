"""Detection repository interface."""

from abc import ABC, abstractmethod
from ..entities.detection_result import DetectionResult


class DetectionRepository(ABC):
    """Abstract source of classifier detection results."""

    @abstractmethod
    def get_detection(self, detection_id: str) -> DetectionResult:
        """
        Retrieve a detection result.

        Args:
            detection_id: Identifier or path of the stored classifier output

        Returns:
            DetectionResult entity
        """
        pass
