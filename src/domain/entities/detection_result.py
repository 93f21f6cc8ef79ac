"""Classifier detection result entity."""

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..exceptions import InvalidInputError
from .stage_counts import StageCounts


@dataclass(frozen=True)
class DetectionResult:
    """Stage counts reported by the image classifier for one plant photo."""

    stage_counts: StageCounts
    plant_type: str = "Tomato"
    summary: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], strict: bool = False) -> "DetectionResult":
        """
        Create DetectionResult from classifier output.

        Accepts either ``stages`` (list of ``{stage, count}``) or
        ``stageCounts``/``stage_counts`` (mapping).
        """
        if "stages" in data:
            counts = StageCounts.from_stage_list(data["stages"], strict=strict)
        elif "stageCounts" in data or "stage_counts" in data:
            raw = data.get("stageCounts", data.get("stage_counts"))
            counts = StageCounts.from_mapping(raw, strict=strict)
        else:
            raise InvalidInputError("Detection result has no 'stages' or 'stageCounts'")

        return cls(
            stage_counts=counts,
            plant_type=data.get("plantType", data.get("plant_type", "Tomato")),
            summary=data.get("summary"),
        )

    def __str__(self) -> str:
        return f"{self.plant_type} ({self.stage_counts.total_fruit:g} fruit)"
