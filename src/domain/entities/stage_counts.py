"""Stage counts entity."""

import logging
import math
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Mapping, Tuple, Union

from ..exceptions import InvalidInputError
from .stage import Stage, FRUIT_STAGES

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StageCounts:
    """Snapshot of populations per ripeness stage, as reported by the classifier.

    Missing stages count as 0. Stage names the system does not recognise are
    dropped on parsing and remembered in ``ignored`` so callers can report them.
    """

    counts: Dict[Stage, float] = field(default_factory=dict)
    ignored: Tuple[str, ...] = ()

    @classmethod
    def from_mapping(
        cls, mapping: Mapping[Union[str, Stage], Any], strict: bool = False
    ) -> "StageCounts":
        """
        Create StageCounts from a ``{stage_name: count}`` mapping.

        Args:
            mapping: Stage names (or Stage members) to counts
            strict: Raise on unknown stage names instead of ignoring them

        Returns:
            StageCounts entity
        """
        counts: Dict[Stage, float] = {}
        ignored = []
        for key, value in mapping.items():
            stage = _parse_stage(key)
            if stage is None:
                if strict:
                    raise InvalidInputError(f"Unknown stage: {key}")
                ignored.append(str(key))
                continue
            counts[stage] = counts.get(stage, 0.0) + _parse_count(stage.value, value)

        if ignored:
            logger.warning(f"Ignoring unrecognised stages: {', '.join(ignored)}")
        return cls(counts=counts, ignored=tuple(ignored))

    @classmethod
    def from_stage_list(
        cls, stages: Iterable[Mapping[str, Any]], strict: bool = False
    ) -> "StageCounts":
        """Create StageCounts from ``[{"stage": ..., "count": ...}]`` rows, summing repeats."""
        merged: Dict[str, float] = {}
        for row in stages:
            try:
                name, count = row["stage"], row["count"]
            except KeyError as e:
                raise InvalidInputError(f"Stage row missing field {e}: {row}") from e
            key = str(name).strip().lower()
            merged[key] = merged.get(key, 0.0) + _parse_count(key, count)
        return cls.from_mapping(merged, strict=strict)

    def get(self, stage: Stage) -> float:
        return self.counts.get(stage, 0.0)

    @property
    def total_fruit(self) -> float:
        """Total fruit population (flowers excluded)."""
        return sum(self.get(s) for s in FRUIT_STAGES)

    @property
    def mature(self) -> float:
        return self.get(Stage.MATURE)

    def validate(self) -> None:
        """Reject negative or non-finite populations."""
        for stage, value in self.counts.items():
            if not math.isfinite(value):
                raise InvalidInputError(f"Count for '{stage.value}' is not finite: {value}")
            if value < 0:
                raise InvalidInputError(f"Count for '{stage.value}' is negative: {value}")

    def to_dict(self) -> Dict[str, float]:
        return {s.value: self.get(s) for s in Stage}


def _parse_stage(key: Union[str, Stage]):
    if isinstance(key, Stage):
        return key
    try:
        return Stage(str(key).strip().lower())
    except ValueError:
        return None


def _parse_count(stage, value: Any) -> float:
    if isinstance(value, bool):
        raise InvalidInputError(f"Count for '{stage}' must be numeric, got {value!r}")
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise InvalidInputError(f"Count for '{stage}' must be numeric, got {value!r}") from e
