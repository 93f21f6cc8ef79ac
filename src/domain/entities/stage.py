"""Ripeness stage entities."""

from dataclasses import dataclass
from enum import Enum
from typing import List, Sequence, Tuple

from ..exceptions import InvalidInputError


class Stage(str, Enum):
    """Ripeness stage a fruit (or flower) is classified into."""

    FLOWER = "flower"
    IMMATURE = "immature"
    BREAKER = "breaker"
    RIPENING = "ripening"
    PINK = "pink"
    MATURE = "mature"

    @property
    def is_fruit(self) -> bool:
        """Flowers carry no harvestable mass."""
        return self is not Stage.FLOWER


FRUIT_STAGES: Tuple[Stage, ...] = tuple(s for s in Stage if s.is_fruit)


@dataclass(frozen=True)
class StageTransition:
    """One edge of the ripening pipeline."""

    from_stage: Stage
    to_stage: Stage
    gdd_threshold: float  # thermal units for a full transition

    def __str__(self) -> str:
        return f"{self.from_stage.value}->{self.to_stage.value}"


@dataclass(frozen=True)
class StagePipeline:
    """Ordered, chained list of stage transitions ending in a terminal stage."""

    name: str
    transitions: Tuple[StageTransition, ...]

    def __post_init__(self):
        if not self.transitions:
            raise InvalidInputError(f"Pipeline '{self.name}' has no transitions")
        for prev, nxt in zip(self.transitions, self.transitions[1:]):
            if prev.to_stage != nxt.from_stage:
                raise InvalidInputError(
                    f"Pipeline '{self.name}' is not chained: {prev} then {nxt}"
                )
        for t in self.transitions:
            if not t.gdd_threshold > 0:
                raise InvalidInputError(
                    f"Pipeline '{self.name}': threshold for {t} must be positive"
                )
        if len(set(self.stages)) != len(self.stages):
            raise InvalidInputError(f"Pipeline '{self.name}' visits a stage twice")

    @classmethod
    def from_definition(
        cls, name: str, definition: Sequence[Tuple[str, str, float]]
    ) -> "StagePipeline":
        """Create StagePipeline from (from_stage, to_stage, threshold) rows."""
        try:
            transitions = tuple(
                StageTransition(Stage(src), Stage(dst), float(threshold))
                for src, dst, threshold in definition
            )
        except ValueError as e:
            raise InvalidInputError(f"Invalid pipeline '{name}': {e}") from e
        return cls(name=name, transitions=transitions)

    @property
    def stages(self) -> List[Stage]:
        """All stages in pipeline order, terminal last."""
        return [t.from_stage for t in self.transitions] + [self.terminal_stage]

    @property
    def non_terminal_stages(self) -> List[Stage]:
        return [t.from_stage for t in self.transitions]

    @property
    def terminal_stage(self) -> Stage:
        return self.transitions[-1].to_stage

    @property
    def thresholds(self) -> List[float]:
        return [t.gdd_threshold for t in self.transitions]

    def __str__(self) -> str:
        return self.name
