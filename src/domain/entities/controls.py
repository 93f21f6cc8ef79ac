"""Forecast controls entity."""

import math
from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Mapping

from ..exceptions import InvalidInputError


@dataclass(frozen=True)
class Controls:
    """Farm and model parameters for one forecast run."""

    avg_weight_g: float = 85.0  # grams per fruit
    post_harvest_loss_pct: float = 7.0
    num_plants: int = 10
    forecast_days: int = 14
    gdd_base_c: float = 10.0
    harvest_capacity_kg_day: float = 20.0
    district: str = "Coimbatore"
    stage_model: str = "six_stage"

    @classmethod
    def from_dict(cls, definition: Mapping[str, Any]) -> "Controls":
        """Create Controls from a dictionary, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in definition.items() if k in known})

    def with_overrides(self, **overrides: Any) -> "Controls":
        """Return a copy with the non-None overrides applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})

    def validate(self) -> None:
        """Reject controls the simulator cannot use meaningfully."""
        numeric = {
            "avg_weight_g": self.avg_weight_g,
            "post_harvest_loss_pct": self.post_harvest_loss_pct,
            "num_plants": self.num_plants,
            "forecast_days": self.forecast_days,
            "gdd_base_c": self.gdd_base_c,
            "harvest_capacity_kg_day": self.harvest_capacity_kg_day,
        }
        for name, value in numeric.items():
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise InvalidInputError(f"{name} must be numeric, got {value!r}")
            if not math.isfinite(value):
                raise InvalidInputError(f"{name} must be finite, got {value}")
        for name in ("num_plants", "forecast_days"):
            if not isinstance(numeric[name], int):
                raise InvalidInputError(f"{name} must be a whole number, got {numeric[name]!r}")

        if self.avg_weight_g <= 0:
            raise InvalidInputError("avg_weight_g must be positive")
        if self.num_plants < 0:
            raise InvalidInputError("num_plants must not be negative")
        if self.forecast_days < 1:
            raise InvalidInputError("forecast_days must be at least 1")
        if not 0 <= self.post_harvest_loss_pct <= 100:
            raise InvalidInputError("post_harvest_loss_pct must be within [0, 100]")
        if self.harvest_capacity_kg_day <= 0:
            raise InvalidInputError("harvest_capacity_kg_day must be positive")

    def to_dict(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}
