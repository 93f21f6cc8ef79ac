"""Forecast output entities."""

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, List, Optional

from .growth_stage import GrowthStage
from .weather_data import parse_date


@dataclass(frozen=True)
class DailyForecastPoint:
    """Cumulative ready-to-harvest mass on one simulated day."""

    date: date
    ready_kg: float
    gdd_cum: float
    gdd_day: float = 0.0
    mature_count: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "date": self.date.isoformat(),
            "ready_kg": self.ready_kg,
            "gdd_cum": self.gdd_cum,
            "gdd_day": self.gdd_day,
            "mature_count": self.mature_count,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DailyForecastPoint":
        return cls(
            date=parse_date(data["date"]),
            ready_kg=float(data["ready_kg"]),
            gdd_cum=float(data.get("gdd_cum", 0.0)),
            gdd_day=float(data.get("gdd_day", 0.0)),
            mature_count=float(data.get("mature_count", 0.0)),
        )


@dataclass(frozen=True)
class HarvestTask:
    """Mass to pick on one day."""

    date: date
    harvest_kg: float

    def to_dict(self) -> Dict[str, Any]:
        return {"date": self.date.isoformat(), "harvest_kg": self.harvest_kg}


@dataclass(frozen=True)
class HarvestWindow:
    """First and last day with a scheduled harvest."""

    start: date
    end: date

    @property
    def days(self) -> int:
        """Inclusive calendar span."""
        return (self.end - self.start).days + 1

    def to_dict(self) -> Dict[str, str]:
        return {"start": self.start.isoformat(), "end": self.end.isoformat()}


@dataclass
class ForecastResult:
    """Aggregate output of one forecast run."""

    yield_now_kg: float
    sellable_kg: float
    daily: List[DailyForecastPoint] = field(default_factory=list)
    harvest_plan: List[HarvestTask] = field(default_factory=list)
    harvest_window: Optional[HarvestWindow] = None
    notes: List[str] = field(default_factory=list)
    growth_stage: Optional[GrowthStage] = None
    revenue: Optional[float] = None
    detections: float = 0.0
    mature_share: float = 0.0

    @property
    def total_harvest_kg(self) -> float:
        return sum(task.harvest_kg for task in self.harvest_plan)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "yield_now_kg": self.yield_now_kg,
            "sellable_kg": self.sellable_kg,
            "daily": [p.to_dict() for p in self.daily],
            "harvest_plan": [t.to_dict() for t in self.harvest_plan],
            "harvest_window": self.harvest_window.to_dict() if self.harvest_window else None,
            "notes": list(self.notes),
            "growth_stage": self.growth_stage.value if self.growth_stage else None,
            "revenue": self.revenue,
            "detections": self.detections,
            "mature_share": self.mature_share,
            "total_harvest_kg": self.total_harvest_kg,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ForecastResult":
        window = data.get("harvest_window")
        stage = data.get("growth_stage")
        return cls(
            yield_now_kg=float(data["yield_now_kg"]),
            sellable_kg=float(data["sellable_kg"]),
            daily=[DailyForecastPoint.from_dict(p) for p in data.get("daily", [])],
            harvest_plan=[
                HarvestTask(parse_date(t["date"]), float(t["harvest_kg"]))
                for t in data.get("harvest_plan", [])
            ],
            harvest_window=(
                HarvestWindow(parse_date(window["start"]), parse_date(window["end"]))
                if window
                else None
            ),
            notes=list(data.get("notes", [])),
            growth_stage=GrowthStage(stage) if stage else None,
            revenue=data.get("revenue"),
            detections=float(data.get("detections", 0.0)),
            mature_share=float(data.get("mature_share", 0.0)),
        )
