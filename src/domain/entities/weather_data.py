"""Weather data entity."""

import math
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Dict, Mapping, Optional, Union

from ..exceptions import InvalidInputError


@dataclass(frozen=True)
class DailyWeather:
    """Represents one day of forecast temperatures."""

    date: date
    temp_max_c: float  # Celsius
    temp_min_c: float  # Celsius
    district: Optional[str] = None

    @property
    def mean_temp(self) -> float:
        return (self.temp_max_c + self.temp_min_c) / 2

    def growing_degree_days(self, base_temp_c: float) -> float:
        """Thermal units for this day, never negative."""
        return max(0.0, self.mean_temp - base_temp_c)

    def validate(self) -> None:
        if not (math.isfinite(self.temp_max_c) and math.isfinite(self.temp_min_c)):
            raise InvalidInputError(f"Non-finite temperature on {self.date.isoformat()}")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "DailyWeather":
        """Create DailyWeather from ``{date, temp_max_c, temp_min_c}`` (ISO date string)."""
        try:
            return cls(
                date=parse_date(data["date"]),
                temp_max_c=float(data["temp_max_c"]),
                temp_min_c=float(data["temp_min_c"]),
                district=data.get("district"),
            )
        except KeyError as e:
            raise InvalidInputError(f"Weather entry missing field {e}") from e
        except InvalidInputError:
            raise
        except (TypeError, ValueError) as e:
            raise InvalidInputError(f"Invalid weather entry {dict(data)}: {e}") from e

    def to_dict(self) -> Dict[str, Any]:
        return {
            "date": self.date.isoformat(),
            "temp_max_c": self.temp_max_c,
            "temp_min_c": self.temp_min_c,
            "district": self.district,
        }


def parse_date(value: Union[str, date, datetime]) -> date:
    """Parse a ``YYYY-MM-DD`` string (or pass a date through)."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value))
    except ValueError as e:
        raise InvalidInputError(f"Invalid date '{value}', expected YYYY-MM-DD") from e
