from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class Location:
    """Identifying attributes of the place a snapshot was taken for."""

    name: str
    region: Optional[str] = None
    country: Optional[str] = None
    lat: Optional[float] = None
    lon: Optional[float] = None
    tz_id: Optional[str] = None
    localtime_epoch: Optional[int] = None
    localtime: Optional[str] = None


@dataclass(frozen=True)
class Condition:
    text: str
    icon: Optional[str] = None
    code: Optional[int] = None


@dataclass(frozen=True)
class CurrentConditions:
    """Current conditions as reported by the provider.

    Field names follow the provider's metric/imperial pairs:
    - temperatures in Celsius (``*_c``) and Fahrenheit (``*_f``)
    - wind and gusts in km/h (``*_kph``) and mph (``*_mph``)
    - pressure in millibar (``pressure_mb``) and inches (``pressure_in``)
    - precipitation in millimetres and inches
    """

    condition: Condition
    last_updated_epoch: Optional[int] = None
    last_updated: Optional[str] = None
    temp_c: Optional[float] = None
    temp_f: Optional[float] = None
    is_day: Optional[int] = None
    wind_mph: Optional[float] = None
    wind_kph: Optional[float] = None
    wind_degree: Optional[int] = None
    wind_dir: Optional[str] = None
    pressure_mb: Optional[float] = None
    pressure_in: Optional[float] = None
    precip_mm: Optional[float] = None
    precip_in: Optional[float] = None
    humidity: Optional[int] = None
    cloud: Optional[int] = None
    feelslike_c: Optional[float] = None
    feelslike_f: Optional[float] = None
    windchill_c: Optional[float] = None
    windchill_f: Optional[float] = None
    heatindex_c: Optional[float] = None
    heatindex_f: Optional[float] = None
    dewpoint_c: Optional[float] = None
    dewpoint_f: Optional[float] = None
    vis_km: Optional[float] = None
    vis_miles: Optional[float] = None
    uv: Optional[float] = None
    gust_mph: Optional[float] = None
    gust_kph: Optional[float] = None


@dataclass(frozen=True)
class WeatherSnapshot:
    """Most recently retrieved conditions for one location.

    A snapshot is always fully populated. "No data" is expressed as ``None``
    by whoever would have returned a snapshot.
    """

    location: Location
    current: CurrentConditions

    def __post_init__(self) -> None:
        if not isinstance(self.location, Location):
            raise TypeError("location must be a Location")
        if not isinstance(self.current, CurrentConditions):
            raise TypeError("current must be CurrentConditions")

    def to_dict(self) -> Dict[str, Any]:
        return {"location": asdict(self.location), "current": asdict(self.current)}

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "WeatherSnapshot":
        current = dict(payload["current"])
        condition = Condition(**_known(Condition, current.pop("condition")))
        return cls(
            location=Location(**_known(Location, payload["location"])),
            current=CurrentConditions(condition=condition, **_known(CurrentConditions, current)),
        )


def _known(klass: type, values: Dict[str, Any]) -> Dict[str, Any]:
    names = {f.name for f in fields(klass)}
    return {key: value for key, value in values.items() if key in names and key != "condition"}


__all__ = ["Location", "Condition", "CurrentConditions", "WeatherSnapshot"]
