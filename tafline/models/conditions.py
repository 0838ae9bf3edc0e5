"""Effective-conditions models: merged snapshot plus per-group provenance."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum

from tafline.models.amendment import ForecastAmendment, SkyLayer, Visibility, Wind, WindShear


class FieldGroup(StrEnum):
    WIND = "wind"
    VISIBILITY = "visibility"
    CLOUDS = "clouds"
    ALTIMETER = "altimeter"
    WEATHER = "weather"


@dataclass(frozen=True)
class ConditionsSnapshot:
    wind: Wind | None = None
    wind_shear: WindShear | None = None
    visibility: Visibility | None = None
    sky_layers: tuple[SkyLayer, ...] = ()
    weather: str | None = None
    altimeter: float | None = None

    def group_present(self, group: FieldGroup) -> bool:
        return group_present(self, group)


def group_present(obj: ConditionsSnapshot | ForecastAmendment, group: FieldGroup) -> bool:
    """Whether ``obj`` states anything for ``group``.

    Works for both snapshots and amendments since they share slot names.
    """
    if group == FieldGroup.WIND:
        return obj.wind is not None or obj.wind_shear is not None
    if group == FieldGroup.VISIBILITY:
        return obj.visibility is not None
    if group == FieldGroup.CLOUDS:
        return len(obj.sky_layers) > 0
    if group == FieldGroup.ALTIMETER:
        return obj.altimeter is not None
    if group == FieldGroup.WEATHER:
        return bool(obj.weather)
    raise ValueError(f"Unknown field group: {group}")


@dataclass(frozen=True)
class EffectiveConditions:
    instant: datetime
    fields: ConditionsSnapshot
    sources: dict[FieldGroup, ForecastAmendment] = field(default_factory=dict)
    contributors: tuple[ForecastAmendment, ...] = ()


@dataclass(frozen=True)
class NoData:
    """No amendment covers ``instant``. Not an error, and not calm conditions."""

    instant: datetime
