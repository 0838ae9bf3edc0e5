"""Forecast amendment models: a base forecast or one TAF change group."""

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum


class AmendmentType(StrEnum):
    BASE = "BASE"
    FROM = "FM"
    BECOMING = "BECMG"
    TEMPORARY = "TEMPO"
    PROBABLE = "PROB"
    UNKNOWN = "UNKNOWN"


# Lower weight = more general statement; folded first, overridden later.
PRECEDENCE_WEIGHTS: dict[AmendmentType, int] = {
    AmendmentType.BASE: 0,
    AmendmentType.FROM: 0,
    AmendmentType.BECOMING: 1,
    AmendmentType.TEMPORARY: 2,
    AmendmentType.PROBABLE: 3,
}
UNKNOWN_WEIGHT = 4


@dataclass(frozen=True)
class Wind:
    direction: int | None = None  # degrees true
    speed: int | None = None  # knots
    gust: int | None = None
    variable: bool = False


@dataclass(frozen=True)
class WindShear:
    direction: int | None = None
    speed: int | None = None
    height: int | None = None  # feet AGL


@dataclass(frozen=True)
class Visibility:
    horizontal: float | None = None  # statute miles
    horizontal_is_more_than: bool = False
    vertical: int | None = None  # feet


@dataclass(frozen=True)
class SkyLayer:
    cover: str
    base: int | None = None  # feet AGL
    cloud_type: str | None = None


@dataclass(frozen=True)
class ForecastAmendment:
    """One time-bounded forecast statement.

    Every meteorological slot is optional. ``None`` (or an empty
    ``sky_layers``) means the amendment says nothing about that element,
    which is not the same as reporting zero.
    """

    valid_from: datetime
    valid_to: datetime
    type: AmendmentType = AmendmentType.BASE
    probability: int | None = None
    wind: Wind | None = None
    wind_shear: WindShear | None = None
    visibility: Visibility | None = None
    sky_layers: tuple[SkyLayer, ...] = ()
    weather: str | None = None
    altimeter: float | None = None  # inHg
    raw: str = ""

    @property
    def is_valid(self) -> bool:
        return self.valid_from < self.valid_to

    @property
    def is_base(self) -> bool:
        return self.type in (AmendmentType.BASE, AmendmentType.FROM)
