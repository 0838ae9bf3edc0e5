"""Timeline models: validity window, row segments, and lane layout."""

from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import StrEnum

from tafline.models.amendment import AmendmentType, ForecastAmendment


@dataclass(frozen=True)
class TimelineWindow:
    valid_from: datetime
    valid_to: datetime

    @property
    def is_valid(self) -> bool:
        return self.valid_from < self.valid_to

    @property
    def duration(self) -> timedelta:
        return self.valid_to - self.valid_from


@dataclass(frozen=True)
class TimelineSegment:
    start: datetime
    end: datetime
    amendment: ForecastAmendment

    @property
    def duration(self) -> timedelta:
        return self.end - self.start

    def contains(self, instant: datetime) -> bool:
        return self.start <= instant <= self.end


@dataclass(frozen=True)
class TimelineRow:
    type: AmendmentType
    segments: tuple[TimelineSegment, ...]


# Display priority, top row first.
ROW_ORDER: tuple[AmendmentType, ...] = (
    AmendmentType.PROBABLE,
    AmendmentType.TEMPORARY,
    AmendmentType.BECOMING,
    AmendmentType.BASE,
)


@dataclass(frozen=True)
class LaneEntry:
    segment: TimelineSegment
    lane: int


@dataclass(frozen=True)
class LaneAssignment:
    lane_count: int
    entries: tuple[LaneEntry, ...]


@dataclass(frozen=True)
class SegmentPosition:
    left_pct: float
    width_pct: float


class SolarEventKind(StrEnum):
    SUNRISE = "sunrise"
    SUNSET = "sunset"


@dataclass(frozen=True)
class SolarEvent:
    time: datetime
    kind: SolarEventKind


@dataclass(frozen=True)
class SolarMarker:
    event: SolarEvent
    ratio: float
