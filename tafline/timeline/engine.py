"""ForecastTimeline: one forecast product bound to config and a clock."""

import logging
from collections.abc import Iterable
from datetime import UTC, datetime

from tafline.config.schema import EngineConfig
from tafline.models.amendment import AmendmentType, ForecastAmendment
from tafline.models.common import Clock, utc_now
from tafline.models.conditions import EffectiveConditions, NoData
from tafline.models.timeline import (
    LaneAssignment,
    SegmentPosition,
    SolarEvent,
    SolarMarker,
    TimelineRow,
    TimelineWindow,
)
from tafline.timeline.labels import row_title
from tafline.timeline.lanes import assign_lanes
from tafline.timeline.positioning import (
    clamp_instant,
    segment_position,
    solar_markers,
)
from tafline.timeline.resolver import resolve_effective
from tafline.timeline.row_builder import build_rows

logger = logging.getLogger(__name__)


class ForecastTimeline:
    """Read-only view over one forecast product's amendments.

    Nothing is cached: every call recomputes from the inputs, so callers
    that query on every pointer move should throttle on their side.
    """

    def __init__(
        self,
        amendments: Iterable[ForecastAmendment],
        window: TimelineWindow | None,
        config: EngineConfig | None = None,
        clock: Clock = utc_now,
    ):
        self.amendments = tuple(amendments)
        self.window = window
        self.config = config or EngineConfig()
        self.clock = clock

    def rows(self) -> list[TimelineRow]:
        return build_rows(self.amendments, self.window)

    def lanes(self) -> dict[AmendmentType, LaneAssignment]:
        """Lane layout for every row, keyed by row type."""
        return {row.type: assign_lanes(row.segments) for row in self.rows()}

    def title(self, row: TimelineRow) -> str:
        return row_title(row.type, self.config.timeline.row_titles)

    def effective_at(self, instant: datetime) -> EffectiveConditions | NoData:
        return resolve_effective(self.amendments, instant)

    def current_conditions(self) -> EffectiveConditions | NoData:
        """Effective conditions at the clock's current instant.

        With ``live.clamp_to_window`` the instant is pulled into the
        validity window first, so a product that is not yet valid shows its
        opening conditions and an expired one its closing conditions.
        Naive product times are read as UTC, and the clock is matched to them.
        """
        now = self._match_product_tz(self.clock())
        if (
            self.config.live.clamp_to_window
            and self.window is not None
            and self.window.is_valid
        ):
            clamped = clamp_instant(now, self.window)
            if clamped != now:
                logger.debug("Clamped live instant %s to %s", now, clamped)
            now = clamped
        return self.effective_at(now)

    def _match_product_tz(self, now: datetime) -> datetime:
        if self.window is not None:
            reference = self.window.valid_from
        elif self.amendments:
            reference = self.amendments[0].valid_from
        else:
            return now

        if reference.tzinfo is None and now.tzinfo is not None:
            return now.astimezone(UTC).replace(tzinfo=None)
        if reference.tzinfo is not None and now.tzinfo is None:
            return now.replace(tzinfo=UTC)
        return now

    def positions(self, row: TimelineRow) -> list[SegmentPosition]:
        if self.window is None:
            return []
        return [
            segment_position(
                segment, self.window, self.config.timeline.min_segment_width_pct
            )
            for segment in row.segments
        ]

    def markers(self, events: Iterable[SolarEvent]) -> list[SolarMarker]:
        if self.window is None:
            return []
        return solar_markers(events, self.window)
