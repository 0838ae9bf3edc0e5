"""Timeline row builder: buckets amendments into display rows.

Rows are built fresh on every call. The BASE row (which also holds FM
groups, since an FM group replaces the base forecast outright) is trimmed
wherever a BECMG transition begins, then stretched to cover the window edges.
"""

import logging
from collections.abc import Iterable
from dataclasses import replace
from datetime import datetime

from tafline.models.amendment import AmendmentType, ForecastAmendment
from tafline.models.timeline import (
    ROW_ORDER,
    TimelineRow,
    TimelineSegment,
    TimelineWindow,
)
from tafline.timeline.normalizer import normalize_amendments

logger = logging.getLogger(__name__)


def row_key(amendment_type: AmendmentType) -> AmendmentType | None:
    """Map an amendment type onto the row it is displayed in."""
    if amendment_type in (AmendmentType.BASE, AmendmentType.FROM):
        return AmendmentType.BASE
    if amendment_type in ROW_ORDER:
        return amendment_type
    return None


def build_rows(
    amendments: Iterable[ForecastAmendment],
    window: TimelineWindow | None,
) -> list[TimelineRow]:
    """Build display rows for a forecast product.

    Args:
        amendments: Amendments of one forecast product, in any order.
        window: Overall validity window. A missing or malformed window is
            ignored: segments are then neither clipped nor stretched.

    Returns:
        Non-empty rows in display order (PROB, TEMPO, BECMG, BASE).
    """
    if window is not None and not window.is_valid:
        logger.debug(
            "Ignoring malformed window %s -> %s", window.valid_from, window.valid_to
        )
        window = None

    normalized = normalize_amendments(amendments)

    buckets: dict[AmendmentType, list[TimelineSegment]] = {k: [] for k in ROW_ORDER}
    becoming_starts: list[datetime] = []

    for amendment in normalized:
        key = row_key(amendment.type)
        if key is None:
            logger.debug("No timeline row for %s amendment", amendment.type)
            continue
        if key == AmendmentType.BECOMING:
            becoming_starts.append(amendment.valid_from)
        segment = TimelineSegment(
            start=amendment.valid_from, end=amendment.valid_to, amendment=amendment
        )
        buckets[key].append(segment)

    becoming_starts.sort()
    # Trim on nominal intervals; clipping comes after.
    buckets[AmendmentType.BASE] = _trim_superseded(
        buckets[AmendmentType.BASE], becoming_starts
    )
    for key in ROW_ORDER:
        buckets[key] = [
            clipped
            for clipped in (_clip(s, window) for s in buckets[key])
            if clipped is not None
        ]

    base = buckets[AmendmentType.BASE]
    base.sort(key=lambda s: s.start)
    if window is not None:
        base = _stretch_to_window(base, window, becoming_starts)
    buckets[AmendmentType.BASE] = base

    rows: list[TimelineRow] = []
    for key in ROW_ORDER:
        segments = sorted(buckets[key], key=lambda s: s.start)
        if segments:
            rows.append(TimelineRow(type=key, segments=tuple(segments)))
    return rows


def _clip(
    segment: TimelineSegment, window: TimelineWindow | None
) -> TimelineSegment | None:
    start, end = segment.start, segment.end
    if window is not None:
        start = max(start, window.valid_from)
        end = min(end, window.valid_to)
    if start >= end:
        return None
    if (start, end) == (segment.start, segment.end):
        return segment
    return replace(segment, start=start, end=end)


def _trim_superseded(
    segments: list[TimelineSegment], becoming_starts: list[datetime]
) -> list[TimelineSegment]:
    """Cut each base segment at the first BECMG start strictly inside it.

    A BECMG start equal to the segment's own start leaves it alone: that
    segment already describes the post-transition state.
    """
    if not becoming_starts:
        return list(segments)

    trimmed: list[TimelineSegment] = []
    for segment in segments:
        cutoff = next(
            (t for t in becoming_starts if segment.start < t < segment.end), None
        )
        if cutoff is None:
            trimmed.append(segment)
            continue
        trimmed.append(replace(segment, end=cutoff))
    return trimmed


def _stretch_to_window(
    segments: list[TimelineSegment],
    window: TimelineWindow,
    becoming_starts: list[datetime],
) -> list[TimelineSegment]:
    if not segments:
        return segments

    segments = list(segments)
    first = segments[0]
    if first.start > window.valid_from:
        segments[0] = replace(first, start=window.valid_from)

    last = segments[-1]
    # A later BECMG row segment owns the tail of the timeline.
    owned_by_becoming = any(
        last.start < t < window.valid_to for t in becoming_starts
    )
    if not owned_by_becoming and last.end < window.valid_to:
        segments[-1] = replace(last, end=window.valid_to)
    return segments
