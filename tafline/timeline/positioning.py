"""Place instants and segments on a window as fractions of its duration."""

import math
from collections.abc import Iterable
from datetime import datetime

from tafline.models.timeline import (
    SegmentPosition,
    SolarEvent,
    SolarMarker,
    TimelineSegment,
    TimelineWindow,
)

DEFAULT_MIN_WIDTH_PCT = 0.75


def clamp_instant(instant: datetime, window: TimelineWindow) -> datetime:
    return min(max(instant, window.valid_from), window.valid_to)


def is_within_window(instant: datetime, window: TimelineWindow) -> bool:
    return window.valid_from <= instant <= window.valid_to


def _unclamped_ratio(instant: datetime, window: TimelineWindow) -> float:
    if not window.is_valid:
        return 0.0
    return (instant - window.valid_from) / window.duration


def window_ratio(instant: datetime, window: TimelineWindow) -> float:
    """Fraction of the window elapsed at ``instant``, clamped to [0, 1]."""
    return min(max(_unclamped_ratio(instant, window), 0.0), 1.0)


def instant_at_ratio(window: TimelineWindow, ratio: float) -> datetime:
    """Inverse of window_ratio, e.g. for a pointer position along the track."""
    if not math.isfinite(ratio):
        raise ValueError(f"ratio must be finite, got {ratio}")
    ratio = min(max(ratio, 0.0), 1.0)
    return window.valid_from + window.duration * ratio


def segment_position(
    segment: TimelineSegment,
    window: TimelineWindow,
    min_width_pct: float = DEFAULT_MIN_WIDTH_PCT,
) -> SegmentPosition:
    """Left offset and width of a segment, in percent of the window.

    Segments outside the window get zero width. Visible segments are at
    least ``min_width_pct`` wide so very short groups stay clickable.
    """
    if not window.is_valid:
        return SegmentPosition(left_pct=0.0, width_pct=0.0)
    if segment.end <= window.valid_from or segment.start >= window.valid_to:
        return SegmentPosition(left_pct=0.0, width_pct=0.0)

    start = max(segment.start, window.valid_from)
    end = min(segment.end, window.valid_to)
    left = _unclamped_ratio(start, window) * 100
    raw_width = (end - start) / window.duration * 100
    width = min(100.0, max(raw_width, min_width_pct))
    return SegmentPosition(left_pct=left, width_pct=width)


def solar_markers(
    events: Iterable[SolarEvent], window: TimelineWindow
) -> list[SolarMarker]:
    """Markers for sunrise/sunset events falling inside the window."""
    markers = [
        SolarMarker(event=event, ratio=window_ratio(event.time, window))
        for event in events
        if window.is_valid and is_within_window(event.time, window)
    ]
    markers.sort(key=lambda m: m.event.time)
    return markers
