"""Tests for window ratios, clamping, segment placement, and solar markers."""

from datetime import UTC, datetime, timedelta

import pytest

from tafline.models.amendment import ForecastAmendment
from tafline.models.timeline import (
    SolarEvent,
    SolarEventKind,
    TimelineSegment,
    TimelineWindow,
)
from tafline.timeline.positioning import (
    clamp_instant,
    instant_at_ratio,
    is_within_window,
    segment_position,
    solar_markers,
    window_ratio,
)

T0 = datetime(2026, 3, 14, 0, 0, tzinfo=UTC)
WINDOW = TimelineWindow(valid_from=T0, valid_to=T0 + timedelta(hours=24))


def _at(hour: float) -> datetime:
    return T0 + timedelta(hours=hour)


def _seg(start: float, end: float) -> TimelineSegment:
    a = ForecastAmendment(valid_from=_at(start), valid_to=_at(end))
    return TimelineSegment(start=a.valid_from, end=a.valid_to, amendment=a)


class TestClampAndRatio:
    def test_clamp_inside(self):
        assert clamp_instant(_at(5), WINDOW) == _at(5)

    def test_clamp_before_and_after(self):
        assert clamp_instant(_at(-3), WINDOW) == _at(0)
        assert clamp_instant(_at(30), WINDOW) == _at(24)

    def test_within_inclusive(self):
        assert is_within_window(_at(0), WINDOW)
        assert is_within_window(_at(24), WINDOW)
        assert not is_within_window(_at(24.5), WINDOW)

    def test_ratio(self):
        assert window_ratio(_at(6), WINDOW) == pytest.approx(0.25)

    def test_ratio_clamped(self):
        assert window_ratio(_at(-6), WINDOW) == 0.0
        assert window_ratio(_at(48), WINDOW) == 1.0

    def test_ratio_zero_length_window(self):
        empty = TimelineWindow(valid_from=T0, valid_to=T0)
        assert window_ratio(T0, empty) == 0.0

    def test_instant_at_ratio(self):
        assert instant_at_ratio(WINDOW, 0.5) == _at(12)
        assert instant_at_ratio(WINDOW, 1.7) == _at(24)
        assert instant_at_ratio(WINDOW, -0.2) == _at(0)

    def test_instant_at_ratio_rejects_nan(self):
        with pytest.raises(ValueError):
            instant_at_ratio(WINDOW, float("nan"))


class TestSegmentPosition:
    def test_inside(self):
        pos = segment_position(_seg(6, 12), WINDOW)
        assert pos.left_pct == pytest.approx(25.0)
        assert pos.width_pct == pytest.approx(25.0)

    def test_outside_window_zero_width(self):
        pos = segment_position(_seg(25, 27), WINDOW)
        assert pos.width_pct == 0.0

    def test_partially_outside_clipped(self):
        pos = segment_position(_seg(-6, 6), WINDOW)
        assert pos.left_pct == 0.0
        assert pos.width_pct == pytest.approx(25.0)

    def test_min_width(self):
        pos = segment_position(_seg(6, 6.01), WINDOW, min_width_pct=0.75)
        assert pos.width_pct == 0.75

    def test_width_capped(self):
        pos = segment_position(_seg(0, 24), WINDOW)
        assert pos.width_pct == 100.0


class TestSolarMarkers:
    def test_events_outside_window_dropped(self):
        events = [
            SolarEvent(time=_at(18), kind=SolarEventKind.SUNSET),
            SolarEvent(time=_at(6), kind=SolarEventKind.SUNRISE),
            SolarEvent(time=_at(30), kind=SolarEventKind.SUNRISE),
        ]
        markers = solar_markers(events, WINDOW)
        assert [m.event.kind for m in markers] == [
            SolarEventKind.SUNRISE,
            SolarEventKind.SUNSET,
        ]
        assert markers[0].ratio == pytest.approx(0.25)
        assert markers[1].ratio == pytest.approx(0.75)

    def test_malformed_window(self):
        bad = TimelineWindow(valid_from=_at(5), valid_to=_at(1))
        events = [SolarEvent(time=_at(3), kind=SolarEventKind.SUNRISE)]
        assert solar_markers(events, bad) == []
