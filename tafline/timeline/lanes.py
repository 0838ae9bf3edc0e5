"""Lane assignment: greedy interval partitioning of one row's segments."""

from collections.abc import Sequence
from datetime import datetime

from tafline.models.timeline import LaneAssignment, LaneEntry, TimelineSegment


def assign_lanes(segments: Sequence[TimelineSegment]) -> LaneAssignment:
    """Place overlapping segments on separate lanes, using as few as possible.

    Segments are visited by (start, end, input position); each goes to the
    first lane that is free by its start, or opens a new lane. Touching
    segments (one ends exactly when the next starts) share a lane.

    Returns:
        LaneAssignment with entries in input order. An empty input uses
        zero lanes.
    """
    order = sorted(
        range(len(segments)),
        key=lambda i: (segments[i].start, segments[i].end, i),
    )

    lane_ends: list[datetime] = []
    lanes: dict[int, int] = {}
    for i in order:
        segment = segments[i]
        lane = next(
            (n for n, end in enumerate(lane_ends) if end <= segment.start), None
        )
        if lane is None:
            lane = len(lane_ends)
            lane_ends.append(segment.end)
        else:
            lane_ends[lane] = segment.end
        lanes[i] = lane

    return LaneAssignment(
        lane_count=len(lane_ends),
        entries=tuple(
            LaneEntry(segment=segment, lane=lanes[i])
            for i, segment in enumerate(segments)
        ),
    )
