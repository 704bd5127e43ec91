"""Greedy lane assignment for timeline rendering and overlap detection."""
from __future__ import annotations

from typing import Iterable, Sequence

from .model import Interval, Segment


def pack_lanes(intervals: Iterable[Interval]) -> list[Segment]:
    """Place each interval on the first lane that is free at its start.

    Lanes are scanned in order; a lane is free when its last end time is
    ``<=`` the interval start. The number of lanes used equals the maximum
    number of intervals open at the same instant.
    """
    ordered = sorted(intervals, key=lambda i: i.start_time)
    lane_ends: list[int] = []
    segments: list[Segment] = []

    for interval in ordered:
        placed = -1
        for lane, end in enumerate(lane_ends):
            if end <= interval.start_time:
                lane_ends[lane] = interval.end_time
                placed = lane
                break
        if placed == -1:
            lane_ends.append(interval.end_time)
            placed = len(lane_ends) - 1
        segments.append(Segment(interval=interval, lane=placed))

    return segments


def lane_count(segments: Sequence[Segment]) -> int:
    return max((s.lane + 1 for s in segments), default=0)


def max_concurrency(intervals: Iterable[Interval]) -> int:
    """Maximum number of intervals open at any instant (sweep line)."""
    points: list[tuple[int, int]] = []
    for interval in intervals:
        points.append((interval.start_time, 1))
        points.append((interval.end_time, -1))
    # An end at t sorts before a start at t: half-open intervals touching at t do not overlap.
    points.sort()

    best = current = 0
    for _, delta in points:
        current += delta
        best = max(best, current)
    return best


def overlaps(a: Interval, b: Interval) -> bool:
    return a.start_time < b.end_time and b.start_time < a.end_time


def find_overlaps(intervals: Iterable[Interval]) -> list[tuple[Interval, Interval]]:
    """Pairs of overlapping intervals.

    Runs the packer first: when everything fits on one lane there is nothing
    to report. Otherwise each interval is matched against the earlier-starting
    intervals it collides with.
    """
    segments = pack_lanes(intervals)
    if lane_count(segments) <= 1:
        return []

    conflicts: list[tuple[Interval, Interval]] = []
    for i, seg in enumerate(segments):
        for other in segments[:i]:
            if overlaps(other.interval, seg.interval):
                conflicts.append((other.interval, seg.interval))
    return conflicts
