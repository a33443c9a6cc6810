"""2D vector primitives used by the placement services.

All functions are pure and operate on immutable ``Point`` values.
Degenerate inputs have defined results instead of raising:

- ``normalize`` of a zero vector is the zero vector.
- ``project_clamped`` onto a zero-length segment is the segment start.
"""

from __future__ import annotations

import math

from ..value_objects import Point

__all__ = [
    "ORIGIN",
    "add",
    "angle_degrees",
    "distance",
    "distance_to_segment",
    "magnitude",
    "normalize",
    "perpendicular",
    "project_clamped",
    "scale",
    "subtract",
]

ORIGIN = Point(0.0, 0.0)


def add(a: Point, b: Point) -> Point:
    return Point(a.x + b.x, a.y + b.y)


def subtract(a: Point, b: Point) -> Point:
    return Point(a.x - b.x, a.y - b.y)


def scale(v: Point, factor: float) -> Point:
    return Point(v.x * factor, v.y * factor)


def magnitude(v: Point) -> float:
    return math.sqrt(v.x * v.x + v.y * v.y)


def normalize(v: Point) -> Point:
    """Return the unit vector of ``v``, or the zero vector if ``|v| == 0``."""
    length = magnitude(v)
    if length == 0:
        return ORIGIN
    return Point(v.x / length, v.y / length)


def perpendicular(v: Point) -> Point:
    """Left-hand normal of ``v`` (rotated 90 degrees counter-clockwise)."""
    return Point(-v.y, v.x)


def distance(a: Point, b: Point) -> float:
    """Euclidean distance between two points."""
    dx = b.x - a.x
    dy = b.y - a.y
    return math.sqrt(dx * dx + dy * dy)


def angle_degrees(start: Point, end: Point) -> float:
    """Angle of the segment start->end in degrees, in (-180, 180]."""
    return math.atan2(end.y - start.y, end.x - start.x) * (180 / math.pi)


def project_clamped(p: Point, seg_start: Point, seg_end: Point) -> Point:
    """Project ``p`` onto a segment, clamping to the segment's span.

    The projection parameter is measured in distance along the segment and
    clamped to ``[0, segment_length]``.

    Args:
        p: Point to project.
        seg_start: Segment start.
        seg_end: Segment end.

    Returns:
        Closest point on the segment. ``seg_start`` if the segment has
        zero length.
    """
    line = subtract(seg_end, seg_start)
    length = magnitude(line)
    if length == 0:
        return seg_start

    direction = Point(line.x / length, line.y / length)
    offset = subtract(p, seg_start)
    projection = offset.x * direction.x + offset.y * direction.y
    clamped = max(0.0, min(length, projection))

    return Point(
        seg_start.x + direction.x * clamped,
        seg_start.y + direction.y * clamped,
    )


def distance_to_segment(p: Point, seg_start: Point, seg_end: Point) -> float:
    """Shortest distance from ``p`` to any point of the segment."""
    return distance(p, project_clamped(p, seg_start, seg_end))
