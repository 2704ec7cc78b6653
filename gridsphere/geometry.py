"""Primitive shapes, simple geometric queries and wireframe line generation."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator

from gridsphere.linalg import Matrix4x4, Vector3, transform

SPHERE_SUBDIVISION = 24
GRID_HALF_WIDTH = 2.0
GRID_SUBDIVISION = 10
GRID_AXIS_COLOR = 0x000000FF
GRID_LINE_COLOR = 0xAAAAAAFF


@dataclass(frozen=True)
class Sphere:
    """A sphere given by its centre and radius."""

    center: Vector3
    radius: float


@dataclass(frozen=True)
class Line:
    """An infinite line through ``origin`` along ``diff``."""

    origin: Vector3
    diff: Vector3


@dataclass(frozen=True)
class Ray:
    """A half-line starting at ``origin`` along ``diff``."""

    origin: Vector3
    diff: Vector3


@dataclass(frozen=True)
class Segment:
    """A segment from ``origin`` to ``origin + diff``."""

    origin: Vector3
    diff: Vector3


@dataclass(frozen=True)
class ScreenLine:
    """A line in integer screen coordinates with an RGBA colour (0xRRGGBBAA)."""

    start: tuple[int, int]
    end: tuple[int, int]
    color: int


def project(v1: Vector3, v2: Vector3) -> Vector3:
    """Return the orthogonal projection of ``v1`` onto ``v2``; zero if ``v2`` is zero."""
    length = v2.length()
    if length == 0.0:
        return Vector3()
    return (v1.dot(v2) / length**2) * v2


def closest_point(point: Vector3, segment: Segment) -> Vector3:
    """Return the point on the segment's supporting line closest to ``point``."""
    return segment.origin + project(point - segment.origin, segment.diff)


def is_collision(s1: Sphere, s2: Sphere) -> bool:
    """Return True when the two spheres touch or overlap."""
    distance = (s2.center - s1.center).length()
    return distance <= s1.radius + s2.radius


def _to_screen(
    point: Vector3, view_projection: Matrix4x4, viewport: Matrix4x4
) -> tuple[int, int]:
    screen = transform(transform(point, view_projection), viewport)
    return int(screen.x), int(screen.y)


def sphere_lines(
    sphere: Sphere, view_projection: Matrix4x4, viewport: Matrix4x4, color: int
) -> Iterator[ScreenLine]:
    """Yield the wireframe lines of a sphere, two per latitude/longitude cell."""
    lon_every = 2.0 * math.pi / SPHERE_SUBDIVISION
    lat_every = math.pi / SPHERE_SUBDIVISION
    center, radius = sphere.center, sphere.radius

    def surface(lat: float, lon: float) -> Vector3:
        return Vector3(
            center.x + radius * math.cos(lat) * math.cos(lon),
            center.y + radius * math.sin(lat),
            center.z + radius * math.cos(lat) * math.sin(lon),
        )

    for lat_index in range(SPHERE_SUBDIVISION):
        lat = -math.pi / 2.0 + lat_every * lat_index
        for lon_index in range(SPHERE_SUBDIVISION):
            lon = lon_index * lon_every
            a, b, c = (
                _to_screen(p, view_projection, viewport)
                for p in (
                    surface(lat, lon),
                    surface(lat + lat_every, lon),
                    surface(lat, lon + lon_every),
                )
            )
            yield ScreenLine(a, b, color)
            yield ScreenLine(a, c, color)


def grid_lines(view_projection: Matrix4x4, viewport: Matrix4x4) -> Iterator[ScreenLine]:
    """Yield the lines of a ground grid on the XZ plane; the centre lines are dark."""
    every = GRID_HALF_WIDTH * 2.0 / GRID_SUBDIVISION
    half = GRID_HALF_WIDTH

    def color_for(index: int) -> int:
        return GRID_AXIS_COLOR if index == GRID_SUBDIVISION // 2 else GRID_LINE_COLOR

    for x_index in range(GRID_SUBDIVISION + 1):
        x = -half + x_index * every
        yield ScreenLine(
            _to_screen(Vector3(x, 0.0, half), view_projection, viewport),
            _to_screen(Vector3(x, 0.0, -half), view_projection, viewport),
            color_for(x_index),
        )
    for z_index in range(GRID_SUBDIVISION + 1):
        z = -half + z_index * every
        yield ScreenLine(
            _to_screen(Vector3(half, 0.0, z), view_projection, viewport),
            _to_screen(Vector3(-half, 0.0, z), view_projection, viewport),
            color_for(z_index),
        )