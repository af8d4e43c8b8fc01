"""
Stage Renderer
==============
Pure mapping from a raindrop (position + stage) to the shapes that draw it.

Why is this file needed?
------------------------
The view only knows how to paint circles, squares and polygons. This module
decides which of them a stage is made of, so the canvas stays free of any
animation logic.

All shapes are centred on the raindrop, outlined with a 1 px stroke and never
filled.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Union

import numpy as np

from raindrops.config import STROKE_WIDTH
from raindrops.model.raindrop import Coordinate, Raindrop, Stage

if TYPE_CHECKING:
    import numpy.typing as npt

    from raindrops.model.field import Field


OCTAGON_RADIUS = 15.0


def _octagon_offsets(radius: float) -> npt.NDArray[np.float64]:
    """Closed ring of 9 points at `radius` on both axes and on both diagonals."""
    angles = np.deg2rad(np.arange(0.0, 360.0, 45.0))
    ring = radius * np.column_stack([np.cos(angles), np.sin(angles)])
    # Snap the axis points to exact values
    ring = np.round(ring, 9)
    return np.vstack([ring, ring[:1]])


OCTAGON_OFFSETS: npt.NDArray[np.float64] = _octagon_offsets(OCTAGON_RADIUS)


@dataclass(frozen=True)
class Circle:
    center: Coordinate
    radius: float
    stroke_width: float = STROKE_WIDTH
    opacity: float = 1.0


@dataclass(frozen=True)
class Square:
    """Axis-aligned square of side `size` centred on `center`."""
    center: Coordinate
    size: float
    stroke_width: float = STROKE_WIDTH
    opacity: float = 1.0

    @property
    def top_left(self) -> tuple[float, float]:
        half = self.size / 2.0
        return self.center.x - half, self.center.y - half


@dataclass(frozen=True, eq=False)
class Polygon:
    """Polyline through absolute (N, 2) points."""
    points: npt.NDArray[np.float64] = field(repr=False)
    stroke_width: float = STROKE_WIDTH
    opacity: float = 1.0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polygon):
            return NotImplemented
        return (
            np.array_equal(self.points, other.points)
            and self.stroke_width == other.stroke_width
            and self.opacity == other.opacity
        )

    __hash__ = None


Shape = Union[Circle, Square, Polygon]
Sprite = tuple[Shape, ...]


def octagon_points(center: Coordinate) -> npt.NDArray[np.float64]:
    """Absolute octagon vertices around `center`."""
    return OCTAGON_OFFSETS + np.array([center.x, center.y], dtype=np.float64)


def render(coord: Coordinate, stage: Stage) -> Sprite:
    """
    Build the sprite for a raindrop at `coord` in `stage`.

    Args:
        coord: Centre of the sprite.
        stage: Life-cycle stage of the raindrop.

    Returns:
        Shapes to draw, in painting order.
    """
    if stage == Stage.STAGE_1:
        return (Circle(coord, 2.0),)
    if stage == Stage.STAGE_2:
        return (Circle(coord, 5.0),)
    if stage == Stage.STAGE_3:
        return (Circle(coord, 8.0),)
    if stage == Stage.STAGE_4:
        return (Circle(coord, 2.0), Square(coord, 30.0))
    if stage == Stage.STAGE_5:
        return (Circle(coord, 8.0), Polygon(octagon_points(coord)))
    # Invisible placeholder keeps one shape per drop on the last stage
    return (Square(coord, 40.0, opacity=0.0),)


def render_raindrop(raindrop: Raindrop) -> Sprite:
    return render(raindrop.coord, raindrop.stage)


def render_field(field: Field) -> list[Sprite]:
    """Sprites for every raindrop of the field, in collection order."""
    return [render_raindrop(drop) for drop in field.raindrops]
