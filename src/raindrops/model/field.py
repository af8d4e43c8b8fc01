"""
Field Controller
================
Owns the collection of raindrops and advances the whole animation one step
at a time.

Why is this file needed?
------------------------
1. State Management: The field holds every raindrop, the window bounds and
   the random generator in one value.
2. Determinism: The generator is threaded explicitly through each operation
   instead of living in a global, so a seed and a window size fully decide
   what the animation looks like.

Every operation returns a new `Field`. The generator held by the input field
is never advanced; operations draw from a copy and hand it back in the result.

Classes:
    Field: Raindrops + window size + random generator.
    InvalidWindowSizeError: Raised for non-positive window sizes.
"""
from __future__ import annotations

import copy
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import numpy as np

from raindrops.config import DEFAULT_SEED, PADDING, RAINDROP_COUNT
from raindrops.model.raindrop import Coordinate, Raindrop, Stage

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)

Bounds = tuple[tuple[int, int], tuple[int, int]]


class InvalidWindowSizeError(ValueError):
    """The reported window size cannot hold any raindrop."""


@dataclass(frozen=True)
class Field:
    raindrops: tuple[Raindrop, ...]
    width: int
    height: int
    rng: np.random.Generator = field(compare=False, repr=False)

    @classmethod
    def empty(cls, width: int, height: int, seed: int = DEFAULT_SEED) -> Field:
        """
        A field without raindrops, used before the window size is known.

        Raises:
            InvalidWindowSizeError: If either dimension is not positive.
        """
        # Rejects sizes no later respawn could use
        placement_bounds(width, height)
        return cls(raindrops=(), width=width, height=height, rng=np.random.default_rng(seed))

    def coordinates(self) -> npt.NDArray[np.int64]:
        """(N, 2) array of raindrop positions."""
        if not self.raindrops:
            return np.empty((0, 2), dtype=np.int64)
        return np.array([drop.coord.as_tuple() for drop in self.raindrops], dtype=np.int64)

    def stages(self) -> list[Stage]:
        return [drop.stage for drop in self.raindrops]


def _axis_bounds(size: int) -> tuple[int, int]:
    """Inclusive placement range along one axis."""
    low, high = PADDING, size - PADDING
    if high < low:
        # Too small for the padding: collapse to the centre pixel
        centre = size // 2
        return centre, centre
    return low, high


def placement_bounds(width: int, height: int) -> Bounds:
    """
    Inclusive ranges a raindrop may be placed in.

    Args:
        width: Window width in pixels.
        height: Window height in pixels.

    Returns:
        ((x_min, x_max), (y_min, y_max)), normally [90, size - 90] on each axis.
        An axis shorter than twice the padding is clamped to its centre pixel.

    Raises:
        InvalidWindowSizeError: If either dimension is not positive.
    """
    if width <= 0 or height <= 0:
        raise InvalidWindowSizeError(f"Window size must be positive, got {width}x{height}.")
    return _axis_bounds(width), _axis_bounds(height)


def _draw_coordinate(rng: np.random.Generator, bounds: Bounds) -> Coordinate:
    (x_min, x_max), (y_min, y_max) = bounds
    x = int(rng.integers(x_min, x_max, endpoint=True))
    y = int(rng.integers(y_min, y_max, endpoint=True))
    return Coordinate(x, y)


def _draw_stage(rng: np.random.Generator) -> Stage:
    return Stage(int(rng.integers(int(Stage.STAGE_1), int(Stage.STAGE_6), endpoint=True)))


def initialize(width: int, height: int, seed: int = DEFAULT_SEED, count: int = RAINDROP_COUNT) -> Field:
    """
    Populate a new field with randomly placed raindrops at random stages.

    For each raindrop the stage is drawn first, then x, then y.
    """
    bounds = placement_bounds(width, height)
    rng = np.random.default_rng(seed)

    drops: list[Raindrop] = []
    for _ in range(count):
        stage = _draw_stage(rng)
        drops.append(Raindrop(_draw_coordinate(rng, bounds), stage))

    logger.debug(f"Initialized {count} raindrops in {width}x{height} (seed={seed}).")
    return Field(raindrops=tuple(drops), width=width, height=height, rng=rng)


def tick(current: Field) -> Field:
    """
    Advance every raindrop by one stage.

    Raindrops at the last stage are respawned at stage 1 on a freshly drawn
    coordinate; all others keep their position.
    """
    rng = copy.deepcopy(current.rng)
    bounds: Bounds | None = None

    drops: list[Raindrop] = []
    respawned = 0
    for drop in current.raindrops:
        if drop.is_at_end_of_life():
            if bounds is None:
                bounds = placement_bounds(current.width, current.height)
            drops.append(Raindrop(_draw_coordinate(rng, bounds), Stage.STAGE_1))
            respawned += 1
        else:
            drops.append(drop.advance())

    if respawned:
        logger.debug(f"Respawned {respawned} raindrop(s).")
    return Field(raindrops=tuple(drops), width=current.width, height=current.height, rng=rng)


def resize(current: Field, width: int, height: int, seed: int = DEFAULT_SEED) -> Field:
    """
    Re-initialize the field for a new window size.

    Progress of the existing raindrops is discarded and the generator is reset
    to `seed`; drops are not repositioned proportionally.
    """
    resized = initialize(width, height, seed=seed)
    logger.info(
        f"Window resized {current.width}x{current.height} -> {width}x{height}, "
        f"discarded {len(current.raindrops)} raindrop(s)."
    )
    return resized
