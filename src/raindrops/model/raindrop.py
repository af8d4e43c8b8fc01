"""
Raindrop Entity
===============
A raindrop is a position plus a life-cycle stage.

Stages advance strictly in order 1 -> 2 -> 3 -> 4 -> 5 -> 6 -> 1. Stages 1-5
are visible rings of growing size, stage 6 is an invisible terminal marker
after which the field respawns the drop elsewhere.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from enum import IntEnum


class Stage(IntEnum):
    """The six visual states of a raindrop."""
    STAGE_1 = 1
    STAGE_2 = 2
    STAGE_3 = 3
    STAGE_4 = 4
    STAGE_5 = 5
    STAGE_6 = 6

    def next(self) -> Stage:
        return next_stage(self)


_SUCCESSOR: dict[Stage, Stage] = {
    Stage.STAGE_1: Stage.STAGE_2,
    Stage.STAGE_2: Stage.STAGE_3,
    Stage.STAGE_3: Stage.STAGE_4,
    Stage.STAGE_4: Stage.STAGE_5,
    Stage.STAGE_5: Stage.STAGE_6,
    Stage.STAGE_6: Stage.STAGE_1,
}


def next_stage(stage: Stage) -> Stage:
    """Return the stage following `stage`, wrapping from 6 back to 1."""
    return _SUCCESSOR[stage]


@dataclass(frozen=True)
class Coordinate:
    """A point in window-pixel space."""
    x: int
    y: int

    def as_tuple(self) -> tuple[int, int]:
        return self.x, self.y


@dataclass(frozen=True)
class Raindrop:
    coord: Coordinate
    stage: Stage = Stage.STAGE_1

    def advance(self) -> Raindrop:
        """Same position, next stage."""
        return replace(self, stage=next_stage(self.stage))

    def is_at_end_of_life(self) -> bool:
        return self.stage == Stage.STAGE_6
