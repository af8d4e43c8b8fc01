"""
Animation Events
================
Everything that can change the field arrives as one of these events and goes
through `update`.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Union

from raindrops.config import DEFAULT_SEED
from raindrops.model.field import Field, resize, tick

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Tick:
    """One timer period elapsed."""


@dataclass(frozen=True)
class WindowResized:
    width: int
    height: int


@dataclass(frozen=True)
class WindowSizeFailed:
    """The window-size query did not produce a usable size."""
    reason: str = ""


Event = Union[Tick, WindowResized, WindowSizeFailed]


def update(current: Field, event: Event, seed: int = DEFAULT_SEED) -> Field:
    """
    Apply a single event to the field.

    Args:
        current: Field before the event.
        event: What happened.
        seed: Seed used when a resize re-initializes the field.

    Returns:
        The field after the event. A failed size query returns `current`.

    Raises:
        TypeError: If `event` is not one of the known event types.
    """
    if isinstance(event, Tick):
        return tick(current)
    if isinstance(event, WindowResized):
        return resize(current, event.width, event.height, seed=seed)
    if isinstance(event, WindowSizeFailed):
        logger.warning(
            f"Window size query failed ({event.reason or 'no reason given'}); "
            f"keeping {current.width}x{current.height}."
        )
        return current
    raise TypeError(f"Unknown event: {event!r}")
