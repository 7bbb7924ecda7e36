"""Abstract input events consumed by the game engine.

The engine never sees whether an event came from a mouse, a touch screen,
a keyboard or an agent.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Union

from .layout import Point


class Direction(Enum):
    LEFT = (0, -1)
    RIGHT = (0, 1)
    UP = (-1, 0)
    DOWN = (1, 0)

    @property
    def delta(self) -> Tuple[int, int]:
        """(row, col) step"""
        return self.value


@dataclass(frozen=True)
class SelectAt:
    point: Point


@dataclass(frozen=True)
class SelectSlot:
    index: int


@dataclass(frozen=True)
class DragTo:
    point: Point


@dataclass(frozen=True)
class Release:
    pass


@dataclass(frozen=True)
class Nudge:
    direction: Direction


@dataclass(frozen=True)
class ConfirmSelection:
    pass


InputEvent = Union[SelectAt, SelectSlot, DragTo, Release, Nudge, ConfirmSelection]
