"""
2D path primitives for drawing.

These classes are plain data. They carry no behavior of their own; every
transform lives in pathmaker.path and dispatches on the type tag.
"""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Optional

from .cad_types import Point
from .constants import ALL_PATH_TYPES


class PathType(str, Enum):
    LINE = ALL_PATH_TYPES[0]
    CIRCLE = ALL_PATH_TYPES[1]
    ARC = ALL_PATH_TYPES[2]


@dataclass(eq=False)
class Path:
    """
    Fields shared by every path.

    Paths compare by identity; transforms that mutate a path return that same object.
    """

    id: str
    origin: Point  # start point of a line, center of a circle or arc

    type: ClassVar[Optional[PathType]] = None

    def __setattr__(self, name, value):
        if name == "type":
            raise AttributeError(
                f"Cannot set type on {self.__class__.__name__}, it is fixed per path class"
            )
        super().__setattr__(name, value)


@dataclass(eq=False)
class Line(Path):
    """A line segment from origin to end."""

    end: Point

    type: ClassVar[PathType] = PathType.LINE


@dataclass(eq=False)
class Circle(Path):
    """A full circle around origin."""

    radius: float

    type: ClassVar[PathType] = PathType.CIRCLE


@dataclass(eq=False)
class Arc(Path):
    """An arc around origin, swept counterclockwise from start_angle to end_angle."""

    radius: float
    start_angle: float  # degrees
    end_angle: float  # degrees, may be less than start_angle when crossing 0

    type: ClassVar[PathType] = PathType.ARC
