"""
Point primitive - pure functions over 2D points.

Every function accepts point-like input (a Point, a 2-element sequence or a
mapping with "x" and "y" keys) and returns a new Point.
"""

from typing import TYPE_CHECKING, Mapping, Tuple

import numpy as np

from . import angle
from .cad_types import Point, PointLike
from .constants import PRECISION

if TYPE_CHECKING:
    from .primitives import Arc


def ensure(point_like: PointLike) -> Point:
    """
    Convert a point-like value to a Point.

    Args:
        point_like: A Point, a 2-element numeric sequence, a mapping with "x" and
            "y" keys, or any object with x and y attributes

    Returns:
        The argument itself when it is already a Point, otherwise a new Point

    Raises:
        ValueError: If the value cannot be read as exactly two numbers
    """
    if isinstance(point_like, Point):
        return point_like

    if isinstance(point_like, Mapping):
        if "x" not in point_like or "y" not in point_like:
            raise ValueError(f"Point mapping needs 'x' and 'y' keys, got {point_like!r}")
        coords = (point_like["x"], point_like["y"])
    elif hasattr(point_like, "x") and hasattr(point_like, "y"):
        coords = (point_like.x, point_like.y)
    else:
        coords = point_like

    try:
        arr = np.asarray(coords, dtype=float)
    except (TypeError, ValueError) as e:
        raise ValueError(f"Cannot convert {point_like!r} to a point: {e}")

    if arr.shape != (2,):
        raise ValueError(
            f"A point needs exactly 2 coordinates, got shape {arr.shape} from {point_like!r}"
        )
    return Point(arr[0], arr[1])


def clone(point_like: PointLike) -> Point:
    p = ensure(point_like)
    return Point(p.x, p.y)


def add(a: PointLike, b: PointLike) -> Point:
    """Add two points component-wise."""
    return Point(*(np.asarray(ensure(a)) + np.asarray(ensure(b))))


def subtract(a: PointLike, b: PointLike) -> Point:
    """Subtract b from a component-wise."""
    return Point(*(np.asarray(ensure(a)) - np.asarray(ensure(b))))


def mirror(point_like: PointLike, mirror_x: bool, mirror_y: bool) -> Point:
    """
    Mirror a point on either or both axes.

    Args:
        point_like: The point to mirror
        mirror_x: Negate the x coordinate
        mirror_y: Negate the y coordinate

    Returns:
        The mirrored point
    """
    p = ensure(point_like)
    return Point(-p.x if mirror_x else p.x, -p.y if mirror_y else p.y)


def rotate(
    point_like: PointLike, angle_in_degrees: float, rotation_origin: PointLike
) -> Point:
    """
    Rotate a point counterclockwise around another point.

    Args:
        point_like: The point to rotate
        angle_in_degrees: Rotation angle in degrees
        rotation_origin: Center of rotation

    Returns:
        The rotated point
    """
    origin = np.asarray(ensure(rotation_origin))
    theta = angle.to_radians(angle_in_degrees)
    mat = np.array(
        [[np.cos(theta), -np.sin(theta)], [np.sin(theta), np.cos(theta)]]
    )
    rotated = np.dot(mat, np.asarray(ensure(point_like)) - origin) + origin
    return Point(rotated[0], rotated[1])


def scale(point_like: PointLike, factor: float) -> Point:
    """Scale a point's coordinates, relative to (0, 0)."""
    return Point(*(np.asarray(ensure(point_like)) * factor))


def from_polar(angle_in_radians: float, radius: float) -> Point:
    return Point(radius * np.cos(angle_in_radians), radius * np.sin(angle_in_radians))


def distance(a: PointLike, b: PointLike) -> float:
    return float(np.linalg.norm(np.asarray(ensure(a)) - np.asarray(ensure(b))))


def are_equal(a: PointLike, b: PointLike, tolerance: float = PRECISION) -> bool:
    return distance(a, b) <= tolerance


def from_arc(arc: "Arc") -> Tuple[Point, Point]:
    """Start and end points of an arc."""
    start = add(arc.origin, from_polar(angle.to_radians(arc.start_angle), arc.radius))
    end = add(arc.origin, from_polar(angle.to_radians(arc.end_angle), arc.radius))
    return start, end
