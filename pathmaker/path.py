"""
Path module - factory functions and geometric transforms for 2D paths.

Each transform updates the origin shared by all paths, then looks up a handler
for the path's type in its own dispatch map and calls it. A type without a
handler simply gets no variant-specific work. mirror() returns a new path;
move_relative(), rotate() and scale() mutate the path and return it for chaining.
"""

import logging
from typing import Any, Callable, Dict, Optional, Union

from . import angle, point
from .cad_types import Point, PointLike
from .primitives import Arc, Circle, Line, Path, PathType

logger = logging.getLogger(__name__)

HandlerMap = Dict[PathType, Callable[..., Any]]


def create_arc(
    id: str, origin: PointLike, radius: float, start_angle: float, end_angle: float
) -> Arc:
    """
    Create a new arc path.

    Args:
        id: The id of the new path
        origin: Center of the arc, as a point or a sequence of 2 numbers
        radius: Radius of the arc
        start_angle: Start angle in degrees
        end_angle: End angle in degrees

    Returns:
        Arc: The new arc
    """
    return Arc(
        id=id,
        origin=point.ensure(origin),
        radius=radius,
        start_angle=start_angle,
        end_angle=end_angle,
    )


def create_circle(id: str, origin: PointLike, radius: float) -> Circle:
    """
    Create a new circle path.

    Args:
        id: The id of the new path
        origin: Center of the circle, as a point or a sequence of 2 numbers
        radius: Radius of the circle

    Returns:
        Circle: The new circle
    """
    return Circle(id=id, origin=point.ensure(origin), radius=radius)


def create_line(id: str, origin: PointLike, end: PointLike) -> Line:
    """
    Create a new line path.

    Args:
        id: The id of the new path
        origin: Start point, as a point or a sequence of 2 numbers
        end: End point, as a point or a sequence of 2 numbers

    Returns:
        Line: The new line
    """
    return Line(id=id, origin=point.ensure(origin), end=point.ensure(end))


def _dispatch(handlers: HandlerMap, path: Path, *args) -> Any:
    fn = handlers.get(path.type)
    if fn is None:
        logger.debug(f"No handler for path type {path.type!r} (path {path.id!r})")
        return None
    return fn(path, *args)


# ========== Mirror ==========


def _mirror_line(
    line: Line, origin: Point, mirror_x: bool, mirror_y: bool, new_id: Optional[str]
) -> Line:
    return create_line(
        new_id or line.id, origin, point.mirror(line.end, mirror_x, mirror_y)
    )


def _mirror_circle(
    circle: Circle, origin: Point, mirror_x: bool, mirror_y: bool, new_id: Optional[str]
) -> Circle:
    return create_circle(new_id or circle.id, origin, circle.radius)


def _mirror_arc(
    arc: Arc, origin: Point, mirror_x: bool, mirror_y: bool, new_id: Optional[str]
) -> Arc:
    start_angle = angle.mirror(arc.start_angle, mirror_x, mirror_y)
    end_angle = angle.mirror(angle.arc_end_angle_past_zero(arc), mirror_x, mirror_y)

    # a single-axis mirror reverses winding, so start and end trade places
    xor = mirror_x != mirror_y

    return create_arc(
        new_id or arc.id,
        origin,
        arc.radius,
        end_angle if xor else start_angle,
        start_angle if xor else end_angle,
    )


_MIRROR_HANDLERS: HandlerMap = {
    PathType.LINE: _mirror_line,
    PathType.CIRCLE: _mirror_circle,
    PathType.ARC: _mirror_arc,
}


def mirror(
    path: Path, mirror_x: bool, mirror_y: bool, new_id: Optional[str] = None
) -> Optional[Path]:
    """
    Create a clone of a path, mirrored on either or both axes.

    Args:
        path: The path to mirror, left untouched
        mirror_x: Mirror on the x axis (negates x)
        mirror_y: Mirror on the y axis (negates y)
        new_id: Optional id for the new path, defaults to the original id

    Returns:
        The mirrored path, or None when the path type is not recognised
    """
    origin = point.mirror(path.origin, mirror_x, mirror_y)

    new_path = _dispatch(_MIRROR_HANDLERS, path, origin, mirror_x, mirror_y, new_id)
    if new_path is None:
        logger.warning(f"Cannot mirror path {path.id!r} of type {path.type!r}")
    return new_path


# ========== Move ==========


def _move_line(line: Line, adjust: PointLike) -> None:
    line.end = point.add(line.end, adjust)


_MOVE_HANDLERS: HandlerMap = {
    PathType.LINE: _move_line,
}


def move_relative(path: Path, adjust: PointLike) -> Path:
    """
    Move a path by a relative amount.

    To move to an absolute position, set the origin directly.

    Args:
        path: The path to move
        adjust: The x & y adjustments, as a point or a sequence of 2 numbers

    Returns:
        The same path, for chaining
    """
    path.origin = point.add(path.origin, adjust)
    _dispatch(_MOVE_HANDLERS, path, adjust)
    return path


# ========== Rotate ==========


def _rotate_line(line: Line, angle_in_degrees: float, rotation_origin: PointLike) -> None:
    line.end = point.rotate(line.end, angle_in_degrees, rotation_origin)


def _rotate_arc(arc: Arc, angle_in_degrees: float, rotation_origin: PointLike) -> None:
    arc.start_angle += angle_in_degrees
    arc.end_angle += angle_in_degrees


_ROTATE_HANDLERS: HandlerMap = {
    PathType.LINE: _rotate_line,
    PathType.ARC: _rotate_arc,
}


def rotate(path: Path, angle_in_degrees: float, rotation_origin: PointLike) -> Path:
    """
    Rotate a path counterclockwise around a point.

    Args:
        path: The path to rotate
        angle_in_degrees: The amount of rotation, in degrees
        rotation_origin: The center point of rotation

    Returns:
        The same path, for chaining
    """
    if angle_in_degrees == 0:
        return path

    path.origin = point.rotate(path.origin, angle_in_degrees, rotation_origin)
    _dispatch(_ROTATE_HANDLERS, path, angle_in_degrees, rotation_origin)
    return path


# ========== Scale ==========


def _scale_line(line: Line, scale: float) -> None:
    line.end = point.scale(line.end, scale)


def _scale_radius(path: Union[Circle, Arc], scale: float) -> None:
    path.radius *= scale


_SCALE_HANDLERS: HandlerMap = {
    PathType.LINE: _scale_line,
    PathType.CIRCLE: _scale_radius,
    PathType.ARC: _scale_radius,
}


def scale(path: Path, scale: float) -> Path:
    """
    Scale a path relative to (0, 0).

    Args:
        path: The path to scale
        scale: The scale factor

    Returns:
        The same path, for chaining
    """
    if scale == 1:
        return path

    path.origin = point.scale(path.origin, scale)
    _dispatch(_SCALE_HANDLERS, path, scale)
    return path
