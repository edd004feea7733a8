"""
Degree-based angle helpers used by the path transforms.

Angles are measured counterclockwise from the positive x axis, in degrees,
unless a function name says otherwise.
"""

import math
from typing import TYPE_CHECKING

import numpy as np

from .constants import FULL_CIRCLE, STRAIGHT_ANGLE

if TYPE_CHECKING:
    from .cad_types import Point
    from .primitives import Arc


def to_radians(angle_in_degrees: float) -> float:
    """Convert an angle from degrees to radians"""
    return angle_in_degrees * math.pi / STRAIGHT_ANGLE


def from_radians(angle_in_radians: float) -> float:
    """Convert an angle from radians to degrees"""
    return angle_in_radians * STRAIGHT_ANGLE / math.pi


def of_point_in_degrees(origin: "Point", point: "Point") -> float:
    """Angle of the ray from origin through point, in degrees (-180~180)."""
    delta = np.asarray(point) - np.asarray(origin)
    return from_radians(math.atan2(delta[1], delta[0]))


def mirror(angle_in_degrees: float, mirror_x: bool, mirror_y: bool) -> float:
    """
    Mirror an angle on either or both axes.

    mirror_x flips the angle across the y axis (x is negated), mirror_y flips it
    across the x axis (y is negated), matching point.mirror.

    Args:
        angle_in_degrees: Angle to mirror
        mirror_x: Mirror on the x axis
        mirror_y: Mirror on the y axis

    Returns:
        The mirrored angle, in degrees
    """
    if mirror_y:
        angle_in_degrees = FULL_CIRCLE - angle_in_degrees

    if mirror_x:
        angle_in_degrees = (
            STRAIGHT_ANGLE
            if angle_in_degrees < STRAIGHT_ANGLE
            else FULL_CIRCLE + STRAIGHT_ANGLE
        ) - angle_in_degrees

    return angle_in_degrees


def arc_end_angle_past_zero(arc: "Arc") -> float:
    """
    End angle of an arc on a continuous scale with its start angle.

    An arc from 350 to 10 wraps across zero; its end angle is reported as 370 so
    that end - start is the swept angle.
    """
    if arc.end_angle < arc.start_angle:
        return FULL_CIRCLE + arc.end_angle
    return arc.end_angle
