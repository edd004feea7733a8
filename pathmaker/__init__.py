"""
pathmaker - 2D drawing paths and geometric transforms.

This package provides line, circle and arc paths as plain data, with mirror,
move, rotate and scale transforms that work across every path type.
"""

__version__ = "0.1.0"
__author__ = "Your Name"
__email__ = "your.email@example.com"

from . import angle, path, point

# Core geometry types
from .cad_types import Point, PointLike

# Factory functions and transforms
from .path import (
    create_arc,
    create_circle,
    create_line,
    mirror,
    move_relative,
    rotate,
    scale,
)

# Path primitives
from .primitives import Arc, Circle, Line, Path, PathType

# Define what gets imported with "from pathmaker import *"
__all__ = [
    # Modules
    "angle",
    "path",
    "point",
    # Geometry types
    "Point",
    "PointLike",
    # Primitives
    "Path",
    "PathType",
    "Line",
    "Circle",
    "Arc",
    # Factory
    "create_arc",
    "create_circle",
    "create_line",
    # Transforms
    "mirror",
    "move_relative",
    "rotate",
    "scale",
]
