from typing import Mapping, Sequence, Tuple, Union

import numpy as np

from .constants import PRECISION


class Point(np.ndarray):
    """
    An immutable 2D point. Primitive operations return new points rather than writing into one.

    Views of a point stay read-only; arithmetic on points yields plain numpy arrays.
    """

    def __new__(cls, x: float, y: float) -> "Point":
        obj = np.asarray([float(x), float(y)]).view(cls)
        obj.flags.writeable = False
        return obj

    def __array_finalize__(self, obj):
        if obj is None:
            return
        self.flags.writeable = False

    def __array_prepare__(self, arr, context=None):
        # numpy < 2 hands ufunc outputs through here before filling them
        return arr.view(np.ndarray)

    def __array_wrap__(self, arr, context=None, return_scalar=False):
        arr = arr.view(np.ndarray)
        if return_scalar:
            return arr[()]
        return arr

    def copy(self, order="C") -> "Point":
        return Point(self.x, self.y)

    def __copy__(self) -> "Point":
        return self.copy()

    def __deepcopy__(self, memo) -> "Point":
        return self.copy()

    def astype(self, dtype, *args, **kwargs):  # type: ignore[override]
        return np.asarray(self).astype(dtype, *args, **kwargs)

    def __eq__(self, other: object) -> bool:
        if np.shape(other) != (2,):
            return NotImplemented
        try:
            other = np.asarray(other, dtype=float)
        except (TypeError, ValueError):
            return NotImplemented
        return bool(
            np.allclose(np.asarray(self), other, rtol=0.0, atol=PRECISION)
        )

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None

    def __repr__(self):
        return f"Point(x={self.x}, y={self.y})"

    __str__ = __repr__

    @property
    def x(self) -> float:
        return float(self[0])

    @property
    def y(self) -> float:
        return float(self[1])

    def to_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)


PointLike = Union[Point, Tuple[float, float], Sequence[float], Mapping[str, float]]
