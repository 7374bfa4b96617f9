import operator
import numpy as np
from ..core.constants import FLT_EPSILON
from ..core.enums import Axis
from ..core.errors import DegenerateVectorError
from .scalar import (approx_equal, as_scalar, dot, format_components, is_scalar,
                     quiet_errors, reciprocal, to_components)


def _position(index):
    if isinstance(index, Axis):
        return index.value
    try:
        position = operator.index(index)
    except TypeError:
        raise TypeError(f"Vector3 indices must be integers or Axis, not {type(index).__name__}") from None
    if not 0 <= position < 3:
        raise IndexError(f"Vector3 index {position} out of range")
    return position


class Vector3:
    """三维向量（单精度），可按下标 0/1/2 读写分量"""
    __slots__ = ("_values",)
    __hash__ = None
    __array_ufunc__ = None

    def __init__(self, *coords):
        if not coords:
            self._values = to_components((0.0, 0.0, 0.0), 3)
        elif len(coords) == 1:
            source = coords[0]
            if isinstance(source, Vector3):
                self._values = source._values.copy()
            else:
                self._values = to_components(source, 3)
        elif len(coords) == 3:
            self._values = to_components(coords, 3)
        else:
            raise TypeError(f"Vector3 takes 0, 1 or 3 arguments, got {len(coords)}")

    @classmethod
    def _wrap(cls, values):
        vector = cls.__new__(cls)
        vector._values = values
        return vector

    @property
    def x(self):
        return float(self._values[0])

    @property
    def y(self):
        return float(self._values[1])

    @property
    def z(self):
        return float(self._values[2])

    def __getitem__(self, index):
        return float(self._values[_position(index)])

    def __setitem__(self, index, value):
        position = _position(index)
        if not is_scalar(value):
            raise TypeError(f"Vector3 components must be real numbers, not {type(value).__name__}")
        self._values[position] = as_scalar(value)

    def assign(self, other):
        if other is self:
            return self
        if not isinstance(other, Vector3):
            raise TypeError(f"Cannot assign {type(other).__name__} to Vector3")
        self._values[:] = other._values
        return self

    def copy(self):
        return Vector3._wrap(self._values.copy())

    def __copy__(self):
        return self.copy()

    def __deepcopy__(self, memo):
        return self.copy()

    def __neg__(self):
        return Vector3._wrap(-self._values)

    def __mul__(self, other):
        if isinstance(other, Vector3):
            return float(dot(self._values, other._values))
        if is_scalar(other):
            with quiet_errors():
                return Vector3._wrap(self._values * as_scalar(other))
        return NotImplemented

    def __rmul__(self, other):
        if is_scalar(other):
            with quiet_errors():
                return Vector3._wrap(as_scalar(other) * self._values)
        return NotImplemented

    def __truediv__(self, scalar):
        if not is_scalar(scalar):
            return NotImplemented
        with quiet_errors():
            return Vector3._wrap(self._values * reciprocal(scalar))

    def __add__(self, other):
        if not isinstance(other, Vector3):
            return NotImplemented
        with quiet_errors():
            return Vector3._wrap(self._values + other._values)

    def __sub__(self, other):
        if not isinstance(other, Vector3):
            return NotImplemented
        with quiet_errors():
            return Vector3._wrap(self._values - other._values)

    def __imul__(self, scalar):
        if isinstance(scalar, Vector3):
            raise TypeError("In-place multiplication of a Vector3 takes a scalar")
        if not is_scalar(scalar):
            return NotImplemented
        with quiet_errors():
            self._values *= as_scalar(scalar)
        return self

    def __itruediv__(self, scalar):
        if not is_scalar(scalar):
            return NotImplemented
        with quiet_errors():
            self._values *= reciprocal(scalar)
        return self

    def __iadd__(self, other):
        if not isinstance(other, Vector3):
            return NotImplemented
        with quiet_errors():
            self._values += other._values
        return self

    def __isub__(self, other):
        if not isinstance(other, Vector3):
            return NotImplemented
        with quiet_errors():
            self._values -= other._values
        return self

    def __eq__(self, other):
        if not isinstance(other, Vector3):
            return NotImplemented
        return approx_equal(self._values, other._values)

    def __ne__(self, other):
        equal = self.__eq__(other)
        if equal is NotImplemented:
            return equal
        return not equal

    def __abs__(self):
        return self.length()

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __len__(self):
        return 3

    def __array__(self, dtype=None, copy=None):
        if dtype is None:
            return self.to_numpy()
        return self._values.astype(dtype)

    def __str__(self):
        return format_components(self._values)

    def __repr__(self):
        return f"Vector3({self.x:g}, {self.y:g}, {self.z:g})"

    def _norm(self):
        with quiet_errors():
            return np.sqrt(dot(self._values, self._values))

    def length_squared(self):
        return float(dot(self._values, self._values))

    def length(self):
        return float(self._norm())

    def get_length(self):
        return self.length()

    def normalized(self):
        try:
            return normalize(self)
        except DegenerateVectorError:
            return self.copy()

    def to_tuple(self):
        return (self.x, self.y, self.z)

    def to_numpy(self):
        return self._values.copy()


def cross(vector1, vector2):
    """Right-handed cross product of two three-dimensional vectors"""
    a, b = vector1._values, vector2._values
    with quiet_errors():
        return Vector3._wrap(np.array([
            a[1] * b[2] - a[2] * b[1],
            a[2] * b[0] - a[0] * b[2],
            a[0] * b[1] - a[1] * b[0],
        ], dtype=a.dtype))


def abs_sq(vector):
    return vector * vector


def normalize(vector):
    length = vector._norm()
    if length < FLT_EPSILON:
        raise DegenerateVectorError(vector, float(length))
    return vector / length


def get_length(vector):
    return vector.length()
