import math
import numpy as np
from ..core.constants import FLT_EPSILON, PI, TWO_PI
from ..core.errors import DegenerateVectorError
from .scalar import (approx_equal, as_scalar, dot, format_components, is_scalar,
                     quiet_errors, reciprocal, to_components)


class Vector2:
    """二维向量（单精度）"""
    __slots__ = ("_values",)
    __hash__ = None
    # numpy 标量在左侧时交给 __rmul__ 处理
    __array_ufunc__ = None

    def __init__(self, *coords):
        if not coords:
            self._values = to_components((0.0, 0.0), 2)
        elif len(coords) == 1:
            source = coords[0]
            if isinstance(source, Vector2):
                self._values = source._values.copy()
            else:
                self._values = to_components(source, 2)
        elif len(coords) == 2:
            self._values = to_components(coords, 2)
        else:
            raise TypeError(f"Vector2 takes at most 2 coordinates, got {len(coords)}")

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

    def assign(self, other):
        if other is self:
            return self
        if not isinstance(other, Vector2):
            raise TypeError(f"Cannot assign {type(other).__name__} to Vector2")
        self._values[:] = other._values
        return self

    def copy(self):
        return Vector2._wrap(self._values.copy())

    def __copy__(self):
        return self.copy()

    def __deepcopy__(self, memo):
        return self.copy()

    def __neg__(self):
        return Vector2._wrap(-self._values)

    def __mul__(self, other):
        # 向量 * 向量 为点积，向量 * 标量 为数乘
        if isinstance(other, Vector2):
            return float(dot(self._values, other._values))
        if is_scalar(other):
            with quiet_errors():
                return Vector2._wrap(self._values * as_scalar(other))
        return NotImplemented

    def __rmul__(self, other):
        if is_scalar(other):
            with quiet_errors():
                return Vector2._wrap(as_scalar(other) * self._values)
        return NotImplemented

    def __truediv__(self, scalar):
        if not is_scalar(scalar):
            return NotImplemented
        with quiet_errors():
            return Vector2._wrap(self._values * reciprocal(scalar))

    def __add__(self, other):
        if not isinstance(other, Vector2):
            return NotImplemented
        with quiet_errors():
            return Vector2._wrap(self._values + other._values)

    def __sub__(self, other):
        if not isinstance(other, Vector2):
            return NotImplemented
        with quiet_errors():
            return Vector2._wrap(self._values - other._values)

    def __imul__(self, scalar):
        if isinstance(scalar, Vector2):
            raise TypeError("In-place multiplication of a Vector2 takes a scalar")
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
        if not isinstance(other, Vector2):
            return NotImplemented
        with quiet_errors():
            self._values += other._values
        return self

    def __isub__(self, other):
        if not isinstance(other, Vector2):
            return NotImplemented
        with quiet_errors():
            self._values -= other._values
        return self

    def __eq__(self, other):
        if not isinstance(other, Vector2):
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

    def __len__(self):
        return 2

    def __array__(self, dtype=None, copy=None):
        if dtype is None:
            return self.to_numpy()
        return self._values.astype(dtype)

    def __str__(self):
        return format_components(self._values)

    def __repr__(self):
        return f"Vector2({self.x:g}, {self.y:g})"

    def _norm(self):
        with quiet_errors():
            return np.sqrt(dot(self._values, self._values))

    def length_squared(self):
        return float(dot(self._values, self._values))

    def length(self):
        return float(self._norm())

    def normalized(self):
        """Unit-length copy, or an unchanged copy when the length is below epsilon"""
        try:
            return normalize(self)
        except DegenerateVectorError:
            return self.copy()

    def polar_angle(self):
        # +0.0 把 -0.0 归一，结果落在 (-pi, pi]
        return math.atan2(self.y + 0.0, self.x)

    def angle_to(self, other):
        """Signed angle to rotate this vector onto `other`, wrapped into (-pi, pi]"""
        diff = other.polar_angle() - self.polar_angle()
        if diff > PI:
            diff -= TWO_PI
        elif diff <= -PI:
            diff += TWO_PI
        return diff

    def left_normal(self):
        return Vector2(-self.y, self.x)

    def to_tuple(self):
        return (self.x, self.y)

    def to_numpy(self):
        return self._values.copy()


def abs_sq(vector):
    return vector * vector


def det(vector1, vector2):
    """2x2 determinant, i.e. the z-component of the 3D cross product"""
    a, b = vector1._values, vector2._values
    with quiet_errors():
        return float(a[0] * b[1] - a[1] * b[0])


def normalize(vector):
    length = vector._norm()
    if length < FLT_EPSILON:
        raise DegenerateVectorError(vector, float(length))
    return vector / length


def get_length(vector):
    return vector.length()


def get_cos(vector1, vector2):
    """Cosine of the angle between two vectors; nan if either has zero length"""
    with quiet_errors():
        return float(dot(vector1._values, vector2._values) / (vector1._norm() * vector2._norm()))
