"""Single-precision scalar helpers shared by Vector2 and Vector3."""
import math
import numbers
import numpy as np
from ..core.constants import FLOAT_DTYPE, FLT_EPSILON


def quiet_errors():
    """Let inf/nan propagate without RuntimeWarning"""
    return np.errstate(divide="ignore", invalid="ignore", over="ignore")


def is_scalar(value):
    return isinstance(value, numbers.Real)


def as_scalar(value):
    try:
        value = float(value)
    except OverflowError:
        # 超出 double 范围的整数按 inf 处理
        value = math.inf if value > 0 else -math.inf
    with quiet_errors():
        return FLOAT_DTYPE(value)


def to_components(values, size):
    """Copy `values` into a new float32 array of length `size`"""
    if isinstance(values, np.ndarray):
        if values.dtype.kind not in "biuf":
            raise TypeError(f"Expected numeric coordinates, got array of dtype {values.dtype}")
        with quiet_errors():
            components = values.astype(FLOAT_DTYPE)
    else:
        try:
            items = list(values)
        except TypeError:
            raise TypeError(f"Expected {size} numeric coordinates, got {values!r}") from None
        # 只接受数值，不解析字符串
        if not all(is_scalar(item) for item in items):
            raise TypeError(f"Expected {size} numeric coordinates, got {values!r}")
        components = np.array([as_scalar(item) for item in items], dtype=FLOAT_DTYPE)

    if components.shape != (size,):
        raise TypeError(f"Expected {size} coordinates, got shape {components.shape}")
    return components


def reciprocal(value):
    # 除以零时返回 inf，不抛异常
    with quiet_errors():
        return FLOAT_DTYPE(1.0) / as_scalar(value)


def dot(a, b):
    with quiet_errors():
        return FLOAT_DTYPE(np.sum(a * b))


def approx_equal(a, b):
    """Component-wise |a - b| < epsilon; any NaN compares unequal"""
    with quiet_errors():
        return bool(np.all(np.abs(a - b) < FLT_EPSILON))


def format_components(values):
    # 与 C++ ostream 的默认浮点格式一致：6 位有效数字，无空格
    return "(" + ",".join(f"{float(v):g}" for v in values) + ")"
