from . import vector2, vector3
from .vector2 import Vector2, det, get_cos
from .vector3 import Vector3, cross

__all__ = [
    "Vector2",
    "Vector3",
    "abs_sq",
    "cross",
    "det",
    "get_cos",
    "get_length",
    "normalize",
]


def _module_for(vector):
    if isinstance(vector, Vector2):
        return vector2
    if isinstance(vector, Vector3):
        return vector3
    raise TypeError(f"Expected a Vector2 or Vector3, got {type(vector).__name__}")


def abs_sq(vector):
    return _module_for(vector).abs_sq(vector)


def normalize(vector):
    """Unit vector in the direction of `vector`.

    Raises DegenerateVectorError when the length is below epsilon; use
    `vector.normalized()` to get the unchanged vector back instead.
    """
    return _module_for(vector).normalize(vector)


def get_length(vector):
    return _module_for(vector).get_length(vector)
