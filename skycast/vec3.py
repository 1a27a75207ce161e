"""
Vector3 class for 3D math operations.

The same type plays three roles in the renderer:
- Points in camera space
- Ray directions
- RGB color values

Arithmetic follows IEEE semantics: dividing by zero or normalizing a
zero-length vector yields inf/nan components instead of raising.
"""

from __future__ import annotations
from typing import Union
import numpy as np


class Vec3:
    """A 3D vector backed by a float64 numpy array.

    Every operation returns a new vector. Indexed assignment is the only
    way to change a vector in place.
    """

    __slots__ = ('_data',)

    # Defer to the reflected operators below when a numpy scalar is on the left
    __array_ufunc__ = None

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        self._data = np.array([x, y, z], dtype=np.float64)

    @classmethod
    def from_array(cls, arr: np.ndarray) -> Vec3:
        """Create Vec3 from numpy array."""
        v = cls.__new__(cls)
        v._data = np.asarray(arr, dtype=np.float64)
        return v

    @property
    def x(self) -> float:
        return float(self._data[0])

    @property
    def y(self) -> float:
        return float(self._data[1])

    @property
    def z(self) -> float:
        return float(self._data[2])

    # Aliases for color operations
    @property
    def r(self) -> float:
        return self.x

    @property
    def g(self) -> float:
        return self.y

    @property
    def b(self) -> float:
        return self.z

    def __repr__(self) -> str:
        return f"Vec3({self.x:.4f}, {self.y:.4f}, {self.z:.4f})"

    def __str__(self) -> str:
        return f"{self.x} {self.y} {self.z}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vec3):
            return NotImplemented
        return bool(np.allclose(self._data, other._data))

    def __hash__(self) -> int:
        return hash(tuple(self._data))

    def __neg__(self) -> Vec3:
        return Vec3.from_array(-self._data)

    def __add__(self, other: Union[Vec3, float]) -> Vec3:
        return _ieee(np.add, self._data, _operand(other))

    def __radd__(self, other: float) -> Vec3:
        return _ieee(np.add, other, self._data)

    def __sub__(self, other: Union[Vec3, float]) -> Vec3:
        return _ieee(np.subtract, self._data, _operand(other))

    def __mul__(self, other: Union[Vec3, float]) -> Vec3:
        return _ieee(np.multiply, self._data, _operand(other))

    def __rmul__(self, other: float) -> Vec3:
        return _ieee(np.multiply, other, self._data)

    def __truediv__(self, other: float) -> Vec3:
        return _ieee(np.true_divide, self._data, np.float64(other))

    def __rtruediv__(self, other: float) -> Vec3:
        return _ieee(np.true_divide, np.float64(other), self._data)

    def __getitem__(self, index: int) -> float:
        return float(self._data[index])

    def __setitem__(self, index: int, value: float):
        self._data[index] = value

    def __iter__(self):
        return (float(c) for c in self._data)

    def length(self) -> float:
        """Return the magnitude (length) of the vector."""
        with np.errstate(all='ignore'):
            return float(np.sqrt(self.length_squared()))

    def length_squared(self) -> float:
        """Return the squared magnitude (avoids sqrt for comparisons)."""
        with np.errstate(all='ignore'):
            return float(np.dot(self._data, self._data))

    def unit_vector(self) -> Vec3:
        """Return a vector of length 1 in the same direction.

        A zero-length vector gives NaN components.
        """
        return self / self.length()

    def dot(self, other: Vec3) -> float:
        """Compute dot product with another vector."""
        with np.errstate(all='ignore'):
            return float(np.dot(self._data, other._data))

    def cross(self, other: Vec3) -> Vec3:
        """Compute cross product with another vector."""
        return _ieee(np.cross, self._data, other._data)

    def copy(self) -> Vec3:
        return Vec3.from_array(self._data.copy())

    def to_array(self) -> np.ndarray:
        """Return the underlying numpy array (copy)."""
        return self._data.copy()


def _operand(other: Union[Vec3, float]):
    return other._data if isinstance(other, Vec3) else other


def _ieee(op, a, b) -> Vec3:
    # inf/nan results propagate without numpy floating-point warnings
    with np.errstate(all='ignore'):
        return Vec3.from_array(op(a, b))


# Convenience type aliases
Point3 = Vec3
Color = Vec3


# Functional forms, for call sites that read better without operators.

def add(a: Vec3, b: Vec3) -> Vec3:
    return a + b


def sub(a: Vec3, b: Vec3) -> Vec3:
    return a - b


def scale(a: Union[Vec3, float], b: Union[Vec3, float]) -> Vec3:
    """Multiply a vector by a scalar; accepts either argument order."""
    if isinstance(a, Vec3):
        return a * b
    return b * a


def divide(v: Vec3, k: float) -> Vec3:
    return v / k


def multiply(a: Vec3, b: Vec3) -> Vec3:
    """Component-wise product, used for tinting colors."""
    return a * b


def dot(a: Vec3, b: Vec3) -> float:
    return a.dot(b)


def cross(a: Vec3, b: Vec3) -> Vec3:
    return a.cross(b)


def length(v: Vec3) -> float:
    return v.length()


def length_squared(v: Vec3) -> float:
    return v.length_squared()


def unit_vector(v: Vec3) -> Vec3:
    return v.unit_vector()
