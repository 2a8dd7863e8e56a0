# FILE: meshtracer/core/vector.py
"""
Immutable 3D vector and ray value types
"""
import math
from dataclasses import dataclass

import numpy as np


class ZeroVectorError(ValueError):
    """Raised when a zero-length vector is normalized"""


@dataclass(frozen=True)
class Vector3:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __neg__(self):
        return Vector3(-self.x, -self.y, -self.z)

    def __add__(self, other):
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other):
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar):
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    def __rmul__(self, scalar):
        return self.__mul__(scalar)

    def __truediv__(self, scalar):
        return Vector3(self.x / scalar, self.y / scalar, self.z / scalar)

    def dot(self, other) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other) -> "Vector3":
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def length(self) -> float:
        return math.sqrt(self.x*self.x + self.y*self.y + self.z*self.z)

    def length_squared(self) -> float:
        return self.x*self.x + self.y*self.y + self.z*self.z

    def normalize(self) -> "Vector3":
        length = self.length()
        if length == 0.0:
            raise ZeroVectorError("Cannot normalize a zero-length vector")
        return self * (1.0 / length)

    def max(self, other) -> "Vector3":
        """Component-wise maximum"""
        return Vector3(max(self.x, other.x), max(self.y, other.y), max(self.z, other.z))

    def reflect(self, n) -> "Vector3":
        """Mirror this direction about the unit normal n"""
        return self - n * (2 * self.dot(n))

    def to_array(self):
        return np.array([self.x, self.y, self.z])

    @staticmethod
    def from_array(arr):
        return Vector3(float(arr[0]), float(arr[1]), float(arr[2]))

    @staticmethod
    def zero():
        return Vector3(0.0, 0.0, 0.0)


@dataclass(frozen=True)
class Ray:
    origin: Vector3
    direction: Vector3  # not necessarily unit length

    def at(self, t: float) -> Vector3:
        return self.origin + self.direction * t
