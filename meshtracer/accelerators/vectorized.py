# FILE: meshtracer/accelerators/vectorized.py
"""
Vectorized brute-force triangle intersection with numpy

Evaluates the Moller-Trumbore test against every triangle of a scene in one
batch. This is the same linear scan as Scene.nearest_hit_scan, only packed
into structure-of-arrays form; it does not prune any triangles.
"""
import numpy as np
from typing import Optional, Sequence, Tuple


def _dot(a, b):
    # Same summation order as Vector3.dot so both paths agree bit for bit
    return a[..., 0] * b[..., 0] + a[..., 1] * b[..., 1] + a[..., 2] * b[..., 2]


def _cross(a, b):
    return np.stack([
        a[..., 1] * b[..., 2] - a[..., 2] * b[..., 1],
        a[..., 2] * b[..., 0] - a[..., 0] * b[..., 2],
        a[..., 0] * b[..., 1] - a[..., 1] * b[..., 0],
    ], axis=-1)


class PackedTriangles:
    """Triangle reference vertices and edges stored as (M, 3) float64 arrays"""
    __slots__ = ['v0', 'e0', 'e1']

    def __init__(self, v0: np.ndarray, e0: np.ndarray, e1: np.ndarray):
        self.v0 = np.ascontiguousarray(v0, dtype=np.float64)
        self.e0 = np.ascontiguousarray(e0, dtype=np.float64)
        self.e1 = np.ascontiguousarray(e1, dtype=np.float64)
        for arr in (self.v0, self.e0, self.e1):
            arr.setflags(write=False)

    @classmethod
    def from_triangles(cls, triangles: Sequence) -> "PackedTriangles":
        v0 = np.array([t.v0.to_array() for t in triangles], dtype=np.float64).reshape(-1, 3)
        e0 = np.array([t.e0.to_array() for t in triangles], dtype=np.float64).reshape(-1, 3)
        e1 = np.array([t.e1.to_array() for t in triangles], dtype=np.float64).reshape(-1, 3)
        return cls(v0, e0, e1)

    def __len__(self):
        return self.v0.shape[0]

    def intersect_all(self, origin: np.ndarray, direction: np.ndarray,
                      epsilon: float) -> np.ndarray:
        """Hit distance per triangle, +inf where the ray misses"""
        h = _cross(direction, self.e1)
        a = _dot(h, self.e0)
        parallel = np.abs(a) < epsilon

        with np.errstate(divide='ignore', invalid='ignore'):
            f = 1.0 / a
            s = origin - self.v0
            u = f * _dot(s, h)
            q = _cross(s, self.e0)
            v = f * _dot(direction, q)
            t = f * _dot(self.e1, q)

            hit = (~parallel & (u >= 0.0) & (u <= 1.0) &
                   (v >= 0.0) & (u + v <= 1.0) & (t > epsilon))

        return np.where(hit, t, np.inf)

    def nearest(self, origin: np.ndarray, direction: np.ndarray,
                epsilon: float) -> Optional[Tuple[int, float]]:
        """Index and distance of the closest hit, or None"""
        if len(self) == 0:
            return None
        distances = self.intersect_all(origin, direction, epsilon)
        index = int(np.argmin(distances))
        t = float(distances[index])
        if np.isinf(t):
            return None
        return index, t

    def any_hit(self, origin: np.ndarray, direction: np.ndarray, epsilon: float) -> bool:
        if len(self) == 0:
            return False
        return bool(np.isfinite(self.intersect_all(origin, direction, epsilon)).any())
