# FILE: meshtracer/core/scene.py
"""
Scene management: intersection-ready triangles and the immutable scene
"""
import logging
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from meshtracer.accelerators.vectorized import PackedTriangles
from .vector import Ray, Vector3, ZeroVectorError

logger = logging.getLogger(__name__)

DEFAULT_EPSILON = 1e-5


class DegenerateTriangleError(ValueError):
    """Raised for triangles whose vertices are colinear"""


@dataclass(frozen=True)
class HitRecord:
    distance: float
    point: Vector3
    normal: Vector3  # interpolated, unit length
    triangle_index: int


class Triangle:
    """
    Mesh face prepared for intersection and normal interpolation.

    The vertex opposite the edge with the smallest extent along x becomes v0,
    so both stored edges span as much of the x axis as the face allows. e0 is
    the wider of the two.
    """
    __slots__ = ['v0', 'e0', 'e1', 'n0', 'nd0', 'nd1', 'face_normal']

    def __init__(self, p0: Vector3, p1: Vector3, p2: Vector3,
                 n0: Vector3, n1: Vector3, n2: Vector3):
        positions = (p0, p1, p2)
        normals = (n0, n1, n2)

        # x extent of the edge opposite each vertex
        opposite = (abs(p2.x - p1.x), abs(p2.x - p0.x), abs(p1.x - p0.x))
        apex = min(range(3), key=lambda k: opposite[k])
        a, b = (apex + 1) % 3, (apex + 2) % 3

        edge_a = positions[a] - positions[apex]
        edge_b = positions[b] - positions[apex]
        if abs(edge_b.x) > abs(edge_a.x):
            a, b = b, a
            edge_a, edge_b = edge_b, edge_a

        # Winding order of the input, not of the relabeled edges
        cross = (p1 - p0).cross(p2 - p0)
        scale = edge_a.length() * edge_b.length()
        if scale == 0.0 or cross.length() <= 1e-12 * scale:
            raise DegenerateTriangleError(f"Colinear vertices: {p0}, {p1}, {p2}")

        self.v0 = positions[apex]
        self.e0 = edge_a
        self.e1 = edge_b
        self.n0 = normals[apex]
        self.nd0 = normals[a] - self.n0
        self.nd1 = normals[b] - self.n0
        self.face_normal = cross.normalize()

    def intersect(self, ray: Ray, epsilon: float = DEFAULT_EPSILON) -> Optional[float]:
        """Moller-Trumbore test; returns the hit distance or None"""
        h = ray.direction.cross(self.e1)
        a = h.dot(self.e0)
        if abs(a) < epsilon:
            return None

        f = 1.0 / a
        s = ray.origin - self.v0
        u = f * s.dot(h)
        if u < 0.0 or u > 1.0:
            return None

        q = s.cross(self.e0)
        v = f * ray.direction.dot(q)
        if v < 0.0 or u + v > 1.0:
            return None

        t = f * self.e1.dot(q)
        return t if t > epsilon else None

    def normal_at(self, point: Vector3, epsilon: float = DEFAULT_EPSILON) -> Vector3:
        """Shading normal at a point on the face, interpolated along x then y"""
        if abs(self.e0.x) < epsilon:
            # No extent along x at all: use the normal at the centroid
            normal = self.n0 + (self.nd0 + self.nd1) * (1.0 / 3.0)
        else:
            ratio1 = (point.x - self.v0.x) / self.e0.x
            p1 = self.e0.y * ratio1 + self.v0.y
            normal1 = self.nd0 * ratio1 + self.n0

            if abs(self.e1.x) < epsilon:
                normal = normal1
            else:
                ratio2 = (point.x - self.v0.x) / self.e1.x
                p2 = self.e1.y * ratio2 + self.v0.y
                normal2 = self.nd1 * ratio2 + self.n0
                if abs(p2 - p1) < epsilon:
                    normal = normal1
                else:
                    ratio = (point.y - p1) / (p2 - p1)
                    normal = (normal2 - normal1) * ratio + normal1

        try:
            return normal.normalize()
        except ZeroVectorError:
            return self.face_normal

    def __repr__(self):
        return f"Triangle(v0={self.v0}, e0={self.e0}, e1={self.e1})"


class Scene:
    """Immutable ordered collection of triangles shared by all render workers"""

    def __init__(self, triangles: Iterable[Triangle], epsilon: float = DEFAULT_EPSILON,
                 vectorized: bool = True, skipped: int = 0):
        self.triangles: Tuple[Triangle, ...] = tuple(triangles)
        self.epsilon = epsilon
        self.vectorized = vectorized
        self.skipped = skipped
        self.packed = PackedTriangles.from_triangles(self.triangles) if vectorized else None

    @classmethod
    def from_mesh(cls, mesh, epsilon: float = DEFAULT_EPSILON,
                  vectorized: bool = True) -> "Scene":
        """Build triangles from a Mesh, dropping degenerate faces"""
        positions = [Vector3.from_array(p) for p in mesh.vertices]
        normals = [Vector3.from_array(n) for n in mesh.normals]

        triangles = []
        skipped = 0
        for face_index, (i0, i1, i2) in enumerate(mesh.faces):
            try:
                triangles.append(Triangle(
                    positions[i0], positions[i1], positions[i2],
                    normals[i0], normals[i1], normals[i2]
                ))
            except DegenerateTriangleError as e:
                skipped += 1
                logger.warning(f"Skipping face {face_index + 1}: {e}")

        logger.info(f"Scene built: {len(triangles)} triangles, {skipped} degenerate faces skipped")
        return cls(triangles, epsilon=epsilon, vectorized=vectorized, skipped=skipped)

    def __len__(self):
        return len(self.triangles)

    def nearest_hit_scan(self, ray: Ray) -> Optional[Tuple[int, float]]:
        """Linear scan over every triangle keeping the closest hit"""
        best_index = None
        best_t = float('inf')
        for index, triangle in enumerate(self.triangles):
            t = triangle.intersect(ray, self.epsilon)
            if t is not None and t < best_t:
                best_index = index
                best_t = t
        if best_index is None:
            return None
        return best_index, best_t

    def occluded_scan(self, ray: Ray) -> bool:
        for triangle in self.triangles:
            if triangle.intersect(ray, self.epsilon) is not None:
                return True
        return False

    def nearest_hit(self, ray: Ray) -> Optional[HitRecord]:
        """Closest hit along the ray with its point and shading normal"""
        if self.packed is not None:
            found = self.packed.nearest(ray.origin.to_array(), ray.direction.to_array(),
                                        self.epsilon)
        else:
            found = self.nearest_hit_scan(ray)
        if found is None:
            return None

        index, t = found
        point = ray.at(t)
        normal = self.triangles[index].normal_at(point, self.epsilon)
        return HitRecord(t, point, normal, index)

    def occluded(self, ray: Ray) -> bool:
        """True when any triangle intersects the ray"""
        if self.packed is not None:
            return self.packed.any_hit(ray.origin.to_array(), ray.direction.to_array(),
                                       self.epsilon)
        return self.occluded_scan(ray)
