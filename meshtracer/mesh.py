# FILE: meshtracer/mesh.py
"""
Loader for the vertex/face subset of the Wavefront OBJ format
"""
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Union

import numpy as np

logger = logging.getLogger(__name__)


class MeshFormatError(ValueError):
    """Raised for unparsable numbers or unresolved face indices"""


@dataclass(frozen=True)
class Mesh:
    vertices: np.ndarray  # (N, 3) positions
    normals: np.ndarray   # (N, 3) per-vertex normals, zero where no face uses the vertex
    faces: np.ndarray     # (M, 3) zero-based vertex indices

    @property
    def vertex_count(self) -> int:
        return self.vertices.shape[0]

    @property
    def face_count(self) -> int:
        return self.faces.shape[0]


def parse_mesh(lines: Iterable[str]) -> Mesh:
    """
    Parse OBJ text into a Mesh.

    Lines with fewer than four whitespace-separated tokens are ignored, as is
    anything that is not a 'v' or 'f' record. Face indices are one-based and
    must refer to a vertex declared earlier in the file. Each face adds its
    unnormalized normal to its three vertices; the sums are normalized at the
    end.
    """
    vertices = []
    normals = []
    faces = []

    for line_number, line in enumerate(lines, 1):
        items = line.split()
        if len(items) < 4:
            continue

        if items[0] == 'v':
            try:
                position = np.array([float(token) for token in items[1:4]])
            except ValueError as e:
                raise MeshFormatError(f"Line {line_number}: bad vertex coordinate ({e})") from e
            vertices.append(position)
            normals.append(np.zeros(3))

        elif items[0] == 'f':
            try:
                face = [int(token) - 1 for token in items[1:4]]
            except ValueError as e:
                raise MeshFormatError(f"Line {line_number}: bad face index ({e})") from e
            for index in face:
                if not 0 <= index < len(vertices):
                    raise MeshFormatError(
                        f"Line {line_number}: face index {index + 1} does not refer to "
                        f"one of the {len(vertices)} vertices declared so far")
            faces.append(face)

            v0 = vertices[face[0]]
            normal = np.cross(vertices[face[1]] - v0, vertices[face[2]] - v0)
            for index in face:
                normals[index] = normals[index] + normal

    vertex_array = np.array(vertices, dtype=np.float64).reshape(-1, 3)
    normal_array = np.array(normals, dtype=np.float64).reshape(-1, 3)
    lengths = np.linalg.norm(normal_array, axis=1)
    nonzero = lengths > 0
    normal_array[nonzero] /= lengths[nonzero][:, None]

    mesh = Mesh(vertex_array, normal_array, np.array(faces, dtype=np.int64).reshape(-1, 3))
    logger.debug(f"Parsed mesh: {mesh.vertex_count} vertices, {mesh.face_count} faces")
    return mesh


def load_mesh(path: Union[str, Path]) -> Mesh:
    """Read and parse a mesh file; OSError propagates if it cannot be read"""
    path = Path(path)
    with path.open('r', encoding='utf-8') as f:
        mesh = parse_mesh(f)
    logger.info(f"Loaded {path}: {mesh.vertex_count} vertices, {mesh.face_count} faces")
    return mesh
