"""Pytest configuration and shared fixtures."""

import sys
from pathlib import Path

import pytest

# Add the project root to the path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from meshtracer.config import RenderConfig  # noqa: E402
from meshtracer.core import Scene, Triangle, Vector3  # noqa: E402
from meshtracer.mesh import parse_mesh  # noqa: E402

UP = Vector3(0.0, 1.0, 0.0)
DOWN = Vector3(0.0, -1.0, 0.0)

PYRAMID_OBJ = """\
# square pyramid resting on y = 0
v -0.8 0 -0.8
v 0.8 0 -0.8
v 0.8 0 0.8
v -0.8 0 0.8
v 0 0.6 0
f 2 1 5
f 3 2 5
f 4 3 5
f 1 4 5
f 1 2 3
f 1 3 4
"""


def horizontal_triangle(y: float, normal: Vector3) -> Triangle:
    """Large triangle in the plane at height y covering the whole view window"""
    return Triangle(
        Vector3(-2.0, y, -2.0), Vector3(4.0, y, -2.0), Vector3(-2.0, y, 4.0),
        normal, normal, normal,
    )


@pytest.fixture
def config():
    """Small render config with the default light and shading constants."""
    return RenderConfig(width=8, height=8, workers=1)


@pytest.fixture
def floor_scene():
    """A single upward-facing triangle at y = 0."""
    return Scene([horizontal_triangle(0.0, UP)])


@pytest.fixture
def mirror_scene():
    """Floor at y = 0 facing a ceiling at y = 2: rays bounce between them forever."""
    return Scene([horizontal_triangle(0.0, UP), horizontal_triangle(2.0, DOWN)])


@pytest.fixture
def pyramid_mesh():
    return parse_mesh(PYRAMID_OBJ.splitlines())


@pytest.fixture
def pyramid_file(tmp_path):
    path = tmp_path / "pyramid.obj"
    path.write_text(PYRAMID_OBJ)
    return path
