# FILE: meshtracer/core/camera.py
"""
Fixed orthographic camera looking down the -y axis
"""
from typing import Tuple

from .vector import Ray, Vector3


class OrthographicCamera:
    """
    Maps pixels onto the [-1, 1] x [-1, 1] window of the plane y = 1.

    Rows run along z and columns along x; every ray points straight down
    the projection axis. Framebuffer cells are mirrored on both axes
    relative to (row, col).
    """

    DIRECTION = Vector3(0.0, -1.0, 0.0)
    PLANE_Y = 1.0

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height

    def ray_for_pixel(self, row: int, col: int) -> Ray:
        fi = row / self.height * 2 - 1
        fj = col / self.width * 2 - 1
        return Ray(Vector3(fj, self.PLANE_Y, fi), self.DIRECTION)

    def framebuffer_index(self, row: int, col: int) -> Tuple[int, int]:
        return self.height - row - 1, self.width - col - 1
