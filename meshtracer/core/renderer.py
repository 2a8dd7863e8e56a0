# FILE: meshtracer/core/renderer.py
"""
Renderer: per-row dispatch of camera rays over a process pool
"""
import logging
import time
from multiprocessing import Pool
from typing import Optional

import numpy as np

from meshtracer.utils import ProgressReporter
from .camera import OrthographicCamera
from .raytracer import ReflectionTracer
from .scene import Scene

logger = logging.getLogger(__name__)

# Per-process render state, installed once by the pool initializer
_worker = {}


def _init_worker(scene: Scene, config):
    _worker['tracer'] = ReflectionTracer.from_config(scene, config)
    _worker['camera'] = OrthographicCamera(config.width, config.height)


def _render_row(row: int):
    return row, render_row(_worker['tracer'], _worker['camera'], row)


def render_row(tracer: ReflectionTracer, camera: OrthographicCamera, row: int) -> np.ndarray:
    """Colors of one image row in column order, shape (width, 3)"""
    colors = np.zeros((camera.width, 3), dtype=np.float32)
    for col in range(camera.width):
        color = tracer.trace(camera.ray_for_pixel(row, col)).color
        colors[col] = (color.x, color.y, color.z)
    return colors


class Renderer:
    """Fills a framebuffer by tracing one ray per pixel"""

    def __init__(self, scene: Scene, config):
        self.scene = scene
        self.config = config
        self.camera = OrthographicCamera(config.width, config.height)

    def allocate_framebuffer(self) -> np.ndarray:
        return np.zeros((self.config.height, self.config.width, 3), dtype=np.float32)

    def _store_row(self, framebuffer: np.ndarray, row: int, colors: np.ndarray):
        # Pixel (row, col) lands at [height - row - 1][width - col - 1]
        target, _ = self.camera.framebuffer_index(row, 0)
        framebuffer[target] = colors[::-1]

    def render(self, workers: Optional[int] = None) -> np.ndarray:
        """Render every row and return the (height, width, 3) framebuffer"""
        height = self.config.height
        if workers is None:
            workers = self.config.worker_count
        workers = max(1, min(workers, height))

        framebuffer = self.allocate_framebuffer()
        progress = ProgressReporter(height)

        logger.info(f"Rendering {self.config.width}x{height} over {len(self.scene)} triangles "
                    f"with {workers} worker(s)")
        start_time = time.time()

        if workers == 1:
            tracer = ReflectionTracer.from_config(self.scene, self.config)
            for row in range(height):
                self._store_row(framebuffer, row, render_row(tracer, self.camera, row))
                logger.debug(f"Row {row} done")
                progress.update()
        else:
            with Pool(processes=workers, initializer=_init_worker,
                      initargs=(self.scene, self.config)) as pool:
                for row, colors in pool.imap_unordered(_render_row, range(height)):
                    self._store_row(framebuffer, row, colors)
                    logger.debug(f"Row {row} done")
                    progress.update()

        logger.info(f"Render finished in {time.time() - start_time:.2f}s")
        return framebuffer
