"""
Framebuffer encoding and preview
"""
import logging
from pathlib import Path
from typing import Union

import cv2
import numpy as np

logger = logging.getLogger(__name__)


def to_rgb8(framebuffer: np.ndarray) -> np.ndarray:
    """Clip float colors to [0, 1] and scale to 8-bit RGB"""
    return (np.clip(framebuffer, 0, 1) * 255).astype(np.uint8)


def save_image(framebuffer: np.ndarray, path: Union[str, Path]) -> Path:
    """Encode the framebuffer as a 24-bit image; format follows the extension"""
    path = Path(path)
    if not path.suffix:
        path = path.with_suffix('.png')

    # OpenCV expects BGR channel order
    image_bgr = cv2.cvtColor(to_rgb8(framebuffer), cv2.COLOR_RGB2BGR)
    if not cv2.imwrite(str(path), image_bgr):
        raise OSError(f"Could not write image to {path}")

    logger.info(f"Wrote {framebuffer.shape[1]}x{framebuffer.shape[0]} image to {path}")
    return path


def show_image(framebuffer: np.ndarray, title: str = "meshtracer"):
    """Display the framebuffer in a matplotlib window"""
    import matplotlib.pyplot as plt

    fig, ax = plt.subplots()
    ax.imshow(to_rgb8(framebuffer))
    ax.set_title(title)
    ax.axis('off')
    plt.show()
