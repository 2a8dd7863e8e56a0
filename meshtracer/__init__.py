"""
meshtracer - ray-casting renderer for triangle meshes
"""
from .config import RenderConfig
from .core import Renderer, Scene
from .mesh import Mesh, MeshFormatError, load_mesh, parse_mesh
from .image import save_image

__version__ = "1.0.0"

__all__ = [
    'RenderConfig', 'Renderer', 'Scene',
    'Mesh', 'MeshFormatError', 'load_mesh', 'parse_mesh', 'save_image',
]
