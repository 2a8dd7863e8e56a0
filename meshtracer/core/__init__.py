from .vector import Ray, Vector3, ZeroVectorError
from .scene import DegenerateTriangleError, HitRecord, Scene, Triangle
from .shading import ShadingModel
from .raytracer import ReflectionTracer, TraceResult
from .camera import OrthographicCamera
from .renderer import Renderer, render_row

__all__ = [
    'Ray', 'Vector3', 'ZeroVectorError',
    'DegenerateTriangleError', 'HitRecord', 'Scene', 'Triangle',
    'ShadingModel', 'ReflectionTracer', 'TraceResult',
    'OrthographicCamera', 'Renderer', 'render_row',
]
