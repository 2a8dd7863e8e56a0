# FILE: meshtracer/core/raytracer.py
"""
Reflection tracer: follows one camera ray through its mirror bounces
"""
from dataclasses import dataclass

from .scene import Scene
from .shading import ShadingModel
from .vector import Ray, Vector3


@dataclass(frozen=True)
class TraceResult:
    color: Vector3
    bounces: int


class ReflectionTracer:
    """Accumulates local color over successive mirror reflections"""

    def __init__(self, scene: Scene, shading: ShadingModel,
                 bounce_attenuation: float = 0.8, max_bounce_depth: int = 10,
                 min_reflectivity: float = 1e-5, compositing: str = 'sum'):
        if compositing not in ('sum', 'max'):
            raise ValueError(f"Unknown compositing policy: {compositing}")
        self.scene = scene
        self.shading = shading
        self.bounce_attenuation = bounce_attenuation
        self.max_bounce_depth = max_bounce_depth
        self.min_reflectivity = min_reflectivity
        self.compositing = compositing

    @classmethod
    def from_config(cls, scene: Scene, config) -> "ReflectionTracer":
        return cls(
            scene,
            ShadingModel.from_config(config),
            bounce_attenuation=config.bounce_attenuation,
            max_bounce_depth=config.max_bounce_depth,
            min_reflectivity=config.min_reflectivity,
            compositing=config.compositing,
        )

    def trace(self, ray: Ray) -> TraceResult:
        color = Vector3.zero()
        reflectivity = 1.0
        bounces = 0

        while reflectivity > self.min_reflectivity and bounces < self.max_bounce_depth:
            hit = self.scene.nearest_hit(ray)
            if hit is None:
                break

            local = self.shading.shade(hit.point, hit.normal, self.scene) * reflectivity
            if self.compositing == 'sum':
                color = color + local
            else:
                color = color.max(local)

            ray = Ray(hit.point, ray.direction.reflect(hit.normal))
            reflectivity *= self.bounce_attenuation
            bounces += 1

        return TraceResult(color, bounces)
