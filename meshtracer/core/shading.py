# FILE: meshtracer/core/shading.py
"""
Blinn-Phong shading for a single point light with shadow rays
"""
from .scene import Scene
from .vector import Ray, Vector3, ZeroVectorError


class ShadingModel:
    """Local illumination at a surface point"""

    def __init__(self, light_position: Vector3, light_color: Vector3,
                 specular_color: Vector3 = Vector3(0.3, 0.3, 0.3),
                 ambient_factor: float = 0.2, diffuse_factor: float = 0.8,
                 specular_exponent: float = 5.0):
        self.light_position = light_position
        self.light_color = light_color
        self.specular_color = specular_color
        self.ambient_factor = ambient_factor
        self.diffuse_factor = diffuse_factor
        self.specular_exponent = specular_exponent

    @classmethod
    def from_config(cls, config) -> "ShadingModel":
        return cls(
            light_position=Vector3(*config.light_position),
            light_color=Vector3(*config.light_color),
            specular_color=Vector3(*config.specular_color),
            ambient_factor=config.ambient_factor,
            diffuse_factor=config.diffuse_factor,
            specular_exponent=config.specular_exponent,
        )

    def ambient(self) -> Vector3:
        return self.light_color * self.ambient_factor

    def is_shadowed(self, point: Vector3, scene: Scene) -> bool:
        """Cast a shadow ray toward the light; any hit occludes the point"""
        to_light = Ray(point, self.light_position - point)
        return scene.occluded(to_light)

    def shade(self, point: Vector3, normal: Vector3, scene: Scene) -> Vector3:
        """Ambient plus, when the light is visible, diffuse and specular"""
        color = self.ambient()
        if self.is_shadowed(point, scene):
            return color

        direction = self.light_position - point
        try:
            l = direction.normalize()
        except ZeroVectorError:
            # Point sits on the light
            return color

        kd = max(l.dot(normal), 0.0)
        color = color + self.light_color * (kd * self.diffuse_factor)

        # The view direction is taken from the point itself, not a camera position
        try:
            e = (-point).normalize()
            h = (l + e).normalize()
        except ZeroVectorError:
            return color

        ks = max(normal.dot(h), 0.0) ** self.specular_exponent
        return color + self.specular_color * ks
