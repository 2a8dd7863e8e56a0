"""
Configuration settings for the mesh tracer
"""
import os
from dataclasses import dataclass, fields
from typing import Tuple

# Rendering settings
RENDER_SETTINGS = {
    'width': 1024,
    'height': 1024,
    'workers': 0,  # 0 = one per CPU
    'vectorized': True,
}

# Scene settings
SCENE_SETTINGS = {
    'light_position': (1.0, -1.0, 0.0),
    'light_color': (0.0, 0.0, 1.0),
    'specular_color': (0.3, 0.3, 0.3),
    'intersection_epsilon': 1e-5,
}

# Shading and reflection settings
SHADING_SETTINGS = {
    'ambient_factor': 0.2,
    'diffuse_factor': 0.8,
    'specular_exponent': 5.0,
    'bounce_attenuation': 0.8,
    'max_bounce_depth': 10,
    'min_reflectivity': 1e-5,
    'compositing': 'sum',  # 'sum' or 'max'
}

COMPOSITING_POLICIES = ('sum', 'max')


@dataclass(frozen=True)
class RenderConfig:
    """Immutable numeric constants for one render"""
    width: int = RENDER_SETTINGS['width']
    height: int = RENDER_SETTINGS['height']
    light_position: Tuple[float, float, float] = SCENE_SETTINGS['light_position']
    light_color: Tuple[float, float, float] = SCENE_SETTINGS['light_color']
    specular_color: Tuple[float, float, float] = SCENE_SETTINGS['specular_color']
    ambient_factor: float = SHADING_SETTINGS['ambient_factor']
    diffuse_factor: float = SHADING_SETTINGS['diffuse_factor']
    specular_exponent: float = SHADING_SETTINGS['specular_exponent']
    bounce_attenuation: float = SHADING_SETTINGS['bounce_attenuation']
    max_bounce_depth: int = SHADING_SETTINGS['max_bounce_depth']
    min_reflectivity: float = SHADING_SETTINGS['min_reflectivity']
    intersection_epsilon: float = SCENE_SETTINGS['intersection_epsilon']
    compositing: str = SHADING_SETTINGS['compositing']
    workers: int = RENDER_SETTINGS['workers']
    vectorized: bool = RENDER_SETTINGS['vectorized']

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Image size must be positive, got {self.width}x{self.height}")
        if self.compositing not in COMPOSITING_POLICIES:
            raise ValueError(f"Unknown compositing policy: {self.compositing}")
        if not 0.0 < self.bounce_attenuation <= 1.0:
            raise ValueError(f"bounce_attenuation must be in (0, 1], got {self.bounce_attenuation}")
        if self.max_bounce_depth < 0:
            raise ValueError(f"max_bounce_depth must be >= 0, got {self.max_bounce_depth}")
        if self.intersection_epsilon <= 0:
            raise ValueError("intersection_epsilon must be positive")
        if self.workers is not None and self.workers < 0:
            raise ValueError(f"workers must be >= 0, got {self.workers}")
        for name in ('light_position', 'light_color', 'specular_color'):
            value = tuple(float(c) for c in getattr(self, name))
            if len(value) != 3:
                raise ValueError(f"{name} needs 3 components, got {len(value)}")
            object.__setattr__(self, name, value)

    @classmethod
    def from_settings(cls, **overrides) -> "RenderConfig":
        """Build a config from the settings dictionaries, applying overrides"""
        known = {f.name for f in fields(cls)}
        unknown = set(overrides) - known
        if unknown:
            raise ValueError(f"Unknown config keys: {', '.join(sorted(unknown))}")

        settings = {}
        for table in (RENDER_SETTINGS, SCENE_SETTINGS, SHADING_SETTINGS):
            settings.update((k, v) for k, v in table.items() if k in known)
        settings.update((k, v) for k, v in overrides.items() if v is not None)
        return cls(**settings)

    @property
    def worker_count(self) -> int:
        """Resolved number of render processes"""
        return self.workers or os.cpu_count() or 1
