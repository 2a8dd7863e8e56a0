"""Tests for render configuration."""

import os

import pytest

from meshtracer.config import SHADING_SETTINGS, RenderConfig


class TestRenderConfig:

    def test_defaults(self):
        config = RenderConfig()
        assert (config.width, config.height) == (1024, 1024)
        assert config.light_position == (1.0, -1.0, 0.0)
        assert config.light_color == (0.0, 0.0, 1.0)
        assert config.ambient_factor == 0.2
        assert config.diffuse_factor == 0.8
        assert config.specular_exponent == 5
        assert config.bounce_attenuation == 0.8
        assert config.max_bounce_depth == 10
        assert config.min_reflectivity == 1e-5
        assert config.intersection_epsilon == 1e-5
        assert config.compositing == 'sum'

    def test_from_settings_overrides(self):
        config = RenderConfig.from_settings(width=64, height=None, light_position=[0, 5, 0])
        assert config.width == 64
        assert config.height == 1024
        assert config.light_position == (0.0, 5.0, 0.0)
        assert config.max_bounce_depth == SHADING_SETTINGS['max_bounce_depth']

    def test_from_settings_rejects_unknown_keys(self):
        with pytest.raises(ValueError, match="bogus"):
            RenderConfig.from_settings(bogus=1)

    @pytest.mark.parametrize("overrides", [
        {'width': 0},
        {'height': -3},
        {'compositing': 'average'},
        {'bounce_attenuation': 0.0},
        {'bounce_attenuation': 1.5},
        {'max_bounce_depth': -1},
        {'intersection_epsilon': 0.0},
        {'workers': -2},
        {'light_color': (1.0, 1.0)},
    ])
    def test_invalid_values(self, overrides):
        with pytest.raises(ValueError):
            RenderConfig(**overrides)

    def test_frozen(self):
        config = RenderConfig()
        with pytest.raises(AttributeError):
            config.width = 10

    def test_worker_count(self):
        assert RenderConfig(workers=3).worker_count == 3
        assert RenderConfig(workers=0).worker_count == (os.cpu_count() or 1)
