"""Tests for RenderConfig defaults and validation."""

import math
import pytest
from core.config import ConfigError, RenderConfig, parse_aspect_ratio
from core.vector import Vector3


class TestDefaults:

    def test_image_size(self):
        config = RenderConfig()
        assert config.image_width == 400
        assert config.image_height == 225

    def test_camera_and_scene(self):
        config = RenderConfig()
        assert config.viewport_height == 2.0
        assert config.viewport_width == pytest.approx(32.0 / 9.0)
        assert config.focal_length == 1.0
        assert config.center == Vector3(0, 0, -1)
        assert config.sphere_radius == 0.5
        assert config.clamp is True

    def test_height_rounds_up(self):
        assert RenderConfig(image_width=40).image_height == 23

    def test_immutable(self):
        config = RenderConfig()
        with pytest.raises(AttributeError):
            config.image_width = 10


class TestValidate:

    def test_defaults_are_valid(self):
        config = RenderConfig()
        assert config.validate() is config

    @pytest.mark.parametrize("field", ["aspect_ratio", "viewport_height", "focal_length", "sphere_radius"])
    @pytest.mark.parametrize("value", [0.0, -1.0, math.nan, math.inf])
    def test_rejects_degenerate_dimensions(self, field, value):
        with pytest.raises(ConfigError):
            RenderConfig(**{field: value}).validate()

    def test_rejects_single_column(self):
        with pytest.raises(ConfigError):
            RenderConfig(image_width=1).validate()

    def test_rejects_single_row(self):
        with pytest.raises(ConfigError):
            RenderConfig(image_width=4, aspect_ratio=4.0).validate()

    def test_rejects_non_finite_center(self):
        with pytest.raises(ConfigError):
            RenderConfig(sphere_center=(0.0, math.nan, -1.0)).validate()

    def test_config_error_is_value_error(self):
        assert issubclass(ConfigError, ValueError)


class TestParseAspectRatio:

    @pytest.mark.parametrize("text", ["16/9", "16:9"])
    def test_fraction(self, text):
        assert parse_aspect_ratio(text) == 16.0 / 9.0

    def test_decimal(self):
        assert parse_aspect_ratio("1.5") == 1.5

    @pytest.mark.parametrize("text", ["abc", "1/0", "x:2"])
    def test_invalid(self, text):
        with pytest.raises(ConfigError):
            parse_aspect_ratio(text)
