"""End-to-end tests for the render loop and its backends."""

import io
import numpy as np
import pytest
from core.config import RenderConfig, ConfigError
from renderer.raytracer import Renderer
from renderer.ppm import format_pixel, quantize_buffer
from renderer.shading import background


class FailingSink:
    def __init__(self, fail_after):
        self.writes = 0
        self.fail_after = fail_after

    def write(self, text):
        self.writes += 1
        if self.writes > self.fail_after:
            raise OSError("disk full")


@pytest.fixture(scope="module")
def output():
    sink = io.StringIO()
    remaining = []
    Renderer(RenderConfig()).render(sink, progress=remaining.append)
    return sink.getvalue(), remaining


class TestFullRender:

    def test_header(self, output):
        text, _ = output
        assert text.startswith("P3\n400 225\n255\n")

    def test_pixel_line_count(self, output):
        text, _ = output
        assert len(text.splitlines()) - 3 == 90000

    def test_top_row_is_written_first(self, output):
        text, _ = output
        renderer = Renderer(RenderConfig())
        top_left = background(renderer.camera.get_ray(0.0, 1.0))
        bottom_left = background(renderer.camera.get_ray(0.0, 0.0))
        lines = text.splitlines()
        assert lines[3] + "\n" == format_pixel(top_left)
        assert lines[3 + 224 * 400] + "\n" == format_pixel(bottom_left)

    def test_progress_counts_down(self, output):
        _, remaining = output
        assert remaining == list(range(224, -1, -1))

    def test_all_channels_in_byte_range(self, output):
        text, _ = output
        values = np.array(text.split()[4:], dtype=np.int64)
        assert values.min() >= 0
        assert values.max() <= 255


class TestRenderer:

    def test_invalid_config_fails_before_writing(self):
        with pytest.raises(ConfigError):
            Renderer(RenderConfig(focal_length=0.0))

    def test_unknown_backend(self):
        with pytest.raises(ValueError):
            Renderer(RenderConfig(image_width=10), backend="cuda")

    def test_sink_errors_propagate(self):
        renderer = Renderer(RenderConfig(image_width=10))
        sink = FailingSink(fail_after=5)
        with pytest.raises(OSError):
            renderer.render(sink)
        assert sink.writes == 6

    def test_write_image_matches_render(self):
        renderer = Renderer(RenderConfig(image_width=16))
        direct, from_buffer = io.StringIO(), io.StringIO()
        direct_progress, buffer_progress = [], []
        renderer.render(direct, direct_progress.append)
        renderer.write_image(from_buffer, renderer.render_buffer(), buffer_progress.append)
        assert from_buffer.getvalue() == direct.getvalue()
        assert buffer_progress == direct_progress == list(range(8, -1, -1))

    def test_buffer_row_zero_is_top(self):
        renderer = Renderer(RenderConfig(image_width=16))
        image = renderer.render_buffer()
        assert image.shape == (9, 16, 3)
        # the sky is bluer (less red) near the top than near the bottom
        assert image[0, 0, 0] < image[-1, 0, 0]

    def test_unclamped_render_matches_reference_quantization(self):
        config = RenderConfig(image_width=16, clamp=False)
        sink = io.StringIO()
        renderer = Renderer(config)
        renderer.render(sink)
        values = np.array(sink.getvalue().split()[4:], dtype=np.int64).reshape(9, 16, 3)
        assert (values == quantize_buffer(renderer.render_buffer(), clamp=False)).all()


class TestNumbaBackend:

    def test_buffer_matches_python_backend(self):
        config = RenderConfig(image_width=40)
        expected = Renderer(config, backend="python").render_buffer()
        got = Renderer(config, backend="numba").render_buffer()
        assert got.shape == expected.shape == (23, 40, 3)
        np.testing.assert_allclose(got, expected, rtol=0, atol=1e-12)

    def test_serialized_output_identical(self):
        config = RenderConfig(image_width=40, sphere_center=(0.2, 0.1, -1.5), sphere_radius=0.8)
        python_sink, numba_sink = io.StringIO(), io.StringIO()
        python_progress, numba_progress = [], []
        Renderer(config, backend="python").render(python_sink, python_progress.append)
        Renderer(config, backend="numba").render(numba_sink, numba_progress.append)
        assert numba_sink.getvalue() == python_sink.getvalue()
        assert numba_progress == python_progress
