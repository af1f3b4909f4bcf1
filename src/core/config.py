# core/config.py
import math
from typing import NamedTuple, Tuple
from core.vector import Vector3, Point3

DEFAULT_ASPECT_RATIO = 16.0 / 9.0
DEFAULT_IMAGE_WIDTH = 400
DEFAULT_VIEWPORT_HEIGHT = 2.0
DEFAULT_FOCAL_LENGTH = 1.0
DEFAULT_SPHERE_CENTER = (0.0, 0.0, -1.0)
DEFAULT_SPHERE_RADIUS = 0.5


class ConfigError(ValueError):
    """Raised when a render configuration would produce degenerate geometry."""


class RenderConfig(NamedTuple):
    """
    Image, camera and scene parameters for one render.

    Built once at startup and handed to the camera, the renderer and the
    serializer. `clamp` limits quantized channels to [0, 255]; turning it off
    gives the raw ceil(255.999 * c) values, so a channel of exactly 1.0
    comes out as 256.
    """
    aspect_ratio: float = DEFAULT_ASPECT_RATIO
    image_width: int = DEFAULT_IMAGE_WIDTH
    viewport_height: float = DEFAULT_VIEWPORT_HEIGHT
    focal_length: float = DEFAULT_FOCAL_LENGTH
    sphere_center: Tuple[float, float, float] = DEFAULT_SPHERE_CENTER
    sphere_radius: float = DEFAULT_SPHERE_RADIUS
    clamp: bool = True

    @property
    def image_height(self) -> int:
        return math.ceil(self.image_width / self.aspect_ratio)

    @property
    def viewport_width(self) -> float:
        return self.aspect_ratio * self.viewport_height

    @property
    def center(self) -> Point3:
        return Vector3(*self.sphere_center)

    def validate(self) -> "RenderConfig":
        """
        Checks that the camera and scene are non-degenerate.

        Returns:
            self, so the call can be chained.

        Raises:
            ConfigError: If any dimension is zero, negative or not finite.
        """
        for name in ("aspect_ratio", "viewport_height", "focal_length", "sphere_radius"):
            value = getattr(self, name)
            if not math.isfinite(value) or value <= 0:
                raise ConfigError(f"{name} must be a positive finite number, got {value}")
        if len(self.sphere_center) != 3 or not all(math.isfinite(c) for c in self.sphere_center):
            raise ConfigError(f"sphere_center must be three finite numbers, got {self.sphere_center}")
        # u and v are divided by (width - 1) and (height - 1)
        if self.image_width < 2:
            raise ConfigError(f"image_width must be at least 2, got {self.image_width}")
        if self.image_height < 2:
            raise ConfigError(
                f"image height derived from width {self.image_width} and aspect ratio "
                f"{self.aspect_ratio} is {self.image_height}; it must be at least 2"
            )
        return self


def parse_aspect_ratio(text: str) -> float:
    """
    Parses '16/9', '16:9' or '1.777' into a float ratio.
    """
    for sep in ("/", ":"):
        if sep in text:
            num, den = text.split(sep, 1)
            try:
                return float(num) / float(den)
            except (ValueError, ZeroDivisionError) as e:
                raise ConfigError(f"invalid aspect ratio {text!r}: {e}")
    try:
        return float(text)
    except ValueError:
        raise ConfigError(f"invalid aspect ratio {text!r}")
