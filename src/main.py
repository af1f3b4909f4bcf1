# main.py
import argparse
import sys
from typing import Optional, Sequence
from core.config import (
    ConfigError,
    RenderConfig,
    parse_aspect_ratio,
    DEFAULT_ASPECT_RATIO,
    DEFAULT_IMAGE_WIDTH,
    DEFAULT_VIEWPORT_HEIGHT,
    DEFAULT_FOCAL_LENGTH,
    DEFAULT_SPHERE_CENTER,
    DEFAULT_SPHERE_RADIUS,
)
from renderer.raytracer import BACKENDS, Renderer
from renderer.image_io import save_image, to_rgb8

def parse_arguments(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Render a normal-shaded sphere over a sky gradient to an ASCII PPM image"
    )
    parser.add_argument("-o", "--output", default="output.ppm",
                        help="Output PPM path, or '-' for stdout (default: output.ppm)")
    parser.add_argument("--width", type=int, default=DEFAULT_IMAGE_WIDTH,
                        help=f"Image width in pixels (default: {DEFAULT_IMAGE_WIDTH})")
    parser.add_argument("--aspect-ratio", default=None,
                        help="Aspect ratio as W/H, W:H or a number (default: 16/9)")
    parser.add_argument("--viewport-height", type=float, default=DEFAULT_VIEWPORT_HEIGHT,
                        help=f"Viewport height in world units (default: {DEFAULT_VIEWPORT_HEIGHT})")
    parser.add_argument("--focal-length", type=float, default=DEFAULT_FOCAL_LENGTH,
                        help=f"Distance from camera to viewport (default: {DEFAULT_FOCAL_LENGTH})")
    parser.add_argument("--center", type=float, nargs=3, metavar=("X", "Y", "Z"),
                        default=DEFAULT_SPHERE_CENTER, help="Sphere center (default: 0 0 -1)")
    parser.add_argument("--radius", type=float, default=DEFAULT_SPHERE_RADIUS,
                        help=f"Sphere radius (default: {DEFAULT_SPHERE_RADIUS})")
    parser.add_argument("--no-clamp", action="store_true",
                        help="Write raw ceil(255.999 * c) channels, which can reach 256")
    parser.add_argument("--backend", choices=BACKENDS, default="python",
                        help="Pure Python pixel loop or compiled parallel kernel (default: python)")
    parser.add_argument("--png", default=None, metavar="PATH",
                        help="Also save the image through Pillow (format from extension)")
    parser.add_argument("--preview", action="store_true",
                        help="Show the result in a pygame window")
    parser.add_argument("--quiet", action="store_true", help="Suppress progress output")
    return parser.parse_args(argv)

def build_config(args: argparse.Namespace) -> RenderConfig:
    aspect_ratio = DEFAULT_ASPECT_RATIO
    if args.aspect_ratio is not None:
        aspect_ratio = parse_aspect_ratio(args.aspect_ratio)
    return RenderConfig(
        aspect_ratio=aspect_ratio,
        image_width=args.width,
        viewport_height=args.viewport_height,
        focal_length=args.focal_length,
        sphere_center=tuple(args.center),
        sphere_radius=args.radius,
        clamp=not args.no_clamp,
    ).validate()

def report_progress(remaining: int):
    print(f"\rScanlines remaining: {remaining} ", end="", file=sys.stderr, flush=True)

def render_to(out, renderer: Renderer, args: argparse.Namespace):
    """
    Writes the PPM to an already-open sink. When a PNG or preview is also
    wanted the image is rendered to a buffer once and reused.
    """
    progress = None if args.quiet else report_progress
    if args.png or args.preview:
        image = renderer.render_buffer()
        renderer.write_image(out, image, progress)
        return image
    renderer.render(out, progress)
    return None

def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_arguments(argv)
    try:
        config = build_config(args)
        renderer = Renderer(config, backend=args.backend)
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    if not args.quiet:
        print(f"Rendering {renderer.width}x{renderer.height} with the {args.backend} backend",
              file=sys.stderr)

    try:
        if args.output == "-":
            image = render_to(sys.stdout, renderer, args)
        else:
            with open(args.output, "w", encoding="ascii", newline="\n") as out:
                image = render_to(out, renderer, args)
        if image is not None and args.png:
            save_image(image, args.png)
    except (OSError, ValueError) as e:
        print(f"\nError writing image: {e}", file=sys.stderr)
        return 1

    if not args.quiet:
        print("\nDone.", file=sys.stderr)

    if image is not None and args.preview:
        # pygame writes a banner to stdout on import, which would corrupt '-o -'
        from renderer.preview import show
        show(to_rgb8(image))
    return 0

if __name__ == "__main__":
    sys.exit(main())
