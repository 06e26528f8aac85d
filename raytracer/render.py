"""Rendering a scene to an RGB buffer and saving it as an image."""

from __future__ import annotations

import argparse
import os
import random
import time
from collections.abc import Callable, Sequence

from PIL import Image

from raytracer.camera import Camera
from raytracer.hittable import Hittable
from raytracer.progress import ProgressBar
from raytracer.scenes import random_scenes, simple
from raytracer.vec3 import Color, Point3, Vec3


def render(
    world: Hittable,
    camera: Camera,
    width: int,
    height: int,
    samples_per_pixel: int,
    max_depth: int,
    background: Color,
    progress: ProgressBar | None = None,
) -> bytearray:
    """Trace the scene and return row-major RGB bytes, top row first."""
    if width < 2 or height < 2:
        raise ValueError("image must be at least 2 pixels wide and high")
    pixels = bytearray(width * height * 3)
    for j in reversed(range(height)):
        row_start = (height - j - 1) * width * 3
        for i in range(width):
            pixel = Color.zero()
            for _ in range(samples_per_pixel):
                u = (i + random.random()) / (width - 1)
                v = (j + random.random()) / (height - 1)
                pixel = pixel + camera.get_ray(u, v).color(background, world, max_depth)
            offset = row_start + i * 3
            pixels[offset:offset + 3] = bytes(pixel.get_color(samples_per_pixel))
            if progress is not None:
                progress.update()
    return pixels


def save_image(
    pixels: bytes | bytearray, width: int, height: int, path: str | os.PathLike[str]
) -> None:
    """Write an RGB byte buffer as an image file; the format follows the suffix."""
    if len(pixels) != width * height * 3:
        raise ValueError("incorrect image buffer size")
    Image.frombytes("RGB", (width, height), bytes(pixels)).save(path)


def _scene_builders(image_path: str) -> dict[str, Callable[[], Hittable]]:
    return {
        "final": lambda: random_scenes.final_scene(image_path),
        "random": random_scenes.random_scene,
        "random_moving": random_scenes.random_moving_scene,
        "cornell_box": simple.cornell_box,
        "cornell_smoke": simple.cornell_smoke,
        "earthball": lambda: simple.earthball(image_path),
        "simple_light": simple.simple_light,
        "two_checker_spheres": simple.two_checker_spheres,
        "two_perlin_spheres": simple.two_perlin_spheres,
    }


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Render a scene to an image file.")
    parser.add_argument("--scene", default="final", choices=sorted(_scene_builders("")))
    parser.add_argument("--width", type=int, default=512)
    parser.add_argument("--aspect-ratio", type=float, default=1.0)
    parser.add_argument("--samples", type=int, default=50)
    parser.add_argument("--max-depth", type=int, default=100)
    parser.add_argument("--image", default="images/earth.png", help="texture for earth scenes")
    parser.add_argument("--output", default="temp.png")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = _parser().parse_args(argv)
    width = args.width
    height = int(width / args.aspect_ratio)

    world = _scene_builders(args.image)[args.scene]()
    camera = Camera(
        Point3(278.0, 278.0, -800.0),
        Point3(278.0, 278.0, 0.0),
        Vec3(0.0, 1.0, 0.0),
        40.0,
        args.aspect_ratio,
        0.0,
        10.0,
        0.0,
        1.0,
    )
    progress = ProgressBar(width * height)

    start = time.perf_counter()
    pixels = render(
        world, camera, width, height, args.samples, args.max_depth, Color.zero(), progress
    )
    elapsed = time.perf_counter() - start
    print(f"\nTime elapsed rendering: {elapsed:.3f}s")

    save_image(pixels, width, height, args.output)
    return 0