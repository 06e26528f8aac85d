# raytracer

A small path-tracing renderer. It traces rays through a scene of spheres,
moving spheres, axis-aligned rectangles, boxes and constant-density volumes
(smoke, fog), with Lambertian, metal, dielectric, isotropic and emissive
materials, solid, checker, Perlin-noise and image textures, and a bounding
volume hierarchy to speed up intersection tests.

## Installation

```
pip install .
```

Pillow is the only runtime dependency; it is used to read image textures and
to write the rendered picture.

## Rendering from the command line

```
raytracer --scene cornell_box --width 128 --samples 10 --output cornell.png
```

Options:

- `--scene`: one of `final` (the default), `random`, `random_moving`,
  `cornell_box`, `cornell_smoke`, `earthball`, `simple_light`,
  `two_checker_spheres`, `two_perlin_spheres`.
- `--width`: image width in pixels (default 512).
- `--aspect-ratio`: width divided by height (default 1.0); the height is
  derived from it.
- `--samples`: samples per pixel (default 50).
- `--max-depth`: maximum number of bounces per ray (default 100).
- `--image`: image file used as the texture in the `final` and `earthball`
  scenes (default `images/earth.png`).
- `--output`: file to write; the format follows the suffix (default
  `temp.png`).

A progress bar is drawn on standard error while pixels are traced, and the
time taken is printed when rendering finishes.

## Using the library

```python
from raytracer.camera import Camera
from raytracer.render import render, save_image
from raytracer.scenes.simple import cornell_box
from raytracer.vec3 import Vec3

width = height = 128
camera = Camera(
    Vec3(278.0, 278.0, -800.0),  # look from
    Vec3(278.0, 278.0, 0.0),     # look at
    Vec3(0.0, 1.0, 0.0),         # up
    40.0,                        # vertical field of view, degrees
    1.0,                         # aspect ratio
    0.0,                         # aperture
    10.0,                        # focus distance
    0.0,                         # shutter open
    1.0,                         # shutter close
)
pixels = render(cornell_box(), camera, width, height, 10, 50, Vec3.zero(), None)
save_image(pixels, width, height, "cornell.png")
```

`render` returns the picture as row-major RGB bytes, top row first, with each
pixel averaged over its samples and gamma-corrected. Pass a
`raytracer.progress.ProgressBar` as the last argument to see progress.

Ready-made scenes live in `raytracer.scenes.simple` (`cornell_box`,
`cornell_smoke`, `earthball`, `simple_light`, `two_checker_spheres`,
`two_perlin_spheres`) and `raytracer.scenes.random_scenes` (`random_scene`,
`random_moving_scene`, `final_scene`). `earthball` and `final_scene` take the
path of the image to use as a texture.

To build your own scene, combine the objects in `raytracer.hittable`
(`HittableList`, `Sphere`, `MovingSphere`), `raytracer.shapes` (`XYRect`,
`XZRect`, `YZRect`, `Cuboid`), `raytracer.transform` (`Translation`,
`RotateX`, `RotateY`, `RotateZ`) and `raytracer.bvh` (`BvhNode`,
`ConstantMedium`) with the materials in `raytracer.material` and the
textures in `raytracer.texture`.

## Limitations

- No texture image is included. The `final` and `earthball` scenes need an
  image file at the path given with `--image`.
- The command-line camera is fixed: it always looks from (278, 278, -800)
  towards (278, 278, 0) with a 40° field of view, which frames the Cornell-box
  and final scenes; the other scenes need a camera built through the library.
- Rendering runs in a single thread and is slow at full size; use a small
  width and few samples for quick previews.

## Tests

```
pip install .[test]
pytest
```