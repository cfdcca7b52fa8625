# raysketch

A compact ray tracer for scenes made of coloured spheres. It casts one ray per
pixel from a pinhole camera, shades each hit by how directly the surface faces
the camera (the camera position doubles as the light), writes the result as a
plain-text PPM (`P3`) image, and can show the scene in a window you can move
through.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
raysketch
```

This renders the default scene (a red, a green and a blue sphere, seen from the
origin looking down the negative z axis) at 600×400, saves it as `result.ppm`
in the current directory, and then opens a 600×400 viewer window that
re-renders the scene every frame. The frame rate is logged to the console.

Options:

| Option            | Meaning                                        |
|-------------------|------------------------------------------------|
| `--output PATH`   | PPM file to write (default `result.ppm`)       |
| `--width N`       | image width in pixels (default 600)            |
| `--height N`      | image height in pixels (default 400)           |
| `--no-display`    | save the image and exit without a window       |

Width and height must be positive.

Keys in the viewer:

| Key        | Action                                  |
|------------|-----------------------------------------|
| W / S      | move the camera forward / backward      |
| A / D      | turn left / right                       |
| Up / Down  | tilt up / down                          |
| U / I      | move the first sphere up / down         |

Any other key logs "Not a valid input". Close the window to quit.

## Library use

```python
from raysketch.vector import Vector3
from raysketch.sphere import Sphere
from raysketch.image import Image
from raysketch.render import render

image = Image(320, 200, 255)
spheres = [Sphere(Vector3(0, 0, -6), 2.0, Vector3(255, 0, 0))]
right, up = render(
    image,
    camera=Vector3(0, 0, 0),
    background=Vector3(0, 0, 0),
    spheres=spheres,
    camera_dir=Vector3(0, 0, -1),
    world_up=Vector3(0, 1, 0),
    fov=60.0,
    workers=4,
)
image.save("sphere.ppm")
```

`render` splits the image rows between worker threads (by default one per CPU)
and returns the camera's `(right, up)` basis used for the frame.

Saved images can be read back with `Image.load("sphere.ppm")`; lines starting
with `#` are skipped, and malformed files raise
`raysketch.image.ImageFormatError` (a `ValueError`).

The building blocks:

- `raysketch.vector.Vector3`: an immutable 3-D vector with `+`, `-`, negation,
  scaling, `dot`, `cross`, `length` and `normalized`.
- `raysketch.sphere.Sphere`: centre, radius and colour; `moved(offset)`
  returns a shifted copy.
- `raysketch.image`: `Pixel` (with `from_vector`) and `Image`, which keeps a
  grid of pixels plus a packed RGB byte buffer (`pixel_array`, values clamped
  to 0–255), with `aspect_ratio`, `set_pixel`, `load` and `save`.
- `raysketch.ray.Ray`: `intersect_sphere` (nearest non-negative hit, or
  `None`), `at` and `color`.
- `raysketch.render`: `camera_basis`, `rotate`, `render_rows` and `render`.
- `raysketch.app`: `Scene`, `default_scene`, `apply_key`, `run_viewer` and
  `main`.

## Limits

Only spheres are supported, lit by a single light at the camera. There are no
shadows, reflections, anti-aliasing or scene files: scenes are built in code,
and the command always renders the built-in default scene.