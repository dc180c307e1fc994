# ranim

Helpers for building vector animations, plus a command that builds an examples website.

## Modules

- `ranim.math`
  - `cross2d(a, b)`: the 2D cross product.
  - `intersection(p1, v1, p2, v2)`: where two 3D lines meet. It returns `None` when the lines are
    parallel, coincident or skew.
  - `Rect`: a rectangle with `min` and `max` corners, and the methods `union`, `intersection`,
    `center` and `point`.
  - `interpolate_usize(a, b, t)`: returns the integer reached between `a` and `b` at progress `t`,
    together with the fraction of the way to the next integer. It raises `ValueError` when `b < a`.
- `ranim.rate_functions`: easing curves that map progress in [0, 1] to eased progress: `linear`,
  `smooth`, `ease_in_quad`, `ease_out_quad`, `ease_in_out_quad`, `ease_in_cubic`,
  `ease_out_cubic` and `ease_in_out_cubic`.
- `ranim.refresh`: lazily computed values. `CachedMethod(func).get()` calls `func()` once and
  caches the result. `CachedSelfRefMethod(func).get(s)` calls `func(s)` once and caches the result.
- `ranim.geometry`
  - `Id`: a random 128-bit identifier.
  - `SubpathKind` (`INNER`, `OUTER`, `MIDDLE`) and `SubpathWidth(kind, width)`. The default
    `SubpathWidth` is `MIDDLE` with a width of 1.0.
  - `project`, `generate_basis`, `convert_to_2d`, `convert_to_3d`: move points onto planes and
    between plane coordinates and 3D.
  - `rotation_between_vectors`, `angle_between_vectors`.
  - `resize_preserving_order(seq, new_len)`: resamples a sequence to a new length and keeps the
    order of its items.
  - `extend_with_last(items, new_len, default)`: pads a list in place with its last item, or with
    `default` when the list is empty.
- `ranim.bezier`
  - `PathBuilder`: builds a path out of quadratic bezier points. Its methods are `move_to`,
    `line_to`, `quad_to`, `cubic_to`, `close_path`, `vpoints` and `is_empty`. `cubic_to`
    approximates each cubic with quadratics. Drawing before `move_to` raises `ValueError`.
  - `quad_bezier_eval`, `cubic_bezier_eval`, `point_on_quadratic_bezier`,
    `partial_quadratic_bezier`, `split_quad_bezier`, `split_cubic_bezier`, `trim_quad_bezier`,
    `trim_cubic_bezier`, `approx_cubic_with_quadratic` and `get_subpath_closed_flag`.
- `ranim.typst`: `typst_svg(code)` compiles Typst markup to SVG by running the `typst` executable.
  The page has no margin and the text is white. `compile_typst_code(code)` compiles the markup
  unchanged. `strip_background(svg)` removes the first `<path>` element, which is the page
  background.
- `ranim.build_examples`: the `ranim-build-examples` command, described below.

## Installation

```
pip install .
```

To run the tests, install the `test` extra and run pytest:

```
pip install ".[test]"
pytest
```

## Usage

```python
import numpy as np
from ranim.bezier import PathBuilder, quad_bezier_eval
from ranim.rate_functions import smooth

builder = PathBuilder()
builder.move_to(np.array([0.0, 0.0, 0.0]))
builder.cubic_to(
    np.array([1.0, 2.0, 0.0]),
    np.array([2.0, 2.0, 0.0]),
    np.array([3.0, 0.0, 0.0]),
)
builder.close_path()
points = builder.vpoints()

midpoint = quad_bezier_eval(points[:3], smooth(0.5))
```

To render Typst markup you need the `typst` executable on your `PATH`:

```python
from ranim.typst import typst_svg

svg = typst_svg("#text(20pt)[hello]")
```

## Building the examples site

```
ranim-build-examples [EXAMPLES ...] [--lazy-run] [--clean] [--workspace-root PATH]
```

The workspace root defaults to the current directory. It must contain an `examples/` directory,
with one subdirectory per example and a `main.rs` in each.

- With no names given, the command builds every example directory. It always skips `test` and
  `thesis`.
- `--lazy-run` skips running an example when the hash of its source is unchanged and output files
  are already recorded for it.
- `--clean` first removes anything under `output/`, `website/data/`, `website/static/examples/`
  and `website/content/examples/` that belongs to an example that no longer exists. It keeps
  `_index.md`.

For each example, the command:

1. runs `cargo run --example <name> --release` in the workspace root;
2. copies `preview*` images (png, jpg) and output files (mp4, png, jpg) from `output/<name>/` into
   `website/static/examples/<name>/`. It fails if there are no output files;
3. writes `website/data/<name>.toml`, which holds the name, the source code, its SHA-1 hash and the
   copied file paths;
4. writes a page to `website/content/examples/<name>.md`, including the example's `README.md` if it
   has one. The `getting_started0` to `getting_started3` examples get no page.

## What this package does not do

This package provides helpers only. It has no scene, timeline or animated items, and it does not
render frames or encode video. The examples command depends on the examples producing their own
output files.