# noripath

Building blocks for a small physically based renderer and a path-graph
viewer, written in plain Python with NumPy.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## What is inside

- `noripath.properties`: `PropertyList`, a typed property store
  (`set_float` / `get_float` and the like, plus `type_of`). A `get_*` call
  raises `NoriError` when the property is missing and no default is given, or
  when it was stored with another `PropertyType`.
- `noripath.objects`: the abstract `NoriObject`, `ClassType`, `Emitter`, a
  name-based registry (`register_class` decorator, `create_instance`) and
  `class_type_name`.
- `noripath.color`: `Color3f` and `Color4f`, with element-wise arithmetic,
  `clamp`, `Color4f.from_color3` and `divide_by_filter_weight`.
- `noripath.ray`: `Ray`, with a reciprocal direction, a segment
  `[mint, maxt]`, `update`, `at`, `reverse` and `with_segment`.
- `noripath.timer`: `Timer`, which reports whole milliseconds through
  `elapsed` and `lap`; the clock can be passed in.
- `noripath.bbox`: `BoundingBox` of any dimension: containment, overlap,
  distances, volume and surface area, axes, corners, merging, and ray slab
  tests (`ray_intersect`, `ray_overlap`).
- `noripath.transform`: `Transform`, a homogeneous 4x4 transform with its
  inverse, applied to vectors, normals, points and rays, and composed with
  `a @ b` (applies `b` first).
- `noripath.rfilter`: the `GaussianFilter`, `MitchellNetravaliFilter`,
  `TentFilter` and `BoxFilter` reconstruction filters, registered as
  `"gaussian"`, `"mitchell"`, `"tent"` and `"box"`.
- `noripath.frame`: `Frame`, an orthonormal shading frame with `to_local`,
  `to_world` and the spherical helpers `cos_theta`, `sin_phi` and the rest.
- `noripath.arcball`: `Arcball`, which turns mouse drags into a rotation
  matrix.
- `noripath.bkldlt`: `BKLDLT`, a Bunch-Kaufman LDLT factorisation of
  symmetric (possibly indefinite) matrices with an optional shift, and a
  linear solver built on it; its status is reported as a `CompInfo`.
- `noripath.viewmodes`: `TransportType`, `ColorType` and the viewer's slider
  mappings, such as `exposure_from_slider` and `pixel_from_slider`.

## Example

```python
import numpy as np
from noripath.properties import PropertyList
from noripath.objects import create_instance
from noripath.bkldlt import BKLDLT

props = PropertyList()
props.set_float("radius", 2.0)
gauss = create_instance("gaussian", props)
print(gauss.eval(0.5))

a = np.array([[4.0, 1.0], [1.0, -3.0]])
solver = BKLDLT(a)
print(solver.solve(np.array([1.0, 2.0])))
```

## What it does not do

The package is a library only. It has no camera model, no command-line
program and no viewer window: `Arcball` and `viewmodes` hold the logic of
such a viewer, but nothing here draws points or paths on screen. It also
does not read scene files or the binary path-graph data a viewer would load.