# viewmath

A small, dependency-free toolkit of the math a 3D viewport needs:
vectors, colours, 4x4 matrices laid out for OpenGL, quaternions,
shaping curves and tweening (easing) functions.

## Install

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## What is inside

| Module              | Contents                                                       |
|---------------------|----------------------------------------------------------------|
| `viewmath.scalar`   | `clamp(value, min_value, max_value)`, `radian(angle)`          |
| `viewmath.shaping`  | `ShapingEffect`, `shaping(effect, t)`                          |
| `viewmath.tween`    | `TweenEffect`, `tween(effect, current_time, start, delta, duration)` |
| `viewmath.color`    | `Col3f`, `Col4f`                                               |
| `viewmath.vec2`     | `Vec2f`                                                        |
| `viewmath.vec3`     | `Vec3f`                                                        |
| `viewmath.vec4`     | `Vec4f`                                                        |
| `viewmath.mat44`    | `Mat44f`, `SingularMatrixError`                                |
| `viewmath.quat`     | `Quat`                                                         |

## Examples

```python
from viewmath.scalar import radian
from viewmath.vec3 import Vec3f
from viewmath.mat44 import Mat44f
from viewmath.quat import Quat
from viewmath.tween import TweenEffect, tween

# Build a projection and invert it.
projection = Mat44f.perspective(radian(45.0), 4 / 3, 0.1, 1000.0)
inverse = projection.inverse()

# Combine transforms and move a point.
model = Mat44f.translation(1.0, 2.0, 3.0) @ Mat44f.rotate_z(radian(90.0))
moved = model.apply_transformation(Vec3f(1.0, 0.0, 0.0))

# Rotate a vector a quarter turn around Z.
q = Quat.from_axis_angle(Vec3f(0.0, 0.0, 1.0), radian(90.0))
rotated = q.direct_rotation(Vec3f(1.0, 0.0, 0.0))

# Ease a value from 0 to 10 over one second.
halfway = tween(TweenEffect.CUBIC_EASE_IN_OUT, 0.5, 0.0, 10.0, 1.0)
```

## Behaviour worth knowing

- The vector, colour, matrix and quaternion types are mutable. Methods
  such as `add`, `subtract`, `normalize`, `product_by_scalar`,
  `Vec3f.min`, `Vec3f.max`, `Vec3f.clamp`, `Mat44f.multiply`,
  `Mat44f.transpose`, `Quat.multiply` and `Quat.inverse` (the conjugate)
  change the object in place and return `None`.
- Methods that build a new value return it: `cross`, `lerp`, `tween`,
  `median`, `find_perpendicular`, `Mat44f.inverse`, `Mat44f.product_vector`,
  `Mat44f.apply_transformation`, `Quat.product`, `Quat.slerp` and the
  `from_*` class methods. `copy()` gives an independent copy of any type.
- `Quat.to_rotation_matrix` normalizes the quaternion in place before
  building the matrix.
- `normalize` leaves vectors shorter than `1e-6` unchanged; a zero
  quaternion normalizes to the identity. `divide_by_scalar(0.0)` does
  nothing.
- `compare(other, epsilon)` is true when every component differs by
  less than `epsilon`.
- `Mat44f()` is the zero matrix; `Mat44f.identity()` is the identity.
  Elements are read and written as `m[row, col]`, `set_row` replaces a
  row, and `column_major()` gives the sixteen elements in the order
  OpenGL expects. `a @ b` returns the product without changing `a`.
- `Mat44f.inverse` raises `SingularMatrixError` (a `ValueError`) when the
  absolute determinant is not above `1e-5`.
- `Mat44f.apply_transformation(vector, direction=False)` treats the vector
  as a point; with `direction=True` it uses `w = 0` and normalizes the
  result.
- `shaping` returns `0.0` for an unknown effect, and `tween` returns
  `start` for an unknown effect.
- `clamp` treats a NaN value as missing and returns `max_value`.

## What it does not do

The package is math only. It does not open windows, talk to a graphics
API, compile shaders, manage framebuffers or draw anything; it gives you
the matrices, vectors and quaternions to hand to whatever renderer you use.