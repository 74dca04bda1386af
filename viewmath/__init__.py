"""Vectors, colours, 4x4 matrices, quaternions, shaping curves and tweening for 3D views."""

__version__ = "0.1.0"
__all__ = ["color", "mat44", "quat", "scalar", "shaping", "tween", "vec2", "vec3", "vec4"]