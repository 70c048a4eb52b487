"""Top-level helpers for raygeom."""

__all__ = [
    # Scalars
    "FloatScalar",
    "IntScalar",
    "partial_min",
    "partial_max",
    # Axis tags and errors
    "Dimension2",
    "Dimension3",
    "OutOfBoundsError",
    # Geometric types
    "Vector2",
    "Vector3",
    "vec2",
    "vec3",
    "Point2",
    "Point3",
    "Normal3",
    "Matrix2x2",
    "Matrix3x3",
    "Matrix4x4",
    "Ray",
    "RayDifferential",
    # Free functions
    "dot",
    "abs_dot",
    "cross",
    "min_component",
    "max_component",
    "max_dimension",
    "component_wise_min",
    "component_wise_max",
    "distance",
    "distance_squared",
    "lerp",
    "permute",
    "face_forward",
    "coordinate_system",
]

from .scalar import FloatScalar, IntScalar, partial_max, partial_min
from .common import (
    Dimension2,
    Dimension3,
    OutOfBoundsError,
    abs_dot,
    component_wise_max,
    component_wise_min,
    cross,
    distance,
    distance_squared,
    dot,
    face_forward,
    lerp,
    max_component,
    max_dimension,
    min_component,
    permute,
)
from .vector import Vector2, Vector3, coordinate_system, vec2, vec3
from .point import Point2, Point3
from .normal import Normal3
from .matrix import Matrix2x2, Matrix3x3, Matrix4x4
from .ray import Ray, RayDifferential
