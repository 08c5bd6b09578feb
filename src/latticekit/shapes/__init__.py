"""Euclidean shapes and their digitization.

Key classes:
- Ball, Box: Basic shapes
- ShapeUnion, ShapeIntersection, ShapeMinus: Boolean adapters over any shapes

Key functions:
- digitize: Fill a digital set with the domain points inside a shape
"""

from latticekit.shapes.digitize import digitize
from latticekit.shapes.euclidean import (
    Ball,
    Box,
    EuclideanShape,
    ShapeIntersection,
    ShapeMinus,
    ShapeUnion,
)

__all__ = [
    "Ball",
    "Box",
    "EuclideanShape",
    "ShapeIntersection",
    "ShapeMinus",
    "ShapeUnion",
    "digitize",
]
