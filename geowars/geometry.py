"""2D vectors, affine 3x3 matrices and drawable shapes."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import IntEnum


@dataclass(frozen=True)
class Vec2:
    """Immutable 2D vector with component-wise arithmetic."""

    x: float = 0.0
    y: float = 0.0

    def __iter__(self):
        yield self.x
        yield self.y

    def __add__(self, other):
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other):
        return Vec2(self.x - other.x, self.y - other.y)

    def __neg__(self):
        return Vec2(-self.x, -self.y)

    def __mul__(self, other):
        if isinstance(other, Vec2):
            return Vec2(self.x * other.x, self.y * other.y)
        return Vec2(self.x * other, self.y * other)

    __rmul__ = __mul__

    def __truediv__(self, other):
        if isinstance(other, Vec2):
            return Vec2(self.x / other.x, self.y / other.y)
        return Vec2(self.x / other, self.y / other)

    def length(self):
        """Euclidean length."""
        return math.hypot(self.x, self.y)

    def distance(self, other):
        """Euclidean distance to another vector."""
        return (self - other).length()


def _as_vec2(point):
    return point if isinstance(point, Vec2) else Vec2(*point)


@dataclass(frozen=True)
class Mat3:
    """Row-major 3x3 matrix for 2D affine transforms.

    ``translate``, ``rotate`` and ``scale`` post-multiply, so the last
    operation added is the first applied to a point.
    """

    rows: tuple = ((1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (0.0, 0.0, 1.0))

    @staticmethod
    def identity():
        return Mat3()

    def __matmul__(self, other):
        columns = list(zip(*other.rows))
        return Mat3(
            tuple(
                tuple(sum(a * b for a, b in zip(row, column)) for column in columns)
                for row in self.rows
            )
        )

    def translate(self, x, y):
        return self @ Mat3(((1.0, 0.0, x), (0.0, 1.0, y), (0.0, 0.0, 1.0)))

    def rotate(self, angle):
        c, s = math.cos(angle), math.sin(angle)
        return self @ Mat3(((c, -s, 0.0), (s, c, 0.0), (0.0, 0.0, 1.0)))

    def scale(self, x, y):
        return self @ Mat3(((x, 0.0, 0.0), (0.0, y, 0.0), (0.0, 0.0, 1.0)))

    def apply(self, point):
        """Transform a point (with an implicit homogeneous 1)."""
        px, py = _as_vec2(point)
        (a, b, c), (d, e, f), _ = self.rows
        return Vec2(a * px + b * py + c, d * px + e * py + f)


class DrawMode(IntEnum):
    """Primitive types a shape can be drawn with."""

    POINTS = 0
    LINES = 1
    LINE_LOOP = 2
    LINE_STRIP = 3
    TRIANGLES = 4


@dataclass(eq=False)
class Shape:
    """A polygon with its own colour, line width and transformation."""

    points: list = field(default_factory=list)
    line_width: float = 1.0
    draw_mode: DrawMode = DrawMode.LINE_LOOP
    color: tuple = (1.0, 0.0, 1.0, 1.0)
    transformation: Mat3 = field(default_factory=Mat3.identity)

    def __post_init__(self):
        self.set_shape(self.points)

    def set_shape(self, points):
        """Replace the vertex data; vertices are relative to the transform origin."""
        self.points = [_as_vec2(p) for p in points]

    def translate(self, x, y=None):
        """Add a translation, given as a vector or as two numbers."""
        if y is None:
            x, y = _as_vec2(x)
        self.transformation = self.transformation.translate(x, y)

    def rotate(self, angle):
        """Add a rotation in radians."""
        self.transformation = self.transformation.rotate(angle)

    def scale(self, x, y=None):
        """Add a scale: uniform for one number, per axis for a vector or two numbers."""
        if y is None:
            if isinstance(x, (Vec2, tuple, list)):
                x, y = _as_vec2(x)
            else:
                y = x
        self.transformation = self.transformation.scale(x, y)

    def set_color(self, r, g, b, a):
        """Set the colour from byte channels (each taken modulo 256)."""
        self.color = tuple((int(c) & 0xFF) / 255 for c in (r, g, b, a))

    def reset_transformation(self):
        self.transformation = Mat3.identity()

    def transformed_points(self):
        """The vertices after the current transformation."""
        return [self.transformation.apply(p) for p in self.points]