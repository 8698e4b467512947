"""
Parametric Space Curves.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import StrEnum
import math


@dataclass(frozen=True)
class Point:
    """A point (or tangent vector) in 3D space."""
    x: float
    y: float
    z: float = 0.0

    def __str__(self) -> str:
        return f"({self.x:g}, {self.y:g}, {self.z:g})"

    @property
    def magnitude(self) -> float:
        return math.sqrt(self.x**2 + self.y**2 + self.z**2)

    def dot(self, other: Point) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z


class CurveKind(StrEnum):
    """Tag identifying the concrete variant of a Curve."""
    CIRCLE = "circle"
    ELLIPSE = "ellipse"
    HELIX = "helix"


class Curve(ABC):
    """
    Abstract base class for parametric curves.

    Each variant maps a scalar parameter ``t`` (radians for the angular part)
    to a position, exposes the analytic first derivative with respect to
    ``t`` and a scalar size metric used for sorting and aggregation.
    Parameters are fixed at construction and never validated.
    """

    kind: CurveKind

    @abstractmethod
    def radius(self) -> float:
        """Size metric of the curve."""

    @abstractmethod
    def point(self, t: float) -> Point:
        """Position on the curve at parameter t."""

    @abstractmethod
    def derivative(self, t: float) -> Point:
        """First derivative (tangent vector) at parameter t."""

    @abstractmethod
    def description(self) -> str:
        """Human-readable description with the variant name and parameters."""

    def __str__(self) -> str:
        return self.description()


class Circle(Curve):
    """Circle of radius r centred at the origin in the XY plane."""

    kind = CurveKind.CIRCLE

    def __init__(self, radius: float) -> None:
        self._radius = float(radius)

    def __repr__(self) -> str:
        return f"Circle(radius={self._radius!r})"

    def radius(self) -> float:
        return self._radius

    def point(self, t: float) -> Point:
        return Point(self._radius * math.cos(t), self._radius * math.sin(t), 0.0)

    def derivative(self, t: float) -> Point:
        return Point(-self._radius * math.sin(t), self._radius * math.cos(t), 0.0)

    def description(self) -> str:
        return f"Circle with r = {self._radius:f}"


class Ellipse(Curve):
    """
    Axis-aligned ellipse centred at the origin in the XY plane.

    ``radius()`` returns the larger semi-axis, i.e. the radius of the
    circumscribing circle.
    """

    kind = CurveKind.ELLIPSE

    def __init__(self, radius_x: float, radius_y: float) -> None:
        self._radius_x = float(radius_x)
        self._radius_y = float(radius_y)

    def __repr__(self) -> str:
        return f"Ellipse(radius_x={self._radius_x!r}, radius_y={self._radius_y!r})"

    @property
    def radius_x(self) -> float:
        return self._radius_x

    @property
    def radius_y(self) -> float:
        return self._radius_y

    def radius(self) -> float:
        return max(self._radius_x, self._radius_y)

    def point(self, t: float) -> Point:
        return Point(self._radius_x * math.cos(t), self._radius_y * math.sin(t), 0.0)

    def derivative(self, t: float) -> Point:
        return Point(-self._radius_x * math.sin(t), self._radius_y * math.cos(t), 0.0)

    def description(self) -> str:
        return f"Ellipse with rx = {self._radius_x:f}, ry = {self._radius_y:f}"


class Helix(Curve):
    """Circular helix around the Z axis rising by `step` per full turn."""

    kind = CurveKind.HELIX

    def __init__(self, radius: float, step: float) -> None:
        self._radius = float(radius)
        self._step = float(step)

    def __repr__(self) -> str:
        return f"Helix(radius={self._radius!r}, step={self._step!r})"

    @property
    def step(self) -> float:
        return self._step

    def radius(self) -> float:
        return self._radius

    def point(self, t: float) -> Point:
        return Point(
            self._radius * math.cos(t),
            self._radius * math.sin(t),
            self._step * t / (2 * math.pi)
        )

    def derivative(self, t: float) -> Point:
        return Point(
            -self._radius * math.sin(t),
            self._radius * math.cos(t),
            self._step / (2 * math.pi)
        )

    def description(self) -> str:
        return f"Helix with r = {self._radius:f}, s = {self._step:f}"
