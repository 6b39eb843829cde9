"""Two-dimensional vector for model positions."""

import math

import attr
import numpy as np


@attr.s(frozen=True, repr=False)
class Vector2:
    """Immutable vector in the model plane."""

    x: float = attr.ib(converter=float, default=0.0)
    y: float = attr.ib(converter=float, default=0.0)

    @classmethod
    def from_polar(cls, magnitude: float, angle: float) -> "Vector2":
        return cls(magnitude * math.cos(angle), magnitude * math.sin(angle))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.x:g}, {self.y:g})"

    def __add__(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> "Vector2":
        return Vector2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> "Vector2":
        return Vector2(self.x / scalar, self.y / scalar)

    def __neg__(self) -> "Vector2":
        return Vector2(-self.x, -self.y)

    @property
    def magnitude(self) -> float:
        return math.hypot(self.x, self.y)

    @property
    def angle(self) -> float:
        """Angle in radians with respect to the positive x-axis."""
        return math.atan2(self.y, self.x)

    def distance(self, other: "Vector2") -> float:
        return (other - self).magnitude

    def equals_epsilon(self, other: "Vector2", epsilon: float) -> bool:
        return (
            abs(self.x - other.x) <= epsilon
            and abs(self.y - other.y) <= epsilon
        )

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y])


ZERO = Vector2(0.0, 0.0)
