"""Small mutable vector types used for positions, sizes and colours."""

from __future__ import annotations

from dataclasses import astuple, dataclass
from typing import Iterator


@dataclass
class Vec2:
    """A two-component float vector."""

    x: float = 0.0
    y: float = 0.0

    def __iter__(self) -> Iterator[float]:
        return iter(astuple(self))

    def set(self, x: float, y: float) -> None:
        """Overwrite both components in place."""
        self.x = x
        self.y = y

    def intersects(self, position: Vec2, size: Vec2) -> bool:
        """Return whether this point lies inside the box at ``position`` of ``size``."""
        return (
            position.x <= self.x <= position.x + size.x
            and position.y <= self.y <= position.y + size.y
        )

    @staticmethod
    def lerp(start: Vec2, end: Vec2, t: float) -> Vec2:
        """Linearly interpolate between ``start`` and ``end``."""
        return Vec2(
            start.x + t * (end.x - start.x),
            start.y + t * (end.y - start.y),
        )

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __iadd__(self, other: Vec2) -> Vec2:
        self.x += other.x
        self.y += other.y
        return self

    def __isub__(self, other: Vec2) -> Vec2:
        self.x -= other.x
        self.y -= other.y
        return self


@dataclass
class Vec4:
    """A four-component float vector, also used for RGBA colours."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    def __iter__(self) -> Iterator[float]:
        return iter(astuple(self))

    def set(self, x: float, y: float, z: float, w: float) -> None:
        """Overwrite all four components in place."""
        self.x = x
        self.y = y
        self.z = z
        self.w = w

    def intersects(self, position: Vec4, size: Vec4) -> bool:
        """Return whether every component lies within ``position`` .. ``position + size``."""
        return all(
            p <= v <= p + s for v, p, s in zip(self, position, size)
        )

    @staticmethod
    def lerp(start: Vec4, end: Vec4, t: float) -> Vec4:
        """Linearly interpolate between ``start`` and ``end``."""
        return Vec4(*(a + t * (b - a) for a, b in zip(start, end)))

    def __add__(self, other: Vec4) -> Vec4:
        return Vec4(*(a + b for a, b in zip(self, other)))

    def __sub__(self, other: Vec4) -> Vec4:
        return Vec4(*(a - b for a, b in zip(self, other)))

    def __iadd__(self, other: Vec4) -> Vec4:
        self.set(*(a + b for a, b in zip(self, other)))
        return self

    def __isub__(self, other: Vec4) -> Vec4:
        self.set(*(a - b for a, b in zip(self, other)))
        return self