"""
Cube coordinates for hexagonal grids.

This module implements the cubic coordinate system for hex maps.
It supports:
- Validated construction of coordinates
- Finding adjacent hexes
- Distance calculations between hexes
- Vector addition and subtraction of coordinates
- Finding all hexes within a range

Cube Coordinates (x, y, z):
---------------------------
Every hex is identified by three integers with the constraint x + y + z = 0.
The constraint is what keeps the representation unique: only two of the
three values are free. Distance becomes simple:
    distance = (|dx| + |dy| + |dz|) / 2

The sum |dx| + |dy| + |dz| is always even for two valid coordinates, since
dx + dy + dz = 0, so the integer division is exact.

References:
-----------
Based on the excellent guide at: https://www.redblobgames.com/grids/hexagons/
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass

logger = logging.getLogger(__name__)


class InvalidCoordinate(ValueError):
    """Raised when x + y + z != 0 for a cube coordinate."""


# Direction vectors for the 6 neighbors in cube coordinates.
# Each offset moves +1 along one axis and -1 along another, so each sums to 0.
DIRECTIONS: tuple[tuple[int, int, int], ...] = (
    (1, 0, -1),
    (1, -1, 0),
    (-1, 1, 0),
    (-1, 0, 1),
    (0, 1, -1),
    (0, -1, 1),
)


def _check_component(name: str, value: object) -> None:
    # bool is an int subclass but never a meaningful component
    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"Component {name} must be an integer, got {type(value).__name__}"
        raise TypeError(msg)


@dataclass(frozen=True, slots=True, order=True)
class Coordinate:
    """
    A hexagonal coordinate using the cube coordinate system.

    Attributes:
        x: First cube axis
        y: Second cube axis
        z: Third cube axis

    Instances are immutable and hashable. Equality and ordering compare
    x, then y, then z. Constructing an instance whose components do not sum
    to zero raises InvalidCoordinate.

    Example:
        >>> a = Coordinate.at(-3, -1, 4)
        >>> b = Coordinate.at(2, 7, -9)
        >>> a.distance_to(b)
        13
        >>> a + b
        Coordinate(x=-1, y=6, z=-5)
    """

    x: int
    y: int
    z: int

    def __post_init__(self) -> None:
        _check_component("x", self.x)
        _check_component("y", self.y)
        _check_component("z", self.z)
        total = self.x + self.y + self.z
        if total != 0:
            logger.debug("rejected cube coordinate (%d, %d, %d)", self.x, self.y, self.z)
            msg = (
                "Invalid cubic coordinates: x + y + z must be 0, "
                f"got ({self.x}, {self.y}, {self.z}) summing to {total}"
            )
            raise InvalidCoordinate(msg)

    @classmethod
    def origin(cls) -> Coordinate:
        """Return the coordinate (0, 0, 0)."""
        return cls(0, 0, 0)

    @classmethod
    def at(cls, x: int, y: int, z: int) -> Coordinate:
        """
        Build a coordinate from explicit components.

        Args:
            x: First cube axis
            y: Second cube axis
            z: Third cube axis

        Returns:
            The validated Coordinate

        Raises:
            InvalidCoordinate: If x + y + z != 0
            TypeError: If a component is not an integer

        Example:
            >>> Coordinate.at(-3, -1, 4)
            Coordinate(x=-3, y=-1, z=4)
        """
        return cls(x, y, z)

    @classmethod
    def _trusted(cls, x: int, y: int, z: int) -> Coordinate:
        # Only for results of arithmetic on valid coordinates; skips __post_init__.
        coord = object.__new__(cls)
        object.__setattr__(coord, "x", x)
        object.__setattr__(coord, "y", y)
        object.__setattr__(coord, "z", z)
        return coord

    def __iter__(self) -> Iterator[int]:
        return iter((self.x, self.y, self.z))

    def neighbors(self) -> list[Coordinate]:
        """
        Find all 6 adjacent hexes to this hex.

        The order is fixed and follows DIRECTIONS:
        (+1, 0, -1), (+1, -1, 0), (-1, +1, 0), (-1, 0, +1), (0, +1, -1), (0, -1, +1).

        Returns:
            A list of 6 Coordinate objects representing the neighbors

        Example:
            >>> Coordinate.origin().neighbors()[0]
            Coordinate(x=1, y=0, z=-1)
        """
        return [
            Coordinate._trusted(self.x + dx, self.y + dy, self.z + dz) for dx, dy, dz in DIRECTIONS
        ]

    def distance_to(self, other: Coordinate) -> int:
        """
        Calculate the distance between two hexes.

        The distance is the minimum number of hex steps to move from this hex
        to the other one.

        Args:
            other: The target coordinate

        Returns:
            The distance between the two hexes (non-negative integer)
        """
        dx = abs(self.x - other.x)
        dy = abs(self.y - other.y)
        dz = abs(self.z - other.z)
        return (dx + dy + dz) // 2

    def length(self) -> int:
        """Distance from the origin."""
        return (abs(self.x) + abs(self.y) + abs(self.z)) // 2

    def add(self, other: Coordinate) -> Coordinate:
        """Component-wise sum of two coordinates."""
        return Coordinate._trusted(self.x + other.x, self.y + other.y, self.z + other.z)

    def subtract(self, other: Coordinate) -> Coordinate:
        """Component-wise difference of two coordinates."""
        return Coordinate._trusted(self.x - other.x, self.y - other.y, self.z - other.z)

    def __add__(self, other: object) -> Coordinate:
        if not isinstance(other, Coordinate):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> Coordinate:
        if not isinstance(other, Coordinate):
            return NotImplemented
        return self.subtract(other)

    def __neg__(self) -> Coordinate:
        return Coordinate._trusted(-self.x, -self.y, -self.z)


def origin() -> Coordinate:
    """Return the coordinate (0, 0, 0)."""
    return Coordinate.origin()


def at(x: int, y: int, z: int) -> Coordinate:
    """Build a validated coordinate; see :meth:`Coordinate.at`."""
    return Coordinate.at(x, y, z)


def coordinates_in_range(center: Coordinate, n: int) -> list[Coordinate]:
    """
    Find all hexes within range n of the center hex (inclusive).

    This returns all hexes where center.distance_to(hex) <= n.
    The number of hexes follows the formula: 3n^2 + 3n + 1

    Args:
        center: The center hex coordinate
        n: The maximum distance (range)

    Returns:
        A list of Coordinate objects within the range

    Raises:
        ValueError: If n is negative

    Example:
        >>> len(coordinates_in_range(Coordinate.origin(), n=1))
        7
    """
    if n < 0:
        msg = f"Range n must be non-negative, got {n}"
        raise ValueError(msg)

    hexes = []
    for dx in range(-n, n + 1):
        for dy in range(max(-n, -dx - n), min(n, -dx + n) + 1):
            dz = -dx - dy
            hexes.append(Coordinate._trusted(center.x + dx, center.y + dy, center.z + dz))
    return hexes
