"""Cube coordinates for hexagonal grids."""

from hexcube.coordinate import (
    DIRECTIONS,
    Coordinate,
    InvalidCoordinate,
    at,
    coordinates_in_range,
    origin,
)

__all__ = [
    "DIRECTIONS",
    "Coordinate",
    "InvalidCoordinate",
    "at",
    "coordinates_in_range",
    "origin",
]
