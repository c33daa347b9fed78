# -*- coding: utf-8 -*-
"""
Axis & Plane
============

Axis-aligned cutting planes and the per-axis vertex accessors used by the
clipping engine.

This module is stateless: it only reads vertices and returns new values.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Union

from .config import PLANE_EPSILON
from .vertex import Vertex3

AxisLike = Union["Axis", str, int]


class Axis(IntEnum):
    X = 0
    Y = 1
    Z = 2

    @staticmethod
    def parse(value: AxisLike) -> "Axis":
        """Accept an ``Axis``, a name ("x", "Y") or an index (0..2)."""
        if isinstance(value, Axis):
            return value
        if isinstance(value, str):
            try:
                return Axis[value.strip().upper()]
            except KeyError:
                raise ValueError(f"Unknown axis name: {value!r}. Expected one of X, Y, Z.") from None
        if isinstance(value, int) and not isinstance(value, bool):
            try:
                return Axis(value)
            except ValueError:
                raise ValueError(f"Axis index out of range: {value}. Expected 0, 1 or 2.") from None
        raise ValueError(f"Cannot interpret {value!r} as an axis.")


@dataclass(frozen=True)
class Plane:
    """Infinite plane ``axis = coordinate``."""
    axis: Axis
    coordinate: float

    def __post_init__(self):
        object.__setattr__(self, "axis", Axis.parse(self.axis))
        object.__setattr__(self, "coordinate", float(self.coordinate))


def is_on_plane(coordinate: float, plane_coordinate: float, epsilon: float = PLANE_EPSILON) -> bool:
    """True when ``coordinate`` is within ``epsilon`` of the plane."""
    return abs(coordinate - plane_coordinate) < epsilon


class VertexUtils:
    """
    Accessor bound to one split axis.

    Args:
        axis: Axis the plane coordinate applies to.
    """

    def __init__(self, axis: AxisLike):
        self._axis = Axis.parse(axis)

    @property
    def axis(self) -> str:
        """Axis name, used as the output mesh name suffix."""
        return self._axis.name

    @property
    def axis_index(self) -> int:
        return int(self._axis)

    def get_dimension(self, vertex: Vertex3) -> float:
        return vertex[self._axis]

    def cut_edge(self, a: Vertex3, b: Vertex3, q: float) -> Vertex3:
        """
        Point on segment A-B whose axis coordinate equals ``q``.

        Uses t = (q - dim(a)) / (dim(b) - dim(a)) on all coordinates, then pins
        the axis coordinate to ``q``. The endpoints are taken lowest coordinate
        first, so the two triangles sharing an edge get the same seam vertex
        regardless of their winding.

        Caller guarantees dim(a) != dim(b).
        """
        i = self._axis
        if a[i] > b[i]:
            a, b = b, a
        t = (q - a[i]) / (b[i] - a[i])
        # (1 - t) * a + t * b returns the endpoints exactly at t = 0 and t = 1
        coords = [(1.0 - t) * a[k] + t * b[k] for k in range(3)]
        coords[i] = q
        return Vertex3(*coords)

    def __repr__(self):
        return f"VertexUtils(axis={self.axis})"
