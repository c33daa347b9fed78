# -*- coding: utf-8 -*-
"""
Vertex & Face
=============

Value types of the mesh data model.

A ``Vertex3`` compares and hashes by exact coordinate value, which is what the
per-side vertex maps rely on when deduplicating. Tolerances are applied only
when testing against a cutting plane, never to vertex identity.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple, Tuple


class Vertex3(NamedTuple):
    """Immutable 3D point (x, y, z)."""
    x: float
    y: float
    z: float

    def __repr__(self):
        return f"Vertex3({self.x!r}, {self.y!r}, {self.z!r})"


@dataclass(frozen=True)
class Face:
    """
    Triangle referencing three vertices of its owning mesh.

    Attributes:
        index_a, index_b, index_c: Positions in the owning mesh's vertex sequence.
        a, b, c: The vertex values at those positions, kept for clipping.

    A -> B -> C is the winding order.
    """
    index_a: int
    index_b: int
    index_c: int
    a: Vertex3
    b: Vertex3
    c: Vertex3

    @property
    def indices(self) -> Tuple[int, int, int]:
        return (self.index_a, self.index_b, self.index_c)

    @property
    def vertices(self) -> Tuple[Vertex3, Vertex3, Vertex3]:
        return (self.a, self.b, self.c)

    def to_obj(self) -> str:
        """OBJ face directive, 1-indexed."""
        return f"f {self.index_a + 1} {self.index_b + 1} {self.index_c + 1}"
