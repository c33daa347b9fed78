"""
tilesplit
=========

Exact splitting of triangle meshes by axis-aligned planes, the core step of
recursive mesh tiling.

Usage Example:
    from tilesplit import Mesh, split_mesh, Plane
    mesh = Mesh.from_arrays(vertices, triangles, name="Tile")
    left, right, straddling = split_mesh(mesh, Plane("X", 0.0))
"""

__version__ = "1.0.0"
__author__ = "tilesplit contributors"
__license__ = "MIT"

from .geometry_kernel import (
    AABB,
    Axis,
    Face,
    Mesh,
    Plane,
    SplitResult,
    Vertex3,
    VertexUtils,
    is_on_plane,
    split_mesh,
)
from .exporter import dumps_obj, write_obj
from .slicer import MeshSplitter, SplitPointStrategy, get_split_point

__all__ = [
    "AABB",
    "Axis",
    "Face",
    "Mesh",
    "MeshSplitter",
    "Plane",
    "SplitPointStrategy",
    "SplitResult",
    "Vertex3",
    "VertexUtils",
    "dumps_obj",
    "get_split_point",
    "is_on_plane",
    "split_mesh",
    "write_obj",
]
