# -*- coding: utf-8 -*-

from .config import DEFAULT_MESH_NAME, PLANE_EPSILON
from .vertex import Face, Vertex3
from .axis import Axis, Plane, VertexUtils, is_on_plane
from .vertex_index import add_index, ordered_vertices
from .static_class import Classification, TriangleCase, classify_triangle
from .bvh import AABB
from .mesh import Mesh
from .split import SplitResult, split_mesh

__all__ = [
    "AABB",
    "Axis",
    "Classification",
    "DEFAULT_MESH_NAME",
    "Face",
    "Mesh",
    "PLANE_EPSILON",
    "Plane",
    "SplitResult",
    "TriangleCase",
    "Vertex3",
    "VertexUtils",
    "add_index",
    "classify_triangle",
    "is_on_plane",
    "ordered_vertices",
    "split_mesh",
]
