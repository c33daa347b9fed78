# -*- coding: utf-8 -*-
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Tuple, Union

import numpy as np

from .bvh import AABB
from .config import DEFAULT_MESH_NAME, PLANE_EPSILON
from .vertex import Face, Vertex3

if TYPE_CHECKING:
    from .axis import AxisLike
    from .split import SplitResult


@dataclass(frozen=True)
class Mesh:
    """
    Immutable triangle mesh.

    Attributes:
        vertices: Vertex values; position in the tuple is the vertex index.
        faces: Triangles referencing ``vertices`` by index.
        name: Mesh name, written as the OBJ ``o`` directive.
    """
    vertices: Tuple[Vertex3, ...]
    faces: Tuple[Face, ...]
    name: str = DEFAULT_MESH_NAME

    def __post_init__(self):
        if not isinstance(self.vertices, tuple):
            object.__setattr__(self, "vertices", tuple(self.vertices))
        if not isinstance(self.faces, tuple):
            object.__setattr__(self, "faces", tuple(self.faces))

    @classmethod
    def from_arrays(cls, vertices, triangles, name: str = DEFAULT_MESH_NAME) -> "Mesh":
        """
        Build a mesh from an (N, 3) coordinate array and an (M, 3) index array,
        as produced by an external loader.

        Raises:
            ValueError: If either array has the wrong shape.
        """
        verts = np.asarray(vertices, dtype=np.float64)
        tris = np.asarray(triangles, dtype=np.int64)
        if verts.size == 0:
            verts = verts.reshape(0, 3)
        if tris.size == 0:
            tris = tris.reshape(0, 3)
        if verts.ndim != 2 or verts.shape[1] != 3:
            raise ValueError(f"vertices must be shape (N, 3), got {verts.shape}")
        if tris.ndim != 2 or tris.shape[1] != 3:
            raise ValueError(f"triangles must be shape (M, 3), got {tris.shape}")
        if tris.size and (tris.min() < 0 or tris.max() >= len(verts)):
            raise ValueError(f"triangle indices must lie in [0, {len(verts)})")

        vertex_list = [Vertex3(float(x), float(y), float(z)) for x, y, z in verts.tolist()]
        faces = [
            Face(a, b, c, vertex_list[a], vertex_list[b], vertex_list[c])
            for a, b, c in tris.tolist()
        ]
        return cls(tuple(vertex_list), tuple(faces), name)

    @property
    def vertex_count(self) -> int:
        return len(self.vertices)

    @property
    def face_count(self) -> int:
        return len(self.faces)

    def vertex_array(self) -> np.ndarray:
        """(N, 3) float64 copy of the vertex coordinates."""
        return np.array(self.vertices, dtype=np.float64).reshape(-1, 3)

    def face_array(self) -> np.ndarray:
        """(M, 3) int64 array of face indices."""
        return np.array([face.indices for face in self.faces], dtype=np.int64).reshape(-1, 3)

    @property
    def bounds(self) -> AABB:
        """Componentwise min/max over all vertices."""
        return AABB.from_points(self.vertex_array())

    def centroid(self) -> Vertex3:
        """Mean of all vertex coordinates.

        Raises:
            ValueError: If the mesh has no vertices.
        """
        if not self.vertices:
            raise ValueError(f"Cannot compute the centroid of empty mesh {self.name!r}")
        x, y, z = self.vertex_array().mean(axis=0)
        return Vertex3(float(x), float(y), float(z))

    def validate(self) -> None:
        """
        Check that every face references existing vertices and carries the
        matching vertex values. Meant for loaders; ``split`` assumes it holds.

        Raises:
            ValueError: On the first inconsistent face.
        """
        count = len(self.vertices)
        for i, face in enumerate(self.faces):
            for index, value in zip(face.indices, face.vertices):
                if not 0 <= index < count:
                    raise ValueError(
                        f"Face {i} of {self.name!r} references vertex {index}, "
                        f"mesh has {count} vertices"
                    )
                if self.vertices[index] != value:
                    raise ValueError(
                        f"Face {i} of {self.name!r} stores {value} for vertex {index}, "
                        f"mesh has {self.vertices[index]}"
                    )

    def split(self, axis: "AxisLike", q: float, epsilon: float = PLANE_EPSILON,
              progress: bool = False) -> "SplitResult":
        """Split by the plane ``axis = q``. See ``split_mesh``."""
        from .axis import Plane
        from .split import split_mesh
        return split_mesh(self, Plane(axis, q), epsilon=epsilon, progress=progress)

    def to_obj(self) -> str:
        from ..exporter.obj_writer import dumps_obj
        return dumps_obj(self)

    def write_obj(self, path: Union[str, Path]) -> Path:
        from ..exporter.obj_writer import write_obj
        return write_obj(self, path)

    def __repr__(self):
        return (f"Mesh(name={self.name!r}, "
                f"vertices={self.vertex_count}, "
                f"faces={self.face_count})")
