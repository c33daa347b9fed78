# -*- coding: utf-8 -*-
"""
Split
=====

Splits a triangle mesh by an axis-aligned plane into a left mesh
(axis coordinate < q) and a right mesh (>= q).

Each triangle is classified by which of its corners lie left of the plane:
- all on one side: copied to that side unchanged
- one corner alone on its side (the pivot): clipped into one triangle on the
  pivot's side and two on the other, with two seam vertices on the plane
  registered in both outputs

A straddling triangle whose two non-pivot corners both lie on the plane
(within epsilon) is not cut; it goes whole to the pivot's side.

The input mesh is only read. All working state lives in one call.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterator, List

from tqdm import tqdm

from .axis import Plane, VertexUtils, is_on_plane
from .config import PLANE_EPSILON, PROGRESS_MIN_FACES
from .mesh import Mesh
from .static_class import Classification, TriangleCase, classify_triangle
from .vertex import Face, Vertex3
from .vertex_index import add_index, ordered_vertices

logger = logging.getLogger("tilesplit.split")


@dataclass(frozen=True)
class SplitResult:
    """
    Attributes:
        left: Part with axis coordinate < q, named ``<parent>-<axis>L``.
        right: Part with axis coordinate >= q, named ``<parent>-<axis>R``.
        straddle_count: Number of input triangles that crossed the plane.
    """
    left: Mesh
    right: Mesh
    straddle_count: int

    def __iter__(self) -> Iterator:
        return iter((self.left, self.right, self.straddle_count))


class _SideBuffer:
    """Vertex map and face list being built for one output mesh."""

    def __init__(self):
        self.vertex_map: Dict[Vertex3, int] = {}
        self.faces: List[Face] = []

    def add(self, vertex: Vertex3) -> int:
        return add_index(self.vertex_map, vertex)

    def keep(self, face: Face) -> None:
        index_a = self.add(face.a)
        index_b = self.add(face.b)
        index_c = self.add(face.c)
        self.faces.append(Face(index_a, index_b, index_c, face.a, face.b, face.c))

    def build(self, name: str) -> Mesh:
        return Mesh(tuple(ordered_vertices(self.vertex_map)), tuple(self.faces), name)


class _Splitter:
    def __init__(self, utils: VertexUtils, q: float, epsilon: float):
        self.utils = utils
        self.q = q
        self.epsilon = epsilon
        self.left = _SideBuffer()
        self.right = _SideBuffer()
        self._handlers = {
            TriangleCase.ALL_LEFT: self.keep_left,
            TriangleCase.ALL_RIGHT: self.keep_right,
            TriangleCase.PIVOT_LEFT: self.clip_pivot_left,
            TriangleCase.PIVOT_RIGHT: self.clip_pivot_right,
        }

    def process(self, face: Face) -> bool:
        """Route one face; True if it straddled the plane."""
        classification = classify_triangle(face, self.utils, self.q)
        self._handlers[classification.case](face, classification)
        return classification.straddles

    def _on_plane(self, vertex: Vertex3) -> bool:
        return is_on_plane(self.utils.get_dimension(vertex), self.q, self.epsilon)

    def keep_left(self, face: Face, classification: Classification) -> None:
        self.left.keep(face)

    def keep_right(self, face: Face, classification: Classification) -> None:
        self.right.keep(face)

    def clip_pivot_left(self, face: Face, classification: Classification) -> None:
        v_l, v_r1, v_r2 = classification.rotate(face)
        left, right = self.left, self.right

        index_vl_left = left.add(v_l)

        if self._on_plane(v_r1) and self._on_plane(v_r2):
            # Right corners are on the plane
            index_vr1_left = left.add(v_r1)
            index_vr2_left = left.add(v_r2)
            left.faces.append(Face(index_vl_left, index_vr1_left, index_vr2_left, v_l, v_r1, v_r2))
            return

        index_vr1_right = right.add(v_r1)
        index_vr2_right = right.add(v_r2)

        t1 = self.utils.cut_edge(v_l, v_r1, self.q)
        index_t1_left = left.add(t1)
        index_t1_right = right.add(t1)

        t2 = self.utils.cut_edge(v_l, v_r2, self.q)
        index_t2_left = left.add(t2)
        index_t2_right = right.add(t2)

        left.faces.append(Face(index_vl_left, index_t1_left, index_t2_left, v_l, t1, t2))
        right.faces.append(Face(index_t1_right, index_vr1_right, index_vr2_right, t1, v_r1, v_r2))
        right.faces.append(Face(index_t1_right, index_vr2_right, index_t2_right, t1, v_r2, t2))

    def clip_pivot_right(self, face: Face, classification: Classification) -> None:
        v_r, v_l1, v_l2 = classification.rotate(face)
        left, right = self.left, self.right

        index_vr_right = right.add(v_r)

        if self._on_plane(v_l1) and self._on_plane(v_l2):
            # Left corners are on the plane
            index_vl1_right = right.add(v_l1)
            index_vl2_right = right.add(v_l2)
            right.faces.append(Face(index_vr_right, index_vl1_right, index_vl2_right, v_r, v_l1, v_l2))
            return

        index_vl1_left = left.add(v_l1)
        index_vl2_left = left.add(v_l2)

        t1 = self.utils.cut_edge(v_r, v_l1, self.q)
        index_t1_left = left.add(t1)
        index_t1_right = right.add(t1)

        t2 = self.utils.cut_edge(v_r, v_l2, self.q)
        index_t2_left = left.add(t2)
        index_t2_right = right.add(t2)

        right.faces.append(Face(index_vr_right, index_t1_right, index_t2_right, v_r, t1, t2))
        # Quad t1 -> vL1 -> vL2 -> t2, fanned from t2
        left.faces.append(Face(index_t2_left, index_vl1_left, index_vl2_left, t2, v_l1, v_l2))
        left.faces.append(Face(index_t2_left, index_t1_left, index_vl1_left, t2, t1, v_l1))


def split_mesh(mesh: Mesh, plane: Plane, epsilon: float = PLANE_EPSILON,
               progress: bool = False) -> SplitResult:
    """
    Split ``mesh`` by ``plane``.

    Args:
        mesh: Mesh to split. Not modified.
        plane: Axis-aligned cutting plane.
        epsilon: Tolerance for the on-plane degenerate cases.
        progress: Show a tqdm bar for large meshes.

    Returns:
        SplitResult with the two new meshes and the straddle count.

    Examples:
        >>> from tilesplit.geometry_kernel import Mesh, Plane, Axis, split_mesh
        >>> tri = Mesh.from_arrays([[-1, 0, 0], [1, 0, 0], [1, 1, 0]], [[0, 1, 2]], name="Tile")
        >>> left, right, count = split_mesh(tri, Plane(Axis.X, 0.0))
        >>> (left.name, left.face_count, right.name, right.face_count, count)
        ('Tile-XL', 1, 'Tile-XR', 2, 1)
    """
    utils = VertexUtils(plane.axis)
    splitter = _Splitter(utils, plane.coordinate, epsilon)

    faces = tqdm(
        mesh.faces,
        desc=f"[{mesh.name}] split {utils.axis}",
        unit="tri",
        leave=False,
        disable=not progress or mesh.face_count < PROGRESS_MIN_FACES,
    )
    count = 0
    for face in faces:
        if splitter.process(face):
            count += 1

    left = splitter.left.build(f"{mesh.name}-{utils.axis}L")
    right = splitter.right.build(f"{mesh.name}-{utils.axis}R")

    logger.debug(
        f"Split {mesh.name} at {utils.axis}={plane.coordinate}: "
        f"{mesh.face_count} faces -> {left.face_count} left / {right.face_count} right, "
        f"{count} straddling"
    )
    return SplitResult(left, right, count)
