# -*- coding: utf-8 -*-
"""
Splitter Orchestrator
=====================
Entry point for tiling callers.
Chooses the cut coordinate for a mesh and runs the split kernel.

Deciding when to stop splitting stays with the caller.
"""

import logging
from enum import Enum
from typing import Iterable, List, Optional, Union

from ..default_config import DEFAULTS
from ..geometry_kernel.axis import Axis, AxisLike, Plane
from ..geometry_kernel.config import PLANE_EPSILON
from ..geometry_kernel.mesh import Mesh
from ..geometry_kernel.split import SplitResult, split_mesh


class SplitPointStrategy(str, Enum):
    ABSOLUTE_CENTER = "absolute_center"      # middle of the bounding box
    VERTEX_BARYCENTER = "vertex_barycenter"  # mean of the vertices

    @staticmethod
    def parse(value: Union["SplitPointStrategy", str]) -> "SplitPointStrategy":
        try:
            return SplitPointStrategy(value)
        except ValueError:
            raise ValueError(
                f"Unknown split point strategy: {value!r}. "
                f"Expected one of {[s.value for s in SplitPointStrategy]}."
            ) from None


DEFAULT_SPLIT_STRATEGY = SplitPointStrategy.parse(DEFAULTS["DEFAULT_SPLIT_STRATEGY"])


def get_split_point(mesh: Mesh, axis: AxisLike,
                    strategy: SplitPointStrategy = DEFAULT_SPLIT_STRATEGY) -> float:
    """
    Coordinate along ``axis`` at which to cut ``mesh``.

    Raises:
        ValueError: If the mesh has no vertices.
    """
    axis = Axis.parse(axis)
    strategy = SplitPointStrategy.parse(strategy)
    if strategy is SplitPointStrategy.ABSOLUTE_CENTER:
        return float(mesh.bounds.center()[axis])
    return mesh.centroid()[axis]


class MeshSplitter:
    """
    Splitter Orchestrator.

    Attributes:
        strategy (SplitPointStrategy): How the cut coordinate is chosen.
        epsilon (float): On-plane tolerance passed to the kernel.
        progress (bool): Show progress bars for large meshes.
    """

    def __init__(self, strategy: SplitPointStrategy = DEFAULT_SPLIT_STRATEGY,
                 epsilon: float = PLANE_EPSILON, progress: bool = False):
        self.strategy = SplitPointStrategy.parse(strategy)
        self.epsilon = epsilon
        self.progress = progress
        self.logger = logging.getLogger("Splitter")

    def split(self, mesh: Mesh, axis: AxisLike, q: Optional[float] = None) -> SplitResult:
        """
        Split ``mesh`` once along ``axis``.

        Args:
            mesh: Mesh to split.
            axis: Split axis.
            q: Cut coordinate; chosen by ``strategy`` when omitted.
        """
        axis = Axis.parse(axis)
        if q is None:
            q = get_split_point(mesh, axis, self.strategy)
        elif mesh.vertex_count and not mesh.bounds.spans(axis, q):
            self.logger.debug(f"{axis.name}={q} lies outside the bounds of {mesh.name}; one half will be empty")
        result = split_mesh(mesh, Plane(axis, q), epsilon=self.epsilon, progress=self.progress)
        self.logger.info(
            f"Split {mesh.name} at {axis.name}={q}: "
            f"{result.left.face_count}L/{result.right.face_count}R faces, "
            f"{result.straddle_count} straddling"
        )
        return result

    def split_all(self, mesh: Mesh, axes: Iterable[AxisLike]) -> List[Mesh]:
        """
        Split ``mesh`` along each axis in turn, every piece once per axis.

        ``split_all(mesh, "XY")`` yields up to four quadrants named like
        ``Mesh-XL-YR``. Pieces without faces are dropped.
        """
        pieces = [mesh]
        for axis in axes:
            next_pieces: List[Mesh] = []
            for piece in pieces:
                result = self.split(piece, axis)
                next_pieces.extend(p for p in (result.left, result.right) if p.face_count > 0)
            pieces = next_pieces
        self.logger.info(f"Split {mesh.name} into {len(pieces)} pieces")
        return pieces
