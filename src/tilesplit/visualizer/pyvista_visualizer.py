# -*- coding: utf-8 -*-
import logging
import os
from datetime import datetime
from typing import TYPE_CHECKING, Optional

import numpy as np
import pyvista as pv

from .config import LEFT_COLOR, PLANE_COLOR, RIGHT_COLOR
from .visualizer_interface import IVisualizer

if TYPE_CHECKING:
    from ..geometry_kernel import AABB, Mesh, Plane, SplitResult

logger = logging.getLogger("tilesplit.visualizer")


def mesh_to_polydata(mesh: "Mesh") -> pv.PolyData:
    """
    Convert a Mesh into a PyVista PolyData surface.

    PyVista expects faces as [3, a, b, c, 3, d, e, f, ...].
    """
    if mesh.vertex_count == 0:
        return pv.PolyData()
    vertices = mesh.vertex_array()
    triangles = mesh.face_array()
    if len(triangles) == 0:
        return pv.PolyData(vertices)
    faces = np.hstack([np.full((triangles.shape[0], 1), 3, dtype=np.int64), triangles]).flatten()
    return pv.PolyData(vertices, faces)


class PyVistaVisualizer(IVisualizer):
    """
    Split preview drawn with a ``pyvista.Plotter``.

    Pass ``off_screen=True`` to render without opening a window.
    """

    def __init__(self, **kwargs):
        try:
            self.plotter = pv.Plotter(**kwargs)
        except TypeError as e:
            logger.warning(f"Plotter rejected options {sorted(kwargs)}: {e}; using a default plotter")
            self.plotter = pv.Plotter()

    def add(self, mesh: "Mesh", color=None, opacity: float = 1.0, **kwargs):
        """
        Draw one mesh, edges shown by default. Meshes without faces are skipped.
        """
        if mesh.face_count == 0:
            logger.warning(f"{mesh.name} has no faces, nothing to draw")
            return
        self.plotter.add_mesh(
            mesh_to_polydata(mesh),
            color=color if color is not None else LEFT_COLOR,
            show_edges=kwargs.get("show_edges", True),
            edge_color=kwargs.get("edge_color", "black"),
            opacity=opacity,
            label=mesh.name,
        )

    def add_plane(self, plane: "Plane", bounds: "AABB", opacity: float = 0.3):
        """
        Add a translucent square for the cutting plane, sized to the bounds.
        """
        axis = int(plane.axis)
        center = bounds.center()
        center[axis] = plane.coordinate
        direction = np.zeros(3)
        direction[axis] = 1.0
        size = max(float(np.delete(bounds.extent(), axis).max()), 1e-6) * 1.1
        square = pv.Plane(center=center, direction=direction, i_size=size, j_size=size)
        self.plotter.add_mesh(square, color=PLANE_COLOR, opacity=opacity)

    def add_split(self, result: "SplitResult", opacity: float = 1.0):
        """
        Add left half and right half in contrasting colors.
        """
        self.add(result.left, color=LEFT_COLOR, opacity=opacity)
        self.add(result.right, color=RIGHT_COLOR, opacity=opacity)

    def show(self, **kwargs):
        """
        Display the PyVista plotter window.
        """
        self.plotter.add_axes()
        self.plotter.show_grid()
        self.plotter.set_background("white")
        self.plotter.show(**kwargs)

    def save(self, file_path: Optional[str] = None, **kwargs):
        """
        Save the current view to an image file.
        """
        if file_path is None:
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            file_path = os.path.join("screenshots", f"split_{timestamp}.png")
        file_path = os.fspath(file_path)
        directory = os.path.dirname(file_path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        self.plotter.screenshot(file_path, **kwargs)
        logger.info(f"Saved split preview to {file_path}")
        return file_path
