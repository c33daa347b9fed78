"""
tilesplit Visualization Package
===============================

Previews split results: both halves of a mesh in contrasting colors, with the
cutting plane drawn across the original bounds.

Usage Example
-------------
.. code-block:: python

    from tilesplit.visualizer import IVisualizer, VisualizerType

    result = mesh.split("X", 0.0)
    visualizer = IVisualizer.create(VisualizerType.PyVista)
    visualizer.add_split(result)
    visualizer.add_plane(Plane("X", 0.0), mesh.bounds)
    visualizer.show()

Notes
-----
- Requires `pyvista` (and VTK).
- The window must run on the main thread.
"""

from .visualizer_type import VisualizerType
from .visualizer_interface import IVisualizer
from .pyvista_visualizer import PyVistaVisualizer, mesh_to_polydata

__all__ = ["IVisualizer", "PyVistaVisualizer", "VisualizerType", "mesh_to_polydata"]
