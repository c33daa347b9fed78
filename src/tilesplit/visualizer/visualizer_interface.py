# -*- coding: utf-8 -*-
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Optional

from .config import DEFAULT_VISUALIZER
from .visualizer_type import VisualizerType

if TYPE_CHECKING:
    from ..geometry_kernel import AABB, Mesh, Plane, SplitResult


class IVisualizer(ABC):
    """
    Scene for previewing split halves and cutting planes.

    Backends receive their window options (``off_screen``, ``window_size``)
    as constructor keywords.
    """

    @abstractmethod
    def add(self, mesh: "Mesh", color: Optional[Any] = None, opacity: float = 1.0, **kwargs):
        """
        Add a mesh to the scene.

        Args:
            mesh: Mesh to draw.
            color: Surface color.
            opacity: Opacity value (0.0-1.0).
            **kwargs: Additional renderer-specific arguments.
        """
        pass

    @abstractmethod
    def add_plane(self, plane: "Plane", bounds: "AABB", opacity: float = 0.3):
        """
        Draw a cutting plane clipped to the given bounds.

        Args:
            plane: Cutting plane.
            bounds: Box whose cross-section sizes the drawn plane.
            opacity: Opacity value (0.0-1.0).
        """
        pass

    @abstractmethod
    def add_split(self, result: "SplitResult", opacity: float = 1.0):
        """
        Add both halves of a split, each in its own color.

        Args:
            result: Output of ``split_mesh``.
            opacity: Opacity value (0.0-1.0).
        """
        pass

    @abstractmethod
    def show(self, **kwargs):
        """
        Render the scene and display the window.

        Args:
            **kwargs: Additional show options (e.g., window_size).
        """
        pass

    @abstractmethod
    def save(self, file_path: Optional[str] = None, **kwargs):
        """
        Render the scene and save to a file.

        Args:
            file_path: Target file path (e.g., 'output.png').
                       If None, a default filename with timestamp is used.
            **kwargs: Additional options (e.g., transparent_background).
        """
        pass

    @staticmethod
    def create(visualizer_type: Optional[VisualizerType] = DEFAULT_VISUALIZER, **kwargs) -> "IVisualizer":
        """
        Build a preview scene for ``visualizer_type`` (default from ``DEFAULTS``).

        Raises:
            ValueError: For a backend that has no implementation.
        """
        kind = DEFAULT_VISUALIZER if visualizer_type is None else visualizer_type
        if kind != VisualizerType.PyVista:
            raise ValueError(f"No split preview backend for visualizer type {kind!r}")
        # pyvista is imported only once a scene is requested
        from .pyvista_visualizer import PyVistaVisualizer
        return PyVistaVisualizer(**kwargs)
