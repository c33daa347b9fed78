# -*- coding: utf-8 -*-
"""
tilesplit Visualizer Configuration
==================================

Exposes visualizer defaults from ``tilesplit.default_config.DEFAULTS`` as
module attributes.

Attributes:
    DEFAULT_VISUALIZER (VisualizerType): Backend used by ``IVisualizer.create``.
    LEFT_COLOR / RIGHT_COLOR: Colors for the two halves of a split preview.
"""

from ..default_config import DEFAULTS
from .visualizer_type import VisualizerType

DEFAULT_VISUALIZER = VisualizerType[DEFAULTS["DEFAULT_VISUALIZER"]]
LEFT_COLOR = "#66b3ff"
RIGHT_COLOR = "#ff9966"
PLANE_COLOR = "#999999"
