from enum import IntEnum


class VisualizerType(IntEnum):
    """Rendering backends available for split previews."""
    PyVista = 0
