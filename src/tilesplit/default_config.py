from typing import Any, Dict
CONFIG_VERSION = "1.0.0"
DEFAULTS: Dict[str, Any] = {
    # Geometry Kernel Defaults
    "PLANE_EPSILON": 1e-12,          # on-plane tolerance for degenerate clip cases
    "DEFAULT_MESH_NAME": "Mesh",     # name used when a mesh has none

    # Progress Defaults
    "PROGRESS_MIN_FACES": 2000,      # progress bar only for meshes at least this large

    # Split Planning Defaults
    "DEFAULT_SPLIT_STRATEGY": "absolute_center",  # see slicer.SplitPointStrategy

    # Visualizer Defaults
    "DEFAULT_VISUALIZER": "PyVista",  # VisualizerType member name
}
