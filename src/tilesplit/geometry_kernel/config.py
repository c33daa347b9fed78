import os

from ..default_config import DEFAULTS

# Tolerance for the degenerate on-plane branches only; side membership is exact.
PLANE_EPSILON = float(os.environ.get("TILESPLIT_PLANE_EPSILON", DEFAULTS["PLANE_EPSILON"]))
DEFAULT_MESH_NAME = DEFAULTS["DEFAULT_MESH_NAME"]
PROGRESS_MIN_FACES = DEFAULTS["PROGRESS_MIN_FACES"]
