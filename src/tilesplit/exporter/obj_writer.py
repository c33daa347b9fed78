"""OBJ Writer
Serializes a Mesh as Wavefront OBJ text for downstream tiling tools.

Format:
    o <name>
    v <x> <y> <z>        one per vertex, in index order
    f <a> <b> <c>        one per face, 1-based vertex indices

Numbers are written positionally (never in exponent form) with the shortest
digits that round-trip, and always with '.' as decimal separator.

Dependencies:
- standard library: logging, pathlib
- third party: numpy (float formatting)
"""

import logging
from pathlib import Path
from typing import Iterator, Union

import numpy as np

from ..geometry_kernel.config import DEFAULT_MESH_NAME
from ..geometry_kernel.mesh import Mesh

logger = logging.getLogger("tilesplit.exporter")


def format_coordinate(value: float) -> str:
    """Locale-independent positional float, e.g. 1.0 -> '1', 1e-5 -> '0.00001'."""
    return np.format_float_positional(float(value), trim="-")


def iter_obj_lines(mesh: Mesh) -> Iterator[str]:
    """Yield the OBJ lines of ``mesh`` without line terminators."""
    name = mesh.name if mesh.name and mesh.name.strip() else DEFAULT_MESH_NAME
    yield f"o {name}"
    for vertex in mesh.vertices:
        yield "v " + " ".join(format_coordinate(c) for c in vertex)
    for face in mesh.faces:
        yield face.to_obj()


def dumps_obj(mesh: Mesh) -> str:
    """Return ``mesh`` as OBJ text, one directive per line."""
    return "".join(line + "\n" for line in iter_obj_lines(mesh))


def write_obj(mesh: Mesh, path: Union[str, Path]) -> Path:
    """Write ``mesh`` to ``path`` as OBJ, creating parent directories.

    Args:
        mesh: Mesh to serialize.
        path: Target file path.

    Returns:
        Path: The written file path.
    """
    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    with open(file_path, "w", encoding="utf-8", newline="\n") as f:
        for line in iter_obj_lines(mesh):
            f.write(line)
            f.write("\n")
    logger.info(f"Mesh {mesh.name} written to {file_path} "
                f"({mesh.vertex_count} vertices, {mesh.face_count} faces)")
    return file_path
