from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Ensure src/ is importable when running pytest from any CWD.
SRC_ROOT = Path(__file__).resolve().parents[1] / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from tilesplit.geometry_kernel import Mesh  # noqa: E402


def build_grid(nx: int, ny: int, name: str = "Grid", flip: bool = False) -> Mesh:
    """Unit-square grid in the z=0 plane, two triangles per square, CCW seen from +Z."""
    vertices = [(float(i), float(j), 0.0) for j in range(ny + 1) for i in range(nx + 1)]

    def vid(i, j):
        return j * (nx + 1) + i

    triangles = []
    for j in range(ny):
        for i in range(nx):
            v00, v10, v11, v01 = vid(i, j), vid(i + 1, j), vid(i + 1, j + 1), vid(i, j + 1)
            tris = [(v00, v10, v11), (v00, v11, v01)]
            if flip:
                tris = [(a, c, b) for a, b, c in tris]
            triangles.extend(tris)
    return Mesh.from_arrays(vertices, triangles, name=name)


@pytest.fixture
def grid():
    return build_grid


@pytest.fixture
def single_triangle():
    def _make(a, b, c, name="Tile"):
        return Mesh.from_arrays([a, b, c], [[0, 1, 2]], name=name)
    return _make
