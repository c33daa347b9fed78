# -*- coding: utf-8 -*-
"""
tilesplit Exporter Package
==========================

Writes meshes produced by the splitter to text geometry formats.

Currently supported formats:
- OBJ (Wavefront, geometry only)

Usage Example:
    from tilesplit.exporter import write_obj
    write_obj(mesh, "tiles/Tile-XL.obj")
"""

from .obj_writer import dumps_obj, format_coordinate, iter_obj_lines, write_obj

__all__ = [
    "dumps_obj",
    "format_coordinate",
    "iter_obj_lines",
    "write_obj",
]
