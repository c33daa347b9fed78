from typing import Dict, List

from .vertex import Vertex3


def add_index(vertex_map: Dict[Vertex3, int], vertex: Vertex3) -> int:
    """Return the index of ``vertex`` in ``vertex_map``, inserting it with the next index if new."""
    index = vertex_map.get(vertex)
    if index is None:
        index = len(vertex_map)
        vertex_map[vertex] = index
    return index


def ordered_vertices(vertex_map: Dict[Vertex3, int]) -> List[Vertex3]:
    """Keys of ``vertex_map`` sorted by their assigned index."""
    return [vertex for vertex, _ in sorted(vertex_map.items(), key=lambda item: item[1])]
