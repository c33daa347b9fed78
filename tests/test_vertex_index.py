from tilesplit.geometry_kernel import Vertex3, add_index, ordered_vertices


def test_add_index_assigns_sequential_indices():
    vertex_map = {}
    assert add_index(vertex_map, Vertex3(0.0, 0.0, 0.0)) == 0
    assert add_index(vertex_map, Vertex3(1.0, 0.0, 0.0)) == 1
    assert add_index(vertex_map, Vertex3(0.0, 1.0, 0.0)) == 2
    assert len(vertex_map) == 3


def test_add_index_returns_existing_index_for_equal_vertex():
    vertex_map = {}
    add_index(vertex_map, Vertex3(0.0, 0.0, 0.0))
    add_index(vertex_map, Vertex3(1.0, 2.0, 3.0))
    assert add_index(vertex_map, Vertex3(1.0, 2.0, 3.0)) == 1
    assert len(vertex_map) == 2


def test_add_index_has_no_tolerance():
    vertex_map = {}
    add_index(vertex_map, Vertex3(0.1 + 0.2, 0.0, 0.0))
    assert add_index(vertex_map, Vertex3(0.3, 0.0, 0.0)) == 1


def test_ordered_vertices_follow_insertion_index():
    vertex_map = {Vertex3(2.0, 0.0, 0.0): 2, Vertex3(0.0, 0.0, 0.0): 0, Vertex3(1.0, 0.0, 0.0): 1}
    assert ordered_vertices(vertex_map) == [
        Vertex3(0.0, 0.0, 0.0),
        Vertex3(1.0, 0.0, 0.0),
        Vertex3(2.0, 0.0, 0.0),
    ]
