import pytest

from tilesplit.geometry_kernel import Face, TriangleCase, Vertex3, VertexUtils, classify_triangle

A = Vertex3(1.0, 0.0, 0.0)
B = Vertex3(2.0, 0.0, 0.0)
C = Vertex3(3.0, 0.0, 0.0)
FACE = Face(0, 1, 2, A, B, C)


@pytest.mark.parametrize(
    "sides, case, rotation",
    [
        ((True, True, True), TriangleCase.ALL_LEFT, None),
        ((True, True, False), TriangleCase.PIVOT_RIGHT, (C, A, B)),
        ((True, False, True), TriangleCase.PIVOT_RIGHT, (B, C, A)),
        ((True, False, False), TriangleCase.PIVOT_LEFT, (A, B, C)),
        ((False, True, True), TriangleCase.PIVOT_RIGHT, (A, B, C)),
        ((False, True, False), TriangleCase.PIVOT_LEFT, (B, C, A)),
        ((False, False, True), TriangleCase.PIVOT_LEFT, (C, A, B)),
        ((False, False, False), TriangleCase.ALL_RIGHT, None),
    ],
)
def test_all_side_combinations(sides, case, rotation):
    classification = TriangleCase.classify(*sides)
    assert classification.case is case
    if rotation is None:
        assert not classification.straddles
    else:
        assert classification.straddles
        assert classification.rotate(FACE) == rotation


def test_vertex_on_plane_counts_as_right():
    utils = VertexUtils("X")
    face = Face(0, 1, 2, Vertex3(0.0, 0.0, 0.0), Vertex3(1.0, 0.0, 0.0), Vertex3(0.0, 1.0, 0.0))
    assert classify_triangle(face, utils, 0.0).case is TriangleCase.ALL_RIGHT


def test_classify_triangle_against_plane():
    utils = VertexUtils("Y")
    face = Face(0, 1, 2, Vertex3(0.0, -1.0, 0.0), Vertex3(0.0, 1.0, 0.0), Vertex3(0.0, 2.0, 0.0))
    classification = classify_triangle(face, utils, 0.5)
    assert classification.case is TriangleCase.PIVOT_LEFT
    assert classification.pivot == 0
