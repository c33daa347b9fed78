import math

import pytest

from tilesplit.geometry_kernel import Axis, Plane, Vertex3, VertexUtils, is_on_plane


def test_is_on_plane_uses_strict_tolerance():
    assert is_on_plane(0.0, 0.0)
    assert is_on_plane(1e-13, 0.0)
    assert not is_on_plane(1e-3, 0.0)
    assert is_on_plane(0.05, 0.0, epsilon=0.1)
    assert not is_on_plane(0.1, 0.0, epsilon=0.1)


@pytest.mark.parametrize(
    "value, expected",
    [
        (Axis.Y, Axis.Y),
        ("x", Axis.X),
        (" Z ", Axis.Z),
        (1, Axis.Y),
        (2, Axis.Z),
    ],
)
def test_axis_parse(value, expected):
    assert Axis.parse(value) is expected


@pytest.mark.parametrize("value", ["W", 3, -1, True, 1.5, None])
def test_axis_parse_rejects_unknown(value):
    with pytest.raises(ValueError):
        Axis.parse(value)


def test_plane_coerces_axis_and_coordinate():
    plane = Plane("y", 2)
    assert plane.axis is Axis.Y
    assert isinstance(plane.coordinate, float)
    assert plane.coordinate == 2.0


@pytest.mark.parametrize("axis, expected", [("X", 1.0), ("Y", 2.0), ("Z", 3.0)])
def test_get_dimension(axis, expected):
    utils = VertexUtils(axis)
    assert utils.get_dimension(Vertex3(1.0, 2.0, 3.0)) == expected
    assert utils.axis == axis


def test_cut_edge_interpolates_all_coordinates():
    utils = VertexUtils(Axis.X)
    cut = utils.cut_edge(Vertex3(0.0, 0.0, 0.0), Vertex3(2.0, 4.0, 6.0), 1.0)
    assert cut == Vertex3(1.0, 2.0, 3.0)


def test_cut_edge_on_z_axis():
    utils = VertexUtils("Z")
    cut = utils.cut_edge(Vertex3(0.0, 0.0, -1.0), Vertex3(4.0, 2.0, 3.0), 0.0)
    assert cut.z == 0.0
    assert math.isclose(cut.x, 1.0)
    assert math.isclose(cut.y, 0.5)


def test_cut_edge_lands_exactly_on_plane():
    utils = VertexUtils(Axis.Y)
    q = 0.3
    cut = utils.cut_edge(Vertex3(0.1, 0.1, 0.7), Vertex3(0.9, 0.7, 0.2), q)
    assert cut.y == q


def test_cut_edge_is_independent_of_endpoint_order():
    utils = VertexUtils(Axis.X)
    a = Vertex3(0.1, 0.7, 0.3)
    b = Vertex3(0.9, 0.2, 0.45)
    assert utils.cut_edge(a, b, 0.35) == utils.cut_edge(b, a, 0.35)


def test_cut_edge_returns_endpoint_when_it_is_on_plane():
    utils = VertexUtils(Axis.X)
    a = Vertex3(0.1, 0.1, 0.1)
    b = Vertex3(0.7, 0.3, 0.9)
    assert utils.cut_edge(a, b, 0.7) == b
    assert utils.cut_edge(b, a, 0.1) == a
