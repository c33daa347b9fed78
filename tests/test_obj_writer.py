import pytest

from tilesplit.exporter import dumps_obj, format_coordinate, write_obj
from tilesplit.geometry_kernel import Mesh


@pytest.mark.parametrize(
    "value, expected",
    [
        (1.0, "1"),
        (-1.0, "-1"),
        (0.0, "0"),
        (0.5, "0.5"),
        (1e-5, "0.00001"),
        (123456789.0, "123456789"),
        (2 / 3, "0.6666666666666666"),
        (0.1 + 0.2, "0.30000000000000004"),
    ],
)
def test_format_coordinate_is_positional_and_round_trips(value, expected):
    text = format_coordinate(value)
    assert text == expected
    assert float(text) == value


def test_dumps_split_half(single_triangle):
    mesh = single_triangle((-1.0, 0.0, 0.0), (1.0, 0.0, 0.0), (1.0, 2.0, 0.0), name="Tile")
    left, right, _ = mesh.split("X", 0.0)

    assert dumps_obj(left) == (
        "o Tile-XL\n"
        "v -1 0 0\n"
        "v 0 0 0\n"
        "v 0 1 0\n"
        "f 1 2 3\n"
    )
    assert dumps_obj(right).splitlines() == [
        "o Tile-XR",
        "v 1 0 0",
        "v 1 2 0",
        "v 0 0 0",
        "v 0 1 0",
        "f 3 1 2",
        "f 3 2 4",
    ]


def test_blank_name_falls_back_to_default(single_triangle):
    mesh = single_triangle((0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (0.0, 1.0, 0.0), name="  ")
    assert dumps_obj(mesh).splitlines()[0] == "o Mesh"


def test_empty_mesh_writes_only_name():
    assert dumps_obj(Mesh((), (), name="Empty")) == "o Empty\n"


def test_write_obj_creates_directories(tmp_path, single_triangle):
    mesh = single_triangle((0.0, 0.0, 0.0), (0.25, 0.0, 0.0), (0.0, 0.75, 1.5), name="Tile")
    target = tmp_path / "tiles" / "level0" / "Tile.obj"

    written = write_obj(mesh, target)

    assert written == target
    content = target.read_bytes().decode("utf-8")
    assert "\r" not in content
    assert content.splitlines() == [
        "o Tile",
        "v 0 0 0",
        "v 0.25 0 0",
        "v 0 0.75 1.5",
        "f 1 2 3",
    ]


def test_mesh_write_obj_delegates(tmp_path, single_triangle):
    mesh = single_triangle((0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (0.0, 1.0, 0.0))
    path = mesh.write_obj(tmp_path / "tile.obj")
    assert path.read_text(encoding="utf-8") == mesh.to_obj()
