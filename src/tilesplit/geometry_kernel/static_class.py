from enum import Enum
from typing import NamedTuple, Optional, Tuple

from .axis import VertexUtils
from .vertex import Face, Vertex3


class TriangleCase(str, Enum):
    ALL_LEFT = "ALL_LEFT"
    ALL_RIGHT = "ALL_RIGHT"
    PIVOT_LEFT = "PIVOT_LEFT"
    PIVOT_RIGHT = "PIVOT_RIGHT"

    @staticmethod
    def classify(a_side: bool, b_side: bool, c_side: bool) -> "Classification":
        """
        Map the three "is left" flags to a case.

        The pivot is the corner alone on its side: the single left corner for
        PIVOT_LEFT, the single right corner for PIVOT_RIGHT.
        """
        sides = (a_side, b_side, c_side)
        left_count = sum(sides)
        if left_count == 3:
            return Classification(TriangleCase.ALL_LEFT)
        elif left_count == 0:
            return Classification(TriangleCase.ALL_RIGHT)
        elif left_count == 1:
            return Classification(TriangleCase.PIVOT_LEFT, sides.index(True))
        else:
            return Classification(TriangleCase.PIVOT_RIGHT, sides.index(False))


class Classification(NamedTuple):
    case: TriangleCase
    pivot: Optional[int] = None

    @property
    def straddles(self) -> bool:
        return self.pivot is not None

    def rotate(self, face: Face) -> Tuple[Vertex3, Vertex3, Vertex3]:
        """Face vertices starting at the pivot, cyclic order kept."""
        vertices = face.vertices
        p = self.pivot
        return vertices[p], vertices[(p + 1) % 3], vertices[(p + 2) % 3]


def classify_triangle(face: Face, utils: VertexUtils, q: float) -> Classification:
    """Classify ``face`` against the plane ``utils.axis = q``; on-plane corners count as right."""
    return TriangleCase.classify(
        utils.get_dimension(face.a) < q,
        utils.get_dimension(face.b) < q,
        utils.get_dimension(face.c) < q,
    )
