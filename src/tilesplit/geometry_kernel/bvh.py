import numpy as np

from .vertex import Vertex3


class AABB:
    """Bounds of a mesh or a split half, kept as two float64 corners.

    ``lo`` and ``hi`` are any 3-sequences; they are copied, never aliased.
    """
    def __init__(self, lo, hi):
        self.min = np.array(lo, dtype=np.float64)
        self.max = np.array(hi, dtype=np.float64)

    @classmethod
    def from_points(cls, points) -> 'AABB':
        """
        Raises:
            ValueError: If ``points`` is empty.
        """
        pts = np.asarray(points, dtype=np.float64).reshape(-1, 3)
        if len(pts) == 0:
            raise ValueError("Cannot compute bounds of an empty point set")
        return cls(pts.min(axis=0), pts.max(axis=0))

    @property
    def min_vertex(self) -> Vertex3:
        return Vertex3(*(float(v) for v in self.min))

    @property
    def max_vertex(self) -> Vertex3:
        return Vertex3(*(float(v) for v in self.max))

    @property
    def diag(self) -> float:
        return float(np.linalg.norm(self.max - self.min))

    def merge(self, other: 'AABB') -> 'AABB':
        """Box covering both; the halves of a split merge back to the parent bounds."""
        return AABB(np.minimum(self.min, other.min), np.maximum(self.max, other.max))

    def extent(self) -> np.ndarray:
        return self.max - self.min

    def center(self) -> np.ndarray:
        # midpoint per axis, used as the ABSOLUTE_CENTER split coordinate
        return (self.min + self.max) * 0.5

    def spans(self, axis: int, q: float) -> bool:
        """True if a plane at ``q`` on ``axis`` has geometry strictly on both sides."""
        return bool(self.min[axis] < q < self.max[axis])

    def __eq__(self, other):
        if not isinstance(other, AABB):
            return NotImplemented
        return bool(np.array_equal(self.min, other.min) and np.array_equal(self.max, other.max))

    def __repr__(self):
        return f"AABB(min={self.min.tolist()}, max={self.max.tolist()})"
