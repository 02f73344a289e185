"""Batched vertex buffers for rendering.

Both buffers hold interleaved vertices of seven floats each: position
(x, y, z) followed by color (r, g, b, a) in [0, 1]. Fill vertices come in
groups of three (one triangle), stroke vertices in groups of two (one
independent line segment).
"""

from dataclasses import dataclass, field
from typing import Any

import numpy as np

FLOATS_PER_VERTEX = 7


@dataclass
class BatchedGeometry:
    """Pre-tessellated geometry of a whole document.

    Attributes:
        fill_vertices: Interleaved fill triangle vertices
        stroke_vertices: Interleaved stroke segment vertices
    """

    fill_vertices: list[float] = field(default_factory=list)
    stroke_vertices: list[float] = field(default_factory=list)

    @property
    def fill_vertex_count(self) -> int:
        """Number of vertices in the fill buffer."""
        return len(self.fill_vertices) // FLOATS_PER_VERTEX

    @property
    def stroke_vertex_count(self) -> int:
        """Number of vertices in the stroke buffer."""
        return len(self.stroke_vertices) // FLOATS_PER_VERTEX

    @property
    def triangle_count(self) -> int:
        """Number of fill triangles."""
        return self.fill_vertex_count // 3

    @property
    def segment_count(self) -> int:
        """Number of stroke segments."""
        return self.stroke_vertex_count // 2

    def is_empty(self) -> bool:
        """Check if neither buffer holds any vertex."""
        return not self.fill_vertices and not self.stroke_vertices

    def clear(self) -> None:
        """Empty both buffers."""
        self.fill_vertices.clear()
        self.stroke_vertices.clear()

    def as_arrays(self) -> tuple[np.ndarray, np.ndarray]:
        """Return both buffers as float32 arrays shaped (n, 7).

        Returns:
            Tuple of (fill, stroke) arrays ready for a GPU upload
        """
        fill = np.asarray(self.fill_vertices, dtype=np.float32).reshape(-1, FLOATS_PER_VERTEX)
        stroke = np.asarray(self.stroke_vertices, dtype=np.float32).reshape(-1, FLOATS_PER_VERTEX)
        return fill, stroke

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with stride, counts and the flat buffers
        """
        return {
            "stride": FLOATS_PER_VERTEX,
            "fill": {
                "vertex_count": self.fill_vertex_count,
                "vertices": list(self.fill_vertices),
            },
            "stroke": {
                "vertex_count": self.stroke_vertex_count,
                "vertices": list(self.stroke_vertices),
            },
        }
