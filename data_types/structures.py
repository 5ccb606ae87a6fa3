"""
Plain records for the four mesh representations.

Every id is a dense, zero-based index into the list that owns the record, so
references between records (next, prev, twin, pred/succ, incidence) are plain
integers rather than object references. ``None`` marks a missing neighbor,
which is how boundary edges show up.
"""

from dataclasses import dataclass
from typing import Optional

import numpy as np
from numpy.typing import NDArray

Point3 = tuple[float, float, float]


@dataclass(frozen=True)
class Vertex:
    id: int
    x: float
    y: float
    z: float
    # Any one incident winged edge / outgoing half-edge; which one is unspecified
    incident_edge: Optional[int] = None
    incident_half_edge: Optional[int] = None

    @property
    def position(self) -> Point3:
        return (self.x, self.y, self.z)


@dataclass(frozen=True)
class Face:
    id: int
    v1: int
    v2: int
    v3: int
    normal: Point3 = (0.0, 0.0, 0.0)
    incident_edge: Optional[int] = None
    incident_half_edge: Optional[int] = None

    @property
    def vertex_ids(self) -> tuple[int, int, int]:
        return (self.v1, self.v2, self.v3)


@dataclass(frozen=True)
class SoupTriangle:
    """A triangle carrying its own copies of the corner positions."""
    id: int
    v1: Point3
    v2: Point3
    v3: Point3


@dataclass(frozen=True)
class HalfEdge:
    """
    Directed edge bound to one face.

    ``id`` is ``face * 3 + local_index`` where local indices 0, 1, 2 stand for
    the directed edges v1->v2, v2->v3 and v3->v1 of the face.
    """
    id: int
    origin_vertex: int
    target_vertex: int
    face: int
    next: int
    prev: int
    twin: Optional[int] = None


@dataclass(frozen=True)
class WingedEdge:
    """
    Undirected edge with both adjoining faces and their neighboring edges.

    ``start_vertex < end_vertex`` holds for every non-degenerate edge. The face whose winding runs
    start->end is the left face, the one running end->start is the right face.
    ``created_step`` is the id of the face that first produced the edge.

    A degenerate face with a repeated corner yields an edge with
    ``start_vertex == end_vertex``. Both sides then resolve to the same
    half-edge, so such a record can have pred_right/succ_right set while
    face_right is None, and ``is_boundary`` is True for it.
    """
    id: int
    start_vertex: int
    end_vertex: int
    created_step: int
    face_left: Optional[int] = None
    face_right: Optional[int] = None
    pred_left: Optional[int] = None
    succ_left: Optional[int] = None
    pred_right: Optional[int] = None
    succ_right: Optional[int] = None

    @property
    def is_boundary(self) -> bool:
        return self.face_left is None or self.face_right is None


@dataclass(frozen=True)
class ProcessedMesh:
    vertices: tuple[Vertex, ...]
    faces: tuple[Face, ...]
    soup_triangles: Optional[tuple[SoupTriangle, ...]] = None
    half_edges: Optional[tuple[HalfEdge, ...]] = None
    edges: Optional[tuple[WingedEdge, ...]] = None

    def vertex_array(self) -> NDArray[np.float64]:
        """V x 3 array of the quantized vertex coordinates."""
        if not self.vertices:
            return np.zeros((0, 3), dtype=np.float64)
        return np.array([v.position for v in self.vertices], dtype=np.float64)

    def face_array(self) -> NDArray[np.int64]:
        """F x 3 array of vertex indices, in face order."""
        if not self.faces:
            return np.zeros((0, 3), dtype=np.int64)
        return np.array([f.vertex_ids for f in self.faces], dtype=np.int64)
