"""
Consistency checks over a ProcessedMesh.

The report mirrors the invariants the builders are meant to uphold, so a
clean report on well-formed input means the four representations agree.
Non-manifold or degenerate input is expected to produce issues here rather
than exceptions.
"""

from dataclasses import dataclass, field
import logging

from data_types import ProcessedMesh

logger = logging.getLogger(__name__)


@dataclass
class TopologyReport:
    vertex_count: int = 0
    face_count: int = 0
    half_edge_count: int = 0
    edge_count: int = 0
    boundary_edge_count: int = 0
    degenerate_face_count: int = 0
    repeated_directed_edge_count: int = 0

    # Invariant violations, as ids of the offending records
    open_face_loops: list[int] = field(default_factory=list)
    asymmetric_twins: list[int] = field(default_factory=list)
    inconsistent_left_faces: list[int] = field(default_factory=list)
    inconsistent_right_faces: list[int] = field(default_factory=list)
    unexpected_edge_count: bool = False

    @property
    def euler_characteristic(self) -> int:
        return self.vertex_count - self.edge_count + self.face_count

    @property
    def is_closed(self) -> bool:
        return self.edge_count > 0 and self.boundary_edge_count == 0

    @property
    def issues(self) -> list[str]:
        issues = []
        if self.degenerate_face_count:
            issues.append(f"Degenerate faces ({self.degenerate_face_count})")
        if self.repeated_directed_edge_count:
            issues.append(f"Directed edges shared by several faces ({self.repeated_directed_edge_count})")
        if self.open_face_loops:
            issues.append(f"Half-edge loops that do not close ({len(self.open_face_loops)})")
        if self.asymmetric_twins:
            issues.append(f"Twin links that are not mutual ({len(self.asymmetric_twins)})")
        if self.inconsistent_left_faces:
            issues.append(f"Left faces not matching winding ({len(self.inconsistent_left_faces)})")
        if self.inconsistent_right_faces:
            issues.append(f"Right faces not matching winding ({len(self.inconsistent_right_faces)})")
        if self.unexpected_edge_count:
            issues.append("Winged edge count differs from the number of distinct face edges")
        return issues

    @property
    def is_consistent(self) -> bool:
        return not self.issues

    def to_dict(self) -> dict:
        return {
            "vertex_count": self.vertex_count,
            "face_count": self.face_count,
            "half_edge_count": self.half_edge_count,
            "edge_count": self.edge_count,
            "boundary_edge_count": self.boundary_edge_count,
            "euler_characteristic": self.euler_characteristic,
            "is_closed": self.is_closed,
            "issues": self.issues,
        }


def face_has_directed_edge(corners, origin: int, target: int) -> bool:
    """True if `origin` is immediately followed by `target` in the face's winding."""
    return any(corners[i] == origin and corners[(i + 1) % 3] == target for i in range(3))


def check_topology(mesh: ProcessedMesh) -> TopologyReport:
    """Compute counts and collect invariant violations for `mesh`."""
    report = TopologyReport(
        vertex_count=len(mesh.vertices),
        face_count=len(mesh.faces),
    )

    distinct_edges = set()
    for face in mesh.faces:
        corners = face.vertex_ids
        if len(set(corners)) < 3:
            report.degenerate_face_count += 1
        for i in range(3):
            a, b = corners[i], corners[(i + 1) % 3]
            distinct_edges.add((min(a, b), max(a, b)))

    if mesh.half_edges is not None:
        half_edges = mesh.half_edges
        report.half_edge_count = len(half_edges)

        seen_pairs = set()
        for he in half_edges:
            pair = (he.origin_vertex, he.target_vertex)
            if pair in seen_pairs:
                report.repeated_directed_edge_count += 1
            seen_pairs.add(pair)

            current = he.id
            for _ in range(3):
                current = half_edges[current].next
            if (current != he.id
                    or half_edges[he.next].face != he.face
                    or half_edges[he.prev].face != he.face
                    or half_edges[he.prev].next != he.id):
                report.open_face_loops.append(he.id)

            if he.twin is not None and half_edges[he.twin].twin != he.id:
                report.asymmetric_twins.append(he.id)

    if mesh.edges is not None:
        report.edge_count = len(mesh.edges)
        report.unexpected_edge_count = len(mesh.edges) != len(distinct_edges)
        for edge in mesh.edges:
            if edge.is_boundary:
                report.boundary_edge_count += 1
            if edge.face_left is not None and not face_has_directed_edge(
                    mesh.faces[edge.face_left].vertex_ids, edge.start_vertex, edge.end_vertex):
                report.inconsistent_left_faces.append(edge.id)
            if edge.face_right is not None and not face_has_directed_edge(
                    mesh.faces[edge.face_right].vertex_ids, edge.end_vertex, edge.start_vertex):
                report.inconsistent_right_faces.append(edge.id)

    if report.issues:
        logger.warning("Topology check found issues: %s", "; ".join(report.issues))
    return report
