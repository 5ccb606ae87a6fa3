"""
Half-edge (DCEL) derivation with twin matching.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

from data_types import HalfEdge

logger = logging.getLogger(__name__)


@dataclass
class HalfEdgeStructure:
    half_edges: list[HalfEdge]
    # (origin, target) -> half-edge id; a repeated directed pair keeps the last id
    lookup: dict[tuple[int, int], int]
    vertex_incidence: dict[int, int] = field(default_factory=dict)
    face_incidence: dict[int, int] = field(default_factory=dict)
    repeated_pairs: int = 0

    def find(self, origin: int, target: int) -> Optional[int]:
        return self.lookup.get((origin, target))


def directed_edges(faces: list[tuple[int, int, int]]) -> list[tuple[int, int]]:
    """(origin, target) of every half-edge, indexed by half-edge id."""
    pairs = []
    for corners in faces:
        for i in range(3):
            pairs.append((corners[i], corners[(i + 1) % 3]))
    return pairs


def build_half_edges(faces: list[tuple[int, int, int]]) -> HalfEdgeStructure:
    """
    Create three half-edges per face, linked next/prev within the face, then
    pair each one with the half-edge running the opposite way.

    Half-edges without an opposite partner are boundary edges and keep
    ``twin=None``. If a directed pair occurs on more than one face (a
    non-manifold fan), only the last occurrence can be found as a twin.
    """
    pairs = directed_edges(faces)

    lookup = {}
    repeated = 0
    for he_id, pair in enumerate(pairs):
        if pair in lookup:
            repeated += 1
        lookup[pair] = he_id

    if repeated:
        logger.warning("%d directed edges occur on more than one face; "
                       "twin links keep only the last face for each", repeated)

    half_edges = []
    vertex_incidence = {}
    face_incidence = {}
    for he_id, (origin, target) in enumerate(pairs):
        face_id, local_index = divmod(he_id, 3)
        base = face_id * 3
        half_edges.append(HalfEdge(
            id=he_id,
            origin_vertex=origin,
            target_vertex=target,
            face=face_id,
            next=base + (local_index + 1) % 3,
            prev=base + (local_index + 2) % 3,
            twin=lookup.get((target, origin)),
        ))
        # Last writer wins; any outgoing half-edge is a valid entry point
        vertex_incidence[origin] = he_id
        face_incidence[face_id] = he_id

    logger.debug("Built %d half-edges for %d faces", len(half_edges), len(faces))
    return HalfEdgeStructure(
        half_edges=half_edges,
        lookup=lookup,
        vertex_incidence=vertex_incidence,
        face_incidence=face_incidence,
        repeated_pairs=repeated,
    )
