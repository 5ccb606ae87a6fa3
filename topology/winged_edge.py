"""
Winged-edge consolidation.

Each undirected edge gets one record, built from its one or two half-edges.
The record is oriented so that start_vertex < end_vertex. A half-edge running
start->end contributes the left face, one running end->start the right face.
The neighbors around each face are read off the matching half-edge's
next/prev links.
"""

import logging
from dataclasses import dataclass, field

from data_types import WingedEdge
from .half_edge import HalfEdgeStructure

logger = logging.getLogger(__name__)


def edge_key(a: int, b: int) -> tuple[int, int]:
    return (a, b) if a < b else (b, a)


@dataclass
class WingedEdgeStructure:
    edges: list[WingedEdge]
    half_edge_to_edge: list[int]
    vertex_incidence: dict[int, int] = field(default_factory=dict)
    face_incidence: dict[int, int] = field(default_factory=dict)


def build_winged_edges(structure: HalfEdgeStructure) -> WingedEdgeStructure:
    half_edges = structure.half_edges

    # First pass: one draft per undirected edge, faces assigned by direction
    drafts = []
    key_to_edge = {}
    half_edge_to_edge = []
    for he in half_edges:
        key = edge_key(he.origin_vertex, he.target_vertex)
        edge_id = key_to_edge.get(key)
        if edge_id is None:
            edge_id = len(drafts)
            key_to_edge[key] = edge_id
            drafts.append({
                "id": edge_id,
                "start_vertex": key[0],
                "end_vertex": key[1],
                "created_step": he.face,
                "face_left": None,
                "face_right": None,
            })
        half_edge_to_edge.append(edge_id)

        draft = drafts[edge_id]
        if he.origin_vertex == draft["start_vertex"]:
            draft["face_left"] = he.face
        else:
            draft["face_right"] = he.face

    # Second pass: predecessor/successor links and incidence back-references
    edges = []
    vertex_incidence = {}
    face_incidence = {}
    for draft in drafts:
        start, end = draft["start_vertex"], draft["end_vertex"]

        left_id = structure.find(start, end)
        if left_id is not None:
            draft["succ_left"] = half_edge_to_edge[half_edges[left_id].next]
            draft["pred_left"] = half_edge_to_edge[half_edges[left_id].prev]

        right_id = structure.find(end, start)
        if right_id is not None:
            draft["succ_right"] = half_edge_to_edge[half_edges[right_id].next]
            draft["pred_right"] = half_edge_to_edge[half_edges[right_id].prev]

        edge = WingedEdge(**draft)
        edges.append(edge)

        vertex_incidence[start] = edge.id
        vertex_incidence[end] = edge.id
        if edge.face_left is not None:
            face_incidence[edge.face_left] = edge.id
        if edge.face_right is not None:
            face_incidence[edge.face_right] = edge.id

    logger.debug("Consolidated %d half-edges into %d winged edges",
                 len(half_edges), len(edges))
    return WingedEdgeStructure(
        edges=edges,
        half_edge_to_edge=half_edge_to_edge,
        vertex_incidence=vertex_incidence,
        face_incidence=face_incidence,
    )
