"""
Test script to verify winged-edge consolidation.
"""

import os
import sys

# Add the parent directory to the Python path so we can import the topology module
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from topology.half_edge import build_half_edges
from topology.winged_edge import build_winged_edges, edge_key


def test_edge_key_is_unordered():
    """Test the edge_key function."""
    assert edge_key(3, 1) == (1, 3)
    assert edge_key(1, 3) == (1, 3)


def test_single_triangle_sides():
    """Test winged edges of a single triangle."""
    structure = build_winged_edges(build_half_edges([(0, 1, 2)]))
    edges = structure.edges

    assert [(e.start_vertex, e.end_vertex) for e in edges] == [(0, 1), (1, 2), (0, 2)]
    assert (edges[0].face_left, edges[0].face_right) == (0, None)
    assert (edges[1].face_left, edges[1].face_right) == (0, None)
    # 2->0 runs end->start, so the face sits on the right
    assert (edges[2].face_left, edges[2].face_right) == (None, 0)

    assert (edges[2].pred_right, edges[2].succ_right) == (1, 0)
    assert (edges[2].pred_left, edges[2].succ_left) == (None, None)
    assert all(e.is_boundary for e in edges)


def test_two_triangles_shared_edge():
    """Test two triangles joined along one edge."""
    structure = build_winged_edges(build_half_edges([(0, 1, 2), (1, 3, 2)]))
    edges = structure.edges
    assert len(edges) == 5

    shared = edges[1]
    assert (shared.start_vertex, shared.end_vertex) == (1, 2)
    assert (shared.face_left, shared.face_right) == (0, 1)
    # Face 0 around 1->2: previous edge {0,1}, next edge {0,2}
    assert (shared.pred_left, shared.succ_left) == (0, 2)
    # Face 1 around 2->1: previous edge {2,3}, next edge {1,3}
    assert (shared.pred_right, shared.succ_right) == (4, 3)
    assert not shared.is_boundary

    assert structure.half_edge_to_edge == [0, 1, 2, 3, 4, 1]


def test_created_step_is_first_face():
    """Test the created_step field."""
    structure = build_winged_edges(build_half_edges([(0, 1, 2), (1, 3, 2)]))
    assert [e.created_step for e in structure.edges] == [0, 0, 0, 1, 1]


def test_incidence_back_references():
    """Test the vertex and face incidence maps."""
    structure = build_winged_edges(build_half_edges([(0, 1, 2), (1, 3, 2)]))
    # Last edge touching each vertex wins
    assert structure.vertex_incidence == {0: 2, 1: 3, 2: 4, 3: 4}
    assert structure.face_incidence == {0: 2, 1: 4}


def test_non_manifold_edge_keeps_last_face():
    """Test that an edge shared by three faces keeps the last face per side."""
    # Faces 0 and 2 both run 0->1, face 1 runs 1->0
    structure = build_winged_edges(build_half_edges([(0, 1, 2), (1, 0, 3), (0, 1, 4)]))
    edge = structure.edges[0]

    assert (edge.start_vertex, edge.end_vertex) == (0, 1)
    assert (edge.face_left, edge.face_right) == (2, 1)
    # Left links come from face 2's half-edge: prev {0,4}, next {1,4}
    assert (edge.pred_left, edge.succ_left) == (6, 5)
    # Right links come from face 1's half-edge: prev {1,3}, next {0,3}
    assert (edge.pred_right, edge.succ_right) == (4, 3)
    assert edge.created_step == 0


def test_degenerate_face_edge():
    """Test the edge produced by a face with a repeated corner."""
    structure = build_winged_edges(build_half_edges([(0, 0, 1)]))
    loop_edge = structure.edges[0]

    assert loop_edge.start_vertex == loop_edge.end_vertex == 0
    assert (loop_edge.face_left, loop_edge.face_right) == (0, None)
    assert loop_edge.succ_right is not None
    assert loop_edge.is_boundary
