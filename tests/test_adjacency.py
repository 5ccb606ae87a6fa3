"""
Test script to verify adjacency queries over processed meshes.
"""

import os
import sys
import numpy as np
import pytest
import trimesh

# Add the parent directory to the Python path so we can import the modules
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from topology import analyze_geometry, analyze_trimesh
from adjacency import (
    face_neighbors_from_winged_edges,
    face_neighbors_from_twins,
    face_adjacency_graph,
    count_shells,
    boundary_edges,
    boundary_loops,
    face_edge_loop,
    vertex_one_ring,
)


def create_strip_mesh():
    """Three triangles in a fan around vertex 2, open on the outside."""
    positions = [
        0, 0, 0,
        1, 0, 0,
        0, 1, 0,
        1, 1, 0,
        0, 2, 0,
    ]
    return analyze_geometry(positions, [0, 1, 2, 1, 3, 2, 3, 4, 2])


def test_round_trip_face_adjacency():
    """Test that winged-edge and twin-based face adjacency agree."""
    for mesh in (create_strip_mesh(),
                 analyze_trimesh(trimesh.creation.box()),
                 analyze_trimesh(trimesh.creation.icosahedron())):
        assert face_neighbors_from_winged_edges(mesh) == face_neighbors_from_twins(mesh)


def test_strip_neighbors():
    """Test face neighbors on an open triangle strip."""
    neighbors = face_neighbors_from_winged_edges(create_strip_mesh())
    assert neighbors == [[1], [0, 2], [1]]


def test_face_adjacency_graph():
    """Test the face_adjacency_graph function."""
    mesh = create_strip_mesh()
    graph = face_adjacency_graph(mesh)
    assert set(graph.nodes) == {0, 1, 2}
    assert graph.number_of_edges() == 2
    edge_id = graph.edges[0, 1]["edge_id"]
    assert {mesh.edges[edge_id].face_left, mesh.edges[edge_id].face_right} == {0, 1}


def test_count_shells():
    """Test the count_shells function on one and two boxes."""
    box = trimesh.creation.box()
    shifted = trimesh.creation.box()
    shifted.apply_translation([5.0, 0.0, 0.0])
    combined = trimesh.util.concatenate([box, shifted])
    assert count_shells(analyze_trimesh(box)) == 1
    assert count_shells(analyze_trimesh(combined)) == 2


def test_boundary_loops():
    """Test the boundary_loops function."""
    mesh = create_strip_mesh()
    assert len(boundary_edges(mesh)) == 5
    loops = boundary_loops(mesh)
    assert len(loops) == 1
    assert sorted(loops[0]) == sorted(boundary_edges(mesh))

    assert boundary_loops(analyze_trimesh(trimesh.creation.box())) == []


def test_face_edge_loop_visits_face_edges():
    """Test that face_edge_loop returns the three edges of each face."""
    mesh = analyze_trimesh(trimesh.creation.box())
    for face in mesh.faces:
        loop = face_edge_loop(mesh, face.id)
        assert len(loop) == 3
        pairs = {(mesh.edges[i].start_vertex, mesh.edges[i].end_vertex) for i in loop}
        a, b, c = face.vertex_ids
        expected = {tuple(sorted(p)) for p in ((a, b), (b, c), (c, a))}
        assert pairs == expected


def test_face_edge_loop_on_single_triangle():
    """Test face_edge_loop on a fully boundary triangle."""
    mesh = analyze_geometry([0, 0, 0, 1, 0, 0, 0, 1, 0], [0, 1, 2])
    assert sorted(face_edge_loop(mesh, 0)) == [0, 1, 2]


def test_vertex_one_ring_closed_mesh():
    """Test vertex_one_ring on a closed icosahedron."""
    mesh = analyze_trimesh(trimesh.creation.icosahedron())
    for vertex in mesh.vertices:
        ring = vertex_one_ring(mesh, vertex.id)
        assert len(ring) == 5
        expected = set()
        for edge in mesh.edges:
            if edge.start_vertex == vertex.id:
                expected.add(edge.end_vertex)
            elif edge.end_vertex == vertex.id:
                expected.add(edge.start_vertex)
        assert set(ring) == expected


def test_vertex_one_ring_open_fan():
    """Test vertex_one_ring around boundary vertices."""
    mesh = create_strip_mesh()
    assert set(vertex_one_ring(mesh, 2)) == {0, 1, 3, 4}
    assert vertex_one_ring(mesh, 1) == [3, 2, 0]
    # Rotation order: each consecutive pair shares a face
    ring = vertex_one_ring(mesh, 2)
    faces = {frozenset(f.vertex_ids) for f in mesh.faces}
    for a, b in zip(ring, ring[1:]):
        assert frozenset((2, a, b)) in faces


def test_queries_require_structures():
    """Test that queries reject meshes missing the structures they need."""
    mesh = analyze_geometry([0, 0, 0, 1, 0, 0, 0, 1, 0], [0, 1, 2],
                            include_half_edges=False, include_winged_edges=False)
    with pytest.raises(ValueError):
        face_neighbors_from_twins(mesh)
    with pytest.raises(ValueError):
        boundary_loops(mesh)
    with pytest.raises(ValueError):
        vertex_one_ring(mesh, 0)
