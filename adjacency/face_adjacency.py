import networkx as nx

from data_types import ProcessedMesh


def _require(structure, name):
    if structure is None:
        raise ValueError(f"ProcessedMesh was built without {name}")
    return structure


def face_neighbors_from_winged_edges(mesh: ProcessedMesh) -> list[list[int]]:
    """Face adjacency read off each interior winged edge's left/right faces."""
    edges = _require(mesh.edges, "winged edges")
    neighbors = [set() for _ in mesh.faces]
    for edge in edges:
        if edge.face_left is None or edge.face_right is None:
            continue
        if edge.face_left != edge.face_right:
            neighbors[edge.face_left].add(edge.face_right)
            neighbors[edge.face_right].add(edge.face_left)
    return [sorted(n) for n in neighbors]


def face_neighbors_from_twins(mesh: ProcessedMesh) -> list[list[int]]:
    """Face adjacency read off half-edge twin links."""
    half_edges = _require(mesh.half_edges, "half-edges")
    neighbors = [set() for _ in mesh.faces]
    for he in half_edges:
        if he.twin is None:
            continue
        other = half_edges[he.twin].face
        if other != he.face:
            neighbors[he.face].add(other)
            neighbors[other].add(he.face)
    return [sorted(n) for n in neighbors]


def face_adjacency_graph(mesh: ProcessedMesh) -> nx.Graph:
    """
    Graph with one node per face and one edge per interior winged edge.

    Graph edges carry the winged edge id as ``edge_id``.
    """
    edges = _require(mesh.edges, "winged edges")
    graph = nx.Graph()
    graph.add_nodes_from(face.id for face in mesh.faces)
    for edge in edges:
        if edge.face_left is not None and edge.face_right is not None and edge.face_left != edge.face_right:
            graph.add_edge(edge.face_left, edge.face_right, edge_id=edge.id)
    return graph


def count_shells(mesh: ProcessedMesh) -> int:
    """Number of edge-connected groups of faces."""
    return nx.number_connected_components(face_adjacency_graph(mesh))
