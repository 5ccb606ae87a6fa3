import networkx as nx

from data_types import ProcessedMesh


def boundary_edges(mesh: ProcessedMesh) -> list[int]:
    """Ids of winged edges that border only one face."""
    if mesh.edges is None:
        raise ValueError("ProcessedMesh was built without winged edges")
    return [edge.id for edge in mesh.edges if edge.is_boundary]


def boundary_loops(mesh: ProcessedMesh) -> list[list[int]]:
    """
    Group boundary edges into connected components.

    Returns a list with one entry per boundary loop, each a sorted list of
    winged edge ids. Loops are ordered by their smallest edge id.
    """
    graph = nx.Graph()
    for edge_id in boundary_edges(mesh):
        edge = mesh.edges[edge_id]
        graph.add_edge(edge.start_vertex, edge.end_vertex, edge_id=edge_id)

    loops = []
    for component in nx.connected_components(graph):
        subgraph = graph.subgraph(component)
        loops.append(sorted(data["edge_id"] for _, _, data in subgraph.edges(data=True)))
    loops.sort(key=lambda loop: loop[0])
    return loops
