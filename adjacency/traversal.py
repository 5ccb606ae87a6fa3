"""
Walks over the linked structures: around a face through winged-edge
successor links, and around a vertex through half-edge twin/prev/next links.
"""

from data_types import ProcessedMesh


def face_edge_loop(mesh: ProcessedMesh, face_id: int) -> list[int]:
    """
    Winged edge ids around `face_id`, following succ_left on edges where the
    face is on the left and succ_right where it is on the right.
    """
    if mesh.edges is None:
        raise ValueError("ProcessedMesh was built without winged edges")
    start = mesh.faces[face_id].incident_edge
    if start is None:
        return []

    loop = []
    current = start
    for _ in range(len(mesh.edges)):
        loop.append(current)
        edge = mesh.edges[current]
        if edge.face_left == face_id:
            current = edge.succ_left
        elif edge.face_right == face_id:
            current = edge.succ_right
        else:
            break
        if current is None or current == start:
            break
    return loop


def vertex_one_ring(mesh: ProcessedMesh, vertex_id: int) -> list[int]:
    """
    Neighboring vertex ids around `vertex_id`, in rotation order.

    Starting from the vertex's outgoing half-edge, the walk steps to the next
    outgoing half-edge with twin(prev(h)). On an open fan it stops at the
    boundary and then walks the other way with next(twin(h)).
    """
    half_edges = mesh.half_edges
    if half_edges is None:
        raise ValueError("ProcessedMesh was built without half-edges")
    start = mesh.vertices[vertex_id].incident_half_edge
    if start is None:
        return []

    ring = []
    current = start
    closed = False
    for _ in range(len(half_edges)):
        ring.append(half_edges[current].target_vertex)
        incoming = half_edges[half_edges[current].prev]
        if incoming.twin is None:
            ring.append(incoming.origin_vertex)
            break
        current = incoming.twin
        if current == start:
            closed = True
            break

    if not closed:
        current = start
        for _ in range(len(half_edges)):
            twin = half_edges[current].twin
            if twin is None:
                break
            current = half_edges[twin].next
            ring.insert(0, half_edges[current].target_vertex)

    unique = []
    for v in ring:
        if v not in unique:
            unique.append(v)
    return unique
