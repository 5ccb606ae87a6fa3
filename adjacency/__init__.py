from .face_adjacency import (
    face_neighbors_from_winged_edges,
    face_neighbors_from_twins,
    face_adjacency_graph,
    count_shells,
)
from .boundary_loops import boundary_edges, boundary_loops
from .traversal import face_edge_loop, vertex_one_ring
