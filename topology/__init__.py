from .vertex_merger import POSITION_PRECISION, VertexMerger, merge_vertices, quantize_positions
from .face_builder import build_faces, calculate_face_normals
from .soup import emit_soup
from .half_edge import HalfEdgeStructure, build_half_edges
from .winged_edge import WingedEdgeStructure, build_winged_edges
from .analysis import analyze_geometry, validate_buffers
from .trimesh_adapter import analyze_trimesh, to_trimesh
from .validation import TopologyReport, check_topology
