import numpy as np
import trimesh

from data_types import ProcessedMesh
from .analysis import analyze_geometry


def analyze_trimesh(mesh: trimesh.Trimesh, **kwargs) -> ProcessedMesh:
    """Run the analysis on a trimesh mesh's vertices and faces."""
    positions = np.asarray(mesh.vertices, dtype=np.float64).reshape(-1)
    indices = np.asarray(mesh.faces, dtype=np.int64).reshape(-1)
    return analyze_geometry(positions, indices, **kwargs)


def to_trimesh(processed: ProcessedMesh) -> trimesh.Trimesh:
    """Rebuild a trimesh mesh from the indexed vertices and faces, keeping their order."""
    return trimesh.Trimesh(
        vertices=processed.vertex_array(),
        faces=processed.face_array(),
        process=False,
    )
