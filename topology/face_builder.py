"""
Face construction from the deduplicated corner stream.
"""

import numpy as np
from numpy.typing import NDArray


def build_faces(corner_ids: list[int]) -> list[tuple[int, int, int]]:
    """Group corner ids into consecutive triangles; face id is the group's position."""
    return [
        (corner_ids[i], corner_ids[i + 1], corner_ids[i + 2])
        for i in range(0, len(corner_ids) - 2, 3)
    ]


def calculate_face_normals(vertices: NDArray[np.float64], faces: NDArray[np.int64]) -> NDArray[np.float64]:
    """Unit normals by the right-hand rule on (v1, v2, v3); zero for degenerate faces."""
    if len(faces) == 0:
        return np.zeros((0, 3), dtype=np.float64)

    p1 = vertices[faces[:, 0]]
    p2 = vertices[faces[:, 1]]
    p3 = vertices[faces[:, 2]]
    normals = np.cross(p2 - p1, p3 - p1)
    lengths = np.linalg.norm(normals, axis=1)

    nonzero = lengths > 0
    normals[nonzero] /= lengths[nonzero][:, np.newaxis]
    normals[~nonzero] = 0.0
    return normals
