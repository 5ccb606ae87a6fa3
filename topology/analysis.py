"""
Convert raw triangle buffers into the four mesh representations.

The stages run strictly in order: vertex merging, face building, then the
soup, half-edge and winged-edge derivations. Winged edges are consolidated
from the half-edges, so the half-edge pass always runs when winged edges are
requested even if the half-edge list itself is not published.
"""

import logging

import numpy as np
from numpy.typing import NDArray

from data_types import Vertex, Face, ProcessedMesh
from .vertex_merger import POSITION_PRECISION, merge_vertices
from .face_builder import build_faces, calculate_face_normals
from .soup import emit_soup
from .half_edge import build_half_edges
from .winged_edge import build_winged_edges

logger = logging.getLogger(__name__)


def _as_flat_buffer(values, name: str) -> NDArray:
    try:
        array = np.asarray(values)
    except (TypeError, ValueError) as e:
        raise ValueError(f"{name} must be a numeric sequence: {e}") from e

    # Checked before any conversion so numeric strings are not parsed
    if array.size and (not np.issubdtype(array.dtype, np.number)
                       or np.issubdtype(array.dtype, np.complexfloating)):
        raise ValueError(f"{name} must hold real numbers, got dtype {array.dtype}")

    if array.ndim == 2 and array.shape[1] == 3:
        array = array.reshape(-1)
    elif array.ndim != 1:
        raise ValueError(f"{name} must be flat or shaped (N, 3), got shape {array.shape}")

    if array.size % 3 != 0:
        raise ValueError(f"{name} length must be divisible by 3, got {array.size}")
    return array


def validate_buffers(positions, indices=None):
    """
    Check the input buffers and return them as flat numpy arrays.

    Raises:
        ValueError: if either buffer is malformed or an index is out of range.
    """
    positions = _as_flat_buffer(positions, "positions").astype(np.float64)
    num_positions = positions.size // 3

    if indices is None:
        if num_positions % 3 != 0:
            raise ValueError(f"Un-indexed positions must hold whole triangles, "
                             f"got {num_positions} vertices")
        return positions, None

    indices = _as_flat_buffer(indices, "indices")
    if indices.size == 0:
        return positions, indices.astype(np.int64)

    if not np.issubdtype(indices.dtype, np.integer):
        if not np.all(np.isfinite(indices)) or np.any(np.mod(indices, 1) != 0):
            raise ValueError("indices must be whole numbers")

    indices = indices.astype(np.int64)
    if indices.min() < 0:
        raise ValueError(f"indices must be non-negative, found {indices.min()}")
    if indices.max() >= num_positions:
        raise ValueError(f"Index {indices.max()} out of range for {num_positions} positions")
    return positions, indices


def analyze_geometry(
    positions,
    indices=None,
    *,
    precision: int = POSITION_PRECISION,
    include_soup: bool = True,
    include_half_edges: bool = True,
    include_winged_edges: bool = True,
) -> ProcessedMesh:
    """
    Build a ProcessedMesh from a position buffer and an optional index buffer.

    Parameters:
    ----------
    positions : sequence of float
        Flat xyz buffer (or an (N, 3) array).
    indices : sequence of int, optional
        Triangle corner indices into `positions`, three per face. Without it
        every three consecutive positions form one triangle.
    precision : int
        Decimal places kept when merging coincident positions.
    include_soup, include_half_edges, include_winged_edges : bool
        Which derived representations to publish on the result.

    Returns:
    -------
    ProcessedMesh
        Vertices and faces, plus the requested derived lists (None otherwise).
        Incidence back-references are only set for published structures.
    """
    positions, indices = validate_buffers(positions, indices)

    vertex_positions, corner_ids = merge_vertices(positions, indices, precision)
    faces = build_faces(corner_ids)
    logger.debug("Built %d vertices and %d faces from %d corners",
                 len(vertex_positions), len(faces), len(corner_ids))

    soup = emit_soup(faces, vertex_positions) if include_soup else None

    half_edge_structure = None
    if include_half_edges or include_winged_edges:
        half_edge_structure = build_half_edges(faces)

    winged_edge_structure = None
    if include_winged_edges:
        winged_edge_structure = build_winged_edges(half_edge_structure)

    vertex_half_edges = half_edge_structure.vertex_incidence if include_half_edges else {}
    face_half_edges = half_edge_structure.face_incidence if include_half_edges else {}
    vertex_edges = winged_edge_structure.vertex_incidence if include_winged_edges else {}
    face_edges = winged_edge_structure.face_incidence if include_winged_edges else {}

    vertices = tuple(
        Vertex(
            id=vertex_id,
            x=x,
            y=y,
            z=z,
            incident_edge=vertex_edges.get(vertex_id),
            incident_half_edge=vertex_half_edges.get(vertex_id),
        )
        for vertex_id, (x, y, z) in enumerate(vertex_positions)
    )

    normals = calculate_face_normals(
        np.array(vertex_positions, dtype=np.float64).reshape(-1, 3),
        np.array(faces, dtype=np.int64).reshape(-1, 3),
    )
    face_records = tuple(
        Face(
            id=face_id,
            v1=v1,
            v2=v2,
            v3=v3,
            normal=tuple(float(c) for c in normals[face_id]),
            incident_edge=face_edges.get(face_id),
            incident_half_edge=face_half_edges.get(face_id),
        )
        for face_id, (v1, v2, v3) in enumerate(faces)
    )

    return ProcessedMesh(
        vertices=vertices,
        faces=face_records,
        soup_triangles=tuple(soup) if soup is not None else None,
        half_edges=tuple(half_edge_structure.half_edges) if include_half_edges else None,
        edges=tuple(winged_edge_structure.edges) if include_winged_edges else None,
    )
