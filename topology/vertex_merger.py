"""
Vertex merging: collapse raw positions that coincide after quantization.
"""

import logging

import numpy as np
from numpy.typing import NDArray

logger = logging.getLogger(__name__)

# Number of decimal places kept when positions are used as merge keys
POSITION_PRECISION = 2


def quantize_positions(positions: NDArray[np.float64], precision: int = POSITION_PRECISION) -> NDArray[np.float64]:
    """
    Round coordinates to `precision` decimal places, halves rounding up.

    Adding 0.0 folds -0.0 into 0.0 so both signs of zero share a key.
    """
    if precision < 0:
        raise ValueError(f"precision must be non-negative, got {precision}")
    scale = 10.0 ** precision
    return np.floor(np.asarray(positions, dtype=np.float64) * scale + 0.5) / scale + 0.0


class VertexMerger:
    """
    Hands out stable vertex ids for positions in a flat xyz buffer.

    One merger lives for exactly one analysis call; ids are assigned in the
    order positions are first requested.
    """

    def __init__(self, positions: NDArray[np.float64], precision: int = POSITION_PRECISION):
        self.quantized = quantize_positions(np.reshape(positions, (-1, 3)), precision)
        self.vertex_positions: list[tuple[float, float, float]] = []
        self._key_to_id: dict[tuple[float, float, float], int] = {}
        self.lookups = 0

    def get_or_add(self, position_index: int) -> int:
        """Return the vertex id for raw position `position_index` (in units of 3 floats)."""
        self.lookups += 1
        x, y, z = self.quantized[position_index]
        key = (float(x), float(y), float(z))

        vertex_id = self._key_to_id.get(key)
        if vertex_id is None:
            vertex_id = len(self.vertex_positions)
            self.vertex_positions.append(key)
            self._key_to_id[key] = vertex_id
        return vertex_id

    @property
    def merged_count(self) -> int:
        """How many lookups resolved to an already existing vertex."""
        return self.lookups - len(self.vertex_positions)


def merge_vertices(positions: NDArray[np.float64], indices=None, precision: int = POSITION_PRECISION):
    """
    Deduplicate the corners referenced by `indices` (or every raw position when
    `indices` is None).

    Returns:
        tuple: (list of unique quantized positions, list of vertex ids, one per corner)
    """
    merger = VertexMerger(positions, precision)
    if indices is None:
        corner_sources = range(len(merger.quantized))
    else:
        corner_sources = indices

    corner_ids = [merger.get_or_add(int(i)) for i in corner_sources]

    if merger.merged_count:
        logger.info("Merged %d coincident corners into %d vertices",
                    merger.merged_count, len(merger.vertex_positions))
    return merger.vertex_positions, corner_ids
