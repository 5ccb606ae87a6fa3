from data_types import SoupTriangle


def emit_soup(faces: list[tuple[int, int, int]], vertex_positions: list[tuple[float, float, float]]) -> list[SoupTriangle]:
    """Copy each face's corner positions into an independent triangle."""
    return [
        SoupTriangle(
            id=face_id,
            v1=tuple(vertex_positions[a]),
            v2=tuple(vertex_positions[b]),
            v3=tuple(vertex_positions[c]),
        )
        for face_id, (a, b, c) in enumerate(faces)
    ]
