from .structures import (
    Vertex,
    Face,
    SoupTriangle,
    HalfEdge,
    WingedEdge,
    ProcessedMesh,
)
