"""Fixed vectors, matrices, 3D grids, binary I/O, colour values and small HTTP/WebSocket helpers."""

__version__ = "0.1.0"

__all__ = [
    "byte_io",
    "fixed_vec",
    "formats",
    "http",
    "matrix",
    "vec3d",
    "websocket",
]