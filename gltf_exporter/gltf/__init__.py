from .chunk import BIN_CHUNK_TYPE, JSON_CHUNK_TYPE, Chunk
from .gltf import GlTF, CHUNK_ALIGNMENT, MAX_LENGTH

__all__ = [
    "GlTF",
    "Chunk",
    "JSON_CHUNK_TYPE",
    "BIN_CHUNK_TYPE",
    "CHUNK_ALIGNMENT",
    "MAX_LENGTH",
]
