from dataclasses import dataclass
from enum import Enum
from typing import Iterator

from gltf_exporter.gltf import MAX_LENGTH
from gltf_exporter.gltf.chunk import Buffer
from gltf_exporter.gltf.exceptions import SizeLimitExceededException


class BlobOwnership(Enum):
    BORROWED = "borrowed"
    OWNED = "owned"


@dataclass(frozen=True)
class Blob:
    data: Buffer
    offset: int
    ownership: BlobOwnership

    def __len__(self) -> int:
        return memoryview(self.data).nbytes


class BlobAccumulator:
    """
    Collects byte spans destined for the BIN chunk.

    Borrowed blobs keep a view over the caller's buffer, which has to stay
    alive and unchanged until the export finishes. Owned blobs are copied on
    record and don't depend on the caller afterwards.
    """

    def __init__(self):
        self._blobs: list[Blob] = []
        self._byte_length = 0

    def record(self, data: Buffer, copy: bool = False) -> int:
        view = memoryview(data).cast("B")
        size = view.nbytes

        if self._byte_length + size > MAX_LENGTH:
            raise SizeLimitExceededException(
                f"Binary data would exceed {MAX_LENGTH} bytes "
                f"({self._byte_length} recorded, {size} requested)",
                stage="BIN chunk data",
            )

        if copy:
            blob = Blob(bytes(view), self._byte_length, BlobOwnership.OWNED)
        else:
            blob = Blob(view, self._byte_length, BlobOwnership.BORROWED)

        self._blobs.append(blob)
        self._byte_length += size

        return blob.offset

    @property
    def byte_length(self) -> int:
        return self._byte_length

    @property
    def blobs(self) -> list[Blob]:
        return self._blobs

    def to_bytes(self) -> bytes:
        return b"".join(blob.data for blob in self._blobs)

    def __iter__(self) -> Iterator[Blob]:
        return iter(self._blobs)

    def __len__(self) -> int:
        return len(self._blobs)
