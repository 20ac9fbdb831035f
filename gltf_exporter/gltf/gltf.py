import logging
import os
from typing import BinaryIO, Self

from gltf_exporter.gltf.chunk import JSON_CHUNK_TYPE, Buffer, Chunk
from gltf_exporter.gltf.exceptions import (
    DestinationUnwritableException,
    SizeLimitExceededException,
    WriteFailureException,
)
from gltf_exporter.streams import ByteWriter

GLTF_HEADER_SIZE = 12
GLTF_CHUNK_HEADER_SIZE = 8

GLTF_MAGIC = b"glTF"
GLTF_VERSION = 2

CHUNK_ALIGNMENT = 4
MAX_LENGTH = 0xFFFFFFFF

# Total length the reference exporter declares regardless of content
REFERENCE_TOTAL_LENGTH = GLTF_HEADER_SIZE + 2 * GLTF_CHUNK_HEADER_SIZE

log = logging.getLogger(__name__)


class GlTF:
    """
    Binary glTF container writer.

    Lays out the 12-byte header followed by every chunk in order, each as an
    8-byte chunk header and its payload. By default every payload is padded
    to a 4-byte boundary and the declared lengths include the padding.
    With ``reference_layout`` the payloads are left unpadded and
    the header declares the fixed placeholder length of the reference
    exporter instead of the true file size.
    """

    def __init__(self, *chunks: Chunk, reference_layout: bool = False):
        self._chunks: list[Chunk] = list(chunks)
        self._reference_layout = reference_layout

    def chunk_length(self, chunk: Chunk) -> int:
        length = len(chunk)
        if not self._reference_layout:
            length += len(chunk.padding(CHUNK_ALIGNMENT))

        return length

    def total_length(self) -> int:
        if self._reference_layout:
            return REFERENCE_TOTAL_LENGTH

        return GLTF_HEADER_SIZE + sum(
            GLTF_CHUNK_HEADER_SIZE + self.chunk_length(chunk) for chunk in self._chunks
        )

    def write(self, filepath: os.PathLike | str) -> Self:
        # Lengths are checked before the destination is touched
        self._check_lengths(filepath)

        try:
            file = open(filepath, "wb")
        except OSError as exception:
            raise DestinationUnwritableException(
                f"Failed to open for writing: {exception.strerror or exception}",
                path=filepath,
                stage="open",
            ) from exception

        try:
            with file:
                self._write_to(file, filepath)
        except OSError as exception:
            # Buffered data is flushed on close
            raise WriteFailureException(
                f"Error closing file: {exception.strerror or exception}",
                path=filepath,
                stage="close",
            ) from exception

        log.debug("Wrote %d bytes to %s", self.total_length(), os.fspath(filepath))
        return self

    def write_to(self, stream: BinaryIO, filepath: os.PathLike | str) -> None:
        self._check_lengths(filepath)
        self._write_to(stream, filepath)

    def _write_to(self, stream: BinaryIO, filepath: os.PathLike | str) -> None:
        header = ByteWriter("little")
        header.write(GLTF_MAGIC)
        header.write_u_int32(GLTF_VERSION)
        header.write_u_int32(self.total_length())
        _write_stage(stream, header.buffer, filepath, "Error writing header")

        for chunk in self._chunks:
            self._write_chunk(stream, chunk, filepath)

    def _write_chunk(
        self, stream: BinaryIO, chunk: Chunk, filepath: os.PathLike | str
    ) -> None:
        chunk_header = ByteWriter("little")
        chunk_header.write_u_int32(self.chunk_length(chunk))
        chunk_header.write(chunk.type)
        _write_stage(
            stream,
            chunk_header.buffer,
            filepath,
            f"Error writing {chunk.name} chunk header",
        )

        if chunk.type == JSON_CHUNK_TYPE:
            _write_stage(stream, chunk.data, filepath, "Error writing JSON data")
        else:
            offset = 0
            for segment in chunk.segments:
                _write_stage(
                    stream,
                    segment,
                    filepath,
                    f"Error writing {chunk.name} chunk data at offset {offset}",
                )
                offset += memoryview(segment).nbytes

        if not self._reference_layout:
            padding = chunk.padding(CHUNK_ALIGNMENT)
            if padding:
                _write_stage(
                    stream,
                    padding,
                    filepath,
                    f"Error writing {chunk.name} chunk padding",
                )

    def _check_lengths(self, filepath: os.PathLike | str) -> None:
        for chunk in self._chunks:
            if self.chunk_length(chunk) > MAX_LENGTH:
                raise SizeLimitExceededException(
                    f"{chunk.name} chunk exceeds {MAX_LENGTH} bytes",
                    path=filepath,
                    stage=f"{chunk.name} chunk",
                )

        if self.total_length() > MAX_LENGTH:
            raise SizeLimitExceededException(
                f"Container exceeds {MAX_LENGTH} bytes", path=filepath, stage="header"
            )


def _write_stage(
    stream: BinaryIO, data: Buffer, filepath: os.PathLike | str, stage: str
) -> None:
    expected = memoryview(data).nbytes
    try:
        written = stream.write(data)
    except OSError as exception:
        raise WriteFailureException(
            f"{stage}: {exception.strerror or exception}", path=filepath, stage=stage
        ) from exception

    if written is not None and written != expected:
        raise WriteFailureException(
            f"{stage}: wrote {written} of {expected} bytes", path=filepath, stage=stage
        )
