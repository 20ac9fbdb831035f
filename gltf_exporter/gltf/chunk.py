Buffer = bytes | bytearray | memoryview

JSON_CHUNK_TYPE = b"JSON"
BIN_CHUNK_TYPE = b"BIN\0"


class Chunk:
    """
    A type-tagged chunk of the container.

    The payload is kept as a sequence of segments so that binary blobs can be
    written one by one without being joined in memory first.
    """

    def __init__(self, type: bytes, *segments: Buffer):
        self.type = type
        self.segments: list[Buffer] = list(segments)

    @property
    def data(self) -> bytes:
        return b"".join(self.segments)

    @property
    def name(self) -> str:
        return self.type.rstrip(b"\0").decode("ascii")

    def padding(self, alignment: int) -> bytes:
        fill = b" " if self.type == JSON_CHUNK_TYPE else b"\0"
        return fill * (-len(self) % alignment)

    def __len__(self) -> int:
        return sum(memoryview(segment).nbytes for segment in self.segments)

    def __repr__(self) -> str:
        return f"Chunk(type={self.type}, length={len(self)})"
