import io
from dataclasses import dataclass

import orjson
import pytest

from gltf_exporter.store import GroupKind, Store
from gltf_exporter.streams import ByteReader


@dataclass
class ParsedChunk:
    length: int
    type: bytes
    data: bytes


@dataclass
class ParsedGlb:
    magic: bytes
    version: int
    length: int
    chunks: list[ParsedChunk]

    @property
    def document(self) -> dict:
        return orjson.loads(self.chunks[0].data)


def parse_glb(data: bytes) -> ParsedGlb:
    reader = ByteReader(data)
    magic = reader.read(4)
    version = reader.read_u_int32()
    length = reader.read_u_int32()

    chunks = []
    while reader.tell() < len(data):
        chunk_length = reader.read_u_int32()
        chunk_type = reader.read(4)
        chunks.append(ParsedChunk(chunk_length, chunk_type, reader.read(chunk_length)))

    return ParsedGlb(magic, version, length, chunks)


class RecordingLogger:
    def __init__(self):
        self.calls: list[tuple[int, str]] = []

    def __call__(self, severity: int, fmt: str, *args) -> None:
        self.calls.append((severity, fmt % args))


@pytest.fixture
def logger() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def simple_store() -> Store:
    store = Store()
    model = store.add_file("scene.rvm").add_group(GroupKind.MODEL, "model")
    root = model.add_group(name="root")
    root.add_attribute("k", "v")
    return store


class ShortWriteStream(io.BytesIO):
    """Accepts every write except the `fail_on_call`-th one, which writes nothing."""

    def __init__(self, fail_on_call: int):
        super().__init__()
        self._calls = 0
        self._fail_on_call = fail_on_call

    def write(self, data) -> int:
        self._calls += 1
        if self._calls == self._fail_on_call:
            return 0
        return super().write(data)
