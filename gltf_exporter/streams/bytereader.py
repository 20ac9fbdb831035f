from io import BufferedReader, BytesIO
from struct import unpack

from .common import Endian, get_endian_sign


class ByteReader:
    def __init__(self, initial_bytes: bytes, endian: Endian = "little"):
        # noinspection PyTypeChecker
        self._internal_reader = BufferedReader(BytesIO(initial_bytes))
        self._endian_sign = get_endian_sign(endian)

    def seek(self, position: int) -> None:
        self._internal_reader.seek(position)

    def tell(self) -> int:
        return self._internal_reader.tell()

    def read(self, size: int) -> bytes:
        return self._internal_reader.read(size)

    def read_u_int32(self) -> int:
        return unpack(f"{self._endian_sign}I", self.read(4))[0]
