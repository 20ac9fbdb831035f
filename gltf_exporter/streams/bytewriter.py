from struct import pack

from .common import Endian, get_endian_sign


class ByteWriter:
    def __init__(self, endian: Endian = "little"):
        self._buffer = bytearray()
        self._endian_sign = get_endian_sign(endian)

    def write(self, value: bytes) -> None:
        self._buffer += value

    def write_u_int32(self, integer: int) -> None:
        self.write(pack(f"{self._endian_sign}I", integer))

    @property
    def buffer(self) -> bytes:
        return bytes(self._buffer)
