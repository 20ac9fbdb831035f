from typing import Literal

Endian = Literal["big", "little"]

_ENDIAN_SIGNS: dict[str, Literal[">", "<"]] = {"big": ">", "little": "<"}


def get_endian_sign(endian: Endian) -> Literal[">", "<"]:
    sign = _ENDIAN_SIGNS.get(endian)
    if sign is None:
        raise NotImplementedError(f"Unknown endian requested: {endian}")

    return sign
