from typing import Iterable, Optional

from ckb_hex.errors import UnknownCodeHash
from ckb_hex.utils import hex_to_bytes

CODE_HASH_LENGTH = 32

CODE_HASHES: dict[str, str] = {
    "CLASS_TYPE_CODE_HASH": "0x095b8c0b4e51a45f953acd1fcd1e39489f2675b4bc94e7af27bb38958790e3fc",
    "REGISTRY_TYPE_CODE_HASH": "0x3a6897ab78ad10d028d0c5ef375545e66bfdffd01f3a369b5b07906078e04f6d",
    "COMPACT_TYPE_CODE_HASH": "0xdca728b2220d4026ae4295915ca3dfb586bdf75dab7bf14b20373899588d8689",
}


def decode_code_hashes(
    names: Optional[Iterable[str]] = None, strict: Optional[bool] = None
) -> dict[str, bytes]:
    """
    Decodes the named code hashes (all of them when `names` is None), keeping the requested order.
    """
    if names is None:
        names = CODE_HASHES.keys()
    output = {}
    for name in names:
        try:
            hex_str = CODE_HASHES[name]
        except KeyError:
            raise UnknownCodeHash(name)
        output[name] = hex_to_bytes(hex_str, strict=strict)
    return output
