from .code_hashes import CODE_HASHES, CODE_HASH_LENGTH, decode_code_hashes
from .errors import HexDecodeError, InvalidHexDigit, UnknownCodeHash
from .utils import bytes_to_hex, hex_to_bytes

__all__ = [
    "CODE_HASHES",
    "CODE_HASH_LENGTH",
    "HexDecodeError",
    "InvalidHexDigit",
    "UnknownCodeHash",
    "bytes_to_hex",
    "decode_code_hashes",
    "hex_to_bytes",
]
