import logging
import os
from typing import Optional

from ckb_hex.errors import InvalidHexDigit

logger = logging.getLogger("ckb_hex")

STRICT = os.getenv("CKB_HEX_STRICT") == "1"

HEX_PREFIX = "0x"
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def _parse_slice(slice_: str, offset: int, strict: bool) -> int:
    if slice_ and all(c in _HEX_DIGITS for c in slice_):
        return int(slice_, 16)
    if strict:
        raise InvalidHexDigit(slice_, offset)
    logger.warning(f"Invalid hex digit in {slice_!r} at offset {offset}, using 0")
    return 0


def hex_to_bytes(hex_str: Optional[str], strict: Optional[bool] = None) -> bytes:
    """
    Converts a hex-encoded string into bytes. Handles 0x-prefixed and non-prefixed hex-encoded strings.

    An empty or missing string decodes to empty bytes. An odd-length string decodes its last digit on its own,
    so "0xf" becomes b"\\x0f". Slices that are not valid hex become 0, unless `strict` is set (or `CKB_HEX_STRICT=1`
    and `strict` is None), in which case `InvalidHexDigit` is raised.
    """
    if not hex_str:
        return b""
    if strict is None:
        strict = STRICT
    if hex_str.startswith(HEX_PREFIX):
        hex_str = hex_str[len(HEX_PREFIX) :]

    bytes_result = bytes(
        _parse_slice(hex_str[i : i + 2], i, strict) for i in range(0, len(hex_str), 2)
    )
    logger.debug(f"Decoded {len(hex_str)} hex digits into {len(bytes_result)} bytes")
    return bytes_result


def bytes_to_hex(data: bytes) -> str:
    """
    Converts bytes into a 0x-prefixed, lower-case hex string.
    """
    return HEX_PREFIX + data.hex()
