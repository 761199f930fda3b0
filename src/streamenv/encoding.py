"""Byte-order-mark detection for the first chunk of a dotenv file."""

from __future__ import annotations

from streamenv.errors import UnsupportedEncoding

UTF8_BOM = b"\xef\xbb\xbf"
UTF16_BE_BOM = b"\xfe\xff"
UTF16_LE_BOM = b"\xff\xfe"
UTF32_BE_BOM = b"\x00\x00\xfe\xff"
UTF32_LE_BOM = b"\xff\xfe\x00\x00"


def detect_unsupported_bom(chunk: bytes) -> str | None:
    if chunk.startswith(UTF16_BE_BOM):
        return "UTF-16 BE"
    if chunk.startswith(UTF32_LE_BOM):
        return "UTF-32 LE"
    # Any other FF FE prefix is treated as UTF-16 LE, including FF FE 00 xx.
    if chunk.startswith(UTF16_LE_BOM):
        return "UTF-16 LE"
    if chunk.startswith(UTF32_BE_BOM):
        return "UTF-32 BE"
    return None


def skip_bom(chunk: bytes, *, utf_guards: bool = True) -> int:
    """Return how many leading bytes of ``chunk`` to skip.

    A UTF-8 BOM is skipped. With ``utf_guards`` enabled, UTF-16 and UTF-32
    BOMs raise :class:`UnsupportedEncoding`; without them those bytes are
    handed to the parser untouched.
    """
    if chunk.startswith(UTF8_BOM):
        return len(UTF8_BOM)
    if utf_guards:
        encoding = detect_unsupported_bom(chunk)
        if encoding is not None:
            raise UnsupportedEncoding(encoding)
    return 0
