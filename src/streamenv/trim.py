"""Whitespace and quote trimming for accumulated keys and values."""

from __future__ import annotations

from streamenv.buffer import GrowableBuffer

WHITESPACE = frozenset(b" \t\n\r\x0b\x0c")
QUOTES = frozenset(b"'\"")


def trim(data: bytes) -> bytes:
    """Strip surrounding whitespace, then any run of quotes on each end.

    Leading and trailing quotes are stripped independently, so ``value"``
    becomes ``value`` and ``'a"`` becomes ``a``. Whitespace inside the quotes
    is preserved.
    """
    length = len(data)
    start = 0
    while start < length and data[start] in WHITESPACE:
        start += 1
    if start == length:
        return b""

    while data[start] in QUOTES:
        start += 1
        if start == length:
            return b""

    # The first byte is never inspected from the right; ``start`` already
    # stops on a byte that is neither whitespace nor a quote.
    end = length - 1
    while end > 0 and data[end] in WHITESPACE:
        end -= 1
    while end > 0 and data[end] in QUOTES:
        end -= 1

    return data[start : end + 1]


def trim_buffer(buffer: GrowableBuffer) -> bytes:
    trimmed = trim(buffer.contents())
    buffer.replace(trimmed)
    return trimmed
