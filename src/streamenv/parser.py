"""Streaming state machine that turns dotenv bytes into key/value entries."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
import os
from typing import BinaryIO, Iterator

from streamenv.buffer import GrowableBuffer
from streamenv.config import LoaderConfig
from streamenv.encoding import skip_bom
from streamenv.logger import get_logger
from streamenv.trim import trim_buffer

logger = get_logger(__name__)

NUL = 0x00
NEWLINE = 0x0A
SPACE = 0x20
HASH = 0x23
EQUALS = 0x3D


class ParseMode(Enum):
    START = "start"
    KEY = "key"
    VALUE = "value"
    COMMENT = "comment"
    EQUAL = "equal"
    END_OF_LINE = "end-of-line"


@dataclass(frozen=True)
class Entry:
    key: str
    value: str
    line: int


def transition(mode: ParseMode, byte: int) -> ParseMode:
    """Next mode for ``byte`` read while in ``mode`` (KEY, VALUE or COMMENT)."""
    if byte == NEWLINE:
        return ParseMode.END_OF_LINE
    if mode is ParseMode.COMMENT or byte == HASH:
        return ParseMode.COMMENT
    # Only the first "=" of a line pivots; later ones are value data.
    if byte == EQUALS and mode is ParseMode.KEY:
        return ParseMode.EQUAL
    return mode


def is_control(byte: int) -> bool:
    return NUL < byte < SPACE and byte != NEWLINE


class LineScanner:
    """Drives the parse over successive chunks using two accumulators.

    Chunk boundaries only matter for the first chunk, which is checked for a
    byte-order mark. A NUL byte discards the rest of the chunk it appears in.
    """

    def __init__(self, key: GrowableBuffer, value: GrowableBuffer, config: LoaderConfig) -> None:
        self._key = key
        self._value = value
        self._config = config
        self.mode = ParseMode.START
        self.cursor = 0
        self.line = 1

    def feed(self, chunk: bytes) -> Iterator[Entry]:
        offset = 0
        if self.mode is ParseMode.START:
            offset = skip_bom(chunk, utf_guards=self._config.utf_guards)
            if offset:
                logger.debug("bom_skipped", length=offset)
            self.mode = ParseMode.KEY

        for byte in chunk[offset:]:
            if byte == NUL:
                break
            mode = transition(self.mode, byte)
            if mode is ParseMode.END_OF_LINE:
                yield self._end_of_line()
                continue
            if mode is ParseMode.EQUAL:
                self._pivot()
                continue
            self.mode = mode
            if mode is ParseMode.COMMENT or is_control(byte):
                continue
            self._append(byte)

    def finish(self) -> Entry:
        """Flush whatever is pending when the stream ends without a newline."""
        return self._end_of_line()

    def _pivot(self) -> None:
        self.cursor = 0
        self.mode = ParseMode.VALUE

    def _append(self, byte: int) -> None:
        buffer = self._key if self.mode is ParseMode.KEY else self._value
        if self.cursor >= buffer.capacity:
            buffer.expand(self._config.chunk_size)
        buffer.write(self.cursor, byte)
        self.cursor += 1

    def _end_of_line(self) -> Entry:
        entry = Entry(
            key=os.fsdecode(trim_buffer(self._key)),
            value=os.fsdecode(trim_buffer(self._value)),
            line=self.line,
        )
        self._key.clear()
        self._value.clear()
        self.cursor = 0
        self.mode = ParseMode.KEY
        self.line += 1
        return entry


def iter_entries(stream: BinaryIO, config: LoaderConfig | None = None) -> Iterator[Entry]:
    """Yield one trimmed entry per logical line of ``stream``.

    The stream is read in chunks of at most ``config.chunk_size`` bytes, each
    ending early at a newline. Entries are produced as soon as their line
    completes; the pending line is flushed once at end of stream, so the last
    entry may be empty. Both accumulators are released however the iteration
    ends.
    """
    config = config or LoaderConfig()
    size = config.chunk_size
    limit = config.max_buffer_size
    with GrowableBuffer(size, limit=limit) as key, GrowableBuffer(size, limit=limit) as value:
        scanner = LineScanner(key, value, config)
        while True:
            chunk = stream.readline(size)
            if not chunk:
                break
            yield from scanner.feed(chunk)
        yield scanner.finish()
