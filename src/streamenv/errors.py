"""Error taxonomy for streamenv loads."""

from __future__ import annotations

import os

# Domain codes sit above the range used by POSIX errno values.
RESERVED_CODE_FLOOR = 100

BUFFER_RELEASED = 100
ALLOC_FAILURE = 101
KEY_INVALID = 102
UNSUPPORTED_ENCODING = 103
PUBLISH_FAILED = 104

_MESSAGES = {
    BUFFER_RELEASED: "buffer has been released",
    ALLOC_FAILURE: "failed to allocate memory",
    KEY_INVALID: "variable is not POSIX safe",
    UNSUPPORTED_ENCODING: "unsupported text encoding detected",
    PUBLISH_FAILED: "failed to set environment variable",
}


class DotenvError(Exception):
    """Base class for every failure raised by a load."""

    code: int = 0

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or describe_error(self.code))


class BufferReleased(DotenvError):
    code = BUFFER_RELEASED


class AllocFailure(DotenvError):
    code = ALLOC_FAILURE

    def __init__(self, requested: int, message: str | None = None) -> None:
        self.requested = requested
        super().__init__(message)


class InvalidKey(DotenvError):
    code = KEY_INVALID

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"{describe_error(self.code)}: {key!r}")


class UnsupportedEncoding(DotenvError):
    code = UNSUPPORTED_ENCODING

    def __init__(self, encoding: str) -> None:
        self.encoding = encoding
        super().__init__(f"{describe_error(self.code)}: {encoding}")


class PublishError(DotenvError):
    code = PUBLISH_FAILED

    def __init__(self, key: str, reason: str) -> None:
        self.key = key
        super().__init__(f"{describe_error(self.code)} {key!r}: {reason}")


def describe_error(error: int | BaseException) -> str:
    """Map an error code (or an exception carrying one) to a readable message."""
    if isinstance(error, DotenvError):
        code = error.code
    elif isinstance(error, OSError):
        if error.errno is None:
            return str(error)
        code = error.errno
    elif isinstance(error, BaseException):
        return str(error) or type(error).__name__
    else:
        code = int(error)

    if code < RESERVED_CODE_FLOOR:
        return os.strerror(code)
    return _MESSAGES.get(code, "unknown error")


def error_code(error: BaseException) -> int:
    if isinstance(error, DotenvError):
        return error.code
    if isinstance(error, OSError) and error.errno:
        return error.errno
    return 1
