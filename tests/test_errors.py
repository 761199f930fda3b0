from __future__ import annotations

import errno
import os

import pytest

from streamenv.errors import (
    AllocFailure,
    BufferReleased,
    InvalidKey,
    PublishError,
    UnsupportedEncoding,
    describe_error,
    error_code,
)


@pytest.mark.parametrize(
    ("code", "message"),
    [
        (100, "buffer has been released"),
        (101, "failed to allocate memory"),
        (102, "variable is not POSIX safe"),
        (103, "unsupported text encoding detected"),
        (104, "failed to set environment variable"),
        (999, "unknown error"),
    ],
)
def test_domain_codes(code: int, message: str) -> None:
    assert describe_error(code) == message


def test_os_codes_use_strerror() -> None:
    assert describe_error(errno.ENOENT) == os.strerror(errno.ENOENT)
    assert describe_error(errno.EACCES) == os.strerror(errno.EACCES)


def test_exceptions_carry_codes() -> None:
    assert error_code(BufferReleased()) == 100
    assert error_code(AllocFailure(10)) == 101
    assert error_code(InvalidKey("1NUM")) == 102
    assert error_code(UnsupportedEncoding("UTF-16 BE")) == 103
    assert error_code(PublishError("A", "full")) == 104
    assert error_code(FileNotFoundError(errno.ENOENT, "missing")) == errno.ENOENT


def test_describe_error_accepts_exceptions() -> None:
    assert describe_error(InvalidKey("1NUM")) == "variable is not POSIX safe"
    assert "1NUM" in str(InvalidKey("1NUM"))
    assert describe_error(UnsupportedEncoding("UTF-32 LE")) == "unsupported text encoding detected"
