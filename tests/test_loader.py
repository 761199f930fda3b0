from __future__ import annotations

import errno
import os
from pathlib import Path

import pytest

from streamenv import (
    AllocFailure,
    InvalidKey,
    LoaderConfig,
    PublishError,
    UnsupportedEncoding,
    describe_error,
    load_from_path,
)


def test_loads_into_process_environment(write_env, restore_environ) -> None:
    path = write_env("STREAMENV_TEST_FOO=bar\nSTREAMENV_TEST_NOTE='bar baz' # note\n")
    report = load_from_path(path)
    assert os.environ["STREAMENV_TEST_FOO"] == "bar"
    assert os.environ["STREAMENV_TEST_NOTE"] == "bar baz"
    assert report.published == ["STREAMENV_TEST_FOO", "STREAMENV_TEST_NOTE"]
    assert report.bytes_read == path.stat().st_size


def test_second_load_overwrites(write_env, restore_environ) -> None:
    first = write_env("STREAMENV_TEST_KEY=first\n", name="first.env")
    second = write_env("STREAMENV_TEST_KEY=second\n", name="second.env")
    load_from_path(first)
    load_from_path(second)
    assert os.environ["STREAMENV_TEST_KEY"] == "second"


def test_publishes_into_mapping(write_env) -> None:
    target: dict[str, str] = {}
    load_from_path(write_env("A=1\nA=2\nB=3"), publish=target)
    assert target == {"A": "2", "B": "3"}


def test_publishes_through_callable(write_env) -> None:
    calls: list[tuple[str, str]] = []
    report = load_from_path(write_env("A=1\n\n# comment\nB=2\n"), publish=lambda k, v: calls.append((k, v)))
    assert calls == [("A", "1"), ("B", "2")]
    assert report.published == ["A", "B"]


def test_commented_key_is_not_published(write_env) -> None:
    target: dict[str, str] = {}
    load_from_path(write_env('#TWO="blah blah blah"\nONE=1\n'), publish=target)
    assert "TWO" not in target


def test_missing_file_raises_os_error(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError) as excinfo:
        load_from_path(tmp_path / "missing.env", publish={})
    assert excinfo.value.errno == errno.ENOENT
    assert describe_error(excinfo.value) == os.strerror(errno.ENOENT)


def test_strict_keys_stop_at_first_invalid_entry(write_env) -> None:
    target: dict[str, str] = {}
    path = write_env("GOOD=1\n1NUM=x\nLATER=2\n")
    with pytest.raises(InvalidKey) as excinfo:
        load_from_path(path, config=LoaderConfig(strict_keys=True), publish=target)
    assert excinfo.value.key == "1NUM"
    assert target == {"GOOD": "1"}


def test_strict_keys_apply_to_final_unterminated_entry(write_env) -> None:
    target: dict[str, str] = {}
    with pytest.raises(InvalidKey):
        load_from_path(write_env("GOOD=1\nBAD-KEY=2"), config=LoaderConfig(strict_keys=True), publish=target)
    assert target == {"GOOD": "1"}


def test_permissive_accepts_digit_leading_key(write_env) -> None:
    target: dict[str, str] = {}
    load_from_path(write_env("1NUM=Starts with number\n"), publish=target)
    assert target == {"1NUM": "Starts with number"}


def test_unsupported_encoding_publishes_nothing(write_env) -> None:
    target: dict[str, str] = {}
    with pytest.raises(UnsupportedEncoding):
        load_from_path(write_env(b"\xfe\xff\x00A\x00=\x001\x00\n"), publish=target)
    assert target == {}


def test_alloc_failure_propagates(write_env) -> None:
    target: dict[str, str] = {}
    path = write_env("SHORT=1\n" + "K" * 64 + "=v\n")
    with pytest.raises(AllocFailure):
        load_from_path(path, config=LoaderConfig(chunk_size=8, max_buffer_size=16), publish=target)
    assert target == {"SHORT": "1"}


def test_publish_failure_is_wrapped(write_env) -> None:
    def _refuse(key: str, value: str) -> None:
        raise OSError(errno.E2BIG, "environment full")

    with pytest.raises(PublishError) as excinfo:
        load_from_path(write_env("A=1\n"), publish=_refuse)
    assert excinfo.value.key == "A"
    assert isinstance(excinfo.value.__cause__, OSError)
