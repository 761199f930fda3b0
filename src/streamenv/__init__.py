"""Streaming dotenv loader."""

from streamenv.config import LoaderConfig
from streamenv.errors import (
    AllocFailure,
    BufferReleased,
    DotenvError,
    InvalidKey,
    PublishError,
    UnsupportedEncoding,
    describe_error,
)
from streamenv.loader import LoadReport, load_from_path
from streamenv.parser import Entry, iter_entries

__all__ = [
    "AllocFailure",
    "BufferReleased",
    "DotenvError",
    "Entry",
    "InvalidKey",
    "LoadReport",
    "LoaderConfig",
    "PublishError",
    "UnsupportedEncoding",
    "describe_error",
    "iter_entries",
    "load_from_path",
]
