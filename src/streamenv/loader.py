"""Load a dotenv file into the process environment."""

from __future__ import annotations

from contextlib import closing
from dataclasses import dataclass, field
import os
from pathlib import Path
from typing import Callable, MutableMapping, Union

from streamenv.config import LoaderConfig
from streamenv.errors import DotenvError, PublishError
from streamenv.logger import get_logger
from streamenv.parser import Entry, iter_entries
from streamenv.validation import validate_key

logger = get_logger(__name__)

Publisher = Callable[[str, str], None]
PublishTarget = Union[Publisher, MutableMapping[str, str]]


@dataclass
class LoadReport:
    path: Path
    published: list[str] = field(default_factory=list)
    bytes_read: int = 0


def load_from_path(
    path: str | os.PathLike[str] = ".env",
    *,
    config: LoaderConfig | None = None,
    publish: PublishTarget | None = None,
) -> LoadReport:
    """Parse the dotenv file at ``path`` and publish each entry as it completes.

    Entries go to ``os.environ`` unless ``publish`` is given, either as a
    ``(key, value)`` callable or a mutable mapping. Later entries overwrite
    earlier ones with the same key.

    Raises ``OSError`` when the file cannot be opened and a
    :class:`~streamenv.errors.DotenvError` subclass for allocation, encoding,
    key validation or publish failures. Entries published before a failure
    stay published.

    Callers must serialize loads that target the shared process environment.
    """
    config = config or LoaderConfig()
    setter = _resolve_publisher(publish)
    report = LoadReport(path=Path(path))
    logger.debug("dotenv_load_started", path=str(report.path), **config.to_dict())

    try:
        with report.path.open("rb") as handle, closing(iter_entries(handle, config)) as entries:
            for entry in entries:
                if _publish_entry(entry, setter, strict=config.strict_keys):
                    report.published.append(entry.key)
            report.bytes_read = handle.tell()
    except (OSError, DotenvError) as exc:
        logger.debug("dotenv_load_failed", path=str(report.path), error=str(exc))
        raise

    logger.debug(
        "dotenv_load_finished",
        path=str(report.path),
        published=len(report.published),
        bytes_read=report.bytes_read,
    )
    return report


def _publish_entry(entry: Entry, setter: Publisher, *, strict: bool) -> bool:
    validate_key(entry.key, strict=strict)
    if not entry.key:
        return False
    try:
        setter(entry.key, entry.value)
    except (OSError, ValueError) as exc:
        raise PublishError(entry.key, str(exc)) from exc
    logger.debug("entry_published", key=entry.key, line=entry.line)
    return True


def _resolve_publisher(target: PublishTarget | None) -> Publisher:
    if target is None:
        return os.environ.__setitem__
    if callable(target):
        return target
    return target.__setitem__
