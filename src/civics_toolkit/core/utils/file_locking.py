"""
Module: core.utils.file_locking

Purpose:
    Locked writes for the data files produced by the pipeline (question
    set JSON, update partials JSON, extracted text cache). Two pipeline
    runs pointed at the same data directory wait for each other instead
    of interleaving their output.

Key Functions:
    - locked_file: Open a data file with a portalocker lock held
    - locked_write_text: Replace a file's content under an exclusive lock
    - locked_write_json: Write a JSON document under an exclusive lock

Dependencies:
    - portalocker: Cross-platform file locking

Used By:
    - core.utils.serialization.save_questions_json
    - parsing.pipeline: Text cache and updates JSON
"""

from __future__ import annotations

import json
import logging
from contextlib import contextmanager
from pathlib import Path
from typing import IO, Any, Iterator

import portalocker

logger = logging.getLogger(__name__)

# Seconds to wait for another run to release a data file
LOCK_TIMEOUT = 30.0


@contextmanager
def locked_file(
    path: Path,
    mode: str = "r",
    *,
    shared: bool = False,
    timeout: float = LOCK_TIMEOUT,
) -> Iterator[IO[str]]:
    """
    Open ``path`` with a lock held for the duration of the block.

    Parent directories are created. In "w" mode portalocker truncates the
    file only once the lock is acquired, so a waiting writer never wipes
    a file another run is still writing.

    Args:
        path: Data file.
        mode: Open mode ("r", "w", "a").
        shared: Take a shared lock (readers) instead of an exclusive one.
        timeout: Seconds to wait before giving up.

    Raises:
        portalocker.exceptions.LockException: If the lock is not acquired in time

    Example:
        >>> with locked_file(path, "r", shared=True) as f:
        ...     text = f.read()
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    flags = portalocker.LOCK_SH if shared else portalocker.LOCK_EX
    lock = portalocker.Lock(
        str(path),
        mode=mode,
        timeout=timeout,
        flags=flags | portalocker.LOCK_NB,
        encoding="utf-8",
    )
    with lock as f:
        yield f


def locked_write_text(path: Path, content: str) -> None:
    """Replace the content of ``path`` while holding an exclusive lock."""
    with locked_file(path, "w") as f:
        f.write(content)

    logger.debug(f"Wrote {len(content)} characters to {path.name}")


def locked_write_json(path: Path, data: Any) -> None:
    """
    Write ``data`` as pretty-printed JSON under an exclusive lock.

    Example:
        >>> locked_write_json(updates_path, [{"question": "...", "answers": {...}}])
    """
    locked_write_text(path, json.dumps(data, indent=2, ensure_ascii=False) + "\n")
