"""Text file helpers and atomic file replacement."""

from __future__ import annotations

import contextlib
import os
import tempfile
from collections.abc import Iterable, Iterator
from pathlib import Path

from pdfmeta.logging import get_logger

logger = get_logger(__name__)


def read_lines(path: Path, encoding: str = "utf-8") -> list[str]:
    """Read a text file into lines without terminators.

    Empty lines are dropped; whitespace-only lines are kept so the outline codec can
    report them. A missing file reads as no lines.
    """

    if not path.exists():
        logger.warning("File %s does not exist, reading it as empty", path)
        return []
    # Only \n, \r\n and \r end a line; other Unicode breaks belong to the text.
    with path.open(encoding=encoding, newline="") as handle:
        text = handle.read()
    lines = text.replace("\r\n", "\n").replace("\r", "\n").split("\n")
    return [line for line in lines if line]


def write_lines(path: Path, lines: Iterable[str], encoding: str = "utf-8", temp_dir: Path | None = None) -> None:
    """Write one line per entry, replacing `path` atomically."""

    content = "".join(f"{line}\n" for line in lines)
    with atomic_path(path, temp_dir=temp_dir) as tmp:
        tmp.write_text(content, encoding=encoding)


@contextlib.contextmanager
def atomic_path(target: Path, temp_dir: Path | None = None) -> Iterator[Path]:
    """Yield a temporary path that replaces `target` once the block succeeds.

    The temporary file lives next to the target unless `temp_dir` is given. If the
    block raises, the temporary file is removed and `target` is left untouched.
    """

    target.parent.mkdir(parents=True, exist_ok=True)
    directory = temp_dir if temp_dir is not None else target.parent
    directory.mkdir(parents=True, exist_ok=True)
    fd, name = tempfile.mkstemp(prefix=f".{target.name}.", suffix=".tmp", dir=directory)
    os.close(fd)
    tmp = Path(name)
    try:
        yield tmp
        os.replace(tmp, target)
    finally:
        if tmp.exists():
            tmp.unlink()
