from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

from .errors import FileOpenError, LineDecodeError, LineReadError

logger = logging.getLogger(__name__)


def read_lines(path: str | Path, encoding: str = "utf-8") -> Iterator[tuple[int, str]]:
    """Yield ``(line_no, text)`` for every line of `path`, numbered from 1.

    Lines are decoded one at a time so a bad byte sequence is reported
    against the line it sits on. The file is closed when the generator is
    exhausted, closed, or aborted by an error.
    """

    path = Path(path)
    try:
        fh = path.open("rb")
    except OSError as exc:
        raise FileOpenError(path, exc.strerror or str(exc)) from exc

    logger.debug("Opened %s", path)
    with fh:
        line_no = 0
        while True:
            try:
                raw = fh.readline()
            except OSError as exc:
                raise LineReadError(path, exc.strerror or str(exc), line_no=line_no + 1) from exc
            if not raw:
                break
            line_no += 1
            try:
                text = raw.decode(encoding)
            except UnicodeDecodeError as exc:
                raise LineDecodeError(path, str(exc), line_no=line_no) from exc
            yield line_no, text.rstrip("\r\n")

    logger.debug("Read %d lines from %s", line_no, path)
