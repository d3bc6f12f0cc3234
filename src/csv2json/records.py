"""Input sources and record tokenization.

A source is either a file or standard input; both are handed to the
tokenizer as a binary stream. Records are plain lists of strings and are
not retained after they are yielded.
"""

import csv
import io
import sys
from contextlib import contextmanager
from pathlib import Path
from typing import BinaryIO, Iterator, List

from .errors import SourceError, TokenizationError
from .models import STDIN_PATH

Record = List[str]

STDIN_NAME = "<stdin>"


def source_name(path: str | Path) -> str:
    """Human-readable name for ``path`` used in error messages."""
    return STDIN_NAME if str(path) == STDIN_PATH else str(path)


@contextmanager
def open_source(path: str | Path) -> Iterator[BinaryIO]:
    """Open ``path`` for binary reading.

    ``-`` yields standard input, which is left open on exit.

    Raises:
        SourceError: If the file cannot be opened
    """
    if str(path) == STDIN_PATH:
        yield sys.stdin.buffer
        return

    try:
        handle = open(path, "rb")
    except OSError as e:
        raise SourceError(str(path), e.strerror or str(e)) from e

    with handle:
        yield handle


def read_records(
    stream: BinaryIO, delimiter: str, source: str = STDIN_NAME
) -> Iterator[Record]:
    """Tokenize a binary stream of delimited UTF-8 text into records.

    Args:
        stream: Binary input stream (file or stdin buffer)
        delimiter: Single-character field delimiter
        source: Name used in error messages

    Yields:
        One list of string fields per logical row. Blank lines are skipped.

    Raises:
        TokenizationError: On malformed quoting or undecodable bytes. Records
            yielded before the failure are not affected.
    """
    # utf-8-sig drops a leading byte order mark. Undecodable bytes are kept as
    # surrogates and rejected per record, so earlier rows still come through.
    text = io.TextIOWrapper(
        stream, encoding="utf-8-sig", errors="surrogateescape", newline=""
    )
    reader = csv.reader(text, delimiter=delimiter, strict=True)
    try:
        while True:
            try:
                record = next(reader)
            except StopIteration:
                return
            except csv.Error as e:
                raise TokenizationError(source, reader.line_num, str(e)) from e
            if not record:
                continue
            try:
                "".join(record).encode("utf-8")
            except UnicodeEncodeError as e:
                raise TokenizationError(
                    source, reader.line_num, "invalid UTF-8"
                ) from e
            yield record
    finally:
        # Leave the underlying stream open; stdin must survive this call.
        text.detach()


__all__ = [
    "Record",
    "STDIN_NAME",
    "open_source",
    "read_records",
    "source_name",
]
