"""Delimiter resolution: explicit override, else file extension, else comma."""

import csv
from pathlib import Path
from typing import Optional

from .errors import InvalidDelimiter

COMMA = ","
TAB = "\t"

# Two characters: backslash and "t", as typed on a shell command line.
TAB_LITERAL = "\\t"

# Quote character and line terminators cannot separate fields.
_RESERVED = {'"', "\n", "\r"}

_EXTENSION_DELIMITERS = {
    ".csv": COMMA,
    ".tsv": TAB,
}


def parse_delimiter(text: str) -> str:
    """Parse a user-supplied delimiter override.

    Args:
        text: Raw ``--delimiter`` value

    Returns:
        One-character delimiter string whose UTF-8 encoding is one byte

    Raises:
        InvalidDelimiter: If ``text`` is empty, encodes to more than one byte,
            or is the quote character or a line terminator
    """
    if text == TAB_LITERAL:
        return TAB
    if len(text.encode("utf-8")) != 1 or text in _RESERVED:
        raise InvalidDelimiter(text)
    try:
        csv.reader([], delimiter=text, strict=True)
    except (TypeError, ValueError) as e:
        raise InvalidDelimiter(text) from e
    return text


def detect_delimiter(path: str | Path, override: Optional[str] = None) -> str:
    """Pick the delimiter for ``path``.

    The extension check is a heuristic; file contents are never sniffed.
    Standard input (``-``) has no extension and therefore gets a comma.
    """
    if override is not None:
        return override
    suffix = Path(path).suffix.lower()
    return _EXTENSION_DELIMITERS.get(suffix, COMMA)


def resolve_delimiter(
    path: str | Path, override_text: Optional[str] = None
) -> str:
    """Parse ``override_text`` (if given) and resolve the delimiter for ``path``."""
    override = parse_delimiter(override_text) if override_text is not None else None
    return detect_delimiter(path, override)


__all__ = [
    "COMMA",
    "TAB",
    "TAB_LITERAL",
    "detect_delimiter",
    "parse_delimiter",
    "resolve_delimiter",
]
