"""Record emitter: turn one source's records into NDJSON lines."""

import json
from typing import BinaryIO, Iterable, Iterator, Sequence, Tuple

from .models import OutputMode


def _dumps(value) -> str:
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"))


class KeyedRow:
    """Header fields zipped positionally with one record's values.

    The shorter of the two bounds the number of pairs. Duplicate header
    names are kept in order, so this is serialized directly rather than
    through a ``dict``.
    """

    def __init__(self, headers: Sequence[str], values: Sequence[str]):
        self.headers = headers
        self.values = values

    def pairs(self) -> Iterator[Tuple[str, str]]:
        return zip(self.headers, self.values)

    def to_json(self) -> str:
        """Serialize as a compact JSON object, e.g. ``{"a":"1","a":"2"}``."""
        body = ",".join(
            f"{_dumps(key)}:{_dumps(value)}" for key, value in self.pairs()
        )
        return "{" + body + "}"

    def __repr__(self) -> str:
        return f"KeyedRow(headers={self.headers!r}, values={self.values!r})"


def serialize_array(record: Sequence[str]) -> str:
    """Serialize a record as a compact JSON array of strings."""
    return _dumps(list(record))


def serialize_keyed(headers: Sequence[str], record: Sequence[str]) -> str:
    """Serialize a record as a JSON object keyed by ``headers``."""
    return KeyedRow(headers, record).to_json()


def emit(
    records: Iterable[Sequence[str]],
    mode: OutputMode,
    emit_header: bool,
    sink: BinaryIO,
) -> int:
    """Write one source's records to ``sink`` as NDJSON.

    The first record is the header. In object mode it keys every later
    record; when ``emit_header`` is set it is also written as a line of its
    own (serialized against itself in object mode, ``{"a":"a",...}``).

    Args:
        records: Records of a single source, in order
        mode: Array/object selection
        emit_header: Whether this source prints its header line
        sink: Binary output stream shared by all sources

    Returns:
        Number of lines written

    Errors raised by ``records`` or by ``sink.write`` propagate as-is;
    lines already written are left in place.
    """
    rows = iter(records)
    headers = next(rows, None)
    if headers is None:
        return 0

    if mode.as_array:
        serialize = serialize_array
    else:
        def serialize(record):
            return serialize_keyed(headers, record)

    written = 0
    if emit_header:
        sink.write((serialize(headers) + "\n").encode("utf-8"))
        written += 1

    for record in rows:
        sink.write((serialize(record) + "\n").encode("utf-8"))
        written += 1

    return written


__all__ = ["KeyedRow", "emit", "serialize_array", "serialize_keyed"]
