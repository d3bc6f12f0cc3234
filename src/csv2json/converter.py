"""Multi-source driver: run the emitter over every input in order."""

from typing import BinaryIO

from .delimiter import detect_delimiter
from .emitter import emit
from .models import RunConfig
from .records import open_source, read_records, source_name


def convert_source(
    path: str, config: RunConfig, emit_header: bool, sink: BinaryIO
) -> int:
    """Convert a single source, returning the number of lines written."""
    delimiter = detect_delimiter(path, config.delimiter)
    with open_source(path) as stream:
        records = read_records(stream, delimiter, source=source_name(path))
        return emit(records, config.mode, emit_header, sink)


def convert(config: RunConfig, sink: BinaryIO) -> int:
    """Convert every source in ``config.paths`` to NDJSON on ``sink``.

    Sources are drained one at a time. The first failure stops the run and
    later sources are never opened.

    Returns:
        Total number of lines written
    """
    policy = config.mode.header_policy
    total = 0
    for index, path in enumerate(config.paths):
        total += convert_source(path, config, policy.emits_for(index), sink)
        sink.flush()
    return total


__all__ = ["convert", "convert_source"]
