"""Exceptions raised while converting delimited text to NDJSON."""


class Csv2JsonError(Exception):
    """Base class for conversion failures reported to the user."""

    pass


class InvalidDelimiter(Csv2JsonError):
    """Delimiter override is not a single byte (or the ``\\t`` literal)."""

    def __init__(self, delimiter: str):
        self.delimiter = delimiter
        super().__init__(f"invalid delimiter: `{delimiter}`")


class SourceError(Csv2JsonError):
    """Input source could not be opened."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


class TokenizationError(Csv2JsonError):
    """Delimited content could not be split into records."""

    def __init__(self, source: str, line: int, reason: str):
        self.source = source
        self.line = line
        self.reason = reason
        super().__init__(f"{source}: line {line}: {reason}")


__all__ = [
    "Csv2JsonError",
    "InvalidDelimiter",
    "SourceError",
    "TokenizationError",
]
