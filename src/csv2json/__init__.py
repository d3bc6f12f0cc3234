"""csv2json: convert CSV/TSV to newline-delimited JSON."""

from .converter import convert
from .delimiter import parse_delimiter, resolve_delimiter
from .emitter import KeyedRow, emit
from .errors import Csv2JsonError, InvalidDelimiter, SourceError, TokenizationError
from .models import HeaderPolicy, OutputMode, RunConfig

__all__ = [
    "__version__",
    "Csv2JsonError",
    "HeaderPolicy",
    "InvalidDelimiter",
    "KeyedRow",
    "OutputMode",
    "RunConfig",
    "SourceError",
    "TokenizationError",
    "convert",
    "emit",
    "parse_delimiter",
    "resolve_delimiter",
]

__version__ = "0.1.0"
