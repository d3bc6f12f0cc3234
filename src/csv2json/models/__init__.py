"""Pydantic models for csv2json run configuration."""

from .mode import HeaderPolicy, OutputMode
from .run import STDIN_PATH, RunConfig

__all__ = [
    "HeaderPolicy",
    "OutputMode",
    "RunConfig",
    "STDIN_PATH",
]
