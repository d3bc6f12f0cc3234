"""Resolved configuration for one csv2json invocation."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .mode import OutputMode

STDIN_PATH = "-"


class RunConfig(BaseModel):
    """Everything the converter needs, parsed before any I/O happens."""

    model_config = ConfigDict(frozen=True)

    paths: List[str] = Field(default_factory=lambda: [STDIN_PATH])
    delimiter: str | None = None  # Parsed override; None means per-path detection
    mode: OutputMode = Field(default_factory=OutputMode)

    @field_validator("paths")
    @classmethod
    def default_to_stdin(cls, v: List[str]) -> List[str]:
        """An empty path list means a single read from standard input."""

        return list(v) or [STDIN_PATH]

    @field_validator("delimiter")
    @classmethod
    def single_byte(cls, v: str | None) -> str | None:
        """Ensure an already-parsed delimiter is exactly one byte."""

        if v is not None and len(v.encode("utf-8")) != 1:
            raise ValueError("delimiter must be a single byte")
        return v


__all__ = ["RunConfig", "STDIN_PATH"]
