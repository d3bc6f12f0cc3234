"""Output mode: object vs. array rows, and when header lines are printed."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class HeaderPolicy(str, Enum):
    """Whether (and for which sources) the header row is emitted as a line."""

    FIRST_FILE_ONLY = "first-file-only"
    NO = "no"
    ALWAYS = "always"

    @classmethod
    def parse(cls, token: str) -> "HeaderPolicy":
        """Parse a ``--header`` token, case-insensitively.

        ``ff`` is accepted as shorthand for ``first-file-only``.
        """
        normalized = token.lower()
        if normalized == "ff":
            return cls.FIRST_FILE_ONLY
        for policy in cls:
            if policy.value == normalized:
                return policy
        raise ValueError(f"invalid header mode: {token!r}")

    def emits_for(self, index: int) -> bool:
        """Return True if the source at position ``index`` prints its header."""
        if self is HeaderPolicy.ALWAYS:
            return True
        if self is HeaderPolicy.FIRST_FILE_ONLY:
            return index == 0
        return False


class OutputMode(BaseModel):
    """Per-run output configuration, read-only once built."""

    model_config = ConfigDict(frozen=True)

    as_array: bool = False
    header_policy: HeaderPolicy = HeaderPolicy.NO

    @classmethod
    def from_flags(
        cls, as_array: bool, header_policy: HeaderPolicy | None = None
    ) -> "OutputMode":
        """Build a mode from CLI flags.

        Without an explicit policy, arrays get a header on every source
        (positional rows are unreadable without one) and objects get none.
        """
        if header_policy is None:
            header_policy = (
                HeaderPolicy.ALWAYS if as_array else HeaderPolicy.NO
            )
        return cls(as_array=as_array, header_policy=header_policy)


__all__ = ["HeaderPolicy", "OutputMode"]
