"""Custom click parameter types."""

import click
from click.shell_completion import CompletionItem

from ..models import HeaderPolicy

HEADER_TOKENS = ["first-file-only", "ff", "no", "always"]


class HeaderPolicyType(click.ParamType):
    """``--header`` value: first-file-only|ff|no|always, any case."""

    name = "mode"

    def convert(self, value, param, ctx):
        if isinstance(value, HeaderPolicy):
            return value
        try:
            return HeaderPolicy.parse(value)
        except ValueError:
            self.fail(
                f"{value!r} is not one of {', '.join(HEADER_TOKENS)}.",
                param,
                ctx,
            )

    def shell_complete(self, ctx, param, incomplete):
        return [
            CompletionItem(token)
            for token in HEADER_TOKENS
            if token.startswith(incomplete.lower())
        ]

    def get_metavar(self, param, ctx=None):
        return "[" + "|".join(HEADER_TOKENS) + "]"


HEADER_POLICY = HeaderPolicyType()
