"""Parse command-line value tokens and format results for output."""

from __future__ import annotations

import json
import re
from typing import Any, Iterable

# Separates integers packed into one token: "1,0 2"
_SPLIT_RE = re.compile(r'[,\s]+')

OUTPUT_FORMATS = ("text", "json")


class ParseError(Exception):
    """Raised when a token or output format can't be handled."""


def parse_int_tokens(tokens: Iterable[str]) -> list[int]:
    """Parse integers from *tokens*, splitting each on commas/whitespace."""
    values: list[int] = []
    for token in tokens:
        for part in _SPLIT_RE.split(token.strip()):
            if not part:
                continue
            try:
                values.append(int(part))
            except ValueError:
                raise ParseError(f"Not an integer: {part!r}") from None
    return values


def parse_value_tokens(tokens: Iterable[str]) -> list[Any]:
    """Decode each token as a JSON scalar, falling back to the raw string."""
    values: list[Any] = []
    for token in tokens:
        try:
            value = json.loads(token)
        except json.JSONDecodeError:
            value = token
        if isinstance(value, (list, dict)):
            raise ParseError(f"Expected a scalar value, got {token!r}")
        values.append(value)
    return values


def _text_value(value: Any) -> str:
    if isinstance(value, str):
        return value
    return json.dumps(value)


def format_values(values: list[Any], fmt: str = "text") -> str:
    """Render *values* as space-separated text or a JSON array."""
    if fmt == "text":
        return " ".join(_text_value(v) for v in values)
    if fmt == "json":
        try:
            return json.dumps(values, allow_nan=False)
        except ValueError:
            raise ParseError("NaN and Infinity have no JSON form; use --format text") from None
    raise ParseError(f"Unknown output format '{fmt}'. Built-in: {', '.join(OUTPUT_FORMATS)}.")
