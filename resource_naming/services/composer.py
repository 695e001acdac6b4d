"""Assemble adjusted name parts into the final resource name."""

from __future__ import annotations

import re
from typing import Iterable

from resource_naming.models.templates import ResourceTypeTemplate

_WHITESPACE = re.compile(r"\s")


def filter_chars(value: str, template: ResourceTypeTemplate) -> str:
    """Drop every character the template's resource kind forbids."""
    return "".join(c for c in (value or "") if template.allows(c))


def slug(value: str, template: ResourceTypeTemplate) -> str:
    """Replace each whitespace character with the template delimiter, then filter."""
    return filter_chars(_WHITESPACE.sub(template.delimiter, value or ""), template)


def compose(parts: Iterable[str], template: ResourceTypeTemplate) -> str:
    delimiter = template.delimiter
    if delimiter:
        # a truncated part can end on the delimiter; avoid "--" in the result
        parts = [p.strip(delimiter) for p in parts]
    joined = delimiter.join(p for p in parts if p)
    return filter_chars(joined, template).lower()
