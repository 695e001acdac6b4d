"""Length-budget allocation for name parts under a hard ceiling."""

from __future__ import annotations

from typing import Iterable, NamedTuple, Optional, Sequence

from resource_naming.models.templates import PartRole


class NamePart(NamedTuple):
    role: PartRole
    value: str


# Truncated when the plain concatenation is over budget.
_SHRINKABLE = (PartRole.PREFIX, PartRole.STAGE, PartRole.SERVICE_HASH)

# Order in which any overflow left after shrinking is shaved off.
_CLAMP_ORDER = (
    PartRole.PREFIX,
    PartRole.STAGE,
    PartRole.SERVICE_HASH,
    PartRole.REGION,
    PartRole.LITERAL_SUFFIX,
    PartRole.TIMESTAMP,
)


def joined_length(values: Iterable[str], delimiter: str = "") -> int:
    """Length of the non-empty values joined with ``delimiter``."""
    present = [v for v in values if v]
    if not present:
        return 0
    return sum(len(v) for v in present) + len(delimiter) * (len(present) - 1)


def allocate(
    parts: Sequence[NamePart],
    max_length: int,
    delimiter: str = "",
    service_source: Optional[str] = None,
) -> list[str]:
    """Fit ``parts`` into ``max_length`` and return the adjusted values in order.

    Over budget: prefix, stage and service hash are each cut to
    ``floor(overflow / 3)`` characters; region, literal suffix and timestamp
    are left alone. Under budget: the service hash is replaced by the first
    ``remaining + len(hash) - 1`` characters of ``service_source`` (skipped
    when the source is missing or empty, so the digest stays). Whatever still
    does not fit is shaved from the end of parts in ``_CLAMP_ORDER``, so the
    result never exceeds the ceiling.
    Delimiters between non-empty parts count toward the budget.
    """
    limit = max(0, max_length)
    roles = [p.role for p in parts]
    values = [p.value or "" for p in parts]

    remaining = limit - joined_length(values, delimiter)

    if remaining < 0:
        cut = abs(remaining) // 3
        for i, role in enumerate(roles):
            if role in _SHRINKABLE:
                values[i] = values[i][:cut]
    elif remaining > 0 and service_source:
        for i, role in enumerate(roles):
            if role is PartRole.SERVICE_HASH:
                # The -1 matches names already deployed; do not "fix" it.
                values[i] = service_source[: remaining + len(values[i]) - 1]

    return _clamp(values, roles, limit, delimiter)


def _clamp(values: list[str], roles: list[PartRole], limit: int, delimiter: str) -> list[str]:
    for role in _CLAMP_ORDER:
        for i, r in enumerate(roles):
            overflow = joined_length(values, delimiter) - limit
            if overflow <= 0:
                return values
            if r is role and values[i]:
                values[i] = values[i][: max(0, len(values[i]) - overflow)]
    return values
