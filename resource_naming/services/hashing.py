"""Deterministic digest of the service name used as a disambiguating token."""

import hashlib
from typing import Optional


def content_hash(service_name: str, width: Optional[int] = None) -> str:
    """Return the md5 hex digest of ``service_name``, optionally cut to ``width``."""
    digest = hashlib.md5((service_name or "").encode("utf-8"), usedforsecurity=False).hexdigest()
    return digest[:width] if width else digest
