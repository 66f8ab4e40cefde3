# src/inkwell/db/ids.py
"""Resource identifier generation and syntax checks."""

import re
import uuid

RESOURCE_ID_LENGTH = 32
_RESOURCE_ID_RE = re.compile(r"^[0-9a-f]{32}$")


def new_id() -> str:
    """Return a fresh resource identifier (UUID4 as 32 lowercase hex digits)."""
    return uuid.uuid4().hex


def is_valid_id(value: object) -> bool:
    """Return True if ``value`` is a syntactically valid resource identifier."""
    return isinstance(value, str) and _RESOURCE_ID_RE.fullmatch(value) is not None
