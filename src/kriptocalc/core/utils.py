from __future__ import annotations

import re
from typing import Iterable

from .errors import InvalidTextError


_NON_AZ_RE = re.compile(r"[^A-Za-z]+")


def normalize_az(s: str) -> str:
    """Drop everything outside A-Z/a-z, then uppercase."""
    if s is None:
        return ""
    # strip before upper(): upper() maps some non-ASCII letters onto A-Z (ß -> SS)
    s = f"{s}"
    return _NON_AZ_RE.sub("", s).upper()


def require_text(s: str, what: str = "Text") -> str:
    """Normalize and reject input that has no letters left."""
    cleaned = normalize_az(s)
    if not cleaned:
        raise InvalidTextError(f"{what} must contain at least one alphabetic character.")
    return cleaned


def chunked(seq: Iterable, size: int):
    buf = []
    for x in seq:
        buf.append(x)
        if len(buf) == size:
            yield buf
            buf = []
    if buf:
        yield buf
