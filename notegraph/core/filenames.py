from __future__ import annotations

import re

_INVALID_CHARS_RE = re.compile(r'[\\/:*?"<>|]')


def sanitize_title(title: str) -> str:
    """Replace characters a filename cannot hold with '_'."""
    return _INVALID_CHARS_RE.sub("_", title or "")


def is_safe_title(title: str) -> bool:
    return bool(title) and bool(title.strip()) and sanitize_title(title) == title
