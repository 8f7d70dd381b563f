# src/wof_folders/hierarchy/paths.py

"""
Folder path segments for place names.

Segments must be safe in filesystem paths and URL paths alike, and stable
byte-for-byte across runs: the same name always yields the same segment.
"""

from __future__ import annotations

import re
import unicodedata
from typing import Any

FALLBACK_SEGMENT = "unnamed"

_ILLEGAL_CHARS = re.compile(r"[/\\:*?\"<>|'#%]")
_WHITESPACE = re.compile(r"\s+")
_UNDERSCORES = re.compile(r"_+")


def sanitize_segment(name: Any) -> str:
    """
    Convert a place name into a single path segment.

    Steps:
        1. NFKD-decompose and drop combining marks ("São" -> "Sao").
        2. Replace / \\ : * ? " < > | ' # % with "_".
        3. Turn whitespace runs into "_", so " Foo " becomes "_Foo_".
        4. Collapse "_" runs, then trim.
        5. Fall back to "unnamed" when nothing is left.

    Example:
        >>> sanitize_segment("São Paulo / Região")
        'Sao_Paulo_Regiao'
    """
    if name is None:
        return FALLBACK_SEGMENT

    text = unicodedata.normalize("NFKD", str(name))
    text = "".join(ch for ch in text if not unicodedata.combining(ch))
    text = _ILLEGAL_CHARS.sub("_", text)
    text = _WHITESPACE.sub("_", text)
    text = _UNDERSCORES.sub("_", text).strip()

    return text or FALLBACK_SEGMENT


def join_path(base: str, segment: str) -> str:
    """Slash-join a sanitized segment onto a base path ('' for a walk root)."""
    return f"{base}/{segment}" if base else segment
