"""
File Scanner

Walks a local WOF data directory and parses every .geojson/.json file in it.
Files that cannot be read or parsed are skipped; WOF checkouts routinely hold
non-WOF JSON (package manifests, metadata), so this is not an error.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterator, List, Optional, Sequence, Union

from wof_folders.logging import get_logger

log = get_logger(__name__)

DEFAULT_PATTERNS = ("*.geojson", "*.json")


@dataclass
class ScanResult:
    """
    Parsed documents of one data source.

    Attributes:
        documents: Parsed JSON values, in sorted file order.
        files: Number of matching files.
        unreadable: Number of files skipped as unreadable or malformed.
    """

    documents: List[Any] = field(default_factory=list)
    files: int = 0
    unreadable: int = 0


def iter_source_files(
    root: Union[str, Path],
    patterns: Sequence[str] = DEFAULT_PATTERNS,
) -> Iterator[Path]:
    """
    Yield matching files under ``root`` recursively, sorted and de-duplicated.

    A file passed as ``root`` is yielded as is.

    Raises:
        FileNotFoundError: if ``root`` does not exist.
    """
    root_path = Path(root)

    if not root_path.exists():
        raise FileNotFoundError(f"WOF data path not found: {root_path}")

    if root_path.is_file():
        yield root_path
        return

    found = set()
    for pattern in patterns:
        found.update(p for p in root_path.rglob(pattern) if p.is_file())

    yield from sorted(found)


def read_document(path: Union[str, Path]) -> Optional[Any]:
    """Parse one JSON file, returning None when it is unreadable or malformed."""
    try:
        with Path(path).open("r", encoding="utf-8") as f:
            return json.load(f)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        log.debug(f"Skipping unreadable file {path}: {exc}")
        return None


def load_documents(
    root: Union[str, Path],
    patterns: Sequence[str] = DEFAULT_PATTERNS,
) -> ScanResult:
    """Scan ``root`` and parse every matching file."""
    result = ScanResult()

    for path in iter_source_files(root, patterns):
        result.files += 1
        document = read_document(path)
        if document is None:
            result.unreadable += 1
            continue
        result.documents.append(document)

    log.debug(
        f"Scanned {root}: files={result.files} unreadable={result.unreadable}"
    )
    return result
