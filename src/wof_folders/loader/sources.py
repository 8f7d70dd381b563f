"""
Data source discovery.

A data source is one batch of WOF records that is built into one hierarchy:
either a plain directory (or file) of WOF documents, or one admin repository
checkout such as ``whosonfirst-data-admin-bb``.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Union

from wof_folders.logging import get_logger

log = get_logger(__name__)

DEFAULT_ADMIN_PREFIX = "whosonfirst-data-admin-"


@dataclass(frozen=True)
class DataSource:
    name: str
    path: Path
    country: Optional[str] = None


def admin_country_code(dirname: str, prefix: str = DEFAULT_ADMIN_PREFIX) -> Optional[str]:
    """
    Return the upper-cased ISO-2 code of an admin repository directory name.

        whosonfirst-data-admin-bb         -> "BB"
        whosonfirst-data-admin-us-latest  -> "US"
        some-other-dir                    -> None
    """
    if not dirname.startswith(prefix):
        return None
    code = dirname[len(prefix):].split("-", 1)[0]
    return code.upper() or None


def discover_sources(
    paths: Iterable[Union[str, Path]],
    admin_prefix: str = DEFAULT_ADMIN_PREFIX,
    countries: Optional[Iterable[str]] = None,
) -> List[DataSource]:
    """
    Resolve user-supplied paths into data sources.

    - A directory holding admin repository directories yields one source per
      repository, restricted to ``countries`` (ISO-2 codes) when given.
    - A path that is itself an admin repository is filtered the same way.
    - Any other directory or file is a single source.

    Raises:
        FileNotFoundError: if a path does not exist.
    """
    wanted = {c.strip().upper() for c in countries or [] if c and c.strip()}
    sources: List[DataSource] = []

    def _admit(path: Path, code: str) -> None:
        if wanted and code not in wanted:
            log.debug(f"Skipping {path.name}: country {code} not requested")
            return
        sources.append(DataSource(name=path.name, path=path, country=code))

    for raw in paths:
        path = Path(raw)
        if not path.exists():
            raise FileNotFoundError(f"WOF data path not found: {path}")

        code = admin_country_code(path.name, admin_prefix)
        if path.is_dir() and code:
            _admit(path, code)
            continue

        repos = []
        if path.is_dir():
            repos = sorted(
                p for p in path.iterdir()
                if p.is_dir() and admin_country_code(p.name, admin_prefix)
            )

        if not repos:
            sources.append(DataSource(name=path.stem or path.name, path=path))
            continue

        for repo in repos:
            _admit(repo, admin_country_code(repo.name, admin_prefix))

    log.debug(f"Discovered {len(sources)} data source(s)")
    return sources
