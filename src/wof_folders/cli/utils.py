from __future__ import annotations

import time
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from rich.console import Console

from wof_folders.config import WFConfig, get_config, use_config
from wof_folders.core.context import BuildContext
from wof_folders.core.pipeline import FolderPlan, Pipeline
from wof_folders.core.progress import BuildState
from wof_folders.loader import discover_sources
from wof_folders.loader.sources import DEFAULT_ADMIN_PREFIX
from wof_folders.logging import get_logger, set_debug

console = Console()
log = get_logger("cli")


def load_plans(
    paths: Sequence[Path],
    *,
    countries: Optional[List[str]] = None,
    workers: Optional[int] = None,
    config_path: Optional[Path] = None,
    verbose: bool = False,
) -> Tuple[List[FolderPlan], BuildState, WFConfig]:
    """
    Full discover -> scan -> build -> walk runner.

    Command-line values win over config/wof_folders.yml.
    """
    cfg = use_config(config_path) if config_path else get_config()
    if verbose:
        set_debug(True)

    t0 = time.perf_counter()

    sources = discover_sources(
        paths,
        admin_prefix=cfg.sources.get("admin_prefix") or DEFAULT_ADMIN_PREFIX,
        countries=countries or cfg.sources.get("countries") or [],
    )

    ctx = BuildContext.from_config(cfg, log, sources=sources)
    plans, state = Pipeline(ctx).run(
        workers=workers or int(cfg.sources.get("workers", 1) or 1)
    )

    elapsed = time.perf_counter() - t0

    if verbose:
        console.log(f"Built {len(plans)} source(s) in {elapsed:.2f}s")

    return plans, state, cfg
