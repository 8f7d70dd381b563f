"""
json_exporter.py
Structured JSON exporter for folder plans.

This exporter:
- Converts dataclasses and objects to dictionaries (NOT strings)
- Lists folder and leaf paths in walk order
- Lists every file a writer must create (placeholders, seeds, root files)
- Is deterministic: the same plans and timestamp always serialize to the
  same text
"""

from __future__ import annotations

import json
from dataclasses import asdict, is_dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Iterable, Optional

from wof_folders.core.pipeline import FolderPlan
from wof_folders.core.progress import BuildState
from wof_folders.logging import get_logger

from .seed import SeedLayout

log = get_logger("json_exporter")


def _to_json_compatible(obj: Any) -> Any:
    """
    Recursively convert objects into JSON-compatible structures.

    Rules:
    - Primitives pass through
    - dataclasses → dict (recursively)
    - dict → dict (recursively)
    - list / tuple / set → list (recursively)
    - Path → str
    - Unknown objects → __dict__ if present, else str(obj)
    """
    if obj is None or isinstance(obj, (bool, int, float, str)):
        return obj

    if is_dataclass(obj) and not isinstance(obj, type):
        return {k: _to_json_compatible(v) for k, v in asdict(obj).items()}

    if isinstance(obj, dict):
        return {str(k): _to_json_compatible(v) for k, v in obj.items()}

    if isinstance(obj, (list, tuple)):
        return [_to_json_compatible(v) for v in obj]

    if isinstance(obj, (set, frozenset)):
        return [_to_json_compatible(v) for v in sorted(obj, key=str)]

    if isinstance(obj, Path):
        return str(obj)

    if hasattr(obj, "__dict__"):
        return {k: _to_json_compatible(v) for k, v in obj.__dict__.items()}

    return str(obj)


def export_timestamp() -> str:
    """UTC now, ISO-8601 with milliseconds and a ``Z`` suffix."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def plan_to_dict(
    plan: FolderPlan,
    seed: Optional[SeedLayout] = None,
    created: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Convert one FolderPlan into a JSON-safe dict.

    ``leaves`` name the seed paths of each leaf; ``files`` carries the full
    write list with bodies, ``{created}`` stamped with ``created``.
    """
    seed = seed or SeedLayout()
    created = created or export_timestamp()
    return {
        "source": plan.source,
        "roots": list(plan.root_ids),
        "root_paths": list(plan.root_paths),
        "folders": list(plan.folders),
        "leaves": [
            {"path": path, "seed": [f"{path}/{name}" for name in seed.file_names]}
            for path in plan.leaves
        ],
        "files": seed.plan_files(plan, created),
        "counts": _to_json_compatible(plan.report),
    }


def build_plans_dict(
    plans: Iterable[FolderPlan],
    state: Optional[BuildState] = None,
    seed: Optional[SeedLayout] = None,
    created: Optional[str] = None,
) -> Dict[str, Any]:
    seed = seed or SeedLayout()
    created = created or export_timestamp()
    data: Dict[str, Any] = {
        "created": created,
        "seed_files": seed.file_names,
        "sources": [plan_to_dict(plan, seed, created) for plan in plans],
    }
    if state is not None:
        data["totals"] = state.totals().as_dict()
        data["state"] = _to_json_compatible(state.to_dict())
    return data


def serialize_plans_to_json_string(
    plans: Iterable[FolderPlan],
    state: Optional[BuildState] = None,
    seed: Optional[SeedLayout] = None,
    created: Optional[str] = None,
    indent: Optional[int] = 2,
) -> str:
    data = build_plans_dict(plans, state, seed, created)
    if indent is None:
        return json.dumps(data, separators=(",", ":"), ensure_ascii=False)
    return json.dumps(data, indent=indent, ensure_ascii=False)


def export_plans_json(
    plans: Iterable[FolderPlan],
    output_path: str | Path,
    state: Optional[BuildState] = None,
    seed: Optional[SeedLayout] = None,
    created: Optional[str] = None,
    indent: Optional[int] = 2,
) -> None:
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    plans = list(plans)
    log.info(
        "Exporting folder plan JSON to: %s (sources=%d, folders=%d, leaves=%d)",
        output_path,
        len(plans),
        sum(len(p.folders) for p in plans),
        sum(len(p.leaves) for p in plans),
    )

    json_str = serialize_plans_to_json_string(plans, state, seed, created, indent=indent)

    with output_path.open("w", encoding="utf-8") as f:
        f.write(json_str)

    size_bytes = output_path.stat().st_size
    log.info("JSON export complete. size=%d bytes", size_bytes)
