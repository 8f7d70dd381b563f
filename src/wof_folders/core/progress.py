"""
Build progress.

``BuildState`` is the explicit replacement for a global progress file: it is
passed into ``Pipeline.run`` and a new, advanced state is returned. Saving it
(between runs, to resume) is up to the caller; ``to_dict``/``from_dict`` give
a JSON-safe form.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields
from typing import Any, Dict, Mapping, Tuple


@dataclass
class SourceReport:
    """Counters for one data source build."""

    files: int = 0
    unreadable: int = 0
    records: int = 0
    dropped: int = 0
    duplicates: int = 0
    orphans: int = 0
    excluded: int = 0
    roots: int = 0
    folders: int = 0
    leaves: int = 0
    cycles_skipped: int = 0

    def as_dict(self) -> Dict[str, int]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SourceReport":
        known = {f.name for f in fields(cls)}
        return cls(**{k: int(v) for k, v in data.items() if k in known})


@dataclass(frozen=True)
class BuildState:
    completed: Tuple[str, ...] = ()
    reports: Dict[str, SourceReport] = field(default_factory=dict)

    def is_complete(self, source_name: str) -> bool:
        return source_name in self.completed

    def advance(self, source_name: str, report: SourceReport) -> "BuildState":
        """Return a new state with ``source_name`` marked complete."""
        completed = self.completed
        if source_name not in completed:
            completed = completed + (source_name,)
        reports = dict(self.reports)
        reports[source_name] = report
        return BuildState(completed=completed, reports=reports)

    def totals(self) -> SourceReport:
        total = SourceReport()
        for report in self.reports.values():
            for f in fields(SourceReport):
                setattr(total, f.name, getattr(total, f.name) + getattr(report, f.name))
        return total

    def to_dict(self) -> Dict[str, Any]:
        return {
            "completed": list(self.completed),
            "reports": {name: r.as_dict() for name, r in self.reports.items()},
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "BuildState":
        return cls(
            completed=tuple(data.get("completed", ()) or ()),
            reports={
                name: SourceReport.from_dict(r)
                for name, r in (data.get("reports", {}) or {}).items()
            },
        )
