from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from wof_folders.core.context import BuildContext
from wof_folders.core.exceptions import (
    BuildExecutionError,
    ConfigurationError,
    DuplicateRecordError,
)
from wof_folders.core.progress import BuildState, SourceReport
from wof_folders.hierarchy import HierarchyNode, LeafEvent, build_hierarchy, walk
from wof_folders.loader import DataSource, load_documents, normalize_documents


@dataclass
class FolderPlan:
    """
    The folder tree of one data source, as the walk emitted it.

    Attributes:
        source: Data source name.
        folders: Every folder path, in walk order.
        leaves: Leaf folder paths (where seed files go), in walk order.
        root_ids: Ids of the walk roots.
        root_paths: Folder paths of the walk roots, in walk order.
        report: Counters collected while building.
    """

    source: str
    folders: List[str] = field(default_factory=list)
    leaves: List[str] = field(default_factory=list)
    root_ids: List[str] = field(default_factory=list)
    root_paths: List[str] = field(default_factory=list)
    report: SourceReport = field(default_factory=SourceReport)


class Pipeline:
    """
    Orchestrates scan -> normalize -> build -> walk for each data source.
    No hierarchy logic lives here.
    """

    def __init__(self, context: BuildContext):
        self.ctx = context
        self.log = context.logger

    def run_source(self, source: DataSource) -> FolderPlan:
        """Build the folder plan of a single data source."""
        report = SourceReport()
        hierarchy_cfg = self.ctx.hierarchy

        scan = load_documents(source.path, self.ctx.patterns)
        report.files = scan.files
        report.unreadable = scan.unreadable

        records, dropped = normalize_documents(scan.documents, hierarchy_cfg.placetypes)
        report.records = len(records)
        report.dropped = dropped

        hierarchy = build_hierarchy(records, hierarchy_cfg)
        report.duplicates = len(hierarchy.duplicate_ids)
        report.orphans = len(hierarchy.orphan_ids)
        report.excluded = len(hierarchy.excluded_ids)
        report.roots = len(hierarchy.roots)

        if hierarchy.duplicate_ids:
            self.log.warning(
                f"{source.name}: {len(hierarchy.duplicate_ids)} duplicate id(s), "
                f"last record kept"
            )

        def _skipped(node: HierarchyNode, base: str) -> None:
            report.cycles_skipped += 1
            self.log.debug(f"{source.name}: revisit of {node.id} under {base!r} skipped")

        plan = FolderPlan(
            source=source.name,
            root_ids=[root.id for root in hierarchy.roots],
            report=report,
        )
        for event in walk(hierarchy.roots, on_skip=_skipped):
            if isinstance(event, LeafEvent):
                plan.leaves.append(event.path)
            else:
                plan.folders.append(event.path)
                if "/" not in event.path:
                    plan.root_paths.append(event.path)

        report.folders = len(plan.folders)
        report.leaves = len(plan.leaves)

        self.log.info(
            f"{source.name}: records={report.records} roots={report.roots} "
            f"folders={report.folders} leaves={report.leaves} "
            f"excluded={report.excluded} orphans={report.orphans}"
        )
        return plan

    def _run_guarded(self, source: DataSource) -> FolderPlan:
        try:
            return self.run_source(source)
        except (ConfigurationError, DuplicateRecordError):
            raise
        except Exception as exc:
            self.log.exception(f"Build failed for source {source.name}")
            self.ctx.errors.append({"source": source.name, "error": str(exc)})
            raise BuildExecutionError(f"{source.name}: {exc}") from exc

    def run(
        self,
        state: Optional[BuildState] = None,
        workers: int = 1,
    ) -> Tuple[List[FolderPlan], BuildState]:
        """
        Build every source in the context that ``state`` has not completed.

        Sources are independent, so with ``workers > 1`` they are built on a
        thread pool. Plans come back in source order either way.

        Returns:
            (plans, new_state)
        """
        state = state or BuildState()
        pending = [s for s in self.ctx.sources if not state.is_complete(s.name)]

        self.log.info(
            f"Pipeline starting: {len(pending)} source(s) "
            f"({len(self.ctx.sources) - len(pending)} already complete)"
        )

        if workers > 1 and len(pending) > 1:
            with ThreadPoolExecutor(max_workers=workers) as ex:
                plans = list(ex.map(self._run_guarded, pending))
        else:
            plans = [self._run_guarded(source) for source in pending]

        for plan in plans:
            state = state.advance(plan.source, plan.report)

        self.ctx.stats.update(state.totals().as_dict())
        self.log.info("Pipeline completed successfully")

        return plans, state
