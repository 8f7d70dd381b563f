"""
seed.py
Files a folder plan asks the writer to create.

Every folder gets a placeholder (``.keep``) so empty folders survive in
stores that only track files. Leaf folders get the seed documents, and
every root additionally gets the root files (``metadata.json``) whether or
not it has children.

String values equal to ``{created}`` anywhere in a body are replaced with
the export timestamp.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Tuple

from wof_folders.core.exceptions import ConfigurationError
from wof_folders.core.pipeline import FolderPlan

CREATED_TOKEN = "{created}"

DEFAULT_PLACEHOLDER = ".keep"
DEFAULT_PLACEHOLDER_BODY: Dict[str, Any] = {
    "created": CREATED_TOKEN,
    "source": "wof-folders",
}
DEFAULT_SEED_FILES: Dict[str, Any] = {
    "buyers.json": {"buyers": []},
    "properties.json": {"properties": []},
    "metadata.json": {"created": CREATED_TOKEN},
}
DEFAULT_ROOT_FILES: Tuple[str, ...] = ("metadata.json",)


def stamp(body: Any, created: str) -> Any:
    """Return a copy of ``body`` with every ``{created}`` string replaced."""
    if isinstance(body, str):
        return created if body == CREATED_TOKEN else body
    if isinstance(body, Mapping):
        return {str(k): stamp(v, created) for k, v in body.items()}
    if isinstance(body, (list, tuple)):
        return [stamp(v, created) for v in body]
    return copy.deepcopy(body)


@dataclass
class SeedLayout:
    files: Dict[str, Any] = field(default_factory=lambda: copy.deepcopy(DEFAULT_SEED_FILES))
    placeholder: Optional[str] = DEFAULT_PLACEHOLDER
    placeholder_body: Any = field(default_factory=lambda: dict(DEFAULT_PLACEHOLDER_BODY))
    root_files: Tuple[str, ...] = DEFAULT_ROOT_FILES

    @property
    def file_names(self) -> List[str]:
        return list(self.files)

    def plan_files(self, plan: FolderPlan, created: str) -> List[Dict[str, Any]]:
        """
        List every file ``plan`` needs, in walk order, as {path, content}.

        A path is listed once even when a root is also a leaf.
        """
        leaves = set(plan.leaves)
        roots = set(plan.root_paths)
        entries: Dict[str, Any] = {}

        for folder in plan.folders:
            if self.placeholder:
                entries[f"{folder}/{self.placeholder}"] = stamp(self.placeholder_body, created)

            names = list(self.files) if folder in leaves else []
            if folder in roots:
                names += [n for n in self.root_files if n not in names]

            for name in names:
                entries[f"{folder}/{name}"] = stamp(self.files[name], created)

        return [{"path": path, "content": content} for path, content in entries.items()]

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> "SeedLayout":
        """
        Build a layout from the ``seed:`` section of wof_folders.yml.

        ``files`` may be a mapping of name -> body or a plain list of names
        (known names keep their default body, others get ``{}``). A null
        ``placeholder`` switches placeholders off.

        Raises:
            ConfigurationError: if a root file is not one of the seed files.
        """
        data = data or {}

        raw_files = data.get("files", None)
        if raw_files is None:
            files = copy.deepcopy(DEFAULT_SEED_FILES)
        elif isinstance(raw_files, Mapping):
            files = {str(name): body for name, body in raw_files.items()}
        else:
            files = {
                str(name): copy.deepcopy(DEFAULT_SEED_FILES.get(str(name), {}))
                for name in raw_files
            }

        placeholder = data.get("placeholder", DEFAULT_PLACEHOLDER)
        placeholder_body = data.get("placeholder_body", DEFAULT_PLACEHOLDER_BODY)

        if "root_files" in data:
            root_files = tuple(str(n) for n in (data["root_files"] or ()))
        else:
            root_files = tuple(n for n in DEFAULT_ROOT_FILES if n in files)

        unknown = [n for n in root_files if n not in files]
        if unknown:
            raise ConfigurationError(
                f"Root files {unknown} are not listed under seed.files"
            )

        return cls(
            files=files,
            placeholder=str(placeholder) if placeholder else None,
            placeholder_body=placeholder_body,
            root_files=root_files,
        )
