# src/wof_folders/utils/pathing.py

from __future__ import annotations

from pathlib import Path
from typing import Union


# This file lives at:
#   <project_root>/src/wof_folders/utils/pathing.py
#
# Path(__file__).resolve().parents gives:
#   [0] .../src/wof_folders/utils
#   [1] .../src/wof_folders
#   [2] .../src
#   [3] .../ (project root)
_PROJECT_ROOT = Path(__file__).resolve().parents[3]


def project_root() -> Path:
    """
    Return the absolute path to the project root directory.

    The project root is the directory that contains:
      - src/
      - tests/
      - config/
      - mock_files/
    """
    return _PROJECT_ROOT


def resolve_project_path(relative: Union[str, Path]) -> Path:
    """
    Resolve a path relative to the project root.

    Examples:
        resolve_project_path("logs")
        resolve_project_path(Path("mock_files") / "wof")
    """
    path = Path(relative)
    if path.is_absolute():
        return path
    return project_root() / path


def mock_file_path(*parts: Union[str, Path]) -> Path:
    """
    Return the absolute path to a file or directory under mock_files/.

    Examples:
        mock_file_path("wof", "barbados")
        mock_file_path("wof", "barbados", "85632491.geojson")
    """
    return resolve_project_path(Path("mock_files").joinpath(*parts))
