"""
Exporter package.

Re-exports the folder-plan JSON entry points and the seed layout used by the CLI.
"""

from __future__ import annotations

from .json_exporter import (
    build_plans_dict,
    export_plans_json,
    export_timestamp,
    plan_to_dict,
    serialize_plans_to_json_string,
)
from .seed import CREATED_TOKEN, SeedLayout, stamp

__all__ = [
    "CREATED_TOKEN",
    "SeedLayout",
    "build_plans_dict",
    "export_plans_json",
    "export_timestamp",
    "plan_to_dict",
    "serialize_plans_to_json_string",
    "stamp",
]
