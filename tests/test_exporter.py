# tests/test_exporter.py

from __future__ import annotations

import json

import pytest

from wof_folders.core.exceptions import ConfigurationError
from wof_folders.core.pipeline import FolderPlan
from wof_folders.core.progress import BuildState, SourceReport
from wof_folders.exporter import (
    SeedLayout,
    build_plans_dict,
    export_plans_json,
    export_timestamp,
    plan_to_dict,
    serialize_plans_to_json_string,
    stamp,
)

CREATED = "2024-05-01T12:00:00.000Z"


def make_plan() -> FolderPlan:
    return FolderPlan(
        source="whosonfirst-data-admin-tl",
        folders=["Testland", "Testland/North", "Testland/North/Northtown"],
        leaves=["Testland/North/Northtown"],
        root_ids=["1"],
        root_paths=["Testland"],
        report=SourceReport(files=3, records=3, roots=1, folders=3, leaves=1),
    )


def files_by_path(data):
    return {f["path"]: f["content"] for f in data["files"]}


def test_plan_to_dict_lists_seed_paths_per_leaf() -> None:
    data = plan_to_dict(make_plan(), created=CREATED)

    assert data["source"] == "whosonfirst-data-admin-tl"
    assert data["roots"] == ["1"]
    assert data["root_paths"] == ["Testland"]
    assert data["folders"][0] == "Testland"
    assert data["leaves"] == [
        {
            "path": "Testland/North/Northtown",
            "seed": [
                "Testland/North/Northtown/buyers.json",
                "Testland/North/Northtown/properties.json",
                "Testland/North/Northtown/metadata.json",
            ],
        }
    ]
    assert data["counts"]["folders"] == 3


def test_every_folder_gets_a_keep_placeholder() -> None:
    files = files_by_path(plan_to_dict(make_plan(), created=CREATED))

    for folder in make_plan().folders:
        assert files[f"{folder}/.keep"] == {"created": CREATED, "source": "wof-folders"}


def test_leaf_seed_files_carry_their_bodies() -> None:
    files = files_by_path(plan_to_dict(make_plan(), created=CREATED))

    assert files["Testland/North/Northtown/buyers.json"] == {"buyers": []}
    assert files["Testland/North/Northtown/properties.json"] == {"properties": []}
    assert files["Testland/North/Northtown/metadata.json"] == {"created": CREATED}
    # interior folders are not seeded
    assert "Testland/North/buyers.json" not in files


def test_root_with_children_still_gets_metadata() -> None:
    files = files_by_path(plan_to_dict(make_plan(), created=CREATED))

    assert files["Testland/metadata.json"] == {"created": CREATED}
    assert "Testland/buyers.json" not in files


def test_root_that_is_a_leaf_lists_metadata_once() -> None:
    plan = FolderPlan(
        source="zz",
        folders=["Zedland"],
        leaves=["Zedland"],
        root_ids=["9"],
        root_paths=["Zedland"],
    )
    paths = [f["path"] for f in plan_to_dict(plan, created=CREATED)["files"]]

    assert paths == [
        "Zedland/.keep",
        "Zedland/buyers.json",
        "Zedland/properties.json",
        "Zedland/metadata.json",
    ]


def test_seed_layout_from_config_mapping() -> None:
    seed = SeedLayout.from_mapping(
        {
            "placeholder": None,
            "files": {"notes.json": {"notes": [], "at": "{created}"}},
            "root_files": ["notes.json"],
        }
    )
    files = files_by_path(plan_to_dict(make_plan(), seed, CREATED))

    assert not any(path.endswith(".keep") for path in files)
    assert files["Testland/notes.json"] == {"notes": [], "at": CREATED}
    assert files["Testland/North/Northtown/notes.json"] == {"notes": [], "at": CREATED}


def test_seed_layout_file_list_keeps_known_bodies() -> None:
    seed = SeedLayout.from_mapping({"files": ["buyers.json", "extra.json"]})

    assert seed.files == {"buyers.json": {"buyers": []}, "extra.json": {}}
    # metadata.json is not seeded, so it is not a default root file either
    assert seed.root_files == ()


def test_seed_layout_rejects_unknown_root_file() -> None:
    with pytest.raises(ConfigurationError):
        SeedLayout.from_mapping({"files": ["buyers.json"], "root_files": ["metadata.json"]})


def test_stamp_does_not_share_structure() -> None:
    body = {"buyers": []}
    stamped = stamp(body, CREATED)
    stamped["buyers"].append("x")
    assert body == {"buyers": []}


def test_export_timestamp_is_utc_iso() -> None:
    ts = export_timestamp()
    assert ts.endswith("Z")
    assert "T" in ts


def test_build_plans_dict_without_state_has_no_totals() -> None:
    data = build_plans_dict([make_plan()], created=CREATED)
    assert data["created"] == CREATED
    assert data["seed_files"] == ["buyers.json", "properties.json", "metadata.json"]
    assert "totals" not in data
    assert "state" not in data


def test_build_plans_dict_with_state() -> None:
    plan = make_plan()
    state = BuildState().advance(plan.source, plan.report)

    data = build_plans_dict([plan], state, created=CREATED)

    assert data["totals"]["leaves"] == 1
    assert data["state"]["completed"] == ["whosonfirst-data-admin-tl"]


def test_serialization_is_deterministic_for_a_fixed_timestamp() -> None:
    first = serialize_plans_to_json_string([make_plan()], created=CREATED)
    second = serialize_plans_to_json_string([make_plan()], created=CREATED)
    assert first == second


def test_compact_serialization_has_no_whitespace() -> None:
    text = serialize_plans_to_json_string([make_plan()], created=CREATED, indent=None)
    assert "\n" not in text
    assert ": " not in text


def test_export_writes_file(tmp_path) -> None:
    out = tmp_path / "nested" / "plan.json"
    export_plans_json([make_plan()], out, created=CREATED)

    data = json.loads(out.read_text(encoding="utf-8"))
    assert data["sources"][0]["leaves"][0]["path"] == "Testland/North/Northtown"
    assert data["created"] == CREATED
