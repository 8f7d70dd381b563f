# tests/test_progress.py

from __future__ import annotations

import json

from wof_folders.core.progress import BuildState, SourceReport


def test_advance_returns_new_state() -> None:
    start = BuildState()
    report = SourceReport(records=3, folders=3, leaves=1)

    after = start.advance("whosonfirst-data-admin-tl", report)

    assert after is not start
    assert start.completed == ()
    assert after.is_complete("whosonfirst-data-admin-tl")
    assert after.reports["whosonfirst-data-admin-tl"].folders == 3


def test_advance_twice_does_not_duplicate_completion() -> None:
    state = BuildState().advance("a", SourceReport()).advance("a", SourceReport(roots=1))
    assert state.completed == ("a",)
    assert state.reports["a"].roots == 1


def test_totals_sum_every_counter() -> None:
    state = (
        BuildState()
        .advance("a", SourceReport(records=3, leaves=1, cycles_skipped=2))
        .advance("b", SourceReport(records=1, leaves=1))
    )
    totals = state.totals()
    assert totals.records == 4
    assert totals.leaves == 2
    assert totals.cycles_skipped == 2


def test_state_survives_json_round_trip() -> None:
    state = BuildState().advance("a", SourceReport(files=12, unreadable=1))
    restored = BuildState.from_dict(json.loads(json.dumps(state.to_dict())))

    assert restored.completed == ("a",)
    assert restored.reports["a"] == SourceReport(files=12, unreadable=1)


def test_from_dict_ignores_unknown_counters() -> None:
    report = SourceReport.from_dict({"files": "2", "bogus": 9})
    assert report.files == 2
