import pytest

from calltriage.core import batch as batch_mod
from calltriage.core.batch import run_batch
from calltriage.core.callstore import CallStore
from calltriage.core.rules import RULESET_VERSION, RuleSet

RECORDS = [
    {"id": "a", "duration": 8, "transcript_text": ""},
    {"id": "b", "duration": 30, "source": "GMB", "transcript_text":
        "This is an important message regarding your Google Business listing, press 1 now."},
    {"id": "c", "duration": 45, "direction": "outbound",
     "transcript_text": "Home Depot phone sale, $243.17 for the Lafayette job"},
    {"id": "d", "duration": 90, "source": "Website", "transcript_text":
        "I'm calling about a bathroom remodel, my address is 12 Oak Street"},
    {"id": "b", "duration": 99, "transcript_text": "duplicate id, ignored"},
]

@pytest.mark.parametrize("workers", [1, 4])
def test_run_batch_keeps_input_order(workers):
    run = run_batch(RECORDS, workers=workers)
    assert [r.call_id for r in run.results] == ["a", "b", "c", "d"]
    assert [r.category for r in run.results] == ["incomplete", "spam", "operations", "customer"]
    assert run.store.duplicates == 1
    assert run.ruleset_version == RULESET_VERSION
    assert run.report["ruleset_version"] == RULESET_VERSION
    assert run.report["total"] == 4

def test_one_failing_call_does_not_stop_the_batch(monkeypatch):
    real = batch_mod.classify

    def flaky(call, transcript, ruleset, thresholds=None):
        if call.call_id == "c":
            raise RuntimeError("boom")
        return real(call, transcript, ruleset, thresholds)

    monkeypatch.setattr(batch_mod, "classify", flaky)
    run = run_batch(RECORDS, workers=2)
    failed = [r for r in run.results if r.call_id == "c"][0]
    assert (failed.category, failed.sub_category) == ("incomplete", "classification_error")
    assert "boom" in failed.reasoning[0]
    assert len(run.results) == 4

def test_callstore_is_read_only():
    store = CallStore.from_records(RECORDS)
    assert len(store) == 4
    assert "d" in store and "zzz" not in store
    assert store.call("d").duration == 90
    assert store.transcript("c").text.startswith("Home Depot")
    with pytest.raises(TypeError):
        store._calls["x"] = None

def test_empty_rule_set_reaches_every_call():
    run = run_batch(RECORDS, ruleset=RuleSet([], version="empty-1"), workers=1)
    assert run.ruleset_version == "empty-1"
    assert all(r.ruleset_version == "empty-1" for r in run.results)
    assert "spam" not in [r.category for r in run.results]
