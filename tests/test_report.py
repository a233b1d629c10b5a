import json

import pandas as pd

from calltriage.core.batch import run_batch
from calltriage.core.export import CSV_COLUMNS, export_csv, export_json
from calltriage.core.report import confidence_histogram, month_of

RECORDS = [
    {"id": "1", "duration": 8, "source": "Google Ads", "transcript_text": ""},
    {"id": "2", "duration": 30, "source": "Google Ads", "transcript_text":
        "Important message about your Google listing. Press 1 to verify your listing."},
    {"id": "3", "duration": 120, "source": "Website", "transcript_text":
        "Hi my name is Maria, I want a quote for a new concrete patio at my house"},
    {"id": "4", "duration": 120, "source": "Website", "answered": False, "voicemail": True,
     "transcript_text": "Hi this is Ken calling about a kitchen remodel, please call me back"},
    {"id": "5", "duration": 40, "direction": "outbound", "transcript_text":
        "Home Depot pro desk, your order is ready for pickup"},
]

def test_report_counts():
    report = run_batch(RECORDS, workers=1).report
    assert report["total"] == 5
    assert report["by_category"]["customer"] == 2
    assert report["by_category"]["spam"] == 1
    assert report["by_category"]["operations"] == 1
    assert report["by_category"]["incomplete"] == 1
    assert report["by_category"]["system"] == 0
    assert report["by_direction"] == {"inbound": 4, "outbound": 1}
    assert report["incomplete_reasons"] == {"too_short": 1}
    assert report["spam_rate_inbound"] == 0.25
    assert report["missed_customer_leads"] == ["4"]
    assert report["by_source"]["Website"] == {"total": 2, "customer": 2, "spam": 0, "conversion_rate": 1.0}
    assert report["by_source"]["Google Ads"]["spam"] == 1
    assert report["by_source"]["unknown"]["total"] == 1
    assert sum(report["confidence_levels"].values()) == 5
    assert sum(report["confidence_histogram"]["counts"]) == 5

def test_histogram_bins():
    hist = confidence_histogram([0.0, 0.05, 0.95, 1.0])
    assert len(hist["counts"]) == 10
    assert len(hist["edges"]) == 11
    assert hist["counts"][0] == 2 and hist["counts"][-1] == 2

def test_export(tmp_path):
    run = run_batch(RECORDS, workers=1)
    out = export_json(str(tmp_path / "out" / "results.json"), run.results, run.report)
    data = json.loads(out.read_text())
    assert [r["call_id"] for r in data["results"]] == ["1", "2", "3", "4", "5"]
    assert data["report"]["total"] == 5

    csv_path = export_csv(str(tmp_path / "results.csv"), run.results)
    df = pd.read_csv(csv_path, dtype=str, keep_default_na=False)
    assert list(df.columns) == CSV_COLUMNS
    assert df.loc[df.call_id == "3", "name"].item() == "Maria"

def test_report_by_month():
    dated = [dict(rec) for rec in RECORDS]
    for rec, stamp in zip(dated, ["2025-03-04T10:00:00Z", "2025-03-20T16:30:00Z", "2025-04-01T09:15:00Z", ""]):
        rec["start_time"] = stamp
    dated[4]["start_time"] = "last tuesday"
    report = run_batch(dated, workers=1).report
    assert list(report["by_month"]) == ["2025-03", "2025-04", "unknown"]
    assert report["by_month"]["2025-03"] == {
        "total": 2, "by_category": {"incomplete": 1, "spam": 1}, "spam_rate": 0.5}
    assert report["by_month"]["2025-04"] == {
        "total": 1, "by_category": {"customer": 1}, "spam_rate": 0.0}
    assert report["by_month"]["unknown"]["total"] == 2
    assert report["by_month"]["unknown"]["by_category"] == {"customer": 1, "operations": 1}

def test_month_of():
    assert month_of("2025-11-30T23:59:59Z") == "2025-11"
    assert month_of("") == "unknown"
    assert month_of(None) == "unknown"
    assert month_of("11/30/2025") == "unknown"
