import json

from typer.testing import CliRunner

from calltriage.cli import app
from calltriage.core import config

runner = CliRunner()

def test_classify_store_and_show(tmp_path, monkeypatch):
    monkeypatch.setattr(config, "DB_PATH", str(tmp_path / "cli.db"))
    src = tmp_path / "calls.json"
    src.write_text(json.dumps([
        {"id": "a", "duration": 8, "transcript_text": ""},
        {"id": "b", "duration": 45, "transcript_text": "Home Depot phone sale, $243.17 for the Lafayette job"},
    ]))
    out = tmp_path / "out.json"
    res = runner.invoke(app, ["classify", str(src), "--out", str(out), "--no-progress", "--workers", "1"])
    assert res.exit_code == 0, res.output
    assert json.loads(out.read_text())["report"]["total"] == 2

    res = runner.invoke(app, ["show", "b"])
    assert res.exit_code == 0
    assert "vendor_purchase" in res.output

    assert runner.invoke(app, ["report", "last"]).exit_code == 0
    assert runner.invoke(app, ["list-runs"]).exit_code == 0

def test_missing_input_exits_1(tmp_path):
    res = runner.invoke(app, ["classify", str(tmp_path / "nothing-*.json"), "--no-store"])
    assert res.exit_code == 1

def test_check_prints_result():
    res = runner.invoke(app, ["check", "Are you guys hiring? I am looking for work as a laborer", "--duration", "30"])
    assert res.exit_code == 0
    assert "job_seeker" in res.output
