from pathlib import Path
from typing import Any, Dict, List

from fastapi import Body, FastAPI, HTTPException

# Make local package importable
import sys
BASE_DIR = Path(__file__).resolve().parent.parent
if str(BASE_DIR) not in sys.path:
    sys.path.insert(0, str(BASE_DIR))

from calltriage.core import config
from calltriage.core.batch import run_batch
from calltriage.core.classifier import classify_record
from calltriage.core.log import setup_logging
from calltriage.core.rules import RuleSetError, load_rules
from calltriage.core.storage import get_result, get_run, init_db, insert_results, insert_run, list_runs

app = FastAPI(title="Call Triage API")

_rules = None

def _ruleset():
    global _rules
    if _rules is None:
        try:
            _rules = load_rules(config.RULES_PATH)
        except RuleSetError as e:
            raise HTTPException(status_code=500, detail=str(e))
    return _rules

@app.on_event("startup")
def _startup():
    setup_logging()
    init_db()

@app.post("/api/classify")
def classify(payload: Dict[str, Any] = Body(...)):
    result = classify_record(payload, _ruleset())
    return {"ok": True, "result": result.to_dict()}

@app.post("/api/batch")
def batch(payload: Any = Body(...)):
    records = payload.get("calls") if isinstance(payload, dict) else payload
    if not isinstance(records, list):
        raise HTTPException(status_code=400, detail="expected a list of call records or {'calls': [...]}")
    ruleset = _ruleset()
    batch_run = run_batch(records, ruleset=ruleset)
    init_db()
    run_id = insert_run(batch_run.ruleset_version, len(batch_run.results), batch_run.report)
    insert_results(run_id, batch_run.results)
    return {"ok": True, "run_id": run_id, "report": batch_run.report,
            "results": [r.to_dict() for r in batch_run.results]}

@app.get("/api/runs")
def runs():
    init_db()
    return [{"run_id": rid, "created_at": created, "ruleset_version": version, "total": total}
            for rid, created, version, total in list_runs()]

@app.get("/api/runs/{run_id}")
def run(run_id: str):
    init_db()
    found = get_run(run_id)
    if found is None:
        raise HTTPException(status_code=404, detail=f"No run {run_id}")
    return {"ok": True, **found}

@app.get("/api/runs/{run_id}/calls/{call_id}")
def call_result(run_id: str, call_id: str):
    init_db()
    result = get_result(run_id, call_id)
    if result is None:
        raise HTTPException(status_code=404, detail=f"No result for {call_id} in run {run_id}")
    return {"ok": True, "run_id": run_id, "result": result.to_dict()}

@app.get("/api/rules")
def rules():
    ruleset = _ruleset()
    rows: List[Dict[str, Any]] = ruleset.to_rows()
    return {"ok": True, "version": ruleset.version, "count": len(rows), "rules": rows}
