import json
import sqlite3
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Tuple

from . import config
from .models import ClassificationResult

DDL = [
    '''CREATE TABLE IF NOT EXISTS runs(
        run_id TEXT PRIMARY KEY,
        created_at TEXT,
        ruleset_version TEXT,
        total INT,
        report TEXT DEFAULT '{}'
    )''',
    '''CREATE TABLE IF NOT EXISTS results(
        run_id TEXT,
        call_id TEXT,
        category TEXT,
        sub_category TEXT,
        confidence REAL,
        summary TEXT,
        payload TEXT,
        PRIMARY KEY(run_id, call_id),
        FOREIGN KEY(run_id) REFERENCES runs(run_id)
    )''',
    '''CREATE INDEX IF NOT EXISTS results_category ON results(run_id, category)''',
]

def connect():
    # DB_PATH is looked up on every connect
    db_path = Path(config.DB_PATH)
    db_path.parent.mkdir(parents=True, exist_ok=True)
    return sqlite3.connect(str(db_path))

def init_db():
    con = connect()
    try:
        cur = con.cursor()
        for stmt in DDL:
            cur.execute(stmt)
        con.commit()
    finally:
        con.close()

def insert_run(ruleset_version: str, total: int, report: Dict[str, Any], run_id: str = None) -> str:
    run_id = run_id or uuid.uuid4().hex[:12]
    created = datetime.now(timezone.utc).isoformat(timespec="seconds")
    con = connect()
    try:
        con.execute("INSERT INTO runs(run_id, created_at, ruleset_version, total, report) VALUES(?,?,?,?,?)",
                    (run_id, created, ruleset_version, total, json.dumps(report)))
        con.commit()
        return run_id
    finally:
        con.close()

def insert_results(run_id: str, results: Iterable[ClassificationResult]):
    con = connect()
    try:
        con.executemany(
            "INSERT OR REPLACE INTO results(run_id,call_id,category,sub_category,confidence,summary,payload) VALUES(?,?,?,?,?,?,?)",
            [(run_id, r.call_id, r.category, r.sub_category, r.confidence, r.summary, json.dumps(r.to_dict()))
             for r in results])
        con.commit()
    finally:
        con.close()

def list_runs() -> List[Tuple[str, str, str, int]]:
    con = connect()
    try:
        rows = con.execute("SELECT run_id, created_at, ruleset_version, total FROM runs ORDER BY created_at DESC, rowid DESC").fetchall()
        return rows
    finally:
        con.close()

def latest_run_id() -> Optional[str]:
    rows = list_runs()
    return rows[0][0] if rows else None

def get_run(run_id: str) -> Optional[Dict[str, Any]]:
    con = connect()
    try:
        row = con.execute("SELECT run_id, created_at, ruleset_version, total, report FROM runs WHERE run_id=?",
                          (run_id,)).fetchone()
    finally:
        con.close()
    if row is None:
        return None
    rid, created, version, total, report = row
    return {"run_id": rid, "created_at": created, "ruleset_version": version, "total": total,
            "report": json.loads(report or "{}")}

def results_for_run(run_id: str, category: str = None) -> List[ClassificationResult]:
    con = connect()
    try:
        if category:
            rows = con.execute("SELECT payload FROM results WHERE run_id=? AND category=? ORDER BY rowid",
                               (run_id, category)).fetchall()
        else:
            rows = con.execute("SELECT payload FROM results WHERE run_id=? ORDER BY rowid", (run_id,)).fetchall()
        return [ClassificationResult.from_dict(json.loads(p)) for (p,) in rows]
    finally:
        con.close()

def get_result(run_id: str, call_id: str) -> Optional[ClassificationResult]:
    con = connect()
    try:
        row = con.execute("SELECT payload FROM results WHERE run_id=? AND call_id=?", (run_id, call_id)).fetchone()
        return ClassificationResult.from_dict(json.loads(row[0])) if row else None
    finally:
        con.close()
