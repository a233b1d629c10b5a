import json
from pathlib import Path
from typing import Any, Dict, List, Sequence

import pandas as pd

from .models import ClassificationResult

CSV_COLUMNS = ["call_id", "category", "sub_category", "confidence", "confidence_level", "name", "address",
               "amount", "key_topics", "summary", "sentiment", "stage", "ruleset_version",
               "transcription_confidence", "reasoning"]

def results_frame(results: Sequence[ClassificationResult]) -> pd.DataFrame:
    rows: List[Dict[str, Any]] = []
    for r in results:
        row = r.to_dict()
        extracted = row.pop("extracted")
        row.update({k: extracted.get(k, "") for k in ("name", "address", "amount")})
        row["key_topics"] = "; ".join(row["key_topics"])
        row["reasoning"] = " | ".join(row["reasoning"])
        rows.append(row)
    return pd.DataFrame(rows, columns=CSV_COLUMNS)

def export_csv(path: str, results: Sequence[ClassificationResult]) -> Path:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    results_frame(results).to_csv(p, index=False)
    return p

def export_json(path: str, results: Sequence[ClassificationResult], report: Dict[str, Any] = None) -> Path:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    payload: Dict[str, Any] = {"results": [r.to_dict() for r in results]}
    if report is not None:
        payload["report"] = report
    p.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")
    return p
