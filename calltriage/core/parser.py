"""Turn loosely-typed input records into Call/Transcript pairs.

Parsing is total: any field that is missing or malformed falls back to an
empty/zero value so the call still reaches the incompleteness gate.
"""
import json
import logging
import re
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import pandas as pd

from .models import Call, Transcript, Utterance

logger = logging.getLogger(__name__)

LINE_RE = re.compile(r"^\[(\d{1,2}):(\d{2})\]\s([^:]+):\s(.*)$")  # [mm:ss] Speaker: text

TRUE_STRINGS = {"true", "yes", "y", "1", "t"}
FALSE_STRINGS = {"false", "no", "n", "0", "f"}

class RecordFormatError(ValueError):
    pass

def parse_timestamp(mm: str, ss: str) -> int:
    return int(mm) * 60 + int(ss)

def _as_str(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, float) and value != value:  # NaN from pandas
        return ""
    return str(value).strip()

def _as_int(value: Any) -> int:
    try:
        n = int(float(value))
    except (TypeError, ValueError, OverflowError):
        return 0
    return max(n, 0)

def _as_unit_float(value: Any) -> float:
    try:
        f = float(value)
    except (TypeError, ValueError):
        return 0.0
    if f != f:
        return 0.0
    return min(max(f, 0.0), 1.0)

def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)) and value == value:
        return bool(value)
    s = _as_str(value).lower()
    if s in TRUE_STRINGS:
        return True
    if s in FALSE_STRINGS:
        return False
    return None

def parse_utterances(call_id: str, text: str) -> List[Utterance]:
    parsed = []
    for line in (text or "").splitlines():
        m = LINE_RE.match(line.strip())
        if not m:
            continue
        mm, ss, speaker, content = m.groups()
        start = parse_timestamp(mm, ss)

        # Role in parentheses, e.g. "Dana (Vendor)"
        role = speaker
        r = re.search(r"\(([^)]+)\)", speaker)
        if r:
            role = r.group(1)
        parsed.append((start, speaker, role, content))

    utts: List[Utterance] = []
    for i, (start, speaker, role, content) in enumerate(parsed):
        end = parsed[i + 1][0] if i + 1 < len(parsed) else start + 5
        utts.append(Utterance(call_id=call_id, start_sec=start, end_sec=end, speaker=speaker, role=role, text=content))
    return utts

def _utterances_from_record(call_id: str, items: Any) -> List[Utterance]:
    if not isinstance(items, list):
        return []
    utts = []
    for it in items:
        if not isinstance(it, dict):
            continue
        text = _as_str(it.get("text"))
        if not text:
            continue
        speaker = _as_str(it.get("speaker")) or "?"
        start = _as_int(it.get("start", it.get("start_sec")))
        end = _as_int(it.get("end", it.get("end_sec")))
        utts.append(Utterance(call_id=call_id, start_sec=start, end_sec=max(end, start),
                              speaker=speaker, role=_as_str(it.get("role")) or speaker, text=text))
    return utts

def parse_record(raw: Any, index: int = 0) -> Tuple[Call, Transcript]:
    if not isinstance(raw, dict):
        logger.warning("record %d is not an object; treating it as empty", index)
        raw = {}

    call_id = _as_str(raw.get("id", raw.get("call_id"))) or f"record-{index}"
    direction = _as_str(raw.get("direction")).lower()
    if direction not in ("inbound", "outbound"):
        direction = "inbound"

    call = Call(
        call_id=call_id,
        direction=direction,
        duration=_as_int(raw.get("duration")),
        start_time=_as_str(raw.get("start_time")),
        phone=_as_str(raw.get("customer_phone")),
        city=_as_str(raw.get("customer_city")),
        state=_as_str(raw.get("customer_state")),
        answered=_as_bool(raw.get("answered")),
        voicemail=bool(_as_bool(raw.get("voicemail"))),
        source=_as_str(raw.get("source")),
        has_recording=_as_bool(raw.get("has_recording")),
    )

    text = raw.get("transcript_text", raw.get("transcript"))
    text = text if isinstance(text, str) else _as_str(text)
    utts = _utterances_from_record(call_id, raw.get("utterances"))
    if not utts:
        utts = parse_utterances(call_id, text)

    transcript = Transcript(
        call_id=call_id,
        text=text,
        utterances=tuple(utts),
        confidence=_as_unit_float(raw.get("transcript_confidence")),
    )
    return call, transcript

def load_records(path: str) -> List[Dict[str, Any]]:
    p = Path(path)
    if not p.is_file():
        raise RecordFormatError(f"no such input file: {path}")
    suffix = p.suffix.lower()
    try:
        if suffix == ".csv":
            df = pd.read_csv(p, dtype=str, keep_default_na=False)
            return df.to_dict(orient="records")
        text = p.read_text(encoding="utf-8")
        if suffix == ".jsonl":
            return [json.loads(line) for line in text.splitlines() if line.strip()]
        data = json.loads(text)
    except (OSError, ValueError, pd.errors.ParserError) as e:
        raise RecordFormatError(f"cannot read {path}: {e}") from e

    if isinstance(data, dict):
        data = data.get("calls", [data])
    if not isinstance(data, list):
        raise RecordFormatError(f"{path}: expected a list of call records")
    return data
