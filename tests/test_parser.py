import json

import pytest

from calltriage.core.parser import RecordFormatError, load_records, parse_record, parse_utterances

def test_parse_utterances():
    text = "[00:05] Dana (Vendor): Your order is ready\n[00:12] Tom: Thanks, I'll come by\nnot a line"
    utts = parse_utterances("c1", text)
    assert len(utts) == 2
    assert utts[0].role == "Vendor"
    assert utts[0].start_sec == 5 and utts[0].end_sec == 12
    assert utts[1].end_sec == utts[1].start_sec + 5
    assert all(u.start_sec >= 0 and u.end_sec >= u.start_sec for u in utts)

def test_parse_record_defaults():
    call, transcript = parse_record({}, 3)
    assert call.call_id == "record-3"
    assert call.direction == "inbound"
    assert call.duration == 0
    assert call.answered is None
    assert transcript.text == ""
    assert transcript.utterances == ()

def test_parse_record_coerces_fields():
    call, transcript = parse_record({
        "id": 42, "direction": "OUTBOUND", "duration": "-5", "answered": "false",
        "voicemail": "yes", "customer_city": " Oakland ", "transcript_confidence": "2",
    })
    assert call.call_id == "42"
    assert call.direction == "outbound"
    assert call.duration == 0
    assert call.answered is False
    assert call.voicemail is True
    assert call.city == "Oakland"
    assert transcript.confidence == 1.0

def test_parse_record_not_a_dict():
    call, transcript = parse_record(["junk"], 0)
    assert call.call_id == "record-0"
    assert transcript.full_text == ""

def test_explicit_utterances_win():
    call, transcript = parse_record({
        "id": "u1",
        "utterances": [{"speaker": "Caller", "text": "Need a quote", "start": 0, "end": 4}, "bad", {"text": ""}],
    })
    assert len(transcript.utterances) == 1
    assert transcript.full_text == "Need a quote"

def test_load_records_formats(tmp_path):
    rec = {"id": "a", "duration": 30, "transcript_text": "hello"}
    (tmp_path / "list.json").write_text(json.dumps([rec]))
    (tmp_path / "wrapped.json").write_text(json.dumps({"calls": [rec, rec]}))
    (tmp_path / "lines.jsonl").write_text(json.dumps(rec) + "\n\n" + json.dumps(rec) + "\n")
    (tmp_path / "calls.csv").write_text("id,duration,answered,transcript_text\na,30,true,hello there\n")

    assert len(load_records(str(tmp_path / "list.json"))) == 1
    assert len(load_records(str(tmp_path / "wrapped.json"))) == 2
    assert len(load_records(str(tmp_path / "lines.jsonl"))) == 2
    rows = load_records(str(tmp_path / "calls.csv"))
    call, transcript = parse_record(rows[0])
    assert call.duration == 30 and call.answered is True
    assert transcript.text == "hello there"

def test_load_records_errors(tmp_path):
    with pytest.raises(RecordFormatError):
        load_records(str(tmp_path / "missing.json"))
    bad = tmp_path / "bad.json"
    bad.write_text("{not json")
    with pytest.raises(RecordFormatError):
        load_records(str(bad))
    scalar = tmp_path / "scalar.json"
    scalar.write_text("7")
    with pytest.raises(RecordFormatError):
        load_records(str(scalar))
