import json

import pytest

from calltriage.core.classifier import classify, classify_record
from calltriage.core.confidence import CATEGORY_SCALING
from calltriage.core.models import CATEGORIES, Call, Transcript
from calltriage.core.resolver import FALLBACK_STAGE, GATE_STAGE, Thresholds
from calltriage.core.rules import RuleSet

GOOGLE_ROBOCALL = ("Hello, this is an important message regarding your Google Business listing. "
                   "Your listing is not verified. Press 1 to speak with a specialist.")

def _rec(text, duration=60, **kw):
    return dict(id="t", transcript_text=text, duration=duration, **kw)

def test_empty_short_call_is_too_short():
    r = classify_record(_rec("", 8))
    assert (r.category, r.sub_category) == ("incomplete", "too_short")
    assert r.stage == GATE_STAGE

def test_google_listing_robocall():
    r = classify_record(_rec(GOOGLE_ROBOCALL, 30))
    assert (r.category, r.sub_category) == ("spam", "google_listing")
    assert r.confidence_level == "high"
    assert r.confidence <= CATEGORY_SCALING["spam"][1]

def test_supplier_purchase_with_amount():
    r = classify_record(_rec("Home Depot phone sale, $243.17 for the Lafayette job", 45))
    assert (r.category, r.sub_category) == ("operations", "vendor_purchase")
    assert r.extracted.amount == "$243.17"

def test_bathroom_remodel_lead():
    r = classify_record(_rec("I'm calling about a bathroom remodel, my address is 12 Oak Street", 90,
                             customer_city="Oakland"))
    assert (r.category, r.sub_category) == ("customer", "bathroom_remodel")
    assert r.extracted.address == "12 Oak Street"
    assert r.summary == "Customer in Oakland wants a bathroom remodel at 12 Oak Street."
    assert r.key_topics[0] == "bathroom remodel"
    assert "remodeling" in r.key_topics

def test_earlier_stage_wins_over_customer_signals():
    text = ("Press one to speak with an agent about your driveway estimate. "
            "We can come out and give you a driveway estimate.")
    r = classify_record(_rec(text, 40))
    assert r.category == "spam"
    assert r.sub_category == "robocall"
    assert any("customer signal" in line for line in r.reasoning)

@pytest.mark.parametrize("record, sub", [
    (_rec("", 60), "transcription_failed"),
    (_rec("", 60, answered=False), "missed_call"),
    (_rec("", 60, has_recording=False), "no_recording"),
    (_rec("", 60, answered=False, voicemail=True), "transcription_failed"),
    (_rec(GOOGLE_ROBOCALL, 60, answered=False), "missed_call"),
    (_rec("Press 1 now", 40), "transcription_failed"),
    (_rec("Hello? Hello? Hi, yes, hello, can you hear me?", 25), "brief_exchange"),
])
def test_incompleteness_gate(record, sub):
    r = classify_record(record)
    assert (r.category, r.sub_category) == ("incomplete", sub)

def test_unknown_answered_flag_does_not_gate():
    r = classify_record(_rec(GOOGLE_ROBOCALL, 60))
    assert r.category == "spam"

@pytest.mark.parametrize("duration, expected", [
    (10, ("incomplete", "too_short")),
    (100, ("incomplete", "unclassified")),
    (400, ("customer", "general_inquiry")),
])
def test_fallback_by_duration(duration, expected):
    r = classify_record(_rec("We talked for a while about the weather and the game last night", duration))
    assert (r.category, r.sub_category) == expected
    assert r.stage == FALLBACK_STAGE

def test_single_weak_signal_loses_to_stronger_competitor():
    # the yelp mention alone is a medium spam signal; the kitchen remodel outranks it
    r = classify_record(_rec("I saw you on yelp and I want to remodel my kitchen this spring", 90))
    assert (r.category, r.sub_category) == ("customer", "kitchen_remodel")

def test_uncontested_medium_signal_decides():
    r = classify_record(_rec("Hi there, where are you guys located, I was driving by earlier", 50))
    assert (r.category, r.sub_category) == ("other_inquiry", "out_of_area")

def test_job_seeker_checked_before_spam():
    r = classify_record(_rec("Hi, are you guys hiring? I am looking for work as a laborer, press 1", 30))
    assert (r.category, r.sub_category) == ("other_inquiry", "job_seeker")

def test_system_greeting():
    r = classify_record(_rec("We are unable to take your call right now, please leave a message after the tone", 20))
    assert (r.category, r.sub_category) == ("system", "voicemail_greeting")

def test_wrong_number():
    r = classify_record(_rec("Oh sorry, I think I have the wrong number, have a good day", 22))
    assert (r.category, r.sub_category) == ("incomplete", "wrong_number")

def test_utterances_only_record():
    r = classify_record({"id": "u", "duration": 120, "utterances": [
        {"speaker": "Caller", "text": "Hi, I need a quote for a new concrete driveway at my house", "start": 0, "end": 6},
    ]})
    assert (r.category, r.sub_category) == ("customer", "concrete_inquiry")

@pytest.mark.parametrize("raw", [
    None, {}, [], "junk", {"duration": "abc", "transcript_text": 123},
    {"utterances": "x", "answered": "maybe"}, {"transcript_text": None, "duration": None},
])
def test_classification_is_total(raw):
    r = classify_record(raw)
    assert r.category in CATEGORIES
    assert 0.0 <= r.confidence <= 1.0

def test_classification_is_deterministic():
    call = Call(call_id="d", duration=90, city="Walnut Creek")
    transcript = Transcript(call_id="d", text=GOOGLE_ROBOCALL)
    a = json.dumps(classify(call, transcript).to_dict())
    b = json.dumps(classify(call, transcript).to_dict())
    assert a == b

def test_thresholds_are_injected():
    call = Call(call_id="th", duration=30)
    transcript = Transcript(call_id="th", text="short one here")
    assert classify(call, transcript).sub_category == "transcription_failed"
    assert classify(call, transcript, thresholds=Thresholds(short_call=60)).sub_category == "too_short"

def test_result_record_shape():
    d = classify_record(_rec("Home Depot phone sale, $243.17 for the Lafayette job", 45)).to_dict()
    assert set(d) == {"call_id", "category", "sub_category", "confidence", "confidence_level", "reasoning",
                      "key_topics", "extracted", "summary", "sentiment", "stage", "ruleset_version",
                      "transcription_confidence"}
    assert d["extracted"] == {"amount": "$243.17"}
    assert -1.0 <= d["sentiment"] <= 1.0

def test_customer_looking_for_work_done_is_not_a_job_seeker():
    r = classify_record(_rec("Hi, I'm looking for work to be done on my driveway, it has a big crack in the concrete", 120))
    assert (r.category, r.sub_category) == ("customer", "concrete_inquiry")

def test_empty_rule_set_is_used_as_given():
    call = Call(call_id="e", duration=90)
    transcript = Transcript(call_id="e", text=GOOGLE_ROBOCALL)
    r = classify(call, transcript, RuleSet([], version="empty-1"))
    assert r.ruleset_version == "empty-1"
    assert (r.category, r.sub_category) == ("incomplete", "unclassified")
    assert r.stage == FALLBACK_STAGE

def test_transcription_confidence_is_carried():
    r = classify_record(_rec(GOOGLE_ROBOCALL, 30, transcript_confidence=0.42))
    assert r.transcription_confidence == 0.42
    assert r.to_dict()["transcription_confidence"] == 0.42
