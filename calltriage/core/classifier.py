from typing import Any, List

from .extract import extract_entities
from .models import INCOMPLETE, LOW, Call, ClassificationResult, Transcript, confidence_level
from .parser import parse_record
from .resolver import Decision, Thresholds, resolve
from .rules import RuleSet, default_rules
from .sentiment import compound_score
from .tags import tag_text
from .templates import render_summary

MAX_TOPICS = 5

def key_topics(decision: Decision, text: str) -> List[str]:
    topics: List[str] = []
    for rule in sorted(decision.matches, key=lambda r: -r.weight):
        if rule.topic not in topics:
            topics.append(rule.topic)
    for topic in tag_text(text):
        if topic not in topics:
            topics.append(topic)
    return topics[:MAX_TOPICS]

def classify(call: Call, transcript: Transcript, ruleset: RuleSet = None,
             thresholds: Thresholds = None) -> ClassificationResult:
    """Classify one call. Pure: same inputs, same result."""
    if ruleset is None:
        ruleset = default_rules()
    th = thresholds or Thresholds()
    text = transcript.full_text
    entities = extract_entities(text)
    decision = resolve(call, transcript, ruleset, th)
    return ClassificationResult(
        call_id=call.call_id,
        category=decision.category,
        sub_category=decision.sub_category,
        confidence=round(decision.confidence, 4),
        confidence_level=confidence_level(decision.confidence, th.high, th.medium),
        reasoning=decision.reasoning,
        key_topics=tuple(key_topics(decision, text)),
        extracted=entities,
        summary=render_summary(decision.category, decision.sub_category, call, entities),
        sentiment=compound_score(text),
        stage=decision.stage,
        ruleset_version=ruleset.version,
        transcription_confidence=transcript.confidence,
    )

def classify_record(raw: Any, ruleset: RuleSet = None, thresholds: Thresholds = None) -> ClassificationResult:
    call, transcript = parse_record(raw)
    return classify(call, transcript, ruleset, thresholds)

def error_result(call_id: str, error: BaseException, ruleset_version: str = "") -> ClassificationResult:
    return ClassificationResult(
        call_id=call_id,
        category=INCOMPLETE,
        sub_category="classification_error",
        confidence=0.0,
        confidence_level=LOW,
        reasoning=(f"classification failed: {type(error).__name__}: {error}",),
        summary="Call could not be processed; see logs.",
        stage="error",
        ruleset_version=ruleset_version,
    )
