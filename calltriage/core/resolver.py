"""Priority cascade from matched rules to one category.

The order of checks is data (``CASCADE``); the first decisive stage wins.
Incomplete calls are settled before any content rule runs, and calls no
stage claims fall through to a duration-based fallback.
"""
import re
from collections import Counter
from dataclasses import dataclass, field
from typing import FrozenSet, List, Optional, Sequence, Tuple

from . import config
from .confidence import aggregate, strongest
from .models import (CUSTOMER, HIGH, INCOMPLETE, OPERATIONS, OTHER_INQUIRY, SPAM, SYSTEM, TIERS,
                     Call, Transcript)
from .rules import PatternRule, RuleSet

GATE_STAGE = "incomplete_gate"
FALLBACK_STAGE = "fallback"

# Words that make up a greetings-only exchange
BRIEF_WORDS = {
    "hello", "hi", "hey", "yes", "yeah", "yep", "yup", "no", "nope", "okay", "ok", "alright", "all", "right",
    "bye", "goodbye", "thank", "thanks", "you", "sorry", "who", "is", "this", "that", "it", "um", "uh", "hm",
    "hmm", "oh", "good", "morning", "afternoon", "evening", "can", "hear", "me", "there", "anyone", "what",
    "huh", "sure", "speaking", "i", "am", "are", "how", "doing", "fine", "great", "so", "well",
}

_WORD_RE = re.compile(r"[a-z']+")

@dataclass(frozen=True)
class Thresholds:
    min_chars: int = config.MIN_TRANSCRIPT_CHARS
    min_words: int = config.MIN_TRANSCRIPT_WORDS
    short_call: int = config.SHORT_CALL_SECONDS
    fallback_short: int = config.FALLBACK_SHORT_SECONDS
    fallback_long: int = config.FALLBACK_LONG_SECONDS
    high: float = config.HIGH_CONFIDENCE
    medium: float = config.MEDIUM_CONFIDENCE

@dataclass(frozen=True)
class Stage:
    name: str
    category: str                       # category reported when this stage decides
    rule_category: str                  # catalogue rows that feed the stage
    include: FrozenSet[str] = frozenset()
    exclude: FrozenSet[str] = frozenset()
    competitor: str = "customer"
    min_matches: Optional[int] = 2      # None: corroboration by count never applies

    def select(self, matches: Sequence[PatternRule]) -> List[PatternRule]:
        return [r for r in matches
                if r.category == self.rule_category
                and (not self.include or r.sub_category in self.include)
                and r.sub_category not in self.exclude]

CASCADE: Tuple[Stage, ...] = (
    Stage("system", SYSTEM, SYSTEM),
    Stage("job_seeker", OTHER_INQUIRY, OTHER_INQUIRY, include=frozenset({"job_seeker"})),
    Stage("spam", SPAM, SPAM),
    Stage("operations", OPERATIONS, OPERATIONS),
    Stage("other_inquiry", OTHER_INQUIRY, OTHER_INQUIRY, exclude=frozenset({"job_seeker"})),
    Stage("wrong_number", INCOMPLETE, INCOMPLETE, include=frozenset({"wrong_number"})),
    Stage("customer", CUSTOMER, CUSTOMER, competitor="other_inquiry", min_matches=None),
)

@dataclass(frozen=True)
class Decision:
    category: str
    sub_category: str
    confidence: float
    stage: str
    reasoning: Tuple[str, ...] = ()
    matches: Tuple[PatternRule, ...] = field(default=(), repr=False)

def _words(text: str) -> List[str]:
    return _WORD_RE.findall(text.lower())

def _unanswered(call: Call) -> bool:
    return call.answered is False and not call.voicemail

def incompleteness_gate(call: Call, text: str, th: Thresholds) -> Optional[Decision]:
    stripped = text.strip()
    n_words = len(stripped.split())
    if len(stripped) < th.min_chars or n_words < th.min_words:
        why = f"transcript unusable ({len(stripped)} chars, {n_words} words)"
        if call.duration < th.short_call:
            return Decision(INCOMPLETE, "too_short", 0.90, GATE_STAGE,
                            (why, f"call lasted {call.duration}s, under {th.short_call}s"))
        if _unanswered(call):
            return Decision(INCOMPLETE, "missed_call", 0.95, GATE_STAGE,
                            (why, "call was not answered and no voicemail was left"))
        if call.has_recording is False:
            return Decision(INCOMPLETE, "no_recording", 0.95, GATE_STAGE, (why, "no recording exists for the call"))
        return Decision(INCOMPLETE, "transcription_failed", 0.90, GATE_STAGE,
                        (why, f"call lasted {call.duration}s but produced no usable transcript"))
    if _unanswered(call):
        return Decision(INCOMPLETE, "missed_call", 0.90, GATE_STAGE,
                        ("call was not answered and no voicemail was left",))
    words = _words(stripped)
    if len(words) < 20 and all(w in BRIEF_WORDS for w in words):
        return Decision(INCOMPLETE, "brief_exchange", 0.85, GATE_STAGE,
                        (f"only greetings were exchanged ({len(words)} words)",))
    return None

def _tier_counts(matches: Sequence[PatternRule]) -> str:
    counts = Counter(r.tier for r in matches)
    return ", ".join(f"{counts[t]} {t}" for t in TIERS if counts[t])

def is_decisive(stage: Stage, mine: Sequence[PatternRule], theirs: Sequence[PatternRule]) -> bool:
    if not mine:
        return False
    if any(r.tier == HIGH for r in mine):
        return True
    if stage.min_matches is not None and len(mine) >= stage.min_matches:
        return True
    rival = strongest(theirs)
    return rival is None or strongest(mine).weight > rival.weight

def fallback(call: Call, th: Thresholds) -> Decision:
    if call.duration < th.fallback_short:
        return Decision(INCOMPLETE, "too_short", 0.50, FALLBACK_STAGE,
                        (f"no decisive rule; {call.duration}s is under {th.fallback_short}s",))
    if call.duration > th.fallback_long:
        return Decision(CUSTOMER, "general_inquiry", 0.60, FALLBACK_STAGE,
                        (f"no decisive rule; a {call.duration}s conversation is most likely a customer",))
    return Decision(INCOMPLETE, "unclassified", 0.40, FALLBACK_STAGE,
                    ("no decisive rule; needs manual review",))

def resolve(call: Call, transcript: Transcript, ruleset: RuleSet,
            thresholds: Thresholds = None, cascade: Sequence[Stage] = CASCADE) -> Decision:
    th = thresholds or Thresholds()
    text = transcript.full_text
    gated = incompleteness_gate(call, text, th)
    if gated is not None:
        return gated

    matches = ruleset.evaluate(text)
    by_name = {s.name: s for s in cascade}
    notes: List[str] = []
    for stage in cascade:
        mine = stage.select(matches)
        if not mine:
            continue
        rival_stage = by_name.get(stage.competitor)
        theirs = rival_stage.select(matches) if rival_stage else []
        if not is_decisive(stage, mine, theirs):
            notes.append(f"{stage.name} signals ({_tier_counts(mine)}) were not corroborated "
                         f"against {stage.competitor} signals")
            continue
        confidence, best = aggregate(mine, stage.category)
        reasoning = [
            f"{stage.name} stage: {len(mine)} matching rule(s) ({_tier_counts(mine)})",
            f"strongest signal '{best.topic}' ({best.tier}, {best.weight:.2f}) -> {best.sub_category}",
        ]
        if stage.category != CUSTOMER and theirs:
            reasoning.append(f"{len(theirs)} {stage.competitor} signal(s) outranked by the earlier {stage.name} stage")
        reasoning.extend(notes)
        return Decision(stage.category, best.sub_category, confidence, stage.name,
                        tuple(reasoning), tuple(mine))

    decision = fallback(call, th)
    if notes:
        decision = Decision(decision.category, decision.sub_category, decision.confidence,
                            decision.stage, decision.reasoning + tuple(notes))
    return decision
