from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

INCOMPLETE = "incomplete"
SPAM = "spam"
OPERATIONS = "operations"
OTHER_INQUIRY = "other_inquiry"
CUSTOMER = "customer"
SYSTEM = "system"  # refinement of other_inquiry: our own IVR / greeting / test calls

CATEGORIES = (INCOMPLETE, SPAM, OPERATIONS, OTHER_INQUIRY, CUSTOMER, SYSTEM)

HIGH = "high"
MEDIUM = "medium"
LOW = "low"

TIERS = (HIGH, MEDIUM, LOW)

@dataclass(frozen=True)
class Utterance:
    call_id: str
    start_sec: int
    end_sec: int
    speaker: str
    role: str
    text: str

@dataclass(frozen=True)
class Call:
    call_id: str
    direction: str = "inbound"
    duration: int = 0
    start_time: str = ""
    phone: str = ""
    city: str = ""
    state: str = ""
    answered: Optional[bool] = None  # None when the platform did not say
    voicemail: bool = False
    source: str = ""
    has_recording: Optional[bool] = None

@dataclass(frozen=True)
class Transcript:
    call_id: str
    text: str = ""
    utterances: Tuple[Utterance, ...] = ()
    confidence: float = 0.0

    @property
    def full_text(self) -> str:
        """The transcript text, or the joined utterances when only those were supplied."""
        if isinstance(self.text, str) and self.text.strip():
            return self.text
        return " ".join(u.text for u in self.utterances if isinstance(u.text, str))

@dataclass(frozen=True)
class Entities:
    name: Optional[str] = None
    address: Optional[str] = None
    amount: Optional[str] = None

    def to_dict(self) -> Dict[str, str]:
        out = {}
        for key in ("name", "address", "amount"):
            value = getattr(self, key)
            if value:
                out[key] = value
        return out

@dataclass(frozen=True)
class ClassificationResult:
    call_id: str
    category: str
    sub_category: str
    confidence: float
    reasoning: Tuple[str, ...] = ()
    key_topics: Tuple[str, ...] = ()
    extracted: Entities = field(default_factory=Entities)
    summary: str = ""
    sentiment: float = 0.0
    stage: str = ""
    ruleset_version: str = ""
    confidence_level: str = LOW
    transcription_confidence: float = 0.0

    def to_dict(self) -> Dict:
        return {
            "call_id": self.call_id,
            "category": self.category,
            "sub_category": self.sub_category,
            "confidence": self.confidence,
            "confidence_level": self.confidence_level,
            "reasoning": list(self.reasoning),
            "key_topics": list(self.key_topics),
            "extracted": self.extracted.to_dict(),
            "summary": self.summary,
            "sentiment": self.sentiment,
            "stage": self.stage,
            "ruleset_version": self.ruleset_version,
            "transcription_confidence": self.transcription_confidence,
        }

    @classmethod
    def from_dict(cls, data: Dict) -> "ClassificationResult":
        extracted = data.get("extracted") or {}
        return cls(
            call_id=data["call_id"],
            category=data["category"],
            sub_category=data.get("sub_category", ""),
            confidence=float(data.get("confidence", 0.0)),
            reasoning=tuple(data.get("reasoning") or ()),
            key_topics=tuple(data.get("key_topics") or ()),
            extracted=Entities(**{k: extracted.get(k) for k in ("name", "address", "amount")}),
            summary=data.get("summary", ""),
            sentiment=float(data.get("sentiment", 0.0)),
            stage=data.get("stage", ""),
            ruleset_version=data.get("ruleset_version", ""),
            confidence_level=data.get("confidence_level", LOW),
            transcription_confidence=float(data.get("transcription_confidence", 0.0)),
        )

def confidence_level(confidence: float, high: float, medium: float) -> str:
    if confidence >= high:
        return HIGH
    if confidence >= medium:
        return MEDIUM
    return LOW
