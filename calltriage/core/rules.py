"""Versioned catalogue of category-tagged pattern rules.

Rules are plain data: each row names a target category and sub-category, a
strength tier and one criterion, either ``keywords`` (any-of literal
substrings, optionally paired with a ``requires`` any-of set) or a regular
expression ``pattern``. Adding a rule never touches the cascade in
``resolver.py``. The same row shape is accepted from a JSON file:

    {"version": "...", "rules": [{"category": "spam", "sub_category": "robocall",
                                  "tier": "high", "pattern": "press 1"}]}
"""
import json
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Pattern, Tuple

from .models import CATEGORIES, CUSTOMER, HIGH, INCOMPLETE, LOW, MEDIUM, OPERATIONS, OTHER_INQUIRY, SPAM, SYSTEM, TIERS

RULESET_VERSION = "2026.10-builtin"

TIER_WEIGHTS = {HIGH: 0.90, MEDIUM: 0.75, LOW: 0.60}

class RuleSetError(ValueError):
    pass

# curly quotes and dashes from transcription -> ASCII
_PUNCT = str.maketrans({"\u2018": "'", "\u2019": "'", "\u201c": '"', "\u201d": '"',
                        "\u2013": "-", "\u2014": "-"})

def normalize_text(text: str) -> str:
    if not isinstance(text, str):
        return ""
    return text.translate(_PUNCT)

@dataclass(frozen=True)
class PatternRule:
    category: str
    sub_category: str
    tier: str
    weight: float
    keywords: Tuple[str, ...] = ()
    requires: Tuple[str, ...] = ()
    pattern: str = ""
    topic: str = ""
    regex: Optional[Pattern] = field(default=None, compare=False, repr=False)

    def matches(self, text: str, lowered: str) -> bool:
        if self.requires and not any(r in lowered for r in self.requires):
            return False
        if self.regex is not None:
            return self.regex.search(text) is not None
        return any(k in lowered for k in self.keywords)

    @property
    def criterion(self) -> str:
        if self.pattern:
            crit = f"/{self.pattern}/"
        else:
            crit = " | ".join(self.keywords)
        if self.requires:
            crit += f"  + ({' | '.join(self.requires)})"
        return crit

def rule_from_dict(row: Dict, index: int = 0) -> PatternRule:
    if not isinstance(row, dict):
        raise RuleSetError(f"rule {index}: expected an object")
    category = row.get("category")
    if category not in CATEGORIES:
        raise RuleSetError(f"rule {index}: unknown category {category!r}")
    tier = row.get("tier", MEDIUM)
    if tier not in TIERS:
        raise RuleSetError(f"rule {index}: unknown tier {tier!r}")
    keywords = tuple(k.lower() for k in row.get("keywords", ()) if k)
    requires = tuple(k.lower() for k in row.get("requires", ()) if k)
    pattern = row.get("pattern") or ""
    if bool(keywords) == bool(pattern):
        raise RuleSetError(f"rule {index}: give exactly one of 'keywords' or 'pattern'")
    regex = None
    if pattern:
        try:
            regex = re.compile(pattern, re.IGNORECASE)
        except re.error as e:
            raise RuleSetError(f"rule {index}: bad pattern {pattern!r}: {e}") from e
    weight = float(row.get("weight", TIER_WEIGHTS[tier]))
    if not 0.0 < weight < 1.0:
        raise RuleSetError(f"rule {index}: weight {weight} outside (0, 1)")
    sub = row.get("sub_category") or category
    topic = row.get("topic") or (keywords[0] if keywords else sub.replace("_", " "))
    return PatternRule(category=category, sub_category=sub, tier=tier, weight=weight,
                       keywords=keywords, requires=requires, pattern=pattern, topic=topic, regex=regex)

class RuleSet:
    def __init__(self, rules: Iterable[PatternRule], version: str = RULESET_VERSION):
        self.rules: Tuple[PatternRule, ...] = tuple(rules)
        self.version = version

    def __len__(self):
        return len(self.rules)

    def evaluate(self, text: str) -> List[PatternRule]:
        """Every rule matching ``text``, in catalogue order."""
        text = normalize_text(text)
        lowered = text.lower()
        return [r for r in self.rules if r.matches(text, lowered)]

    def for_category(self, category: str) -> List[PatternRule]:
        return [r for r in self.rules if r.category == category]

    def to_rows(self) -> List[Dict]:
        rows = []
        for r in self.rules:
            row = {"category": r.category, "sub_category": r.sub_category, "tier": r.tier,
                   "weight": r.weight, "topic": r.topic}
            if r.pattern:
                row["pattern"] = r.pattern
            else:
                row["keywords"] = list(r.keywords)
            if r.requires:
                row["requires"] = list(r.requires)
            rows.append(row)
        return rows

def build_ruleset(rows: Iterable[Dict], version: str = RULESET_VERSION) -> RuleSet:
    return RuleSet([rule_from_dict(row, i) for i, row in enumerate(rows)], version=version)

def load_rules(path: str = None) -> RuleSet:
    if not path:
        return build_ruleset(BUILTIN_RULES)
    p = Path(path)
    try:
        data = json.loads(p.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        raise RuleSetError(f"cannot read rules file {path}: {e}") from e
    if isinstance(data, list):
        data = {"rules": data}
    if not isinstance(data, dict) or not isinstance(data.get("rules"), list):
        raise RuleSetError(f"{path}: expected {{'version': ..., 'rules': [...]}}")
    return build_ruleset(data["rules"], version=str(data.get("version") or p.stem))

_default = None

def default_rules() -> RuleSet:
    global _default
    if _default is None:
        _default = build_ruleset(BUILTIN_RULES)
    return _default

BUILTIN_RULES: List[Dict] = [
    # --- system: our own phone system, not a person ---------------------------------
    {"category": SYSTEM, "sub_category": "ivr_hold", "tier": HIGH,
     "pattern": r"please hold.{0,60}next available (?:agent|representative|team member)", "topic": "hold message"},
    {"category": SYSTEM, "sub_category": "voicemail_greeting", "tier": HIGH,
     "pattern": r"(?:unable|not able|can't|cannot) (?:to )?take your call.{0,80}leave (?:a|your) (?:message|name)",
     "topic": "voicemail greeting"},
    {"category": SYSTEM, "sub_category": "test_call", "tier": HIGH, "weight": 0.95,
     "pattern": r"\bthis is (?:a|just a) test call\b|\btest call\b.{0,40}ringcentral", "topic": "test call"},
    {"category": SYSTEM, "sub_category": "platform_notice", "tier": HIGH,
     "pattern": r"callrail.{0,60}discontinu", "topic": "platform notice"},

    # --- job seekers ----------------------------------------------------------------
    {"category": OTHER_INQUIRY, "sub_category": "job_seeker", "tier": HIGH,
     "pattern": r"\bare you (?:guys )?(?:hiring|looking for (?:workers|help|laborers|carpenters))", "topic": "asking about hiring"},
    {"category": OTHER_INQUIRY, "sub_category": "job_seeker", "tier": HIGH,
     "pattern": r"\blooking for (?:work(?! (?:to be )?done| on\b| for (?:my|our|the)\b)|a job(?! done)|employment)\b", "topic": "looking for work"},
    {"category": OTHER_INQUIRY, "sub_category": "job_seeker", "tier": HIGH,
     "pattern": r"\bany (?:jobs?|work|positions?) (?:openings?|available)", "topic": "job opening"},
    {"category": OTHER_INQUIRY, "sub_category": "job_seeker", "tier": MEDIUM,
     "keywords": ["apprentice", "job application", "my resume", "helper position", "laborer position"], "topic": "employment"},

    # --- spam -------------------------------------------------------------------------
    {"category": SPAM, "sub_category": "google_listing", "tier": HIGH, "weight": 0.95,
     "pattern": r"important message.{0,80}google", "topic": "google listing message"},
    {"category": SPAM, "sub_category": "google_listing", "tier": HIGH, "weight": 0.93,
     "keywords": ["google"],
     "requires": ["listing", "my business", "business profile", "voice search", "maps", "verified",
                  "verification", "suspend", "showing up", "visible"],
     "topic": "google listing"},
    {"category": SPAM, "sub_category": "google_listing", "tier": MEDIUM,
     "keywords": ["digital activation", "pro directory", "trouble finding you", "status of your listing",
                  "properly verified", "optimized online", "keeping customers from finding"],
     "topic": "listing verification pitch"},
    {"category": SPAM, "sub_category": "robocall", "tier": HIGH,
     "pattern": r"\bpress (?:one|two|three|four|nine|zero|[0-9])\b", "topic": "press-key prompt"},
    {"category": SPAM, "sub_category": "robocall", "tier": HIGH,
     "keywords": ["emg listing", "866-202-2034", "homeowner inquiry", "inquiry details"], "topic": "robocall script"},
    {"category": SPAM, "sub_category": "robocall", "tier": MEDIUM,
     "pattern": r"\bopt[ -]?out\b|will remove you from", "topic": "opt out"},
    {"category": SPAM, "sub_category": "b2b_lending", "tier": HIGH,
     "keywords": ["small business lending", "line of credit", "pre-approved", "pre approved", "888-567-1880",
                  "go over your options", "working capital", "merchant cash advance", "sba loan", "google funding"],
     "topic": "business lending"},
    {"category": SPAM, "sub_category": "b2b_lending", "tier": MEDIUM,
     "pattern": r"business (?:loan|funding|financing)", "topic": "business financing"},
    {"category": SPAM, "sub_category": "quickbooks_scam", "tier": HIGH,
     "pattern": r"\b(?:quickbooks|intuit)\b",
     "requires": ["subscription", "charge", "renew", "payment decline", "suspend", "fico"],
     "topic": "quickbooks renewal"},
    {"category": SPAM, "sub_category": "b2b_sales", "tier": HIGH,
     "pattern": r"\bquickbooks\b", "requires": ["solutions provider", "third party", "integration"],
     "topic": "quickbooks reseller"},
    {"category": SPAM, "sub_category": "merchant_services", "tier": HIGH,
     "keywords": ["merchant service", "credit card processing", "payment processing"], "topic": "merchant services"},
    {"category": SPAM, "sub_category": "yelp_sales", "tier": MEDIUM,
     "keywords": ["yelp"], "topic": "yelp"},
    {"category": SPAM, "sub_category": "seo_sales", "tier": HIGH,
     "keywords": ["rank orbit", "prank orbit", "search engine optimization"], "topic": "seo pitch"},
    {"category": SPAM, "sub_category": "seo_sales", "tier": MEDIUM,
     "pattern": r"\bseo\b|first page of google|filling your pipeline|qualified (?:leads?|appointments?)", "topic": "lead generation"},
    {"category": SPAM, "sub_category": "workshop_sales", "tier": HIGH,
     "keywords": ["aspire institute", "business management workshop"], "topic": "workshop"},
    {"category": SPAM, "sub_category": "workshop_sales", "tier": MEDIUM,
     "pattern": r"\b(?:workshop|seminar|webinar)s?\b", "topic": "workshop"},
    {"category": SPAM, "sub_category": "staffing_sales", "tier": HIGH,
     "keywords": ["staffing", "hiring needs"], "topic": "staffing"},
    {"category": SPAM, "sub_category": "telemarketing", "tier": HIGH,
     "keywords": ["car warranty", "vehicle warranty", "extended warranty", "medicare", "life insurance",
                  "health insurance", "solar panel", "house call pro", "housecall pro", "healthcall pro"],
     "topic": "telemarketing"},
    {"category": SPAM, "sub_category": "b2b_sales", "tier": HIGH,
     "keywords": ["security services", "patrol coverage", "camera monitoring", "workers compensation",
                  "customized t-shirts", "customized t shirts", "office supplies", "ink and toner",
                  "united eagle", "service titan", "paygration", "newswire", "press release",
                  "estimating services", "estimation services", "cost estimation company", "outsource your estimat"],
     "topic": "b2b pitch"},
    {"category": SPAM, "sub_category": "media_pitch", "tier": HIGH,
     "keywords": ["modern home builders", "pre interview", "pre-interview"], "topic": "magazine feature"},
    {"category": SPAM, "sub_category": "newsletter_sales", "tier": MEDIUM,
     "keywords": ["newsletter"], "topic": "newsletter"},
    {"category": SPAM, "sub_category": "cold_call", "tier": HIGH,
     "pattern": r"is this the (?:business )?owner|for the business owner|who handles (?:your|the) (?:marketing|advertising|website)|claim notify|asset recovery",
     "topic": "owner cold call"},
    {"category": SPAM, "sub_category": "cold_call", "tier": MEDIUM,
     "pattern": r"speak (?:with|to) the (?:business )?(?:owner|manager|person in charge)|calling to speak (?:to|with) the person",
     "topic": "asking for owner"},
    {"category": SPAM, "sub_category": "cold_call", "tier": LOW,
     "keywords": ["sales rep", "business opportunity", "special offer", "limited time", "act now", "final notice",
                  "partnership opportunity"],
     "topic": "sales language"},

    # --- operations: vendors, crews, permits, bookkeeping --------------------------------
    {"category": OPERATIONS, "sub_category": "vendor_purchase", "tier": HIGH, "weight": 0.92,
     "keywords": ["home depot", "lowe's", "lowes", "ashby lumber", "westside building", "west side building",
                  "floor and decor", "floor & decor", "prosource"],
     "requires": ["phone sale", "pro desk", "purchase", "order", "card", "receipt", "pick up", "pickup", "paid", "charge"],
     "topic": "supplier purchase"},
    {"category": OPERATIONS, "sub_category": "vendor_purchase", "tier": MEDIUM,
     "keywords": ["home depot", "lowe's", "lowes", "ashby lumber", "floor and decor", "westside building"],
     "topic": "supplier"},
    {"category": OPERATIONS, "sub_category": "vendor_order", "tier": HIGH,
     "pattern": r"\b(?:your|the) order is ready\b|order (?:is )?ready for pick ?up|\bledding\b", "topic": "order ready"},
    {"category": OPERATIONS, "sub_category": "vendor_logistics", "tier": HIGH,
     "pattern": r"collect delivery instructions|drivers? making deliveries|amazon logistics", "topic": "delivery logistics"},
    {"category": OPERATIONS, "sub_category": "vendor_logistics", "tier": MEDIUM,
     "pattern": r"deliver\w*.{0,30}(?:your|the) (?:order|material)|dropped off.{0,30}(?:material|load|concrete)|\bdispatcher\b",
     "topic": "delivery"},
    {"category": OPERATIONS, "sub_category": "permit_inspection", "tier": HIGH,
     "pattern": r"calling from (?:the )?(?:city|county) of|(?:building|planning|fire) department|encroachment permit|fire district|plan check",
     "topic": "permit office"},
    {"category": OPERATIONS, "sub_category": "permit_inspection", "tier": MEDIUM,
     "pattern": r"\b(?:permit|inspection|inspector)s?\b", "topic": "permit"},
    {"category": OPERATIONS, "sub_category": "subcontractor_payment", "tier": HIGH,
     "pattern": r"subcontractor.{0,40}(?:check|payment)|(?:check|payment).{0,40}subcontractor", "topic": "sub payment"},
    {"category": OPERATIONS, "sub_category": "internal_accounting", "tier": HIGH,
     "keywords": ["bookkeeping", "bookkeeper", "accounts payable"], "topic": "bookkeeping"},
    {"category": OPERATIONS, "sub_category": "internal_accounting", "tier": MEDIUM,
     "pattern": r"\binvoice\b.{0,60}\bpa(?:y|id|yment)\b|\bpa(?:y|id|yment)\b.{0,60}\binvoice\b", "topic": "invoice"},
    {"category": OPERATIONS, "sub_category": "internal_payment", "tier": HIGH,
     "keywords": ["3% charge", "3 percent charge", "credit card fee"], "topic": "card fee"},
    {"category": OPERATIONS, "sub_category": "utility_coordination", "tier": HIGH,
     "pattern": r"\bpg ?&? ?e\b|\bp g e\b|pacific gas", "topic": "utility"},
    {"category": OPERATIONS, "sub_category": "vendor_service", "tier": HIGH,
     "keywords": ["ringcentral", "blueprint printing", "bpx printing"], "topic": "service vendor"},
    {"category": OPERATIONS, "sub_category": "crew_coordination", "tier": HIGH,
     "pattern": r"\b(?:the|our) crew (?:is|will be|was) (?:on site|there|at)|\bforeman\b.{0,40}\b(?:site|tomorrow)\b",
     "topic": "crew on site"},
    {"category": OPERATIONS, "sub_category": "crew_coordination", "tier": MEDIUM,
     "keywords": ["crew", "foreman", "job site", "jobsite", "group chat", "our group"], "topic": "crew"},
    {"category": OPERATIONS, "sub_category": "internal_coordination", "tier": MEDIUM,
     "keywords": ["whatsapp", "send me the pictures", "text me the address", "did you see the video"],
     "topic": "internal coordination"},
    {"category": OPERATIONS, "sub_category": "vendor_purchase", "tier": LOW,
     "pattern": r"\b(?:materials?|supplies|lumber)\b", "topic": "materials"},

    # --- other inquiries: not spam, not a lead -------------------------------------------
    {"category": OTHER_INQUIRY, "sub_category": "out_of_area", "tier": HIGH,
     "pattern": r"(?:don't|do not) (?:service|cover|work in|go to) (?:that|your|the) area|outside (?:of )?(?:our|the|your) service area|(?:that's|it's) too far",
     "topic": "outside service area"},
    {"category": OTHER_INQUIRY, "sub_category": "out_of_area", "tier": MEDIUM,
     "pattern": r"what (?:area|areas|city|cities) do you (?:cover|serve|work)|where are you (?:guys )?(?:located|based)",
     "topic": "service area question"},
    {"category": OTHER_INQUIRY, "sub_category": "vendor_seeking_work", "tier": HIGH,
     "keywords": ["storage container", "property damage company", "innodes engineering", "pureclean",
                  "heritage landscape", "imperial sprinkler", "irrigation distributor"],
     "topic": "vendor outreach"},
    {"category": OTHER_INQUIRY, "sub_category": "vendor_seeking_work", "tier": MEDIUM,
     "pattern": r"(?:we're|i'm|we are|i am) a (?:sub)?contractor|looking for (?:sub)?contract(?:ing)? work|add us to your (?:vendor|bid) list",
     "topic": "contractor seeking work"},
    {"category": OTHER_INQUIRY, "sub_category": "sign_inquiry", "tier": MEDIUM,
     "pattern": r"your (?:guys'? )?(?:sign|name) on (?:it|the)|asking about (?:the|your) sign|wondering about the property",
     "topic": "job-site sign"},
    {"category": OTHER_INQUIRY, "sub_category": "research_request", "tier": HIGH,
     "pattern": r"\bstudent\b.{0,80}\bresearch\b|\bresearch\b.{0,80}\bstudent\b|(?:survey|study) (?:about|on) (?:contractors|construction)",
     "topic": "research"},
    {"category": OTHER_INQUIRY, "sub_category": "general_question", "tier": LOW,
     "pattern": r"\bjust (?:wondering|curious)\b|are you (?:guys )?still (?:in business|open|working)|what (?:kind|type) of (?:work|company)",
     "topic": "general question"},

    # --- wrong numbers -----------------------------------------------------------------
    {"category": INCOMPLETE, "sub_category": "wrong_number", "tier": HIGH,
     "pattern": r"\bwrong (?:number|person)\b|no one (?:here )?by that name", "topic": "wrong number"},

    # --- customers: the business's own service catalogue ----------------------------------
    {"category": CUSTOMER, "sub_category": "bathroom_remodel", "tier": HIGH, "weight": 0.92,
     "pattern": r"bathroom.{0,40}(?:remodel|renovat)|(?:remodel|renovat)\w*.{0,40}bathroom", "topic": "bathroom remodel"},
    {"category": CUSTOMER, "sub_category": "kitchen_remodel", "tier": HIGH, "weight": 0.92,
     "pattern": r"kitchen.{0,40}(?:remodel|renovat)|(?:remodel|renovat)\w*.{0,40}kitchen", "topic": "kitchen remodel"},
    {"category": CUSTOMER, "sub_category": "adu_inquiry", "tier": HIGH, "weight": 0.92,
     "pattern": r"\badus?\b|accessory dwelling|granny unit|in-law unit|garage conversion|convert\w* (?:my|the|our) garage",
     "topic": "ADU"},
    {"category": CUSTOMER, "sub_category": "foundation_inquiry", "tier": HIGH,
     "pattern": r"foundation.{0,40}(?:repair|crack|problem|work|sinking|settl)", "topic": "foundation repair"},
    {"category": CUSTOMER, "sub_category": "concrete_inquiry", "tier": HIGH,
     "pattern": r"(?:concrete|cement|stamped).{0,40}(?:driveway|patio|slab|sidewalk|walkway|pad|steps)|(?:driveway|patio|slab|sidewalk|walkway)\b.{0,40}(?:concrete|cement)",
     "topic": "concrete work"},
    {"category": CUSTOMER, "sub_category": "concrete_inquiry", "tier": MEDIUM,
     "pattern": r"\b(?:concrete|cement|driveway|patio|slab|sidewalk|walkway|pool deck)s?\b", "topic": "concrete"},
    {"category": CUSTOMER, "sub_category": "foundation_inquiry", "tier": MEDIUM,
     "pattern": r"\bfoundations?\b", "topic": "foundation"},
    {"category": CUSTOMER, "sub_category": "drainage_inquiry", "tier": HIGH,
     "pattern": r"french drain|drainage (?:system|issue|problem)|water (?:in|pooling in|coming into) (?:my|the) (?:yard|backyard|basement|crawl ?space)",
     "topic": "drainage"},
    {"category": CUSTOMER, "sub_category": "drainage_inquiry", "tier": MEDIUM,
     "pattern": r"\bdrainage\b|waterproof", "topic": "drainage"},
    {"category": CUSTOMER, "sub_category": "waterproofing_inquiry", "tier": HIGH,
     "keywords": ["wine cellar", "below grade", "water enters"], "topic": "water intrusion"},
    {"category": CUSTOMER, "sub_category": "retaining_wall", "tier": HIGH,
     "keywords": ["retaining wall", "garden wall"], "topic": "retaining wall"},
    {"category": CUSTOMER, "sub_category": "roof_inquiry", "tier": HIGH,
     "pattern": r"roof.{0,30}(?:leak|repair|replace)", "topic": "roofing"},
    {"category": CUSTOMER, "sub_category": "exterior_inquiry", "tier": MEDIUM,
     "pattern": r"(?:replac|repair|install)\w*.{0,30}\b(?:windows?|doors?|siding)\b|\b(?:windows?|doors?|siding)\b.{0,30}(?:replac|repair|install)",
     "topic": "windows/doors/siding"},
    {"category": CUSTOMER, "sub_category": "fire_damage", "tier": HIGH,
     "pattern": r"fire damage|fire.{0,30}(?:rebuild|restoration)", "topic": "fire damage"},
    {"category": CUSTOMER, "sub_category": "accessibility_inquiry", "tier": HIGH,
     "pattern": r"grab bars?", "topic": "grab bars"},
    {"category": CUSTOMER, "sub_category": "inspection_inquiry", "tier": HIGH,
     "pattern": r"balcony.{0,40}(?:inspection|repair)", "topic": "balcony"},
    {"category": CUSTOMER, "sub_category": "houzz_lead", "tier": HIGH,
     "keywords": ["houzz"], "topic": "houzz"},
    {"category": CUSTOMER, "sub_category": "estimate_request", "tier": HIGH,
     "pattern": r"(?:come out|schedule).{0,60}\b(?:quote|estimate|bid)\b|\b(?:quote|estimate|bid)\b.{0,60}(?:come out|schedule)",
     "topic": "site visit estimate"},
    {"category": CUSTOMER, "sub_category": "estimate_request", "tier": MEDIUM,
     "pattern": r"\b(?:quote|estimate|bid)s?\b|how much (?:would|does|will) it cost", "topic": "estimate"},
    {"category": CUSTOMER, "sub_category": "scheduling", "tier": HIGH,
     "pattern": r"(?:confirm|reschedul|schedul)\w* (?:my |the |an |our )?(?:appointment|consultation|site visit)",
     "topic": "appointment"},
    {"category": CUSTOMER, "sub_category": "followup", "tier": MEDIUM,
     "pattern": r"calling back about|following up on (?:my|the|our) (?:project|estimate|quote|appointment)|called earlier about",
     "topic": "follow-up"},
    {"category": CUSTOMER, "sub_category": "general_inquiry", "tier": MEDIUM,
     "pattern": r"do you (?:guys )?(?:do|work on|handle)\b|(?:remodel|renovation|repair)s?\b", "topic": "service question"},
    {"category": CUSTOMER, "sub_category": "voicemail_inquiry", "tier": LOW,
     "pattern": r"call me back|give me a call|return my call", "topic": "callback request"},
    {"category": CUSTOMER, "sub_category": "general_inquiry", "tier": LOW,
     "keywords": ["my house", "my home", "my property", "my backyard", "address is", "project", "square feet"],
     "topic": "property"},
]
