from typing import Dict, Optional, Sequence, Tuple

from .models import CUSTOMER, INCOMPLETE, OPERATIONS, OTHER_INQUIRY, SPAM, SYSTEM
from .rules import PatternRule

# category -> (increment per extra corroborating match, ceiling)
CATEGORY_SCALING: Dict[str, Tuple[float, float]] = {
    SPAM: (0.03, 0.98),
    OPERATIONS: (0.04, 0.95),
    CUSTOMER: (0.04, 0.95),
    OTHER_INQUIRY: (0.05, 0.90),
    SYSTEM: (0.02, 0.97),
    INCOMPLETE: (0.05, 0.90),
}

def strongest(matches: Sequence[PatternRule]) -> Optional[PatternRule]:
    """Highest-weight match; the earliest in catalogue order wins a tie."""
    best = None
    for rule in matches:
        if best is None or rule.weight > best.weight:
            best = rule
    return best

def aggregate(matches: Sequence[PatternRule], category: str) -> Tuple[float, Optional[PatternRule]]:
    """Confidence for ``category`` from its matched rules, plus the rule that sets the sub-category.

    confidence = min(ceiling, base + increment * (n - 1)), base being the
    strongest matched weight. No matches gives 0.0.
    """
    best = strongest(matches)
    if best is None:
        return 0.0, None
    increment, ceiling = CATEGORY_SCALING.get(category, (0.0, 0.90))
    confidence = min(ceiling, best.weight + increment * (len(matches) - 1))
    return round(confidence, 4), best
