"""Batch roll-up of classification results.

Everything here is plain counting, so merging reports from several batches
is just adding their counters.
"""
import re
from collections import Counter, defaultdict
from typing import Any, Dict, List, Sequence

import numpy as np

from .callstore import CallStore
from .models import CATEGORIES, CUSTOMER, HIGH, INCOMPLETE, LOW, MEDIUM, SPAM, ClassificationResult

HISTOGRAM_BINS = 10

MONTH_RE = re.compile(r"^(\d{4}-\d{2})")

def _rate(part: int, whole: int) -> float:
    return round(part / whole, 4) if whole else 0.0

def month_of(start_time: str) -> str:
    m = MONTH_RE.match(start_time or "")
    return m.group(1) if m else "unknown"

def confidence_histogram(confidences: Sequence[float]) -> Dict[str, List]:
    counts, edges = np.histogram(np.asarray(confidences, dtype=float), bins=HISTOGRAM_BINS, range=(0.0, 1.0))
    return {"edges": [round(float(e), 2) for e in edges], "counts": [int(c) for c in counts]}

def build_report(results: Sequence[ClassificationResult], store: CallStore) -> Dict[str, Any]:
    by_category = Counter(r.category for r in results)
    by_sub = defaultdict(Counter)
    conf_sum = defaultdict(float)
    levels = Counter()
    reasons = Counter()
    by_direction = Counter()
    sources = defaultdict(Counter)
    months = defaultdict(Counter)
    inbound = inbound_spam = 0
    missed_leads = []

    for r in results:
        by_sub[r.category][r.sub_category] += 1
        conf_sum[r.category] += r.confidence
        levels[r.confidence_level] += 1
        if r.category == INCOMPLETE:
            reasons[r.sub_category] += 1
        call = store.call(r.call_id)
        if call is None:
            continue
        by_direction[call.direction] += 1
        month = months[month_of(call.start_time)]
        month["total"] += 1
        month[r.category] += 1
        src = sources[call.source or "unknown"]
        src["total"] += 1
        if r.category in (CUSTOMER, SPAM):
            src[r.category] += 1
        if call.direction == "inbound":
            inbound += 1
            if r.category == SPAM:
                inbound_spam += 1
        if r.category == CUSTOMER and call.answered is False:
            missed_leads.append(r.call_id)

    return {
        "total": len(results),
        "by_category": {c: by_category.get(c, 0) for c in CATEGORIES},
        "by_sub_category": {c: dict(sorted(by_sub[c].items())) for c in sorted(by_sub)},
        "by_direction": dict(sorted(by_direction.items())),
        "avg_confidence": {c: round(conf_sum[c] / by_category[c], 4) for c in sorted(by_category)},
        "confidence_levels": {lvl: levels.get(lvl, 0) for lvl in (HIGH, MEDIUM, LOW)},
        "confidence_histogram": confidence_histogram([r.confidence for r in results]),
        "incomplete_reasons": dict(reasons.most_common()),
        "by_source": {
            name: {
                "total": c["total"],
                "customer": c[CUSTOMER],
                "spam": c[SPAM],
                "conversion_rate": _rate(c[CUSTOMER], c["total"]),
            }
            for name, c in sorted(sources.items())
        },
        "by_month": {
            name: {
                "total": c["total"],
                "by_category": {cat: c[cat] for cat in CATEGORIES if c[cat]},
                "spam_rate": _rate(c[SPAM], c["total"]),
            }
            for name, c in sorted(months.items())
        },
        "spam_rate_inbound": _rate(inbound_spam, inbound),
        "missed_customer_leads": missed_leads,
    }
