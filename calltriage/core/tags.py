from typing import List, Dict

# Service vocabulary of the business; used to enrich key topics, never to pick a category.
TOPIC_KEYWORDS: Dict[str, List[str]] = {
    "concrete": ["concrete", "cement", "driveway", "patio", "slab", "sidewalk", "walkway", "pool deck", "stamped"],
    "foundation": ["foundation", "crawl space", "crawlspace", "settling", "sinking"],
    "remodeling": ["remodel", "renovat", "bathroom", "kitchen", "shower", "tile", "cabinet"],
    "adu": ["adu", "accessory dwelling", "granny unit", "in-law unit", "garage conversion"],
    "drainage": ["drain", "drainage", "waterproof", "flooding", "water pooling", "gutter"],
    "exterior": ["roof", "siding", "window", "door", "deck", "fence", "retaining wall", "balcony"],
    "estimate": ["estimate", "quote", "bid", "price", "cost", "how much"],
    "appointment": ["appointment", "schedule", "come out", "site visit", "consultation", "tomorrow"],
    "permit": ["permit", "inspection", "inspector", "city of", "plan check"],
    "payment": ["invoice", "payment", "paid", "check", "deposit", "$"],
}

def tag_text(text: str) -> List[str]:
    t = text.lower() if isinstance(text, str) else ""
    out = set()
    for topic, kws in TOPIC_KEYWORDS.items():
        for k in kws:
            if k in t:
                out.add(topic)
                break
    return sorted(out)
