from calltriage.core.confidence import CATEGORY_SCALING, aggregate
from calltriage.core.models import CUSTOMER, SPAM
from calltriage.core.rules import rule_from_dict

def _rule(sub, tier="high", **kw):
    return rule_from_dict(dict(category=SPAM, sub_category=sub, tier=tier, keywords=[sub], **kw))

def test_empty_matches():
    assert aggregate([], SPAM) == (0.0, None)

def test_base_plus_increment():
    conf, best = aggregate([_rule("a")], SPAM)
    assert conf == 0.90 and best.sub_category == "a"
    conf, _ = aggregate([_rule("a"), _rule("b", "low"), _rule("c", "medium")], SPAM)
    assert conf == 0.96

def test_ceiling_is_never_exceeded():
    inc, ceiling = CATEGORY_SCALING[SPAM]
    conf, _ = aggregate([_rule(str(i)) for i in range(20)], SPAM)
    assert conf == ceiling
    assert all(c < 1.0 for _, c in CATEGORY_SCALING.values())

def test_more_high_matches_never_lower_confidence():
    rules = [_rule(str(i)) for i in range(6)]
    scores = [aggregate(rules[:n], CUSTOMER)[0] for n in range(1, 7)]
    assert scores == sorted(scores)

def test_strongest_rule_sets_sub_category():
    conf, best = aggregate([_rule("medium_one", "medium"), _rule("strong", weight=0.95)], SPAM)
    assert best.sub_category == "strong"
    assert conf == 0.98

def test_ties_go_to_catalogue_order():
    _, best = aggregate([_rule("first"), _rule("second")], SPAM)
    assert best.sub_category == "first"
