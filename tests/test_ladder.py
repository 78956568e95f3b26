from domain.ladder import LADDER, lookup


def test_zero_score_is_first_rung():
    assert lookup(0) == LADDER[0]
    assert lookup(0.0).label == "TA3BENNN"


def test_huge_score_is_last_rung():
    assert lookup(1e9) == LADDER[-1]
    assert lookup(1e9).price == 25.0


def test_below_first_threshold_falls_back_to_first_rung():
    assert lookup(-1.0) == LADDER[0]


def test_floor_lookup_between_thresholds():
    row = lookup(1.35)
    assert row.threshold == 1.2
    assert row.price == 3.0
    assert lookup(2.0).label == "Starter"
    assert lookup(2.19).label == "Starter"


def test_price_is_non_decreasing_with_score():
    scores = [i / 100 for i in range(0, 601)]
    prices = [lookup(s).price for s in scores]
    assert prices == sorted(prices)


def test_each_tier_is_priced_above_all_lower_tiers():
    thresholds = [r.threshold for r in LADDER]
    assert thresholds == sorted(thresholds)
    for lower, upper in zip(LADDER, LADDER[1:]):
        assert upper.price > lower.price
