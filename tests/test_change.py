import pytest

from change import DENOMINATIONS, ChangeMaker, denomination_label


def _min_coins(limit):
    best = [0] + [None] * limit
    for amount in range(1, limit + 1):
        best[amount] = min(best[amount - d] for d in DENOMINATIONS if d <= amount) + 1
    return best


def test_checkout_example():
    assert ChangeMaker().breakdown(387) == [
        (200, 1), (100, 1), (50, 1), (20, 1), (10, 1), (5, 1), (2, 1)
    ]


def test_zero_gives_empty_breakdown():
    assert ChangeMaker().breakdown(0) == []


def test_negative_amount_rejected():
    with pytest.raises(ValueError):
        ChangeMaker().breakdown(-1)


def test_breakdown_is_exact_and_minimal():
    maker = ChangeMaker()
    reference = _min_coins(10000)
    for amount in range(0, 10001):
        breakdown = maker.breakdown(amount)
        assert sum(d * n for d, n in breakdown) == amount
        assert sum(n for _, n in breakdown) == reference[amount]
        denoms = [d for d, _ in breakdown]
        assert denoms == sorted(denoms, reverse=True)
        assert all(n > 0 for _, n in breakdown)


def test_large_amounts_use_top_denomination():
    assert ChangeMaker().breakdown(1000) == [(200, 5)]


@pytest.mark.parametrize(
    "value, label",
    [(200, "£2"), (100, "£1"), (50, "50p"), (5, "5p"), (1, "1p")],
)
def test_denomination_label(value, label):
    assert denomination_label(value) == label
