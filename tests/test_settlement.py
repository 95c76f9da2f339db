import random

import pytest

from errors import UnbalancedLedger
from money import Money
from settlement import plan_settlements


def _balances(**amounts):
    return {name: Money.parse(value) for name, value in amounts.items()}


def _replay(balances, transfers):
    remaining = dict(balances)
    for t in transfers:
        remaining[t.debtor] = remaining[t.debtor] + t.amount
        remaining[t.creditor] = remaining[t.creditor] - t.amount
    return remaining


def test_three_way_scenario():
    plan = plan_settlements(_balances(A="66.66", B="-33.33", C="-33.33"))
    assert [t.describe() for t in plan] == ["B owes A $33.33", "C owes A $33.33"]


def test_single_pair_is_one_transfer():
    plan = plan_settlements(_balances(A="-12.00", B="12.00"))
    assert len(plan) == 1
    assert plan[0].to_dict() == {"from": "A", "to": "B", "amount": "12.00"}


def test_settled_group_has_no_transfers():
    assert plan_settlements(_balances(A="0.00", B="0.00")) == []
    assert plan_settlements({}) == []


def test_largest_amounts_are_matched_first():
    plan = plan_settlements(_balances(A="50.00", B="10.00", C="-10.00", D="-50.00"))
    assert [(t.debtor, t.creditor, str(t.amount)) for t in plan] == [
        ("D", "A", "50.00"),
        ("C", "B", "10.00"),
    ]


def test_ties_break_by_member_id():
    plan = plan_settlements(_balances(Z="10.00", Y="10.00", B="-10.00", A="-10.00"))
    assert [(t.debtor, t.creditor) for t in plan] == [("A", "Y"), ("B", "Z")]


def test_unbalanced_input_is_reported(caplog):
    with pytest.raises(UnbalancedLedger) as exc:
        plan_settlements(_balances(A="10.00", B="-9.99"))
    assert exc.value.context["residual"] == Money.parse("0.01")
    assert "do not sum to zero" in caplog.text


@pytest.mark.parametrize("seed", range(25))
def test_random_plans_settle_everything(seed):
    rng = random.Random(seed)
    names = [f"p{i}" for i in range(rng.randint(2, 15))]
    minors = [rng.randint(-100_000, 100_000) for _ in names[:-1]]
    minors.append(-sum(minors))
    balances = {n: Money(m) for n, m in zip(names, minors)}

    plan = plan_settlements(balances)

    assert all(t.amount.is_positive() for t in plan)
    assert all(a.is_zero() for a in _replay(balances, plan).values())
    parties = sum(1 for a in balances.values() if not a.is_zero())
    assert len(plan) <= max(parties - 1, 0)
