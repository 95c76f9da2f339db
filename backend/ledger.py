# backend/ledger.py

from errors import UnknownMember
from money import Money


def compute_balances(roster, expenses, digits=None):
    """
    Net position of every roster member over the active expenses.
    Positive means the group owes them, negative means they owe the group.
    """
    balances = {member: Money.zero(digits) for member in roster}

    for expense in expenses:
        if not expense.active:
            continue

        if expense.payer not in balances:
            raise UnknownMember(
                f"Payer {expense.payer} is not a member of the group",
                member=expense.payer, expense=expense.id,
            )
        balances[expense.payer] = balances[expense.payer] + expense.total

        for share in expense.shares:
            if share.member not in balances:
                raise UnknownMember(
                    f"Participant {share.member} is not a member of the group",
                    member=share.member, expense=expense.id,
                )
            balances[share.member] = balances[share.member] - share.amount

    return balances
