# backend/settlement.py

import heapq
import logging

from errors import UnbalancedLedger
from models import Transfer
from money import Money

logger = logging.getLogger(__name__)


def plan_settlements(balances):
    """
    Turn net balances into the transfers that settle them.

    Greedy matching: the largest creditor is always paired with the largest
    debtor, ties go to the member id that sorts first. Every step clears at
    least one side, so the plan has at most (#creditors + #debtors - 1)
    transfers.
    """
    if not balances:
        return []

    total = sum(balances.values())
    if not total.is_zero():
        logger.error("Balances do not sum to zero (residual %s): %s", total,
                     {str(m): str(a) for m, a in balances.items()})
        raise UnbalancedLedger(f"Balances are off by {total}", residual=total)

    # 1. Separate Debtors and Creditors
    # heap entries: (-remaining minor units, tie-break key, member)
    creditors = []
    debtors = []
    for person, amount in balances.items():
        if amount.is_positive():
            creditors.append((-amount.minor, str(person), person))
        elif amount.is_negative():
            debtors.append((amount.minor, str(person), person))
    heapq.heapify(creditors)
    heapq.heapify(debtors)

    # 2. Match them up
    digits = total.digits
    settlements = []
    while creditors and debtors:
        credit, ckey, creditor = heapq.heappop(creditors)
        debt, dkey, debtor = heapq.heappop(debtors)

        amount = min(-credit, -debt)
        settlements.append(Transfer(debtor, creditor, Money(amount, digits)))

        if -credit > amount:
            heapq.heappush(creditors, (credit + amount, ckey, creditor))
        if -debt > amount:
            heapq.heappush(debtors, (debt + amount, dkey, debtor))

    return settlements
