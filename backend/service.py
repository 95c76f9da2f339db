# backend/service.py

import logging
import uuid

from errors import BadRequest, InvalidParticipants, UnknownMember
from ledger import compute_balances
from models import Expense, Share, SplitPolicy
from money import Money
from settlement import plan_settlements
from splits import compute_shares

logger = logging.getLogger(__name__)


class LedgerService:
    """Ties the pure ledger functions to a store."""

    def __init__(self, store):
        self.store = store

    def create_group(self, name, members):
        group = self.store.create_group(name, members)
        logger.info("Created group %s with %d members", group.id, len(group.members))
        return group

    def get_group(self, group_id):
        return self.store.fetch_group(group_id)

    def list_expenses(self, group_id):
        return self.store.fetch_active_expenses(group_id)

    def create_expense(self, group_id, payer, total_amount, participants,
                       policy=SplitPolicy.EQUAL, description=""):
        group = self.store.fetch_group(group_id)
        participants = list(participants)
        total = total_amount if isinstance(total_amount, Money) else Money.parse(total_amount)

        if not group.has_member(payer):
            raise UnknownMember("The person who paid is not a member of the group", member=payer)
        for member in participants:
            if not group.has_member(member):
                raise UnknownMember("Participant not in the group", member=member)

        shares = compute_shares(total, participants, policy)
        expense = Expense(
            id=uuid.uuid4().hex,
            group_id=group.id,
            payer=payer,
            total=total,
            shares=tuple(Share(member, amount) for member, amount in shares),
            policy=SplitPolicy.coerce(policy),
            description=description or "",
        )
        self.store.insert_expense(expense)
        logger.info("Recorded expense %s in group %s: %s paid %s", expense.id, group.id, payer, total)
        return expense

    def delete_expense(self, group_id, expense_id):
        expense = self.store.deactivate_expense(group_id, expense_id)
        logger.info("Deactivated expense %s in group %s", expense_id, group_id)
        return expense

    def get_balances(self, group_id):
        group = self.store.fetch_group(group_id)
        return compute_balances(group.members, self.store.fetch_active_expenses(group_id))

    def get_settlements(self, group_id):
        return plan_settlements(self.get_balances(group_id))


def quick_settle(entries):
    """
    Settle a list of ad-hoc ``{payer, amount, involved}`` entries without
    storing anything. The roster is every name mentioned, in first-seen order.
    """
    roster = []
    expenses = []
    for i, item in enumerate(entries):
        payer = item["payer"]
        involved = item["involved"]
        if not isinstance(involved, list):
            raise BadRequest("involved must be a list of names", expense=i)
        if not involved:
            raise InvalidParticipants("An expense needs at least one participant", expense=i)
        for name in [payer] + involved:
            if name not in roster:
                roster.append(name)
        total = Money.parse(item["amount"])
        shares = compute_shares(total, involved)
        expenses.append(Expense(
            id=str(i),
            group_id="",
            payer=payer,
            total=total,
            shares=tuple(Share(member, amount) for member, amount in shares),
        ))
    return plan_settlements(compute_balances(roster, expenses))
