# backend/store.py
"""
In-memory persistence for groups and expenses.

Every mutation runs under one lock so a reader never sees a half-written
expense, and the duplicate check plus the insert happen as one step.
"""
import dataclasses
import threading
import uuid

from errors import Conflict, NotFound
from models import Expense, Group


class MemoryStore:

    def __init__(self):
        self._lock = threading.Lock()
        self._groups = {}
        self._expenses = {}  # group id -> list of Expense, oldest first

    def create_group(self, name, members):
        group = Group(id=uuid.uuid4().hex, name=name, members=tuple(members))
        with self._lock:
            self._groups[group.id] = group
            self._expenses[group.id] = []
        return group

    def fetch_group(self, group_id):
        with self._lock:
            group = self._groups.get(group_id)
        if group is None:
            raise NotFound("Group not found", group=group_id)
        return group

    def fetch_active_expenses(self, group_id):
        """Active expenses of a group, newest first."""
        with self._lock:
            if group_id not in self._expenses:
                raise NotFound("Group not found", group=group_id)
            return [e for e in reversed(self._expenses[group_id]) if e.active]

    def insert_expense(self, expense):
        with self._lock:
            if expense.group_id not in self._expenses:
                raise NotFound("Group not found", group=expense.group_id)
            for existing in self._expenses[expense.group_id]:
                if existing.active and _same_expense(existing, expense):
                    raise Conflict("Expense already exists", expense=existing.id)
            self._expenses[expense.group_id].append(expense)
        return expense

    def deactivate_expense(self, group_id, expense_id):
        with self._lock:
            expenses = self._expenses.get(group_id)
            if expenses is None:
                raise NotFound("Group not found", group=group_id)
            for i, existing in enumerate(expenses):
                if existing.id == expense_id and existing.active:
                    expenses[i] = dataclasses.replace(existing, active=False)
                    return expenses[i]
        raise NotFound("Expense not found", group=group_id, expense=expense_id)


def _same_expense(a: Expense, b: Expense) -> bool:
    return (
        a.payer == b.payer
        and a.total == b.total
        and set(a.participants) == set(b.participants)
    )
