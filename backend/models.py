# backend/models.py
"""
Value types shared by the ledger, the store and the HTTP layer.
"""
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Hashable, Tuple

from errors import InvalidRoster, UnsupportedSplitPolicy
from money import Money


class SplitPolicy(str, Enum):
    EQUAL = "EQUAL"
    PERCENT = "PERCENT"  # reserved, not computed yet

    @classmethod
    def coerce(cls, value):
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().upper())
        except ValueError:
            raise UnsupportedSplitPolicy(f"Split policy {value!r} is not supported", policy=value)


@dataclass(frozen=True)
class Group:
    """A named roster of member ids. Order is kept for display and tie-breaks."""
    id: str
    name: str
    members: Tuple[Hashable, ...]

    def __post_init__(self):
        object.__setattr__(self, "members", tuple(self.members))
        if not self.members:
            raise InvalidRoster("A group needs at least one member", group=self.id)
        seen = set()
        for m in self.members:
            if m in seen:
                raise InvalidRoster(f"Member {m!r} appears twice in the roster", group=self.id, member=m)
            seen.add(m)

    def has_member(self, member):
        return member in self.members

    def to_dict(self):
        return {"id": self.id, "name": self.name, "members": list(self.members)}


@dataclass(frozen=True)
class Share:
    member: Hashable
    amount: Money

    def to_dict(self):
        return {"member": self.member, "share": str(self.amount)}


@dataclass(frozen=True)
class Expense:
    """A recorded expense. Never changed after creation except for ``active``."""
    id: str
    group_id: str
    payer: Hashable
    total: Money
    shares: Tuple[Share, ...]
    policy: SplitPolicy = SplitPolicy.EQUAL
    description: str = ""
    active: bool = True
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def participants(self):
        return [s.member for s in self.shares]

    def to_dict(self):
        return {
            "id": self.id,
            "groupId": self.group_id,
            "paidBy": self.payer,
            "totalAmount": str(self.total),
            "splitType": self.policy.value,
            "participants": [s.to_dict() for s in self.shares],
            "description": self.description,
            "isActive": self.active,
            "createdAt": self.created_at.isoformat(),
        }


@dataclass(frozen=True)
class Transfer:
    debtor: Hashable
    creditor: Hashable
    amount: Money

    def describe(self):
        return f"{self.debtor} owes {self.creditor} ${self.amount}"

    def to_dict(self):
        return {"from": self.debtor, "to": self.creditor, "amount": str(self.amount)}


def balances_to_dict(balances) -> dict:
    return {str(member): str(amount) for member, amount in balances.items()}
