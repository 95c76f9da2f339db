# backend/splits.py

from errors import DuplicateParticipant, InvalidAmount, InvalidParticipants, UnsupportedSplitPolicy
from models import SplitPolicy


def compute_shares(total, participants, policy=SplitPolicy.EQUAL):
    """
    Work out what each participant owes for an expense of ``total``.
    Returns a list of (member, Money) pairs in the same order as
    ``participants``. The amounts always add up to ``total`` exactly.
    """
    policy = SplitPolicy.coerce(policy)
    participants = list(participants)

    if not total.is_positive():
        raise InvalidAmount(f"Amount of this expense is invalid: {total}", amount=total)
    if not participants:
        raise InvalidParticipants("An expense needs at least one participant")

    seen = set()
    for member in participants:
        if member in seen:
            raise DuplicateParticipant(f"Duplicate participant found: {member}", member=member)
        seen.add(member)

    if policy is SplitPolicy.EQUAL:
        return list(zip(participants, total.divide_evenly(len(participants))))

    # PERCENT would also need percentages that add up to 100
    raise UnsupportedSplitPolicy(f"Split policy {policy.value} is not supported yet", policy=policy.value)
