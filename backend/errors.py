# backend/errors.py


class LedgerError(Exception):
    """Base for every failure the ledger reports to its callers.

    ``status_code`` is what the HTTP layer answers with; ``context`` carries
    the offending member, amount or policy so a readable message can be built.
    """

    status_code = 400

    def __init__(self, message, **context):
        super().__init__(message)
        self.message = message
        self.context = context

    def to_dict(self):
        payload = {"error": type(self).__name__, "message": self.message}
        payload.update({k: str(v) for k, v in self.context.items()})
        return payload


class BadRequest(LedgerError):
    pass


class InvalidAmount(LedgerError):
    pass


class InvalidParticipants(LedgerError):
    pass


class DuplicateParticipant(LedgerError):
    pass


class UnsupportedSplitPolicy(LedgerError):
    pass


class InvalidRoster(LedgerError):
    pass


class UnknownMember(LedgerError):
    pass


class UnbalancedLedger(LedgerError):
    # Upstream data is corrupt, not a client mistake
    status_code = 500


class NotFound(LedgerError):
    status_code = 404


class Conflict(LedgerError):
    status_code = 409
