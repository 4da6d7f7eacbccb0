"""
Error taxonomy for ballot operations.

Every error is a caller-input or sequencing problem: it is raised before any
state is touched and is never retried internally. ``status_code`` is the HTTP
status the web layer answers with.
"""


class BallotError(Exception):
    """Base error for rejected ballot operations."""

    status_code = 400

    @property
    def kind(self) -> str:
        return type(self).__name__

    @property
    def detail(self) -> str:
        return str(self) or self.kind


class PhaseMismatch(BallotError):
    """Raised when an operation is invoked outside its required phase."""

    status_code = 409

    def __init__(self, expected, current):
        self.expected = expected
        self.current = current
        super().__init__(
            f"operation requires phase {expected.name}, current phase is {current.name}"
        )


class Unauthorized(BallotError):
    """Raised when a caller lacks the capability an operation needs."""

    status_code = 403


class NotAuthorized(Unauthorized):
    """Raised when an address that was never whitelisted tries to register."""


class NotRegistered(BallotError):
    status_code = 403


class AlreadyVoted(BallotError):
    status_code = 409


class HasNotVoted(BallotError):
    status_code = 409


class OutOfRange(BallotError):
    """Raised for an unknown proposal index or an invalid target phase."""

    status_code = 404


class InvalidAddress(BallotError):
    status_code = 422


class AlreadyAuthorized(BallotError):
    status_code = 409


class EmptyDescription(BallotError):
    status_code = 422


class NoProposals(BallotError):
    status_code = 404


class CounterUnderflow(BallotError):
    """Raised if a vote counter would drop below zero."""

    status_code = 500
