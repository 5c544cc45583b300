"""Domain-level exceptions.

Every rule violation is a subclass of DomainException so the CLI layer can
catch them uniformly and display user-friendly messages.

``SetupError`` is only raised while a policy or purchase handler is being
built.  ``PurchaseError`` is only raised while a purchase is being made.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""


class SetupError(DomainException):
    """The purchase handler was wired with a malformed policy or collaborator."""


class InvalidPolicyError(SetupError):
    """A ticket policy violates one of its invariants."""


class PurchaseError(DomainException):
    """A purchase request was rejected or could not be completed."""


class CollaboratorError(PurchaseError):
    """An external service failed while a purchase was being completed.

    The original exception is kept on ``original`` and as ``__cause__``.
    """

    def __init__(self, collaborator: str, original: BaseException) -> None:
        super().__init__(f"{collaborator} failed: {original}")
        self.collaborator = collaborator
        self.original = original
