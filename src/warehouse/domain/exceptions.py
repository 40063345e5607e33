"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class InvalidGtin(ValidationError):
    """The given value is not a well-formed GTIN."""

    def __init__(self, message: str = "The given data was invalid.") -> None:
        super().__init__(message)


class ImmutableFieldMutation(ValidationError):
    """An identity field of an order line was about to change."""

    def __init__(self, message: str = "An order line can not be updated.") -> None:
        super().__init__(message)


class IllegalDeleteForOrderStatus(ValidationError):
    """The owning order's status does not allow removing lines."""

    def __init__(self, message: str = "This order line can not be deleted.") -> None:
        super().__init__(message)


class LineNotFulfilledForReplace(ValidationError):
    """Only a line paired to an inventory unit can be replaced."""

    def __init__(self, message: str = "This order line can not be replaced.") -> None:
        super().__init__(message)


class IllegalStatusTransition(ValidationError):
    """The order status machine does not allow the requested move."""


class PairingConflict(DomainException):
    """Another writer claimed a pairing candidate first.

    Transient: the work item that hit it is requeued, never shown to a user.
    """
