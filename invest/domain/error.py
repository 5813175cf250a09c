"""Domain layer errors.

Every domain error carries a machine-readable ``kind`` next to its message so
the interface layer can map it without string matching.
"""


class DomainError(Exception):
    """Base domain error."""

    kind = "domain_error"

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ValidationError(DomainError):
    """Domain validation error."""

    kind = "validation"


class BusinessRuleViolationError(DomainError):
    """Business rule violation error."""

    kind = "business_rule_violation"


class ForbiddenError(DomainError):
    """Raised when the caller lacks the role or ownership an operation needs."""

    kind = "forbidden"


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    kind = "not_found"

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class InvalidTransitionError(BusinessRuleViolationError):
    """Raised when a status change is not allowed from the current status."""

    kind = "invalid_transition"

    def __init__(self, resource: str, current: str, target: str):
        self.resource = resource
        self.current = current
        self.target = target
        super().__init__(f"Cannot move {resource} from '{current}' to '{target}'")
