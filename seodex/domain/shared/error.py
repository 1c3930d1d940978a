"""Error hierarchy for seodex.

Error layers:
- SeodexError: Base class for all seodex errors
- DomainError: Business rule violations, ineligible builds, validation failures
- InfrastructureError: System-level failures like storage or configuration issues

The CLI maps SeodexError to a printed message and a non-zero exit code.
Failures raised by port adapters (SQLAlchemy errors etc.) are not wrapped here.
"""


class SeodexError(Exception):
    """Base class for all seodex errors."""

    def __init__(self, message: str, code: str | None = None) -> None:
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(message)


# =============================================================================
# Domain Errors (business logic violations)
# =============================================================================


class DomainError(SeodexError):
    """Base class for domain/business errors."""


class NotFoundError(DomainError):
    """Resource not found."""


class ValidationError(DomainError):
    """Input validation failed."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message, code="VALIDATION_ERROR")
        self.field = field


class NotEligibleError(DomainError):
    """An indexable should not be built for the given entity.

    Callers must skip persistence when this is raised.
    """

    def __init__(self, message: str, entity_id: int) -> None:
        super().__init__(message, code="NOT_ELIGIBLE")
        self.entity_id = entity_id

    @property
    def reason(self) -> str:
        return self.message


# =============================================================================
# Infrastructure Errors (system-level failures)
# =============================================================================


class InfrastructureError(SeodexError):
    """Base class for infrastructure/system errors."""


class ConfigurationError(InfrastructureError):
    """System misconfiguration detected."""
