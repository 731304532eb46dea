"""Custom domain exceptions for the application."""

# Generic message reported to API consumers for any unhandled failure.
INTERNAL_ERROR = "Internal server error"


class DomainError(Exception):
    """Base exception for domain/business logic errors."""

    pass


class PolicyStoreError(DomainError):
    """Raised when the policy store cannot execute a query (connectivity, malformed SQL, ...)."""

    pass
