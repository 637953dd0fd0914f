"""
Base exception classes for the application.

Exception hierarchy follows the layer structure:
- Core/client code raises domain exceptions
- API layer transforms them to HTTP responses (see api/exception_handlers.py)

The normalization pipeline itself never raises for malformed analysis text;
these exceptions cover the service boundary around it.
"""


class AppException(Exception):
    """
    Base exception for all application-specific exceptions.

    All custom exceptions should inherit from this class.
    This allows for easy catching of all app exceptions if needed.
    """

    def __init__(self, message: str = "An application error occurred"):
        self.message = message
        super().__init__(self.message)


# ============================================================================
# DOMAIN EXCEPTIONS (raised by service layer)
# ============================================================================


class ValidationError(AppException):
    """
    Raised when an analysis request is rejected before reaching the provider.

    Examples:
    - Empty upload
    - Upload is not an image
    - Upload exceeds the configured size limit

    Typically maps to HTTP 400
    """

    pass


class UpstreamServiceError(AppException):
    """
    Raised when the vision-completion provider cannot produce an analysis.

    Examples:
    - No API key configured
    - Provider returned an error for every model in the chain
    - Network timeout

    Typically maps to HTTP 502 (Bad Gateway)
    """

    pass
