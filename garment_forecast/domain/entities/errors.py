"""
Domain Errors

Input validation errors surface to the caller. External context errors are
absorbed by the context loader. Output contract errors are programming
errors and are never turned into a fallback prediction.
"""

from typing import Any, Dict, Optional


class DomainError(Exception):
    """Base class for domain errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class PredictionInputError(DomainError):
    """Raised when a prediction request violates the input contract."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)


class ExternalContextError(DomainError):
    """Raised by context providers when the market record cannot be used."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)


class ExternalContextNotFoundError(ExternalContextError):
    """Raised when the keyed market record does not exist."""

    def __init__(self, document_id: str, details: Optional[Dict[str, Any]] = None):
        message = f"External context record '{document_id}' not found"
        super().__init__(message, details)


class PredictionOutputError(DomainError):
    """Raised when the engine produced a result that breaks the output contract."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)
