"""
Domain exceptions for the plan generation flow.

The API layer maps these to HTTP responses in ``app.api.errors``.
"""

from typing import Optional


class DomainError(Exception):
    """Base class for domain-specific errors."""

    def __init__(self, message: str, code: str = "DOMAIN_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)


class InvalidInputError(DomainError):
    """Raised when the submitted task list is empty."""

    def __init__(self, message: str = "Tasks input cannot be empty."):
        super().__init__(message, "INVALID_INPUT")


class GenerationFailedError(DomainError):
    """Raised when any downstream step of plan generation fails."""

    def __init__(self, reason: str, cause: Optional[BaseException] = None):
        self.reason = reason
        self.cause = cause
        super().__init__(f"Failed to generate content: {reason}", "GENERATION_FAILED")


class LanguageModelError(GenerationFailedError):
    """The language model call failed."""


class MalformedModelResponseError(GenerationFailedError):
    """The model reply could not be split into plan and email."""


class SpreadsheetError(GenerationFailedError):
    """The spreadsheet call failed."""


class StartupError(Exception):
    """Raised when credentials or required settings cannot be loaded at boot."""
