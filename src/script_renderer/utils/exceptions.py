"""Custom exceptions for the Script Renderer library."""

from typing import Optional


class ScriptRendererException(Exception):
    """Base exception for all Script Renderer exceptions."""

    def __init__(self, message: str, code: Optional[str] = None):
        """Initialize exception.

        Args:
            message: Error message
            code: Optional error code
        """
        super().__init__(message)
        self.code = code


class InvalidInputError(ScriptRendererException):
    """Raised when text or style input has the wrong type."""

    def __init__(self, message: str = "Invalid input"):
        """Initialize InvalidInputError."""
        super().__init__(message, "INVALID_INPUT")


def require_text(text: object, argument: str = "text") -> str:
    """Return ``text`` unchanged, or raise InvalidInputError if it is not a str."""
    if not isinstance(text, str):
        raise InvalidInputError(
            f"{argument} must be a str, got {type(text).__name__}"
        )
    return text
