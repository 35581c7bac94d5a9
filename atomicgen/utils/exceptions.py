"""
Custom exception definitions.

This module defines the exception hierarchy for atomicgen-specific
errors raised while reading templates, expanding them and writing
generated output.
"""

from typing import Optional


class AtomicGenError(Exception):
    """
    Base exception for all atomicgen-related errors.

    This is the root exception class for all atomicgen-specific
    errors, providing common functionality and error handling.
    """

    def __init__(self, message: str, details: Optional[dict] = None):
        """
        Initialize atomicgen error.

        Args:
            message: Human-readable error message
            details: Optional dictionary with additional error context
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return formatted error message."""
        if self.details:
            detail_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({detail_str})"
        return self.message


class TemplateReadError(AtomicGenError):
    """
    Raised when a template document cannot be read.

    Reading a template is the first step of every target, so this
    error aborts the run before anything is written.
    """

    def __init__(self, path: str, reason: str = ""):
        """
        Initialize template read error.

        Args:
            path: Path of the unreadable template
            reason: Underlying error description
        """
        message = f"Cannot read template '{path}'"
        if reason:
            message += f": {reason}"

        super().__init__(message, {"path": path})
        self.path = path
        self.reason = reason


class TemplateRenderError(AtomicGenError):
    """
    Raised when a fragment body cannot be parsed as a template.
    """

    def __init__(self, fragment: str, reason: str = "", line: Optional[int] = None):
        """
        Initialize template render error.

        Args:
            fragment: Fragment name, or a short description for inline text
            reason: Parser error description
            line: Optional line number within the fragment body
        """
        details = {"fragment": fragment}
        if line is not None:
            details["line"] = line

        message = f"Failed to render fragment '{fragment}'"
        if reason:
            message += f": {reason}"

        super().__init__(message, details)
        self.fragment = fragment
        self.reason = reason
        self.line = line


class PlaceholderCycleError(AtomicGenError):
    """
    Raised when nested placeholder resolution does not converge.

    A fragment that binds a placeholder to text containing the same
    placeholder would otherwise be substituted forever.
    """

    def __init__(self, passes: int, remaining: Optional[list] = None):
        """
        Initialize placeholder cycle error.

        Args:
            passes: Number of substitution passes performed
            remaining: Placeholder names still present after the last pass
        """
        remaining = sorted(remaining or [])
        super().__init__(
            f"Placeholders still unresolved after {passes} passes",
            {"passes": passes, "remaining": ",".join(remaining)},
        )
        self.passes = passes
        self.remaining = remaining


class DestinationWriteError(AtomicGenError):
    """
    Raised when generated output cannot be written.
    """

    def __init__(self, path: str, reason: str = ""):
        """
        Initialize destination write error.

        Args:
            path: Destination path
            reason: Underlying error description
        """
        message = f"Cannot write destination '{path}'"
        if reason:
            message += f": {reason}"

        super().__init__(message, {"path": path})
        self.path = path
        self.reason = reason


class ConfigurationError(AtomicGenError):
    """
    Raised when the generator configuration is unreadable or invalid.
    """

    def __init__(self, message: str, config_file: Optional[str] = None):
        """
        Initialize configuration error.

        Args:
            message: Error description
            config_file: Optional path of the offending configuration file
        """
        details = {}
        if config_file is not None:
            details["config_file"] = config_file

        super().__init__(message, details)
        self.config_file = config_file
