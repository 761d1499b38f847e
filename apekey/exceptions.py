"""Custom exception hierarchy for apekey.

Only two failures are terminal for a load attempt: the keymap source cannot be
read, or it contains no opening boundary marker. Everything else the parser
meets (missing closing boundary, unmatched quotes, malformed declarations) is
logged and absorbed.

Exception Hierarchy:
    ApekeyError (base)
    ├── FileOperationError - File I/O
    │   └── FileReadError
    ├── ParseError - Keymap annotation parsing
    │   └── MissingBoundaryError
    └── ConfigurationError - User config / environment issues

Usage:
    from apekey.exceptions import FileReadError

    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise FileReadError(path=str(path), cause=str(e)) from e
"""

from typing import Any, Optional


class ApekeyError(Exception):
    """Base exception for all apekey errors.

    Attributes:
        message: Human-readable error description
        context: Additional context about the error (e.g., paths, settings)
    """

    def __init__(self, message: str, **context: Any) -> None:
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the error message with context."""
        if self.context:
            context_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


# =============================================================================
# File Operation Errors
# =============================================================================


class FileOperationError(ApekeyError):
    """Base exception for file operations."""

    pass


class FileReadError(FileOperationError):
    """Failed to read a file."""

    def __init__(
        self,
        message: str = "Failed to read the config file",
        *,
        path: Optional[str] = None,
        cause: Optional[str] = None,
        **context: Any,
    ) -> None:
        if path:
            context["path"] = path
        if cause:
            context["cause"] = cause
        super().__init__(message, **context)


# =============================================================================
# Parse Errors
# =============================================================================


class ParseError(ApekeyError):
    """Base exception for keymap parsing."""

    pass


class MissingBoundaryError(ParseError):
    """The source text has no opening boundary marker anywhere."""

    def __init__(
        self,
        message: str = "No keymap found: the opening boundary marker '-- #' is missing",
        **context: Any,
    ) -> None:
        super().__init__(message, **context)


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(ApekeyError):
    """Configuration or settings error."""

    def __init__(
        self,
        message: str = "Configuration error",
        *,
        setting: Optional[str] = None,
        **context: Any,
    ) -> None:
        if setting:
            context["setting"] = setting
        super().__init__(message, **context)
