"""Error codes and error handling utilities for icon themes."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from pathlib import Path
from typing import Any

from iconthemes.themes.models import ThemeParseError, ThemeReadError


class ErrorCode(Enum):
    """Standardized error codes for icon theme operations."""

    # File system errors
    FILE_NOT_FOUND = auto()
    FILE_ACCESS_DENIED = auto()

    # Theme errors
    THEME_NOT_FOUND = auto()
    THEME_READ_FAILED = auto()
    THEME_PARSE_FAILED = auto()

    # Operation errors
    OPERATION_FAILED = auto()


ERROR_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.FILE_NOT_FOUND: "The file was not found. It may have been moved or deleted.",
    ErrorCode.FILE_ACCESS_DENIED: "Access denied. Check file permissions.",

    ErrorCode.THEME_NOT_FOUND: "No installed plugin provides this icon theme.",
    ErrorCode.THEME_READ_FAILED: "The icon theme file could not be read.",
    ErrorCode.THEME_PARSE_FAILED: "The icon theme file is not valid JSON.",

    ErrorCode.OPERATION_FAILED: "Operation failed. See details for more information.",
}


@dataclass
class IconThemeError(Exception):
    """Base exception for icon themes with error code and context."""

    code: ErrorCode
    message: str = ""
    path: Path | None = None
    details: dict[str, Any] = field(default_factory=dict)
    suggestion: str = ""

    def __post_init__(self) -> None:
        if not self.message:
            self.message = ERROR_MESSAGES.get(self.code, "An unexpected error occurred.")
        if not self.suggestion and self.code in ERROR_MESSAGES:
            self.suggestion = ERROR_MESSAGES[self.code]

    def __str__(self) -> str:
        parts = [self.message]
        if self.path:
            parts.append(f"\nFile: {self.path}")
        if self.details:
            details_str = " | ".join(f"{k}={v}" for k, v in self.details.items())
            parts.append(f"\nDetails: {details_str}")
        return "".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging or display."""
        return {
            "code": self.code.name,
            "message": self.message,
            "path": str(self.path) if self.path else None,
            "details": self.details,
            "suggestion": self.suggestion,
        }


def classify_exception(exc: Exception, path: Path | None = None) -> IconThemeError:
    """Classify a generic exception into an IconThemeError with appropriate code."""
    if isinstance(exc, IconThemeError):
        return exc

    exc_name = type(exc).__name__
    exc_str = str(exc).lower()

    if isinstance(exc, ThemeParseError):
        return IconThemeError(ErrorCode.THEME_PARSE_FAILED, path=path, details={"original": str(exc)})
    if isinstance(exc, ThemeReadError):
        cause = exc.__cause__
        if isinstance(cause, FileNotFoundError):
            return IconThemeError(ErrorCode.FILE_NOT_FOUND, path=path, details={"original": str(exc)})
        if isinstance(cause, PermissionError):
            return IconThemeError(ErrorCode.FILE_ACCESS_DENIED, path=path, details={"original": str(exc)})
        return IconThemeError(ErrorCode.THEME_READ_FAILED, path=path, details={"original": str(exc)})

    if isinstance(exc, FileNotFoundError):
        return IconThemeError(ErrorCode.FILE_NOT_FOUND, path=path, details={"original": exc_str})
    if isinstance(exc, PermissionError):
        return IconThemeError(ErrorCode.FILE_ACCESS_DENIED, path=path, details={"original": exc_str})

    return IconThemeError(
        ErrorCode.OPERATION_FAILED,
        message=f"{exc_name}: {exc}",
        path=path,
        details={"original": exc_str},
    )


def format_error_for_user(error: IconThemeError) -> str:
    """Format an error for display to the user with actionable suggestions."""
    parts = [error.message]
    if error.suggestion and error.suggestion != error.message:
        parts.append(f"\n\n{error.suggestion}")
    if error.path:
        parts.append(f"\n\nFile: {error.path.name}")
    return "".join(parts)
