"""Error codes and exceptions raised outside the counting core."""
from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional


class ErrorCode(str, Enum):
    CONFIG_ERROR = "CONFIG_ERROR"
    IO_ERROR = "IO_ERROR"


class AnalyzerError(RuntimeError):
    """Failure that aborts a run before any report line is printed.

    ``context`` carries the offending path, folder or profile names so the
    CLI can show them without parsing the message.
    """

    default_code: ErrorCode = ErrorCode.IO_ERROR

    def __init__(
        self,
        message: str,
        *,
        code: Optional[ErrorCode] = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.code = code or self.default_code
        self.context = context or {}

    def __str__(self) -> str:
        return f"[{self.code.value}] {super().__str__()}"


class ConfigError(AnalyzerError):
    """Configuration file is missing, malformed or names an unknown profile."""

    default_code = ErrorCode.CONFIG_ERROR


class DocumentSourceError(AnalyzerError):
    """Document folder is missing or one of its files cannot be read."""

    default_code = ErrorCode.IO_ERROR
