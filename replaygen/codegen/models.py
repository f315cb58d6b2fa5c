"""Data models for codegen."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class OutputFormat(str, Enum):
    """Output dialects."""

    TEST = "test"
    SCRIPT = "script"
    BODY = "body"


class ErrorMode(str, Enum):
    """What to do when the pipeline hits a fatal error."""

    RAISE = "raise"  # propagate CodegenError to the caller
    EXIT = "exit"  # print a diagnostic to stderr and exit(1)


@dataclass
class CodegenConfig:
    """Configuration for a codegen run.

    Attributes:
        format: Output dialect
        test_class_name: Class name used by the test dialect
        test_name: Test method name used by the test dialect
    """

    format: OutputFormat | str = OutputFormat.TEST
    test_class_name: str = "TestRecorded"
    test_name: str = "test_recorded"

    def __post_init__(self):
        """Convert string values to enums."""
        if isinstance(self.format, str):
            self.format = OutputFormat(self.format.lower())


@dataclass
class CodegenResult:
    """Result from compiling a recording.

    Attributes:
        success: Whether compilation succeeded
        code: Generated code
        format: Dialect the code was generated for
        error: Error message if failed
        error_type: Name of the failure, e.g. ``UnknownAction``
        action: The offending record if failed
        metadata: Additional metadata
    """

    success: bool
    code: str = ""
    format: OutputFormat | None = None
    error: str | None = None
    error_type: str | None = None
    action: dict | None = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "success": self.success,
            "code": self.code,
            "format": self.format.value if self.format else None,
            "error": self.error,
            "error_type": self.error_type,
            "action": self.action,
            "metadata": self.metadata,
        }
