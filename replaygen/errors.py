"""Fatal codegen errors.

Every error carries the human message, the offending record and a
remediation hint. None of them is recoverable: the recording has to be
fixed, or the action translated by hand.
"""

from typing import Any, Optional


DEFAULT_HINT = (
    "This action is NOT implemented in replaygen codegen.\n"
    "Either implement support in replaygen.codegen\n"
    "or manually translate this action."
)


class CodegenError(Exception):
    """Base class for all codegen failures.

    Attributes:
        message: Human readable description of what failed
        action: The offending record (decoded JSON object)
        hint: Remediation guidance shown in diagnostics
    """

    hint: str = DEFAULT_HINT

    def __init__(
        self,
        message: str,
        action: Optional[dict[str, Any]] = None,
        hint: Optional[str] = None,
    ):
        self.message = message
        self.action = action if action is not None else {}
        if hint is not None:
            self.hint = hint
        super().__init__(f"Codegen error: {message}")

    @property
    def error_type(self) -> str:
        """Short name of the failure, e.g. ``UnknownAction``."""
        return type(self).__name__.removesuffix("Error")

    def to_dict(self) -> dict:
        """Convert to dictionary for programmatic handling."""
        return {
            "error_type": self.error_type,
            "message": self.message,
            "action": self.action,
            "hint": self.hint,
        }


class EmptyInputError(CodegenError):
    """The input had no non-blank lines."""

    hint = "Record some interactions first: the recording is empty."


class NoActionsRecordedError(CodegenError):
    """The input had a header line and nothing else."""

    hint = "The recorder was closed before any interaction was captured."


class RecordingDecodeError(CodegenError):
    """A line could not be decoded into a JSON object."""

    hint = "The recording is corrupt. Re-record it or fix the line by hand."

    def __init__(self, message: str, line_number: int, line: str):
        self.line_number = line_number
        self.line = line
        super().__init__(message, {"line": line_number, "content": line})


class UnknownActionError(CodegenError):
    """The action ``name`` is outside the supported set."""


class UnknownSignalError(CodegenError):
    """A signal name is outside {dialog, popup, download}."""


class UnrecognizedLocatorFormatError(CodegenError):
    """A structured locator did not match any known shape."""


class UnknownAriaRoleError(CodegenError):
    """A role name is not an ARIA role known to Playwright."""

    def __init__(self, role: str, action: Optional[dict[str, Any]] = None):
        self.role = role
        super().__init__(f"Unknown ARIA role '{role}'. Not in AriaRole enum.", action)


class MalformedFilesFieldError(CodegenError):
    """The ``files`` payload of setInputFiles has an unexpected shape."""


class ChainedLocatorUnsupportedError(CodegenError):
    """Chained (list) locators are not implemented."""


class NoLocatorError(CodegenError):
    """An element-level action carried neither a locator nor a selector."""
