"""Base template class for generated output."""

from abc import ABC, abstractmethod
from typing import Any, Sequence

from ...recording.models import Recording, RecordingHeader
from ..fragment import CodeBlock

SUPPORTED_BROWSERS = ("chromium", "firefox", "webkit")
GENERATED_BY = "Auto-generated by replaygen codegen"


class BaseTemplate(ABC):
    """Base class for output dialects.

    Each dialect wraps the translated action blocks in its own scaffolding
    and indents them to a fixed depth.
    """

    # Override these in subclasses
    format: str = "unknown"
    body_indent: str = ""

    def __init__(self, config: Any = None):
        """Initialize template with optional config."""
        self.config = config or {}

    @abstractmethod
    def generate_header(self, header: RecordingHeader) -> str:
        """Generate everything above the action lines."""
        pass

    @abstractmethod
    def generate_footer(self, header: RecordingHeader) -> str:
        """Generate everything below the action lines."""
        pass

    def generate_body(self, blocks: Sequence[CodeBlock]) -> str:
        """Render the action blocks at this template's indent."""
        return "\n".join(
            block.render(self.body_indent) for block in blocks if len(block)
        )

    def generate(self, recording: Recording, blocks: Sequence[CodeBlock]) -> str:
        """Generate the complete output.

        Args:
            recording: Parsed recording (the header picks the browser)
            blocks: Translated actions, in recorded order

        Returns:
            Generated source
        """
        parts = [
            self.generate_header(recording.header),
            self.generate_body(blocks),
            self.generate_footer(recording.header),
        ]
        return "\n".join(part for part in parts if part)

    def launch_call(self, header: RecordingHeader) -> str:
        """Browser launch expression for the recorded browser."""
        browser = header.browser_name
        if browser not in SUPPORTED_BROWSERS:
            browser = "chromium"
        return f"pw.{browser}.launch(headless={header.headless})"
