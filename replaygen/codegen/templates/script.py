"""Standalone script template."""

from ...recording.models import RecordingHeader
from ..formatters import ImportsManager
from .base import GENERATED_BY, BaseTemplate


class ScriptTemplate(BaseTemplate):
    """Template for a script that launches its own browser."""

    format = "script"
    body_indent = " " * 4

    def generate_header(self, header: RecordingHeader) -> str:
        """Generate imports and browser setup."""
        imports = ImportsManager().add_import(
            "playwright.sync_api", items=["expect", "sync_playwright"]
        )
        lines = [
            f"# {GENERATED_BY}",
            "",
            imports.get_imports_code(),
            "",
            "with sync_playwright() as pw:",
            f"    browser = {self.launch_call(header)}",
            "    context = browser.new_context()",
            "    page = context.new_page()",
        ]
        return "\n".join(lines)

    def generate_footer(self, header: RecordingHeader) -> str:
        """Generate browser teardown."""
        return "\n".join([
            "    context.close()",
            "    browser.close()",
        ])
