"""pytest test file template."""

from ...recording.models import RecordingHeader
from ..formatters import ImportsManager
from .base import GENERATED_BY, BaseTemplate

RULE = "# " + "=" * 77


class TestFileTemplate(BaseTemplate):
    """Template for a pytest module with a browser fixture."""

    __test__ = False  # not a pytest test class

    format = "test"
    body_indent = " " * 8

    def generate_header(self, header: RecordingHeader) -> str:
        """Generate banner, imports, page fixture and test class header."""
        class_name = self.config.get("test_class_name") or "TestRecorded"
        method_name = self.config.get("test_name") or "test_recorded"

        imports = (
            ImportsManager()
            .add_import("pytest")
            .add_import("playwright.sync_api", items=["Page", "expect", "sync_playwright"])
        )

        lines = [
            RULE,
            f"# {GENERATED_BY}",
            "# Source: Playwright JSONL recording",
            RULE,
            "",
            imports.get_imports_code(),
            "",
            "",
            "@pytest.fixture",
            "def page():",
            "    with sync_playwright() as pw:",
            f"        browser = {self.launch_call(header)}",
            "        context = browser.new_context()",
            "        yield context.new_page()",
            "        context.close()",
            "        browser.close()",
            "",
            "",
            f"class {class_name}:",
            '    """Auto-generated Playwright test."""',
            "",
            f"    def {method_name}(self, page: Page):",
        ]
        return "\n".join(lines)

    def generate_footer(self, header: RecordingHeader) -> str:
        """Nothing follows the test method body."""
        return ""
