"""Tests for CodegenEngine and the module-level entry points."""

import ast

import pytest

from replaygen.codegen import (
    CodegenConfig,
    CodegenEngine,
    CodegenResult,
    ErrorMode,
    OutputFormat,
    jsonl_file_to_python,
    jsonl_to_python,
)
from replaygen.codegen.engine import TEMPLATE_REGISTRY
from replaygen.errors import (
    CodegenError,
    NoActionsRecordedError,
    UnknownActionError,
)


# =============================================================================
# Test Fixtures
# =============================================================================


@pytest.fixture
def engine():
    """Create CodegenEngine instance."""
    return CodegenEngine()


@pytest.fixture
def rich_recording(make_jsonl):
    """A recording touching frames, signals and several pages."""
    return make_jsonl(
        {"name": "openPage", "url": "about:blank", "pageAlias": "page"},
        {"name": "navigate", "url": "https://shop.example.com", "pageAlias": "page"},
        {
            "name": "click",
            "pageAlias": "page",
            "selector": 'internal:role=link[name="Help"i]',
            "signals": [{"name": "popup", "popupAlias": "page1"}, {"name": "dialog"}],
        },
        {
            "name": "fill",
            "pageAlias": "page",
            "framePath": ["iframe#payment", "iframe.card"],
            "locator": {"placeholder": "Card number"},
            "text": "4242 4242 4242 4242",
        },
        {
            "name": "click",
            "pageAlias": "page",
            "locator": {"role": "button", "name": "Invoice"},
            "signals": [{"name": "download"}],
        },
        {"name": "select", "pageAlias": "page", "locator": {"label": "Size"}, "options": ["M", "L"]},
        {"name": "assertChecked", "pageAlias": "page", "locator": {"role": "checkbox"}, "checked": False},
        {"name": "closePage", "pageAlias": "page1"},
    )


# =============================================================================
# Engine Tests
# =============================================================================


class TestCodegenEngineInit:
    """Tests for CodegenEngine initialization."""

    def test_create_engine(self):
        """Test basic engine creation."""
        engine = CodegenEngine()
        assert hasattr(engine, "log")
        assert hasattr(engine, "parser")

    def test_registry_covers_formats(self):
        """Test every output format has a template."""
        assert set(TEMPLATE_REGISTRY) == set(OutputFormat)


class TestScenarios:
    """End-to-end behavior on small recordings."""

    @pytest.mark.smoke
    def test_navigate(self, engine, make_jsonl):
        """Test a single navigation."""
        code = engine.compile(make_jsonl({"name": "navigate", "url": "https://example.com"}))
        assert 'page.goto("https://example.com")' in code

    def test_double_click(self, engine, make_jsonl):
        """Test a click count of 2 becomes one dblclick."""
        text = make_jsonl({"name": "click", "locator": {"text": "Row"}, "clickCount": 2})
        code = engine.compile(text, CodegenConfig(format="body"))
        assert code == 'page.get_by_text("Row").dblclick()'

    def test_five_clicks(self, engine, make_jsonl):
        """Test a click count of 5 becomes one click with a count."""
        text = make_jsonl({"name": "click", "locator": {"text": "Row"}, "clickCount": 5})
        code = engine.compile(text, CodegenConfig(format="body"))
        assert code == 'page.get_by_text("Row").click(click_count=5)'

    def test_role_locators(self, engine, make_jsonl):
        """Test role lookups with and without a name."""
        text = make_jsonl(
            {"name": "click", "locator": {"role": "button"}},
            {"name": "click", "locator": {"role": "button", "name": "Submit"}},
        )
        code = engine.compile(text, CodegenConfig(format="body"))
        assert code == "\n".join([
            'page.get_by_role("button").click()',
            'page.get_by_role("button").filter(has_text="Submit").click()',
        ])

    def test_empty_text_locator(self, engine, make_jsonl):
        """Test an empty text value still compiles to a text lookup."""
        text = make_jsonl({"name": "click", "locator": {"text": ""}})
        code = engine.compile(text, CodegenConfig(format="body"))
        assert code == 'page.get_by_text("").click()'

    def test_unknown_action_raises(self, engine, make_jsonl):
        """Test an unknown kind aborts in raise mode."""
        text = make_jsonl({"name": "navigate", "url": "x"}, {"name": "teleport"})
        with pytest.raises(UnknownActionError) as exc_info:
            engine.compile(text)

        assert "teleport" in str(exc_info.value)
        assert exc_info.value.action == {"name": "teleport"}

    def test_header_only(self, engine):
        """Test a header with no actions."""
        with pytest.raises(NoActionsRecordedError):
            engine.compile('{"browserName":"chromium"}\n')


class TestCompileFormats:
    """Tests for output formats."""

    @pytest.mark.parametrize("fmt", ["test", "script"])
    def test_output_is_valid_python(self, engine, rich_recording, fmt):
        """Test full-file dialects parse as Python."""
        code = engine.compile(rich_recording, CodegenConfig(format=fmt))
        ast.parse(code)
        assert code.endswith("\n")

    def test_body_is_valid_python(self, engine, rich_recording):
        """Test the body dialect parses as Python on its own."""
        code = engine.compile(rich_recording, CodegenConfig(format="body"))
        ast.parse(code)
        assert not code.endswith("\n")

    def test_delimiters_balanced(self, engine, rich_recording):
        """Test brackets balance in every dialect."""
        for fmt in OutputFormat:
            code = engine.compile(rich_recording, CodegenConfig(format=fmt))
            for opening, closing in ("()", "[]", "{}"):
                assert code.count(opening) == code.count(closing)

    def test_rich_body(self, engine, rich_recording):
        """Test the full translation of a mixed recording."""
        code = engine.compile(rich_recording, CodegenConfig(format="body"))
        assert code == "\n".join([
            "# New page: page",
            'page.goto("https://shop.example.com")',
            'page.once("dialog", lambda dialog: dialog.dismiss())',
            "with page.expect_popup() as popup_info:",
            '    page.get_by_role("link").filter(has_text="Help").click()',
            "page1 = popup_info.value",
            'frame0 = page.locator("iframe#payment").content_frame',
            'frame1 = frame0.locator("iframe.card").content_frame',
            'frame1.get_by_placeholder("Card number").fill("4242 4242 4242 4242")',
            "with page.expect_download() as download_info:",
            '    page.get_by_role("button").filter(has_text="Invoice").click()',
            "download = download_info.value",
            'page.get_by_label("Size").select_option(["M", "L"])',
            'expect(page.get_by_role("checkbox")).not_to_be_checked()',
            "page1.close()",
        ])

    def test_test_format_indent(self, engine, make_jsonl):
        """Test actions sit inside the test method."""
        code = engine.compile(make_jsonl({"name": "navigate", "url": "https://e.com"}))
        assert '\n        page.goto("https://e.com")\n' in code

    def test_script_format_indent(self, engine, make_jsonl):
        """Test actions sit inside the playwright block."""
        text = make_jsonl({"name": "navigate", "url": "https://e.com"})
        code = engine.compile(text, CodegenConfig(format=OutputFormat.SCRIPT))
        assert '\n    page.goto("https://e.com")\n' in code

    def test_format_case_insensitive(self, engine, make_jsonl):
        """Test format names are normalized."""
        text = make_jsonl({"name": "navigate", "url": "https://e.com"})
        assert engine.compile(text, CodegenConfig(format="BODY")) == 'page.goto("https://e.com")'

    def test_unknown_format(self):
        """Test an unsupported format name."""
        with pytest.raises(ValueError):
            CodegenConfig(format="java")


class TestGenerate:
    """Tests for the result-typed API."""

    def test_success(self, engine, login_recording):
        """Test a successful result with metadata."""
        result = engine.generate(login_recording, CodegenConfig(format="script"))

        assert isinstance(result, CodegenResult)
        assert result.success is True
        assert result.error is None
        assert result.format == OutputFormat.SCRIPT
        assert result.metadata == {"browser": "chromium", "headless": True, "actions_count": 6}
        assert "with sync_playwright() as pw:" in result.code

    def test_failure(self, engine, make_jsonl):
        """Test a failed result carries the error and record."""
        result = engine.generate(make_jsonl({"name": "teleport"}))

        assert result.success is False
        assert result.code == ""
        assert result.error_type == "UnknownAction"
        assert "teleport" in result.error
        assert result.action == {"name": "teleport"}

    def test_failure_no_partial_output(self, engine, make_jsonl):
        """Test nothing is emitted when a later action fails."""
        text = make_jsonl({"name": "navigate", "url": "https://e.com"}, {"name": "teleport"})
        assert engine.generate(text).code == ""

    def test_empty_input(self, engine):
        """Test empty input as a result."""
        result = engine.generate("")
        assert result.success is False
        assert result.error_type == "EmptyInput"

    def test_to_dict(self, engine, make_jsonl):
        """Test the result serializes."""
        data = engine.generate(make_jsonl({"name": "teleport"})).to_dict()
        assert data["success"] is False
        assert data["format"] == "test"
        assert data["error_type"] == "UnknownAction"

    def test_generate_file(self, engine, sample_file):
        """Test compiling from a file."""
        result = engine.generate_file(sample_file, CodegenConfig(format="body"))
        assert result.success
        assert 'page.get_by_label("Email").fill("user@example.com")' in result.code


# =============================================================================
# Module Function Tests
# =============================================================================


class TestJsonlToPython:
    """Tests for jsonl_to_python and jsonl_file_to_python."""

    def test_default_format_is_test(self, login_recording):
        """Test the default dialect."""
        code = jsonl_to_python(login_recording)
        assert "class TestRecorded:" in code

    def test_raise_mode(self, make_jsonl):
        """Test errors propagate in raise mode."""
        with pytest.raises(CodegenError):
            jsonl_to_python(make_jsonl({"name": "teleport"}), on_error=ErrorMode.RAISE)

    def test_exit_mode(self, make_jsonl, capsys):
        """Test exit mode prints a diagnostic and exits 1."""
        with pytest.raises(SystemExit) as exc_info:
            jsonl_to_python(make_jsonl({"name": "teleport"}), on_error="exit")

        assert exc_info.value.code == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "CODEGEN FATAL ERROR" in captured.err
        assert "teleport" in captured.err
        assert '{"name": "teleport"}' in captured.err

    def test_exit_mode_success(self, login_recording):
        """Test exit mode returns code when nothing fails."""
        code = jsonl_to_python(login_recording, "body", on_error=ErrorMode.EXIT)
        assert code.startswith("# New page: page")

    def test_file(self, sample_file):
        """Test compiling a file."""
        code = jsonl_file_to_python(sample_file, OutputFormat.SCRIPT)
        assert code.startswith("# Auto-generated by replaygen codegen")

    def test_missing_file(self, tmp_path):
        """Test a file that does not exist."""
        with pytest.raises(FileNotFoundError):
            jsonl_file_to_python(tmp_path / "missing.jsonl")
