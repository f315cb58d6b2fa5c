"""Codegen Engine - Compile JSONL recordings to Python."""

from pathlib import Path
from typing import Optional

import structlog

from ..errors import CodegenError
from ..recording.jsonl_parser import JSONLParser
from ..recording.models import Recording
from .actions import compile_action
from .formatters import CodeFormatter
from .models import CodegenConfig, CodegenResult, ErrorMode, OutputFormat
from .reporter import report_fatal
from .templates import BaseTemplate, BodyTemplate, ScriptTemplate, TestFileTemplate

logger = structlog.get_logger()


# Template registry mapping output format to template class
TEMPLATE_REGISTRY: dict[OutputFormat, type[BaseTemplate]] = {
    OutputFormat.TEST: TestFileTemplate,
    OutputFormat.SCRIPT: ScriptTemplate,
    OutputFormat.BODY: BodyTemplate,
}


class CodegenEngine:
    """Main engine for compiling recordings.

    This class orchestrates the pipeline:
    1. Parses the JSONL recording
    2. Translates every action, in order, with frames and signals
    3. Wraps the result in the template for the requested format

    Any unsupported input aborts the whole run; nothing is emitted.

    Example:
        engine = CodegenEngine()

        result = engine.generate(jsonl_text, CodegenConfig(format="script"))
        if result.success:
            print(result.code)
        else:
            print(result.error_type, result.action)
    """

    def __init__(self):
        """Initialize the codegen engine."""
        self.log = logger.bind(component="codegen_engine")
        self.parser = JSONLParser()

    def compile(self, text: str, config: Optional[CodegenConfig] = None) -> str:
        """Compile a recording, raising on any unsupported input.

        Args:
            text: JSONL recording
            config: Codegen configuration (uses defaults if not provided)

        Returns:
            Generated source

        Raises:
            CodegenError: On the first unsupported or malformed record
        """
        _, code = self._compile(text, config or CodegenConfig())
        return code

    def generate(self, text: str, config: Optional[CodegenConfig] = None) -> CodegenResult:
        """Compile a recording into a result instead of raising.

        Args:
            text: JSONL recording
            config: Codegen configuration (uses defaults if not provided)

        Returns:
            CodegenResult with generated code or the error and offending record
        """
        config = config or CodegenConfig()

        try:
            recording, code = self._compile(text, config)
        except CodegenError as e:
            self.log.warning(
                "Codegen failed",
                error_type=e.error_type,
                error=e.message,
            )
            return CodegenResult(
                success=False,
                format=config.format,
                error=e.message,
                error_type=e.error_type,
                action=e.action,
            )

        return CodegenResult(
            success=True,
            code=code,
            format=config.format,
            metadata={
                "browser": recording.header.browser_name,
                "headless": recording.header.headless,
                "actions_count": recording.action_count,
            },
        )

    def generate_file(
        self,
        path: str | Path,
        config: Optional[CodegenConfig] = None,
    ) -> CodegenResult:
        """Read a JSONL file and compile it into a result."""
        return self.generate(Path(path).read_text(encoding="utf-8"), config)

    def _compile(self, text: str, config: CodegenConfig) -> tuple[Recording, str]:
        recording = self.parser.parse(text)
        blocks = [compile_action(action) for action in recording.actions]

        template = TEMPLATE_REGISTRY[config.format](config={
            "test_class_name": config.test_class_name,
            "test_name": config.test_name,
        })
        code = template.generate(recording, blocks)
        if config.format != OutputFormat.BODY:
            code = CodeFormatter().format_code(code)

        self.log.info(
            "Codegen successful",
            format=config.format.value,
            browser=recording.header.browser_name,
            actions_count=recording.action_count,
        )
        return recording, code


def jsonl_to_python(
    text: str,
    fmt: OutputFormat | str = OutputFormat.TEST,
    on_error: ErrorMode | str = ErrorMode.RAISE,
) -> str:
    """Compile a JSONL recording to Python source.

    Args:
        text: JSONL recording
        fmt: Output dialect (test, script or body)
        on_error: RAISE propagates CodegenError; EXIT prints a diagnostic
            to stderr and exits with status 1

    Returns:
        Generated source
    """
    try:
        return CodegenEngine().compile(text, CodegenConfig(format=fmt))
    except CodegenError as e:
        if ErrorMode(on_error) == ErrorMode.EXIT:
            report_fatal(e)
        raise


def jsonl_file_to_python(
    path: str | Path,
    fmt: OutputFormat | str = OutputFormat.TEST,
    on_error: ErrorMode | str = ErrorMode.RAISE,
) -> str:
    """Read a JSONL file and compile it to Python source.

    Same options as :func:`jsonl_to_python`.
    """
    return jsonl_to_python(Path(path).read_text(encoding="utf-8"), fmt, on_error)
