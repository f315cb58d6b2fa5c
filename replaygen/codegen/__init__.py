"""Playwright JSONL to Python codegen.

This module compiles recordings produced by
``playwright codegen --target=jsonl`` into Python source using the
Playwright sync API.

Supported output formats:
- test: pytest module with a browser fixture
- script: standalone script with its own browser setup
- body: bare action lines for pasting

Any unrecognized action, unsupported signal or unimplemented locator
aborts immediately with a CodegenError describing the offending record.

Example:
    from replaygen.codegen import jsonl_to_python

    code = jsonl_to_python(jsonl_text, fmt="script")
    print(code)
"""

from .engine import CodegenEngine, jsonl_file_to_python, jsonl_to_python
from .models import CodegenConfig, CodegenResult, ErrorMode, OutputFormat

__all__ = [
    "CodegenConfig",
    "CodegenEngine",
    "CodegenResult",
    "ErrorMode",
    "OutputFormat",
    "jsonl_file_to_python",
    "jsonl_to_python",
]
