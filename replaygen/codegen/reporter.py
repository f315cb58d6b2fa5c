"""Fatal error reporting for the command line."""

import json
import sys
from typing import NoReturn, TextIO

from ..errors import CodegenError

RULE = "=" * 70


def format_diagnostic(error: CodegenError) -> str:
    """Render the diagnostic block for a fatal error."""
    action = json.dumps(error.action, ensure_ascii=False, default=str)
    return "\n".join([
        "",
        RULE,
        "CODEGEN FATAL ERROR",
        RULE,
        "",
        error.message,
        "",
        "Action data:",
        action,
        "",
        error.hint,
        RULE,
        "",
    ])


def report_fatal(error: CodegenError, stream: TextIO | None = None) -> NoReturn:
    """Print the diagnostic block and exit with status 1."""
    print(format_diagnostic(error), file=stream or sys.stderr)
    sys.exit(1)
