"""Code formatter for generated Python."""

import json
import keyword
import re
from typing import Any, Optional


class CodeFormatter:
    """Formats generated code and the literals embedded in it."""

    def format_code(self, code: str) -> str:
        """Format a complete generated module.

        Args:
            code: Raw generated code

        Returns:
            Formatted code
        """
        # Remove trailing whitespace from each line
        lines = [line.rstrip() for line in code.split("\n")]

        # Remove excessive blank lines (max 2 consecutive)
        formatted_lines = []
        blank_count = 0
        for line in lines:
            if line == "":
                blank_count += 1
                if blank_count <= 2:
                    formatted_lines.append(line)
            else:
                blank_count = 0
                formatted_lines.append(line)

        # Ensure file ends with newline
        result = "\n".join(formatted_lines)
        if not result.endswith("\n"):
            result += "\n"

        return result


def literal(value: Any) -> str:
    """Render a JSON value as a Python literal.

    Strings are double-quoted. Lists and dicts are rendered recursively so
    nested strings keep the same quoting.
    """
    if value is None:
        return "None"
    if isinstance(value, bool):
        return "True" if value else "False"
    if isinstance(value, (int, float)):
        return repr(value)
    if isinstance(value, str):
        # JSON string escapes are valid Python escapes
        return json.dumps(value, ensure_ascii=False)
    if isinstance(value, (list, tuple)):
        return "[" + ", ".join(literal(item) for item in value) + "]"
    if isinstance(value, dict):
        items = ", ".join(f"{literal(str(k))}: {literal(v)}" for k, v in value.items())
        return "{" + items + "}"
    return literal(str(value))


def identifier(name: Optional[str], default: str) -> str:
    """Turn a recorded alias into a Python variable name.

    Non-word characters become ``_``. A leading digit gets a ``_`` prefix
    and a keyword gets a ``_`` suffix.
    """
    result = re.sub(r"\W", "_", name or default)
    if result[0].isdigit():
        result = f"_{result}"
    if keyword.iskeyword(result):
        result = f"{result}_"
    return result
