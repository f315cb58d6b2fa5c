"""JSONL recording parser.

Decodes the output of ``playwright codegen --target=jsonl``: one JSON header
object on the first line, then one JSON object per recorded action.
"""

import json
import re
from pathlib import Path

import structlog

from ..errors import EmptyInputError, NoActionsRecordedError, RecordingDecodeError
from .models import ActionRecord, Recording, RecordingHeader

logger = structlog.get_logger()

# Only LF and CRLF end a record; other Unicode line breaks may appear inside strings
LINE_BREAK = re.compile(r"\r?\n")


class JSONLParser:
    """Parser for Playwright JSONL recordings.

    Example:
        parser = JSONLParser()
        recording = parser.parse(jsonl_text)
        for action in recording.actions:
            print(action.kind)
    """

    def __init__(self):
        self.log = logger.bind(component="jsonl_parser")

    def parse(self, text: str) -> Recording:
        """Parse JSONL text into a Recording.

        Args:
            text: Raw JSONL content

        Returns:
            Recording with the header and actions in recorded order

        Raises:
            EmptyInputError: No non-blank lines
            NoActionsRecordedError: Header line only
            RecordingDecodeError: A line is not a JSON object
        """
        lines = [
            (number, line)
            for number, line in enumerate(LINE_BREAK.split(text), start=1)
            if line.strip()
        ]
        if not lines:
            raise EmptyInputError("Empty JSONL input. No actions recorded.")

        header_data = self._decode_line(*lines[0])
        header = RecordingHeader.from_dict(header_data)

        if len(lines) == 1:
            raise NoActionsRecordedError(
                "JSONL has header but no actions. Nothing was recorded.",
                header_data,
            )

        actions = tuple(
            ActionRecord.from_dict(self._decode_line(number, line))
            for number, line in lines[1:]
        )

        self.log.debug(
            "Parsed recording",
            browser=header.browser_name,
            action_count=len(actions),
        )

        return Recording(header=header, actions=actions)

    def parse_file(self, path: str | Path) -> Recording:
        """Read and parse a JSONL file."""
        return self.parse(Path(path).read_text(encoding="utf-8"))

    def _decode_line(self, number: int, line: str) -> dict:
        """Decode one line into a JSON object."""
        try:
            data = json.loads(line)
        except json.JSONDecodeError as e:
            raise RecordingDecodeError(
                f"Line {number} is not valid JSON: {e.msg}", number, line
            ) from e

        if not isinstance(data, dict):
            raise RecordingDecodeError(
                f"Line {number} is not a JSON object.", number, line
            )
        return data


# Convenience function
def parse_recording(text: str) -> Recording:
    """Parse JSONL text into a Recording.

    Args:
        text: Raw JSONL content

    Returns:
        Parsed Recording
    """
    return JSONLParser().parse(text)
