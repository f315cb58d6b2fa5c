"""Bare action list template."""

from ...recording.models import RecordingHeader
from .base import BaseTemplate


class BodyTemplate(BaseTemplate):
    """Only the action lines, unindented, for pasting into existing code."""

    format = "body"
    body_indent = ""

    def generate_header(self, header: RecordingHeader) -> str:
        return ""

    def generate_footer(self, header: RecordingHeader) -> str:
        return ""
