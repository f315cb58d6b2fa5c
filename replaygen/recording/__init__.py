"""Recording module - Decode Playwright JSONL recordings.

The recorder writes one JSON header object followed by one JSON object per
interaction. This module turns that stream into immutable records that the
codegen pipeline translates, in recorded order.
"""

from .jsonl_parser import JSONLParser, parse_recording
from .models import (
    ActionKind,
    ActionRecord,
    LocatorKind,
    LocatorSpec,
    Recording,
    RecordingHeader,
    Signal,
    SignalName,
)

__all__ = [
    # Models
    "ActionKind",
    "ActionRecord",
    "LocatorKind",
    "LocatorSpec",
    "Recording",
    "RecordingHeader",
    "Signal",
    "SignalName",
    # Parser
    "JSONLParser",
    "parse_recording",
]
