"""replaygen - compile Playwright JSONL recordings to Python."""

__version__ = "0.1.0"
