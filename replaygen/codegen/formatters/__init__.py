"""Code formatters for generated output."""

from .code_formatter import CodeFormatter, identifier, literal
from .imports_manager import ImportsManager

__all__ = ["CodeFormatter", "ImportsManager", "identifier", "literal"]
