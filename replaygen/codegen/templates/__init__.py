"""Output templates, one per dialect."""

from .base import BaseTemplate
from .body import BodyTemplate
from .pytest_file import TestFileTemplate
from .script import ScriptTemplate

__all__ = [
    "BaseTemplate",
    "BodyTemplate",
    "ScriptTemplate",
    "TestFileTemplate",
]
