"""
Linter - Rule orchestration and directive filtering.
"""

from .directive_filter import DirectiveFilter
from .linter import Linter

__all__ = ["DirectiveFilter", "Linter"]
