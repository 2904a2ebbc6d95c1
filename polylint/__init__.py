"""
polylint - Rule orchestration and safe fix application for source linting.

Resolves named rules and collections, runs them over analyzed documents
with per-rule failure isolation, filters the results through inline
directives, and applies the conflict-free subset of automatic fixes.
"""

from .analyzers import Analysis, Analyzer, Document, FSAnalyzer
from .contracts import (
    Directive,
    Edit,
    Replacement,
    Severity,
    SourcePosition,
    SourceRange,
    Warning,
    WarningCarryingError,
)
from .fixers import EditResult, FixReport, apply_edits, lint_and_fix
from .linter import DirectiveFilter, Linter
from .rules import LintRegistry, Rule, RuleCollection, lint_registry

__version__ = "0.1.0"

__all__ = [
    "Analysis",
    "Analyzer",
    "Document",
    "FSAnalyzer",
    "Directive",
    "Edit",
    "Replacement",
    "Severity",
    "SourcePosition",
    "SourceRange",
    "Warning",
    "WarningCarryingError",
    "EditResult",
    "FixReport",
    "apply_edits",
    "lint_and_fix",
    "DirectiveFilter",
    "Linter",
    "LintRegistry",
    "Rule",
    "RuleCollection",
    "lint_registry",
]
