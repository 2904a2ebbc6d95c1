"""
Warnings - Diagnostics and the textual fixes they may carry.

A Warning is one finding produced by a rule or by the analyzer. Its
optional `fix` is an Edit: an ordered list of Replacements that must be
applied together or not at all.

Usage:
    warning = Warning(
        code="unbalanced-delimiters",
        message="Expected a closing '}}'",
        severity=Severity.ERROR,
        source_range=SourceRange.from_coords("index.html", 3, 4, 3, 9),
        fix=[Replacement(SourceRange.from_coords("index.html", 3, 9, 3, 9), "}}")],
    )
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from .source_range import SourceRange


INTERNAL_LINT_ERROR = "internal-lint-error"
"""Code of the warning that replaces an exception raised by a rule."""

UNABLE_TO_ANALYZE = "unable-to-analyze-file"
"""Code of the warning that replaces an exception raised by the analyzer."""


class Severity(Enum):
    """How serious a warning is. Informational only."""

    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True)
class Replacement:
    """Delete the text covered by `range` and insert `replacement_text`."""

    range: SourceRange
    replacement_text: str

    def describe(self) -> str:
        return f"{self.range} -> {self.replacement_text!r}"


Edit = List[Replacement]
"""An atomic, possibly multi-range and multi-file fix."""


@dataclass
class Warning:
    """One diagnostic finding."""

    code: str
    """Stable identifier of the rule (or synthetic source) that produced it."""

    message: str
    """Human-readable explanation."""

    severity: Severity
    """Informational severity."""

    source_range: SourceRange
    """Where the problem is."""

    fix: Optional[Edit] = None
    """Automatic fix, if the problem has exactly one."""

    @property
    def file(self) -> str:
        return self.source_range.file

    @property
    def is_fixable(self) -> bool:
        return bool(self.fix)

    def describe(self) -> str:
        """Generate a one-line description of the warning."""
        description = (
            f"{self.source_range.file}:{self.source_range.start.line + 1}:"
            f"{self.source_range.start.column + 1} "
            f"[{self.severity.value}] {self.code}: {self.message}"
        )
        if self.fix:
            description += " (fixable)"
        return description


class WarningCarryingError(Exception):
    """
    An exception that carries the Warning which should be reported for it.

    Rules and analyzers raise this when they can describe their own failure
    precisely; the Linter surfaces the carried warning verbatim.
    """

    def __init__(self, warning: Warning):
        super().__init__(warning.message)
        self.warning = warning
