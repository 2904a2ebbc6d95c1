"""
Contracts - Data structures shared by the lint core.

Provides:
- SourcePosition / SourceRange: locations in a file
- Warning / Replacement / Edit: diagnostics and their fixes
- Directive: inline enable/disable markers
- Configuration and offset-mapping errors
"""

from .directives import Directive
from .errors import (
    DuplicateRuleError,
    LintConfigurationError,
    OffsetMappingError,
    RuleNotFoundError,
)
from .source_range import LineIndex, SourcePosition, SourceRange
from .warnings import (
    INTERNAL_LINT_ERROR,
    UNABLE_TO_ANALYZE,
    Edit,
    Replacement,
    Severity,
    Warning,
    WarningCarryingError,
)

__all__ = [
    "Directive",
    "DuplicateRuleError",
    "LintConfigurationError",
    "OffsetMappingError",
    "RuleNotFoundError",
    "LineIndex",
    "SourcePosition",
    "SourceRange",
    "INTERNAL_LINT_ERROR",
    "UNABLE_TO_ANALYZE",
    "Edit",
    "Replacement",
    "Severity",
    "Warning",
    "WarningCarryingError",
]
