"""
Fixers - Conflict-free application of warning fixes.
"""

from .edit_applier import EditResult, apply_edits, can_apply, partition_edits
from .fix_command import FixReport, lint_and_fix

__all__ = [
    "EditResult",
    "apply_edits",
    "can_apply",
    "partition_edits",
    "FixReport",
    "lint_and_fix",
]
