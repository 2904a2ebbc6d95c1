"""
Rules - The rule contract and the registry rules are resolved from.
"""

from .base_rule import Rule, RuleCollection
from .registry import LintRegistry, lint_registry

__all__ = ["Rule", "RuleCollection", "LintRegistry", "lint_registry"]
