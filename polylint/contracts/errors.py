"""
Errors - Exceptions raised by the lint core.

Configuration errors signal a mistake in how rules are wired together and
are never recovered. OffsetMappingError signals that a fix no longer
matches the text it is being applied to.
"""


class LintConfigurationError(Exception):
    """Base exception for registry wiring mistakes."""
    pass


class DuplicateRuleError(LintConfigurationError):
    """Raised when a rule or collection code is registered twice."""

    def __init__(self, code: str, existing: object, new: object):
        super().__init__(
            f"Attempted to register more than one rule / rule collection with "
            f"code '{code}'. Existing: {existing!r}, new: {new!r}"
        )
        self.code = code


class RuleNotFoundError(LintConfigurationError):
    """Raised when a code does not name a registered rule or collection."""

    def __init__(self, code: str):
        super().__init__(f"Could not find lint rule with code '{code}'")
        self.code = code


class OffsetMappingError(ValueError):
    """Raised when a source range cannot be mapped into the loaded text."""
    pass
