"""
Directives - Inline enable/disable markers found in source comments.

A directive like `<!-- polylint disable undefined-elements -->` switches a
set of warning codes off (or back on) from its position onward.
"""

from dataclasses import dataclass, field
from typing import List

from .source_range import SourceRange


ENABLE = "enable"
DISABLE = "disable"


@dataclass(frozen=True)
class Directive:
    """
    One inline directive.

    `args[0]` is the verb, the remaining args are the codes it applies to.
    No codes means it applies to every code.
    """

    source_range: SourceRange
    args: List[str] = field(default_factory=list)

    @property
    def verb(self) -> str:
        return self.args[0] if self.args else ""

    @property
    def codes(self) -> List[str]:
        return list(self.args[1:])

    @property
    def applies_to_all(self) -> bool:
        return len(self.args) <= 1

    @property
    def enables(self) -> bool:
        return self.verb == ENABLE

    def applies_to(self, code: str) -> bool:
        """Whether this directive affects warnings with the given code."""
        return self.applies_to_all or code in self.args[1:]

    def __hash__(self) -> int:
        return hash((self.source_range, tuple(self.args)))
