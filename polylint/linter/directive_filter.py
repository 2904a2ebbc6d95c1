"""
DirectiveFilter - Drops warnings suppressed by inline directives.

For each warning, the directives relevant to its code (blanket ones plus
those that name the code) are folded in source order. Starting from
"enabled", every relevant directive in the same file that ends strictly
before the warning starts sets the state to its verb. The warning
survives if the final state is "enabled".

Usage:
    directive_filter = DirectiveFilter.from_documents(documents)
    visible = directive_filter.filter(warnings)
"""

import logging
from typing import Dict, Iterable, List

from ..contracts.directives import Directive
from ..contracts.warnings import Warning


logger = logging.getLogger(__name__)


class DirectiveFilter:
    """
    Suppresses warnings according to enable/disable directives.

    Relevant directives are memoized per code for the lifetime of the
    filter, since the same code recurs across many warnings.
    """

    def __init__(self, directives: Iterable[Directive]):
        """
        Initialize the filter.

        Args:
            directives: Directives from every document in scope, any order
        """
        # Stable sort: directives at the same position keep discovery order,
        # so the later-discovered one wins the fold.
        self._directives: List[Directive] = sorted(
            directives,
            key=lambda d: (d.source_range.file, d.source_range.start, d.source_range.end),
        )
        self._by_code: Dict[str, List[Directive]] = {}

    @classmethod
    def from_documents(cls, documents: Iterable) -> "DirectiveFilter":
        directives: List[Directive] = []
        for document in documents:
            directives.extend(document.directives)
        return cls(directives)

    def directives_for(self, code: str) -> List[Directive]:
        """Directives that can affect warnings of `code`, in source order."""
        relevant = self._by_code.get(code)
        if relevant is None:
            relevant = [d for d in self._directives if d.applies_to(code)]
            self._by_code[code] = relevant
            logger.debug(f"{len(relevant)} directive(s) relevant to '{code}'")
        return relevant

    def is_enabled(self, warning: Warning) -> bool:
        enabled = True
        warning_range = warning.source_range
        for directive in self.directives_for(warning.code):
            directive_range = directive.source_range
            if directive_range.file != warning_range.file:
                continue
            if directive_range.end < warning_range.start:
                enabled = directive.enables
        return enabled

    def filter(self, warnings: Iterable[Warning]) -> List[Warning]:
        """
        Keep the warnings that are not suppressed.

        Args:
            warnings: Merged warnings in arrival order

        Returns:
            Surviving warnings, order preserved
        """
        warnings = list(warnings)
        visible = [w for w in warnings if self.is_enabled(w)]
        suppressed = len(warnings) - len(visible)
        if suppressed:
            logger.debug(f"Directives suppressed {suppressed} of {len(warnings)} warnings")
        return visible

    def __len__(self) -> int:
        return len(self._directives)
