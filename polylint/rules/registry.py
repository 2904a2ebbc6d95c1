"""
Lint Registry - Catalog of rules and rule collections by code.

Rules and collections share one code namespace. Registration is validated
eagerly: a duplicate code or a collection member that is not yet
registered fails immediately, so wiring mistakes surface at import time
rather than at lint time.

Usage:
    from polylint.rules.registry import lint_registry

    lint_registry.register(UndefinedElementsRule())
    lint_registry.register(RuleCollection("polymer-2", "...", ["undefined-elements"]))

    rules = lint_registry.get_rules(["polymer-2"])
"""

import logging
from typing import Dict, Iterable, List, Optional, Set, Union

from ..contracts.errors import DuplicateRuleError, RuleNotFoundError
from .base_rule import Rule, RuleCollection


logger = logging.getLogger(__name__)

RuleOrCollection = Union[Rule, RuleCollection]


class LintRegistry:
    """
    Maps codes to rules or rule collections.

    The process-wide instance is `lint_registry`; tests and embedders can
    build their own instance and hand its resolved rules to a Linter.
    """

    def __init__(self):
        self._all: Dict[str, RuleOrCollection] = {}

    def register(self, item: RuleOrCollection) -> None:
        """
        Register a rule or collection so it can be retrieved later.

        Args:
            item: Rule or RuleCollection instance

        Raises:
            DuplicateRuleError: If the code is already registered
            RuleNotFoundError: If a collection member is not registered
        """
        existing = self._all.get(item.code)
        if existing is not None:
            raise DuplicateRuleError(item.code, existing, item)
        if isinstance(item, RuleCollection):
            # Resolving validates every member transitively.
            self.get_rules(item.rules)
        self._all[item.code] = item
        logger.debug(f"Registered {type(item).__name__}: {item.code}")

    def register_all(self, items: Iterable[RuleOrCollection]) -> None:
        """Register several items, in order."""
        for item in items:
            self.register(item)

    def get(self, code: str) -> Optional[RuleOrCollection]:
        return self._all.get(code)

    def get_rules(self, codes: Iterable[str]) -> List[Rule]:
        """
        Expand codes into the concrete rules they name.

        Collections are expanded transitively. Each code is expanded at
        most once, so cyclic collections terminate.

        Args:
            codes: Rule and/or collection codes

        Returns:
            Rules in first-seen order, without duplicates

        Raises:
            RuleNotFoundError: If any reachable code is not registered
        """
        results: Dict[Rule, None] = {}
        self._expand(list(codes), set(), results)
        return list(results)

    def _expand(
        self,
        codes: List[str],
        already_expanded: Set[str],
        results: Dict[Rule, None],
    ) -> None:
        for code in codes:
            if code in already_expanded:
                continue
            already_expanded.add(code)

            item = self._all.get(code)
            if item is None:
                raise RuleNotFoundError(code)

            if isinstance(item, RuleCollection):
                self._expand(item.rules, already_expanded, results)
            else:
                results.setdefault(item, None)

    @property
    def codes(self) -> List[str]:
        """All registered codes, in registration order."""
        return list(self._all)

    def __contains__(self, code: object) -> bool:
        return code in self._all

    def __len__(self) -> int:
        return len(self._all)

    def __repr__(self) -> str:
        return f"LintRegistry({len(self._all)} entries)"


lint_registry = LintRegistry()
