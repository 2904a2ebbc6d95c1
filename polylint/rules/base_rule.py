"""
Rule - Abstract base class for lint rules, and named rule collections.

Each rule inspects one document and returns the warnings it finds.

Usage:
    class NoInlineStylesRule(Rule):
        @property
        def code(self) -> str:
            return "no-inline-styles"

        @property
        def description(self) -> str:
            return "Warns about style attributes on elements."

        async def check(self, document: Document) -> List[Warning]:
            return [...]
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List

from ..contracts.warnings import Warning

if TYPE_CHECKING:
    from ..analyzers.document import Document


class Rule(ABC):
    """
    Abstract base class for lint rules.

    Subclasses must implement:
    - code: Unique identifier, shared namespace with collections
    - description: What the rule warns about
    - check(): Find warnings in one document

    A rule must not mutate state observable by other rules; it may await
    other resources while checking.
    """

    @property
    @abstractmethod
    def code(self) -> str:
        """
        Unique identifier, like "move-style-into-template".

        Returns:
            Rule code
        """
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        """
        Description of what the rule warns about.

        Returns:
            Human-readable description
        """
        pass

    @abstractmethod
    async def check(self, document: "Document") -> List[Warning]:
        """
        Find all warnings in the given document.

        Args:
            document: Immutable snapshot of one source file

        Returns:
            Warnings found, possibly carrying fixes

        Raises:
            WarningCarryingError: To report a failure as a specific warning
        """
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Rule):
            return False
        return self.__class__ == other.__class__ and self.code == other.code

    def __hash__(self) -> int:
        return hash((self.__class__.__name__, self.code))


@dataclass
class RuleCollection:
    """
    A named group of rules and other collections.

    Example:
        RuleCollection(
            code="polymer-2",
            description="Rules for projects that use Polymer 2.x",
            rules=["undefined-elements", "style-into-template"],
        )
    """

    code: str
    """Unique identifier, shared namespace with rules."""

    description: str
    """Who should use the collection, when, and what to expect."""

    rules: List[str] = field(default_factory=list)
    """Codes of member rules or collections."""

    def describe(self) -> str:
        return f"{self.code}: {len(self.rules)} members"
