"""
Analyzer contract - What the Linter needs from the document analyzer.

The analyzer turns file identifiers into Document snapshots. It owns
parsing and reference resolution; the lint core only consumes the result.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List

from ..contracts.warnings import Warning
from .document import Document


@dataclass
class Analysis:
    """Documents produced by one analyzer call, plus load-level warnings."""

    documents: List[Document] = field(default_factory=list)
    """Successfully analyzed documents, in traversal order."""

    warnings: List[Warning] = field(default_factory=list)
    """Warnings for files that could not be turned into documents."""


class Analyzer(ABC):
    """
    Abstract base class for document analyzers.

    Subclasses must implement:
    - analyze(): Snapshot one file
    - analyze_package(): Snapshot every file of the package
    - load(): Fresh snapshot used right before applying edits
    """

    @abstractmethod
    async def analyze(self, url: str) -> Document:
        """
        Analyze a single file.

        Raises:
            WarningCarryingError: When the failure can be described as a warning
        """
        pass

    @abstractmethod
    async def analyze_package(self) -> Analysis:
        """Analyze every file reachable in the package, external ones included."""
        pass

    async def load(self, url: str) -> Document:
        """Load the current text of a file. Defaults to a fresh analysis."""
        return await self.analyze(url)
