"""
FSAnalyzer - File-system backed analyzer.

Resolves file identifiers relative to a root directory and snapshots them
as Documents. Files under any of the configured external directories
(bower_components, node_modules, ...) are marked external.

Usage:
    analyzer = FSAnalyzer("/path/to/package")
    document = await analyzer.analyze("src/my-element.html")
    analysis = await analyzer.analyze_package()
"""

import logging
import os
from pathlib import Path, PurePosixPath
from typing import Optional

from ..contracts.source_range import SourceRange
from ..contracts.warnings import Severity, Warning, WarningCarryingError
from ..core.config import LintSettings, settings as default_settings
from .base import Analysis, Analyzer
from .document import Document


logger = logging.getLogger(__name__)

COULD_NOT_LOAD = "could-not-load"


class FSAnalyzer(Analyzer):
    """
    Analyzer that reads documents from disk.

    Traversal for analyze_package() is sorted, so the document order, and
    therefore warning order, is deterministic.
    """

    def __init__(
        self,
        root: Optional[str] = None,
        settings: Optional[LintSettings] = None,
    ):
        """
        Initialize the analyzer.

        Args:
            root: Package root, defaults to settings.ROOT_DIR
            settings: Settings instance, defaults to the process settings
        """
        self._settings = settings or default_settings
        self._root = Path(root or self._settings.ROOT_DIR).resolve()
        self._extensions = {ext.lower() for ext in self._settings.INCLUDE_EXTENSIONS}
        self._external_dirs = set(self._settings.EXTERNAL_DIRS)

    @property
    def root(self) -> Path:
        return self._root

    def is_external(self, url: str) -> bool:
        return any(part in self._external_dirs for part in PurePosixPath(url).parts)

    async def analyze(self, url: str) -> Document:
        path = self._root / url
        try:
            contents = path.read_bytes().decode("utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Unable to load {url}: {e}")
            raise WarningCarryingError(
                Warning(
                    code=COULD_NOT_LOAD,
                    message=f"Unable to load {url}: {e}",
                    severity=Severity.ERROR,
                    source_range=SourceRange.zero(url),
                )
            ) from e

        return Document(
            url,
            contents,
            is_external=self.is_external(url),
            directive_prefix=self._settings.DIRECTIVE_PREFIX,
        )

    async def analyze_package(self) -> Analysis:
        analysis = Analysis()

        for dirpath, dirnames, filenames in os.walk(self._root):
            dirnames.sort()
            for filename in sorted(filenames):
                if Path(filename).suffix.lower() not in self._extensions:
                    continue
                url = (Path(dirpath) / filename).relative_to(self._root).as_posix()
                try:
                    analysis.documents.append(await self.analyze(url))
                except WarningCarryingError as e:
                    analysis.warnings.append(e.warning)

        external = sum(1 for doc in analysis.documents if doc.is_external)
        logger.info(
            f"Analyzed package {self._root}: {len(analysis.documents)} documents "
            f"({external} external), {len(analysis.warnings)} load failures"
        )
        return analysis

    def __repr__(self) -> str:
        return f"FSAnalyzer({str(self._root)!r})"
