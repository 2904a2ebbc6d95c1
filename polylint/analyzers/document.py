"""
Document - Immutable snapshot of one source file.

A Document is what rules check and what the edit applier loads before
splicing: it exposes the text, offset arithmetic over that text, the
analyzer's own warnings, the inline directives, and a BeautifulSoup tree
for HTML documents so rules can query structure.

Usage:
    document = Document("index.html", html)
    for tag in document.soup.find_all("dom-module"):
        ...
    start, end = document.source_range_to_offsets(warning.source_range)
"""

from pathlib import PurePosixPath
from typing import List, Optional, Tuple

from bs4 import BeautifulSoup

from ..contracts.directives import Directive
from ..contracts.source_range import LineIndex, SourcePosition, SourceRange
from ..contracts.warnings import Warning
from ..core.config import settings
from .directive_scanner import scan_directives


HTML_SUFFIXES = (".html", ".htm")


class Document:
    """
    Snapshot of one file's text and structure.

    Features:
    - Position/offset conversion (LineIndex)
    - Pre-computed analyzer warnings
    - Lazily discovered inline directives
    - Lazily parsed BeautifulSoup tree for HTML
    """

    def __init__(
        self,
        url: str,
        contents: str,
        warnings: Optional[List[Warning]] = None,
        directives: Optional[List[Directive]] = None,
        is_external: bool = False,
        directive_prefix: Optional[str] = None,
    ):
        """
        Initialize the document.

        Args:
            url: File identifier used in warning ranges
            contents: Full text of the file
            warnings: Diagnostics the analyzer attached to this document
            directives: Inline directives; scanned from contents if None
            is_external: True for files outside the linted package
            directive_prefix: Keyword for directive scanning
        """
        self._url = url
        self._contents = contents
        self._warnings = list(warnings or [])
        self._directives = list(directives) if directives is not None else None
        self._is_external = is_external
        self._directive_prefix = directive_prefix or settings.DIRECTIVE_PREFIX
        self._line_index = LineIndex(contents)
        self._soup: Optional[BeautifulSoup] = None

    @property
    def url(self) -> str:
        return self._url

    @property
    def contents(self) -> str:
        return self._contents

    @property
    def warnings(self) -> List[Warning]:
        """Warnings attached by the analyzer (parse errors and the like)."""
        return list(self._warnings)

    @property
    def is_external(self) -> bool:
        return self._is_external

    @property
    def is_html(self) -> bool:
        return PurePosixPath(self._url).suffix.lower() in HTML_SUFFIXES

    @property
    def directives(self) -> List[Directive]:
        """Inline directives in source order."""
        if self._directives is None:
            self._directives = scan_directives(
                self._url,
                self._contents,
                prefix=self._directive_prefix,
                line_index=self._line_index,
            )
        return list(self._directives)

    @property
    def soup(self) -> BeautifulSoup:
        """Parsed HTML tree. Non-HTML documents parse as a single text node."""
        if self._soup is None:
            self._soup = BeautifulSoup(self._contents, "html.parser")
        return self._soup

    def source_range_to_offsets(self, source_range: SourceRange) -> Tuple[int, int]:
        """
        Absolute (start, end) offsets of a range in this document's text.

        Raises:
            OffsetMappingError: If the range does not fit the text
        """
        return self._line_index.source_range_to_offsets(source_range)

    def offset_to_position(self, offset: int) -> SourcePosition:
        return self._line_index.offset_to_position(offset)

    def range_for_offsets(self, start: int, end: int) -> SourceRange:
        """Build a range in this document from absolute offsets."""
        return SourceRange(
            self._url,
            self._line_index.offset_to_position(start),
            self._line_index.offset_to_position(end),
        )

    def __repr__(self) -> str:
        return f"Document({self._url!r}, external={self._is_external})"
