"""
Directive Scanner - Finds inline lint directives in source comments.

Recognized forms (with the default "polylint" prefix):

    <!-- polylint disable -->
    <!-- polylint enable undefined-elements, style-into-template -->
    /* polylint disable unbalanced-delimiters */
    // polylint enable

The directive's range covers the whole comment.
"""

import logging
import re
from typing import List, Optional, Pattern

from ..contracts.directives import DISABLE, ENABLE, Directive
from ..contracts.source_range import LineIndex, SourceRange


logger = logging.getLogger(__name__)

_ARG_SPLIT = re.compile(r"[\s,]+")


def _build_pattern(prefix: str) -> Pattern[str]:
    escaped = re.escape(prefix)
    return re.compile(
        rf"<!--\s*{escaped}\s+(?P<html>.*?)\s*-->"
        rf"|/\*\s*{escaped}\s+(?P<block>.*?)\s*\*/"
        rf"|//[ \t]*{escaped}[ \t]+(?P<line>[^\r\n]*)",
        re.DOTALL,
    )


def parse_directive_args(body: str) -> List[str]:
    """Split a directive body into [verb, code, code, ...]."""
    return [arg for arg in _ARG_SPLIT.split(body.strip()) if arg]


def scan_directives(
    url: str,
    contents: str,
    prefix: str = "polylint",
    line_index: Optional[LineIndex] = None,
) -> List[Directive]:
    """
    Discover directives in a document's text.

    Args:
        url: File identifier used in directive ranges
        contents: Full text of the document
        prefix: Keyword that introduces a directive
        line_index: Precomputed index for `contents`, built if omitted

    Returns:
        Directives in source order
    """
    index = line_index or LineIndex(contents)
    directives: List[Directive] = []

    for match in _build_pattern(prefix).finditer(contents):
        body = match.group("html") or match.group("block") or match.group("line") or ""
        args = parse_directive_args(body)
        if not args or args[0] not in (ENABLE, DISABLE):
            logger.debug(f"Ignoring unrecognized directive in {url}: {body!r}")
            continue

        source_range = SourceRange(
            url,
            index.offset_to_position(match.start()),
            index.offset_to_position(match.end()),
        )
        directives.append(Directive(source_range=source_range, args=args))

    return directives
