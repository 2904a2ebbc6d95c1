"""
Edit Applier - Applies the maximal conflict-free subset of fixes.

Edits are accepted first-come-first-served: an edit is applied only if
none of its replacements overlap each other or any replacement of an
edit accepted earlier. Rejected edits are reported, not dropped, so a
caller can re-lint and apply them on a later pass.

Accepted replacements are spliced per file from the end of the text to
the beginning, so every not-yet-applied range still points at the
original offsets.

Usage:
    from polylint.fixers import apply_edits

    fixes = [w.fix for w in warnings if w.fix]
    result = await apply_edits(fixes, analyzer.load)
    for url, contents in result.edited_files.items():
        ...
"""

import logging
from dataclasses import dataclass, field
from typing import Awaitable, Callable, Dict, Iterable, List, Tuple

from ..analyzers.document import Document
from ..contracts.source_range import do_ranges_overlap
from ..contracts.warnings import Edit, Replacement


logger = logging.getLogger(__name__)

Loader = Callable[[str], Awaitable[Document]]
"""Returns the current snapshot of a file. Anything with `contents` and
`source_range_to_offsets()` will do."""


@dataclass
class EditResult:
    """
    Result of applying a batch of edits.

    Attributes:
        applied_edits: Edits with no conflicts, reflected in edited_files
        incompatible_edits: Edits that overlapped an earlier accepted edit
            (or themselves)
        edited_files: Map from file identifier to new contents
    """

    applied_edits: List[Edit] = field(default_factory=list)
    incompatible_edits: List[Edit] = field(default_factory=list)
    edited_files: Dict[str, str] = field(default_factory=dict)

    @property
    def applied_count(self) -> int:
        return len(self.applied_edits)

    @property
    def incompatible_count(self) -> int:
        return len(self.incompatible_edits)

    @property
    def needs_rerun(self) -> bool:
        return len(self.incompatible_edits) > 0

    def describe(self) -> str:
        """Generate human-readable summary."""
        lines = [
            f"EditResult: {len(self.applied_edits)} applied, "
            f"{len(self.incompatible_edits)} incompatible",
        ]
        for url in self.edited_files:
            lines.append(f"  edited: {url}")
        for edit in self.incompatible_edits[:5]:
            lines.append(f"  conflict: {', '.join(r.describe() for r in edit)}")
        if len(self.incompatible_edits) > 5:
            lines.append(f"  ... and {len(self.incompatible_edits) - 5} more")
        return "\n".join(lines)


def replacements_conflict(a: Replacement, b: Replacement) -> bool:
    """Same file and the ranges are equal or overlap."""
    return do_ranges_overlap(a.range, b.range)


def can_apply(edit: Edit, accepted: Dict[str, List[Replacement]]) -> bool:
    """
    Whether an edit is internally consistent and clear of accepted ones.

    Args:
        edit: Candidate edit
        accepted: Already accepted replacements, grouped by file

    Returns:
        True if no replacement conflicts with another
    """
    # TODO: quadratic in replacements per file; keep `accepted` sorted by
    # start position and bisect if fix batches grow to thousands.
    for i, replacement in enumerate(edit):
        for other in accepted.get(replacement.range.file, []):
            if replacements_conflict(replacement, other):
                return False
        for other in edit[:i]:
            if replacements_conflict(replacement, other):
                return False
    return True


def partition_edits(edits: Iterable[Edit]) -> Tuple[List[Edit], List[Edit]]:
    """
    Split edits into (accepted, incompatible), first-come-first-served.

    The outcome depends only on input order, never on edit content.
    """
    applied: List[Edit] = []
    incompatible: List[Edit] = []
    accepted: Dict[str, List[Replacement]] = {}

    for edit in edits:
        if can_apply(edit, accepted):
            applied.append(edit)
            for replacement in edit:
                accepted.setdefault(replacement.range.file, []).append(replacement)
        else:
            incompatible.append(edit)
            logger.warning(
                "Edit conflicts with an earlier fix, deferring: "
                + ", ".join(r.describe() for r in edit)
            )

    return applied, incompatible


def splice_replacements(document: Document, replacements: List[Replacement]) -> str:
    """
    Apply non-overlapping replacements to a document's text.

    Replacements are applied in descending range order (end, then start),
    so earlier offsets stay valid throughout.

    Raises:
        OffsetMappingError: If a range does not fit the document's text
    """
    contents = document.contents
    ordered = sorted(
        replacements,
        key=lambda r: (r.range.end, r.range.start),
        reverse=True,
    )
    for replacement in ordered:
        start, end = document.source_range_to_offsets(replacement.range)
        contents = contents[:start] + replacement.replacement_text + contents[end:]
        logger.debug(f"Applied replacement {replacement.describe()}")
    return contents


async def apply_edits(edits: Iterable[Edit], loader: Loader) -> EditResult:
    """
    Apply every edit that does not conflict with an earlier one.

    Args:
        edits: Edits in priority order (earlier wins a conflict)
        loader: Loads the current snapshot of a file

    Returns:
        EditResult; files with no accepted replacements are absent from
        edited_files

    Raises:
        OffsetMappingError: If a replacement does not fit the loaded text
    """
    applied, incompatible = partition_edits(edits)
    result = EditResult(applied_edits=applied, incompatible_edits=incompatible)

    replacements_by_file: Dict[str, List[Replacement]] = {}
    for edit in applied:
        for replacement in edit:
            replacements_by_file.setdefault(replacement.range.file, []).append(replacement)

    for url, replacements in replacements_by_file.items():
        document = await loader(url)
        result.edited_files[url] = splice_replacements(document, replacements)

    logger.info(
        f"Applied {len(applied)} edit(s) to {len(result.edited_files)} file(s), "
        f"{len(incompatible)} incompatible"
    )
    return result
