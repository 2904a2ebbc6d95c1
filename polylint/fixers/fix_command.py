"""
Fix Command - Lint, collect fixes, apply them, and persist the result.

Library form of the `lint --fix` flow:
1. Lint the files (or the whole package)
2. Collect every warning's fix, in warning order
3. Apply the conflict-free subset
4. Write edited files back under the root directory

Usage:
    analyzer = FSAnalyzer(root)
    linter = Linter(lint_registry.get_rules(["polymer-2"]), analyzer)
    report = await lint_and_fix(linter, ["index.html"], root=root)
    print(report.summary)
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Union

from ..contracts.warnings import Edit, Warning
from ..core.config import LintSettings, settings as default_settings
from ..linter.linter import Linter
from .edit_applier import EditResult, Loader, apply_edits


logger = logging.getLogger(__name__)


@dataclass
class FixReport:
    """Outcome of one lint-and-fix run."""

    warnings: List[Warning] = field(default_factory=list)
    """Visible warnings from the lint pass."""

    edit_result: EditResult = field(default_factory=EditResult)
    """Which fixes applied and which conflicted."""

    written_files: List[Path] = field(default_factory=list)
    """Files written back to disk (empty when writing is disabled)."""

    @property
    def fixes_found(self) -> int:
        return sum(1 for w in self.warnings if w.fix)

    @property
    def summary(self) -> str:
        """The message reported to the user."""
        if self.fixes_found == 0:
            return "No fixes to apply."
        applied = self.edit_result.applied_count
        incompatible = self.edit_result.incompatible_count
        if incompatible:
            return (
                f"Fixed {applied} warnings, {incompatible} had conflicts with "
                f"other fixes. Rerun the command to apply them."
            )
        return f"Fixed {applied} warnings."


def collect_fixes(warnings: List[Warning]) -> List[Edit]:
    """Fixes of the given warnings, in warning order."""
    return [warning.fix for warning in warnings if warning.fix]


def write_edited_files(edited_files: Dict[str, str], root: Union[str, Path]) -> List[Path]:
    """
    Persist edited contents under root.

    Line endings are written exactly as they appear in the contents.

    Returns:
        Paths written, in edited_files order
    """
    root_path = Path(root)
    written: List[Path] = []
    for url, contents in edited_files.items():
        path = root_path / url
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(contents)
        written.append(path)
        logger.info(f"Fixed: {url}")
    return written


def _resolve_root(
    linter: Linter,
    root: Optional[Union[str, Path]],
    settings: LintSettings,
) -> Union[str, Path]:
    if root is not None:
        return root
    analyzer_root = getattr(linter.analyzer, "root", None)
    if analyzer_root is not None:
        return analyzer_root
    return settings.ROOT_DIR


async def lint_and_fix(
    linter: Linter,
    files: Optional[List[str]] = None,
    loader: Optional[Loader] = None,
    write: Optional[bool] = None,
    root: Optional[Union[str, Path]] = None,
    settings: Optional[LintSettings] = None,
) -> FixReport:
    """
    Lint and apply every automatic fix that does not conflict.

    Args:
        linter: Configured linter
        files: Files to lint; the whole package when None
        loader: Loads current file text, defaults to the linter's analyzer
        write: Persist edited files, defaults to settings.WRITE_FIXES
        root: Directory files are written under, defaults to the analyzer's
            root, then settings.ROOT_DIR
        settings: Settings instance, defaults to the process settings

    Returns:
        FixReport with warnings, edit result and written paths

    Raises:
        OffsetMappingError: If a fix no longer matches its file
    """
    settings = settings or default_settings
    write = settings.WRITE_FIXES if write is None else write

    if files is None:
        warnings = await linter.lint_package()
    else:
        warnings = await linter.lint(files)

    report = FixReport(warnings=warnings)
    fixes = collect_fixes(warnings)
    if not fixes:
        logger.info(report.summary)
        return report

    report.edit_result = await apply_edits(fixes, loader or linter.analyzer.load)
    if write and report.edit_result.edited_files:
        report.written_files = write_edited_files(
            report.edit_result.edited_files,
            _resolve_root(linter, root, settings),
        )

    logger.info(report.summary)
    return report
