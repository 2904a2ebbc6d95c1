"""
Linter - Runs a resolved set of rules over a set of documents.

For each document the Linter collects the analyzer's own warnings, then
runs every rule in order. A rule that raises does not abort the pass: its
failure becomes a single warning (the carried one for a
WarningCarryingError, an `internal-lint-error` otherwise). The merged list
is then pruned by inline directives.

Usage:
    from polylint import FSAnalyzer, Linter, lint_registry

    linter = Linter(lint_registry.get_rules(["polymer-2"]), FSAnalyzer("."))
    warnings = await linter.lint(["index.html"])
    warnings = await linter.lint_package()
"""

import logging
from typing import Iterable, List

from ..analyzers.base import Analysis, Analyzer
from ..analyzers.document import Document
from ..contracts.source_range import SourceRange
from ..contracts.warnings import (
    INTERNAL_LINT_ERROR,
    UNABLE_TO_ANALYZE,
    Severity,
    Warning,
    WarningCarryingError,
)
from ..rules.base_rule import Rule
from .directive_filter import DirectiveFilter


logger = logging.getLogger(__name__)


class Linter:
    """
    Groups a set of rules and applies them to documents from an analyzer.

    Rule execution order is the order of `rules`; document order is the
    input order (or the analyzer's traversal order for a package).
    """

    def __init__(
        self,
        rules: Iterable[Rule],
        analyzer: Analyzer,
        filter_directives: bool = True,
    ):
        """
        Initialize the linter.

        Args:
            rules: Resolved rules, typically from LintRegistry.get_rules()
            analyzer: Produces documents to lint
            filter_directives: Apply inline enable/disable directives
        """
        self._rules: List[Rule] = list(rules)
        self._analyzer = analyzer
        self._filter_directives = filter_directives

    @property
    def rules(self) -> List[Rule]:
        return self._rules.copy()

    @property
    def analyzer(self) -> Analyzer:
        return self._analyzer

    async def lint(self, files: List[str]) -> List[Warning]:
        """
        Lint the given files.

        Args:
            files: File identifiers the analyzer can resolve

        Returns:
            Visible warnings: load failures first, then per document the
            analyzer's warnings followed by rule warnings
        """
        analysis = await self._analyze_all(files)
        return await self._lint_analysis(analysis, analysis.documents)

    async def lint_package(self) -> List[Warning]:
        """
        Lint every document in the analyzer's package.

        External documents contribute their analyzer warnings only; rules
        run on package-local documents.
        """
        analysis = await self._analyzer.analyze_package()
        local = [doc for doc in analysis.documents if not doc.is_external]
        return await self._lint_analysis(analysis, local)

    async def _analyze_all(self, files: List[str]) -> Analysis:
        analysis = Analysis()
        for file in files:
            try:
                analysis.documents.append(await self._analyzer.analyze(file))
            except WarningCarryingError as e:
                analysis.warnings.append(e.warning)
            except Exception as e:
                logger.error(f"Internal error while analyzing {file}: {e}")
                analysis.warnings.append(
                    Warning(
                        code=UNABLE_TO_ANALYZE,
                        message=f"Internal Error while analyzing: {e}",
                        severity=Severity.WARNING,
                        source_range=SourceRange.zero(file),
                    )
                )
        return analysis

    async def _lint_analysis(
        self,
        analysis: Analysis,
        lintable: List[Document],
    ) -> List[Warning]:
        warnings: List[Warning] = list(analysis.warnings)
        lintable_ids = {id(doc) for doc in lintable}

        for document in analysis.documents:
            warnings.extend(document.warnings)
            if id(document) in lintable_ids:
                warnings.extend(await self._check_document(document))

        total = len(warnings)
        if self._filter_directives:
            warnings = DirectiveFilter.from_documents(analysis.documents).filter(warnings)

        logger.info(
            f"Linted {len(lintable)} document(s) with {len(self._rules)} rule(s): "
            f"{len(warnings)} warning(s)"
            + (f", {total - len(warnings)} suppressed" if total != len(warnings) else "")
        )
        return warnings

    async def _check_document(self, document: Document) -> List[Warning]:
        warnings: List[Warning] = []
        for rule in self._rules:
            found = await self._run_rule(rule, document)
            logger.debug(f"Rule {rule.code} found {len(found)} warning(s) in {document.url}")
            warnings.extend(found)
        return warnings

    async def _run_rule(self, rule: Rule, document: Document) -> List[Warning]:
        try:
            return list(await rule.check(document))
        except WarningCarryingError as e:
            logger.warning(f"Rule {rule.code} failed on {document.url}: {e}")
            return [e.warning]
        except Exception as e:
            logger.warning(f"Rule {rule.code} failed on {document.url}: {e}")
            return [
                Warning(
                    code=INTERNAL_LINT_ERROR,
                    message=f"Internal error during linting rule '{rule.code}': {e}",
                    severity=Severity.WARNING,
                    source_range=SourceRange.zero(document.url),
                )
            ]

    def __repr__(self) -> str:
        return f"Linter({len(self._rules)} rules, {self._analyzer!r})"
