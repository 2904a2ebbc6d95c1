"""
Tests for lint_and_fix end to end on a temporary package.
"""

import re
from typing import List

import pytest

from polylint.analyzers.document import Document
from polylint.analyzers.fs_analyzer import FSAnalyzer
from polylint.contracts.warnings import Replacement, Severity, Warning
from polylint.core.config import LintSettings
from polylint.fixers.fix_command import collect_fixes, lint_and_fix
from polylint.linter.linter import Linter
from polylint.rules.base_rule import Rule, RuleCollection
from polylint.rules.registry import LintRegistry


class RenameRule(Rule):
    """Warns on every `old` word and offers to replace it with `new`."""

    def __init__(self, code: str, old: str, new: str):
        self._code = code
        self._pattern = re.compile(rf"\b{re.escape(old)}\b")
        self._new = new

    @property
    def code(self) -> str:
        return self._code

    @property
    def description(self) -> str:
        return f"Renames {self._pattern.pattern} to {self._new}."

    async def check(self, document: Document) -> List[Warning]:
        warnings = []
        for match in self._pattern.finditer(document.contents):
            source_range = document.range_for_offsets(match.start(), match.end())
            warnings.append(
                Warning(
                    code=self._code,
                    message=f"Use {self._new}",
                    severity=Severity.WARNING,
                    source_range=source_range,
                    fix=[Replacement(source_range, self._new)],
                )
            )
        return warnings


@pytest.fixture
def registry() -> LintRegistry:
    registry = LintRegistry()
    registry.register_all([
        RenameRule("content-to-slot", "content", "slot"),
        RenameRule("content-to-div", "content", "div"),
        RenameRule("legacy-dom", "shady", "shadow"),
        RuleCollection("upgrade", "Upgrade rules", ["content-to-slot", "legacy-dom"]),
    ])
    return registry


@pytest.fixture
def settings(tmp_path) -> LintSettings:
    return LintSettings(ROOT_DIR=str(tmp_path))


class TestLintAndFix:
    """The lint -> fix -> write flow."""

    @pytest.mark.asyncio
    async def test_fixes_written_to_disk(self, tmp_path, registry, settings):
        (tmp_path / "a.html").write_text("<content></content>\n<p>shady</p>\n", encoding="utf-8")
        linter = Linter(registry.get_rules(["upgrade"]), FSAnalyzer(settings=settings))

        report = await lint_and_fix(linter, ["a.html"], settings=settings)

        assert (tmp_path / "a.html").read_text(encoding="utf-8") == (
            "<slot></slot>\n<p>shadow</p>\n"
        )
        assert [p.resolve() for p in report.written_files] == [(tmp_path / "a.html").resolve()]
        assert report.summary == "Fixed 3 warnings."

    @pytest.mark.asyncio
    async def test_conflicting_fixes_need_rerun(self, tmp_path, registry, settings):
        (tmp_path / "a.html").write_text("<content>\n", encoding="utf-8")
        linter = Linter(
            registry.get_rules(["content-to-slot", "content-to-div"]),
            FSAnalyzer(settings=settings),
        )

        report = await lint_and_fix(linter, ["a.html"], settings=settings)

        assert (tmp_path / "a.html").read_text(encoding="utf-8") == "<slot>\n"
        assert report.edit_result.applied_count == 1
        assert report.edit_result.incompatible_count == 1
        assert report.summary == (
            "Fixed 1 warnings, 1 had conflicts with other fixes. "
            "Rerun the command to apply them."
        )

    @pytest.mark.asyncio
    async def test_no_write_leaves_files_untouched(self, tmp_path, registry, settings):
        (tmp_path / "a.html").write_text("shady", encoding="utf-8")
        linter = Linter(registry.get_rules(["upgrade"]), FSAnalyzer(settings=settings))

        report = await lint_and_fix(linter, ["a.html"], write=False, settings=settings)

        assert (tmp_path / "a.html").read_text(encoding="utf-8") == "shady"
        assert report.edit_result.edited_files == {"a.html": "shadow"}
        assert report.written_files == []

    @pytest.mark.asyncio
    async def test_nothing_to_fix(self, tmp_path, registry, settings):
        (tmp_path / "a.html").write_text("<p></p>", encoding="utf-8")
        linter = Linter(registry.get_rules(["upgrade"]), FSAnalyzer(settings=settings))

        report = await lint_and_fix(linter, ["a.html"], settings=settings)

        assert report.summary == "No fixes to apply."
        assert report.edit_result.edited_files == {}

    @pytest.mark.asyncio
    async def test_whole_package_when_no_files_given(self, tmp_path, registry, settings):
        (tmp_path / "a.html").write_text("shady", encoding="utf-8")
        (tmp_path / "node_modules").mkdir()
        (tmp_path / "node_modules" / "dep.html").write_text("shady", encoding="utf-8")
        linter = Linter(registry.get_rules(["upgrade"]), FSAnalyzer(settings=settings))

        report = await lint_and_fix(linter, settings=settings)

        assert (tmp_path / "a.html").read_text(encoding="utf-8") == "shadow"
        assert (tmp_path / "node_modules" / "dep.html").read_text(encoding="utf-8") == "shady"
        assert report.summary == "Fixed 1 warnings."

    @pytest.mark.asyncio
    async def test_suppressed_warnings_are_not_fixed(self, tmp_path, registry, settings):
        (tmp_path / "a.html").write_text(
            "shady\n<!-- polylint disable legacy-dom -->\nshady\n", encoding="utf-8"
        )
        linter = Linter(registry.get_rules(["upgrade"]), FSAnalyzer(settings=settings))

        await lint_and_fix(linter, ["a.html"], settings=settings)

        assert (tmp_path / "a.html").read_text(encoding="utf-8") == (
            "shadow\n<!-- polylint disable legacy-dom -->\nshady\n"
        )

    @pytest.mark.asyncio
    async def test_crlf_line_endings_preserved(self, tmp_path, registry, settings):
        (tmp_path / "a.html").write_bytes(b"<p>\r\nshady\r\n</p>\r\n")
        linter = Linter(registry.get_rules(["upgrade"]), FSAnalyzer(settings=settings))

        await lint_and_fix(linter, ["a.html"], settings=settings)

        assert (tmp_path / "a.html").read_bytes() == b"<p>\r\nshadow\r\n</p>\r\n"

    @pytest.mark.asyncio
    async def test_identity_fix_leaves_crlf_bytes_unchanged(self, tmp_path, settings):
        original = b"<p>\r\n<b>\r\n"
        (tmp_path / "a.html").write_bytes(original)
        linter = Linter([RenameRule("keep-b", "b", "b")], FSAnalyzer(settings=settings))

        report = await lint_and_fix(linter, ["a.html"], settings=settings)

        assert report.edit_result.applied_count == 1
        assert (tmp_path / "a.html").read_bytes() == original

    @pytest.mark.asyncio
    async def test_writes_under_analyzer_root_by_default(self, tmp_path, registry, monkeypatch):
        package = tmp_path / "package"
        package.mkdir()
        (package / "a.html").write_text("shady", encoding="utf-8")
        elsewhere = tmp_path / "elsewhere"
        elsewhere.mkdir()
        monkeypatch.chdir(elsewhere)
        linter = Linter(registry.get_rules(["upgrade"]), FSAnalyzer(str(package)))

        report = await lint_and_fix(linter, ["a.html"], settings=LintSettings(ROOT_DIR="."))

        assert (package / "a.html").read_text(encoding="utf-8") == "shadow"
        assert list(elsewhere.iterdir()) == []
        assert [p.resolve() for p in report.written_files] == [(package / "a.html").resolve()]

    @pytest.mark.asyncio
    async def test_explicit_root_wins(self, tmp_path, registry, settings):
        (tmp_path / "a.html").write_text("shady", encoding="utf-8")
        out = tmp_path / "out"
        out.mkdir()
        linter = Linter(registry.get_rules(["upgrade"]), FSAnalyzer(settings=settings))

        await lint_and_fix(linter, ["a.html"], root=out, settings=settings)

        assert (out / "a.html").read_text(encoding="utf-8") == "shadow"
        assert (tmp_path / "a.html").read_text(encoding="utf-8") == "shady"


def test_collect_fixes_keeps_warning_order():
    document = Document("a.html", "ab")
    first = Replacement(document.range_for_offsets(0, 1), "A")
    second = Replacement(document.range_for_offsets(1, 2), "B")
    warnings = [
        Warning("x", "m", Severity.WARNING, first.range, fix=[first]),
        Warning("y", "m", Severity.WARNING, second.range),
        Warning("z", "m", Severity.WARNING, second.range, fix=[second]),
    ]

    assert collect_fixes(warnings) == [[first], [second]]
