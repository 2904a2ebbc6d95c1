"""
Tests for Document snapshots and directive discovery.
"""

import pytest

from polylint.analyzers.directive_scanner import parse_directive_args, scan_directives
from polylint.analyzers.document import Document
from polylint.contracts.errors import OffsetMappingError
from polylint.contracts.source_range import SourcePosition, SourceRange


class TestDirectiveScanner:
    """Discovery of directives in comments."""

    def test_parses_codes_with_commas_and_spaces(self):
        assert parse_directive_args(" disable a, b  c,d ") == ["disable", "a", "b", "c", "d"]

    def test_html_comment(self):
        directives = scan_directives("x.html", "<p>\n  <!-- polylint disable a, b -->\n")

        assert len(directives) == 1
        directive = directives[0]
        assert directive.args == ["disable", "a", "b"]
        assert directive.source_range == SourceRange.from_coords("x.html", 1, 2, 1, 32)

    def test_css_and_js_comments(self):
        source = "/* polylint enable */\nvar a; // polylint disable foo\n"
        directives = scan_directives("x.js", source)

        assert [d.args for d in directives] == [["enable"], ["disable", "foo"]]
        assert directives[1].source_range.start == SourcePosition(1, 7)

    def test_multiline_comment_range(self):
        source = "<!--\n  polylint disable\n-->after"
        directives = scan_directives("x.html", source)

        assert directives[0].source_range.end == SourcePosition(2, 3)

    def test_unknown_verbs_and_other_prefixes_ignored(self):
        source = "<!-- polylint frobnicate a -->\n<!-- polylintx disable -->\n<!-- lint disable -->"
        assert scan_directives("x.html", source) == []

    def test_custom_prefix(self):
        directives = scan_directives("x.html", "<!-- mylint disable a -->", prefix="mylint")
        assert directives[0].codes == ["a"]


class TestDocument:
    """Document snapshot behaviour."""

    def test_directives_scanned_lazily(self):
        document = Document("a.html", "<!-- polylint disable -->\n<p></p>")

        assert len(document.directives) == 1
        assert document.directives[0].applies_to_all

    def test_disable_enable_pair(self, html_doc):
        document = Document("a.html", html_doc)

        verbs = [d.verb for d in document.directives]
        assert verbs == ["disable", "enable"]
        assert document.directives[0].source_range.start == SourcePosition(1, 0)
        assert not document.directives[0].applies_to("other")

    def test_explicit_directives_not_rescanned(self):
        document = Document("a.html", "<!-- polylint disable -->", directives=[])
        assert document.directives == []

    def test_soup_exposes_structure(self):
        document = Document("a.html", "<dom-module id='x'><template></template></dom-module>")

        module = document.soup.find("dom-module")
        assert module["id"] == "x"
        assert document.is_html

    def test_offsets_and_ranges(self):
        document = Document("a.css", "a {}\nb {}\n")

        source_range = document.range_for_offsets(5, 8)
        assert source_range == SourceRange.from_coords("a.css", 1, 0, 1, 3)
        assert document.source_range_to_offsets(source_range) == (5, 8)
        assert not document.is_html

    def test_range_outside_text_raises(self):
        document = Document("a.css", "a {}")
        with pytest.raises(OffsetMappingError):
            document.source_range_to_offsets(SourceRange.from_coords("a.css", 3, 0, 3, 1))
