"""
Pytest configuration for polylint tests.

Routes the package logger to stdout so rule and fixer decisions show up
in failing test output.
"""

import pytest

from polylint.core.logger import configure_logging


configure_logging("DEBUG")


# ============================================================================
# SHARED FIXTURES
# ============================================================================

@pytest.fixture
def html_doc() -> str:
    """Small HTML document with one suppressed region."""
    return (
        "<div>one</div>\n"
        "<!-- polylint disable shady -->\n"
        "<div>two</div>\n"
        "<!-- polylint enable shady -->\n"
    )
