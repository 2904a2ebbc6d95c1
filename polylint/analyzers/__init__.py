"""
Analyzers - Document snapshots and the analyzers that produce them.
"""

from .base import Analysis, Analyzer
from .directive_scanner import scan_directives
from .document import Document
from .fs_analyzer import FSAnalyzer

__all__ = ["Analysis", "Analyzer", "scan_directives", "Document", "FSAnalyzer"]
