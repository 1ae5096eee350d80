"""Keyword scanning for devotional and disallowed vocabulary."""

from faithscan.scanning.scanner import KeywordScanner

__all__ = ["KeywordScanner"]
