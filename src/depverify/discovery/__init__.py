"""Artifact discovery across configured sources."""

from depverify.discovery.sources import SourceScanner, iter_archive_entries

__all__ = ["SourceScanner", "iter_archive_entries"]
