"""Artifact discovery in directories and archive distributions."""

import logging
import tarfile
import zipfile
from collections.abc import Iterable, Iterator
from pathlib import Path

from depverify.errors import ConfigurationError, DistributionReadError
from depverify.models.identity import ArtifactIdentity, sort_identities
from depverify.utils.paths import extension_of

logger = logging.getLogger(__name__)

VERBOSE_PREFIX = "[VERBOSE] "


class SourceScanner:
    """Finds dependency files in one configured source at a time."""

    def __init__(self, file_types: Iterable[str], verbose: bool = False):
        """Initialize scanner.

        Args:
            file_types: Extensions (without dot) that mark a dependency file
            verbose: Emit step-by-step diagnostic trace
        """
        self.file_types = frozenset(file_types)
        self.verbose = verbose

    def is_dependency_file(self, name: str) -> bool:
        """Check the extension after the last dot against the configured types."""
        extension = extension_of(name)
        if extension is None:
            self._trace(f"File has no extension, skipping: {name}")
            return False

        if extension not in self.file_types:
            self._trace(f"File extension '{extension}' not in fileTypes {sorted(self.file_types)}: {name}")
            return False
        return True

    def scan_directory(self, directory: Path) -> set[ArtifactIdentity]:
        """Find dependency files directly inside a directory (non-recursive).

        Raises:
            ConfigurationError: If the path is not an existing directory
        """
        directory = Path(directory)
        if not directory.is_dir():
            raise ConfigurationError(f"Configured directory is not a directory: {directory}", path=directory)

        dir_path = directory.resolve()
        self._trace(f"Scanning directory: {dir_path}")

        scanned = 0
        found: set[ArtifactIdentity] = set()
        for child in dir_path.iterdir():
            if not child.is_file():
                continue
            scanned += 1
            if self.is_dependency_file(child.name):
                found.add(ArtifactIdentity.for_directory_file(dir_path, child.name))

        self._trace(f"Scanned {scanned} files in directory: {dir_path}")
        self._trace(f"Found {len(found)} dependency files in directory: {dir_path}")
        self._trace_identities(found)
        return found

    def scan_distribution(self, distribution: Path) -> set[ArtifactIdentity]:
        """Find dependency files among all entries of a distribution archive.

        Raises:
            DistributionReadError: If the archive cannot be opened or read
        """
        distribution = Path(distribution)
        self._trace(f"Scanning distribution: {distribution.name}")

        total_entries = 0
        regular_entries = 0
        found: set[ArtifactIdentity] = set()
        try:
            for entry_name, is_dir in iter_archive_entries(distribution):
                total_entries += 1
                if is_dir:
                    continue
                regular_entries += 1
                if self.is_dependency_file(entry_name):
                    identity = ArtifactIdentity.for_distribution_entry(distribution, entry_name)
                    found.add(identity)
                    self._trace(f"Found dependency in archive: {identity}")
                else:
                    self._trace(f"Skipping non-dependency file in archive: {entry_name}")
        except (OSError, zipfile.BadZipFile, tarfile.TarError) as e:
            raise DistributionReadError(distribution, e) from e

        self._trace(f"Distribution {distribution.name} scan summary:")
        self._trace(f"  Total entries: {total_entries}")
        self._trace(f"  Regular file entries: {regular_entries}")
        self._trace(f"  Dependency file entries: {len(found)}")
        return found

    def _trace_identities(self, identities: Iterable[ArtifactIdentity]) -> None:
        if self.verbose:
            for identity in sort_identities(identities):
                self._trace(f"  - {identity}")

    def _trace(self, message: str) -> None:
        if self.verbose:
            logger.info(f"{VERBOSE_PREFIX}{message}")


def iter_archive_entries(archive: Path) -> Iterator[tuple[str, bool]]:
    """Yield ``(entry_name, is_directory)`` for every entry of a zip or tar archive.

    The archive stays open only while the generator runs and is closed on
    every exit path.

    Raises:
        FileNotFoundError: If the archive does not exist
        zipfile.BadZipFile: If the file is neither a zip nor a tar archive
    """
    if not archive.is_file():
        raise FileNotFoundError(f"No such archive file: {archive}")

    if zipfile.is_zipfile(archive):
        with zipfile.ZipFile(archive) as zf:
            for info in zf.infolist():
                yield info.filename, info.is_dir()
    elif tarfile.is_tarfile(archive):
        with tarfile.open(archive) as tf:
            for member in tf:
                yield member.name, member.isdir()
    else:
        raise zipfile.BadZipFile(f"Unsupported archive format: {archive.name}")
