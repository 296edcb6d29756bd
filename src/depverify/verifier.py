"""Verification run orchestration.

A run scans every configured directory, then every configured distribution,
classifies the merged artifacts and fails when any of them is invalid.
"""

import logging

from depverify.config import VerifyConfig
from depverify.discovery.sources import VERBOSE_PREFIX, SourceScanner
from depverify.errors import (
    ExecutionError,
    NoArtifactsFoundError,
    ValidationFailure,
    VerificationError,
)
from depverify.models.identity import ArtifactIdentity
from depverify.models.report import VerificationReport
from depverify.validation import Classifier

logger = logging.getLogger(__name__)


class Verifier:
    """Drives one verification run over a configuration."""

    def __init__(self, config: VerifyConfig):
        self.config = config
        self.scanner = SourceScanner(config.file_types, verbose=config.verbose)
        self.classifier = Classifier.from_config(config)

    def run(self) -> VerificationReport:
        """Scan, classify and gate.

        Returns:
            VerificationReport when no artifact is invalid

        Raises:
            ConfigurationError: A configured directory is not a directory
            NoArtifactsFoundError: Directory sources yielded nothing
            DistributionReadError: A distribution cannot be read
            ValidationFailure: One or more artifacts are invalid
            ExecutionError: Any other failure, chained to its cause
        """
        report = self.inspect()
        if not report.passed:
            raise ValidationFailure(report)
        return report

    def inspect(self) -> VerificationReport:
        """Scan and classify every configured source without gating on invalid artifacts.

        Raises:
            ConfigurationError: A configured directory is not a directory
            NoArtifactsFoundError: Directory sources yielded nothing
            DistributionReadError: A distribution cannot be read
            ExecutionError: Any other failure, chained to its cause
        """
        try:
            logger.info(
                f"Verifying dependencies in {len(self.config.directories)} directories and "
                f"{len(self.config.distributions)} distributions"
            )
            self._trace(f"File types to search for: {sorted(self.config.file_types)}")
            self._trace(f"Ignore patterns: {self.config.ignore_files}")

            return self.evaluate(self.collect())
        except VerificationError:
            raise
        except Exception as e:
            raise ExecutionError(f"Cannot verify dependencies: {e}", cause=e) from e

    def collect(self) -> set[ArtifactIdentity]:
        """Scan all configured sources into one identity set.

        Directories are scanned first and must yield at least one artifact
        before any distribution is opened.
        """
        identities: set[ArtifactIdentity] = set()

        for directory in self.config.directories:
            identities |= self.scanner.scan_directory(directory)

        if not identities:
            raise NoArtifactsFoundError()

        self._trace(f"Total files found in directories: {len(identities)}")

        for distribution in self.config.distributions:
            found = self.scanner.scan_distribution(distribution)
            self._trace(f"Found {len(found)} dependency files in distribution: {distribution.name}")
            identities |= found

        return identities

    def evaluate(self, identities: set[ArtifactIdentity]) -> VerificationReport:
        """Classify identities and build the report without failing on invalid ones."""
        logger.info(f"Validating {len(identities)} total dependency files")

        groups, results = self.classifier.classify_all(identities)
        if self.config.verbose:
            for result in results:
                for event in result.events:
                    self._trace(f"{event.message}: {event.identity}")

        report = VerificationReport.from_groups(
            groups,
            directories=[str(d) for d in self.config.directories],
            distributions=[str(d) for d in self.config.distributions],
        )

        logger.info("Validation results:")
        logger.info(f"  Valid artifacts: {len(report.valid)}")
        logger.info(f"  Invalid artifacts: {len(report.invalid)}")
        logger.info(f"  Ignored artifacts: {len(report.ignored)}")
        return report

    def _trace(self, message: str) -> None:
        if self.config.verbose:
            logger.info(f"{VERBOSE_PREFIX}{message}")


def verify(config: VerifyConfig) -> VerificationReport:
    """Run a full verification for a configuration."""
    return Verifier(config).run()
