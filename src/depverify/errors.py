"""Error taxonomy for depverify runs.

Every failure aborts the whole run. Each error class carries the process exit
code the CLI reports for it, so a calling build pipeline can tell a
miswired configuration apart from a genuine validation failure.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from depverify.models.identity import ArtifactIdentity
    from depverify.models.report import VerificationReport

EXIT_OK = 0
EXIT_VALIDATION_FAILURE = 1
EXIT_CONFIGURATION_FAILURE = 3
EXIT_EXECUTION_FAILURE = 4


class VerificationError(Exception):
    """Base class for all depverify failures."""
    exit_code: int = EXIT_EXECUTION_FAILURE


class ConfigurationError(VerificationError):
    """A configured source is unusable (e.g. a directory that does not exist)."""
    exit_code = EXIT_CONFIGURATION_FAILURE

    def __init__(self, message: str, path: Path | None = None):
        super().__init__(message)
        self.path = path


class NoArtifactsFoundError(ConfigurationError):
    """Directory sources yielded zero artifacts to verify."""

    def __init__(self, message: str = "Found 0 dependencies (from configured sources) to verify!"):
        super().__init__(message)


class DistributionReadError(VerificationError):
    """A distribution archive could not be opened or read."""

    def __init__(self, distribution: Path, cause: Exception | str):
        super().__init__(f"Cannot read distribution {distribution.name}: {cause}")
        self.distribution = distribution
        self.cause = cause


class ValidationFailure(VerificationError):
    """One or more artifacts are missing the productization marker."""
    exit_code = EXIT_VALIDATION_FAILURE

    def __init__(self, report: VerificationReport):
        self.report = report
        self.invalid_artifacts: list[ArtifactIdentity] = list(report.invalid)
        super().__init__(format_invalid_artifacts(self.invalid_artifacts))


class ExecutionError(VerificationError):
    """Unexpected failure during scanning or classification."""

    def __init__(self, message: str, cause: Exception | None = None):
        super().__init__(message)
        self.cause = cause


def format_invalid_artifacts(invalid_artifacts) -> str:
    """Render the failure message: one sorted identity per line, four-space indented."""
    lines = "".join(f"    {artifact}\n" for artifact in sorted(str(a) for a in invalid_artifacts))
    return f"Invalid dependencies found: \n{lines}"
