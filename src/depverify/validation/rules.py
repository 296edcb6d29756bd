"""Classification rules for dependency artifacts."""

from ..models.identity import ArtifactIdentity
from ..models.report import Classification
from ..utils.glob import match_any
from .framework import ClassificationRule, DiagnosticEvent

PRODUCTIZED_MARKERS = ("-redhat-", ".redhat-")


class IgnorePatternRule(ClassificationRule):
    """Ignore artifacts whose full identity matches a configured glob."""

    def __init__(self, patterns: list[str]):
        self.patterns = list(patterns)

    @property
    def name(self) -> str:
        return "ignore_pattern"

    def check(self, identity, events):
        candidate = str(identity)
        pattern = match_any(self.patterns, candidate)
        if pattern is None:
            return None

        reason = f"matches ignore pattern '{pattern}'"
        events.append(DiagnosticEvent(self.name, f"Artifact {reason}", candidate))
        return Classification.IGNORED, reason


class ProductizedNameRule(ClassificationRule):
    """Require a productization marker in the terminal file name.

    The container (directory path or distribution name) is never inspected:
    a ``foo-redhat-1.zip`` distribution holding ``lib/foo-1.0.jar`` is
    invalid.
    """

    def __init__(self, markers: tuple[str, ...] = PRODUCTIZED_MARKERS):
        self.markers = markers

    @property
    def name(self) -> str:
        return "productized_name"

    def check(self, identity: ArtifactIdentity, events):
        file_name = identity.terminal_file_name
        if is_productized(file_name, self.markers):
            events.append(DiagnosticEvent(self.name, "Valid file", str(identity)))
            return Classification.VALID, f"'{file_name}' carries a productization marker"

        reason = f"missing {' or '.join(self.markers)}"
        events.append(DiagnosticEvent(self.name, f"Invalid file ({reason})", str(identity)))
        return Classification.INVALID, reason


def is_productized(file_name: str, markers: tuple[str, ...] = PRODUCTIZED_MARKERS) -> bool:
    """Case-sensitive substring check for any productization marker."""
    return any(marker in file_name for marker in markers)
