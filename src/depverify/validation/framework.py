"""Core classification framework for discovered artifacts.

Classification is pure: rules report what they decided as diagnostic events
and never log. The caller (usually the Verifier) decides whether and how to
emit those events.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass, field

from ..config import VerifyConfig
from ..models.identity import ArtifactIdentity
from ..models.report import Classification


@dataclass(frozen=True)
class DiagnosticEvent:
    """A single diagnostic produced while classifying an artifact."""
    rule: str
    message: str
    identity: str

    def __str__(self) -> str:
        return f"{self.rule}: {self.message}: {self.identity}"


@dataclass
class ClassificationResult:
    """Outcome of classifying one artifact."""
    identity: ArtifactIdentity
    classification: Classification
    rule: str
    reason: str
    events: list[DiagnosticEvent] = field(default_factory=list)


class ClassificationRule(ABC):
    """Base class for classification rules.

    Rules run in order; the first one returning a classification decides.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Rule name for identification."""
        pass

    @abstractmethod
    def check(self, identity: ArtifactIdentity,
              events: list[DiagnosticEvent]) -> tuple[Classification, str] | None:
        """Evaluate the rule.

        Args:
            identity: Artifact being classified
            events: Diagnostic events to append to

        Returns:
            (classification, reason) when the rule decides, None to defer
        """
        pass


class Classifier:
    """Applies the ignore rule, then the productization rule, to artifacts."""

    def __init__(self, rules: list[ClassificationRule]):
        if not rules:
            raise ValueError("Classifier requires at least one rule")
        self.rules = list(rules)

    @classmethod
    def from_config(cls, config: VerifyConfig) -> "Classifier":
        """Create the default rule chain for a configuration."""
        from .rules import IgnorePatternRule, ProductizedNameRule

        return cls([
            IgnorePatternRule(config.ignore_files),
            ProductizedNameRule(),
        ])

    def classify(self, identity: ArtifactIdentity) -> ClassificationResult:
        """Classify one artifact."""
        events: list[DiagnosticEvent] = []
        for rule in self.rules:
            decision = rule.check(identity, events)
            if decision is not None:
                classification, reason = decision
                return ClassificationResult(identity, classification, rule.name, reason, events)

        raise ValueError(f"No rule classified artifact: {identity}")

    def classify_all(self, identities: Iterable[ArtifactIdentity]
                     ) -> tuple[dict[Classification, set[ArtifactIdentity]], list[ClassificationResult]]:
        """Partition artifacts into the three classification groups.

        Returns:
            Groups keyed by classification, and per-artifact results sorted
            by identity
        """
        groups: dict[Classification, set[ArtifactIdentity]] = {c: set() for c in Classification}
        results = [self.classify(identity) for identity in sorted(identities, key=str)]
        for result in results:
            groups[result.classification].add(result.identity)
        return groups, results


def classify(identity: ArtifactIdentity | str, config: VerifyConfig) -> ClassificationResult:
    """Classify a single artifact identity under a configuration."""
    if isinstance(identity, str):
        identity = ArtifactIdentity.parse(identity)
    return Classifier.from_config(config).classify(identity)
