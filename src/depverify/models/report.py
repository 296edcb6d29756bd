"""Verification report model."""

from dataclasses import dataclass, field
from enum import Enum

from depverify.models.identity import ArtifactIdentity, sort_identities


class Classification(str, Enum):
    """Outcome of classifying one artifact."""
    VALID = "valid"
    INVALID = "invalid"
    IGNORED = "ignored"


@dataclass
class VerificationReport:
    """Results of one verification run.

    The three lists are disjoint and each is kept sorted by identity string.
    """
    valid: list[ArtifactIdentity] = field(default_factory=list)
    invalid: list[ArtifactIdentity] = field(default_factory=list)
    ignored: list[ArtifactIdentity] = field(default_factory=list)
    directories: list[str] = field(default_factory=list)
    distributions: list[str] = field(default_factory=list)

    @classmethod
    def from_groups(cls, groups: dict[Classification, set[ArtifactIdentity]],
                    directories: list[str] | None = None,
                    distributions: list[str] | None = None) -> "VerificationReport":
        """Build a report from unordered classification groups."""
        return cls(
            valid=sort_identities(groups.get(Classification.VALID, ())),
            invalid=sort_identities(groups.get(Classification.INVALID, ())),
            ignored=sort_identities(groups.get(Classification.IGNORED, ())),
            directories=list(directories or []),
            distributions=list(distributions or []),
        )

    @property
    def total(self) -> int:
        return len(self.valid) + len(self.invalid) + len(self.ignored)

    @property
    def passed(self) -> bool:
        return not self.invalid

    @property
    def counts(self) -> dict[str, int]:
        return {
            Classification.VALID.value: len(self.valid),
            Classification.INVALID.value: len(self.invalid),
            Classification.IGNORED.value: len(self.ignored),
        }

    def classification_of(self, identity: ArtifactIdentity) -> Classification | None:
        """Look up which group an identity landed in."""
        for classification, members in self.groups().items():
            if identity in members:
                return classification
        return None

    def groups(self) -> dict[Classification, list[ArtifactIdentity]]:
        return {
            Classification.VALID: self.valid,
            Classification.INVALID: self.invalid,
            Classification.IGNORED: self.ignored,
        }

    def entries(self) -> list[tuple[ArtifactIdentity, Classification]]:
        """All identities with their classification, sorted by identity."""
        pairs = [
            (identity, classification)
            for classification, members in self.groups().items()
            for identity in members
        ]
        return sorted(pairs, key=lambda pair: str(pair[0]))

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON output."""
        return {
            "status": "pass" if self.passed else "fail",
            "total": self.total,
            "counts": self.counts,
            "sources": {
                "directories": self.directories,
                "distributions": self.distributions,
            },
            "valid": [str(identity) for identity in self.valid],
            "invalid": [str(identity) for identity in self.invalid],
            "ignored": [str(identity) for identity in self.ignored],
        }
