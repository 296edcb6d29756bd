"""Data models for depverify identities and reports."""

from depverify.models.identity import ArtifactIdentity, sort_identities
from depverify.models.report import Classification, VerificationReport

__all__ = [
    "ArtifactIdentity",
    "Classification",
    "VerificationReport",
    "sort_identities",
]
