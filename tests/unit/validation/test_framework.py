"""Tests for the classification framework."""

import pytest

from depverify.config import VerifyConfig
from depverify.models.identity import ArtifactIdentity
from depverify.models.report import Classification
from depverify.validation.framework import (
    ClassificationRule,
    Classifier,
    DiagnosticEvent,
    classify,
)
from depverify.validation.rules import ProductizedNameRule


@pytest.fixture
def identities():
    return {
        ArtifactIdentity.parse("/opt/lib::a-redhat-1.jar"),
        ArtifactIdentity.parse("/opt/lib::b-1.0.jar"),
        ArtifactIdentity.parse("dist.zip::lib/junit-4.13.jar"),
        ArtifactIdentity.parse("dist-redhat-1.zip::lib/c.redhat-00001.jar"),
    }


class DeferringRule(ClassificationRule):
    @property
    def name(self) -> str:
        return "deferring"

    def check(self, identity, events):
        events.append(DiagnosticEvent(self.name, "deferred", str(identity)))
        return None


class TestClassify:
    """Test the classify entry point."""

    def test_valid(self):
        result = classify("/d::hibernate-core-redhat-1.jar", VerifyConfig())
        assert result.classification == Classification.VALID
        assert result.rule == "productized_name"

    def test_invalid(self):
        result = classify("/d::hibernate-core-1.2.3.jar", VerifyConfig())
        assert result.classification == Classification.INVALID

    def test_container_name_is_irrelevant(self):
        result = classify("my-app-redhat-123.zip::lib/hibernate-core-1.2.3.jar", VerifyConfig())
        assert result.classification == Classification.INVALID

    def test_ignore_takes_precedence_over_invalid(self):
        config = VerifyConfig(ignoreFiles=["**/hibernate-core-1.2.3.jar"])
        result = classify("dist.zip::lib/hibernate-core-1.2.3.jar", config)
        assert result.classification == Classification.IGNORED
        assert result.rule == "ignore_pattern"
        assert [event.rule for event in result.events] == ["ignore_pattern"]

    def test_ignore_takes_precedence_over_valid(self):
        config = VerifyConfig(ignoreFiles=["**"])
        result = classify("dist.zip::lib/a-redhat-1.jar", config)
        assert result.classification == Classification.IGNORED

    def test_accepts_identity_objects(self):
        identity = ArtifactIdentity.parse("dist.zip::lib/a-redhat-1.jar")
        assert classify(identity, VerifyConfig()).identity == identity


class TestClassifier:
    """Test Classifier rule chaining and partitioning."""

    def test_requires_rules(self):
        with pytest.raises(ValueError):
            Classifier([])

    def test_deferring_rules_collect_events(self):
        classifier = Classifier([DeferringRule(), ProductizedNameRule()])

        result = classifier.classify(ArtifactIdentity.parse("/d::a.jar"))

        assert result.classification == Classification.INVALID
        assert [event.rule for event in result.events] == ["deferring", "productized_name"]

    def test_no_deciding_rule(self):
        with pytest.raises(ValueError, match="No rule classified"):
            Classifier([DeferringRule()]).classify(ArtifactIdentity.parse("/d::a.jar"))

    def test_classify_all_partitions(self, identities):
        config = VerifyConfig(ignoreFiles=["**/junit-*.jar"])

        groups, results = Classifier.from_config(config).classify_all(identities)

        assert {str(i) for i in groups[Classification.VALID]} == {
            "/opt/lib::a-redhat-1.jar",
            "dist-redhat-1.zip::lib/c.redhat-00001.jar",
        }
        assert {str(i) for i in groups[Classification.INVALID]} == {"/opt/lib::b-1.0.jar"}
        assert {str(i) for i in groups[Classification.IGNORED]} == {"dist.zip::lib/junit-4.13.jar"}
        assert [str(r.identity) for r in results] == sorted(str(i) for i in identities)

    def test_classify_all_is_idempotent(self, identities):
        classifier = Classifier.from_config(VerifyConfig(ignoreFiles=["**/junit-*.jar"]))

        first, _ = classifier.classify_all(identities)
        second, _ = classifier.classify_all(identities)

        assert first == second

    def test_classify_all_empty(self):
        groups, results = Classifier.from_config(VerifyConfig()).classify_all(set())
        assert results == []
        assert all(members == set() for members in groups.values())
