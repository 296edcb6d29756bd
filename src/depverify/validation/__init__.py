"""Classification layer for discovered dependency artifacts.

Every artifact is classified exactly once as valid, invalid or ignored.
Ignore patterns take precedence over the productization check.
"""

from .framework import (
    ClassificationResult,
    ClassificationRule,
    Classifier,
    DiagnosticEvent,
    classify,
)
from .rules import IgnorePatternRule, ProductizedNameRule, is_productized

__all__ = [
    "Classifier",
    "ClassificationResult",
    "ClassificationRule",
    "DiagnosticEvent",
    "classify",
    "IgnorePatternRule",
    "ProductizedNameRule",
    "is_productized",
]
