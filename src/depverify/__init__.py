"""depverify - Productized dependency verification for build pipelines.

depverify scans configured directories and archive distributions for binary
dependency artifacts and fails the build when any of them is missing the
productization marker (``-redhat-`` or ``.redhat-``) in its file name.
"""

__version__ = "0.1.0"
__author__ = "depverify maintainers"
__description__ = "Productized dependency verification for build pipelines"

from depverify.config import VerifyConfig

__all__ = [
    "__version__",
    "__author__",
    "__description__",
    "VerifyConfig",
]
