"""Artifact identity value type."""

from dataclasses import dataclass
from pathlib import Path

from depverify.utils.paths import IDENTITY_SEPARATOR, terminal_file_name


@dataclass(frozen=True)
class ArtifactIdentity:
    """Identity of one discovered artifact: ``<container>::<entry_path>``.

    ``container`` is a canonical directory path or a distribution file name;
    ``entry_path`` is the artifact path inside it, with whatever separator
    style the source used. A ``None`` container marks a legacy identity that
    carried no separator at all.
    """
    container: str | None
    entry_path: str

    def __post_init__(self):
        if self.container is not None and IDENTITY_SEPARATOR in self.container:
            raise ValueError(
                f"Container name must not contain '{IDENTITY_SEPARATOR}': {self.container}"
            )

    @classmethod
    def parse(cls, text: str) -> "ArtifactIdentity":
        """Parse the string form, splitting on the first separator."""
        container, separator, entry_path = text.partition(IDENTITY_SEPARATOR)
        if not separator:
            return cls(container=None, entry_path=text)
        return cls(container=container, entry_path=entry_path)

    @classmethod
    def for_directory_file(cls, directory: Path, file_name: str) -> "ArtifactIdentity":
        """Identity of a file found directly inside a canonical directory."""
        return cls(container=str(directory), entry_path=file_name)

    @classmethod
    def for_distribution_entry(cls, distribution: Path, entry_name: str) -> "ArtifactIdentity":
        """Identity of an archive entry, scoped to the distribution's file name."""
        return cls(container=distribution.name, entry_path=entry_name)

    @property
    def terminal_file_name(self) -> str:
        """Innermost file name; the container never contributes to it."""
        return terminal_file_name(self)

    def __str__(self) -> str:
        if self.container is None:
            return self.entry_path
        return f"{self.container}{IDENTITY_SEPARATOR}{self.entry_path}"


def sort_identities(identities) -> list[ArtifactIdentity]:
    """Sort identities lexicographically by their string form."""
    return sorted(identities, key=str)
