"""Path helpers for artifact identities.

Archive entries may be stored with either POSIX or Windows separators, so
every helper here treats ``/`` and ``\\`` alike.
"""

IDENTITY_SEPARATOR = "::"


def file_name_of(path: str) -> str:
    """Return the last segment of a path written with ``/`` or ``\\`` separators.

    Examples:
        >>> file_name_of("lib/ext\\\\x-redhat-1.jar")
        'x-redhat-1.jar'
        >>> file_name_of("x.jar")
        'x.jar'
    """
    last_separator = max(path.rfind("/"), path.rfind("\\"))
    return path[last_separator + 1:]


def terminal_file_name(identity) -> str:
    """Extract the innermost file name of an artifact identity.

    Only the entry path is considered, so a directory path or distribution
    name can never leak into the result. For the string form that is the
    part after the first ``::``; input without a separator is treated as a
    bare entry path.

    Args:
        identity: ArtifactIdentity or its ``container::entry`` string form

    Returns:
        File name used for validity checks

    Examples:
        >>> terminal_file_name("my-app-redhat-123.zip::lib/hibernate-core-1.2.3.jar")
        'hibernate-core-1.2.3.jar'
    """
    entry_path = getattr(identity, "entry_path", None)
    if entry_path is None:
        text = str(identity)
        _, separator, entry_path = text.partition(IDENTITY_SEPARATOR)
        if not separator:
            entry_path = text
    return file_name_of(entry_path)


def extension_of(name: str) -> str | None:
    """Return the substring after the last dot, or None when there is no dot."""
    dot_index = name.rfind(".")
    if dot_index == -1:
        return None
    return name[dot_index + 1:]
