"""Shell-style glob matching for ignore patterns.

Patterns are matched against whole artifact identities such as
``/opt/app/lib::hibernate-core-1.2.3.jar`` or
``dist.zip::lib/hibernate-core-1.2.3.jar``:

* ``**`` matches any run of characters, separators included. A leading
  ``**/`` may also match nothing, and a segment may end with ``/``, ``\\``
  or the identity separator ``::``.
* ``*`` matches any run of characters except ``/`` and ``\\``.
* ``?`` matches exactly one character except ``/`` and ``\\``.

``*`` and ``?`` do not treat ``::`` as a boundary, so ``*.jar`` also matches
``dist.zip::x.jar``. Only the optional leading segments of ``**/`` end at
``::``, which lets ``**/x.jar`` reach artifacts stored directly in a
directory.

Matching is case-sensitive and anchored at both ends.
"""

import re
from functools import lru_cache

_SEGMENT = r"[^/\\]"
_SEGMENT_END = r"(?:/|\\|::)"


@lru_cache(maxsize=256)
def compile_pattern(pattern: str) -> re.Pattern:
    """Translate a glob pattern into a compiled, fully anchored regex."""
    parts = []
    i = 0
    length = len(pattern)
    while i < length:
        char = pattern[i]
        if char == "*":
            if pattern.startswith("**", i):
                i += 2
                # collapse runs like "***"
                while i < length and pattern[i] == "*":
                    i += 1
                if i < length and pattern[i] in "/\\":
                    parts.append(f"(?:.*{_SEGMENT_END})?")
                    i += 1
                else:
                    parts.append(".*")
                continue
            parts.append(f"{_SEGMENT}*")
        elif char == "?":
            parts.append(_SEGMENT)
        else:
            parts.append(re.escape(char))
        i += 1
    return re.compile("".join(parts), re.DOTALL)


def match(pattern: str, candidate: str) -> bool:
    """Check whether ``candidate`` matches the glob ``pattern`` in full."""
    return compile_pattern(pattern).fullmatch(candidate) is not None


def match_any(patterns, candidate: str) -> str | None:
    """Return the first pattern matching ``candidate``, or None."""
    for pattern in patterns:
        if match(pattern, candidate):
            return pattern
    return None
