"""
Accessors for parsed YAML values.

Extraction routines receive whatever ``yaml.safe_load`` produced. These helpers
cover the common lookups without the caller having to guard every level
against missing keys or unexpected node types.
"""

from __future__ import annotations

import re
from typing import Any, Iterator, Mapping, Optional, Sequence, Union

Pattern = Union[str, "re.Pattern[str]"]


def is_blank(value: Any) -> bool:
    """Return True for None, whitespace-only strings and empty collections."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (Mapping, list, tuple, set)):
        return len(value) == 0
    return False


def dig(value: Any, *path: Union[str, int]) -> Any:
    """
    Follow ``path`` through nested mappings and sequences.

    String steps index mappings, integer steps index sequences. Returns None
    as soon as a step does not apply.

    Examples:
        >>> dig({"release": {"versions": ["1.0", "2.0"]}}, "release", "versions", -1)
        '2.0'
        >>> dig({"release": None}, "release", "version") is None
        True
    """
    current = value
    for step in path:
        if isinstance(current, Mapping) and not isinstance(step, int):
            current = current.get(step)
        elif isinstance(current, Sequence) and not isinstance(current, str) and isinstance(step, int):
            try:
                current = current[step]
            except IndexError:
                return None
        else:
            return None
    return current


def iter_items(value: Any, *path: Union[str, int]) -> Iterator[Any]:
    """Iterate over the sequence found at ``path``; yields nothing if there is none."""
    target = dig(value, *path) if path else value
    if isinstance(target, Sequence) and not isinstance(target, str):
        yield from target


def match_scalar(value: Any, pattern: Pattern, group: Union[int, str] = 1) -> Optional[str]:
    """
    Match a scalar leaf against ``pattern`` and return the requested group.

    Non-string scalars are converted with ``str`` first; booleans, None and
    collections never match. Returns None when there is no match or the group
    did not participate.
    """
    if value is None or isinstance(value, (bool, Mapping, list, tuple, set)):
        return None
    regex = re.compile(pattern) if isinstance(pattern, str) else pattern
    found = regex.search(str(value))
    if found is None:
        return None
    if regex.groups == 0 and group == 1:
        return found.group(0)
    return found.group(group)
