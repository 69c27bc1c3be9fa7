# SPDX-License-Identifier: MIT
"""Version comparison following SemVer 2.0 precedence.

Versions with any number of parts are ordered by their parts first, then
by part count, then by pre-release identifiers (a release outranks any
pre-release of the same parts). Build identifiers are ignored.

Components that are both integers compare numerically ("90" < "100");
anything else compares by ASCII code point ("100a" < "9").
"""

from __future__ import annotations

from functools import cmp_to_key
from typing import Optional, Sequence, Union

from .parser import parse_version
from .version import Version, is_numeric


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def compare_components(a: Optional[str], b: Optional[str]) -> int:
    """Compare two version components.

    Returns:
        -1 if a < b
        0 if a == b
        1 if a > b

    An absent component sorts before any present one.

    Examples:
        >>> compare_components("90", "100")
        -1
        >>> compare_components("90x", "100x")
        1
        >>> compare_components(None, "0")
        -1
    """
    if a is None and b is None:
        return 0
    if a is None:
        return -1
    if b is None:
        return 1
    if is_numeric(a) and is_numeric(b):
        return _sign(int(a) - int(b))
    if a == b:
        return 0
    return -1 if a < b else 1


def _compare_sequences(seq1: Sequence[Optional[str]], seq2: Sequence[Optional[str]]) -> int:
    for c1, c2 in zip(seq1, seq2):
        result = compare_components(c1, c2)
        if result != 0:
            return result
    # All shared positions equal - the longer sequence sorts higher
    return _sign(len(seq1) - len(seq2))


def _compare_prerelease(pre1: Sequence[Optional[str]], pre2: Sequence[Optional[str]]) -> int:
    """Compare two pre-release identifier lists.

    Per SemVer a version without pre-release identifiers has higher
    precedence than one with them (1.0.0 > 1.0.0-alpha).
    """
    if not pre1 and not pre2:
        return 0
    if not pre1:
        return 1  # Release > pre-release
    if not pre2:
        return -1  # Pre-release < release
    return _compare_sequences(pre1, pre2)


def _as_version(version: Union[str, Version]) -> Version:
    if isinstance(version, Version):
        return version
    parsed = parse_version(version)
    if parsed is None:
        raise TypeError("Cannot compare None as a version")
    return parsed


def compare_versions(version1: Union[str, Version], version2: Union[str, Version]) -> int:
    """Compare two versions by precedence.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Note:
        Build identifiers are ignored, so versions that differ only in
        their build identifiers compare as 0 while being unequal.
        A "+" before any "-" separates version parts, so "1.0.0+a" has
        the four parts 1, 0, 0, a and no build identifiers.

    Examples:
        >>> compare_versions("1.0.0", "2.0.0")
        -1
        >>> compare_versions("1.2.3.4", "1.2.3")
        1
        >>> compare_versions("1.0.0-rc.1", "1.0.0")
        -1
        >>> compare_versions("1.0.0-rc+build1", "1.0.0-rc+build2")
        0
        >>> compare_versions("1.0.0+a", "1.0.0+b")
        -1
    """
    v1 = _as_version(version1)
    v2 = _as_version(version2)

    result = _compare_sequences(v1.parts, v2.parts)
    if result != 0:
        return result
    return _compare_prerelease(v1.prerelease, v2.prerelease)


_VersionKey = cmp_to_key(compare_versions)


def version_key(version: Union[str, Version]):
    """Return a sort key for a version, suitable for sorting.

    Examples:
        >>> sorted(["1.0.0", "1.0.0-rc.1", "0.9"], key=version_key)
        ['0.9', '1.0.0-rc.1', '1.0.0']
    """
    return _VersionKey(_as_version(version))
