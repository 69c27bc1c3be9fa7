# SPDX-License-Identifier: MIT
"""Component-wise addition and subtraction of versions.

Both operations pair up the parts, pre-release and build identifiers of
two versions position by position, padding the shorter list with absent
components, and combine each pair:

    >>> from flexver import parse_version
    >>> str(add_versions(parse_version("1.2.3"), parse_version("a.b.c")))
    '1a.2b.3c'
    >>> str(subtract_versions(parse_version("1.2.3-4.5+6.7"),
    ...                       parse_version("1.1.1-1.1+1.1")))
    '0.1.2-3.4+5.6'
"""

from __future__ import annotations

from dataclasses import replace
from itertools import zip_longest
from typing import Callable, Optional, Sequence

from .version import Components, Version, is_numeric

Combinator = Callable[[Optional[str], Optional[str]], Optional[str]]


def add_components(a: Optional[str], b: Optional[str]) -> Optional[str]:
    """Add two components: integers are summed, anything else concatenated."""
    if a is None:
        return b
    if b is None:
        return a
    if is_numeric(a) and is_numeric(b):
        return str(int(a) + int(b))
    return a + b


def subtract_components(a: Optional[str], b: Optional[str]) -> Optional[str]:
    """Subtract b from a.

    Integers are subtracted and may go negative. Otherwise b is removed
    from the end of a when a ends with it; when it does not, a is returned
    unchanged rather than treated as an error.
    """
    if a is None:
        return None
    if b is None:
        return a
    if is_numeric(a) and is_numeric(b):
        return str(int(a) - int(b))
    if a.endswith(b):
        return a[: len(a) - len(b)]
    return a


def zip_combine(op: Combinator, seq1: Sequence[Optional[str]], seq2: Sequence[Optional[str]]) -> Components:
    """Combine two component lists pairwise, padding the shorter with None."""
    return tuple(op(a, b) for a, b in zip_longest(seq1, seq2))


def _combine(op: Combinator, v1: Version, v2: Version) -> Version:
    return replace(
        v1,
        parts=zip_combine(op, v1.parts, v2.parts),
        prerelease=zip_combine(op, v1.prerelease, v2.prerelease),
        build=zip_combine(op, v1.build, v2.build),
        source=None,
    )


def add_versions(v1: Version, v2: Version) -> Version:
    """Add v2 to v1 component-wise. The result keeps v1's prefix."""
    return _combine(add_components, v1, v2)


def subtract_versions(v1: Version, v2: Version) -> Version:
    """Subtract v2 from v1 component-wise. The result keeps v1's prefix.

    Components of v1 with no counterpart in v2 are kept; positions only
    v2 has stay absent.
    """
    return _combine(subtract_components, v1, v2)
