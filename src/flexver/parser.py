# SPDX-License-Identifier: MIT
"""Lenient and strict parsing of version strings.

Parsing is a three-stage separator state machine:

- stage 0 splits on ".", "-" and "+" and fills the version parts; a "-"
  moves on to stage 1
- stage 1 splits on "." and "+" and fills the pre-release identifiers; a
  "+" moves on to stage 2
- stage 2 splits on "." only and fills the build identifiers

So "1.2.3-rc.1+linux.x86-64" has parts 1, 2, 3, pre-release rc, 1 and
build linux, x86-64. A "+" seen in stage 0 separates version parts like
a "." does.
"""

from __future__ import annotations

import logging
from typing import Optional

from .errors import InvalidVersionError
from .version import Version

logger = logging.getLogger(__name__)

# Separators recognised in each stage, and the one that advances the stage
STAGE_SEPARATORS = (".-+", ".+", ".")
STAGE_ADVANCE = ("-", "+", None)


def tokenize(text: str) -> tuple[list[str], list[str], list[str]]:
    """Split version text into parts, pre-release and build identifiers.

    Empty tokens between adjacent separators, and after a trailing
    separator, are kept. Empty text has no tokens at all.

    Examples:
        >>> tokenize("1.2.3-beta.2+exp.sha")
        (['1', '2', '3'], ['beta', '2'], ['exp', 'sha'])
        >>> tokenize("1..2-")
        (['1', '', '2'], [''], [])
    """
    buckets: tuple[list[str], list[str], list[str]] = ([], [], [])
    if not text:
        return buckets

    stage = 0
    start = 0
    for pos, char in enumerate(text):
        if char not in STAGE_SEPARATORS[stage]:
            continue
        buckets[stage].append(text[start:pos])
        start = pos + 1
        if char == STAGE_ADVANCE[stage]:
            stage += 1
    buckets[stage].append(text[start:])
    return buckets


def parse_version(text: Optional[str], prefix: str = "") -> Optional[Version]:
    """Parse version text without validating it.

    Never fails for a string: malformed input gives a Version whose
    ``is_valid`` or ``is_semantic`` is False. The text is kept and returned
    verbatim by ``str()``.

    Args:
        text: The version text, or None
        prefix: A leading literal to strip before tokenizing, such as "v"

    Returns:
        The parsed Version, or None when text is None

    Examples:
        >>> v = parse_version("1.2.3.4-Rel1")
        >>> v.parts, v.prerelease
        (('1', '2', '3', '4'), ('Rel1',))
        >>> v.is_semantic
        False
    """
    if text is None:
        return None
    if not isinstance(text, str):
        raise TypeError(f"Version text must be a str, got {type(text).__name__}")

    body = text
    if prefix and text.startswith(prefix):
        body = text[len(prefix):]
    else:
        prefix = ""

    parts, prerelease, build = tokenize(body)
    return Version(
        parts=tuple(parts),
        prerelease=tuple(prerelease),
        build=tuple(build),
        prefix=prefix,
        source=text,
    )


def parse_valid(text: Optional[str], prefix: str = "") -> Version:
    """Parse version text, requiring a non-negative major part.

    Raises:
        InvalidVersionError: If the text is None or the result is not valid
    """
    version = parse_version(text, prefix)
    if version is None or not version.is_valid:
        logger.debug("Rejected invalid version %r", text)
        raise InvalidVersionError(str(text), f"Invalid version: {text!r}", reason="valid")
    return version


def parse_semantic(text: Optional[str], prefix: str = "") -> Version:
    """Parse version text, requiring a semantic version.

    Raises:
        InvalidVersionError: If the text is None or the result is not semantic

    Examples:
        >>> parse_semantic("1.0.0-alpha+001").prerelease
        ('alpha',)
    """
    version = parse_version(text, prefix)
    if version is None or not version.is_semantic:
        logger.debug("Rejected non-semantic version %r", text)
        raise InvalidVersionError(
            str(text), f"Not a semantic version: {text!r}", reason="semantic"
        )
    return version
