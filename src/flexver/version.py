# SPDX-License-Identifier: MIT
"""The Version value type.

A Version holds three ordered lists of string components:

- parts: the leading dot-separated segment (major, minor, patch, ...)
- prerelease: the identifiers following the first "-"
- build: the identifiers following the "+" of the prerelease segment

Any component may be None (absent). Absent components come out of
arithmetic on lists of different lengths; they render as nothing and
sort below every present value.
"""

from __future__ import annotations

import logging
import math
import numbers
import re
from dataclasses import dataclass, field, replace
from typing import Iterable, Optional, Union

from .errors import InvalidVersionError

logger = logging.getLogger(__name__)

# A prerelease/build identifier as accepted by the constructors
Identifier = Union[int, str]

Components = tuple[Optional[str], ...]

SEMANTIC_IDENTIFIER_PATTERN = re.compile(r"[0-9A-Za-z-]+")
NUMERIC_PATTERN = re.compile(r"-?[0-9]+")

IDX_MAJOR = 0
IDX_MINOR = 1
IDX_PATCH = 2

# Weights of the lossy float coercion
KMINOR = 0.001
KPATCH = 0.000001


def is_numeric(component: Optional[str]) -> bool:
    """Return True if the component is an optionally signed decimal integer."""
    return component is not None and NUMERIC_PATTERN.fullmatch(component) is not None


def is_semantic_identifier(component: Optional[str]) -> bool:
    """Return True if the component matches the SemVer identifier grammar.

    Absent components satisfy the grammar.

    Examples:
        >>> is_semantic_identifier("rc-1")
        True
        >>> is_semantic_identifier("rc_1")
        False
    """
    if component is None:
        return True
    return SEMANTIC_IDENTIFIER_PATTERN.fullmatch(component) is not None


def identifier_to_str(value: Optional[Identifier]) -> Optional[str]:
    """Convert a numeric or text identifier to its canonical string form."""
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, numbers.Integral) and not isinstance(value, bool):
        return str(int(value))
    raise TypeError(
        f"Version identifier must be an int or str, got {type(value).__name__}"
    )


def _to_components(values: Optional[Iterable[Optional[Identifier]]]) -> Components:
    if values is None:
        return ()
    if isinstance(values, str):
        raise TypeError("Expected a sequence of identifiers, got a str")
    return tuple(identifier_to_str(v) for v in values)


@dataclass(frozen=True, slots=True)
class Version:
    """A parsed or constructed version identifier.

    Equality and hashing are structural over parts, prerelease and build.
    Ordering follows SemVer 2.0 precedence generalized to any number of
    parts; build identifiers never affect ordering, so two versions may
    compare as neither less nor greater and still be unequal.

    Attributes:
        parts: Version components (major, minor, patch and any further ones)
        prerelease: Pre-release identifiers
        build: Build identifiers
        prefix: Leading literal excluded from the components (e.g. "v")
        source: The exact text this version was parsed from, if any
    """

    parts: Components = ()
    prerelease: Components = ()
    build: Components = ()
    prefix: str = field(default="", compare=False)
    source: Optional[str] = field(default=None, compare=False, repr=False)

    # -- constructors -------------------------------------------------------

    @classmethod
    def from_long(cls, number: int) -> Version:
        """Build the semantic version ``<number>.0.0``."""
        return make_semantic_version(number, 0, 0)

    from_int = from_long

    @classmethod
    def from_double(cls, number: float) -> Version:
        """Build the semantic version ``<floor(number)>.0.0``."""
        try:
            major = math.floor(number)
        except (ValueError, OverflowError):
            logger.debug("Rejected non-finite version number %r", number)
            raise InvalidVersionError(
                str(number), f"Invalid major version: {number}", reason="major"
            ) from None
        return make_semantic_version(major, 0, 0)

    @classmethod
    def from_number(cls, number: Union[Version, numbers.Real, None]) -> Optional[Version]:
        """Build a version from a number, dispatching on its numeric kind.

        Versions are returned unchanged and None yields None.
        """
        if number is None:
            return None
        if isinstance(number, Version):
            return number
        if isinstance(number, bool):
            raise TypeError("Cannot build a version from a bool")
        if isinstance(number, numbers.Integral):
            return cls.from_long(int(number))
        if isinstance(number, numbers.Real):
            return cls.from_double(float(number))
        raise TypeError(f"Cannot build a version from {type(number).__name__}")

    def with_parts(self, parts: Iterable[Optional[Identifier]]) -> Version:
        """Return a copy with the version parts replaced."""
        return replace(self, parts=_to_components(parts), source=None)

    def with_prerelease(self, prerelease: Optional[Iterable[Optional[Identifier]]]) -> Version:
        """Return a copy with the pre-release identifiers replaced."""
        return replace(self, prerelease=_to_components(prerelease), source=None)

    def with_build(self, build: Optional[Iterable[Optional[Identifier]]]) -> Version:
        """Return a copy with the build identifiers replaced."""
        return replace(self, build=_to_components(build), source=None)

    # -- accessors ----------------------------------------------------------

    @property
    def has_major(self) -> bool:
        return IDX_MAJOR < len(self.parts)

    @property
    def has_minor(self) -> bool:
        return IDX_MINOR < len(self.parts)

    @property
    def has_patch(self) -> bool:
        return IDX_PATCH < len(self.parts)

    def part_number(self, index: int) -> int:
        """Return the integer value of a version part.

        Missing, absent and non-numeric parts count as 0.
        """
        if index < 0 or index >= len(self.parts):
            return 0
        component = self.parts[index]
        if not is_numeric(component):
            return 0
        return int(component)

    @property
    def major(self) -> int:
        return self.part_number(IDX_MAJOR)

    @property
    def minor(self) -> int:
        return self.part_number(IDX_MINOR)

    @property
    def patch(self) -> int:
        return self.part_number(IDX_PATCH)

    # -- predicates ---------------------------------------------------------

    @property
    def is_valid(self) -> bool:
        """True if there is a major part and it is not negative."""
        return self.has_major and self.major >= 0

    @property
    def is_semantic(self) -> bool:
        """True if there are exactly three parts and every component is a
        SemVer identifier."""
        if len(self.parts) != 3:
            return False
        return all(
            is_semantic_identifier(c)
            for c in (*self.parts, *self.prerelease, *self.build)
        )

    @property
    def is_development(self) -> bool:
        """True for semantic versions in initial development (major 0)."""
        return self.is_semantic and self.major == 0

    @property
    def is_prerelease(self) -> bool:
        return len(self.prerelease) > 0

    # -- numeric coercion ---------------------------------------------------

    def __int__(self) -> int:
        return self.major

    def __float__(self) -> float:
        # Lossy once minor or patch reach 1000; not used for ordering.
        return self.major + self.minor * KMINOR + self.patch * KPATCH

    # -- comparison ---------------------------------------------------------

    def compare(self, other: Version) -> int:
        """Return -1, 0 or 1 as this version sorts before, with or after other."""
        from .compare import compare_versions

        return compare_versions(self, other)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) >= 0

    # -- arithmetic ---------------------------------------------------------

    def _coerce_operand(self, other: object) -> Optional[Version]:
        if other is None or isinstance(other, Version):
            return other
        if isinstance(other, numbers.Real) and not isinstance(other, bool):
            return Version.from_double(float(other))
        raise TypeError(
            f"Unsupported operand type for version arithmetic: {type(other).__name__}"
        )

    def add(self, other: Union[Version, numbers.Real, None]) -> Version:
        """Add another version (or a number, as ``<n>.0.0``) component-wise.

        None leaves this version unchanged.
        """
        from .arithmetic import add_versions

        operand = self._coerce_operand(other)
        if operand is None:
            return self
        return add_versions(self, operand)

    def subtract(self, other: Union[Version, numbers.Real, None]) -> Version:
        """Subtract another version (or a number) component-wise.

        Text components lose ``other``'s component as a suffix when they end
        with it and are otherwise left as they are.
        """
        from .arithmetic import subtract_versions

        operand = self._coerce_operand(other)
        if operand is None:
            return self
        return subtract_versions(self, operand)

    def __add__(self, other: object) -> Version:
        try:
            return self.add(other)  # type: ignore[arg-type]
        except TypeError:
            return NotImplemented

    def __sub__(self, other: object) -> Version:
        try:
            return self.subtract(other)  # type: ignore[arg-type]
        except TypeError:
            return NotImplemented

    # -- rendering ----------------------------------------------------------

    def render(self) -> str:
        """Build the string form from the components, ignoring ``source``."""
        parts = [c for c in self.parts if c is not None]
        prerelease = [c for c in self.prerelease if c is not None]
        build = [c for c in self.build if c is not None]
        text = self.prefix + ".".join(parts)
        if prerelease:
            text += "-" + ".".join(prerelease)
        if build:
            text += "+" + ".".join(build)
        return text

    def __str__(self) -> str:
        """Return the parsed text verbatim, or the rendered components."""
        if self.source is not None:
            return self.source
        return self.render()


def make_semantic_version(
    major: Optional[int],
    minor: Optional[int],
    patch: Optional[int],
    prerelease: Optional[Iterable[Identifier]] = None,
    build: Optional[Iterable[Identifier]] = None,
    prefix: str = "",
) -> Version:
    """Build a three-part version from numbers and identifier lists.

    Args:
        major: Major version number
        minor: Minor version number
        patch: Patch version number
        prerelease: Pre-release identifiers, each an int or a str
        build: Build identifiers, each an int or a str
        prefix: Leading literal for rendering

    Returns:
        The constructed Version

    Raises:
        InvalidVersionError: If major, minor or patch is None
        TypeError: If major, minor or patch is not an int

    Examples:
        >>> str(make_semantic_version(1, 2, 3, ["alpha", 1], ["build1"]))
        '1.2.3-alpha.1+build1'
    """
    numbers_by_name = (("major", major), ("minor", minor), ("patch", patch))
    for name, value in numbers_by_name:
        if value is None:
            logger.debug("Rejected semantic version with no %s part", name)
            raise InvalidVersionError(
                f"{major}.{minor}.{patch}",
                f"Invalid {name} version: None",
                reason=name,
            )
        if not isinstance(value, numbers.Integral) or isinstance(value, bool):
            raise TypeError(
                f"The {name} version must be an int, got {type(value).__name__}"
            )
    return Version(
        parts=tuple(identifier_to_str(value) for _, value in numbers_by_name),
        prerelease=_to_components(prerelease),
        build=_to_components(build),
        prefix=prefix,
    )


def make_version(
    parts: Iterable[Optional[Identifier]],
    prerelease: Optional[Iterable[Optional[Identifier]]] = None,
    build: Optional[Iterable[Optional[Identifier]]] = None,
    prefix: str = "",
) -> Version:
    """Build a version with any number of parts, without validation.

    Negative numbers and non-semantic identifiers are accepted, for legacy
    and malformed version schemes.
    """
    return Version(
        parts=_to_components(parts),
        prerelease=_to_components(prerelease),
        build=_to_components(build),
        prefix=prefix,
    )
