# SPDX-License-Identifier: MIT
"""Free-form version identifiers with SemVer ordering and arithmetic.

This package parses any version string into parts, pre-release and build
identifiers, orders versions following SemVer 2.0 precedence extended to
any number of parts, and adds or subtracts versions component-wise.

Example:
    >>> from flexver import parse_version, compare_versions, make_semantic_version
    >>>
    >>> version = parse_version("1.2.3-beta+exp.sha.5114f85")
    >>> version.major, version.prerelease, version.build
    (1, ('beta',), ('exp', 'sha', '5114f85'))
    >>> version.is_semantic
    True
    >>>
    >>> compare_versions("1.2.3.4", "1.2.3")
    1
    >>>
    >>> str(parse_version("1.2.3") + parse_version("0.0.1-alpha"))
    '1.2.4-alpha'
    >>> str(make_semantic_version(1, 2, 3, ["alpha", 1], ["build1"]))
    '1.2.3-alpha.1+build1'
"""

__version__ = "0.1.0"

from .errors import InvalidVersionError
from .version import (
    Identifier,
    Version,
    is_semantic_identifier,
    make_semantic_version,
    make_version,
    SEMANTIC_IDENTIFIER_PATTERN,
)
from .parser import (
    parse_version,
    parse_valid,
    parse_semantic,
    tokenize,
)
from .compare import (
    compare_components,
    compare_versions,
    version_key,
)
from .arithmetic import (
    add_versions,
    subtract_versions,
)

__all__ = [
    # Version type and constructors
    "Identifier",
    "Version",
    "is_semantic_identifier",
    "make_semantic_version",
    "make_version",
    "SEMANTIC_IDENTIFIER_PATTERN",
    "InvalidVersionError",
    # Parsing
    "parse_version",
    "parse_valid",
    "parse_semantic",
    "tokenize",
    # Comparison
    "compare_components",
    "compare_versions",
    "version_key",
    # Arithmetic
    "add_versions",
    "subtract_versions",
]
