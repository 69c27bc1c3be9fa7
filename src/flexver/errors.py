# SPDX-License-Identifier: MIT
"""Errors raised by the strict version constructors."""

from __future__ import annotations

from typing import Optional


class InvalidVersionError(Exception):
    """Raised when a strict constructor rejects its input.

    Attributes:
        version: The offending input, rendered as text
        message: Human readable description
        reason: The missing field ("major", "minor", "patch") or the failed
            predicate ("valid", "semantic")
    """

    def __init__(self, version: str, message: str = "", reason: Optional[str] = None):
        self.version = version
        self.message = message or f"Invalid version: {version!r}"
        self.reason = reason
        super().__init__(self.message)
