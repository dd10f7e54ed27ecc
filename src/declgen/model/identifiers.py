# Copyright 2026 DeclGen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Identifier validation shared by declarations, annotations, and values."""

from __future__ import annotations

import re

from declgen.model.errors import InvalidArgumentError

# ###############
# Public Interface
# ###############


def validate_identifier(name: str, kind: str = "Identifier") -> str:
    """Ensure *name* is usable as an identifier in emitted source.

    Args:
        name: The candidate identifier.
        kind: What the identifier names, used in error messages.

    Returns:
        The identifier with surrounding whitespace removed.

    Raises:
        InvalidArgumentError: If the name is missing, blank, or contains a
            character that is not allowed in an identifier.
    """
    if name is None:
        raise InvalidArgumentError(f"{kind} cannot be None")
    trimmed = name.strip()
    if not trimmed:
        raise InvalidArgumentError(f"{kind} cannot be empty")
    if not _IDENTIFIER_START.match(trimmed[0]):
        raise InvalidArgumentError(f"{kind} cannot start with {trimmed[0]!r}")
    for ch in trimmed[1:]:
        if not _IDENTIFIER_PART.match(ch):
            raise InvalidArgumentError(f"{kind} cannot contain {ch!r}")
    return trimmed


# ################
# Implementation
# ################

_IDENTIFIER_START = re.compile(r"[A-Za-z_$]")
_IDENTIFIER_PART = re.compile(r"[A-Za-z0-9_$]")
