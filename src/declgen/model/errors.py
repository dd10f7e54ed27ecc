# Copyright 2026 DeclGen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Error taxonomy for the declaration model.

Every error is a caller error raised synchronously at the point of misuse.
Nothing in the model retries or substitutes a default.
"""

from __future__ import annotations

from typing import Any

# ###############
# Public Interface
# ###############


class DeclarationError(Exception):
    """Base class for all errors raised while building declarations."""


class InvalidArgumentError(DeclarationError, ValueError):
    """Raised when malformed input is given to a constructor (e.g. a blank namespace)."""


class TypeMismatchError(DeclarationError, TypeError):
    """Raised when a value's type is not assignable to the type that must hold it.

    Attributes:
        expected: The type the value had to be assignable to.
        actual: The type (or payload) that was actually supplied.
    """

    def __init__(self, message: str, expected: Any, actual: Any) -> None:
        super().__init__(f"{message}: expected {expected} but got {actual}")
        self.expected = expected
        self.actual = actual


class IllegalStateError(DeclarationError):
    """Raised when an element is asked to do something its type cannot support.

    Examples are attaching a value to a void-typed element or asking the void
    type to produce a literal.
    """
