# Copyright 2026 DeclGen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Import units: the (namespace, simple name) identity of a referenced declaration."""

from __future__ import annotations

from dataclasses import dataclass

from declgen.model.errors import InvalidArgumentError
from declgen.model.identifiers import validate_identifier

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class ImportUnit:
    """Identity of a declared type that must be imported when referenced.

    Import units are immutable value objects: two units with the same
    namespace and name compare and hash equal, so a plain ``set`` of units
    deduplicates imports.

    Attributes:
        namespace: Dotted namespace (package) holding the declaration.
        name: Simple name of the declaration.
    """

    namespace: str
    name: str

    def __post_init__(self) -> None:
        if self.namespace is None or not self.namespace.strip():
            raise InvalidArgumentError(
                f'Invalid namespace "{self.namespace}" - a valid (non default) namespace is required'
            )
        if self.name is None or not self.name.strip():
            raise InvalidArgumentError(f'Invalid name "{self.name}" in namespace "{self.namespace}"')
        object.__setattr__(self, "name", validate_identifier(self.name, f'Name in namespace "{self.namespace}"'))

    @classmethod
    def from_qualified_name(cls, qualified_name: str) -> ImportUnit:
        """Create an import unit from a fully qualified dotted name.

        The name is split on the last ``.``: ``"a.b.Widget"`` yields namespace
        ``"a.b"`` and name ``"Widget"``.

        Args:
            qualified_name: The fully qualified name to split.

        Returns:
            The corresponding :class:`ImportUnit`.

        Raises:
            InvalidArgumentError: If the name has no namespace separator or the
                namespace part is blank.
        """
        last_dot = qualified_name.rfind(".")
        if last_dot <= 0:
            raise InvalidArgumentError(
                f'Invalid fully qualified name "{qualified_name}". Hint: default namespace is not supported'
            )
        return cls(qualified_name[:last_dot], qualified_name[last_dot + 1 :])

    @property
    def qualified_name(self) -> str:
        """The dotted ``namespace.name`` form of this unit."""
        return f"{self.namespace}.{self.name}"

    def derive_with_suffix(self, suffix: str) -> ImportUnit:
        """Return a unit in the same namespace whose name has *suffix* appended.

        Used to name generated companion declarations, e.g. ``Widget`` →
        ``WidgetImpl``.
        """
        return ImportUnit(self.namespace, self.name + suffix)

    def __str__(self) -> str:
        return self.qualified_name
