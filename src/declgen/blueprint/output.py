# Copyright 2026 DeclGen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Write generated class sources below an output directory.

Each class lands at ``<output>/<namespace path>/<Name>.java``, where the
namespace segments become directories (``com.example`` → ``com/example``).
"""

from __future__ import annotations

import logging
from pathlib import Path

from declgen.blueprint.loader import BlueprintError
from declgen.codegen.classes import ClassDecl

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############

SOURCE_SUFFIX = ".java"


def source_path(class_decl: ClassDecl, output_dir: Path) -> Path:
    """Return the file a class declaration is written to."""
    return output_dir.joinpath(*class_decl.unit.namespace.split(".")) / (class_decl.name + SOURCE_SUFFIX)


def write_sources(classes: list[ClassDecl], output_dir: Path) -> list[Path]:
    """Generate and write the source file of every class.

    Args:
        classes: Class declarations to write.
        output_dir: Root of the generated source tree; created when missing.

    Returns:
        The written file paths, in the order of *classes*.

    Raises:
        BlueprintError: If a file cannot be written.
    """
    written: list[Path] = []
    for class_decl in classes:
        target = source_path(class_decl, output_dir)
        code = class_decl.generate_code()
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(code, encoding="utf-8")
        except OSError as exc:
            raise BlueprintError(f"Cannot write generated source '{target}': {exc}") from exc
        logger.info("Wrote %s", target)
        written.append(target)
    return written
