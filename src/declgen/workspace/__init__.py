# Copyright 2026 DeclGen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Generator configuration for DeclGen."""

from declgen.workspace.config import (
    CONFIG_FILE_NAME,
    GeneratorConfig,
    GeneratorConfigError,
    load_generator_config,
)

__all__ = [
    "CONFIG_FILE_NAME",
    "GeneratorConfig",
    "GeneratorConfigError",
    "load_generator_config",
]
