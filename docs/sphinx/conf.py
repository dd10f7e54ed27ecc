# Copyright 2026 DeclGen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Sphinx configuration for the DeclGen documentation."""

project = "DeclGen"
author = "DeclGen Contributors"
release = "0.1.0"

extensions: list[str] = ["sphinx.ext.autodoc"]

html_theme = "alabaster"
