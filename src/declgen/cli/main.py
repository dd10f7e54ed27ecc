# Copyright 2026 DeclGen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the DeclGen command-line interface."""

import argparse
import logging
import os
import sys
from pathlib import Path

from declgen.blueprint.loader import BlueprintError, build_classes, load_blueprint
from declgen.blueprint.output import write_sources
from declgen.codegen.classes import ClassDecl, iso8601_timestamp
from declgen.workspace.config import (
    CONFIG_FILE_NAME,
    GeneratorConfig,
    GeneratorConfigError,
    load_generator_config,
)

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############

LOG_LEVEL_ENV = "DECLGEN_LOG_LEVEL"


def main() -> None:
    """Run the DeclGen CLI."""
    parser = argparse.ArgumentParser(
        prog="declgen",
        description="DeclGen: generate Java source files from declaration blueprints",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help=f"Logging level (DEBUG, INFO, WARNING, ERROR; default: ${LOG_LEVEL_ENV} or WARNING)",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # init subcommand
    init_parser = subparsers.add_parser(
        "init",
        help="Create a generator configuration file",
        description=f"Write a default {CONFIG_FILE_NAME} into a directory.",
    )
    init_parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help="Directory to create the configuration in (default: current directory)",
    )

    # render subcommand
    render_parser = subparsers.add_parser(
        "render",
        help="Print the generated sources of a blueprint",
        description="Render every class of a blueprint to standard output without writing files.",
    )
    render_parser.add_argument("file", help="Blueprint YAML file")
    render_parser.add_argument(
        "--stamp",
        action="store_true",
        help="Add the @Generated annotation to every class",
    )

    # generate subcommand
    generate_parser = subparsers.add_parser(
        "generate",
        help="Write generated sources for one or more blueprints",
        description="Generate one source file per blueprint class below the output directory.",
    )
    generate_parser.add_argument("files", nargs="+", help="Blueprint YAML files")
    generate_parser.add_argument(
        "--config",
        default=None,
        help=f"Generator configuration file (default: ./{CONFIG_FILE_NAME} when present)",
    )
    generate_parser.add_argument(
        "--output",
        default=None,
        help="Output directory; overrides the configured output directory",
    )
    generate_parser.add_argument(
        "--timestamp",
        default=None,
        help="Date written into @Generated (default: the current time)",
    )

    args = parser.parse_args()
    _setup_logging(args.log_level)
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    sys.exit(_dispatch(args))


# ################
# Implementation
# ################

_DEFAULT_OUTPUT_DIRECTORY = "generated"


def _setup_logging(level: str | None) -> None:
    """Attach a stream handler to the ``declgen`` logger at the requested level."""
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV, "WARNING")
    log_level = getattr(logging, level.upper(), logging.WARNING)

    package_logger = logging.getLogger("declgen")
    package_logger.setLevel(log_level)
    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setLevel(log_level)
    handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))
    package_logger.addHandler(handler)
    package_logger.propagate = False


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    if args.command == "init":
        return _cmd_init(args)
    if args.command == "render":
        return _cmd_render(args)
    if args.command == "generate":
        return _cmd_generate(args)
    return 0


def _cmd_init(args: argparse.Namespace) -> int:
    """Handle the init subcommand."""
    directory = Path(args.directory).resolve()

    if not directory.exists():
        print(f"Error: directory '{directory}' does not exist.", file=sys.stderr)
        return 1

    config_file = directory / CONFIG_FILE_NAME
    if config_file.exists():
        print(f"Error: configuration already exists at '{config_file}'.", file=sys.stderr)
        return 1

    config_content = (
        "# DeclGen generator configuration\n"
        f"output-directory: {_DEFAULT_OUTPUT_DIRECTORY}\n"
        "generator-name: declgen\n"
        "stamp-generated: true\n"
    )
    config_file.write_text(config_content, encoding="utf-8")
    print(f"Created DeclGen configuration at '{config_file}'.")
    return 0


def _cmd_render(args: argparse.Namespace) -> int:
    """Handle the render subcommand."""
    path = Path(args.file)
    try:
        classes = build_classes(load_blueprint(path), source_label=str(path))
    except BlueprintError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if args.stamp:
        timestamp = iso8601_timestamp()
        for class_decl in classes:
            class_decl.stamp_generated(timestamp=timestamp)

    print("\n".join(class_decl.generate_code() for class_decl in classes), end="")
    return 0


def _cmd_generate(args: argparse.Namespace) -> int:
    """Handle the generate subcommand."""
    config_path = Path(args.config) if args.config is not None else Path.cwd() / CONFIG_FILE_NAME
    config: GeneratorConfig | None = None
    if args.config is not None or config_path.exists():
        try:
            config = load_generator_config(config_path)
        except GeneratorConfigError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return 1

    if args.output is not None:
        output_dir = Path(args.output)
    elif config is not None:
        output_dir = config_path.parent / config.output_directory
    else:
        print(
            f"Error: no output directory given. Pass --output or run 'declgen init' to create {CONFIG_FILE_NAME}.",
            file=sys.stderr,
        )
        return 1

    if config is None:
        config = GeneratorConfig(output_directory=str(output_dir))
    timestamp = args.timestamp if args.timestamp is not None else iso8601_timestamp()

    classes: list[ClassDecl] = []
    seen: dict[str, str] = {}
    try:
        for file in args.files:
            for class_decl in build_classes(load_blueprint(Path(file)), source_label=file):
                qualified_name = class_decl.unit.qualified_name
                if qualified_name in seen:
                    raise BlueprintError(f"{file}: class {qualified_name} is already declared in {seen[qualified_name]}")
                seen[qualified_name] = file
                if config.stamp_generated:
                    class_decl.stamp_generated(config.generator_name, timestamp)
                classes.append(class_decl)
        written = write_sources(classes, output_dir)
    except BlueprintError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    logger.info("Generated %d class(es) from %d blueprint(s)", len(written), len(args.files))
    print(f"Generated {len(written)} source file(s) in '{output_dir}'.")
    return 0
