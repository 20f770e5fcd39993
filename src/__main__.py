#!/usr/bin/env python3
"""
wp-readme - Generate a WordPress readme.txt from a GitHub README.md

Finds README.md (or readme.md) in the target directory, resolves its
conditional-visibility sections and rewrites headers and fenced code
blocks into readme.txt syntax. The result is saved beside the source as
readme.txt.

Visibility directives:
    <!-- only:github/ --> ... <!-- /only:github -->   removed
    <!-- only:wp> ... </only:wp -->                   revealed
    <!-- only:<env>> ... </only:<env> -->             revealed when WP_README_ENV=<env>
    <!-- not:<env>/ --> ... <!-- /not:<env> -->       removed when WP_README_ENV=<env>

Configuration:
    WP_README_DIR   directory to search (default: current directory)
    WP_README_ENV   environment name for only:/not: sections

Examples:
    # Convert README.md in the current directory
    wp-readme

    # Production build of a plugin in another directory
    WP_README_ENV=production WP_README_DIR=plugins/my-plugin wp-readme

    # Verbose output
    wp-readme -vv
"""

import sys
from pathlib import Path
from argparse import ArgumentParser, Namespace, ArgumentDefaultsHelpFormatter
from typing import List, Optional

from .lib import readme_find, readme_replace, __version__, LOG, state_connectToLogger
from .lib.writer import outputPath_derive
from .config import AppSettings
from .models import ProgramState, ReadmeError, pipeline


def parser_build(settings: AppSettings) -> ArgumentParser:
    """
    Build the CLI parser with defaults taken from WP_README_* settings

    Args:
        settings: Settings read for this invocation

    Returns:
        Configured ArgumentParser
    """
    parser = ArgumentParser(
        prog="wp-readme",
        description="Generate a WordPress readme.txt from a GitHub README.md",
        formatter_class=ArgumentDefaultsHelpFormatter,
    )

    parser.add_argument(
        "--targetDir",
        default=settings.dir,
        type=str,
        help="Directory containing README.md (env: WP_README_DIR)",
    )

    parser.add_argument(
        "--env",
        default=settings.environment_get(),
        type=str,
        help="Environment name for only:<env> / not:<env> sections (env: WP_README_ENV)",
    )

    parser.add_argument(
        "-v",
        "--verbosity",
        action="count",
        default=1,
        help="Increase output verbosity (can be repeated: -v, -vv)",
    )

    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")

    return parser


def readme_locate(inputstate: ProgramState) -> ProgramState:
    """
    Find README.md in the target directory.

    Returns:
        ProgramState with added field:
            - readmeFile: Path to the located README

    Exits:
        1 if no README.md / readme.md is present
    """
    state = inputstate.copy()

    LOG(f"Searching {state.targetDir} for README.md...", level=2)
    state.readmeFile = readme_find(state.targetDir)

    if not state.readmeFile:
        print("[ERROR] No README.md in current directory.", file=sys.stderr)
        sys.exit(1)

    LOG("readme.md found...", level=1)
    return state


def readme_write(inputstate: ProgramState) -> ProgramState:
    """
    Convert the located README and write readme.txt beside it.

    Returns:
        ProgramState with added fields:
            - outputFile: Path of the generated readme.txt
            - convertOK: True if the writer succeeded

    Exits:
        1 on any writer failure
    """
    state = inputstate.copy()

    LOG(f"Environment: {state.environment or 'unset'}", level=2)

    try:
        state.convertOK = readme_replace(state.readmeFile, state.environment)
    except (ReadmeError, OSError) as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        sys.exit(1)

    state.outputFile = str(
        outputPath_derive(state.readmeFile, Path(state.readmeFile).resolve().parent)
    )
    return state


def results_report(inputstate: ProgramState) -> ProgramState:
    """
    Report the outcome to the user (terminal pipeline stage).

    Exits:
        1 if the writer did not report success
    """
    state: ProgramState = inputstate.copy()
    if not state.convertOK:
        print("[ERROR] Failed to save readme.txt", file=sys.stderr)
        sys.exit(1)

    LOG("readme.txt generated successfully!", level=1)
    LOG(f"  Output: {state.outputFile}", level=2)
    return state


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point - locate, convert and write readme.txt.

    Orchestrates:
        1. readme_locate: Find README.md via WP_README_DIR / --targetDir
        2. readme_write: Convert and save readme.txt
        3. results_report: Report success

    Args:
        argv: Argument list (defaults to sys.argv[1:])

    Returns:
        0 on success; failures exit with status 1
    """
    settings = AppSettings()
    options: Namespace = parser_build(settings).parse_args(argv)

    state: ProgramState = ProgramState.state_createFromNamespace(options)

    # Connect state to logger for entire pipeline
    state_connectToLogger(state)

    pipeline(state, readme_locate, readme_write, results_report)
    return 0


if __name__ == "__main__":
    sys.exit(main())
