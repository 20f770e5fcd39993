"""
Models package for wp_readme

Contains data structures and type definitions for the conversion pipeline.
"""

from .state import ProgramState, pipeline
from .directives import (
    SpanKind,
    SpanRule,
    ScanState,
    DirectiveSpan,
    GITHUB_ONLY_RULE,
    WP_ONLY_RULE,
    ENV_NOT_RULE,
    envOnlyRule_make,
)
from .errors import (
    ReadmeError,
    ReadmeNotFoundError,
    TargetNotWritableError,
    OutputExistsNotWritableError,
    WriteFailedError,
)

__all__ = [
    "ProgramState",
    "pipeline",
    "SpanKind",
    "SpanRule",
    "ScanState",
    "DirectiveSpan",
    "GITHUB_ONLY_RULE",
    "WP_ONLY_RULE",
    "ENV_NOT_RULE",
    "envOnlyRule_make",
    "ReadmeError",
    "ReadmeNotFoundError",
    "TargetNotWritableError",
    "OutputExistsNotWritableError",
    "WriteFailedError",
]
