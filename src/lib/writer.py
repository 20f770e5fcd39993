"""
readme.txt writer

Reads a README.md, converts it and saves the result next to the real
(symlink-resolved) source file under the lower-cased base name with a
.txt extension.

Failure points, in order:
    ReadmeNotFoundError           source file missing
    TargetNotWritableError        resolved parent is not a usable directory
    OutputExistsNotWritableError  existing readme.txt rejects the write probe
    WriteFailedError              saving the converted text failed
"""

import os
import re
from pathlib import Path
from typing import Optional

from ..models.errors import (
    ReadmeNotFoundError,
    TargetNotWritableError,
    OutputExistsNotWritableError,
    WriteFailedError,
)
from .converter import readme_convert
from .log import LOG


def outputPath_derive(target_file: str, target_dir: Path) -> Path:
    """
    Derive the readme.txt path for a source README

    Args:
        target_file: Source path as given by the caller
        target_dir: Resolved directory that receives the output

    Returns:
        target_dir / lower-cased base name with a trailing .md replaced by .txt

    Example:
        >>> outputPath_derive("docs/README.md", Path("/src/docs"))
        PosixPath('/src/docs/readme.txt')
    """
    new_name = re.sub(r'\.md$', '.txt', os.path.basename(target_file).lower())
    return target_dir / new_name


def readme_replace(target_file: str, environment: Optional[str] = None) -> bool:
    """
    Convert a README.md and save it as readme.txt

    Args:
        target_file: Path to the source README
        environment: Environment Name for visibility resolution

    Returns:
        True when readme.txt was written

    Raises:
        ReadmeNotFoundError: source file does not exist
        TargetNotWritableError: resolved parent directory is unusable
        OutputExistsNotWritableError: existing output rejects a write
        WriteFailedError: final write failed
    """
    source = Path(target_file)
    if not source.exists():
        raise ReadmeNotFoundError()

    try:
        target_dir = source.resolve().parent
        target_dir_ok = target_dir.is_dir()
    except OSError as e:
        raise TargetNotWritableError() from e
    if not target_dir_ok:
        raise TargetNotWritableError()

    output_file = outputPath_derive(target_file, target_dir)

    # The probe truncates an existing readme.txt before the new content is
    # converted and written. If that later write fails the previous output
    # is already lost.
    if output_file.is_file():
        LOG(f"{output_file.name} exists, probing for write access", level=2)
        try:
            output_file.write_text("", encoding="utf-8")
        except OSError as e:
            raise OutputExistsNotWritableError() from e

    # Undecodable bytes become U+FFFD; line endings are kept as written.
    with source.open(encoding="utf-8", errors="replace", newline="") as handle:
        source_text = handle.read()
    LOG(f"Read {len(source_text)} characters from {source.name}", level=2)

    converted = readme_convert(source_text, environment)

    try:
        output_file.write_text(converted, encoding="utf-8", newline="")
    except OSError as e:
        raise WriteFailedError() from e

    LOG(f"Wrote {output_file}", level=2)
    return True
