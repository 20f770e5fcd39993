"""
README locator

Finds README.md / readme.md directly inside a directory. Absence is
reported with an empty path rather than an exception, leaving the caller
to decide how to react.
"""

import os

from .log import LOG

# Exact, case-sensitive names accepted as the source README
README_NAMES = ("README.md", "readme.md")


def readme_find(target_dir: str = ".") -> str:
    """
    Find the README file in a directory (non-recursive)

    Args:
        target_dir: Directory to search. A trailing path separator is
                    stripped before use.

    Returns:
        Full path of the first regular file named README.md or readme.md,
        or "" when the directory has none or cannot be read
    """
    if target_dir.endswith(("/", "\\")):
        target_dir = target_dir[:-1]

    try:
        with os.scandir(target_dir) as entries:
            for entry in sorted(entries, key=lambda item: item.name):
                if entry.name in README_NAMES and entry.is_file(follow_symlinks=False):
                    LOG(f"Found {entry.name} in {target_dir}", level=2)
                    return os.path.join(target_dir, entry.name)
    except OSError as e:
        LOG(f"Cannot read directory {target_dir!r}: {e}", level=2)
        return ""

    LOG(f"No README in {target_dir}", level=2)
    return ""
