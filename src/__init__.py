"""
wp_readme - GitHub README.md to WordPress readme.txt converter

Generates the plugin-directory readme.txt from the README.md kept on
GitHub, with per-platform and per-environment sections.
"""

__version__ = "1.0.0"

from .lib import (
    readme_convert,
    readme_find,
    readme_replace,
    visibility_resolve,
    syntax_rewrite,
    LOG,
    state_connectToLogger,
)

__all__ = [
    "readme_convert",
    "readme_find",
    "readme_replace",
    "visibility_resolve",
    "syntax_rewrite",
    "LOG",
    "state_connectToLogger",
    "__version__",
]
