"""
wp_readme - GitHub README.md to WordPress readme.txt converter

Visibility resolution and syntax rewriting, plus the locator and writer
that move files in and out of the pipeline.
"""

__version__ = "1.0.0"

from .visibility import VisibilityResolver, visibility_resolve
from .rewriter import syntax_rewrite
from .converter import readme_convert
from .locator import readme_find
from .writer import readme_replace
from .log import LOG, state_connectToLogger

__all__ = [
    "VisibilityResolver",
    "visibility_resolve",
    "syntax_rewrite",
    "readme_convert",
    "readme_find",
    "readme_replace",
    "LOG",
    "state_connectToLogger",
    "__version__",
]
