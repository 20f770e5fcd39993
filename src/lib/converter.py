"""
README.md to readme.txt conversion

Chains the visibility resolver and the syntax rewriter. The result depends
only on the document and the Environment Name.
"""

from typing import Optional

from .visibility import visibility_resolve
from .rewriter import syntax_rewrite
from .log import LOG


def readme_convert(document: str, environment: Optional[str] = None) -> str:
    """
    Convert a GitHub README into WordPress readme.txt text

    Args:
        document: README.md contents
        environment: Environment Name for only:<env> / not:<env> sections,
                     or None to leave those markers untouched

    Returns:
        Converted document

    Example:
        >>> readme_convert("# Title\\n<!-- only:github/ -->badge<!-- /only:github -->")
        '=== Title ===\\n'
    """
    LOG(f"Converting {len(document)} characters (environment: {environment or 'unset'})", level=2)
    document = visibility_resolve(document, environment)
    return syntax_rewrite(document)
