"""
Syntax rewriter for WordPress readme.txt

Rewrites the two Markdown constructs readme.txt spells differently:

1. ATX headers become =-wrapped headers, one fewer = per level:
       # Title           ->  === Title ===
       ## Subtitle       ->  == Subtitle ==
       ### Section       ->  = Section =
   Deeper headers keep the same arithmetic, so the pad becomes empty
   ("#### Deep" -> " Deep ").

2. Fenced code blocks become <pre> blocks. The language tag is dropped and
   the body passes through unescaped:
       ```php\\necho 1;\\n```  ->  <pre>echo 1;</pre>

The header pass runs first and is not fence-aware: a "# comment" line
inside a code block is rewritten too.
"""

import re

from .log import LOG

# Number of = characters around a level-1 header
HEADER_PAD_BASE = 3

HEADER_PATTERN = re.compile(r'^(#+)[ \t]+([^\r\n]*)(?=\r?$)', re.MULTILINE)

CODEBLOCK_PATTERN = re.compile(r'```([^\n`]*?)\n(.*?)\n```', re.DOTALL)


def header_format(level: int, text: str) -> str:
    """
    Format header text at a given Markdown level

    Args:
        level: Number of leading '#' characters
        text: Header text as captured

    Returns:
        "<pad> <text> <pad>" where pad is '=' * (3 - (level - 1));
        a non-positive count gives an empty pad.
    """
    pad = '=' * (HEADER_PAD_BASE - (level - 1))
    return f"{pad} {text} {pad}"


def headers_rewrite(document: str) -> str:
    """Rewrite every '#'-header line in the document"""

    def header_replace(match: re.Match[str]) -> str:
        return header_format(len(match.group(1)), match.group(2))

    document, count = HEADER_PATTERN.subn(header_replace, document)
    if count:
        LOG(f"Rewrote {count} header(s)", level=3)
    return document


def codeblocks_rewrite(document: str) -> str:
    """Rewrite every closed ``` fence into a <pre> block"""
    document, count = CODEBLOCK_PATTERN.subn(
        lambda match: f"<pre>{match.group(2)}</pre>", document
    )
    if count:
        LOG(f"Rewrote {count} code block(s)", level=3)
    return document


def syntax_rewrite(document: str) -> str:
    """
    Apply the header pass and then the code-block pass

    Args:
        document: Visibility-resolved README text

    Returns:
        readme.txt syntax
    """
    return codeblocks_rewrite(headers_rewrite(document))
