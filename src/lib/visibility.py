"""
Visibility resolver for conditional README sections

Resolves marker-delimited directive spans into plain text so the same
README.md can serve GitHub and the WordPress plugin directory.

Four passes run in a fixed order, each over the output of the previous one:
1. only:github  - span removed with its body
2. only:wp      - span replaced by its trimmed body
3. only:<env>   - span replaced by its trimmed body (environment set only)
4. not:<name>   - span removed when <name> is the environment, otherwise
                  replaced by its trimmed body (environment set only)

Spans are found by a two-state scanner (outside-span / inside-span) rather
than by nested parsing. A start marker is closed by the first end marker
that follows it; a same-kind start marker inside a body is plain body text.
Nesting and overlap are therefore not interpreted: first match wins.

Example:
    >>> visibility_resolve("<!-- only:wp>\\nHello\\n</only:wp -->")
    'Hello'
"""

from typing import Callable, Iterator, List, Optional

from ..models.directives import (
    DirectiveSpan,
    ScanState,
    SpanRule,
    GITHUB_ONLY_RULE,
    WP_ONLY_RULE,
    ENV_NOT_RULE,
    envOnlyRule_make,
)
from .log import LOG


def spans_find(document: str, rule: SpanRule) -> Iterator[DirectiveSpan]:
    """
    Scan a document left to right for spans matching a rule

    Args:
        document: Text to scan
        rule: Start/end marker pair to look for

    Yields:
        DirectiveSpan for each complete start...end region, in order.
        Scanning stops at a start marker that has no end marker after it.
    """
    state = ScanState.OUTSIDE
    position = 0
    opener = None

    while position <= len(document):
        if state is ScanState.OUTSIDE:
            opener = rule.start.search(document, position)
            if opener is None:
                return
            position = opener.end()
            state = ScanState.INSIDE
        else:
            closer = rule.end.search(document, position)
            if closer is None:
                return
            name = rule.name
            if opener.groups():
                name = opener.group(1)
            yield DirectiveSpan(
                kind=rule.kind,
                name=name,
                body=document[opener.end():closer.start()],
                start=opener.start(),
                end=closer.end(),
            )
            position = closer.end()
            state = ScanState.OUTSIDE


def spans_replace(
    document: str, rule: SpanRule, resolve: Callable[[DirectiveSpan], str]
) -> str:
    """
    Replace every span matching a rule with the text resolve() returns for it

    Text outside spans, and any unterminated span, is copied verbatim.

    Args:
        document: Text to rewrite
        rule: Start/end marker pair
        resolve: Maps a found span to its replacement text

    Returns:
        New document with spans replaced
    """
    parts: List[str] = []
    position = 0
    count = 0

    for span in spans_find(document, rule):
        parts.append(document[position:span.start])
        parts.append(resolve(span))
        position = span.end
        count += 1

    parts.append(document[position:])

    if count:
        LOG(f"Resolved {count} {rule.kind.value} span(s)", level=3)
    return ''.join(parts)


def span_remove(span: DirectiveSpan) -> str:
    """Drop the span and its body"""
    return ''


def span_reveal(span: DirectiveSpan) -> str:
    """Keep only the body, trimmed of surrounding whitespace"""
    return span.body.strip()


class VisibilityResolver:
    """
    Resolves visibility directives for one Environment Name

    The environment is fixed at construction, so resolve() is a pure
    function of the document.

    Attributes:
        environment: Live environment name, or None when unset. An empty
                     string counts as unset.
    """

    def __init__(self, environment: Optional[str] = None) -> None:
        self.environment: Optional[str] = environment or None

    def envNot_resolve(self, span: DirectiveSpan) -> str:
        """Remove not:<name> spans naming the live environment, reveal the rest"""
        if span.name == self.environment:
            return span_remove(span)
        return span_reveal(span)

    def resolve(self, document: str) -> str:
        """
        Run all visibility passes over a document

        Args:
            document: README text

        Returns:
            Document with every recognised directive span resolved
        """
        document = spans_replace(document, GITHUB_ONLY_RULE, span_remove)
        document = spans_replace(document, WP_ONLY_RULE, span_reveal)

        if self.environment is None:
            LOG("No environment set, skipping only:<env> and not:<env> passes", level=3)
            return document

        document = spans_replace(document, envOnlyRule_make(self.environment), span_reveal)
        document = spans_replace(document, ENV_NOT_RULE, self.envNot_resolve)
        return document


def visibility_resolve(document: str, environment: Optional[str] = None) -> str:
    """
    Resolve visibility directives in a document

    Args:
        document: README text
        environment: Environment Name, or None to skip environment passes

    Returns:
        Document with directives resolved
    """
    return VisibilityResolver(environment).resolve(document)

