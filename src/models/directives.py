"""
Directive span models and marker grammar

Defines the kinds of conditional-visibility directives a README may carry,
the start/end marker patterns that delimit them, and the span records the
visibility scanner produces.

Marker grammar:
    GitHub-only (removed)        <!-- only:github/ -->  ...  <!-- /only:github -->
    WordPress-only (revealed)    <!-- only:wp>          ...  </only:wp -->
    Environment-only (revealed)  <!-- only:<env>>       ...  </only:<env> -->
    Negated-environment          <!-- not:<name>/ -->   ...  <!-- /not:<name> -->
"""

import re
from enum import Enum
from dataclasses import dataclass
from typing import Optional


class SpanKind(Enum):
    """
    Kinds of directive spans

    The value is the marker keyword as it appears in the source, with
    ``<env>`` / ``<name>`` standing in for the environment parameter.
    """
    GITHUB_ONLY = "only:github"     # removed with its body
    WP_ONLY = "only:wp"             # body revealed
    ENV_ONLY = "only:<env>"         # body revealed for the live environment
    ENV_NOT = "not:<name>"          # body removed for the live environment


class ScanState(Enum):
    """States of the span scanner"""
    OUTSIDE = "outside"
    INSIDE = "inside"


@dataclass(frozen=True)
class SpanRule:
    """
    Start/end marker pair for one directive kind

    Attributes:
        kind: Directive kind the rule recognises
        start: Pattern for the start marker. For ENV_NOT the first group
               captures the environment name.
        end: Pattern for the end marker
        name: Fixed environment name for ENV_ONLY rules
    """
    kind: SpanKind
    start: re.Pattern[str]
    end: re.Pattern[str]
    name: Optional[str] = None


@dataclass(frozen=True)
class DirectiveSpan:
    """
    A marker-delimited region found in a document

    Attributes:
        kind: Directive kind
        name: Environment name carried by the markers (None for github/wp)
        body: Text between the start and end markers, untrimmed
        start: Offset of the first character of the start marker
        end: Offset just past the last character of the end marker

    Example:
        For "a<!-- only:wp>B</only:wp -->c":
        DirectiveSpan(kind=SpanKind.WP_ONLY, name=None, body="B", start=1, end=28)
    """
    kind: SpanKind
    name: Optional[str]
    body: str
    start: int
    end: int


GITHUB_ONLY_RULE = SpanRule(
    kind=SpanKind.GITHUB_ONLY,
    start=re.compile(re.escape("<!-- only:github/ -->")),
    end=re.compile(re.escape("<!-- /only:github -->")),
)

WP_ONLY_RULE = SpanRule(
    kind=SpanKind.WP_ONLY,
    start=re.compile(re.escape("<!-- only:wp>")),
    end=re.compile(re.escape("</only:wp -->")),
)

# Any not:<name> end marker closes the open span, whatever name it carries.
ENV_NOT_RULE = SpanRule(
    kind=SpanKind.ENV_NOT,
    start=re.compile(r"<!-- not:([^/]+)/ -->"),
    end=re.compile(r"<!-- /not:[^ ]+ -->"),
)


def envOnlyRule_make(environment: str) -> SpanRule:
    """
    Build the only:<env> rule for a concrete environment name

    The name is matched literally, so characters such as ``.`` or ``*`` in
    an environment name never act as wildcards.

    Args:
        environment: Live environment name (e.g., "production")

    Returns:
        SpanRule for ``<!-- only:<environment>>`` ... ``</only:<environment> -->``
    """
    return SpanRule(
        kind=SpanKind.ENV_ONLY,
        start=re.compile(re.escape(f"<!-- only:{environment}>")),
        end=re.compile(re.escape(f"</only:{environment} -->")),
        name=environment,
    )
