"""Scan strings for inflection patterns.

A pattern looks like ``@{f:Lady|m:Sir|n:You|All}`` (regular pattern),
``@gender{f:Lady|m:Sir|All}`` (named pattern, using a strict kind) or
``@gender+number{f+s:She|m+s:He|f,m+p:They}`` (complex pattern).

Patterns preceded by ``@`` or ``\\`` are escaped and left untouched.
"""

import re
from enum import Enum
from typing import List, NamedTuple, Optional

from .constants import (
    ESCAPE,
    OPERATOR_AND,
    OPERATOR_OR,
    PATTERN_MARKER,
    TOKEN_NOT,
    TOKEN_OR,
)

PATTERN_REGEXP = re.compile(
    r"(?P<escape>[@\\]?)"
    r"@(?P<kind>[^\s@{}]*)"
    r"\{(?P<content>[^}]+)\}"
    r"(?P<multi>(?:\{[^}]+\})*)"
)
"""Regular expression that catches patterns."""

MULTI_REGEXP = re.compile(r"\{([^}]+)\}")
"""Regular expression that catches the extra contents of a pattern."""

CLAUSE_REGEXP = re.compile(r"(?P<tokens>[^:]+):+(?P<value>.*)", re.DOTALL)
"""Regular expression that splits a clause into a token set and a value."""


class PatternType(Enum):
    """Class of a pattern, deciding which inflection data is used."""
    LOOSE = "loose"
    STRICT = "strict"
    COMPLEX = "complex"


class Member(NamedTuple):
    """A single token reference in a token group."""
    name: str
    negated: bool = False


class Clause(NamedTuple):
    """A ``token-set:value`` element of a pattern.

    ``groups`` holds one group of members per kind of the pattern.
    """
    tokens: str
    groups: List[List[Member]]
    value: str


class PatternContent(NamedTuple):
    clauses: List[Clause]
    free_text: Optional[str]


class Pattern(NamedTuple):
    source: str
    escaped: bool
    pattern_type: PatternType
    kinds: List[str]
    kind_spec: str
    contents: List[PatternContent]

    @property
    def unescaped(self) -> str:
        """The pattern text without the escape character."""
        return self.source[1:] if self.escaped else self.source


def parse_group(group: str) -> List[Member]:
    """Split a token group on commas, marking negated members."""
    members = []
    for name in group.split(TOKEN_OR):
        if name.startswith(TOKEN_NOT):
            members.append(Member(name[len(TOKEN_NOT):], True))
        else:
            members.append(Member(name, False))
    return members


def parse_content(content: str, pattern_type: PatternType) -> PatternContent:
    """Parse the content between braces into clauses and free text.

    Only the last segment is used as free text,
    other segments without a colon are ignored.
    """
    clauses = []
    free_text = None
    segments = content.split(OPERATOR_OR)
    for idx, segment in enumerate(segments):
        match = CLAUSE_REGEXP.fullmatch(segment)
        if match is None:
            if idx == len(segments) - 1 and segment:
                free_text = segment
            continue
        tokens = match.group("tokens")
        if pattern_type is PatternType.COMPLEX:
            groups = [parse_group(part) for part in tokens.split(OPERATOR_AND)]
        else:
            groups = [parse_group(tokens)]
        clauses.append(Clause(tokens, groups, match.group("value")))
    return PatternContent(clauses, free_text)


def parse_kinds(kind_spec: str) -> tuple:
    """Decide the pattern type from the kind specification."""
    if not kind_spec:
        return PatternType.LOOSE, []
    if OPERATOR_AND in kind_spec:
        kinds = [kind for kind in kind_spec.split(OPERATOR_AND) if kind]
        return PatternType.COMPLEX, kinds
    return PatternType.STRICT, [kind_spec]


def parse_match(match: re.Match) -> Pattern:
    """Create a Pattern from a match of PATTERN_REGEXP."""
    kind_spec = match.group("kind")
    pattern_type, kinds = parse_kinds(kind_spec)
    raw_contents = [match.group("content")]
    raw_contents += MULTI_REGEXP.findall(match.group("multi"))
    return Pattern(
        source=match.group(0),
        escaped=bool(match.group("escape")),
        pattern_type=pattern_type,
        kinds=kinds,
        kind_spec=kind_spec,
        contents=[parse_content(c, pattern_type) for c in raw_contents],
    )


def scan(text: str) -> List[Pattern]:
    """Find all inflection patterns in a string."""
    return [parse_match(match) for match in PATTERN_REGEXP.finditer(text)]


def has_patterns(text) -> bool:
    """Quick check before running the regular expressions."""
    return isinstance(text, str) and PATTERN_MARKER in text


def strip_escape(value: str) -> str:
    """Remove exactly one leading escape character from a value."""
    if value.startswith(ESCAPE):
        return value[len(ESCAPE):]
    return value
