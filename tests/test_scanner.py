"""Test suite for scanning strings for inflection patterns."""

import pytest

from inflector import scanner
from inflector.scanner import Member, PatternType


def test_scan_regular_pattern(welcome):
    # when
    result = scanner.scan(welcome)
    # then
    assert len(result) == 1
    pattern = result[0]
    assert pattern.source == "@{f:Lady|m:Sir|n:You|All}"
    assert not pattern.escaped
    assert pattern.pattern_type is PatternType.LOOSE
    assert pattern.kinds == []
    assert len(pattern.contents) == 1
    content = pattern.contents[0]
    assert [clause.value for clause in content.clauses] == [
        "Lady", "Sir", "You"]
    assert content.clauses[0].groups == [[Member("f")]]
    assert content.free_text == "All"


@pytest.mark.parametrize(
    "text,pattern_type,kinds",
    [
        ("@{m:he}", PatternType.LOOSE, []),
        ("@gender{m:he}", PatternType.STRICT, ["gender"]),
        ("@gender+number{m+s:he}", PatternType.COMPLEX, ["gender", "number"]),
        ("@gender++number{m+s:he}", PatternType.COMPLEX, ["gender", "number"]),
    ],
    ids=["loose", "strict", "complex", "complex_empty_kind"]
)
def test_pattern_types(text, pattern_type, kinds):
    # when
    pattern = scanner.scan(text)[0]
    # then
    assert pattern.pattern_type is pattern_type
    assert pattern.kinds == kinds


@pytest.mark.parametrize(
    "text,unescaped",
    [
        ("@@{f:AAAAA|m:BBBBB}", "@{f:AAAAA|m:BBBBB}"),
        ("\\@{f:AAAAA|m:BBBBB}", "@{f:AAAAA|m:BBBBB}"),
        ("@@gender{f:a}{m:b}", "@gender{f:a}{m:b}"),
    ]
)
def test_escaped_patterns(text, unescaped):
    # when
    pattern = scanner.scan(text)[0]
    # then
    assert pattern.escaped
    assert pattern.unescaped == unescaped


def test_adjacent_patterns():
    # when
    result = scanner.scan("@{f:Lady|All}@{m:Sir|All} @@{n:You}")
    # then
    assert [p.source for p in result] == [
        "@{f:Lady|All}", "@{m:Sir|All}", "@@{n:You}"]
    assert [p.escaped for p in result] == [False, False, True]


def test_multiple_contents():
    # when
    result = scanner.scan("@{m:he|f:she}{m:his|f:her} said")
    # then
    assert len(result) == 1
    assert [c.clauses[1].value for c in result[0].contents] == ["she", "her"]


def test_token_groups_and_negation():
    # when
    content = scanner.parse_content("m,!f:x|!n:y", PatternType.LOOSE)
    # then
    assert content.clauses[0].groups == [[Member("m"), Member("f", True)]]
    assert content.clauses[1].groups == [[Member("n", True)]]
    assert content.free_text is None


def test_complex_groups():
    # when
    content = scanner.parse_content("m,f+p:they|other", PatternType.COMPLEX)
    # then
    clause = content.clauses[0]
    assert clause.tokens == "m,f+p"
    assert clause.groups == [[Member("m"), Member("f")], [Member("p")]]
    assert clause.value == "they"
    assert content.free_text == "other"


@pytest.mark.parametrize(
    "content,values,free_text",
    [
        ("m:|All", [""], "All"),
        ("m::he", ["he"], None),
        ("m:a:b", ["a:b"], None),
        ("Free|m:he", ["he"], None),
        ("m:he|Free", ["he"], "Free"),
    ],
    ids=["empty_value", "many_colons", "colon_in_value",
         "leading_free_text", "trailing_free_text"]
)
def test_parse_content(content, values, free_text):
    # when
    result = scanner.parse_content(content, PatternType.LOOSE)
    # then
    assert [clause.value for clause in result.clauses] == values
    assert result.free_text == free_text


@pytest.mark.parametrize(
    "text",
    ["plain text", "user@example.com", "@{}", "@ {m:he}", "{m:he}"]
)
def test_no_patterns(text):
    assert scanner.scan(text) == []


@pytest.mark.parametrize(
    "text,expected",
    [("plain text", False), ("a @ b", True), (None, False), (5, False)]
)
def test_has_patterns(text, expected):
    assert scanner.has_patterns(text) is expected


@pytest.mark.parametrize(
    "value,expected",
    [("\\~", "~"), ("\\\\x", "\\x"), ("~", "~"), ("plain", "plain")]
)
def test_strip_escape(value, expected):
    assert scanner.strip_escape(value) == expected
