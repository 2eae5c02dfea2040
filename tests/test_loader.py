"""Test suite for loading raw inflection data."""

import pytest

from inflector import loader
from inflector.errors import (
    BadInflectionAlias,
    BadInflectionKind,
    BadInflectionToken,
    DuplicatedInflectionToken,
    InflectionConfigurationError,
)
from inflector.inflection_data import InflectionData, StrictInflectionData


@pytest.mark.parametrize(
    "name,expected",
    [
        ("gender", True),
        ("m", True),
        ("", False),
        (None, False),
        ("m,f", False),
        ("a+b", False),
        ("@m", False),
        ("!m", False),
        ("a:b", False),
    ]
)
def test_is_valid_name(name, expected):
    assert loader.is_valid_name(name) is expected


def test_load_inflection_tokens(xx_tree):
    # when
    idb, idb_strict = loader.load_inflection_tokens("xx", xx_tree)
    # then
    assert isinstance(idb, InflectionData)
    assert isinstance(idb_strict, StrictInflectionData)
    assert idb.kinds() == ["gender", "person"]
    assert idb_strict.kinds() == ["gender", "number", "tense"]
    assert idb.get_default("gender") == "n"
    assert idb.get_default("person") is None
    assert idb_strict.get_default("number") == "s"
    assert idb_strict.get_default("tense") is None


def test_aliases_point_to_true_tokens(idb):
    assert idb.aliases("gender") == {
        "masculine": "m", "feminine": "f", "neuter": "n", "neutral": "n"}
    assert idb.get_description("neutral") == "neuter"


def test_tokens_listing(idb):
    # given
    expected = {
        "m": "male", "f": "female", "n": "neuter", "s": "strange",
        "masculine": "male", "feminine": "female", "neuter": "neuter",
        "neutral": "neuter",
    }
    # then
    assert idb.tokens("gender") == expected
    assert idb.tokens() == {**expected, "i": "I", "you": "You"}
    assert idb.raw_tokens("gender") == {
        "m": "male", "f": "female", "n": "neuter", "s": "strange",
        "masculine": "m", "feminine": "f", "neuter": "n", "neutral": "n",
    }


def test_strict_tokens_do_not_leak(idb, idb_strict):
    assert idb.get_kind("p") is None
    assert idb_strict.get_kind("p", "number") == "number"
    assert idb_strict.get_kind("m", "gender") == "gender"


def test_same_token_in_strict_kinds_and_regular_kinds():
    # given
    tree = {
        "gender": {"x": "regular"},
        "@a": {"x": "first"},
        "@b": {"x": "second"},
    }
    # when
    idb, idb_strict = loader.load_inflection_tokens("xx", tree)
    # then
    assert idb.get_description("x") == "regular"
    assert idb_strict.get_description("x", "a") == "first"
    assert idb_strict.get_description("x", "b") == "second"


@pytest.mark.parametrize(
    "tree",
    [
        {},
        None,
        {"gender": None},
        {"gender": {}},
        {"@": {"m": "male"}},
    ],
    ids=["empty", "none", "none_kind", "empty_kind", "empty_strict_kind"]
)
def test_load_empty_data(tree):
    # when
    idb, idb_strict = loader.load_inflection_tokens("xx", tree)
    # then
    assert idb.empty
    assert idb_strict.empty


@pytest.mark.parametrize(
    "tree,error",
    [
        ({"gender": {"o": "other"}, "person": {"o": "o"}},
         DuplicatedInflectionToken),
        ({"gender": {"o": "other"}, "person": {"x": "x", "o": "@x"}},
         DuplicatedInflectionToken),
        ({"@gender": {"o": "other", "oo": "@o", "o2": "@oo"},
          "@person": {"o": "o", "oo": "x"}},
         None),
        ({"gender": {"o": "@nonexistant"}}, BadInflectionAlias),
        ({"gender": {"default": "@nonexistant"}}, BadInflectionAlias),
        ({"gender": {"m": "male", "default": "f"}}, BadInflectionAlias),
        ({"gender": {"a": "@b", "b": "@a"}}, BadInflectionAlias),
        ({"gender": {"m": "male", "x": "@default", "default": "m"}},
         BadInflectionAlias),
        ({"gender": {"o": "@"}}, BadInflectionToken),
        ({"gender": {"m": "male", "default": "@"}}, BadInflectionToken),
        ({"gender": {"tok": None}}, BadInflectionToken),
        ({"gender": {"tok": 5}}, BadInflectionToken),
        ({"gender": {"m,f": "both"}}, BadInflectionToken),
        ({"gen+der": {"m": "male"}}, BadInflectionKind),
        ({"@gen:der": {"m": "male"}}, BadInflectionKind),
        ({"gender": ["m", "f"]}, InflectionConfigurationError),
        ({1: {"m": "male"}}, InflectionConfigurationError),
    ],
    ids=[
        "duplicated_token",
        "duplicated_alias",
        "strict_kinds_allow_same_names",
        "alias_to_unknown",
        "default_to_unknown",
        "default_to_unknown_name",
        "alias_cycle",
        "alias_to_default",
        "empty_alias",
        "empty_default",
        "no_description",
        "bad_description",
        "bad_token_name",
        "bad_kind_name",
        "bad_strict_kind_name",
        "malformed_kind",
        "malformed_kind_name",
    ]
)
def test_load_invalid_data(tree, error):
    if error is None:
        # then
        loader.load_inflection_tokens("xx", tree)
        return
    with pytest.raises(error):
        loader.load_inflection_tokens("xx", tree)


def test_configuration_errors_are_inflection_config_errors():
    for error in (BadInflectionAlias, BadInflectionKind, BadInflectionToken,
                  DuplicatedInflectionToken):
        assert issubclass(error, InflectionConfigurationError)


def test_duplicated_token_names_both_kinds():
    # given
    tree = {"gender": {"o": "other"}, "@person": {"x": "x"},
            "person": {"o": "o"}}
    # when
    with pytest.raises(DuplicatedInflectionToken) as error:
        loader.load_inflection_tokens("xx", tree)
    # then
    assert error.value.original_kind == "gender"
    assert error.value.kind == "person"
    assert error.value.token == "o"


def test_long_alias_chain():
    # given
    tokens = {"t0": "zero"}
    for idx in range(1, 40):
        tokens[f"t{idx}"] = f"@t{idx - 1}"
    # when
    idb, _ = loader.load_inflection_tokens("xx", {"kind": tokens})
    # then
    assert idb.get_true_token("t39") == "t0"
    assert idb.get_target_for_alias("t39") == "t0"


def test_too_long_alias_chain():
    # given
    tokens = {"t0": "zero"}
    for idx in range(1, 80):
        tokens[f"t{idx}"] = f"@t{idx - 1}"
    # then
    with pytest.raises(BadInflectionAlias):
        loader.load_inflection_tokens("xx", {"kind": tokens})
