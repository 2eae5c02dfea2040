"""Test suite for the inflection switches."""

import pytest

from inflector.options import InflectionOptions


def test_default_switches():
    # when
    options = InflectionOptions()
    # then
    assert options.to_dict() == {
        "raises": False,
        "aliased_patterns": False,
        "unknown_defaults": True,
        "excluded_defaults": False,
    }


def test_reset():
    # given
    options = InflectionOptions(raises=True, unknown_defaults=False)
    # when
    options.reset()
    # then
    assert options == InflectionOptions()


def test_known_option_keys():
    assert InflectionOptions().known == {
        "inflector_raises": "raises",
        "inflector_aliased_patterns": "aliased_patterns",
        "inflector_unknown_defaults": "unknown_defaults",
        "inflector_excluded_defaults": "excluded_defaults",
    }


@pytest.mark.parametrize(
    "overrides,expected",
    [
        ({}, {"raises": True}),
        ({"inflector_raises": None}, {"raises": True}),
        ({"inflector_raises": False}, {"raises": False}),
        ({"inflector_excluded_defaults": 1}, {"excluded_defaults": True}),
        ({"gender": "m"}, {"raises": True}),
    ],
    ids=["empty", "none_keeps_value", "override", "coerced", "ignores_kinds"]
)
def test_merge(overrides, expected):
    # given
    options = InflectionOptions(raises=True)
    # when
    result = options.merge(overrides)
    # then
    assert options.raises is True
    for name, value in expected.items():
        assert getattr(result, name) is value


def test_split():
    # given
    options = InflectionOptions()
    # when
    switches, kinds = options.split(
        {"gender": "f", "@number": "p", "inflector_raises": True})
    # then
    assert switches.raises is True
    assert kinds == {"gender": "f", "@number": "p"}
    assert options.raises is False


def test_split_without_options():
    # when
    switches, kinds = InflectionOptions().split(None)
    # then
    assert switches == InflectionOptions()
    assert kinds == {}
