"""Configuration values for the unit tests."""

import pytest

from inflector.api import Inflector
from inflector.loader import load_inflection_tokens


@pytest.fixture(scope="session")
def xx_tree():
    """Raw inflection data with regular and strict kinds."""
    from dummy_inflections import xx
    return xx


@pytest.fixture(scope="session")
def yy_tree():
    """Raw inflection data without default tokens."""
    from dummy_inflections import yy
    return yy


@pytest.fixture
def stores(xx_tree):
    """The regular and the strict store of the xx locale."""
    return load_inflection_tokens("xx", xx_tree)


@pytest.fixture
def idb(stores):
    return stores[0]


@pytest.fixture
def idb_strict(stores):
    return stores[1]


@pytest.fixture
def inflector(xx_tree, yy_tree):
    """Instance of the registry, with the xx and yy locales loaded."""
    inflector_obj = Inflector()
    inflector_obj.load_all({"xx": xx_tree, "yy": yy_tree})
    return inflector_obj


@pytest.fixture(scope="session")
def welcome():
    return "Dear @{f:Lady|m:Sir|n:You|All}!"
