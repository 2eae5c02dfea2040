"""The Inflector registry: inflection data of many locales.

Example
-------
>>> inflector = Inflector()
>>> inflector.load("en", {"gender": {"m": "male", "f": "female",
...                                   "default": "m"}})
>>> inflector.interpolate("Dear @{f:Lady|m:Sir}!", "en", {"gender": "f"})
'Dear Lady!'

Query methods take a kind name; a kind prefixed with ``@``
is looked up among the strict kinds used by named patterns.
Unknown locales behave as if they had no inflection data.
"""

import logging
from typing import Dict, List, Tuple

from .constants import (
    KEY_FREE,
    KEY_KIND,
    KEY_PREFIX,
    KEY_SUFFIX,
    NAMED_MARKER,
    OPERATOR_ASSIGN,
    OPERATOR_OR,
    PATTERN_BEGIN,
    PATTERN_END,
    PATTERN_MARKER,
)
from .errors import InvalidLocale
from .inflection_data import InflectionData, StrictInflectionData
from .interpolate import Interpolator
from .loader import load_inflection_tokens
from .options import InflectionOptions
from .scanner import has_patterns

Stores = Tuple[InflectionData, StrictInflectionData]


def validate_locale(locale) -> str:
    """Raise InvalidLocale for empty or missing locale identifiers."""
    if locale is None or not str(locale):
        raise InvalidLocale(locale)
    return str(locale)


class Inflector:
    """Registry of the inflection data of all loaded locales.

    Parameters
    ----------
    options: InflectionOptions
        Engine-wide switches, overridable per interpolate() call
    """

    def __init__(self, options: InflectionOptions = None):
        self.options = InflectionOptions() if options is None else options
        self._stores: Dict[str, Stores] = {}

    def __repr__(self):
        return (
            f"{self.__class__.__name__}(locales={list(self._stores)!r}, "
            f"options={self.options!r})"
        )

    def _install(self, stores: Dict[str, Stores]):
        # readers keep the mapping they already hold
        self._stores = stores

    def load(self, locale, tree: dict):
        """Load the raw inflection data of a locale, replacing earlier data.

        Raises
        ------
        InvalidLocale
        InflectionConfigurationError
            If the data is malformed. The earlier data is kept in that case.
        """
        locale = validate_locale(locale)
        stores = dict(self._stores)
        stores[locale] = load_inflection_tokens(locale, tree)
        self._install(stores)

    def load_all(self, trees: dict):
        """Load many locales at once: either all of them, or none."""
        stores = dict(self._stores)
        for locale, tree in trees.items():
            locale = validate_locale(locale)
            stores[locale] = load_inflection_tokens(locale, tree)
        self._install(stores)

    def delete(self, locale):
        locale = validate_locale(locale)
        stores = dict(self._stores)
        if stores.pop(locale, None) is not None:
            logging.debug("Deleted inflections for locale %s", locale)
        self._install(stores)

    def clear(self):
        self._install({})

    def data(self, locale) -> InflectionData:
        """The store of regular kinds for a locale."""
        return self._get_stores(locale)[0]

    def strict_data(self, locale) -> StrictInflectionData:
        """The store of strict kinds for a locale."""
        return self._get_stores(locale)[1]

    def _get_stores(self, locale) -> Stores:
        locale = validate_locale(locale)
        stores = self._stores.get(locale)
        if stores is None:
            return InflectionData(locale), StrictInflectionData(locale)
        return stores

    def _route(self, locale, kind=None):
        """Pick the store for a kind, stripping the strict kind marker."""
        idb, idb_strict = self._get_stores(locale)
        if isinstance(kind, str) and kind.startswith(NAMED_MARKER):
            return idb_strict, kind[len(NAMED_MARKER):]
        return idb, kind

    def interpolate(self, text, locale, options: dict = None):
        """Interpolate the inflection patterns of a string.

        Parameters
        ----------
        text: str
        locale: str
        options: dict
            Kind names mapped to token names, plus the reserved
            switches ``inflector_raises``, ``inflector_aliased_patterns``,
            ``inflector_unknown_defaults`` and
            ``inflector_excluded_defaults``.

        Returns
        -------
        str
        """
        locale = validate_locale(locale)
        if not has_patterns(text):
            return text
        switches, kinds = self.options.split(options)
        idb, idb_strict = self._get_stores(locale)
        interpolator = Interpolator(idb, idb_strict, locale, switches, kinds)
        return interpolator.interpolate(text)

    def locales(self, kind=None) -> List[str]:
        """Locales with inflection data, optionally having the given kind."""
        found = []
        for locale in list(self._stores):
            if kind is None:
                if self.inflected_locale(locale):
                    found.append(locale)
            elif self.has_kind(kind, locale):
                found.append(locale)
        return found

    def inflected_locale(self, locale) -> bool:
        if locale is None or not str(locale):
            return False
        stores = self._stores.get(str(locale))
        if stores is None:
            return False
        return not (stores[0].empty and stores[1].empty)

    def kinds(self, locale) -> List[str]:
        return self.data(locale).kinds()

    def strict_kinds(self, locale) -> List[str]:
        return self.strict_data(locale).kinds()

    def has_kind(self, kind, locale) -> bool:
        store, kind = self._route(locale, kind)
        return store.has_kind(kind)

    def default_token(self, kind, locale):
        store, kind = self._route(locale, kind)
        return store.get_default(kind)

    def has_alias(self, token, locale, kind=None) -> bool:
        store, kind = self._route(locale, kind)
        return store.has_alias(token, kind)

    def has_true_token(self, token, locale, kind=None) -> bool:
        store, kind = self._route(locale, kind)
        return store.has_true_token(token, kind)

    def has_token(self, token, locale, kind=None) -> bool:
        store, kind = self._route(locale, kind)
        return store.has_token(token, kind)

    def true_token(self, token, locale, kind=None):
        store, kind = self._route(locale, kind)
        return store.get_true_token(token, kind)

    def kind(self, token, locale, kind=None):
        """The kind of a token; for strict kinds, whether it belongs to it."""
        store, kind = self._route(locale, kind)
        return store.get_kind(token, kind)

    def description(self, token, locale, kind=None):
        store, kind = self._route(locale, kind)
        return store.get_description(token, kind)

    def tokens(self, locale, kind=None) -> dict:
        store, kind = self._route(locale, kind)
        return store.tokens(kind)

    def raw_tokens(self, locale, kind=None) -> dict:
        store, kind = self._route(locale, kind)
        return store.raw_tokens(kind)

    def true_tokens(self, locale, kind=None) -> dict:
        store, kind = self._route(locale, kind)
        return store.true_tokens(kind)

    def aliases(self, locale, kind=None) -> dict:
        store, kind = self._route(locale, kind)
        return store.aliases(kind)

    def to_tree(self, locale) -> dict:
        """Normalized raw inflection data of a locale, both stores merged."""
        idb, idb_strict = self._get_stores(locale)
        return {**idb.to_tree(), **idb_strict.to_tree()}

    @staticmethod
    def key_to_pattern(key: dict) -> str:
        """Build an inflection pattern from a mapping of tokens to values.

        The reserved keys ``@prefix``, ``@suffix``, ``@kind`` and ``@free``
        set the text around the pattern, the kind of a named pattern
        and the free text.

        >>> Inflector.key_to_pattern({"m": "Sir", "f": "Lady",
        ...                           "@free": "All", "@prefix": "Dear "})
        'Dear @{m:Sir|f:Lady|All}'
        """
        key = dict(key)
        prefix = str(key.pop(KEY_PREFIX, "") or "")
        suffix = str(key.pop(KEY_SUFFIX, "") or "")
        kind = str(key.pop(KEY_KIND, "") or "")
        free = key.pop(KEY_FREE, None)
        free = "" if free is None else OPERATOR_OR + str(free)
        clauses = OPERATOR_OR.join(
            f"{token}{OPERATOR_ASSIGN}{value}" for token, value in key.items()
        )
        return (
            f"{prefix}{PATTERN_MARKER}{kind}{PATTERN_BEGIN}"
            f"{clauses}{free}{PATTERN_END}{suffix}"
        )
