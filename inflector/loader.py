"""Load raw inflection data into inflection data stores.

The raw data of a locale is a mapping of kinds to tokens::

    {
        "gender": {
            "m": "male",
            "f": "female",
            "masculine": "@m",
            "default": "m",
        },
        "@title": {...},
    }

Values starting with ``@`` point to other tokens (aliases),
``default`` points to the default token of a kind,
and kinds starting with ``@`` are strict kinds used by named patterns.
"""

import logging
from typing import Generator, Tuple

from schema import SchemaError

from .constants import (
    ALIAS_MARKER,
    DEFAULT_TOKEN,
    MAX_ALIAS_HOPS,
    NAMED_MARKER,
    RESERVED_CHARS,
    inflections_schema,
)
from .errors import (
    BadInflectionAlias,
    BadInflectionKind,
    BadInflectionToken,
    DuplicatedInflectionToken,
    InflectionConfigurationError,
)
from .inflection_data import InflectionData, StrictInflectionData


def is_valid_name(name) -> bool:
    """Whether a token or kind name is non-empty and free of operators."""
    return (
        isinstance(name, str)
        and bool(name)
        and not any(char in RESERVED_CHARS for char in name)
    )


def is_alias_pointer(description) -> bool:
    return isinstance(description, str) and description.startswith(ALIAS_MARKER)


def prepare_inflections(
        locale: str, tree: dict, idb: InflectionData,
        idb_strict: StrictInflectionData
) -> Generator:
    """Pair each kind subtree with the store that should hold its tokens.

    Yields
    ------
    tuple: (original kind name, kind, store, tokens)
    """
    for orig_kind, tokens in tree.items():
        if not tokens:
            continue
        subdb = idb
        kind = orig_kind
        if kind.startswith(NAMED_MARKER):
            kind = kind[len(NAMED_MARKER):]
            if not kind:
                logging.debug("Skipping an empty strict kind in %s", locale)
                continue
            subdb = idb_strict
        if not is_valid_name(kind):
            raise BadInflectionKind(locale, orig_kind)
        yield orig_kind, kind, subdb, tokens


def shorten_alias(
        locale: str, token: str, kind: str, tokens: dict
) -> str:
    """Follow a chain of alias pointers to the true token.

    Parameters
    ----------
    locale: str
    token: str
        Name of the alias to resolve
    kind: str
        Original name of the kind, used in error messages
    tokens: dict
        The raw tokens of the kind

    Raises
    ------
    BadInflectionToken
        If a pointer is empty
    BadInflectionAlias
        If a pointer leads to a missing token, or the chain
        is longer than MAX_ALIAS_HOPS (e.g. a cycle)
    """
    current = token
    for _ in range(MAX_ALIAS_HOPS):
        value = tokens.get(current)
        if not is_alias_pointer(value):
            if current not in tokens or current == DEFAULT_TOKEN:
                raise BadInflectionAlias(locale, token, kind, current)
            return current
        target = value[len(ALIAS_MARKER):]
        if not target:
            raise BadInflectionToken(locale, current, kind, value)
        if target not in tokens:
            raise BadInflectionAlias(locale, token, kind, target)
        current = target
    raise BadInflectionAlias(locale, token, kind, current)


def _check_duplicate(subdb, locale, token, kind, orig_kind):
    original_kind = subdb.get_kind(token, kind if subdb.strict else None)
    if original_kind is not None:
        raise DuplicatedInflectionToken(
            subdb.kind_name(original_kind), orig_kind, token)


def load_inflection_tokens(
        locale: str, tree: dict
) -> Tuple[InflectionData, StrictInflectionData]:
    """Create the inflection data stores of a locale from raw data.

    Parameters
    ----------
    locale: str
    tree: dict
        Raw inflection data, ``{kind: {token: description}}``

    Returns
    -------
    tuple[InflectionData, StrictInflectionData]
        Stores for the regular and the strict kinds

    Raises
    ------
    InflectionConfigurationError
        If the data is malformed. Nothing is returned in that case.
    """
    logging.debug("Loading inflections for locale %s", locale)
    try:
        tree = inflections_schema.validate(tree or {})
    except SchemaError as error:
        raise InflectionConfigurationError(
            f"inflection data for language {locale!r} is malformed: {error}"
        ) from error

    idb = InflectionData(locale)
    idb_strict = StrictInflectionData(locale)
    inflections = list(prepare_inflections(locale, tree, idb, idb_strict))

    # register true tokens
    for orig_kind, kind, subdb, tokens in inflections:
        for token, description in tokens.items():
            if not is_valid_name(token):
                raise BadInflectionToken(locale, token, orig_kind)
            if description is None or not isinstance(description, str):
                raise BadInflectionToken(locale, token, orig_kind, description)
            if token == DEFAULT_TOKEN or is_alias_pointer(description):
                continue
            _check_duplicate(subdb, locale, token, kind, orig_kind)
            subdb.add_token(token, kind, description)

    # resolve aliases
    for orig_kind, kind, subdb, tokens in inflections:
        for token, description in tokens.items():
            if token == DEFAULT_TOKEN or not is_alias_pointer(description):
                continue
            _check_duplicate(subdb, locale, token, kind, orig_kind)
            true_token = shorten_alias(locale, token, orig_kind, tokens)
            if not subdb.add_alias(token, true_token, kind):
                raise BadInflectionAlias(locale, token, orig_kind, true_token)

    # resolve default tokens
    for orig_kind, kind, subdb, tokens in inflections:
        if DEFAULT_TOKEN not in tokens:
            continue
        orig_target = tokens[DEFAULT_TOKEN]
        target = orig_target
        if target.startswith(ALIAS_MARKER):
            target = target[len(ALIAS_MARKER):]
        if not target:
            raise BadInflectionToken(locale, DEFAULT_TOKEN, orig_kind,
                                     orig_target)
        true_token = subdb.get_true_token(target, kind)
        if true_token is None:
            raise BadInflectionAlias(locale, DEFAULT_TOKEN, orig_kind,
                                     orig_target)
        subdb.set_default(kind, true_token)

    logging.info(
        "Loaded %s regular and %s strict inflection kinds for locale %s",
        len(idb.kinds()), len(idb_strict.kinds()), locale)
    return idb, idb_strict
